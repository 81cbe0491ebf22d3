"""
どこで: `common.settings`
何を: ピッカーエンジンの探索パラメータ等を環境変数から型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # 色相/彩度ホイール（極座標）
    POLAR_STEP: float = 0.05
    POLAR_SEARCH_STEP: float = 0.01
    POLAR_MAX_ITER: int = 500

    # 明度スライダー（線形）
    LINEAR_STEP: float = 0.001
    LINEAR_MAX_STEPS: int = 1000

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 歩幅は正の有限値のみ受理し、それ以外は既定値へフォールバック。
    - 反復上限は 1 未満を 1 に丸める（探索は必ず 1 回は評価する）。
    """
    _settings.POLAR_STEP = env_float("PICKER_POLAR_STEP", 0.05, min_value=1e-9)
    _settings.POLAR_SEARCH_STEP = env_float("PICKER_POLAR_SEARCH_STEP", 0.01, min_value=1e-9)
    _settings.POLAR_MAX_ITER = env_int("PICKER_POLAR_MAX_ITER", 500, min_value=1) or 1

    _settings.LINEAR_STEP = env_float("PICKER_LINEAR_STEP", 0.001, min_value=1e-9)
    _settings.LINEAR_MAX_STEPS = env_int("PICKER_LINEAR_MAX_STEPS", 1000, min_value=1) or 1

    _settings.LOG_LEVEL = env_str("PICKER_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
