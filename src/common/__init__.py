"""
どこで: `common` パッケージ。
何を: picker 層から使う軽量基盤（設定・環境変数・ロギング）。
なぜ: ドメイン層から切り離した共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
