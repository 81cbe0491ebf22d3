"""共通フィクスチャ。

- 乱数シード固定
- 設定（環境変数）のテスト後リセット
- よく使う色の試料
"""

from __future__ import annotations

import os
from typing import Iterator

import numpy as np
import pytest

from common import settings
from picker import Color


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`PICKER_*` 環境変数を除去した既定設定でテストを実行する。"""
    for name in list(os.environ):
        if name.startswith("PICKER_"):
            monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def dark_teal() -> Color:
    """印刷セーフではない代表色（CMYK 往復で G/B がずれる）。"""
    return Color(10, 20, 30)
