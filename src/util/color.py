"""
どこで: `util.color`。
何を: 色のテキスト入力（Hex, 整数チャンネル）の解釈と書式化を一元化。
なぜ: ピッカーのテキスト欄と表示文字列で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations


def parse_hex_rgb(s: str) -> tuple[int, int, int]:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b)


def format_hex_rgb(rgb: tuple[int, int, int]) -> str:
    """RGB(0–255) を "#RRGGBB"（大文字）へ書式化する。"""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def parse_clamped_int(text: str, min_value: int, max_value: int) -> int:
    """整数テキストを解釈し、[min_value, max_value] へクランプする。

    - 空白は前後を除去してから解釈する。
    - 整数として解釈できない場合は ValueError（範囲外はエラーにせず丸める）。
    """
    t = text.strip()
    try:
        v = int(t)
    except ValueError as e:
        raise ValueError(f"invalid integer: '{text}'") from e
    return max(min_value, min(max_value, v))


__all__ = [
    "parse_hex_rgb",
    "format_hex_rgb",
    "parse_clamped_int",
]
