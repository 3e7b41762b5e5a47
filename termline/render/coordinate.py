#!filepath: termline/render/coordinate.py
from __future__ import annotations

import math
from datetime import datetime

from termline.render.types import RenderWindow


def round_half_away(value: float) -> int:
    """
    四舍五入，.5 远离 0（不是 Python round() 的银行家舍入）
    """
    if value < 0:
        return -round_half_away(-value)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def to_column(t: datetime, window: RenderWindow, width: int) -> int:
    """
    时间 → 列号，结果落在 [0, width]。

    Precondition: window.end > window.start（由 Renderer 检查）
    """
    if t < window.start:
        return 0
    if t > window.end:
        return width
    ratio = (t - window.start) / window.span
    return round_half_away(ratio * width)


class CoordinateMapper:
    """绑定 window + width 的 to_column。"""

    def __init__(self, window: RenderWindow, width: int):
        self.window = window
        self.width = width

    def to_column(self, t: datetime) -> int:
        return to_column(t, self.window, self.width)
