#!filepath: termline/render/ticks.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Optional

from termline.render.types import RenderWindow
from termline.utils.datetime_utils import DateTimeUtils as dt


@dataclass(frozen=True)
class TickGenerator:
    """
    对齐到 tick_every 的刻度序列。

    - 第一个 tick = start 按绝对原点截断；若早于 start 则再加一个周期
    - 之后每次 + tick_every，直到超过 end（end 本身包含在内）
    - 可重复迭代，每次 __iter__ 都从头生成
    """
    window: RenderWindow
    tick_every: timedelta

    def __post_init__(self):
        if self.tick_every <= timedelta(0):
            raise ValueError(f"tick_every must be positive, got {self.tick_every}")

    def first_tick(self) -> Optional[datetime]:
        """
        第一个 >= start 的 tick；超出 datetime 表示范围时返回 None（没有 tick）。
        """
        first = dt.truncate(self.window.start, self.tick_every)
        if first < self.window.start:
            try:
                first += self.tick_every
            except OverflowError:
                return None
        return first

    def __iter__(self) -> Iterator[datetime]:
        t = self.first_tick()
        while t is not None and t <= self.window.end:
            yield t
            try:
                t += self.tick_every
            except OverflowError:
                # 超出 datetime.max 必然晚于 end
                return
