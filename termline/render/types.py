#!filepath: termline/render/types.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

DEFAULT_WIDTH = 100
DEFAULT_TICK_EVERY = timedelta(hours=1)
DEFAULT_TIME_FORMAT = "%H:%M"


@dataclass(frozen=True, slots=True)
class Event:
    """
    单个时间点事件

    depth 只参与排序（depth 小的先放置），不保证落在第 depth 行。
    """
    label: str
    at: datetime
    depth: int = 0


@dataclass(frozen=True, slots=True)
class RenderWindow:
    start: datetime
    end: datetime

    @property
    def span(self) -> timedelta:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.span <= timedelta(0)


@dataclass(frozen=True, slots=True)
class Options:
    """
    渲染参数；0 / None / "" 表示使用默认值（见 with_defaults）。
    left_margin = 0 本身就是合法值，不做替换。
    """
    width: int = 0
    left_margin: int = 0
    tick_every: Optional[timedelta] = None
    time_format: str = ""

    def with_defaults(self) -> "Options":
        return replace(
            self,
            width=self.width if self.width > 0 else DEFAULT_WIDTH,
            tick_every=(
                self.tick_every
                if self.tick_every is not None and self.tick_every > timedelta(0)
                else DEFAULT_TICK_EVERY
            ),
            time_format=self.time_format or DEFAULT_TIME_FORMAT,
        )

    def merged_over(self, fallback: "Options") -> "Options":
        """
        逐字段合并：self 中未设置（0 / None / ""）的字段取 fallback 的值。
        width 与 tick_every 非正数同样视为未设置。
        """
        return Options(
            width=self.width if self.width > 0 else fallback.width,
            left_margin=self.left_margin or fallback.left_margin,
            tick_every=(
                self.tick_every
                if self.tick_every is not None and self.tick_every > timedelta(0)
                else fallback.tick_every
            ),
            time_format=self.time_format or fallback.time_format,
        )
