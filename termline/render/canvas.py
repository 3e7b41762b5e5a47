#!filepath: termline/render/canvas.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

from termline.render.coordinate import CoordinateMapper
from termline.utils.datetime_utils import DateTimeUtils as dt

AXIS_FILL = "-"
AXIS_MARK = "|"


class CanvasLinesBuilder:
    """
    Header 两行：tick label 行 + axis 行

    两行长度都是 left_margin + width + 1。
    """

    def __init__(
        self,
        mapper: CoordinateMapper,
        ticks: Iterable[datetime],
        time_format: str,
        left_margin: int = 0,
    ):
        self.mapper = mapper
        self.ticks = ticks
        self.time_format = time_format
        self.margin = " " * max(left_margin, 0)

    @property
    def width(self) -> int:
        return self.mapper.width

    # --------------------------------------------------
    def label_start(self, column: int, label_len: int) -> int:
        """
        label 以 column 为中心；越界时向内平移。
        比画布还宽的 label 从 0 开始写，超出部分丢弃。
        """
        pos = column - label_len // 2
        if pos < 0:
            pos = 0
        if pos + label_len > self.width + 1:
            pos = self.width + 1 - label_len
        return max(pos, 0)

    def tick_label_line(self) -> str:
        buf: List[str] = [" "] * (self.width + 1)

        # 按 tick 顺序写入，后写覆盖先写
        for t in self.ticks:
            label = dt.format(t, self.time_format)
            pos = self.label_start(self.mapper.to_column(t), len(label))
            for i, ch in enumerate(label[: len(buf) - pos]):
                buf[pos + i] = ch

        return self.margin + "".join(buf)

    def axis_line(self) -> str:
        buf: List[str] = [AXIS_FILL] * (self.width + 1)
        buf[0] = AXIS_MARK
        buf[self.width] = AXIS_MARK

        for t in self.ticks:
            buf[self.mapper.to_column(t)] = AXIS_MARK

        return self.margin + "".join(buf)

    def header(self) -> str:
        return self.tick_label_line() + "\n" + self.axis_line() + "\n\n"
