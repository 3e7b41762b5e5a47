#!filepath: termline/render/packer.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from termline import logs
from termline.render.coordinate import CoordinateMapper
from termline.render.types import Event
from termline.utils.datetime_utils import DateTimeUtils as dt

# 相邻 marker 之间至少留 1 列空白
MARKER_GAP = 1


def marker_text(event: Event, time_format: str) -> str:
    return f"^ {event.label} ({dt.format(event.at, time_format)})"


def sort_events(events: Iterable[Event]) -> List[Event]:
    """
    (depth, at) 升序，返回新 list，不改动调用方的序列。
    sorted() 是稳定排序：键相同的事件保持输入顺序。
    """
    return sorted(events, key=lambda e: (e.depth, e.at))


@dataclass(slots=True)
class Marker:
    event: Event
    column: int
    text: str

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        """最后一个字符之后的列（不含）"""
        return self.column + self.width

    def collides(self, other: "Marker") -> bool:
        return (
            self.column < other.end + MARKER_GAP
            and other.column < self.end + MARKER_GAP
        )


@dataclass
class PackedRow:
    markers: List[Marker] = field(default_factory=list)

    def fits(self, marker: Marker) -> bool:
        return not any(m.collides(marker) for m in self.markers)

    def add(self, marker: Marker) -> None:
        self.markers.append(marker)

    def render(self, margin: str = "") -> str:
        """
        按列号从左到右输出；marker 之间用空格补齐，行尾不补空格。
        """
        out = [margin]
        pos = 0
        for m in sorted(self.markers, key=lambda m: m.column):
            if m.column > pos:
                out.append(" " * (m.column - pos))
            out.append(m.text)
            pos = m.end
        return "".join(out)

    def __len__(self) -> int:
        return len(self.markers)


class EventPacker:
    """
    贪心 first-fit 行分配：

    1. 事件按 (depth, at) 排序
    2. 依次放入第一个没有冲突的已有行
    3. 所有行都冲突则新开一行

    不是最优行数，只保证同一行内 marker 互不重叠（含 1 列间隔）。
    """

    def __init__(self, mapper: CoordinateMapper, time_format: str):
        self.mapper = mapper
        self.time_format = time_format

    def make_marker(self, event: Event) -> Marker:
        return Marker(
            event=event,
            column=self.mapper.to_column(event.at),
            text=marker_text(event, self.time_format),
        )

    def place(self, rows: List[PackedRow], marker: Marker) -> int:
        """把 marker 放入 rows，返回行号。"""
        for i, row in enumerate(rows):
            if row.fits(marker):
                row.add(marker)
                return i

        rows.append(PackedRow([marker]))
        return len(rows) - 1

    def pack(self, events: Iterable[Event]) -> List[PackedRow]:
        rows: List[PackedRow] = []
        ordered = sort_events(events)

        for event in ordered:
            self.place(rows, self.make_marker(event))

        logs.debug(f"[Packer] {len(ordered)} events -> {len(rows)} rows")
        return rows
