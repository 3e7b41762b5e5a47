#!filepath: termline/render/renderer.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from termline import logs
from termline.observability.instrumentation import Instrumentation, NoOpInstrumentation
from termline.render.canvas import CanvasLinesBuilder
from termline.render.coordinate import CoordinateMapper
from termline.render.packer import EventPacker
from termline.render.ticks import TickGenerator
from termline.render.types import Event, Options, RenderWindow


class TimelineRenderer:
    """
    TimelineRenderer = 编排层

    输出结构：
        <tick labels>
        <axis>
        <空行>
        <row 0>
        <row 1>
        ...

    - 纯计算，无 I/O
    - 不修改调用方的 events（Packer 在自己的副本上排序）
    - end <= start 时返回 ""，不是错误
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        inst: Instrumentation | None = None,
    ):
        self.options = (options or Options()).with_defaults()
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    def render(self, events: Iterable[Event], start: datetime, end: datetime) -> str:
        window = RenderWindow(start, end)
        if window.is_empty:
            logs.debug(f"[Renderer] empty window {start} -> {end}, nothing to render")
            return ""

        opt = self.options
        mapper = CoordinateMapper(window, opt.width)
        margin = " " * max(opt.left_margin, 0)

        with self.inst.timer("ticks"):
            ticks = list(TickGenerator(window, opt.tick_every))
            canvas = CanvasLinesBuilder(mapper, ticks, opt.time_format, opt.left_margin)
            tick_line = canvas.tick_label_line()

        with self.inst.timer("axis"):
            axis = canvas.axis_line()

        with self.inst.timer("pack"):
            rows = EventPacker(mapper, opt.time_format).pack(events)

        with self.inst.timer("compose"):
            body = "".join(row.render(margin) + "\n" for row in rows)

        logs.debug(
            f"[Renderer] width={opt.width} tick_every={opt.tick_every} rows={len(rows)}"
        )
        return tick_line + "\n" + axis + "\n\n" + body


def render_timeline(
    events: Iterable[Event],
    start: datetime,
    end: datetime,
    options: Optional[Options] = None,
    inst: Instrumentation | None = None,
) -> str:
    return TimelineRenderer(options, inst).render(events, start, end)
