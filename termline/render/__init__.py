from .types import Event, Options, RenderWindow
from .coordinate import CoordinateMapper, to_column
from .ticks import TickGenerator
from .canvas import CanvasLinesBuilder
from .packer import EventPacker, Marker, PackedRow
from .renderer import TimelineRenderer, render_timeline

__all__ = [
    "Event", "Options", "RenderWindow",
    "CoordinateMapper", "to_column",
    "TickGenerator",
    "CanvasLinesBuilder",
    "EventPacker", "Marker", "PackedRow",
    "TimelineRenderer", "render_timeline",
]
