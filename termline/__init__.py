#!filepath: termline/__init__.py

from .utils.logger import Logging, logs
from .utils.datetime_utils import DateTimeUtils
from .utils.errors import UserInputError, DecodeError

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

from .render import Event, Options, RenderWindow, TimelineRenderer, render_timeline  # noqa: E402
from .adapters.json_adapter import TimelinePayload, parse_json  # noqa: E402

__all__ = [
    "logs", "Logging",
    "datetime_utils",
    "UserInputError", "DecodeError",
    "Event", "Options", "RenderWindow",
    "TimelineRenderer", "render_timeline",
    "TimelinePayload", "parse_json",
    "__version__",
]
