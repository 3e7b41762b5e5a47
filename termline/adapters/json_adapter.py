#!filepath: termline/adapters/json_adapter.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError, field_validator

from termline import logs
from termline.render.types import Event, Options
from termline.utils.datetime_utils import DateTimeUtils as dt
from termline.utils.errors import DecodeError


# ============================================================
# wire schema（只负责结构校验，不含业务默认值）
# ============================================================
def _parse_ts(v):
    if isinstance(v, datetime):
        return v
    return dt.parse_rfc3339(v)


class EventPayload(BaseModel):
    label: StrictStr = ""
    at: datetime
    depth: StrictInt = 0

    @field_validator("at", mode="before")
    @classmethod
    def check_at(cls, v):
        return _parse_ts(v)


class OptionsPayload(BaseModel):
    width: StrictInt = 0
    left_margin: StrictInt = 0
    tick_every: StrictStr = ""
    time_format: StrictStr = ""


class RawPayload(BaseModel):
    start: datetime
    end: datetime
    options: OptionsPayload = OptionsPayload()
    events: List[EventPayload] = []

    @field_validator("start", "end", mode="before")
    @classmethod
    def check_ts(cls, v):
        return _parse_ts(v)


# ============================================================
# 解码结果
# ============================================================
@dataclass
class TimelinePayload:
    start: datetime
    end: datetime
    options: Options = field(default_factory=Options)
    events: List[Event] = field(default_factory=list)

    def as_tuple(self) -> Tuple[List[Event], datetime, datetime, Options]:
        return self.events, self.start, self.end, self.options


def _field_path(loc) -> str:
    return ".".join(str(p) for p in loc) or "payload"


def parse_json(data: str | bytes) -> TimelinePayload:
    """
    解码完整 timeline payload：

        {
          "start":   "2025-06-10T08:00:00Z",
          "end":     "2025-06-10T19:00:00Z",
          "options": { "width": 80, "left_margin": 2, "tick_every": "1h", "time_format": "15:04" },
          "events":  [
            { "label": "Standup", "at": "2025-06-10T09:00:00Z", "depth": 0 }
          ]
        }

    - 时间戳必须是 RFC3339
    - tick_every 为空表示使用默认值，否则按 duration 字符串解析（"1h" / "30m"）
    - time_format 不含 '%' 时按 reference layout 转换（"15:04" → "%H:%M"）

    Raises
    ------
    DecodeError
        field 为出错字段的点分路径
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("payload", f"not valid UTF-8: {e.reason} at byte {e.start}") from e

    try:
        raw = RawPayload.model_validate_json(data)
    except ValidationError as e:
        err = e.errors()[0]
        raise DecodeError(_field_path(err["loc"]), err["msg"]) from e

    tick_every = None
    if raw.options.tick_every:
        try:
            tick_every = dt.parse_duration(raw.options.tick_every)
        except ValueError as e:
            raise DecodeError("tick_every", str(e)) from e

    options = Options(
        width=raw.options.width,
        left_margin=raw.options.left_margin,
        tick_every=tick_every,
        time_format=dt.layout_to_strftime(raw.options.time_format),
    )
    events = [Event(label=e.label, at=e.at, depth=e.depth) for e in raw.events]

    logs.debug(f"[Adapter] decoded {len(events)} events, window {raw.start} -> {raw.end}")
    return TimelinePayload(start=raw.start, end=raw.end, options=options, events=events)
