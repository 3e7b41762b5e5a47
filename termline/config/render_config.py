#!filepath: termline/config/render_config.py
from __future__ import annotations

from pydantic import BaseModel, field_validator

from termline.render.types import Options
from termline.utils.datetime_utils import DateTimeUtils


class RenderConfig(BaseModel):
    """
    渲染默认值（payload / CLI 未给出时使用）

    tick_every 使用 duration 字符串（"1h" / "30m"），
    time_format 可以是 strftime 或 reference layout（"15:04"）。
    """

    width: int = 100
    left_margin: int = 0
    tick_every: str = "1h"
    time_format: str = "%H:%M"

    @field_validator("tick_every")
    @classmethod
    def check_tick_every(cls, v: str) -> str:
        if v:
            DateTimeUtils.parse_duration(v)
        return v

    def to_options(self) -> Options:
        return Options(
            width=self.width,
            left_margin=self.left_margin,
            tick_every=DateTimeUtils.parse_duration(self.tick_every) if self.tick_every else None,
            time_format=DateTimeUtils.layout_to_strftime(self.time_format),
        )
