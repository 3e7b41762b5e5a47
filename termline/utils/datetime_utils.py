#!filepath: termline/utils/datetime_utils.py
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import List, Tuple

# 绝对参考原点：0001-01-01T00:00:00Z（tick 对齐以此为基准，而不是 window.start）
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"([Zz]|[+-]\d{2}:\d{2})$"
)

_DURATION_PART = re.compile(r"(\d*\.?\d*)(ns|us|µs|μs|ms|s|m|h)")

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5
    "μs": 1_000,  # U+03BC
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# reference-time layout token → strftime directive（长 token 优先）
_LAYOUT_TOKENS: List[Tuple[str, str]] = [
    ("January", "%B"),
    ("Monday", "%A"),
    (".000000", ".%f"),
    ("-0700", "%z"),
    ("2006", "%Y"),
    ("Jan", "%b"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("PM", "%p"),
    ("06", "%y"),
    ("01", "%m"),
    ("02", "%d"),
    ("15", "%H"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
]


class DateTimeUtils:
    ZERO_TIME = ZERO_TIME

    # ================================================================
    # RFC3339 → aware datetime
    # ================================================================
    @classmethod
    def parse_rfc3339(cls, value: str) -> datetime:
        """
        严格 RFC3339：
            "2025-06-10T08:00:00Z"
            "2025-06-10T08:00:00.123456789+08:00"

        小数秒超过 6 位时截断到微秒。
        """
        if not isinstance(value, str):
            raise ValueError(f"expected RFC3339 string, got {type(value).__name__}")

        m = _RFC3339.match(value.strip())
        if m is None:
            raise ValueError(f"not an RFC3339 timestamp: {value!r}")

        year, month, day, hh, mm, ss, frac, offset = m.groups()
        micros = int((frac or "0")[:6].ljust(6, "0"))

        if offset in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            oh, om = int(offset[1:3]), int(offset[4:6])
            if oh > 23 or om > 59:
                raise ValueError(f"invalid UTC offset: {offset}")
            tz = timezone(sign * timedelta(hours=oh, minutes=om))

        return datetime(
            int(year), int(month), int(day),
            int(hh), int(mm), int(ss), micros,
            tzinfo=tz,
        )

    # ================================================================
    # duration string → timedelta（"1h", "30m", "1h30m", "1.5h", "250ms"）
    # ================================================================
    @classmethod
    def parse_duration(cls, value: str) -> timedelta:
        s = value.strip() if isinstance(value, str) else value
        if not s:
            raise ValueError("empty duration")

        sign = 1
        if s[0] in "+-":
            sign = -1 if s[0] == "-" else 1
            s = s[1:]

        if s == "0":
            return timedelta(0)
        if not s:
            raise ValueError(f"invalid duration: {value!r}")

        total_ns = Decimal(0)
        pos = 0
        while pos < len(s):
            m = _DURATION_PART.match(s, pos)
            if m is None or m.group(1) in ("", "."):
                raise ValueError(f"invalid duration: {value!r}")
            try:
                number = Decimal(m.group(1))
            except InvalidOperation:
                raise ValueError(f"invalid duration: {value!r}") from None
            total_ns += number * _UNIT_NS[m.group(2)]
            pos = m.end()

        # timedelta 分辨率为微秒，ns 余数直接截断
        micros = int(total_ns) // 1_000
        try:
            return sign * timedelta(microseconds=micros)
        except OverflowError:
            raise ValueError(f"invalid duration: {value!r}") from None

    # ================================================================
    # 绝对截断：t 向下取整到 every 的整数倍（以 ZERO_TIME 为原点）
    # ================================================================
    @classmethod
    def truncate(cls, t: datetime, every: timedelta) -> datetime:
        if every <= timedelta(0):
            return t
        epoch = cls.ZERO_TIME if t.tzinfo is not None else cls.ZERO_TIME.replace(tzinfo=None)
        return t - (t - epoch) % every

    # ================================================================
    # 格式化
    # ================================================================
    @classmethod
    def layout_to_strftime(cls, layout: str) -> str:
        """
        "15:04" → "%H:%M"

        已包含 '%' 的字符串视为 strftime 格式，原样返回。
        只识别补零形式的 token（"1"、"_2" 之类按字面量处理）。
        """
        if not layout or "%" in layout:
            return layout

        out: List[str] = []
        i = 0
        while i < len(layout):
            for token, directive in _LAYOUT_TOKENS:
                if layout.startswith(token, i):
                    out.append(directive)
                    i += len(token)
                    break
            else:
                out.append(layout[i])
                i += 1
        return "".join(out)

    @classmethod
    def format(cls, t: datetime, fmt: str) -> str:
        return t.strftime(fmt)
