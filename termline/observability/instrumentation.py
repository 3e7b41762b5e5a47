#!filepath: termline/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, List

@dataclass
class Instrumentation:
    """
    渲染阶段计时（可选横切关注点）

    - timer(name) 记录一个阶段耗时到 timings
    - 同名阶段多次进入时累加
    - report_lines() 给 CLI 写 stderr
    """

    enabled: bool = True
    timings: Dict[str, float] = field(default_factory=OrderedDict)

    @contextmanager
    def timer(self, name: str):
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.timings[name] = self.timings.get(name, 0.0) + elapsed

    @property
    def total(self) -> float:
        return sum(self.timings.values())

    def report_lines(self, title: str = "render") -> List[str]:
        lines = [f"[Timing] ===== {title} ====="]
        for name, sec in self.timings.items():
            lines.append(f"[Timing] {str(name):<12} {sec * 1000:>9.3f}ms")
        lines.append(f"[Timing] {'total':<12} {self.total * 1000:>9.3f}ms")
        return lines


class NoOpInstrumentation:
    """未传入 Instrumentation 时使用。"""

    def timer(self, name: str):
        return _NoOpTimer()


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
