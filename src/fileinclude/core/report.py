from __future__ import annotations

"""
Run summary for a single include run.

Counters are purely additive. Resolution is sequential, so no locking is
done here; a parallel caller must serialize `record_*` calls.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List

from fileinclude.constants import SUMMARY_TEMPLATE


@dataclass
class RunSummary:
    written: int = 0
    errors: int = 0

    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "discovery": 0.0,
            "scan": 0.0,
            "resolve": 0.0,
            "write": 0.0,
        }
    )

    outputs: List[str] = field(default_factory=list)
    error_messages: List[str] = field(default_factory=list)

    def record_written(self, path: str) -> None:
        self.written += 1
        self.outputs.append(path)

    def record_error(self, message: str) -> None:
        self.errors += 1
        self.error_messages.append(message)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary_line(self) -> str:
        return SUMMARY_TEMPLATE.format(written=self.written, errors=self.errors)

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "written": self.written,
                "errors": self.errors,
                "duration_s": self.duration_s,
                "time_by_stage": self.time_by_stage,
                "outputs": self.outputs,
                "error_messages": self.error_messages,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, summary: RunSummary, stage: str):
        self._summary = summary
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._summary.add_time(self._stage, time.perf_counter() - self._t0)
        return False
