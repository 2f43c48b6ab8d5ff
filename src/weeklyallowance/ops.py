"""Operational utilities for weeklyallowance."""

from __future__ import annotations

import json
from pathlib import Path

from .clock import TimeProvider, system_now


class StructuredLogger:
    """Write JSON lines log entries describing ledger events."""

    def __init__(self, *, path: Path | None = None, time_provider: TimeProvider = system_now) -> None:
        self.path = path
        self._now = time_provider
        self._entries: list[dict] = []

    def log(self, event_type: str, **fields: object) -> dict:
        entry = {"timestamp": self._now().isoformat(), "event": event_type, **fields}
        self._entries.append(entry)
        if self.path:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(entry) + "\n")
        return entry

    def tail(self, limit: int = 50) -> tuple[dict, ...]:
        if limit <= 0:
            return tuple()
        return tuple(self._entries[-limit:])

    def events(self, event_type: str) -> tuple[dict, ...]:
        return tuple(entry for entry in self._entries if entry["event"] == event_type)


__all__ = ["StructuredLogger"]
