"""
Bounded in-memory buffer of designer status events.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Deque, List, Tuple

logger = logging.getLogger("radbuilder.status")


class LogBuffer:
    def __init__(self, max_events: int = 300) -> None:
        self.max_events = max_events
        self._events: Deque[dict] = deque(maxlen=max_events)
        self._lock = threading.Lock()
        self._seq = 0

    def append(self, event: str, level: str = "info", **details) -> dict:
        with self._lock:
            self._seq += 1
            payload = {
                "id": self._seq,
                "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
                "level": level,
                "event": event,
                "details": details or {},
            }
            self._events.append(payload)
        return payload

    def history(self, limit: int | None = None) -> List[dict]:
        with self._lock:
            events = list(self._events)
        if limit is None or limit <= 0:
            return events
        return events[-limit:]

    def latest(self) -> dict | None:
        with self._lock:
            return self._events[-1] if self._events else None

    def snapshot_after(self, last_id: int) -> Tuple[List[dict], int]:
        with self._lock:
            events = [e for e in self._events if e.get("id", 0) > last_id]
            latest = self._seq
        return events, latest


def log_event(buffer: LogBuffer, event: str, level: str = "info", **details) -> dict:
    """Record a status event and forward it to the ``radbuilder.status`` logger."""
    logger.log(logging.WARNING if level in {"warn", "warning", "error"} else logging.INFO, "%s %s", event, details)
    try:
        return buffer.append(event, level=level, **details)
    except (TypeError, ValueError):
        return {
            "id": -1,
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "level": level,
            "event": event,
            "details": details,
        }
