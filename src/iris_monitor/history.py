"""Persistent history storage for telemetry readings."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock

from pydantic import ValidationError

from .reading import Reading


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonlHistoryStore:
    def __init__(self, path: str) -> None:
        self._path = Path(path)
        self._lock = Lock()
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, reading: Reading) -> None:
        entry = {"ts": _now_iso(), **reading.to_payload()}
        line = json.dumps(entry, separators=(",", ":"), ensure_ascii=True)
        with self._lock:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")

    def clear(self) -> None:
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("", encoding="utf-8")

    def last_reading(self) -> Reading | None:
        if not self._path.exists():
            return None
        with self._lock:
            lines = self._path.read_text(encoding="utf-8", errors="replace").splitlines()
        for line in reversed(lines):
            if not line.strip():
                continue
            try:
                return Reading.from_payload(json.loads(line))
            except (json.JSONDecodeError, ValidationError):
                continue
        return None
