"""JSON-lines session logger for the CLI.

One line per event (``start``, ``info``, ``end``), appended to a file whose
parent directories are created on demand. Only counts, sizes and exception
type names are recorded; resume content never reaches the log.
"""

from __future__ import annotations

import json
import os
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class AppLogger:
    def __init__(self, path: Optional[str]) -> None:
        self.path = path
        d = os.path.dirname(path) if path else ""
        if d:
            os.makedirs(d, exist_ok=True)

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def _write(self, event: str, session_id: str, **fields: Any) -> None:
        if not self.path:
            return
        rec: Dict[str, Any] = {"ts": time.time(), "event": event, "session_id": session_id}
        rec.update(fields)
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(json.dumps(rec, ensure_ascii=False) + "\n")
        except OSError:  # noqa: S110 - logging must never crash the app
            pass

    def start(self, cmd: str) -> str:
        sid = str(uuid.uuid4())
        self._write("start", sid, cmd=cmd, pid=os.getpid())
        return sid

    def info(self, session_id: str, **data: Any) -> None:
        self._write("info", session_id, data=data)

    def end(
        self,
        session_id: str,
        started: float,
        error: Optional[BaseException] = None,
    ) -> None:
        fields: Dict[str, Any] = {
            "status": "error" if error else "ok",
            "duration_ms": int((time.monotonic() - started) * 1000),
        }
        if error is not None:
            # Type names only: messages may echo user input.
            fields["error_type"] = type(error).__name__
            if error.__cause__ is not None:
                fields["cause_type"] = type(error.__cause__).__name__
        self._write("end", session_id, **fields)

    @contextmanager
    def session(self, cmd: str) -> Iterator[str]:
        """Log start/end around a command; re-raises whatever the body raises."""
        sid = self.start(cmd)
        started = time.monotonic()
        try:
            yield sid
        except BaseException as exc:
            self.end(sid, started, error=exc)
            raise
        self.end(sid, started)
