"""Logger - leveled lines on stderr.

Format: [timestamp] [L] [tag] message {json extras}
"""

import json
import sys
from datetime import datetime, timezone

LEVELS = {"debug": 0, "info": 1, "warn": 2, "error": 3}


class Logger:
    """Minimal leveled logger. Never writes to stdout."""

    def __init__(self, level: str = "info", stream=None):
        self._level = level
        self._stream = stream

    @property
    def level(self) -> str:
        return self._level

    def set_level(self, level: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._level = level

    def _should_log(self, level: str) -> bool:
        return LEVELS.get(level, 1) >= LEVELS.get(self._level, 1)

    def log(self, level: str, tag: str, msg: str, **extra) -> None:
        if not self._should_log(level):
            return
        ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        parts = [f"[{ts}]", f"[{level[0].upper()}]", f"[{tag}]", msg]
        if extra:
            parts.append(json.dumps(extra, default=str))
        stream = self._stream or sys.stderr
        print(" ".join(parts), file=stream, flush=True)

    def debug(self, tag: str, msg: str, **extra) -> None:
        self.log("debug", tag, msg, **extra)

    def info(self, tag: str, msg: str, **extra) -> None:
        self.log("info", tag, msg, **extra)

    def warn(self, tag: str, msg: str, **extra) -> None:
        self.log("warn", tag, msg, **extra)

    def error(self, tag: str, msg: str, **extra) -> None:
        self.log("error", tag, msg, **extra)


logger = Logger()
