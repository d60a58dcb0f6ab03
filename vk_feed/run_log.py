from __future__ import annotations

import json
import traceback
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, TextIO

_MAX_MESSAGE_CHARS = 2000
_MAX_TRACEBACK_CHARS = 12000


def _clip(text: str, limit: int) -> str:
    s = str(text or "")
    return s if len(s) <= limit else s[: limit - 1] + "…"


class RunLogger:
    """
    JSONL event log for a feed render.

    Every line holds `ts`, `level`, `event` and `session_id`, plus `post_id` when
    the event is about a single post and `data` for anything else. Events are also
    tallied so callers can report e.g. how many posts the filter dropped.
    """

    def __init__(self, path: str | Path, *, overwrite: bool = True) -> None:
        self.path = Path(path)
        self.session_id = uuid.uuid4().hex
        self.counts: Counter[str] = Counter()
        self._truncate_on_open = bool(overwrite)
        self._fp: TextIO | None = None
        self._lock = Lock()

    @classmethod
    def open(cls, path: str | Path, *, overwrite: bool = True) -> "RunLogger":
        logger = cls(path, overwrite=overwrite)
        logger._ensure_open()
        return logger

    def __enter__(self) -> "RunLogger":
        self._ensure_open()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            fp, self._fp = self._fp, None
        if fp is not None:
            fp.close()

    def info(self, event: str, *, post_id: str | None = None, **data: Any) -> None:
        self.log("INFO", event, post_id=post_id, **data)

    def warning(self, event: str, *, post_id: str | None = None, **data: Any) -> None:
        self.log("WARN", event, post_id=post_id, **data)

    def exception(self, event: str, *, exc: BaseException, **data: Any) -> None:
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        error = {
            "type": type(exc).__name__,
            "message": _clip(str(exc), _MAX_MESSAGE_CHARS),
            "traceback": _clip(tb, _MAX_TRACEBACK_CHARS),
        }
        self.log("ERROR", event, error=error, **data)

    def log(self, level: str, event: str, *, post_id: str | None = None, **data: Any) -> None:
        name = (event or "").strip() or "event"
        record: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": (level or "").strip().upper() or "INFO",
            "event": name,
            "session_id": self.session_id,
        }
        if post_id:
            record["post_id"] = post_id
        if data:
            record["data"] = data

        line = json.dumps(record, ensure_ascii=False, sort_keys=True, separators=(",", ":"), default=str)

        self._ensure_open()
        with self._lock:
            self.counts[name] += 1
            if self._fp is not None:
                self._fp.write(line + "\n")
                self._fp.flush()

    def _ensure_open(self) -> None:
        with self._lock:
            if self._fp is not None:
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = "w" if self._truncate_on_open else "a"
            self._fp = self.path.open(mode, encoding="utf-8", newline="\n")
            # A reopened logger keeps what the first session wrote.
            self._truncate_on_open = False
