from __future__ import annotations

"""Structured JSON events for the CLI and the HTTP facade.

Every event is a single JSON line carrying ``ts``, ``level``, ``service`` and
``event``. ``route``, ``status``, ``latency_ms`` and ``format`` are lifted to
the top level; any other field lands under ``details`` after redaction.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Mapping

PROMOTED_KEYS = ("route", "status", "latency_ms", "format")

_REDACTIONS = (
    re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    re.compile(r"bearer\s+[A-Za-z0-9\-_=.]{8,}", re.IGNORECASE),
)
_URL_QUERY_RE = re.compile(r"(https?://[^\s?]+)\?\S+")


def redact(text: str) -> str:
    """Mask e-mail addresses and bearer tokens; drop URL query strings."""

    for pattern in _REDACTIONS:
        text = pattern.sub("[redacted]", text)
    return _URL_QUERY_RE.sub(r"\1", text)


def _clean(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _clean(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_clean(item) for item in value]
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return redact(str(value))


def _bounded(details: Any, limit: int) -> Any:
    if limit <= 0:
        return details
    encoded = json.dumps(details, ensure_ascii=False, sort_keys=True, separators=(",", ":")).encode("utf-8")
    if len(encoded) <= limit:
        return details
    return {"note": "truncated", "preview": encoded[:limit].decode("utf-8", errors="ignore")}


class JsonLogger:
    """Write one JSON object per event through a dedicated ``logging`` logger."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        max_details_bytes: int = 4096,
        level: int = logging.INFO,
    ) -> None:
        self.service = service
        self._logger = logger or logging.getLogger(f"tripleforge.{service}.json")
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
        self._logger.propagate = False
        self._logger.setLevel(level)
        self._max_details_bytes = max(0, int(max_details_bytes))

    def info(self, event: str, **fields: Any) -> dict[str, Any]:
        return self.emit("INFO", event, **fields)

    def warning(self, event: str, **fields: Any) -> dict[str, Any]:
        return self.emit("WARNING", event, **fields)

    def error(self, event: str, **fields: Any) -> dict[str, Any]:
        return self.emit("ERROR", event, **fields)

    def emit(self, level: str, event: str, **fields: Any) -> dict[str, Any]:
        """Log ``event`` and return the entry that was written."""

        level = level.upper()
        levelno = logging.getLevelName(level)
        if not isinstance(levelno, int):
            level, levelno = "INFO", logging.INFO
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self.service,
            "event": event,
        }
        for key in PROMOTED_KEYS:
            value = fields.pop(key, None)
            if value is not None:
                entry[key] = value
        details = dict(fields.pop("details", None) or {})
        details.update(fields)
        if details:
            entry["details"] = _bounded(_clean(details), self._max_details_bytes)
        self._logger.log(levelno, json.dumps(entry, ensure_ascii=False, sort_keys=True, separators=(",", ":")))
        return entry


__all__ = ["PROMOTED_KEYS", "JsonLogger", "redact"]
