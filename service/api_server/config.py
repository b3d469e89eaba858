from __future__ import annotations

"""Configuration helpers for the HTTP facade."""

from dataclasses import dataclass
import os
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ApiSettings:
    """Settings loaded from environment variables with sane defaults."""

    host: str = "127.0.0.1"
    port: int = 9001
    request_body_limit: int = 1024 * 1024
    max_inference_rounds: Optional[int] = 100
    strict_decoding: bool = False
    default_format: str = "turtle"

    @classmethod
    def from_env(cls) -> "ApiSettings":
        host = os.getenv("TRIPLEFORGE_API_HOST", "127.0.0.1")
        port = int(os.getenv("TRIPLEFORGE_API_PORT", "9001"))
        request_body_limit = int(os.getenv("TRIPLEFORGE_API_BODY_LIMIT", str(1024 * 1024)))
        rounds = int(os.getenv("TRIPLEFORGE_API_MAX_ROUNDS", "100"))
        return cls(
            host=host,
            port=port,
            request_body_limit=request_body_limit,
            max_inference_rounds=rounds if rounds > 0 else None,
            strict_decoding=_env_bool("TRIPLEFORGE_API_STRICT_DECODING", False),
            default_format=os.getenv("TRIPLEFORGE_API_DEFAULT_FORMAT", "turtle"),
        )
