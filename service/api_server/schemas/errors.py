from __future__ import annotations

"""RFC 7807 problem documents returned by every error path."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    type: str
    title: str
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = None
    line: Optional[int] = Field(None, description="Input line a strict decoder rejected")
    errors: Optional[List[Dict[str, Any]]] = Field(None, description="Request validation failures")
