from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    content: str = Field(..., description="Encoded graph")
    source_format: str = Field("turtle", description="Format of ``content``")
    target_format: Optional[str] = Field(None, description="Format of the response content")
    strict: bool = Field(False, description="Reject malformed statements instead of skipping them")


class InferRequest(BaseModel):
    content: str
    format: str = "turtle"
    target_format: Optional[str] = None
    max_rounds: Optional[int] = Field(None, ge=1)


class LowerRequest(BaseModel):
    definitions: Dict[str, Any] = Field(..., description="Definition document, as the YAML loader reads it")
    base_uri: Optional[str] = None
    prefix: Optional[str] = None
    format: Optional[str] = None
    infer: bool = False
    strict_characteristics: bool = False


class GraphResponse(BaseModel):
    format: str
    content: str
    statements: int


class InferResponse(GraphResponse):
    added: int
    rounds: int
