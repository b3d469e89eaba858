from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException

from tripleForge.kg.formats import get_format, parse, serialize
from tripleForge.kg.graph import Graph
from tripleForge.kg.inference import run_inference
from tripleForge.ontology import LoweringOptions, definitions_from_mapping, lower_document

from ..config import ApiSettings
from ..schemas import (
    ConvertRequest,
    GraphResponse,
    InferRequest,
    InferResponse,
    LowerRequest,
    ProblemDetails,
)
from .dependencies import get_settings

router = APIRouter(prefix="/v1", tags=["graph"])

_ERRORS = {400: {"model": ProblemDetails}, 413: {"model": ProblemDetails}, 422: {"model": ProblemDetails}}


def _check_size(content: str, settings: ApiSettings) -> None:
    if len(content.encode("utf-8")) > settings.request_body_limit:
        raise HTTPException(status_code=413, detail="Graph content exceeds the request size limit")


def _response(graph: Graph, fmt: str) -> GraphResponse:
    name = get_format(fmt).name
    return GraphResponse(format=name, content=serialize(graph, name), statements=len(graph))


@router.post("/convert", response_model=GraphResponse, responses=_ERRORS)
def convert(payload: ConvertRequest, settings: ApiSettings = Depends(get_settings)) -> GraphResponse:
    _check_size(payload.content, settings)
    graph = parse(payload.content, payload.source_format, strict=payload.strict or settings.strict_decoding)
    return _response(graph, payload.target_format or settings.default_format)


@router.post("/infer", response_model=InferResponse, responses=_ERRORS)
def infer(payload: InferRequest, settings: ApiSettings = Depends(get_settings)) -> InferResponse:
    _check_size(payload.content, settings)
    graph = parse(payload.content, payload.format, strict=settings.strict_decoding)
    result = run_inference(graph, max_rounds=payload.max_rounds or settings.max_inference_rounds)
    body = _response(result.graph, payload.target_format or payload.format)
    return InferResponse(**body.model_dump(), added=result.added, rounds=result.rounds)


@router.post("/lower", response_model=GraphResponse, responses=_ERRORS)
def lower(payload: LowerRequest, settings: ApiSettings = Depends(get_settings)) -> GraphResponse:
    document = definitions_from_mapping(payload.definitions)
    if payload.base_uri or payload.prefix:
        document = replace(
            document,
            base_uri=payload.base_uri or document.base_uri,
            prefix=payload.prefix or document.prefix,
        )
    options = LoweringOptions(strict_characteristics=payload.strict_characteristics)
    graph = lower_document(document, options)
    if payload.infer:
        graph = run_inference(graph, max_rounds=settings.max_inference_rounds).graph
    return _response(graph, payload.format or settings.default_format)
