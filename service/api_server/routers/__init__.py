from __future__ import annotations

from fastapi import APIRouter

from . import graph, health


def build_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router)
    router.include_router(graph.router)
    return router
