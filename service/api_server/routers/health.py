from __future__ import annotations

from fastapi import APIRouter, Depends

from tripleForge import __version__
from tripleForge.kg.formats import format_names

from ..config import ApiSettings
from .dependencies import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service health check")
def health(settings: ApiSettings = Depends(get_settings)) -> dict[str, object]:
    return {
        "status": "ok",
        "version": __version__,
        "formats": format_names(),
        "default_format": settings.default_format,
    }
