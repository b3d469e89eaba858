from __future__ import annotations

from fastapi import Request

from ..config import ApiSettings


def get_settings(request: Request) -> ApiSettings:
    return request.app.state.settings
