"""
Liveness endpoint.

Answers without touching the store so that process supervisors can
tell a running server from a dead one.
"""

from typing import Dict

from fastapi import APIRouter

from user_crud_api.app.core.config import settings

router = APIRouter()


@router.get("")
def health() -> Dict[str, str]:
    return {"status": "ok", "version": settings.api_version}
