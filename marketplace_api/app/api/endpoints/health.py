"""
Liveness endpoint.
"""

from typing import Dict

from fastapi import APIRouter

from marketplace_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok", "version": settings.api_version}
