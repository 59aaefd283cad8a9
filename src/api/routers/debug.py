"""
API Router for Diagnostics

Contains:
    - GET /debug/options - current Option Cache contents (no refresh, no network)
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_option_cache
from src.domain.applications.services.option_cache import OptionCache

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/options", summary="Dump the dropdown option cache")
async def debug_options(
    cache: OptionCache = Depends(get_option_cache),
) -> dict[str, list[dict[str, str]]]:
    """Field id -> [{"id", "name"}] as loaded by the last refresh."""
    return cache.snapshot()
