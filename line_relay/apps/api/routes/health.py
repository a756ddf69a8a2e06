"""Liveness route for external supervisors."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Fixed success response; also used to wake idle free-tier hosts."""
    return "OK"


__all__ = ["router"]
