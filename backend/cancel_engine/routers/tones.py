"""
Cancellation Engine - Tones API Router
"""
from fastapi import APIRouter

from ..services.letter_template import get_available_tones

router = APIRouter(prefix="/tones", tags=["tones"])


@router.get("")
async def list_tones():
    """Get available letter tones."""
    return {"tones": get_available_tones()}
