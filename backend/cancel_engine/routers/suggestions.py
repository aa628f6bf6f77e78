"""
Cancellation Engine - Suggestions API Router
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..config import Settings, get_app_settings
from ..services.suggestions import suggest_cancellation_reasons

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


class ReasonSuggestionsResponse(BaseModel):
    service_name: str
    reasons: List[str]


@router.get("/reasons", response_model=ReasonSuggestionsResponse)
async def get_reason_suggestions(
    service_name: str = Query(..., max_length=200),
    settings: Settings = Depends(get_app_settings),
):
    """
    Suggest cancellation reasons for a service.

    Clients debounce this while the user types; names shorter than
    three characters return an empty list.
    """
    reasons = await suggest_cancellation_reasons(service_name, settings)
    return ReasonSuggestionsResponse(service_name=service_name, reasons=reasons)
