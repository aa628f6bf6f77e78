"""
Cancellation Engine - Letters API Router

Generates cancellation letters. /generate tries the AI generator first
and falls back to the template; /template always uses the template.
"""
from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from ..config import Settings, get_app_settings
from ..models.letter import (
    LetterRequest,
    LetterResult,
    LetterSource,
    SubscriptionDetails,
    Tone,
    UserDetails,
)
from ..services.ai_letter import generate_cancellation_letter
from ..services.letter_template import generate as generate_template_letter, resolve_tone

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/letters", tags=["letters"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class _CamelModel(BaseModel):
    # Accept both full_name and fullName
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserDetailsIn(_CamelModel):
    full_name: str
    email: Optional[EmailStr] = None
    phone: str = ""
    address: str = ""

    @field_validator("full_name")
    @classmethod
    def full_name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("full name is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        # Email is optional; the form sends "" when it is left empty
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SubscriptionDetailsIn(_CamelModel):
    service_name: str
    account_number: str = ""
    subscription_plan: str = ""
    cancellation_reason: str = ""
    effective_date: date = Field(default_factory=date.today)

    @field_validator("service_name")
    @classmethod
    def service_name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("service name is required")
        return value


class LetterRequestIn(_CamelModel):
    user: UserDetailsIn
    subscription: SubscriptionDetailsIn
    tone: Tone = Tone.FORMAL

    @field_validator("tone", mode="before")
    @classmethod
    def tone_alias(cls, value):
        if isinstance(value, str):
            return resolve_tone(value)
        return value

    def to_domain(self) -> LetterRequest:
        return LetterRequest(
            user=UserDetails(
                full_name=self.user.full_name,
                email=self.user.email or "",
                phone=self.user.phone,
                address=self.user.address,
            ),
            subscription=SubscriptionDetails(
                service_name=self.subscription.service_name,
                account_number=self.subscription.account_number,
                subscription_plan=self.subscription.subscription_plan,
                cancellation_reason=self.subscription.cancellation_reason,
                effective_date=self.subscription.effective_date.isoformat(),
            ),
            tone=self.tone,
        )


class LetterResponse(BaseModel):
    content: str
    source: LetterSource
    tone: Tone
    word_count: int
    generated_at: datetime

    @classmethod
    def from_result(cls, result: LetterResult) -> "LetterResponse":
        return cls(
            content=result.content,
            source=result.source,
            tone=result.tone,
            word_count=result.word_count,
            generated_at=result.generated_at,
        )


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/generate", response_model=LetterResponse)
async def generate_letter(
    request: LetterRequestIn,
    settings: Settings = Depends(get_app_settings),
):
    """
    Generate a cancellation letter.

    Uses Gemini when an API key is configured; otherwise, or on any
    model failure, returns the template letter. Never fails once the
    request has validated.
    """
    result = await generate_cancellation_letter(request.to_domain(), settings)
    logger.info(f"Letter generated: source={result.source.value}, words={result.word_count}")
    return LetterResponse.from_result(result)


@router.post("/template", response_model=LetterResponse)
async def generate_template(
    request: LetterRequestIn,
    today: Optional[date] = None,
):
    """Render the deterministic template letter, optionally for a fixed date."""
    letter_request = request.to_domain()
    result = LetterResult(
        content=generate_template_letter(letter_request, today),
        source=LetterSource.TEMPLATE,
        tone=letter_request.tone,
    )
    return LetterResponse.from_result(result)
