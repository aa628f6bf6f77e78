"""
AI Letter Generator

Asks Gemini for a cancellation letter. Any failure (no key, SDK error,
timeout, empty text) falls back to the template generator, so callers
always get a usable letter.
"""
import logging
from datetime import date
from typing import Optional

from ..config import Settings
from ..models.letter import LetterRequest, LetterResult, LetterSource
from .letter_template import generate as generate_template_letter
from .llm_client import LLMClient, create_client, run_completion

logger = logging.getLogger(__name__)

LETTER_PROMPT = """
Generate a professional subscription cancellation letter based on the following details:

User Name: {full_name}
User Email: {email}
User Phone: {phone}
User Address: {address}

Service Provider: {service_name}
Account/Member Number: {account_number}
Plan Type: {subscription_plan}
Reason for Cancellation: {cancellation_reason}
Requested End Date: {effective_date}

Tone: {tone}

Rules for the letter:
1. Include standard business letter formatting.
2. Be clear about the request to terminate services and stop all future billing.
3. If the tone is 'Firm & Legalistic', mention consumer rights and request written confirmation.
4. If the tone is 'Polite & Friendly', thank them for the service but state the need to move on.
5. Ensure the letter is complete and ready for use.
6. Do not use placeholders like [Your Name].
"""


def build_letter_prompt(request: LetterRequest) -> str:
    user = request.user
    sub = request.subscription
    return LETTER_PROMPT.format(
        full_name=user.full_name,
        email=user.email,
        phone=user.phone,
        address=user.address,
        service_name=sub.service_name,
        account_number=sub.account_number,
        subscription_plan=sub.subscription_plan,
        cancellation_reason=sub.cancellation_reason or "Not specified",
        effective_date=sub.effective_date,
        tone=request.tone.value,
    )


def _template_result(request: LetterRequest, today: Optional[date]) -> LetterResult:
    return LetterResult(
        content=generate_template_letter(request, today),
        source=LetterSource.TEMPLATE,
        tone=request.tone,
    )


async def generate_cancellation_letter(
    request: LetterRequest,
    settings: Settings,
    client: Optional[LLMClient] = None,
    today: Optional[date] = None,
) -> LetterResult:
    """
    Generate a letter with the model, falling back to the template.

    Args:
        request: Letter inputs
        settings: Provides the API key, model and timeout
        client: Model client; built from settings when omitted
        today: Date for the template fallback

    Returns:
        LetterResult whose source says which generator produced it
    """
    if not settings.has_llm_credentials:
        logger.warning("API key missing, falling back to local template.")
        return _template_result(request, today)

    client = client or create_client(settings)
    prompt = build_letter_prompt(request)

    try:
        text = await run_completion(client, prompt, settings.llm_timeout_seconds)
    except Exception as e:
        logger.error(f"LLM letter generation failed, using fallback template: {e!r}")
        return _template_result(request, today)

    if not text or not text.strip():
        logger.warning("LLM returned an empty letter, using fallback template.")
        return _template_result(request, today)

    logger.info(f"Generated AI letter for {request.subscription.service_name!r}")
    return LetterResult(content=text, source=LetterSource.AI, tone=request.tone)
