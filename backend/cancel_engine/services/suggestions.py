"""
Cancellation Reason Suggestions

Short reasons a user can pick instead of typing one. Falls back to a
fixed list whenever the model is unavailable.
"""
import logging
import re
from typing import List, Optional

from ..config import Settings
from .llm_client import LLMClient, create_client, run_completion

logger = logging.getLogger(__name__)

DEFAULT_REASONS = [
    "Cost is too high",
    "No longer using the service",
    "Found a better alternative",
    "Moving to a different location",
]

MAX_SUGGESTIONS = 4
MIN_SERVICE_NAME_LENGTH = 3

SUGGESTION_PROMPT = (
    'Provide 4 short, professional reasons someone might want to cancel a '
    'subscription for "{service_name}". Return them as a simple list.'
)

# "1. ", "2) ", "- ", "* ", "• "
_LIST_MARKER = re.compile(r"^\s*(?:\d+[.)]\s*|[-*•]\s+)")


def parse_suggestions(text: str) -> List[str]:
    """Turn a model list response into at most four clean reasons."""
    reasons = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        reason = _LIST_MARKER.sub("", line).strip()
        if reason:
            reasons.append(reason)
    return reasons[:MAX_SUGGESTIONS]


async def suggest_cancellation_reasons(
    service_name: str,
    settings: Settings,
    client: Optional[LLMClient] = None,
) -> List[str]:
    """
    Suggest cancellation reasons for a service.

    Names shorter than three characters get no suggestions at all.
    """
    service_name = service_name.strip()
    if len(service_name) < MIN_SERVICE_NAME_LENGTH:
        return []

    if not settings.has_llm_credentials:
        return list(DEFAULT_REASONS)

    client = client or create_client(settings)
    prompt = SUGGESTION_PROMPT.format(service_name=service_name)

    try:
        text = await run_completion(client, prompt, settings.llm_timeout_seconds)
    except Exception as e:
        logger.warning(f"Reason suggestion failed for {service_name!r}: {e!r}")
        return list(DEFAULT_REASONS)

    reasons = parse_suggestions(text or "")
    return reasons or list(DEFAULT_REASONS)
