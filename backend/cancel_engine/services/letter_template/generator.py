"""
Letter Template - Generator

Deterministic fallback used whenever the AI generator is unavailable.
The line layout is fixed; clients compare and display it verbatim.

Layout:
    sender block (empty address/phone lines dropped)
    Date
    RE line + account number
    salutation
    request paragraph
    reason paragraph (only when a reason is given)
    billing instruction + tone addendum
    closing
    signature
"""
import logging
from datetime import date
from typing import List, Optional

from ...models.letter import LetterRequest
from .tones import get_addendum

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def format_short_date(value: date) -> str:
    """Short date in M/D/YYYY form, e.g. 1/5/2024."""
    return f"{value.month}/{value.day}/{value.year}"


def _sender_block(request: LetterRequest) -> List[str]:
    user = request.user
    lines = [user.full_name]
    if user.address:
        lines.append(user.address)
    lines.append(user.email)
    if user.phone:
        lines.append(user.phone)
    return lines


def _billing_paragraph(request: LetterRequest) -> str:
    text = "Please stop all recurring payments associated with this account immediately."
    addendum = get_addendum(request.tone)
    if addendum:
        text += "\n" + addendum
    return text


def generate(request: LetterRequest, today: Optional[date] = None) -> str:
    """
    Render the cancellation letter for a request.

    Args:
        request: User, subscription and tone
        today: Date printed in the letter; defaults to date.today()

    Returns:
        Plain-text letter, paragraphs separated by one blank line
    """
    user = request.user
    sub = request.subscription
    today = today or date.today()

    paragraphs = [
        "\n".join(_sender_block(request)),
        f"Date: {format_short_date(today)}",
        "\n".join([
            f"RE: Cancellation of {sub.service_name} Subscription",
            f"Account Number: {sub.account_number or NOT_AVAILABLE}",
        ]),
        f"To the Customer Service Team at {sub.service_name},",
        (
            f"I am writing to formally request the cancellation of my "
            f"{sub.subscription_plan} subscription, effective {sub.effective_date}."
        ),
    ]
    if sub.cancellation_reason:
        paragraphs.append(f"Reason for cancellation: {sub.cancellation_reason}")
    paragraphs.extend([
        _billing_paragraph(request),
        "Thank you for your prompt attention to this matter.",
        "Sincerely,",
        user.full_name,
    ])

    letter = "\n\n".join(paragraphs)
    logger.debug(f"Rendered template letter for {sub.service_name!r} ({request.tone.value})")
    return letter
