"""Cancellation Engine - Data Models"""
from .letter import (
    Tone, LetterSource,
    UserDetails, SubscriptionDetails, LetterRequest,
    LetterResult,
)

__all__ = [
    "Tone", "LetterSource",
    "UserDetails", "SubscriptionDetails", "LetterRequest",
    "LetterResult",
]
