"""
Letter Template Package

Deterministic cancellation letter rendering. Pure functions only: the
output depends on the LetterRequest and the date, nothing else.

Usage:
    from cancel_engine.services.letter_template import generate

    text = generate(request)
"""

from .generator import (
    NOT_AVAILABLE,
    format_short_date,
    generate,
)

from .tones import (
    ToneConfig,
    TONE_CONFIGS,
    TONE_ADDENDA,
    TONE_ALIASES,
    normalize_tone,
    resolve_tone,
    get_addendum,
    get_available_tones,
)


__all__ = [
    # Generator
    "NOT_AVAILABLE",
    "format_short_date",
    "generate",
    # Tones
    "ToneConfig",
    "TONE_CONFIGS",
    "TONE_ADDENDA",
    "TONE_ALIASES",
    "normalize_tone",
    "resolve_tone",
    "get_addendum",
    "get_available_tones",
]
