"""
Letter Template - Tone Addenda

Each tone appends at most one paragraph to the billing instruction.
Formal appends nothing.
"""
from typing import List, Dict, Any
from dataclasses import dataclass

from ...models.letter import Tone


@dataclass(frozen=True)
class ToneConfig:
    """Configuration for a letter tone."""
    tone: Tone
    addendum: str
    description: str


TONE_CONFIGS: Dict[Tone, ToneConfig] = {
    Tone.FORMAL: ToneConfig(
        tone=Tone.FORMAL,
        addendum="",
        description="Standard business letter with no additional demands",
    ),
    Tone.FIRM: ToneConfig(
        tone=Tone.FIRM,
        addendum=(
            "Please be advised that this request is final. I expect a written "
            "confirmation of this cancellation and an assurance that no further "
            "charges will be applied to my account. If any further unauthorized "
            "billing occurs, I will be forced to escalate this matter."
        ),
        description="Requests written confirmation and warns against further charges",
    ),
    Tone.FRIENDLY: ToneConfig(
        tone=Tone.FRIENDLY,
        addendum=(
            "I have enjoyed using your service, but I have decided to cancel at "
            "this time. Thank you for your support and assistance with this request."
        ),
        description="Thanks the provider while stating the decision to cancel",
    ),
    Tone.DIRECT: ToneConfig(
        tone=Tone.DIRECT,
        addendum=(
            "Please process this request immediately. No further communication "
            "is required other than a confirmation of termination."
        ),
        description="Short and to the point, asks only for confirmation",
    ),
}

TONE_ADDENDA: Dict[Tone, str] = {tone: config.addendum for tone, config in TONE_CONFIGS.items()}

# Accepted spellings besides the display labels
TONE_ALIASES: Dict[str, Tone] = {
    "formal": Tone.FORMAL,
    "firm": Tone.FIRM,
    "firm_legalistic": Tone.FIRM,
    "legalistic": Tone.FIRM,
    "friendly": Tone.FRIENDLY,
    "polite": Tone.FRIENDLY,
    "polite_friendly": Tone.FRIENDLY,
    "direct": Tone.DIRECT,
    "concise": Tone.DIRECT,
    "direct_concise": Tone.DIRECT,
}


def normalize_tone(tone: str) -> str:
    """Lowercase with underscores: 'Firm & Legalistic' -> 'firm_legalistic'."""
    normalized = tone.strip().lower().replace("&", " ").replace("-", " ")
    return "_".join(normalized.split())


def resolve_tone(tone_str: str) -> Tone:
    """
    Resolve a tone label or alias to a Tone.

    Raises ValueError for anything unrecognised; callers decide whether
    that is a client error.
    """
    try:
        return Tone(tone_str)
    except ValueError:
        pass

    normalized = normalize_tone(tone_str)
    if normalized in TONE_ALIASES:
        return TONE_ALIASES[normalized]

    raise ValueError(f"Unknown tone: {tone_str!r}")


def get_addendum(tone: Tone) -> str:
    return TONE_ADDENDA[tone]


def get_available_tones() -> List[Dict[str, Any]]:
    """Get list of available tones with metadata."""
    return [
        {
            "id": normalize_tone(tone.value),
            "name": tone.value,
            "description": TONE_CONFIGS[tone].description,
            "has_addendum": bool(TONE_CONFIGS[tone].addendum),
        }
        for tone in Tone
    ]
