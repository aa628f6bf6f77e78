"""
Cancellation Engine - Letter Domain Models

Value objects passed to the letter generators. All of them are frozen:
a generator receives a LetterRequest and can never modify it.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Tone(str, Enum):
    """Letter tone. Values are the labels shown to the user."""
    FORMAL = "Formal"
    FIRM = "Firm & Legalistic"
    FRIENDLY = "Polite & Friendly"
    DIRECT = "Direct & Concise"


@dataclass(frozen=True)
class UserDetails:
    """Sender information printed in the letter header."""
    full_name: str
    email: str = ""
    phone: str = ""
    address: str = ""  # may span several lines


@dataclass(frozen=True)
class SubscriptionDetails:
    """The subscription being cancelled."""
    service_name: str
    effective_date: str  # YYYY-MM-DD
    account_number: str = ""
    subscription_plan: str = ""
    cancellation_reason: str = ""


@dataclass(frozen=True)
class LetterRequest:
    """Everything a generator needs for a single letter."""
    user: UserDetails
    subscription: SubscriptionDetails
    tone: Tone = Tone.FORMAL


class LetterSource(str, Enum):
    """Which generator produced the letter text."""
    AI = "ai"
    TEMPLATE = "template"


@dataclass(frozen=True)
class LetterResult:
    """Generated letter plus where it came from."""
    content: str
    source: LetterSource
    tone: Tone
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def word_count(self) -> int:
        return len(self.content.split())
