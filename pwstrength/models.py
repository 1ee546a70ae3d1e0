"""
Value objects returned by the analyzer.

Nothing here holds on to mutable state: every record is a frozen dataclass
built fresh per call. Serialization helpers produce plain dicts (camelCase keys)
ready for json.dumps. The raw password is left out unless asked for.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from functools import total_ordering

# Largest integer a JSON consumer (e.g. a browser) can hold exactly.
MAX_SAFE_INTEGER = 2 ** 53


@total_ordering
class StrengthLevel(Enum):
    VERY_WEAK = (0, "Very Weak", "❌", "This password can be cracked almost instantly.")
    WEAK = (1, "Weak", "⚠️", "This password can be cracked quickly with modern hardware.")
    MODERATE = (2, "Moderate", "✅", "This password provides basic protection but could be stronger.")
    STRONG = (3, "Strong", "🔐", "This password provides good protection against brute-force attacks.")
    VERY_STRONG = (4, "Very Strong", "🛡️", "This password provides excellent protection against brute-force attacks.")

    def __init__(self, ordinal, label, emoji, remark):
        self.ordinal = ordinal
        self.label = label
        self.emoji = emoji
        self.remark = remark

    def __lt__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.ordinal < other.ordinal

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "StrengthLevel":
        for level in cls:
            if level.ordinal == ordinal:
                return level
        raise ValueError(f"No strength level with ordinal {ordinal!r}")

    def to_dict(self):
        return {
            "name": self.name,
            "label": self.label,
            "ordinal": self.ordinal,
            "emoji": self.emoji,
        }


def _json_count(value: Decimal):
    # exact integer while a double can hold it, scientific notation beyond
    if value <= MAX_SAFE_INTEGER:
        return int(value)
    return f"{value:.6e}"


@dataclass(frozen=True)
class AnalysisResult:
    """Composition flags, score and feedback for one password."""

    password: str = field(repr=False)
    length: int
    has_lowercase: bool
    has_uppercase: bool
    has_numbers: bool
    has_special: bool
    character_types: int
    character_set_size: int
    score: float
    strength_level: StrengthLevel
    explanations: tuple
    total_combinations: Decimal

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def to_dict(self, include_password=False):
        data = {
            "length": self.length,
            "hasLowercase": self.has_lowercase,
            "hasUppercase": self.has_uppercase,
            "hasNumbers": self.has_numbers,
            "hasSpecial": self.has_special,
            "characterTypes": self.character_types,
            "characterSetSize": self.character_set_size,
            "score": self.score,
            "strengthLevel": self.strength_level.to_dict(),
            "explanations": list(self.explanations),
            "totalCombinations": _json_count(self.total_combinations),
        }
        if include_password:
            data["password"] = self.password
        return data


@dataclass(frozen=True)
class BruteForceEstimate:
    total_combinations: Decimal
    guess_rate: float
    seconds: Decimal
    total_combinations_display: str
    time_display: str

    def to_dict(self):
        return {
            "totalCombinations": _json_count(self.total_combinations),
            "totalCombinationsDisplay": self.total_combinations_display,
            "guessRate": self.guess_rate,
            "seconds": f"{self.seconds:.6e}",
            "timeDisplay": self.time_display,
        }


@dataclass(frozen=True)
class Criterion:
    text: str
    met: bool

    def to_dict(self):
        return {"text": self.text, "met": self.met}
