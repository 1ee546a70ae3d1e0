"""
Tunable constants for the analyzer.

Every number the scoring depends on lives here so callers (and tests) can move
a boundary without touching the analyzer itself.
"""

import math
from dataclasses import dataclass, field, replace

from .models import StrengthLevel

GUESSES_PER_SECOND = 10_000_000_000  # 10 billion guesses per second


@dataclass(frozen=True)
class CharacterClassSizes:
    lowercase: int = 26
    uppercase: int = 26
    numbers: int = 10
    special: int = 32  # common punctuation, approximate

    def __post_init__(self):
        for name in ("lowercase", "uppercase", "numbers", "special"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Character class size for {name} must be positive")


@dataclass(frozen=True)
class AnalyzerConfig:
    class_sizes: CharacterClassSizes = field(default_factory=CharacterClassSizes)
    # (minimum length, points), checked in order
    length_bands: tuple = ((16, 3.0), (12, 2.0), (8, 1.0), (4, 0.5))
    # points indexed by the number of character types present (0..4)
    variety_weights: tuple = (0.0, 0.5, 1.0, 1.5, 2.0)
    # (minimum score, level), checked in order; anything lower is VERY_WEAK
    strength_thresholds: tuple = (
        (4.5, StrengthLevel.VERY_STRONG),
        (3.5, StrengthLevel.STRONG),
        (2.0, StrengthLevel.MODERATE),
        (1.0, StrengthLevel.WEAK),
    )
    # length feedback: too short / acceptable / good / excellent
    length_remark_bands: tuple = (8, 12, 16)
    # minimum and recommended lengths in the criteria checklist
    criteria_lengths: tuple = (8, 12)
    guess_rate: float = GUESSES_PER_SECOND

    def __post_init__(self):
        lengths = [min_len for min_len, _ in self.length_bands]
        if lengths != sorted(lengths, reverse=True):
            raise ValueError("length_bands must be ordered from longest to shortest")
        if len(self.variety_weights) != 5:
            raise ValueError("variety_weights needs one weight for 0..4 character types")
        scores = [min_score for min_score, _ in self.strength_thresholds]
        if scores != sorted(scores, reverse=True):
            raise ValueError("strength_thresholds must be ordered from highest to lowest")
        if list(self.length_remark_bands) != sorted(self.length_remark_bands) or len(self.length_remark_bands) != 3:
            raise ValueError("length_remark_bands must be three ascending lengths")
        if len(self.criteria_lengths) != 2:
            raise ValueError("criteria_lengths must be (minimum, recommended)")
        if not math.isfinite(self.guess_rate) or self.guess_rate <= 0:
            raise ValueError("guess_rate must be a positive finite number")

    @classmethod
    def from_mapping(cls, mapping, base=None):
        """
        Build a config from flat keys such as Flask's app.config.

        Recognised keys: GUESS_RATE, LOWERCASE_SIZE, UPPERCASE_SIZE,
        NUMBERS_SIZE, SPECIAL_SIZE. Anything else is ignored.
        """
        base = base or cls()
        sizes = {}
        for key, attr in (("LOWERCASE_SIZE", "lowercase"), ("UPPERCASE_SIZE", "uppercase"),
                          ("NUMBERS_SIZE", "numbers"), ("SPECIAL_SIZE", "special")):
            if mapping.get(key) is not None:
                sizes[attr] = int(mapping[key])
        changes = {}
        if sizes:
            changes["class_sizes"] = replace(base.class_sizes, **sizes)
        if mapping.get("GUESS_RATE") is not None:
            changes["guess_rate"] = float(mapping["GUESS_RATE"])
        return replace(base, **changes) if changes else base


DEFAULT_CONFIG = AnalyzerConfig()
