"""
Password composition analysis and scoring.

Classification is membership only: each character class is tested against the
whole string with one regex, so character order never matters. Anything outside
[a-zA-Z0-9] (non-ASCII included) counts as special.
"""

import re

from .config import DEFAULT_CONFIG
from .crack_time import total_combinations
from .models import AnalysisResult, Criterion, StrengthLevel

LOWERCASE_RE = re.compile(r"[a-z]")
UPPERCASE_RE = re.compile(r"[A-Z]")
NUMBERS_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(r"[^a-zA-Z0-9]")

LENGTH_REMARKS = (
    "Password is too short. Use at least {} characters.",
    "Password length is acceptable but could be longer.",
    "Good password length.",
    "Excellent password length.",
)

VARIETY_REMARKS = {
    1: "Using only one character type makes the password vulnerable.",
    2: "Using two character types improves security.",
    3: "Using three character types provides good security.",
    4: "Using all four character types maximizes security.",
}

MISSING_CLASS_REMARKS = (
    ("lowercase", "Consider adding lowercase letters."),
    ("uppercase", "Consider adding uppercase letters."),
    ("numbers", "Consider adding numbers."),
    ("special", "Consider adding special characters (!@#$%^&*)."),
)


def classify(pw: str) -> dict:
    return {
        "lowercase": bool(LOWERCASE_RE.search(pw)),
        "uppercase": bool(UPPERCASE_RE.search(pw)),
        "numbers": bool(NUMBERS_RE.search(pw)),
        "special": bool(SPECIAL_RE.search(pw)),
    }


class PasswordAnalyzer:
    """Scores passwords against an AnalyzerConfig. Stateless apart from the config."""

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG

    def character_set_size(self, classes: dict) -> int:
        sizes = self.config.class_sizes
        return sum(getattr(sizes, name) for name, present in classes.items() if present)

    def length_points(self, length: int) -> float:
        for min_len, points in self.config.length_bands:
            if length >= min_len:
                return points
        return 0.0

    def variety_points(self, character_types: int) -> float:
        return self.config.variety_weights[character_types]

    def strength_for(self, score: float) -> StrengthLevel:
        for min_score, level in self.config.strength_thresholds:
            if score >= min_score:
                return level
        return StrengthLevel.VERY_WEAK

    def length_remark(self, length: int) -> str:
        acceptable, good, excellent = self.config.length_remark_bands
        if length < acceptable:
            return LENGTH_REMARKS[0].format(acceptable)
        if length < good:
            return LENGTH_REMARKS[1]
        if length < excellent:
            return LENGTH_REMARKS[2]
        return LENGTH_REMARKS[3]

    def explanations(self, length, classes, character_types, strength):
        # fixed order: length, variety, missing classes, closing remark
        lines = [self.length_remark(length), VARIETY_REMARKS[character_types]]
        for name, remark in MISSING_CLASS_REMARKS:
            if not classes[name]:
                lines.append(remark)
        lines.append(strength.remark)
        return tuple(lines)

    def analyze(self, password: str) -> AnalysisResult:
        if not isinstance(password, str):
            raise TypeError(f"password must be a str, not {type(password).__name__}")

        length = len(password)
        classes = classify(password)
        character_types = sum(classes.values())
        if length:
            # every character is alnum or special, so a non-empty password has a class
            assert character_types > 0, "non-empty password matched no character class"

        set_size = self.character_set_size(classes)
        score = self.length_points(length) + self.variety_points(character_types)
        strength = self.strength_for(score)

        if length:
            explanations = self.explanations(length, classes, character_types, strength)
        else:
            explanations = ()

        return AnalysisResult(
            password=password,
            length=length,
            has_lowercase=classes["lowercase"],
            has_uppercase=classes["uppercase"],
            has_numbers=classes["numbers"],
            has_special=classes["special"],
            character_types=character_types,
            character_set_size=set_size,
            score=score,
            strength_level=strength,
            explanations=explanations,
            total_combinations=total_combinations(set_size, length),
        )


def criteria_checklist(result: AnalysisResult, config=None):
    minimum, recommended = (config or DEFAULT_CONFIG).criteria_lengths
    return (
        Criterion(f"At least {minimum} characters (current: {result.length})", result.length >= minimum),
        Criterion(f"At least {recommended} characters (recommended)", result.length >= recommended),
        Criterion("Contains lowercase letters (a-z)", result.has_lowercase),
        Criterion("Contains uppercase letters (A-Z)", result.has_uppercase),
        Criterion("Contains numbers (0-9)", result.has_numbers),
        Criterion("Contains special characters (!@#$%^&*)", result.has_special),
    )


def analyze(password: str, config=None) -> AnalysisResult:
    return PasswordAnalyzer(config).analyze(password)
