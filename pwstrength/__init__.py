"""Password strength estimation from character composition and brute-force time."""

from .analyzer import PasswordAnalyzer, analyze, criteria_checklist
from .config import DEFAULT_CONFIG, AnalyzerConfig, CharacterClassSizes
from .crack_time import (brute_force_estimate, estimate_crack_time, format_duration, format_number,
                         total_combinations)
from .models import AnalysisResult, BruteForceEstimate, Criterion, StrengthLevel

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "BruteForceEstimate",
    "CharacterClassSizes",
    "Criterion",
    "DEFAULT_CONFIG",
    "PasswordAnalyzer",
    "StrengthLevel",
    "analyze",
    "brute_force_estimate",
    "criteria_checklist",
    "estimate_crack_time",
    "format_duration",
    "format_number",
    "total_combinations",
]
