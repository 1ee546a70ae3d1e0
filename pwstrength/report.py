"""Sanitized report combining the analysis, brute-force estimate and checklist."""

from .analyzer import PasswordAnalyzer, criteria_checklist
from .config import DEFAULT_CONFIG
from .crack_time import brute_force_estimate

EMPTY_REPORT = {"analysis": None, "bruteForce": None, "criteria": []}


def build_report(password: str, config=None) -> dict:
    """
    JSON-ready report for one password. The raw password is not included.

    An empty password yields EMPTY_REPORT: nothing to show, clear the display.
    """
    config = config or DEFAULT_CONFIG
    if not password:
        return {**EMPTY_REPORT, "criteria": []}

    result = PasswordAnalyzer(config).analyze(password)
    estimate = brute_force_estimate(result, config.guess_rate)
    return {
        "analysis": result.to_dict(),
        "bruteForce": estimate.to_dict() if estimate else None,
        "criteria": [c.to_dict() for c in criteria_checklist(result, config)],
    }
