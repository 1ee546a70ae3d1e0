"""
Brute-force time estimates and human-scale formatting.

Combination counts are Decimals computed under COMBINATIONS_CONTEXT: 28
significant digits and an unbounded exponent. That is plenty for an
order-of-magnitude display, stays exact for anything a JSON number can hold,
and costs the same for a 10-character password as for a 300,000-character one.
"""

import math
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal

from .models import BruteForceEstimate

COMBINATIONS_CONTEXT = Context(prec=28, Emax=MAX_EMAX, Emin=MIN_EMIN)

# (singular, plural, how many of this unit make the next one)
TIME_UNITS = (
    ("second", "seconds", 60),
    ("minute", "minutes", 60),
    ("hour", "hours", 24),
    ("day", "days", 365),
    ("year", "years", 1000),
    ("millennium", "millennia", None),
)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def _check_guess_rate(guess_rate):
    if not math.isfinite(guess_rate) or guess_rate <= 0:
        raise ValueError("guess_rate must be a positive finite number")


def total_combinations(character_set_size: int, length: int) -> Decimal:
    """character_set_size ** length, or 0 when there is no alphabet or no password."""
    if character_set_size == 0 or length == 0:
        return Decimal(0)
    return COMBINATIONS_CONTEXT.power(Decimal(character_set_size), length)


def _seconds(combinations: Decimal, guess_rate) -> Decimal:
    return COMBINATIONS_CONTEXT.divide(combinations, _to_decimal(guess_rate))


def estimate_crack_time(character_set_size: int, length: int, guess_rate: float):
    """
    Seconds needed to try every combination at guess_rate guesses/second.

    Returns None when there is nothing to estimate (empty alphabet or empty
    password); that is "no estimate", not zero seconds.
    """
    _check_guess_rate(guess_rate)
    if character_set_size == 0 or length == 0:
        return None
    return _seconds(total_combinations(character_set_size, length), guess_rate)


def format_number(value) -> str:
    num = _to_decimal(value)
    if num >= Decimal("1e15"):
        return f"{num:.2e}"
    # pick the band from the value as displayed, so 999.96 reads "1,000"
    if round(num, 1) < 1000:
        text = f"{round(num, 1):.1f}"
        return text[:-2] if text.endswith(".0") else text
    rounded = round(num)
    if rounded >= 10 ** 15:
        return f"{num:.2e}"
    return f"{rounded:,}"


def format_duration(seconds) -> str:
    value = _to_decimal(seconds)
    if value < 1:
        return "less than 1 second"
    for singular, plural, next_unit in TIME_UNITS:
        # 59.99 seconds displays as 60, so it belongs to the next unit
        if next_unit is None or (value < next_unit and round(value, 1) < next_unit):
            text = format_number(value)
            return f"{text} {singular if text == '1' else plural}"
        value = COMBINATIONS_CONTEXT.divide(value, Decimal(next_unit))


def brute_force_estimate(result, guess_rate: float):
    _check_guess_rate(guess_rate)
    if result.character_set_size == 0 or result.length == 0:
        return None
    seconds = _seconds(result.total_combinations, guess_rate)
    return BruteForceEstimate(
        total_combinations=result.total_combinations,
        guess_rate=float(guess_rate),
        seconds=seconds,
        total_combinations_display=format_number(result.total_combinations),
        time_display=format_duration(seconds),
    )
