# nba_total/models/clock.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

QUARTERS = 4
QUARTER_MINUTES = 12
REGULATION_MINUTES = QUARTERS * QUARTER_MINUTES  # 48


def _is_number(x) -> bool:
    # bool is an int subclass; a checkbox value is not a clock reading
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        # ints past float range
        return False


def _in_regulation(elapsed: float) -> Optional[float]:
    if 0 < elapsed <= REGULATION_MINUTES:
        return elapsed
    return None


def convert_clock_to_elapsed(
    quarter: int,
    minutes_remaining: int,
    seconds_remaining: int,
) -> Optional[float]:
    """
    Quarter + game clock (time left in the quarter) -> elapsed game minutes.

    Returns None for anything outside regulation, including the opening
    tip (Q1 12:00 is 0 elapsed minutes).
    """
    if not all(_is_number(v) for v in (quarter, minutes_remaining, seconds_remaining)):
        return None
    if quarter not in (1, 2, 3, 4):
        return None
    if not 0 <= minutes_remaining <= QUARTER_MINUTES:
        return None
    if not 0 <= seconds_remaining <= 59:
        return None

    left_in_quarter = minutes_remaining + seconds_remaining / 60
    if left_in_quarter > QUARTER_MINUTES:
        return None

    elapsed = (quarter - 1) * QUARTER_MINUTES + (QUARTER_MINUTES - left_in_quarter)
    return _in_regulation(elapsed)


def convert_direct_time_to_elapsed(minutes: int, seconds: int) -> Optional[float]:
    """Total elapsed time entered as mm:ss."""
    if not _is_number(minutes) or not _is_number(seconds):
        return None
    if minutes < 0 or not 0 <= seconds <= 59:
        return None
    return _in_regulation(minutes + seconds / 60)


def convert_decimal_minutes(minutes: float) -> Optional[float]:
    if not _is_number(minutes):
        return None
    return _in_regulation(float(minutes))


# ---------- Input adapters ----------

class InputMode(str, Enum):
    QUARTER_CLOCK = "quarter"
    DIRECT_CLOCK = "clock"
    DECIMAL_MINUTES = "decimal"


@dataclass(frozen=True)
class QuarterClock:
    quarter: int
    minutes_remaining: int
    seconds_remaining: int

    mode = InputMode.QUARTER_CLOCK

    def elapsed(self) -> Optional[float]:
        return convert_clock_to_elapsed(
            self.quarter, self.minutes_remaining, self.seconds_remaining
        )


@dataclass(frozen=True)
class DirectClock:
    minutes: int
    seconds: int

    mode = InputMode.DIRECT_CLOCK

    def elapsed(self) -> Optional[float]:
        return convert_direct_time_to_elapsed(self.minutes, self.seconds)


@dataclass(frozen=True)
class DecimalMinutes:
    minutes: float

    mode = InputMode.DECIMAL_MINUTES

    def elapsed(self) -> Optional[float]:
        return convert_decimal_minutes(self.minutes)


ElapsedInput = Union[QuarterClock, DirectClock, DecimalMinutes]


def elapsed_minutes(source: ElapsedInput) -> Optional[float]:
    """Resolve any input adapter to elapsed minutes (None if not computable)."""
    return source.elapsed()


def raw_elapsed(source: ElapsedInput) -> Optional[float]:
    """
    Elapsed minutes *before* the (0, 48] range check.

    Used only to pick a user-facing hint ("must be greater than 0" vs
    "cannot exceed 48"). None when the clock itself is malformed.
    """
    if isinstance(source, DecimalMinutes):
        return float(source.minutes) if _is_number(source.minutes) else None
    if isinstance(source, DirectClock):
        if not _is_number(source.minutes) or not _is_number(source.seconds):
            return None
        if source.minutes < 0 or not 0 <= source.seconds <= 59:
            return None
        return source.minutes + source.seconds / 60
    if isinstance(source, QuarterClock):
        elapsed = source.elapsed()
        if elapsed is not None:
            return elapsed
        # Q1 12:00 is the only well-formed clock that is out of range
        if (
            source.quarter == 1
            and source.minutes_remaining == QUARTER_MINUTES
            and source.seconds_remaining == 0
        ):
            return 0.0
    return None


def combined_score(home: int, away: int) -> Optional[int]:
    """Sum of two team scores; None if either is negative or not a number."""
    if not _is_number(home) or not _is_number(away):
        return None
    if home < 0 or away < 0:
        return None
    return int(home) + int(away)
