# nba_total/models/calculator.py
from __future__ import annotations

import math
from typing import List, Optional

from nba_total.models.clock import REGULATION_MINUTES
from nba_total.models.types import (
    DryspellScenario,
    ProjectionResult,
    Scenarios,
    SlowdownScenario,
)

DRYSPELL_MINUTES = (1, 2, 3)
SLOWDOWN_PACES = (4, 3, 2)
SLOWDOWN_WINDOW_MINUTES = 4


def round_half_up(x: float) -> int:
    """
    Round to the nearest integer, ties toward +infinity (JS Math.round).

    Every value we round is non-negative, so this is also
    round-half-away-from-zero. Builtin round() would send 210.5 to 210.
    """
    f = math.floor(x)
    # x - f is exact; x + 0.5 is not (0.49999999999999994 + 0.5 == 1.0)
    return int(f) + (1 if x - f >= 0.5 else 0)


def _valid_inputs(elapsed_minutes: float, current_points: float) -> bool:
    if isinstance(elapsed_minutes, bool) or isinstance(current_points, bool):
        return False
    try:
        if not (math.isfinite(elapsed_minutes) and math.isfinite(current_points)):
            return False
    except (TypeError, OverflowError):
        return False
    if elapsed_minutes <= 0 or elapsed_minutes > REGULATION_MINUTES:
        return False
    return current_points >= 0


def _pace(elapsed_minutes: float, current_points: float) -> Optional[float]:
    """Points per minute, or None if inputs are invalid or the totals overflow."""
    if not _valid_inputs(elapsed_minutes, current_points):
        return None
    try:
        pace = current_points / elapsed_minutes
    except OverflowError:
        return None
    # bounds every rounded quantity: pace*100, pace*48 and all scenario totals
    if not math.isfinite(current_points + pace * 100):
        return None
    return pace


def project(elapsed_minutes: float, current_points: float) -> Optional[ProjectionResult]:
    """
    Linear-pace projection of the final combined score.

    Returns None when elapsed time is outside (0, 48], the score is
    negative, or the projection is too large to represent. Callers show
    "no projection" in that case.
    """
    pace = _pace(elapsed_minutes, current_points)
    if pace is None:
        return None

    return {
        "expectedTotal": round_half_up(pace * REGULATION_MINUTES),
        "pace": round_half_up(pace * 100) / 100,
        "remainingMinutes": REGULATION_MINUTES - elapsed_minutes,
    }


def _dryspell(elapsed_minutes: float, current_points: float, pace: float) -> List[DryspellScenario]:
    out: List[DryspellScenario] = []
    for d in DRYSPELL_MINUTES:
        remaining_after = max(0.0, REGULATION_MINUTES - (elapsed_minutes + d))
        out.append({
            "minutes": d,
            "projectedTotal": round_half_up(current_points + pace * remaining_after),
        })
    return out


def _slowdown(elapsed_minutes: float, current_points: float, pace: float) -> List[SlowdownScenario]:
    remaining = REGULATION_MINUTES - elapsed_minutes
    out: List[SlowdownScenario] = []
    for slow in SLOWDOWN_PACES:
        if remaining <= SLOWDOWN_WINDOW_MINUTES:
            total = current_points + slow * remaining
        else:
            # slow window first, then back to the current pace
            total = (
                current_points
                + slow * SLOWDOWN_WINDOW_MINUTES
                + pace * (remaining - SLOWDOWN_WINDOW_MINUTES)
            )
        out.append({"pace": slow, "projectedTotal": round_half_up(total)})
    return out


def scenarios(elapsed_minutes: float, current_points: float) -> Optional[Scenarios]:
    """
    What-if projections: a 1/2/3 minute scoring drought starting now, and a
    4-minute stretch at 4/3/2 pts/min. Omitted entirely when the base
    projection is not computable.
    """
    pace = _pace(elapsed_minutes, current_points)
    if pace is None:
        return None

    return {
        "dryspell": _dryspell(elapsed_minutes, current_points, pace),
        "slowdown": _slowdown(elapsed_minutes, current_points, pace),
    }
