# nba_total/routers/calculator_routes.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from nba_total.models.calculator import project, scenarios
from nba_total.models.clock import (
    REGULATION_MINUTES,
    DecimalMinutes,
    DirectClock,
    ElapsedInput,
    QuarterClock,
    combined_score,
    elapsed_minutes,
    raw_elapsed,
)
from nba_total.models.types import CalculatorResponse

logger = logging.getLogger("nba_total.calculator")
router = APIRouter(prefix="/calculator", tags=["Calculator"])

MSG_TOO_EARLY = "Minutes must be greater than 0"
MSG_TOO_LATE = f"Minutes cannot exceed {REGULATION_MINUTES}"
MSG_INVALID = "Enter valid numbers to calculate"

MAX_TEAM_SCORE = 1000


def _resolve_points(
    points: Optional[float],
    home: Optional[int],
    away: Optional[int],
) -> float:
    """
    Combined score from either `points` or `home` + `away`.
    """
    if points is not None:
        if home is not None or away is not None:
            raise HTTPException(400, "send either points or home+away, not both")
        return points
    if home is None or away is None:
        raise HTTPException(400, "points or both home and away are required")
    total = combined_score(home, away)
    if total is None:
        raise HTTPException(400, "team scores must be non-negative whole numbers")
    return total


def _fmt(x: float) -> str:
    return f"{x:g}"


def _not_computable_message(source: ElapsedInput) -> str:
    raw = raw_elapsed(source)
    if raw is None:
        return MSG_INVALID
    if raw <= 0:
        return MSG_TOO_EARLY
    if raw > REGULATION_MINUTES:
        return MSG_TOO_LATE
    return MSG_INVALID


def build_response(source: ElapsedInput, points: float) -> CalculatorResponse:
    elapsed = elapsed_minutes(source)
    result = project(elapsed, points) if elapsed is not None else None

    if result is None:
        message = _not_computable_message(source)
        logger.info("CALC %s not computable: %s (%s)", source.mode.value, message, source)
        return {
            "mode": source.mode.value,
            "elapsedMinutes": elapsed,
            "currentPoints": points,
            "result": None,
            "scenarios": None,
            "calculation": None,
            "message": message,
        }

    return {
        "mode": source.mode.value,
        "elapsedMinutes": elapsed,
        "currentPoints": points,
        "result": result,
        "scenarios": scenarios(elapsed, points),
        "calculation": f"{_fmt(points)} ÷ {_fmt(elapsed)} × {REGULATION_MINUTES}",
        "message": None,
    }


# -------------------------
# 🧮  Decimal minutes played
# -------------------------
@router.get("/decimal", response_model=CalculatorResponse)
async def calc_decimal(
    minutes: float = Query(..., description="Minutes played, 0-48 (full game = 48)"),
    points: Optional[float] = Query(None, ge=0, description="Current combined score"),
    home: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
    away: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
):
    """
    Project the final total from decimal minutes played (e.g. 23.5).
    """
    total = _resolve_points(points, home, away)
    return build_response(DecimalMinutes(minutes), total)


# -------------------------
# ⏱️  Elapsed mm:ss
# -------------------------
@router.get("/clock", response_model=CalculatorResponse)
async def calc_clock(
    minutes: int = Query(..., description="Elapsed minutes"),
    seconds: int = Query(0, description="Elapsed seconds, 0-59"),
    points: Optional[float] = Query(None, ge=0),
    home: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
    away: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
):
    """
    Project the final total from total elapsed game time as minutes:seconds.
    """
    total = _resolve_points(points, home, away)
    return build_response(DirectClock(minutes, seconds), total)


# -------------------------
# 🏀  Quarter + game clock
# -------------------------
@router.get("/quarter", response_model=CalculatorResponse)
async def calc_quarter(
    quarter: int = Query(..., description="Quarter, 1-4"),
    minutes: int = Query(..., description="Minutes left in the quarter, 0-12"),
    seconds: int = Query(0, description="Seconds left in the quarter, 0-59"),
    points: Optional[float] = Query(None, ge=0),
    home: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
    away: Optional[int] = Query(None, ge=0, le=MAX_TEAM_SCORE),
):
    """
    Project the final total from the quarter and the clock shown on the
    scoreboard (time remaining in that quarter).
    """
    total = _resolve_points(points, home, away)
    return build_response(QuarterClock(quarter, minutes, seconds), total)
