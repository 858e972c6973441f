# nba_total/routers/live_routes.py
from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, HTTPException, Query

from nba_total.models.types import LiveProjection
from nba_total.services.espn_nba import get_games_for_date, project_live_game

router = APIRouter(tags=["Live"])
logger = logging.getLogger("nba_total.live")


@router.get("/live", response_model=List[LiveProjection])
async def nba_live(
    date: Optional[str] = Query(None, description="YYYY-MM-DD or YYYYMMDD; default = today (NY)"),
    in_progress_only: bool = Query(True, description="If true, only games currently being played"),
):
    """
    ESPN NBA scoreboard with a pace projection for every game in regulation.
    """
    try:
        games = await get_games_for_date(date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except httpx.HTTPError as e:
        logger.exception("NBA live failed for date=%s: %s", date, e)
        raise HTTPException(status_code=502, detail="fetch_failed")

    if in_progress_only:
        games = [g for g in games if g["state"] == "in"]

    return [project_live_game(g) for g in games]
