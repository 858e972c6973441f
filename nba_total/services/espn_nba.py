# nba_total/services/espn_nba.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from nba_total.core.config import get_scoreboard_url
from nba_total.models.calculator import project, scenarios
from nba_total.models.clock import QuarterClock, elapsed_minutes
from nba_total.models.types import LiveGame, LiveProjection
from nba_total.services.espn_common import _get_json, normalize_date_param

logger = logging.getLogger("nba_total.espn_nba")


# ---------- Extraction ----------

def parse_display_clock(clock: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    ESPN game clock -> (minutes, seconds) left in the period.

      "6:00"  -> (6, 0)
      "11:58" -> (11, 58)
      "45.2"  -> (0, 45)   # under a minute ESPN drops the minutes
    """
    if not isinstance(clock, str) or not clock:
        return None
    s = clock.strip()
    try:
        if ":" in s:
            mm, ss = s.split(":", 1)
            return int(mm), int(float(ss))
        return 0, int(float(s))
    except (ValueError, OverflowError):
        return None


def _to_int(value: Any) -> int:
    # Scores and periods come in as strings
    try:
        return int(float(value or 0))
    except (TypeError, ValueError, OverflowError):
        return 0


def extract_live_game(ev: Dict[str, Any]) -> Optional[LiveGame]:
    comp = (ev.get("competitions") or [{}])[0]
    teams = comp.get("competitors") or []
    if len(teams) < 2:
        return None

    home = next((c for c in teams if c.get("homeAway") == "home"), teams[0])
    away = next((c for c in teams if c.get("homeAway") == "away"), teams[-1])

    status = comp.get("status") or ev.get("status") or {}
    stype = status.get("type") or {}

    return {
        "gameId": str(ev.get("id")),
        "status": stype.get("name"),
        "state": stype.get("state"),
        "homeTeam": (home.get("team") or {}).get("displayName") or "",
        "awayTeam": (away.get("team") or {}).get("displayName") or "",
        "homeScore": _to_int(home.get("score")),
        "awayScore": _to_int(away.get("score")),
        "period": _to_int(status.get("period")),
        "displayClock": status.get("displayClock"),
    }


def live_game_elapsed(game: LiveGame) -> Optional[float]:
    """Elapsed regulation minutes; None for pregame, overtime or a bad clock."""
    parsed = parse_display_clock(game.get("displayClock"))
    if parsed is None:
        return None
    minutes, seconds = parsed
    return elapsed_minutes(QuarterClock(game["period"], minutes, seconds))


def project_live_game(game: LiveGame) -> LiveProjection:
    points = game["homeScore"] + game["awayScore"]
    elapsed = live_game_elapsed(game)
    if elapsed is None:
        result, extra = None, None
    else:
        result, extra = project(elapsed, points), scenarios(elapsed, points)

    return {
        **game,
        "currentPoints": points,
        "elapsedMinutes": elapsed,
        "result": result,
        "scenarios": extra,
    }


# ---------- Public API ----------

async def get_games_for_date(date: Optional[str] = None) -> List[LiveGame]:
    """
    NBA scoreboard games for a date ('YYYYMMDD', 'YYYY-MM-DD' or None for
    today in New York).
    """
    d = normalize_date_param(date)
    params = {"dates": d, "limit": 100}

    data = await _get_json(get_scoreboard_url(), params)
    events = data.get("events") or []

    out: List[LiveGame] = []
    for ev in events:
        game = extract_live_game(ev)
        if game and game["homeTeam"] and game["awayTeam"]:
            out.append(game)

    logger.info("NBA get_games_for_date %s -> %d events", d, len(out))
    return out
