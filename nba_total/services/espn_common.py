# nba_total/services/espn_common.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import httpx
from zoneinfo import ZoneInfo

from nba_total.core.config import get_http_timeout, get_max_tries

logger = logging.getLogger("nba_total.espn_common")

HEADERS = {"User-Agent": "Mozilla/5.0", "Accept": "application/json"}


# -----------------------------------------------------------
# Shared HTTP helper with retries
# -----------------------------------------------------------
async def _get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    max_tries: Optional[int] = None,
) -> Dict[str, Any]:
    """
    ESPN JSON fetch with basic retry + logging.

    Raises the last httpx error once every attempt has failed.
    """
    tries = max_tries or get_max_tries()
    last: Optional[Exception] = None

    for attempt in range(1, tries + 1):
        try:
            async with httpx.AsyncClient(timeout=get_http_timeout(), headers=HEADERS) as client:
                r = await client.get(url, params=params)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as e:
            last = e
            logger.warning(
                "espn_common _get_json attempt %s failed: %s",
                attempt,
                repr(e),
            )

    logger.error(
        "espn_common _get_json giving up after %s attempts: %s",
        tries,
        repr(last),
    )
    raise last or RuntimeError("unknown http error")


# -----------------------------------------------------------
# Date normalization helper (NY-local “today” by default)
# -----------------------------------------------------------
def normalize_date_param(date: Optional[str]) -> str:
    """
    Normalize a date for ESPN's `dates` param.

    Accepts:
      - None            -> today's date in America/New_York, YYYYMMDD
      - 'YYYYMMDD'      -> returned unchanged
      - 'YYYY-MM-DD'    -> dashes removed
    Anything else raises ValueError (routers turn it into a 400).
    """
    if date:
        s = date.strip()
        if len(s) == 8 and s.isdigit():
            return s
        if len(s) == 10 and "-" in s:
            parts = s.split("-")
            if len(parts) == 3 and all(p.isdigit() for p in parts):
                return "".join(parts)
        raise ValueError(f"Unsupported date format: {date!r} (use YYYY-MM-DD or YYYYMMDD)")

    now = datetime.now(ZoneInfo("America/New_York"))
    return now.strftime("%Y%m%d")
