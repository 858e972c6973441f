# nba_total/core/config.py
import os
from typing import List

ESPN_NBA_SCOREBOARD_DEFAULT = (
    "https://site.api.espn.com/apis/site/v2/sports/basketball/nba/scoreboard"
)


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


def get_scoreboard_url() -> str:
    return os.getenv("ESPN_NBA_SCOREBOARD") or ESPN_NBA_SCOREBOARD_DEFAULT


def get_http_timeout() -> float:
    try:
        return float(os.getenv("ESPN_TIMEOUT_SEC", "10"))
    except ValueError:
        return 10.0


def get_max_tries() -> int:
    try:
        return max(1, int(os.getenv("ESPN_MAX_TRIES", "2")))
    except ValueError:
        return 2
