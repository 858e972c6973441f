"""Pytest configuration and shared fixtures."""

import os
import sys
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

# Ensure the repo root (containing the `nba_total` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from nba_total.main import app  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def make_event(
    game_id: str = "401584701",
    period: int = 2,
    clock: str = "6:00",
    home_score: str = "55",
    away_score: str = "50",
    state: str = "in",
    name: str = "STATUS_IN_PROGRESS",
) -> Dict[str, Any]:
    """Trimmed ESPN site-API scoreboard event."""
    return {
        "id": game_id,
        "date": "2026-10-19T23:30Z",
        "competitions": [
            {
                "status": {
                    "period": period,
                    "displayClock": clock,
                    "type": {"name": name, "state": state},
                },
                "competitors": [
                    {
                        "homeAway": "home",
                        "score": home_score,
                        "team": {"id": "2", "displayName": "Boston Celtics"},
                    },
                    {
                        "homeAway": "away",
                        "score": away_score,
                        "team": {"id": "18", "displayName": "New York Knicks"},
                    },
                ],
            }
        ],
    }


@pytest.fixture
def sample_event() -> Dict[str, Any]:
    return make_event()
