from fastapi.testclient import TestClient

from nba_total.core.config import get_cors_origins
from nba_total.main import app
from nba_total.routers import calculator_routes


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_status_reports_config(client, monkeypatch):
    monkeypatch.setenv("ESPN_TIMEOUT_SEC", "4.5")
    data = client.get("/status").json()
    assert data["ok"] is True
    assert data["regulationMinutes"] == 48
    assert data["httpTimeoutSec"] == 4.5
    assert data["scoreboardUrl"].endswith("/basketball/nba/scoreboard")


def test_decimal_halftime(client):
    res = client.get("/api/nba/calculator/decimal", params={"minutes": 24, "points": 110})
    assert res.status_code == 200
    data = res.json()
    assert data["mode"] == "decimal"
    assert data["elapsedMinutes"] == 24
    assert data["result"] == {"expectedTotal": 220, "pace": 4.58, "remainingMinutes": 24}
    assert data["calculation"] == "110 ÷ 24 × 48"
    assert data["message"] is None
    assert [s["projectedTotal"] for s in data["scenarios"]["dryspell"]] == [215, 211, 206]
    assert [s["pace"] for s in data["scenarios"]["slowdown"]] == [4, 3, 2]


def test_quarter_clock_with_team_scores(client):
    res = client.get(
        "/api/nba/calculator/quarter",
        params={"quarter": 2, "minutes": 6, "seconds": 0, "home": 48, "away": 42},
    )
    assert res.status_code == 200
    data = res.json()
    assert data["mode"] == "quarter"
    assert data["elapsedMinutes"] == 18.0
    assert data["currentPoints"] == 90
    assert data["result"]["expectedTotal"] == 240
    assert data["result"]["remainingMinutes"] == 30


def test_direct_clock(client):
    res = client.get("/api/nba/calculator/clock", params={"minutes": 23, "seconds": 30, "points": 94})
    data = res.json()
    assert data["mode"] == "clock"
    assert data["elapsedMinutes"] == 23.5
    assert data["result"]["expectedTotal"] == 192
    assert data["calculation"] == "94 ÷ 23.5 × 48"


def test_opening_tip_is_not_computable(client):
    res = client.get(
        "/api/nba/calculator/quarter",
        params={"quarter": 1, "minutes": 12, "seconds": 0, "points": 0},
    )
    assert res.status_code == 200
    data = res.json()
    assert data["result"] is None
    assert data["scenarios"] is None
    assert data["calculation"] is None
    assert data["message"] == "Minutes must be greater than 0"


def test_too_many_minutes(client):
    data = client.get("/api/nba/calculator/decimal", params={"minutes": 50, "points": 200}).json()
    assert data["result"] is None
    assert data["message"] == "Minutes cannot exceed 48"


def test_bad_clock_reading(client):
    data = client.get(
        "/api/nba/calculator/quarter",
        params={"quarter": 5, "minutes": 3, "points": 200},
    ).json()
    assert data["result"] is None
    assert data["elapsedMinutes"] is None
    assert data["message"] == "Enter valid numbers to calculate"


def test_non_numeric_input_is_rejected(client):
    res = client.get("/api/nba/calculator/decimal", params={"minutes": "abc", "points": 110})
    assert res.status_code == 422


def test_negative_points_rejected(client):
    res = client.get("/api/nba/calculator/decimal", params={"minutes": 24, "points": -5})
    assert res.status_code == 422


def test_score_is_required(client):
    res = client.get("/api/nba/calculator/decimal", params={"minutes": 24})
    assert res.status_code == 400

    res = client.get("/api/nba/calculator/decimal", params={"minutes": 24, "home": 50})
    assert res.status_code == 400


def test_points_and_team_scores_are_exclusive(client):
    res = client.get(
        "/api/nba/calculator/decimal",
        params={"minutes": 24, "points": 110, "home": 60, "away": 50},
    )
    assert res.status_code == 400


def test_projection_overflow_is_not_computable(client):
    res = client.get("/api/nba/calculator/decimal", params={"minutes": 0.01, "points": 1e307})
    assert res.status_code == 200
    data = res.json()
    assert data["result"] is None
    assert data["scenarios"] is None
    assert data["message"] == "Enter valid numbers to calculate"


def test_huge_team_scores_rejected(client):
    res = client.get(
        "/api/nba/calculator/decimal",
        params={"minutes": 24, "home": str(10 ** 400), "away": 1},
    )
    assert res.status_code == 422

    res = client.get(
        "/api/nba/calculator/quarter",
        params={"quarter": 2, "minutes": 6, "home": 1001, "away": 1},
    )
    assert res.status_code == 422


def test_cors_origins_parsing(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert get_cors_origins() == ["*"]

    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://calc.example.com,")
    assert get_cors_origins() == ["http://localhost:5173", "https://calc.example.com"]

    monkeypatch.setenv("CORS_ORIGINS", " , ")
    assert get_cors_origins() == ["*"]


def test_unhandled_error_returns_internal_error(monkeypatch):
    def boom(source, points):
        raise RuntimeError("boom")

    monkeypatch.setattr(calculator_routes, "build_response", boom)

    with TestClient(app, raise_server_exceptions=False) as c:
        res = c.get("/api/nba/calculator/decimal", params={"minutes": 24, "points": 110})
    assert res.status_code == 500
    assert res.json() == {"error": "internal_error"}
