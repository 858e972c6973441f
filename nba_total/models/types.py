from typing_extensions import TypedDict, Literal
from typing import List, Optional


class ProjectionResult(TypedDict):
    expectedTotal: int
    pace: float
    remainingMinutes: float

class DryspellScenario(TypedDict):
    minutes: int
    projectedTotal: int

class SlowdownScenario(TypedDict):
    pace: int
    projectedTotal: int

class Scenarios(TypedDict):
    dryspell: List[DryspellScenario]
    slowdown: List[SlowdownScenario]

class CalculatorResponse(TypedDict):
    mode: Literal["quarter", "clock", "decimal"]
    elapsedMinutes: Optional[float]
    currentPoints: Optional[float]
    result: Optional[ProjectionResult]
    scenarios: Optional[Scenarios]
    calculation: Optional[str]
    message: Optional[str]

class LiveGame(TypedDict):
    gameId: str
    status: Optional[str]
    state: Optional[str]
    homeTeam: str
    awayTeam: str
    homeScore: int
    awayScore: int
    period: int
    displayClock: Optional[str]

class LiveProjection(TypedDict):
    gameId: str
    status: Optional[str]
    state: Optional[str]
    homeTeam: str
    awayTeam: str
    homeScore: int
    awayScore: int
    period: int
    displayClock: Optional[str]
    currentPoints: int
    elapsedMinutes: Optional[float]
    result: Optional[ProjectionResult]
    scenarios: Optional[Scenarios]
