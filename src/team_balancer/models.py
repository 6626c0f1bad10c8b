"""Team division data models."""

from dataclasses import dataclass
from typing import Tuple

from src.ratings.calculations import RatedPlayer


class InsufficientPlayersError(Exception):
    """Raised when a roster is too small to split into two teams."""

    def __init__(self, player_count: int, minimum: int = 2):
        self.player_count = player_count
        self.minimum = minimum
        super().__init__(
            f"Need at least {minimum} players to create teams (got {player_count})"
        )


@dataclass(frozen=True)
class TeamSplit:
    """Raw output of a partition strategy, before formatting."""

    team1: Tuple[RatedPlayer, ...]
    team2: Tuple[RatedPlayer, ...]
    method: str


@dataclass(frozen=True)
class TeamPlayer:
    """A player entry on a formatted team."""

    id: str
    name: str
    rating: float


@dataclass(frozen=True)
class Team:
    """A formatted team with aggregate ratings."""

    name: str
    players: Tuple[TeamPlayer, ...]
    average_rating: float
    total_rating: float


@dataclass(frozen=True)
class BalanceAnalysis:
    """How evenly two teams are matched.

    ``fairness_score`` is 100 for identical average ratings and falls
    toward 0 as the gap approaches the stronger team's average.
    """

    rating_difference: float
    fairness_score: float
    explanation: str
    method: str


@dataclass(frozen=True)
class TeamDivisionResult:
    """Both teams plus the balance report for a single division call."""

    team1: Team
    team2: Team
    balance_analysis: BalanceAnalysis
