from src.team_balancer.models import (
    BalanceAnalysis,
    InsufficientPlayersError,
    Team,
    TeamDivisionResult,
    TeamPlayer,
    TeamSplit,
)
from src.team_balancer.strategies import (
    balanced_split,
    greedy_random_split,
    greedy_split,
    optimal_balance_split,
    snake_draft_split,
    weighted_random_split,
    weighted_split,
)
from src.team_balancer.formatter import format_team_result, generate_team_text
from src.team_balancer.dispatcher import Algorithm, divide_into_balanced_teams

__all__ = [
    "Algorithm",
    "BalanceAnalysis",
    "InsufficientPlayersError",
    "Team",
    "TeamDivisionResult",
    "TeamPlayer",
    "TeamSplit",
    "balanced_split",
    "divide_into_balanced_teams",
    "format_team_result",
    "generate_team_text",
    "greedy_random_split",
    "greedy_split",
    "optimal_balance_split",
    "snake_draft_split",
    "weighted_random_split",
    "weighted_split",
]
