"""Turns a raw two-team split into a TeamDivisionResult with a balance report."""

from typing import Sequence, Tuple

from src.team_balancer.config import TEAM1_NAME, TEAM2_NAME
from src.team_balancer.models import (
    BalanceAnalysis,
    Team,
    TeamDivisionResult,
    TeamPlayer,
)


def _build_team(name: str, players: Sequence) -> Team:
    entries = tuple(TeamPlayer(id=p.id, name=p.name, rating=p.rating) for p in players)
    total = sum(p.rating for p in entries)
    average = total / len(entries) if entries else 0.0
    return Team(name=name, players=entries, average_rating=average, total_rating=total)


def fairness_score(average1: float, average2: float) -> Tuple[float, float]:
    """Return ``(rating_difference, fairness_score)`` for two team averages.

    Formula::

        fairness = 100 - |avg1 - avg2| / max(|avg1|, |avg2|) * 100

    clamped to [0, 100]. Two zero averages count as perfectly fair.
    """
    difference = abs(average1 - average2)
    strongest = max(abs(average1), abs(average2))
    if strongest == 0:
        return difference, 100.0
    score = 100.0 - difference / strongest * 100.0
    return difference, min(100.0, max(0.0, score))


def format_team_result(
    team1_players: Sequence,
    team2_players: Sequence,
    method: str,
) -> TeamDivisionResult:
    """Build both teams and the balance report.

    Players only need ``id``, ``name`` and ``rating`` attributes, so a
    result's own ``Team.players`` can be fed straight back in.
    """
    team1 = _build_team(TEAM1_NAME, team1_players)
    team2 = _build_team(TEAM2_NAME, team2_players)
    difference, fairness = fairness_score(team1.average_rating, team2.average_rating)

    return TeamDivisionResult(
        team1=team1,
        team2=team2,
        balance_analysis=BalanceAnalysis(
            rating_difference=difference,
            fairness_score=fairness,
            explanation=(
                f"{method}: Rating difference of {difference:.2f} "
                f"({fairness:.1f}% balanced)"
            ),
            method=method,
        ),
    )


def _team_text(team: Team) -> str:
    lines = [f"{team.name} (Avg: {team.average_rating:.2f}):"]
    lines.extend(f"• {p.name} ({p.rating:.2f})" for p in team.players)
    return "\n".join(lines)


def generate_team_text(result: TeamDivisionResult) -> str:
    """Plain-text summary of a division, suitable for pasting into chat."""
    return (
        f"{_team_text(result.team1)}\n\n"
        f"{_team_text(result.team2)}\n\n"
        f"📊 {result.balance_analysis.explanation}"
    )
