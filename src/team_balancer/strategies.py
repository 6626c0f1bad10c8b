"""Partition strategies that split a rated roster into two teams.

Every strategy takes an ordered roster of :class:`RatedPlayer` and returns a
:class:`TeamSplit`. None of them mutate the roster.

Assignment rule shared by the greedy-style strategies: the next player goes
to the team whose running sum is lower *or equal*, so ties always land on
team1. The randomised variants replace that rule with a coin flip while the
running gap is within their threshold.

Randomised strategies draw from an injected ``random.Random``; pass a seeded
instance for reproducible splits.
"""

import itertools
import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from src.ratings.calculations import RatedPlayer
from src.team_balancer.config import (
    BALANCED_RANDOM_THRESHOLD,
    GREEDY_RANDOM_THRESHOLD,
    MIN_PLAYERS,
    OPTIMAL_BALANCE_MAX_PLAYERS,
    WEIGHTED_RANDOM_THRESHOLD,
)
from src.team_balancer.models import InsufficientPlayersError, TeamSplit

logger = logging.getLogger(__name__)

GREEDY = "Greedy Assignment"
GREEDY_RANDOM = "Greedy with Randomness"
SNAKE_DRAFT = "Snake Draft"
OPTIMAL_BALANCE = "Optimal Balance"
WEIGHTED = "Weighted Multi-Factor"
WEIGHTED_RANDOM = "Weighted with Randomness"


def _require_players(players: Sequence[RatedPlayer]) -> None:
    if len(players) < MIN_PLAYERS:
        raise InsufficientPlayersError(len(players), MIN_PLAYERS)


def _by_rating(players: Sequence[RatedPlayer]) -> List[RatedPlayer]:
    return sorted(players, key=lambda p: p.rating, reverse=True)


def _average_rating(players: Sequence[RatedPlayer]) -> float:
    if not players:
        return 0.0
    return sum(p.rating for p in players) / len(players)


def _assign_to_lighter_team(
    ordered: Sequence[RatedPlayer],
    score: Callable[[RatedPlayer], float],
    threshold: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[List[RatedPlayer], List[RatedPlayer]]:
    """Walk *ordered* and hand each player to the team with the lower sum.

    When *threshold* is given, a running gap of at most *threshold* makes
    the assignment a 50/50 draw from *rng* instead.
    """
    team1: List[RatedPlayer] = []
    team2: List[RatedPlayer] = []
    sum1 = 0.0
    sum2 = 0.0

    for player in ordered:
        value = score(player)
        if threshold is not None and abs(sum1 - sum2) <= threshold:
            to_team1 = rng.random() < 0.5
        else:
            to_team1 = sum1 <= sum2

        if to_team1:
            team1.append(player)
            sum1 += value
        else:
            team2.append(player)
            sum2 += value

    logger.debug(
        "Assigned %d players: team1 sum=%.3f, team2 sum=%.3f",
        len(ordered), sum1, sum2,
    )
    return team1, team2


# ------------------------------------------------------------------
# Rating-based strategies
# ------------------------------------------------------------------

def greedy_split(players: Sequence[RatedPlayer]) -> TeamSplit:
    """Sort by rating and always feed the weaker team. Deterministic."""
    _require_players(players)
    team1, team2 = _assign_to_lighter_team(_by_rating(players), lambda p: p.rating)
    return TeamSplit(tuple(team1), tuple(team2), GREEDY)


def greedy_random_split(
    players: Sequence[RatedPlayer],
    threshold: float = GREEDY_RANDOM_THRESHOLD,
    rng: Optional[random.Random] = None,
) -> TeamSplit:
    """Greedy assignment with a coin flip whenever the teams are within
    *threshold* rating points of each other."""
    _require_players(players)
    if rng is None:
        rng = random.Random()
    team1, team2 = _assign_to_lighter_team(
        _by_rating(players), lambda p: p.rating, threshold=threshold, rng=rng,
    )
    return TeamSplit(tuple(team1), tuple(team2), GREEDY_RANDOM)


def snake_draft_split(players: Sequence[RatedPlayer]) -> TeamSplit:
    """Draft in order 1, 2, 2, 1, 1, 2, 2, ... from the top-rated down."""
    _require_players(players)
    team1: List[RatedPlayer] = []
    team2: List[RatedPlayer] = []

    for pick, player in enumerate(_by_rating(players)):
        # Pick 0 is a single; after that teams alternate in pairs
        if ((pick + 1) // 2) % 2 == 0:
            team1.append(player)
        else:
            team2.append(player)

    return TeamSplit(tuple(team1), tuple(team2), SNAKE_DRAFT)


def optimal_balance_split(
    players: Sequence[RatedPlayer],
    max_players: int = OPTIMAL_BALANCE_MAX_PLAYERS,
) -> TeamSplit:
    """Exhaustively search for the split with the closest average ratings.

    Every ``n // 2``-sized combination of the roster is tried as team1, in
    :func:`itertools.combinations` order, with the remainder as team2. The
    first combination reaching the smallest gap wins.

    Raises:
        InsufficientPlayersError: Fewer than two players.
        ValueError: More than *max_players* players.
    """
    _require_players(players)
    if len(players) > max_players:
        raise ValueError(
            f"Optimal balance search is limited to {max_players} players "
            f"(got {len(players)})"
        )

    indices = range(len(players))
    best: Optional[Tuple[List[RatedPlayer], List[RatedPlayer]]] = None
    best_gap = float("inf")
    candidates = 0

    for combo in itertools.combinations(indices, len(players) // 2):
        chosen = set(combo)
        team1 = [players[i] for i in combo]
        team2 = [players[i] for i in indices if i not in chosen]
        gap = abs(_average_rating(team1) - _average_rating(team2))
        candidates += 1
        if gap < best_gap:
            best_gap = gap
            best = (team1, team2)

    logger.debug(
        "Optimal balance: searched %d splits, best gap %.4f", candidates, best_gap,
    )
    team1, team2 = best
    return TeamSplit(tuple(team1), tuple(team2), OPTIMAL_BALANCE)


def balanced_split(
    players: Sequence[RatedPlayer],
    max_optimal_players: int = OPTIMAL_BALANCE_MAX_PLAYERS,
    threshold: float = BALANCED_RANDOM_THRESHOLD,
    rng: Optional[random.Random] = None,
) -> TeamSplit:
    """Exhaustive search for small rosters, randomised greedy otherwise."""
    _require_players(players)
    if len(players) <= max_optimal_players:
        return optimal_balance_split(players, max_players=max_optimal_players)
    logger.debug(
        "Roster of %d exceeds optimal search limit (%d); using randomised greedy",
        len(players), max_optimal_players,
    )
    return greedy_random_split(players, threshold=threshold, rng=rng)


# ------------------------------------------------------------------
# Composite-score strategies
# ------------------------------------------------------------------

def _by_composite(players: Sequence[RatedPlayer]) -> List[RatedPlayer]:
    return sorted(players, key=lambda p: p.composite_score, reverse=True)


def shuffle_similar_players(
    players: Sequence[RatedPlayer],
    threshold: float,
    rng: random.Random,
) -> List[RatedPlayer]:
    """Sort by composite score, then shuffle within runs of similar players.

    A run starts at the highest remaining score and extends over every
    following player whose score is within *threshold* of that first score.
    """
    ordered = _by_composite(players)
    result: List[RatedPlayer] = []

    i = 0
    while i < len(ordered):
        anchor = ordered[i].composite_score
        group = [ordered[i]]
        i += 1
        while i < len(ordered) and abs(ordered[i].composite_score - anchor) <= threshold:
            group.append(ordered[i])
            i += 1
        rng.shuffle(group)
        result.extend(group)

    return result


def weighted_split(players: Sequence[RatedPlayer]) -> TeamSplit:
    """Greedy assignment on composite score. Deterministic."""
    _require_players(players)
    team1, team2 = _assign_to_lighter_team(
        _by_composite(players), lambda p: p.composite_score,
    )
    return TeamSplit(tuple(team1), tuple(team2), WEIGHTED)


def weighted_random_split(
    players: Sequence[RatedPlayer],
    threshold: float = WEIGHTED_RANDOM_THRESHOLD,
    rng: Optional[random.Random] = None,
) -> TeamSplit:
    """Weighted assignment over a shuffled-within-tiers order, with a coin
    flip whenever the composite gap is within *threshold*."""
    _require_players(players)
    if rng is None:
        rng = random.Random()
    ordered = shuffle_similar_players(players, threshold, rng)
    team1, team2 = _assign_to_lighter_team(
        ordered, lambda p: p.composite_score, threshold=threshold, rng=rng,
    )
    return TeamSplit(tuple(team1), tuple(team2), WEIGHTED_RANDOM)
