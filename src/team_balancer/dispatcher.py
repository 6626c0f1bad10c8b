"""Algorithm selection - the single entry point for dividing a roster."""

import logging
import random
from enum import Enum
from typing import Optional, Sequence, Union

from src.ratings.calculations import RatedPlayer
from src.team_balancer import strategies
from src.team_balancer.config import (
    BALANCED_RANDOM_THRESHOLD,
    DEFAULT_ALGORITHM,
    GREEDY_RANDOM_THRESHOLD,
    OPTIMAL_BALANCE_MAX_PLAYERS,
    WEIGHTED_RANDOM_THRESHOLD,
)
from src.team_balancer.formatter import format_team_result
from src.team_balancer.models import (
    InsufficientPlayersError,
    TeamDivisionResult,
    TeamSplit,
)

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    GREEDY = "greedy"
    SNAKE = "snake"
    BALANCED = "balanced"
    WEIGHTED = "weighted"
    RANDOM_GREEDY = "random-greedy"
    RANDOM_WEIGHTED = "random-weighted"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """Accept an Algorithm or its string value."""
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(
                f"Unknown algorithm: {value!r}. Must be one of: {valid}."
            ) from None


def _split(
    players: Sequence[RatedPlayer],
    algorithm: Algorithm,
    rng: random.Random,
    random_threshold: Optional[float],
    max_optimal_players: int,
) -> TeamSplit:
    if algorithm is Algorithm.GREEDY:
        return strategies.greedy_split(players)
    if algorithm is Algorithm.SNAKE:
        return strategies.snake_draft_split(players)
    if algorithm is Algorithm.WEIGHTED:
        return strategies.weighted_split(players)
    if algorithm is Algorithm.RANDOM_GREEDY:
        threshold = GREEDY_RANDOM_THRESHOLD if random_threshold is None else random_threshold
        return strategies.greedy_random_split(players, threshold=threshold, rng=rng)
    if algorithm is Algorithm.RANDOM_WEIGHTED:
        threshold = WEIGHTED_RANDOM_THRESHOLD if random_threshold is None else random_threshold
        return strategies.weighted_random_split(players, threshold=threshold, rng=rng)

    threshold = BALANCED_RANDOM_THRESHOLD if random_threshold is None else random_threshold
    return strategies.balanced_split(
        players,
        max_optimal_players=max_optimal_players,
        threshold=threshold,
        rng=rng,
    )


def divide_into_balanced_teams(
    players: Sequence[RatedPlayer],
    algorithm: Union[Algorithm, str] = DEFAULT_ALGORITHM,
    *,
    rng: Optional[random.Random] = None,
    random_threshold: Optional[float] = None,
    max_optimal_players: int = OPTIMAL_BALANCE_MAX_PLAYERS,
) -> TeamDivisionResult:
    """Split *players* into two teams using *algorithm*.

    Args:
        players: Ordered roster of rated players.
        algorithm: One of ``greedy``, ``snake``, ``balanced``, ``weighted``,
            ``random-greedy``, ``random-weighted``.
        rng: Random source for the randomised algorithms. A fresh unseeded
            generator is used when omitted.
        random_threshold: Overrides the coin-flip threshold of whichever
            randomised strategy ends up running. Ignored by the
            deterministic ones.
        max_optimal_players: Largest roster ``balanced`` will search
            exhaustively.

    Returns:
        The formatted :class:`TeamDivisionResult`.

    Raises:
        InsufficientPlayersError: If fewer than two players were supplied.
        ValueError: If *algorithm* is not recognised.
    """
    algorithm = Algorithm.parse(algorithm)
    if rng is None:
        rng = random.Random()

    try:
        split = _split(players, algorithm, rng, random_threshold, max_optimal_players)
    except InsufficientPlayersError as exc:
        logger.warning("Team division rejected (%s): %s", algorithm.value, exc)
        raise

    result = format_team_result(split.team1, split.team2, split.method)
    logger.info(
        "Divided %d players with %s (%s): %d vs %d, %.1f%% balanced",
        len(players),
        algorithm.value,
        split.method,
        len(result.team1.players),
        len(result.team2.players),
        result.balance_analysis.fairness_score,
    )
    return result
