"""Divide the sample roster into two teams and print the shareable text.

Usage:
    python -m src.team_balancer.run_division [algorithm] [seed]

Examples:
    python -m src.team_balancer.run_division
    python -m src.team_balancer.run_division random-weighted 42
"""

import logging
import random
import sys
from typing import Optional, Sequence

from src.logging_config import setup_logging
from src.ratings.calculations import PlayerRecord, RatedPlayer
from src.team_balancer.config import DEFAULT_ALGORITHM, SAMPLE_ROSTER
from src.team_balancer.dispatcher import divide_into_balanced_teams
from src.team_balancer.formatter import generate_team_text

logger = logging.getLogger(__name__)


def run_division(
    algorithm: str = DEFAULT_ALGORITHM,
    seed: Optional[int] = None,
    roster: Optional[Sequence[PlayerRecord]] = None,
) -> str:
    """Divide *roster* (default: the sample roster) and return the share text."""
    if roster is None:
        roster = SAMPLE_ROSTER

    players = [RatedPlayer.from_record(r) for r in roster]
    logger.info(
        "Dividing %d players with %s (seed=%s)", len(players), algorithm, seed,
    )

    result = divide_into_balanced_teams(players, algorithm, rng=random.Random(seed))
    return generate_team_text(result)


if __name__ == "__main__":
    setup_logging()

    algorithm = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ALGORITHM
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        print(run_division(algorithm, seed))
    except Exception:
        logger.exception("Team division failed")
        sys.exit(1)
