"""Leaderboard ranking and tabular export.

Ranks rated players by rating, builds the ratings table shown on the
leaderboard page, and renders it as CSV text for download. Also converts a
tabular roster (e.g. one loaded by the record store) into RatedPlayers.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from src.ratings.calculations import PlayerRecord, RatedPlayer
from src.ratings.config import RATINGS_CSV_COLUMNS, ROSTER_FRAME_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedPlayer:
    """A rated player with its 1-based leaderboard position."""

    rank: int
    player: RatedPlayer


def rank_players(records: Iterable[PlayerRecord]) -> List[RankedPlayer]:
    """Rate every record and rank by rating (descending, stable)."""
    rated = [RatedPlayer.from_record(r) for r in records]
    ordered = sorted(rated, key=lambda p: p.rating, reverse=True)
    return [
        RankedPlayer(rank=rank, player=player)
        for rank, player in enumerate(ordered, start=1)
    ]


def ratings_table(ranked: Iterable[RankedPlayer]) -> pd.DataFrame:
    """Build the leaderboard table.

    Derived columns (rating, K/D, ADR) are rounded to 2 decimals; raw
    counters are passed through unchanged.
    """
    rows = []
    for entry in ranked:
        record = entry.player.record
        stats = entry.player.stats
        rows.append({
            "Rank": entry.rank,
            "Player": record.name,
            "Rating": round(stats.rating, 2),
            "K/D Ratio": round(stats.kd_ratio, 2),
            "Avg Damage": round(stats.average_damage, 2),
            "Total Kills": record.total_kills,
            "Total Deaths": record.total_deaths,
            "Total Damage": record.total_damage,
            "Total Maps": record.total_maps,
        })
    return pd.DataFrame(rows, columns=RATINGS_CSV_COLUMNS)


def ratings_csv(ranked: Iterable[RankedPlayer]) -> str:
    """Render the leaderboard table as CSV text.

    One header row, then one line per player, joined by newlines with no
    trailing newline.
    """
    table = ratings_table(ranked)
    logger.debug("Exporting %d leaderboard rows to CSV", len(table))
    text = table.to_csv(index=False, lineterminator="\n", float_format="%.2f")
    return text.rstrip("\n")


def _safe(val, default=None):
    """Return *default* when *val* is NaN/None/pd.NA, else the value."""
    if val is None or val is pd.NA:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    return val


def _safe_int(val, default=0):
    """Convert *val* to int, returning *default* for missing or non-numeric
    values (e.g. '-'). Numeric strings such as '12.0' are accepted."""
    val = _safe(val)
    if val is None:
        return default
    try:
        return int(float(val))
    except (ValueError, TypeError, OverflowError):
        return default


def rated_players_from_frame(df: pd.DataFrame) -> List[RatedPlayer]:
    """Convert a roster DataFrame into RatedPlayers, preserving row order.

    Args:
        df: DataFrame with columns ``id``, ``name``, ``total_kills``,
            ``total_deaths``, ``total_damage``, ``total_maps``.
            Missing or non-numeric counter values are treated as 0;
            numeric strings (object-dtype columns) are converted.

    Raises:
        ValueError: If any required column is absent.
    """
    missing = [c for c in ROSTER_FRAME_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Roster frame missing required columns: {missing}")

    players = []
    for _, row in df.iterrows():
        record = PlayerRecord(
            id=str(row["id"]),
            name=str(row["name"]),
            total_kills=_safe_int(row["total_kills"]),
            total_deaths=_safe_int(row["total_deaths"]),
            total_damage=_safe_int(row["total_damage"]),
            total_maps=_safe_int(row["total_maps"]),
        )
        players.append(RatedPlayer.from_record(record))

    logger.info("Loaded %d players from roster frame", len(players))
    return players
