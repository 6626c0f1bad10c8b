"""Player rating and composite score calculations.

A player's rating is derived purely from four raw counters (kills, deaths,
damage, maps) and is recomputed on every call, never stored.
"""

from dataclasses import dataclass
from typing import Optional

from src.ratings.config import (
    ADR_RATING_DIVISOR,
    ADR_RATIO_CAP,
    COMPOSITE_SCALE,
    COMPOSITE_WEIGHTS,
    KD_CAP,
    KD_RATING_WEIGHT,
)


@dataclass(frozen=True)
class PlayerRecord:
    """Raw per-player statistics as held by the record store."""

    id: str
    name: str
    total_kills: int = 0
    total_deaths: int = 0
    total_damage: int = 0
    total_maps: int = 0

    def accumulate(self, other: "PlayerRecord") -> "PlayerRecord":
        """Return a new record with *other*'s counters added to this one's."""
        return PlayerRecord(
            id=self.id,
            name=self.name,
            total_kills=self.total_kills + other.total_kills,
            total_deaths=self.total_deaths + other.total_deaths,
            total_damage=self.total_damage + other.total_damage,
            total_maps=self.total_maps + other.total_maps,
        )


@dataclass(frozen=True)
class DerivedStats:
    """Stats derived from a PlayerRecord."""

    kd_ratio: float
    average_damage: float
    rating: float


def calculate_stats(record: PlayerRecord) -> DerivedStats:
    """Derive K/D, ADR and rating from raw counters.

    Zero deaths falls back to the raw kill count; zero maps gives an ADR
    of 0. Neither case is an error.
    """
    if record.total_deaths > 0:
        kd_ratio = record.total_kills / record.total_deaths
    else:
        kd_ratio = float(record.total_kills)

    if record.total_maps > 0:
        average_damage = record.total_damage / record.total_maps
    else:
        average_damage = 0.0

    rating = kd_ratio * KD_RATING_WEIGHT + average_damage / ADR_RATING_DIVISOR

    return DerivedStats(
        kd_ratio=kd_ratio,
        average_damage=average_damage,
        rating=rating,
    )


def calculate_composite_score(stats: DerivedStats) -> float:
    """Blend rating with capped K/D and capped ADR.

    Formula::

        score = rating * 0.60
              + min(kd_ratio, 3.0) * 0.25 * 100
              + min(average_damage / 100, 1.0) * 0.15 * 100
    """
    normalized_kd = min(stats.kd_ratio, KD_CAP)
    normalized_adr = min(stats.average_damage / ADR_RATING_DIVISOR, ADR_RATIO_CAP)

    return (
        stats.rating * COMPOSITE_WEIGHTS["rating"]
        + normalized_kd * COMPOSITE_WEIGHTS["kd"] * COMPOSITE_SCALE
        + normalized_adr * COMPOSITE_WEIGHTS["adr"] * COMPOSITE_SCALE
    )


@dataclass(frozen=True)
class RatedPlayer:
    """A player record paired with its derived stats.

    This is the unit every partition strategy consumes.
    """

    record: PlayerRecord
    stats: DerivedStats

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "RatedPlayer":
        return cls(record=record, stats=calculate_stats(record))

    @classmethod
    def from_stats(
        cls,
        id: str,
        name: str,
        rating: float,
        kd_ratio: Optional[float] = None,
        average_damage: float = 0.0,
    ) -> "RatedPlayer":
        """Build a player from pre-derived stats (no raw counters).

        When *kd_ratio* is omitted it is backed out of the rating formula
        assuming the given *average_damage*.
        """
        if kd_ratio is None:
            kd_ratio = (rating - average_damage / ADR_RATING_DIVISOR) / KD_RATING_WEIGHT
        return cls(
            record=PlayerRecord(id=id, name=name),
            stats=DerivedStats(
                kd_ratio=kd_ratio,
                average_damage=average_damage,
                rating=rating,
            ),
        )

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def rating(self) -> float:
        return self.stats.rating

    @property
    def composite_score(self) -> float:
        return calculate_composite_score(self.stats)
