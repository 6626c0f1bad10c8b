"""Tests for src.ratings.calculations."""

import pytest

from src.ratings.calculations import (
    DerivedStats,
    PlayerRecord,
    RatedPlayer,
    calculate_composite_score,
    calculate_stats,
)


# ── Rating calculator ────────────────────────────────────────────────


class TestCalculateStats:
    def test_regular_counters(self):
        record = PlayerRecord("1", "PlayerOne", total_kills=150, total_deaths=120,
                              total_damage=18000, total_maps=10)
        stats = calculate_stats(record)
        assert stats.kd_ratio == pytest.approx(1.25)
        assert stats.average_damage == pytest.approx(1800.0)
        assert stats.rating == pytest.approx(1.25 * 2 + 1800.0 / 100)

    def test_zero_deaths_uses_raw_kills(self):
        record = PlayerRecord("1", "Flawless", total_kills=7, total_deaths=0,
                              total_damage=900, total_maps=3)
        stats = calculate_stats(record)
        assert stats.kd_ratio == 7.0
        assert stats.rating == pytest.approx(14.0 + 3.0)

    def test_zero_maps_gives_zero_adr(self):
        record = PlayerRecord("1", "NoMaps", total_kills=10, total_deaths=5,
                              total_damage=5000, total_maps=0)
        stats = calculate_stats(record)
        assert stats.average_damage == 0.0
        assert stats.rating == pytest.approx(4.0)

    def test_empty_record_is_all_zero(self):
        stats = calculate_stats(PlayerRecord("1", "Fresh"))
        assert stats == DerivedStats(kd_ratio=0.0, average_damage=0.0, rating=0.0)

    def test_is_deterministic(self):
        record = PlayerRecord("1", "A", 33, 21, 4100, 2)
        assert calculate_stats(record) == calculate_stats(record)


# ── Composite scorer ─────────────────────────────────────────────────


class TestCompositeScore:
    def test_uncapped_blend(self):
        stats = DerivedStats(kd_ratio=1.0, average_damage=80.0, rating=2.8)
        # 2.8*0.6 + 1.0*25 + 0.8*15
        assert calculate_composite_score(stats) == pytest.approx(1.68 + 25.0 + 12.0)

    def test_kd_capped_at_three(self):
        capped = DerivedStats(kd_ratio=5.0, average_damage=0.0, rating=0.0)
        at_cap = DerivedStats(kd_ratio=3.0, average_damage=0.0, rating=0.0)
        assert calculate_composite_score(capped) == pytest.approx(75.0)
        assert calculate_composite_score(capped) == calculate_composite_score(at_cap)

    def test_adr_capped_at_one_hundred(self):
        stats = DerivedStats(kd_ratio=0.0, average_damage=250.0, rating=0.0)
        assert calculate_composite_score(stats) == pytest.approx(15.0)

    def test_rating_is_not_capped(self):
        low = DerivedStats(kd_ratio=3.0, average_damage=100.0, rating=10.0)
        high = DerivedStats(kd_ratio=3.0, average_damage=100.0, rating=20.0)
        assert calculate_composite_score(high) - calculate_composite_score(low) == pytest.approx(6.0)


# ── Records and rated players ────────────────────────────────────────


class TestPlayerRecord:
    def test_accumulate_sums_counters(self):
        base = PlayerRecord("1", "A", 10, 5, 1500, 1)
        update = PlayerRecord("1", "A", 20, 15, 2500, 2)
        merged = base.accumulate(update)
        assert merged == PlayerRecord("1", "A", 30, 20, 4000, 3)

    def test_accumulate_leaves_original_untouched(self):
        base = PlayerRecord("1", "A", 10, 5, 1500, 1)
        base.accumulate(PlayerRecord("1", "A", 1, 1, 1, 1))
        assert base.total_kills == 10

    def test_is_immutable(self):
        record = PlayerRecord("1", "A")
        with pytest.raises(AttributeError):
            record.total_kills = 3


class TestRatedPlayer:
    def test_from_record_derives_stats(self):
        record = PlayerRecord("7", "NiKo", 580, 480, 56000, 28)
        player = RatedPlayer.from_record(record)
        assert player.id == "7"
        assert player.name == "NiKo"
        assert player.stats == calculate_stats(record)
        assert player.rating == player.stats.rating

    def test_from_stats_backs_out_kd(self):
        player = RatedPlayer.from_stats("1", "A", rating=5.0, average_damage=100.0)
        assert player.stats.kd_ratio == pytest.approx(2.0)
        assert player.rating == 5.0

    def test_from_stats_keeps_explicit_kd(self):
        player = RatedPlayer.from_stats("1", "A", rating=5.0, kd_ratio=0.9)
        assert player.stats.kd_ratio == 0.9

    def test_composite_score_matches_scorer(self):
        player = RatedPlayer.from_record(PlayerRecord("1", "A", 40, 20, 1600, 2))
        assert player.composite_score == calculate_composite_score(player.stats)
