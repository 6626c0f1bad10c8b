"""Shared fixtures for the team balancer test suite."""

import random

import pytest

from src.ratings.calculations import PlayerRecord, RatedPlayer


def _make_player(pid, rating, kd_ratio=None, average_damage=0.0):
    """A RatedPlayer with pre-derived stats and a recognisable name."""
    return RatedPlayer.from_stats(
        id=pid,
        name=f"Player {pid}",
        rating=rating,
        kd_ratio=kd_ratio,
        average_damage=average_damage,
    )


def _make_roster(ratings):
    """One player per rating, ids p0, p1, ... in the given order."""
    return [_make_player(f"p{i}", r) for i, r in enumerate(ratings)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def four_player_roster():
    return _make_roster([10.0, 8.0, 6.0, 4.0])


@pytest.fixture
def sample_records():
    """Raw records mirroring the leaderboard's seed data."""
    return [
        PlayerRecord("1", "PlayerOne", total_kills=150, total_deaths=120, total_damage=18000, total_maps=10),
        PlayerRecord("2", "S1mple", total_kills=550, total_deaths=400, total_damage=52000, total_maps=25),
        PlayerRecord("3", "ZywOo", total_kills=510, total_deaths=380, total_damage=48000, total_maps=22),
        PlayerRecord("4", "dev1ce", total_kills=600, total_deaths=450, total_damage=55000, total_maps=30),
        PlayerRecord("5", "NiKo", total_kills=580, total_deaths=480, total_damage=56000, total_maps=28),
    ]
