from pathlib import Path

from src.ratings.calculations import PlayerRecord

# A division needs at least one player per team
MIN_PLAYERS = 2

# Exhaustive search costs C(n, n // 2); keep it to small rosters
OPTIMAL_BALANCE_MAX_PLAYERS = 6

# Running-gap thresholds under which the next assignment is a coin flip
GREEDY_RANDOM_THRESHOLD = 0.5
BALANCED_RANDOM_THRESHOLD = 0.3  # large rosters routed from "balanced"
WEIGHTED_RANDOM_THRESHOLD = 15.0  # composite-score units

TEAM1_NAME = "Team Alpha"
TEAM2_NAME = "Team Beta"

DEFAULT_ALGORITHM = "balanced"

# Seed roster used by the command-line runner
SAMPLE_ROSTER = [
    PlayerRecord("1", "PlayerOne", total_kills=150, total_deaths=120, total_damage=18000, total_maps=10),
    PlayerRecord("2", "S1mple", total_kills=550, total_deaths=400, total_damage=52000, total_maps=25),
    PlayerRecord("3", "ZywOo", total_kills=510, total_deaths=380, total_damage=48000, total_maps=22),
    PlayerRecord("4", "dev1ce", total_kills=600, total_deaths=450, total_damage=55000, total_maps=30),
    PlayerRecord("5", "NiKo", total_kills=580, total_deaths=480, total_damage=56000, total_maps=28),
]

# Logging
LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE_NAME = "team_balancer.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
