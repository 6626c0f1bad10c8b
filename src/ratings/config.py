# Rating formula: rating = kd_ratio * KD_RATING_WEIGHT + average_damage / ADR_RATING_DIVISOR
KD_RATING_WEIGHT = 2.0
ADR_RATING_DIVISOR = 100.0

# Composite score weights (must sum to 1.0)
COMPOSITE_WEIGHTS = {
    "rating": 0.60,
    "kd": 0.25,
    "adr": 0.15,
}

# Caps applied before weighting so a single outlier stat can't dominate
KD_CAP = 3.0
ADR_RATIO_CAP = 1.0  # i.e. 100 ADR

# K/D and ADR components are scaled onto the same 0-100 range as each other
COMPOSITE_SCALE = 100.0

# Leaderboard export columns, in output order
RATINGS_CSV_COLUMNS = [
    "Rank",
    "Player",
    "Rating",
    "K/D Ratio",
    "Avg Damage",
    "Total Kills",
    "Total Deaths",
    "Total Damage",
    "Total Maps",
]

# Columns required to build a roster from a DataFrame
ROSTER_FRAME_COLUMNS = [
    "id",
    "name",
    "total_kills",
    "total_deaths",
    "total_damage",
    "total_maps",
]
