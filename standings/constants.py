"""Fixed format and scoring constants for biathlon result records."""

FIELD_SEPARATOR = ","
TIME_SEPARATOR = ":"

BOUTS_PER_RECORD = 3
# number, name, country, ski time, then one field per bout
EXPECTED_FIELD_COUNT = 4 + BOUTS_PER_RECORD

MISS_SYMBOL = "o"
HIT_SYMBOL = "x"

# Seconds added to the ski time for every missed shot.
PENALTY_PER_MISS = 10
SECONDS_PER_MINUTE = 60.0

PODIUM_SIZE = 3
