from __future__ import annotations

# --- Chamber defaults ---
HOUSE_SEATS = 435
DEFAULT_MIN_SEATS = 1  # every state gets at least one representative

# --- Input columns ---
NAME_COLUMN = "name"
POPULATION_COLUMN = "population"

PROGRESS_MESSAGE = "Now assigning seat {seat} of {total}"
