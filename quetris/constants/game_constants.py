"""Default grid and timing parameters for the catcher game."""

GRID_COLUMNS: int = 4
GRID_ROWS: int = 15
TICK_INTERVAL_MS: int = 300
REVEAL_DELAY_MS: int = 500
SWIPE_THRESHOLD_PX: int = 50

MIN_GRID_COLUMNS: int = 2
MAX_GRID_COLUMNS: int = 8
MIN_GRID_ROWS: int = 4
MAX_GRID_ROWS: int = 40
MIN_TICK_INTERVAL_MS: int = 50
MAX_TICK_INTERVAL_MS: int = 2000
