"""
Wang Autotile - Engine Constants

Configuration constants for the autotiling engine: tile selection defaults,
solver limits and logging setup.
"""

# Tile selection
DEFAULT_TILE_PROBABILITY = 1.0
DEFAULT_COLOR_PROBABILITY = 1.0

# Solver
CORRECTIONS_ENABLED_BY_DEFAULT = False
RELAXATION_ENABLED_BY_DEFAULT = True
MAX_CORRECTION_CELLS = 4096  # Neighbors re-solved per fill before giving up

# Logging
LOGGER_NAME = "wangtiles"
LOG_FILE_NAME = "wangtiles.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
LOG_BACKUP_COUNT = 5
