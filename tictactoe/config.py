import logging
import os

from dotenv import load_dotenv

load_dotenv()

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL_NAME = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = logging.getLevelName(LOG_LEVEL_NAME)
if not isinstance(LOG_LEVEL, int):
    raise ValueError(f"Unknown TICTACTOE_LOG_LEVEL: {LOG_LEVEL_NAME!r}")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
WINDOW_WIDTH = int(os.getenv("TICTACTOE_WINDOW_WIDTH", "500"))
WINDOW_HEIGHT = int(os.getenv("TICTACTOE_WINDOW_HEIGHT", "600"))

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
