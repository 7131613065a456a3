from pathlib import Path

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540

# Pixel size of one board cell; board dimensions follow from the screen size.
CELL_SIZE = 20
BOARD_COLS = SCREEN_WIDTH // CELL_SIZE
BOARD_ROWS = SCREEN_HEIGHT // CELL_SIZE

# Seconds between generations while running.
TICK_INTERVAL = 1 / 8
# Upper bound on generations advanced for a single long frame.
MAX_STEPS_PER_TICK = 4

UPDATE_RATE = 1 / 60

WINDOW_TITLE = "Game of Life"
ICON_PATH = Path(__file__).resolve().parent / "assets" / "icon.png"

BACKGROUND_COLOR = (0, 0, 0)
LIVE_CELL_COLOR = (255, 255, 255)
PAUSED_CELL_COLOR = (200, 200, 120)
# Gap in pixels left between neighbouring squares.
CELL_PADDING = 1

# arcade.MOUSE_BUTTON_LEFT / arcade.key.SPACE, kept numeric to avoid importing arcade.
MOUSE_BUTTON_LEFT = 1
KEY_SPACE = 32
