"""
constants.py: Centralized configuration for the game world and host window.
"""

# -------- Canvas & Window Config --------
BASE_SIZE = 256                 # Logical canvas edge before scaling
SCALE = 2                       # Integer window scale factor
SIZE = BASE_SIZE * SCALE
WINDOW_TITLE = "Flappy Bird"

# Time
FPS = 60
FRAME_SLEEP = 1.0 / FPS         # Fixed sleep between frames (not compensated)

# -------- Scrolling Config (units / frame) --------
BACKGROUND_SPEED = 1
FLOOR_SPEED = 3

# -------- Animation Config --------
FLAP_FRAME_COUNT = 3
FLAP_FRAME_INTERVAL = 5         # Counter runs 0..5, advance on overflow
FLAP_FRAME_COUNTER_START = 5    # First tick advances the frame

# -------- Obstacle Config --------
OBSTACLE_COUNT = 4              # Live obstacles on screen
OBSTACLE_POOL_SIZE = 10
OBSTACLE_SPEED = 3
OBSTACLE_SPACING = 170          # Horizontal distance between initial obstacles
OBSTACLE_RECYCLE_MARGIN = 65    # Extra distance past the right edge on recycle
VERTICAL_GAP = 105              # Space between top and bottom pipe
TOP_PIPE_MIN_OFFSET = 100       # topRect.y is drawn from -(100..239)
TOP_PIPE_OFFSET_RANGE = 140

# -------- Physics Config (units / frame) --------
GRAVITY = 0.25                  # Added to velocity every falling frame
FLAP_VELOCITY = -4.5            # Velocity snapped on every ascending frame
IDLE_X_WIDTHS = 3               # Idle x sits this many bird widths left of center

# -------- Asset Config --------
# Logical name -> file name inside the assets directory
ASSET_FILES = {
    "background": "bg.png",
    "floor": "floor.png",
    "tap_to_start": "tap_to_start_the_game.png",
    "flappy_sheet": "flappy_sprite_sheet.png",
    "top_pipe": "top_pipe.png",
    "bottom_pipe": "bottom_pipe.png",
}
FLAP_FRAME_SIZE = (17, 12)      # One frame of the sprite sheet, sliced horizontally

# Unscaled asset sizes used when no images are loaded (headless simulation)
DEFAULT_ASSET_SIZES = {
    "background": (144, 256),
    "floor": (168, 56),
    "tap_to_start": (114, 98),
    "top_pipe": (26, 160),
    "bottom_pipe": (26, 160),
}

# -------- HUD Config --------
HUD_COLOR = (255, 255, 0)
HUD_FONT = "timesnewroman"
HUD_FONT_SIZE = 16              # Multiplied by the distortion factor
RECORD_TEXT_POS = (10, 35)      # Text baseline
POINT_TEXT_OFFSET = (80, 35)    # From the right edge, text baseline
