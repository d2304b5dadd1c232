"""Window constants and colors for the dial-clock host."""

# Timing
FPS = 60

# Window
WINDOW_W = 720
WINDOW_H = 720
TITLE = "Dial Clock"

# Colors
BG_COLOR = (238, 238, 238)

# Mouse
LEFT_BUTTON = 1
