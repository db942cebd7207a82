# -----------------------------
# Configuration (tweak as needed)
# -----------------------------

SCREEN_W, SCREEN_H = 1280, 720     # default window size
TARGET_FPS = 60                    # clock.tick() cap; 0 means uncapped

# Frame rate sampling
FRAME_HISTORY_SIZE = 120           # inter-frame durations kept (~2s at 60 fps)

# Ripple lifecycle
RIPPLE_LIFETIME_SEC = 1.0          # ripple expires once older than this
RIPPLE_MAX_RADIUS = 300            # px, radius stops growing here
RIPPLE_GROWTH_PER_SEC = 100        # px per second
RIPPLE_STROKE = 2                  # ring line width

# Contacts
TOUCH_RADIUS = 30                  # filled disc drawn under each finger
TOUCH_LABEL_SIZE = 25

# Contact colors, assigned by pointer id modulo len(PALETTE)
PALETTE = [
    (255, 87, 51),    # red-orange
    (51, 255, 87),    # green
    (51, 87, 255),    # blue
    (255, 51, 245),   # pink
    (245, 255, 51),   # yellow
    (51, 255, 245),   # cyan
]

# HUD
BACKGROUND_COLOR = (240, 240, 240)
HUD_TEXT_COLOR = (255, 255, 255)
HUD_CARD_COLOR = (0, 0, 0, 0xB0)   # translucent black
HUD_MARGIN = 16
HUD_PADDING = 8
HUD_FONT_SIZE = 24
HUD_SMALL_FONT_SIZE = 20

# Frame time graph
GRAPH_W, GRAPH_H = 240, 60
GRAPH_CEILING_MS = 50.0            # durations above this are clipped to the top
GRAPH_LINE_COLOR = (80, 220, 120)
GRAPH_BUDGET_COLOR = (220, 220, 220)
