"""Display and frame-rate constants."""

# Logical canvas size in pixels (the presentation layer scales to fit)
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600

# Sky/surface band drawn above the water
SURFACE_BAND_HEIGHT = 150

# Target ticks per second for the frame clock
FRAME_RATE = 60

# Fisher sprite anchor (rendering only)
FISHER_TOP = 50
FISHER_HEIGHT = 30
FISHER_WIDTH = 20

# Drawn radii (rendering only, collision uses COLLISION_RADIUS)
HOOK_DRAW_RADIUS = 5
FISH_DRAW_RADIUS = 10

SKY_COLOR = (135, 206, 235)
WATER_COLOR = (30, 144, 255)
FISHER_COLOR = (139, 69, 19)
LINE_COLOR = (0, 0, 0)

# Width of separator lines in console output
SEPARATOR_WIDTH = 60
