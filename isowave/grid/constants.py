"""
Fixed grid and animation constants for isowave.
"""

# Diamond size in pixels
TILE_WIDTH = 40
TILE_HEIGHT = 20

# Oscillation period of a cell's shade, in seconds
PERIOD = 2.0

# Seconds of phase delay per unit of grid distance from the origin
DELAY_FACTOR = 0.05

# Gray reference levels (0-255)
LIGHT_LEVEL = 240
DARK_LEVEL = 60
BACKGROUND_LEVEL = 245
OUTLINE_LEVEL = 200

OUTLINE_WIDTH = 1
