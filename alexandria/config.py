"""Library configuration constants."""

from __future__ import annotations
import math

# Output
COLORLESS = False      # Strip ANSI colours from terminal helpers and test output
LOG_ENABLED = True

# Easing constants (https://easings.net/)
EASE_C1 = 1.70158
EASE_C2 = EASE_C1 * 1.525
EASE_C3 = EASE_C1 + 1.0
EASE_C4 = (2.0 * math.pi) / 3.0
EASE_C5 = (2.0 * math.pi) / 4.5
BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75

# Heatmap gradient stops: black, blue, cyan, green, yellow, red, white
HEATMAP_STOPS = (
    (0, 0, 0),
    (0, 0, 255),
    (0, 255, 255),
    (0, 255, 0),
    (255, 255, 0),
    (255, 0, 0),
    (255, 255, 255),
)

# Base64
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# Bitmap layout (bytes)
BMP_FILE_HEADER_SIZE = 14
BMP_INFO_HEADER_SIZE = 40
BMP_COLOR_HEADER_SIZE = 84
BMP_BITS_PER_PIXEL = 32
BMP_SRGB_TAG = 0x73524742  # "sRGB"

# Blank canvas fill (RGBA)
CANVAS_FILL = (255, 255, 255, 255)

# String extraction defaults
EXTRACT_VECTOR_IGNORED = " \n\t[](){}"
EXTRACT_MAP_IGNORED = " \t[](){}"

# POD vectors are prefixed with a signed 64-bit element count
POD_COUNT_FORMAT = "<q"
