"""
Constants for the design token system.

No magic strings - field names and message templates live here.
"""

# Marks a token value as a reference to another token ("@primary")
TOKEN_PREFIX = "@"

# Gradient descriptor fields
COLOR_STOPS_KEY = "colorStops"
STOP_COLOR_KEY = "color"

# Style fields that carry colours
FILL_KEY = "fill"
STROKE_KEY = "stroke"
PAINT_KEYS: tuple[str, ...] = (FILL_KEY, STROKE_KEY)

DEFAULT_THEME = "light"


class ErrorMessages:
    """Standardized error messages."""

    THEME_NOT_FOUND = "Theme '{name}' not found."
    THEME_EXISTS = "Theme already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
    CYCLIC_REFERENCE = "Cyclic token reference: {chain}"
    INVALID_NAMESPACE = "Token namespace must map category names to token mappings."
    INVALID_MODE = "Invalid mode: '{mode}'. Expected 'resolve' or 'paint'."


class SuccessMessages:
    """Standardized success messages."""

    THEME_APPLIED = "Applied theme '{name}' ({count} tokens)."
    TOKENS_REGISTERED = "Registered {count} tokens in {categories} categories."
    THEME_COPIED = "Theme copied to project"
