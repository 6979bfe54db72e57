"""Shared constants for ANSI-to-SVG conversion."""

from types import MappingProxyType

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SGR foreground codes (30-37 normal, 90-97 bright) to hex colors
ANSI_COLORS_HEX = MappingProxyType({
    30: "#000000",  # Black
    31: "#CD3131",  # Red
    32: "#0DBC79",  # Green
    33: "#E5E510",  # Yellow
    34: "#2472C8",  # Blue
    35: "#BC3F99",  # Magenta
    36: "#11A8CD",  # Cyan
    37: "#E5E5E5",  # White
    90: "#666666",  # Bright Black
    91: "#F14C4C",  # Bright Red
    92: "#23D18B",  # Bright Green
    93: "#F5F543",  # Bright Yellow
    94: "#3B8EEA",  # Bright Blue
    95: "#D670B2",  # Bright Magenta
    96: "#29B8DB",  # Bright Cyan
    97: "#FFFFFF",  # Bright White
})

# Default foreground (reset state) and canvas background
DEFAULT_FG_HEX = "#FFFFFF"
DEFAULT_BG_HEX = "#1E1E1E"

# Level steps of the xterm 6x6x6 color cube (256-color indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Standard 16-color names (index into the 256-color palette)
COLORS_16 = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}
