"""Shared constants for ANSI art conversion."""

# Screen geometry
ROWS = 1024
COLS = 80
TAB_WIDTH = 8

# Control bytes
LF = 0x0A
CR = 0x0D
TAB = 0x09
EOF_MARKER = 0x1A  # ^Z, DOS end-of-file
ESC = 0x1B
LEFT_BRACKET = 0x5B  # '[' after ESC makes a CSI
QUESTION = 0x3F
SEMICOLON = 0x3B

# CSI parsing limits
MAX_SEQUENCE_LENGTH = 64
MAX_PARAMS = 3
MAX_PARAM_DIGITS = 4

# mIRC color-code introducer (^C)
MIRC_COLOR = "\x03"
