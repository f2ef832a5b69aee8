# Linux console / st colours for a black-background terminal, in escape order:
# 8 normal colours, then 8 bright ones.
ANSI_COLOURS_BLACK_BG = (
    (0x00, 0x00, 0x00),
    (0xCD, 0x00, 0x00),
    (0x00, 0xCD, 0x00),
    (0xCD, 0xCD, 0x00),
    (0x00, 0x00, 0xEE),
    (0xCD, 0x00, 0xCD),
    (0x00, 0xCD, 0xCD),
    (0xE6, 0xE6, 0xE6),
    (0x80, 0x80, 0x80),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0xFF, 0xFF, 0x00),
    (0x5C, 0x5C, 0xFF),
    (0xFF, 0x00, 0xFF),
    (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
)

# Solarized light, as seen on a white-background terminal, same order as above
ANSI_COLOURS_WHITE_BG = (
    (0xEE, 0xE8, 0xD5),
    (0xDC, 0x32, 0x2F),
    (0x85, 0x99, 0x00),
    (0xB5, 0x89, 0x00),
    (0x26, 0x8B, 0xD2),
    (0xD3, 0x36, 0x82),
    (0x2A, 0xA1, 0x98),
    (0x07, 0x36, 0x42),
    (0xFD, 0xF6, 0xE3),
    (0xCB, 0x4B, 0x16),
    (0x93, 0xA1, 0xA1),
    (0x83, 0x94, 0x96),
    (0x65, 0x7B, 0x83),
    (0x6C, 0x71, 0xC4),
    (0x58, 0x6E, 0x75),
    (0x00, 0x2B, 0x36),
)

ANSI_FG_ESCAPES = tuple(f"\033[0;3{i}m" for i in range(8)) + tuple(f"\033[1;3{i}m" for i in range(8))

# Only the 8 normal colours are available as backgrounds
ANSI_BG_ESCAPES = tuple(f"\033[4{i}m" for i in range(8))

ANSI_RESET = "\033[0m"

# Upper half block: foreground paints the top sample, background the bottom one
HALF_BLOCK = "▀"

# Sparse to dense
LUMINANCE_RAMP = " .,-~+=@"

# File signatures, used when the extension says nothing
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8\xff"
GIF_MAGIC = b"GIF8"
BMP_MAGIC = b"BM"
ICO_MAGIC = b"\x00\x00\x01\x00"
PPM_MAGICS = (b"P1", b"P2", b"P3", b"P4", b"P5", b"P6")
