"""5x7 bitmap font and sprites for the graphic LCD, one byte per column."""

from __future__ import annotations

GLYPH_WIDTH = 6

FONT_DIGITS: tuple[bytes, ...] = (
    bytes((0x3E, 0x51, 0x49, 0x45, 0x3E, 0x00)),  # 0
    bytes((0x00, 0x42, 0x7F, 0x40, 0x00, 0x00)),  # 1
    bytes((0x42, 0x61, 0x51, 0x49, 0x46, 0x00)),  # 2
    bytes((0x21, 0x41, 0x45, 0x4B, 0x31, 0x00)),  # 3
    bytes((0x18, 0x14, 0x12, 0x7F, 0x10, 0x00)),  # 4
    bytes((0x27, 0x45, 0x45, 0x45, 0x39, 0x00)),  # 5
    bytes((0x3C, 0x4A, 0x49, 0x49, 0x30, 0x00)),  # 6
    bytes((0x01, 0x71, 0x09, 0x05, 0x03, 0x00)),  # 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 8
    bytes((0x06, 0x49, 0x49, 0x29, 0x1E, 0x00)),  # 9
)

FONT_UPPERCASE: tuple[bytes, ...] = (
    bytes((0x7E, 0x11, 0x11, 0x11, 0x7E, 0x00)),  # A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x36, 0x00)),  # B
    bytes((0x3E, 0x41, 0x41, 0x41, 0x22, 0x00)),  # C
    bytes((0x7F, 0x41, 0x41, 0x22, 0x1C, 0x00)),  # D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x41, 0x00)),  # E
    bytes((0x7F, 0x09, 0x09, 0x01, 0x01, 0x00)),  # F
    bytes((0x3E, 0x41, 0x41, 0x51, 0x32, 0x00)),  # G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x7F, 0x00)),  # H
    bytes((0x00, 0x41, 0x7F, 0x41, 0x00, 0x00)),  # I
    bytes((0x20, 0x40, 0x41, 0x3F, 0x01, 0x00)),  # J
    bytes((0x7F, 0x08, 0x14, 0x22, 0x41, 0x00)),  # K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40, 0x00)),  # L
    bytes((0x7F, 0x02, 0x04, 0x02, 0x7F, 0x00)),  # M
    bytes((0x7F, 0x04, 0x08, 0x10, 0x7F, 0x00)),  # N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x3E, 0x00)),  # O
    bytes((0x7F, 0x09, 0x09, 0x09, 0x06, 0x00)),  # P
    bytes((0x3E, 0x41, 0x51, 0x21, 0x5E, 0x00)),  # Q
    bytes((0x7F, 0x09, 0x19, 0x29, 0x46, 0x00)),  # R
    bytes((0x46, 0x49, 0x49, 0x49, 0x31, 0x00)),  # S
    bytes((0x01, 0x01, 0x7F, 0x01, 0x01, 0x00)),  # T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x3F, 0x00)),  # U
    bytes((0x1F, 0x20, 0x40, 0x20, 0x1F, 0x00)),  # V
    bytes((0x7F, 0x20, 0x18, 0x20, 0x7F, 0x00)),  # W
    bytes((0x63, 0x14, 0x08, 0x14, 0x63, 0x00)),  # X
    bytes((0x03, 0x04, 0x78, 0x04, 0x03, 0x00)),  # Y
    bytes((0x61, 0x51, 0x49, 0x45, 0x43, 0x00)),  # Z
)

SPACE = bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00))
PERIOD = bytes((0x00, 0x60, 0x60, 0x00, 0x00, 0x00))
COLON = bytes((0x00, 0x36, 0x36, 0x00, 0x00, 0x00))
CAR_SPRITE = bytes((0x66, 0xFF, 0x43, 0x43, 0xFF, 0x66))
ENEMY_SPRITE = bytes((0x66, 0xFF, 0x7F, 0x7F, 0xFF, 0x66))
OBSTACLE_SPRITE = ENEMY_SPRITE
CRASH_SPRITE = bytes((0xA5, 0x5A, 0x3C, 0x3C, 0x5A, 0xA5))


def glyph(char: str) -> bytes:
    """Return the six column bytes for a character; unknown characters are blank."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "0" <= char <= "9":
        return FONT_DIGITS[ord(char) - ord("0")]
    if "A" <= char <= "Z":
        return FONT_UPPERCASE[ord(char) - ord("A")]
    if char == ":":
        return COLON
    if char == ".":
        return PERIOD
    return SPACE