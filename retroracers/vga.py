"""In-memory model of a VGA pixel buffer with a character overlay."""

from __future__ import annotations

STANDARD_X = 320
STANDARD_Y = 240
TEXT_COLUMNS = 128
TEXT_ROWS = 64
TEXT_CLEAR_WIDTH = 97

_DATA_BITS = {
    0x0: 1,
    0x7: 8,
    0x11: 8,
    0x12: 9,
    0x14: 16,
    0x17: 24,
    0x19: 30,
    0x31: 8,
    0x32: 12,
    0x33: 16,
    0x37: 32,
    0x39: 40,
}


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def resample_rgb(num_bits: int, color: int) -> int:
    """Reduce a 24-bit RGB colour to the pixel format of the given depth."""
    if num_bits == 8:
        color = ((color >> 16) & 0xE0) | ((color >> 11) & 0x1C) | ((color >> 6) & 0x03)
        color = (color << 8) | color
    elif num_bits == 16:
        color = ((color >> 8) & 0xF800) | ((color >> 5) & 0x07E0) | ((color >> 3) & 0x001F)
    return color


def get_data_bits(mode: int) -> int:
    """Bits per pixel for a resampler mode; 16 for unknown modes."""
    return _DATA_BITS.get(mode, 16)


class VgaScreen:
    """A pixel buffer addressed in screen coordinates plus a text buffer."""

    def __init__(self, width: int = STANDARD_X, height: int = STANDARD_Y, data_bits: int = 16) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid resolution {width}x{height}")
        self.width = width
        self.height = height
        self.data_bits = data_bits
        self.res_offset = 1 if width == 160 else 0
        self.col_offset = 1 if data_bits == 8 else 0
        self._x_factor = 1 << (self.res_offset + self.col_offset)
        self._y_factor = 1 << self.res_offset
        self._cols = (width - 1) // self._x_factor + 1
        self._rows = (height - 1) // self._y_factor + 1
        self._pixels = [[0] * self._cols for _ in range(self._rows)]
        self._text = [[" "] * TEXT_COLUMNS for _ in range(TEXT_ROWS)]

    def box(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Fill the rectangle between two corners, inclusive, clipped to the buffer."""
        color &= 0xFFFF
        c1 = max(_div_trunc(x1, self._x_factor), 0)
        c2 = min(_div_trunc(x2, self._x_factor), self._cols - 1)
        r1 = max(_div_trunc(y1, self._y_factor), 0)
        r2 = min(_div_trunc(y2, self._y_factor), self._rows - 1)
        for row in self._pixels[r1 : r2 + 1]:
            row[c1 : c2 + 1] = [color] * max(c2 - c1 + 1, 0)

    def sprite(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a width x height rectangle whose top-left corner is (x, y)."""
        self.box(x, y, x + width - 1, y + height - 1, color)

    def clear(self, color: int) -> None:
        """Fill the whole screen with one colour."""
        self.box(0, 0, self.width - 1, self.height - 1, color)

    def text(self, x: int, y: int, text: str) -> None:
        """Write characters into the text buffer; long text runs into the next row."""
        offset = (y << 7) + x
        for char in text:
            row, col = divmod(offset, TEXT_COLUMNS)
            if 0 <= row < TEXT_ROWS and offset >= 0:
                self._text[row][col] = char
            offset += 1

    def clear_text(self, first: int, last: int) -> None:
        """Blank text rows first..last-1."""
        for y in range(first, last):
            self.text(0, y, " " * TEXT_CLEAR_WIDTH)

    def pixel(self, x: int, y: int) -> int:
        """Colour stored for screen coordinate (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self._pixels[y // self._y_factor][x // self._x_factor]

    def text_row(self, y: int) -> str:
        """Contents of one text row without trailing blanks."""
        if not 0 <= y < TEXT_ROWS:
            raise IndexError(f"text row {y} is outside 0..{TEXT_ROWS - 1}")
        return "".join(self._text[y]).rstrip()