"""In-memory model of a two-panel 128x64 graphic LCD controlled by bytes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from retroracers.font import GLYPH_WIDTH, glyph

PANEL_COLUMNS = 64
PAGES = 8
PANEL_COUNT = 2
WIDTH = PANEL_COLUMNS * PANEL_COUNT
HEIGHT = PAGES * 8

CMD_DISPLAY_OFF = 0x3E
CMD_DISPLAY_ON = 0x3F
CMD_SET_COLUMN = 0x40
CMD_SET_PAGE = 0xB8
CMD_START_LINE = 0xC0


@dataclass
class _Panel:
    ram: list[bytearray] = field(
        default_factory=lambda: [bytearray(PANEL_COLUMNS) for _ in range(PAGES)]
    )
    page: int = 0
    column: int = 0
    start_line: int = 0
    on: bool = False

    def command(self, cmd: int) -> None:
        if cmd == CMD_DISPLAY_OFF:
            self.on = False
        elif cmd == CMD_DISPLAY_ON:
            self.on = True
        elif CMD_SET_COLUMN <= cmd < CMD_SET_COLUMN + PANEL_COLUMNS:
            self.column = cmd - CMD_SET_COLUMN
        elif CMD_SET_PAGE <= cmd < CMD_SET_PAGE + PAGES:
            self.page = cmd - CMD_SET_PAGE
        elif cmd >= CMD_START_LINE:
            self.start_line = cmd - CMD_START_LINE

    def data(self, value: int) -> None:
        self.ram[self.page][self.column] = value
        self.column = (self.column + 1) % PANEL_COLUMNS

    def bit(self, x: int, y: int) -> bool:
        return bool(self.ram[y // 8][x] >> (y % 8) & 1)


class Glcd:
    """Two 64x64 controller panels side by side, addressed by page and column."""

    def __init__(self) -> None:
        self._panels = (_Panel(), _Panel())
        self._selected: tuple[int, ...] = (0, 1)

    @property
    def selected(self) -> tuple[int, ...]:
        """Indices of the panels that currently receive commands and data."""
        return self._selected

    def select_panel(self, panel: int) -> None:
        """Select the left (0), right (1) or both (2) panels; other values are ignored."""
        choices = {0: (0,), 1: (1,), 2: (0, 1)}
        if panel in choices:
            self._selected = choices[panel]

    def _targets(self) -> Iterable[_Panel]:
        return (self._panels[i] for i in self._selected)

    def write_cmd(self, cmd: int) -> None:
        """Send an instruction byte to the selected panels."""
        cmd &= 0xFF
        for panel in self._targets():
            panel.command(cmd)

    def write_data(self, value: int) -> None:
        """Write a display byte at the current address; the column advances."""
        value &= 0xFF
        for panel in self._targets():
            panel.data(value)

    def set_column(self, col: int) -> None:
        """Move to a column 0..63; anything else is ignored."""
        if 0 <= col < PANEL_COLUMNS:
            self.write_cmd(CMD_SET_COLUMN + col)

    def set_row(self, row: int) -> None:
        """Move to a page 0..7; anything else is ignored."""
        if 0 <= row < PAGES:
            self.write_cmd(CMD_SET_PAGE + row)

    def write_glyph(self, data: bytes) -> None:
        """Write one six-column glyph or sprite."""
        for value in data[:GLYPH_WIDTH]:
            self.write_data(value)

    def write_string(self, text: str) -> None:
        """Write text with the built-in font."""
        for char in text:
            self.write_glyph(glyph(char))

    def init(self) -> None:
        """Reset addressing on both panels and switch the display on."""
        self._selected = (0, 1)
        for cmd in (CMD_DISPLAY_OFF, CMD_SET_COLUMN, CMD_SET_PAGE, CMD_START_LINE, CMD_DISPLAY_ON):
            self.write_cmd(cmd)

    def clear_screen(self) -> None:
        """Blank both panels and return to page 0, column 0."""
        self._selected = (0, 1)
        for page in range(PAGES):
            self.write_cmd(CMD_SET_PAGE + page)
            for _ in range(PANEL_COLUMNS):
                self.write_data(0)
        self.write_cmd(CMD_SET_COLUMN)
        self.write_cmd(CMD_SET_PAGE)

    def pixel(self, x: int, y: int) -> bool:
        """Return the display RAM bit at screen coordinate (x, y)."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is outside {WIDTH}x{HEIGHT}")
        panel, col = divmod(x, PANEL_COLUMNS)
        return self._panels[panel].bit(col, y)

    def render(self) -> str:
        """Return the visible screen as lines of '#' (lit) and '.' (dark)."""
        lines = []
        for row in range(HEIGHT):
            cells = []
            for panel in self._panels:
                line = (row + panel.start_line) % HEIGHT
                cells.extend(
                    "#" if panel.on and panel.bit(col, line) else "."
                    for col in range(PANEL_COLUMNS)
                )
            lines.append("".join(cells))
        return "\n".join(lines)