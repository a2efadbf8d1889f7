"""Stock car racing game on a two-panel 128x64 graphic LCD."""

from __future__ import annotations

import argparse
import enum

from retroracers.font import CAR_SPRITE, CRASH_SPRITE, OBSTACLE_SPRITE, SPACE, glyph
from retroracers.glcd import Glcd

ROAD_POINTS_MAX = 8
OBSTACLES_MAX = 4
ROAD_RADIUS = 18
WIN_DISTANCE = 15000
IDLE_KEY = "."

_LEFT_PANEL = 0
_RIGHT_PANEL = 1


def _u8(value: int) -> int:
    return value & 0xFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class Status(enum.Enum):
    """Outcome of one frame of play."""

    RUNNING = "running"
    GAME_OVER = "game over"
    WON = "won"


class Lcg16:
    """Linear congruential generator keeping a 16-bit state."""

    MULTIPLIER = 1103515245
    INCREMENT = 12345

    def __init__(self, seed: int = 10) -> None:
        self.seed = _u16(seed)

    def next(self) -> int:
        """Advance the state and return it."""
        self.seed = _u16(self.seed * self.MULTIPLIER + self.INCREMENT)
        return self.seed

    def range(self, low: int, high: int) -> int:
        """Return a value in [low, high) using 16-bit unsigned arithmetic."""
        span = _u16(high - low)
        if span == 0:
            raise ValueError(f"empty range [{low}, {high})")
        self.next()
        return _u16(low + self.seed % span)


def int_to_str5(value: int) -> str:
    """Format the last five decimal digits of a value, zero padded."""
    return f"{value % 100000:05d}"


def lerp(a: int, b: int, t: int) -> int:
    """Interpolate between two bytes with t as an 8-bit fraction of 256."""
    a, b, t = _u8(a), _u8(b), _u8(t)
    return _u8(a + (_s16((b - a) * t) >> 8))


class StockCar:
    """Game state and drawing for the stock car race."""

    def __init__(self, display: Glcd, seed: int = 10) -> None:
        self.display = display
        self.rng = Lcg16(seed)
        self.tunnel = False
        self.player_x = 0
        self.player_last_x = 0
        self.player_speed = 0
        self.player_lives = 0
        self.distance = 0
        self.last_distance = 0
        self.game_over = False
        self.won = False
        self.road_radius = ROAD_RADIUS
        self.road_points_x = [0] * ROAD_POINTS_MAX
        self.road_points_y = [0] * ROAD_POINTS_MAX
        self.road_last_min_x = [63] * 8
        self.road_last_max_x = [0] * 8
        self.obstacles_x = [0] * OBSTACLES_MAX
        self.obstacles_y = [0] * OBSTACLES_MAX
        self.reset()

    # ----------------------------------------------------------------- setup

    def reset(self) -> None:
        """Start a new race: new road, new obstacles, fresh screen and HUD."""
        self.distance = 0
        self.last_distance = 0
        self.game_over = False
        self.won = False
        self.player_x = 29
        self.player_speed = 3
        self.player_lives = 9
        self._road_init()
        self._obstacles_init()
        self.display.clear_screen()
        self._player_draw()
        self._road_draw()
        self.draw_hud()

    def _road_init(self) -> None:
        self.road_radius = ROAD_RADIUS
        self.road_last_min_x = [63] * 8
        self.road_last_max_x = [0] * 8
        self.road_points_x[-2:] = [31, 31]
        self.road_points_y[-2:] = [0, 80]
        for _ in range(ROAD_POINTS_MAX - 2):
            self.road_new_segment()

    def _obstacles_init(self) -> None:
        self.obstacles_x[-1] = 40
        self.obstacles_y[-1] = 60
        for _ in range(OBSTACLES_MAX):
            self.obstacle_respawn()

    # ------------------------------------------------------------------ road

    def road_new_segment(self) -> None:
        """Drop the oldest road point and add a new one further ahead."""
        del self.road_points_x[0]
        del self.road_points_y[0]
        x = _u8(self.rng.range(self.road_radius, 63 - self.road_radius))
        y = _u16(self.road_points_y[-1] + 60 + (self.rng.next() & 0x3F))
        self.road_points_x.append(x)
        self.road_points_y.append(y)

    def road_x(self, y: int, segment: int) -> int:
        """Road centre at world distance y, interpolated within a segment."""
        x0 = self.road_points_x[segment]
        x1 = self.road_points_x[segment + 1]
        y0 = self.road_points_y[segment]
        y1 = self.road_points_y[segment + 1]
        seg_len = _u8(y1 - y0)
        if seg_len == 0:
            raise ZeroDivisionError(f"road segment {segment} has no length")
        t = _u8(_u16(_u16(y - y0) * 256) // seg_len)
        return lerp(x0, x1, t)

    def find_road_segment(self, y: int) -> int:
        """Index of the segment holding y; the last segment when none does."""
        points = self.road_points_y
        for seg, (start, end) in enumerate(zip(points, points[1:])):
            if start < y <= end:
                return seg
        return ROAD_POINTS_MAX - 2

    def _road_update(self) -> None:
        self.last_distance = self.distance
        self.distance = _u16(self.distance + self.player_speed)
        self._hud_update_distance()
        if self.road_points_y[1] < self.distance:
            self.road_new_segment()

    def _road_draw_page(self, page: int, road_x: list[int]) -> None:
        min_x = min(63, *road_x)
        max_x = max(0, *road_x)
        start = min(min_x, self.road_last_min_x[page])
        end = max(max_x, self.road_last_max_x[page])
        self.road_last_min_x[page] = min_x
        self.road_last_max_x[page] = max_x

        d = self.display
        d.set_row(page)
        for edge_start in (start - self.road_radius, start + self.road_radius):
            d.set_column(_u8(edge_start))
            for i in range(start, end + 1):
                byte = 0
                for b, x in enumerate(road_x):
                    if i == x:
                        byte |= 0x80 >> b
                if self.tunnel:
                    byte |= self._byte_mask(i, page)
                d.write_data(byte)

    def _road_draw(self) -> None:
        y = self.distance
        seg = 0
        self.display.select_panel(_LEFT_PANEL)
        for page in range(8):
            road_x = []
            for _ in range(8):
                x = self.road_x(y, seg)
                road_x.append(x)
                y = _u16(y + 1)
                if y >= self.road_points_y[seg + 1]:
                    seg += 1
                if page == 1 and (
                    self.collides(x - self.road_radius)
                    or self.collides(x + self.road_radius)
                ):
                    self._crash()
            self._road_draw_page(7 - page, road_x)

    # ------------------------------------------------------------- obstacles

    def obstacle_respawn(self) -> None:
        """Drop the nearest obstacle and place a new one on the road ahead."""
        del self.obstacles_x[0]
        del self.obstacles_y[0]
        y = _u16(self.obstacles_y[-1] + 60 + (self.rng.next() & 0x3F))
        road = self.road_x(y, self.find_road_segment(y))
        x = _u8(
            self.rng.range(
                _u16(road - self.road_radius + 2), _u16(road + self.road_radius - 8)
            )
        )
        self.obstacles_x.append(x)
        self.obstacles_y.append(y)

    def _obstacles_update(self) -> None:
        if self.obstacles_y[0] < self.distance:
            self.obstacle_respawn()

    def _obstacles_draw(self) -> None:
        self.display.select_panel(_LEFT_PANEL)
        # A crash may respawn obstacles mid-loop, so positions are read by slot.
        for i in range(OBSTACLES_MAX):
            y = _u16(self.obstacles_y[i] - self.distance)
            last_y = _u16(self.obstacles_y[i] - self.last_distance)
            x = self.obstacles_x[i]
            if 0 < last_y <= 71:
                self._write_sprite_xy(x, last_y, SPACE)
            if 0 < y <= 71:
                self._write_sprite_xy(x, y, OBSTACLE_SPRITE)
            if 8 < y < 24 and (self.collides(x) or self.collides(x + 6)):
                self._write_sprite_xy(x, y, CRASH_SPRITE)
                self._crash()

    # ---------------------------------------------------------------- player

    def collides(self, x: int) -> bool:
        """Whether column x (as a byte) lies across the player's car."""
        x = _u8(x)
        return self.player_x <= x <= self.player_x + 6

    def handle_input(self, key: str | None) -> None:
        """Steer or change speed from one key; None means no key."""
        self.player_last_x = self.player_x
        if key == "7":
            self.player_x = 0 if self.player_x <= 3 else self.player_x - 3
        elif key == "9":
            self.player_x = min(_u8(self.player_x + 3), 58)
        elif key is not None and key in "12345" and len(key) == 1:
            self.player_speed = int(key)
        self._hud_update_speed()

    def _player_draw(self) -> None:
        if self.player_x != self.player_last_x:
            d = self.display
            d.select_panel(_LEFT_PANEL)
            d.set_row(6)
            d.set_column(self.player_last_x)
            d.write_glyph(SPACE)
            d.set_column(self.player_x)
            d.write_glyph(CAR_SPRITE)

    def _crash(self) -> None:
        d = self.display
        d.select_panel(_LEFT_PANEL)
        d.set_row(6)
        d.set_column(self.player_x)
        d.write_glyph(CRASH_SPRITE)

        if self.player_lives == 0:
            self.game_over = True
            return
        self.player_lives -= 1
        self._hud_update_lives()

        d.select_panel(_LEFT_PANEL)
        gap = _u16(self.obstacles_y[0] - self.distance)
        if gap < 40:
            self._write_sprite_xy(self.obstacles_x[0], gap, SPACE)
            self.obstacle_respawn()

        d.set_row(6)
        d.set_column(self.player_x)
        d.write_glyph(SPACE)
        ahead = _u16(self.distance + 16)
        self.player_x = _u8(self.road_x(ahead, self.find_road_segment(ahead)) - 3)
        d.set_column(self.player_x)
        d.write_glyph(CAR_SPRITE)

    # ----------------------------------------------------------------- frame

    def step(self, key: str | None = None) -> Status:
        """Run one frame with an optional key press and report the outcome."""
        self._player_draw()
        self._obstacles_draw()
        self._road_draw()
        self.handle_input(key)
        self._obstacles_update()
        self._road_update()
        if self.distance >= WIN_DISTANCE:
            self.won = True
        if self.game_over:
            return Status.GAME_OVER
        if self.won:
            return Status.WON
        return Status.RUNNING

    # ------------------------------------------------------------------- HUD

    def _hud_update_distance(self) -> None:
        d = self.display
        d.select_panel(_RIGHT_PANEL)
        d.set_row(2)
        d.set_column(34)
        d.write_string(int_to_str5(self.distance))

    def _hud_digit(self, row: int, value: int) -> None:
        d = self.display
        d.select_panel(_RIGHT_PANEL)
        d.set_row(row)
        d.set_column(58)
        d.write_glyph(glyph(str(value % 10)))

    def _hud_update_speed(self) -> None:
        self._hud_digit(3, self.player_speed)

    def _hud_update_lives(self) -> None:
        self._hud_digit(4, self.player_lives)

    def draw_hud(self) -> None:
        """Draw the labels and values of the right-hand panel."""
        d = self.display
        d.select_panel(_RIGHT_PANEL)
        for row, label in ((2, "DIST."), (3, "SPEED"), (4, "LIVES")):
            d.set_row(row)
            d.set_column(0)
            d.write_string(label)
        self._hud_update_distance()
        self._hud_update_speed()
        self._hud_update_lives()

    # --------------------------------------------------------------- screens

    def _message(self, lines: tuple[tuple[int, int, str], ...]) -> None:
        d = self.display
        d.select_panel(_LEFT_PANEL)
        for row, col, text in lines:
            d.set_row(row)
            d.set_column(col)
            d.write_string(text)

    def _show_title(self) -> None:
        self._message(((2, 4, "STOCK CAR"),))

    def _hide_title(self) -> None:
        self._message(((2, 4, " " * 9),))

    def _show_game_over(self) -> None:
        self._message(((2, 20, "GAME"), (3, 20, "OVER")))

    def _show_win(self) -> None:
        self._message(((2, 4, "WELL DONE"), (3, 10, "YOU WIN")))

    # ---------------------------------------------------------------- tunnel

    def _f1(self, x: int, y: int) -> int:
        x1 = self.player_x + 6
        return -8 * x - 15 * y + 705 + 8 * x1

    def _f1_prime(self, x: int, y: int) -> int:
        x1, y1, dx, dy = self.player_x, 63 - 16, -15, -8
        return dy * x - dx * y + dx * y1 - dy * x1

    def _mask_xy(self, x: int, y: int, page: int) -> bool:
        if page == 7 or page < 2:
            return True
        if page == 2:
            return self._f1(x, y) < 0 or self._f1_prime(x, y) > 0
        return False

    def _byte_mask(self, x: int, page: int) -> int:
        x, page = _u8(x), _u8(page)
        byte = 0
        for b in range(8):
            if self._mask_xy(x, _u8((7 - page) * 8 + b), page):
                byte |= 0x80 >> b
        return byte

    def _write_sprite_xy(self, x: int, y: int, sprite: bytes) -> None:
        x, y = _u8(x), _u8(y)
        page, offset = y >> 3, y & 0x07
        d = self.display
        if page < 8:
            d.set_row(_u8(7 - page))
            d.set_column(x)
            for i, value in enumerate(sprite):
                byte = _u8(value << (8 - offset))
                if self.tunnel:
                    byte |= self._byte_mask(x + i, 7 - page)
                d.write_data(byte)
        if page > 0:
            d.set_row(_u8(8 - page))
            d.set_column(x)
            for i, value in enumerate(sprite):
                byte = value >> offset
                if self.tunnel:
                    byte |= self._byte_mask(x + i, 8 - page)
                d.write_data(byte)


def main(argv: list[str] | None = None) -> int:
    """Play a scripted race and print the final screen."""
    parser = argparse.ArgumentParser(
        prog="stock-car", description="Drive the stock car from a script of key presses."
    )
    parser.add_argument("--seed", type=int, default=10, help="random seed")
    parser.add_argument(
        "--keys",
        default="",
        help="one character per frame: 7/9 steer, 1-5 set speed, '.' for no key",
    )
    parser.add_argument("--frames", type=int, default=200, help="frames to play")
    args = parser.parse_args(argv)

    display = Glcd()
    display.init()
    game = StockCar(display, args.seed)
    keys = iter(args.keys)

    game._show_title()
    for key in keys:
        if key != IDLE_KEY:
            break
        game.rng.seed = _u16(game.rng.seed + 1)
    game._hide_title()

    status = Status.RUNNING
    for _ in range(args.frames):
        key = next(keys, IDLE_KEY)
        status = game.step(None if key == IDLE_KEY else key)
        if status is Status.GAME_OVER:
            game._show_game_over()
            break
        if status is Status.WON:
            game._show_win()
            break

    print(display.render())
    print(f"status: {status.value}")
    print(f"distance: {game.distance}")
    print(f"lives: {game.player_lives}")
    return 0