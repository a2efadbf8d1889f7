"""Endless runner: a dinosaur jumps over cacti on a VGA screen."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from retroracers.vga import VgaScreen

GROUND_Y = 200
DINO_X = 50
DINO_WIDTH = 16
DINO_HEIGHT = 16
CACTUS_WIDTH = 12
CACTUS_HEIGHT = 20
CLOUD_WIDTH = 20
CLOUD_HEIGHT = 8
MAX_OBSTACLES = 3
MAX_CLOUDS = 6
MAX_SPEED = 10

BLACK = 0x0000
WHITE = 0xFFFF
GREEN = 0x07E0
BROWN = 0x7920
GRAY = 0x8410

IDLE_KEY = "."


class Rng:
    """Linear congruential generator with a 32-bit state returning 15-bit values."""

    def __init__(self, seed: int = 1) -> None:
        self.seed = seed & 0xFFFFFFFF

    def next(self) -> int:
        self.seed = (self.seed * 1103515245 + 12345) & 0xFFFFFFFF
        return (self.seed // 65536) % 32768


class KeyEdge:
    """Detects a push button going from 1 to 0 on any of four keys."""

    def __init__(self) -> None:
        self.last = 0

    def pressed(self, keys: int) -> bool:
        current = keys & 0xF
        edge = bool(self.last & ~current & 0xF)
        self.last = current
        return edge


@dataclass
class Dino:
    x: int = DINO_X
    y: int = GROUND_Y - DINO_HEIGHT
    is_jumping: bool = False
    jump_velocity: int = 0
    ground_y: int = GROUND_Y


@dataclass
class Obstacle:
    x: int = 0
    y: int = GROUND_Y - CACTUS_HEIGHT
    active: bool = False


@dataclass
class Cloud:
    x: int = 0
    y: int = 0
    active: bool = False


class DinoGame:
    """Game state, rules and drawing for the runner."""

    def __init__(self, screen: VgaScreen, seed: int = 1) -> None:
        self.screen = screen
        self.rng = Rng(seed)
        self.score = 0
        self.game_speed = 2
        self.game_over = False
        self.player = Dino()
        self.obstacles = [Obstacle() for _ in range(MAX_OBSTACLES)]
        self.clouds = [Cloud() for _ in range(MAX_CLOUDS)]
        self.reset()

    def reset(self) -> None:
        """Start a new run and clear the screen."""
        width = self.screen.width
        self.score = 0
        self.game_speed = 5
        self.game_over = False
        self.player = Dino()
        self.obstacles = []
        for i in range(MAX_OBSTACLES):
            x = width + i * 150 + self.rng.next() % 100
            self.obstacles.append(Obstacle(x, GROUND_Y - CACTUS_HEIGHT, x <= width))
        self.clouds = []
        for i in range(MAX_CLOUDS):
            x = width + i * 200 + self.rng.next() % 150
            y = 50 + self.rng.next() % 50
            self.clouds.append(Cloud(x, y, x <= width))
        self.screen.clear_text(10, 16)
        self.screen.clear(BLACK)

    def update_dino(self, pressed: bool) -> None:
        """Start a jump on a key press and apply gravity while airborne."""
        p = self.player
        if pressed and not p.is_jumping and not self.game_over:
            p.is_jumping = True
            p.jump_velocity = -8
        if p.is_jumping:
            p.y += p.jump_velocity
            p.jump_velocity += 1
            if p.y >= p.ground_y - DINO_HEIGHT:
                p.y = p.ground_y - DINO_HEIGHT
                p.is_jumping = False
                p.jump_velocity = 0

    def update_obstacles(self) -> None:
        """Scroll cacti left and send those that left the screen back to the right."""
        width = self.screen.width
        for obs in self.obstacles:
            obs.x -= self.game_speed
            if obs.active:
                if obs.x + 2 * CACTUS_WIDTH < 0:
                    obs.x = width + self.rng.next() % 400 + 100
                    obs.active = False
            elif obs.x <= width:
                obs.active = True

    def update_clouds(self) -> None:
        """Scroll clouds at half speed and recycle them off the left edge."""
        width = self.screen.width
        for cloud in self.clouds:
            cloud.x -= self.game_speed // 2
            if cloud.active:
                if cloud.x + 2 * CLOUD_WIDTH < 0:
                    cloud.x = width + self.rng.next() % 500 + 150
                    cloud.y = 50 + self.rng.next() % 50
                    cloud.active = False
            elif cloud.x <= width:
                cloud.active = True

    def check_collision(self) -> bool:
        """Whether the dinosaur overlaps any active cactus."""
        p = self.player
        return any(
            obs.active
            and p.x < obs.x + CACTUS_WIDTH
            and p.x + DINO_WIDTH > obs.x
            and p.y < obs.y + CACTUS_HEIGHT
            and p.y + DINO_HEIGHT > obs.y
            for obs in self.obstacles
        )

    def step(self, pressed: bool = False) -> bool:
        """Advance one frame; a press jumps or, after a crash, restarts. Returns game over."""
        if not self.game_over:
            self.update_dino(pressed)
            self.update_obstacles()
            self.update_clouds()
            self.score += 1
            if self.score % 500 == 0 and self.game_speed < MAX_SPEED:
                self.game_speed += 1
            if self.check_collision():
                self.game_over = True
        elif pressed:
            self.reset()
        return self.game_over

    def _draw_dino(self) -> None:
        s, p = self.screen, self.player
        s.box(p.x - 2, p.ground_y - DINO_HEIGHT * 4, p.x + DINO_WIDTH + 2, p.ground_y + 5, BLACK)
        color = GRAY if self.game_over else GREEN
        s.sprite(p.x + 5, p.y, 9, 5, color)
        s.sprite(p.x + 11, p.y + 3, 3, 1, BLACK)
        s.sprite(p.x + 3, p.y + 5, 7, 5, color)
        s.sprite(p.x, p.y + 3, 2, 7, color)
        if (self.score // 5) % 2 == 0:
            s.sprite(p.x + 2, p.y + DINO_HEIGHT - 6, 4, 4, color)
            s.sprite(p.x + 10, p.y + DINO_HEIGHT - 4, 4, 4, color)
        else:
            s.sprite(p.x + 4, p.y + DINO_HEIGHT - 4, 4, 4, color)
            s.sprite(p.x + 8, p.y + DINO_HEIGHT - 6, 4, 4, color)

    def _draw_obstacle(self, obs: Obstacle) -> None:
        if not obs.active:
            return
        s, left = self.screen, obs.x + self.game_speed
        s.box(left, obs.y, left + CACTUS_WIDTH + 2, obs.y + CACTUS_HEIGHT + 2, BLACK)
        s.sprite(obs.x, obs.y + 2, 3, 6, GREEN)
        s.sprite(obs.x + 4, obs.y + 1, 3, 19, GREEN)
        s.sprite(obs.x + 9, obs.y, 3, 8, GREEN)
        s.sprite(obs.x, obs.y + 8, 12, 3, GREEN)

    def _draw_cloud(self, cloud: Cloud) -> None:
        if not cloud.active:
            return
        s, left = self.screen, cloud.x + self.game_speed // 2
        s.box(left, cloud.y - 2, left + CLOUD_WIDTH + 2, cloud.y + CLOUD_HEIGHT + 2, BLACK)
        s.sprite(cloud.x, cloud.y, CLOUD_WIDTH, CLOUD_HEIGHT, WHITE)
        s.sprite(cloud.x + 4, cloud.y - 2, 12, 4, WHITE)

    def _draw_ground(self) -> None:
        s = self.screen
        s.box(0, GROUND_Y, s.width - 1, GROUND_Y + 2, GRAY)
        for i in range(0, s.width, 20):
            if (i + self.score) % 40 < 20:
                s.sprite(i, GROUND_Y + 3, 4, 2, GRAY)

    def _draw_score(self) -> None:
        s = self.screen
        s.text(1, 1, f"Score: {self.score:05d}")
        if self.game_over:
            s.text(35, 10, "GAME OVER")
            s.text(30, 12, "Press any key to restart")

    def render(self) -> None:
        """Draw the whole frame onto the screen."""
        self._draw_dino()
        for obs in self.obstacles:
            self._draw_obstacle(obs)
        for cloud in self.clouds:
            self._draw_cloud(cloud)
        self._draw_ground()
        self._draw_score()


def main(argv: list[str] | None = None) -> int:
    """Play a scripted run and print the text overlay."""
    parser = argparse.ArgumentParser(
        prog="dino", description="Run the dinosaur from a script of key states."
    )
    parser.add_argument("--seed", type=int, default=1, help="random seed")
    parser.add_argument(
        "--keys",
        default="",
        help="one character per frame: '.' for all keys up, anything else for a key held",
    )
    parser.add_argument("--frames", type=int, default=200, help="frames to play")
    args = parser.parse_args(argv)

    screen = VgaScreen()
    screen.clear(BLACK)
    screen.clear_text(0, 16)
    screen.text(30, 10, "T-REX GAME")
    screen.text(25, 15, "Press any key to start")

    edge = KeyEdge()
    keys = (0 if c == IDLE_KEY else 1 for c in args.keys)
    seed = args.seed
    for state in keys:
        if edge.pressed(state):
            break
        seed = (seed + 1) & 0xFFFFFFFF

    game = DinoGame(screen, seed)
    for _ in range(args.frames):
        game.step(edge.pressed(next(keys, 0)))
        game.render()

    for row in range(16):
        line = screen.text_row(row)
        if line:
            print(line)
    print(f"status: {'game over' if game.game_over else 'running'}")
    print(f"score: {game.score}")
    return 0