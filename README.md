# retroracers

Two small arcade games drawn on simulated retro displays:

- **Stock Car** (`retroracers.car`): keep your car between the edges of a
  winding road and dodge obstacles until you have covered 15000 units of
  distance. It is drawn on `retroracers.glcd.Glcd`, an in-memory model of
  a 128x64 graphic LCD made of two 64x64 panels.
- **T-Rex** (`retroracers.dino`): a desert runner. Jump over cacti while
  the ground scrolls, clouds drift by and the pace picks up. It is drawn on
  `retroracers.vga.VgaScreen`, an in-memory pixel buffer with a text
  overlay.

No third-party libraries are needed.

## Installation

```
pip install .
```

## Commands

Both commands play a game from a script of keys given on the command line,
one character per frame, and print the result when the frames run out or
the game ends. Both accept:

- `--seed N`: starting random seed (Stock Car 10, T-Rex 1 by default)
- `--keys TEXT`: the key script
- `--frames N`: number of frames to play (default 200)

### stock-car

```
stock-car --keys ".9999111" --frames 300
```

In the script, `7` steers left, `9` steers right, `1` to `5` set the speed
(the race starts at speed 3), and `.` means no key. Leading `.` characters
are spent on the title screen, each one advancing the seed; the first other
character starts the race. Once the script runs out, the remaining frames
have no key.

You start with nine lives. Touching a road edge or an obstacle costs one;
a crash with no lives left ends the game. Reaching distance 15000 wins.

The command prints the final screen as 64 lines of `#` (lit) and `.`
(dark), followed by the status (`running`, `game over` or `won`), the
distance and the lives left.

### trex

```
trex --keys "x.x......x." --frames 500
```

In the script, `.` means all keys up and any other character a key held.
A press counts on a frame where the key goes from held to up. The first
press leaves the title screen (every frame before it advances the seed);
later presses make the dinosaur jump, or restart after a collision. Once
the script runs out, keys stay up.

The run starts at speed 5 and gains one every 500 points, up to 10.

The command prints the non-blank rows of the text overlay (the score and,
after a collision, the game-over message), then the status (`running` or
`game over`) and the score.

## Using the games as a library

The games can be driven frame by frame and the display inspected:

```python
from retroracers.glcd import Glcd
from retroracers.car import StockCar, Status

display = Glcd()
display.init()
game = StockCar(display, seed=10)
status = game.step("9")        # one frame, steering right
assert status is Status.RUNNING
print(display.render())
print(display.pixel(10, 20))   # True if that pixel is lit
```

`StockCar.step(key)` takes a key as a one-character string or `None`, and
returns a `Status`: `RUNNING`, `GAME_OVER` or `WON`. `StockCar.reset()`
starts a new race.

```python
from retroracers.vga import VgaScreen
from retroracers.dino import DinoGame

screen = VgaScreen(320, 240, 16)
game = DinoGame(screen, seed=1)
over = game.step(True)         # one frame with a key press; True once crashed
game.render()
print(screen.text_row(1))      # " Score: 00001"
print(hex(screen.pixel(50, 199)))
```

`retroracers.vga` also provides `resample_rgb(num_bits, color)`, which
reduces a 24-bit RGB colour to an 8- or 16-bit pixel format, and
`get_data_bits(mode)`, which gives the bits per pixel for a resampler mode.
`retroracers.font.glyph(char)` returns the six column bytes of a character
in the LCD font.

## What it does not do

There is no window and no live keyboard: the games do not run in real time
and take no input while playing. Each command plays a fixed script of keys
and prints a text picture or summary at the end.

## Running the tests

```
pip install ".[test]"
pytest
```