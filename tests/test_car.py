import pytest

from retroracers.car import (
    Lcg16,
    Status,
    StockCar,
    int_to_str5,
    lerp,
    main,
)
from retroracers.font import CAR_SPRITE, glyph
from retroracers.glcd import Glcd


@pytest.fixture
def game():
    display = Glcd()
    display.init()
    return StockCar(display, 10)


def test_int_to_str5_pads_and_keeps_five_digits():
    assert int_to_str5(15000) == "15000"
    assert int_to_str5(0) == "00000"
    assert int_to_str5(42) == "00042"
    assert len(int_to_str5(65535)) == 5


def test_lerp_endpoints_and_constant():
    assert lerp(10, 40, 0) == 10
    for t in range(256):
        assert lerp(31, 31, t) == 31


@pytest.mark.parametrize("a,b", [(10, 40), (40, 10), (18, 45)])
def test_lerp_stays_between_and_is_monotonic(a, b):
    values = [lerp(a, b, t) for t in range(256)]
    assert all(min(a, b) <= v <= max(a, b) for v in values)
    if b >= a:
        assert values == sorted(values)
    else:
        assert values == sorted(values, reverse=True)


def test_lcg_first_value_and_determinism():
    assert Lcg16(10).next() == 16507
    first, second = Lcg16(77), Lcg16(77)
    assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]


def test_lcg_range_bounds():
    rng = Lcg16(3)
    values = [rng.range(18, 45) for _ in range(500)]
    assert all(18 <= v < 45 for v in values)


def test_lcg_empty_range_raises():
    with pytest.raises(ValueError):
        Lcg16(1).range(5, 5)


def test_reset_state(game):
    assert game.distance == 0
    assert game.player_lives == 9
    assert game.player_speed == 3
    assert game.player_x == 29
    assert game.road_points_x[:2] == [31, 31]
    assert game.road_points_y[:2] == [0, 80]


def test_road_points_are_ordered_and_on_screen(game):
    ys = game.road_points_y
    gaps = [b - a for a, b in zip(ys[2:], ys[3:])]
    assert all(60 <= g <= 123 for g in gaps)
    assert all(18 <= x < 45 for x in game.road_points_x)


def test_obstacles_are_ordered_ahead(game):
    ys = game.obstacles_y
    assert all(60 <= b - a <= 123 for a, b in zip(ys, ys[1:]))
    assert ys[0] > 0


def test_find_road_segment(game):
    assert game.find_road_segment(0) == 6
    assert game.find_road_segment(40) == 0
    assert game.find_road_segment(80) == 0
    assert game.find_road_segment(81) == 1


def test_road_x_at_segment_start(game):
    for seg in range(7):
        assert game.road_x(game.road_points_y[seg], seg) == game.road_points_x[seg]
    assert game.road_x(40, 0) == 31


def test_road_new_segment_shifts(game):
    old_x, old_y = list(game.road_points_x), list(game.road_points_y)
    game.road_new_segment()
    assert game.road_points_x[:-1] == old_x[1:]
    assert game.road_points_y[:-1] == old_y[1:]
    assert game.road_points_y[-1] > old_y[-1]


def test_obstacle_respawn_shifts(game):
    old_y = list(game.obstacles_y)
    old_x = list(game.obstacles_x)
    game.obstacle_respawn()
    assert game.obstacles_y[:-1] == old_y[1:]
    assert game.obstacles_x[:-1] == old_x[1:]
    assert game.obstacles_y[-1] > old_y[-1]


def test_collides(game):
    assert game.collides(29)
    assert game.collides(35)
    assert not game.collides(28)
    assert not game.collides(36)
    assert game.collides(29 + 256)


def test_steering(game):
    game.handle_input("7")
    assert game.player_x == 26
    assert game.player_last_x == 29
    game.player_x = 2
    game.handle_input("7")
    assert game.player_x == 0
    game.player_x = 57
    game.handle_input("9")
    assert game.player_x == 58


def test_speed_keys_and_ignored_keys(game):
    game.handle_input("4")
    assert game.player_speed == 4
    game.handle_input("8")
    game.handle_input(None)
    assert game.player_speed == 4
    assert game.player_x == 29


def test_speed_shown_on_hud(game):
    game.handle_input("5")
    digit = glyph("5")
    for col in range(6):
        for bit in range(8):
            expected = bool(digit[col] >> bit & 1)
            assert game.display.pixel(64 + 58 + col, 24 + bit) == expected


def test_step_advances_by_speed(game):
    assert game.step(None) is Status.RUNNING
    assert game.distance == game.player_speed
    assert game.last_distance == 0
    game.step("5")
    assert game.distance == 3 + 5


def test_hud_and_car_drawn(game):
    # first column of 'D' in "DIST." on the right panel, page 2
    assert game.display.pixel(64, 16)
    assert not game.display.pixel(64, 23)
    for bit in range(8):
        assert game.display.pixel(30, 48 + bit) == bool(CAR_SPRITE[1] >> bit & 1)


def test_crash_costs_a_life(game):
    game.obstacles_x[0] = game.player_x
    game.obstacles_y[0] = game.distance + 16
    assert game.step(None) is Status.RUNNING
    assert game.player_lives == 8
    assert game.obstacles_y[0] - game.distance > 24


def test_crash_without_lives_ends_game(game):
    game.player_lives = 0
    game.obstacles_x[0] = game.player_x
    game.obstacles_y[0] = game.distance + 16
    assert game.step(None) is Status.GAME_OVER
    assert game.game_over


def test_reaching_finish_wins(game):
    game.distance = 14999
    game.last_distance = 14999
    game.road_points_x = [31] * 8
    game.road_points_y = [14900 + 100 * i for i in range(8)]
    game.obstacles_y = [20000 + 100 * i for i in range(4)]
    assert game.step(None) is Status.WON
    assert game.distance >= 15000


def test_reset_restores_after_play(game):
    for _ in range(5):
        game.step("9")
    game.reset()
    assert game.distance == 0
    assert game.player_x == 29
    assert game.player_lives == 9


def test_main_runs_script(capsys):
    assert main(["--keys", "1", "--frames", "4"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert all(len(line) == 128 for line in lines[:64])
    assert "status: running" in out
    assert "distance: 12" in out