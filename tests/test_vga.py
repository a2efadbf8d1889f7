import pytest

from retroracers.vga import VgaScreen, get_data_bits, resample_rgb


@pytest.mark.parametrize(
    "mode, bits",
    [(0x0, 1), (0x7, 8), (0x11, 8), (0x12, 9), (0x14, 16), (0x17, 24),
     (0x19, 30), (0x31, 8), (0x32, 12), (0x33, 16), (0x37, 32), (0x39, 40)],
)
def test_get_data_bits_table(mode, bits):
    assert get_data_bits(mode) == bits


def test_get_data_bits_unknown_defaults_to_16():
    assert get_data_bits(0x3F) == 16


def test_resample_rgb_16_bit():
    assert resample_rgb(16, 0xFFFFFF) == 0xFFFF
    assert resample_rgb(16, 0) == 0
    assert resample_rgb(16, 0xFF0000) == 0xF800


def test_resample_rgb_8_bit_duplicates_byte():
    value = resample_rgb(8, 0xFFFFFF)
    assert value == 0xFFFF
    assert value >> 8 == value & 0xFF


def test_resample_rgb_other_depth_unchanged():
    assert resample_rgb(24, 0x123456) == 0x123456


def test_box_fills_inclusive_rectangle():
    screen = VgaScreen(320, 240, 16)
    screen.box(10, 20, 12, 22, 0x07E0)
    assert screen.pixel(10, 20) == 0x07E0
    assert screen.pixel(12, 22) == 0x07E0
    assert screen.pixel(13, 22) == 0
    assert screen.pixel(10, 23) == 0


def test_sprite_matches_box():
    screen = VgaScreen()
    screen.sprite(5, 5, 3, 2, 0xFFFF)
    lit = {(x, y) for x in range(0, 12) for y in range(0, 12) if screen.pixel(x, y)}
    assert lit == {(x, y) for x in range(5, 8) for y in range(5, 7)}


def test_box_clips_negative_and_large_coordinates():
    screen = VgaScreen()
    screen.box(-30, -30, 1000, 1000, 0x8410)
    assert screen.pixel(0, 0) == 0x8410
    assert screen.pixel(319, 239) == 0x8410


def test_clear_fills_everything():
    screen = VgaScreen()
    screen.clear(0x1234)
    assert {screen.pixel(x, y) for x in (0, 160, 319) for y in (0, 120, 239)} == {0x1234}


def test_low_resolution_scales_coordinates():
    screen = VgaScreen(160, 120, 16)
    screen.box(0, 0, 3, 3, 0xFFFF)
    assert screen.pixel(2, 2) == 0xFFFF
    assert screen.pixel(4, 0) == 0


def test_pixel_outside_raises():
    screen = VgaScreen()
    with pytest.raises(IndexError):
        screen.pixel(320, 0)


def test_invalid_resolution_raises():
    with pytest.raises(ValueError):
        VgaScreen(0, 240)


def test_text_written_and_cleared():
    screen = VgaScreen()
    screen.text(30, 10, "T-REX GAME")
    assert screen.text_row(10) == " " * 30 + "T-REX GAME"
    screen.clear_text(10, 11)
    assert screen.text_row(10) == ""


def test_text_wraps_into_next_row():
    screen = VgaScreen()
    screen.text(126, 3, "ABCD")
    assert screen.text_row(3).endswith("AB")
    assert screen.text_row(4) == "CD"


def test_text_row_out_of_range():
    with pytest.raises(IndexError):
        VgaScreen().text_row(64)