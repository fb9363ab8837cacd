import pytest

from wirefdf.rgb import create_trgb, get_b, get_g, get_r, get_t


def test_pure_red_matches_hex_literal():
    assert create_trgb(0, 255, 0, 0) == 0xFF0000


def test_white_matches_hex_literal():
    assert create_trgb(0, 255, 255, 255) == 0xFFFFFF


def test_red_channel_of_red():
    assert get_r(0xFF0000) == 255
    assert get_g(0xFF0000) == 0
    assert get_b(0xFF0000) == 0


@pytest.mark.parametrize(
    "t, r, g, b",
    [
        (0, 0, 0, 0),
        (0, 255, 255, 255),
        (255, 1, 2, 3),
        (17, 200, 100, 50),
        (128, 0, 255, 0),
    ],
)
def test_round_trip(t, r, g, b):
    packed = create_trgb(t, r, g, b)
    assert (get_t(packed), get_r(packed), get_g(packed), get_b(packed)) == (t, r, g, b)


def test_channels_are_masked_to_a_byte():
    packed = create_trgb(1, 2, 3, 4) | (0xAB << 32)
    assert get_t(packed) == 1
    assert get_b(packed) == 4