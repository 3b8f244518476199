import pytest

from minirt.color import Color


def test_add_saturates_at_255():
    assert Color(200, 100, 0) + Color(100, 100, 0) == Color(255, 200, 0)


def test_add_is_commutative():
    a, b = Color(12, 200, 77), Color(90, 80, 250)
    assert a + b == b + a


def test_multiply_by_black_gives_black():
    assert Color(10, 20, 30) * Color(0, 0, 0) == Color(0, 0, 0)


def test_multiply_is_commutative():
    a, b = Color(12, 200, 77), Color(90, 80, 250)
    assert a * b == b * a


def test_multiply_never_brightens():
    a, b = Color(12, 200, 77), Color(90, 80, 250)
    product = a * b
    for p, x, y in zip(product, a, b):
        assert p <= min(x, y)


def test_multiply_rejects_non_colour():
    with pytest.raises(TypeError):
        Color(1, 2, 3) * 2


def test_scaled_by_one_is_identity():
    c = Color(13, 128, 254)
    assert c.scaled(1.0) == c


def test_scaled_by_zero_is_black():
    assert Color(13, 128, 254).scaled(0.0) == Color(0, 0, 0)


def test_scaled_saturates():
    assert Color(200, 1, 0).scaled(10.0) == Color(255, 10, 0)


def test_scaled_truncates():
    assert Color(3, 5, 7).scaled(0.5) == Color(1, 2, 3)


def test_clamped_is_identity_on_valid_colour():
    c = Color(0, 127, 255)
    assert c.clamped() == c


def test_to_rgb_int_packs_channels():
    assert Color(0x12, 0x34, 0x56).to_rgb_int() == 0x123456


def test_to_rgb_int_round_trip():
    c = Color(201, 7, 99)
    packed = c.to_rgb_int()
    assert Color((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == c


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_invalid_channel_rejected(channels):
    with pytest.raises(ValueError):
        Color(*channels)