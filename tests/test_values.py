import pytest

from minirt.color import Color
from minirt.values import (
    ParseError,
    check_angle,
    check_brightness,
    check_norm,
    is_double,
    parse_color,
    parse_double,
    parse_int,
    parse_shine,
    parse_vec3,
    split_fields,
)
from minirt.vec3 import Vec3


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -17", -17), ("+5", 5), ("007", 7), ("12abc", 12), ("abc", 0), ("", 0), ("+-3", 0)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483648") == -2147483648
    assert parse_int("-2147483648") == -2147483648


def test_split_fields_drops_empty_pieces():
    assert split_fields(",a,,b,", ",") == ["a", "b"]
    assert split_fields("", ",") == []


def test_parse_double_whole_and_fraction():
    assert parse_double("12") == 12.0
    assert parse_double("3.25") == 3.25
    assert parse_double("-4.0") == -4.0


def test_parse_double_fraction_keeps_its_own_sign():
    assert parse_double("-0.5") == 0.5


def test_parse_double_ignores_extra_points():
    assert parse_double("1.5.9") == 1.5


def test_parse_double_empty_raises():
    with pytest.raises(ParseError):
        parse_double("")


@pytest.mark.parametrize("text", ["1", "-1.5", "+.3", "10\n", "1.0\nx"])
def test_is_double_accepts(text):
    assert is_double(text) is True


@pytest.mark.parametrize("text", ["", "\n", "1e5", "abc", "1,2"])
def test_is_double_rejects(text):
    assert is_double(text) is False


def test_parse_vec3():
    assert parse_vec3("1,2.5,3") == Vec3(1.0, 2.5, 3.0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,a,3", ""])
def test_parse_vec3_invalid(text):
    with pytest.raises(ParseError):
        parse_vec3(text)


def test_parse_color():
    assert parse_color("255,0,128") == Color(255, 0, 128)


def test_parse_color_keeps_low_byte():
    assert parse_color("256,0,0") == Color(0, 0, 0)


def test_parse_color_invalid():
    with pytest.raises(ParseError):
        parse_color("255,0")


def test_parse_shine():
    assert parse_shine("50") == 50.0
    with pytest.raises(ParseError):
        parse_shine("shiny")


def test_check_brightness():
    assert check_brightness(0.0) == 0.0
    assert check_brightness(1.0) == 1.0
    with pytest.raises(ParseError):
        check_brightness(1.5)
    with pytest.raises(ParseError):
        check_brightness(-0.1)


def test_check_norm():
    assert check_norm(Vec3(0, 0, 1)) == Vec3(0, 0, 1)
    with pytest.raises(ParseError):
        check_norm(Vec3(0, 0, 0))
    with pytest.raises(ParseError):
        check_norm(Vec3(0, 2, 0))


def test_check_angle():
    assert check_angle(360) == 360
    with pytest.raises(ParseError):
        check_angle(361)
    with pytest.raises(ParseError):
        check_angle(-1)