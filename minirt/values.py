"""Parsing and validation of the scalar fields of a scene file."""

from __future__ import annotations

import re

from .color import Color
from .vec3 import Vec3

_INT_PREFIX = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_DOUBLE_CHARS = frozenset("0123456789.+-")


class ParseError(ValueError):
    """Raised when a scene field is malformed or out of range."""


def parse_int(text: str) -> int:
    """Leading integer of ``text`` after blanks and one sign, wrapped to 32 bits; 0 if none."""
    match = _INT_PREFIX.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value + 2**31) % 2**32 - 2**31


def split_fields(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def parse_double(text: str) -> float:
    """Decimal number written as ``<int>[.<digits>]``.

    The fractional part is added to the integer part as is, so its sign
    comes from the digits after the point, not from the integer part.
    """
    parts = split_fields(text, ".")
    if not parts:
        raise ParseError(f"not a number: {text!r}")
    whole = float(parse_int(parts[0]))
    if len(parts) == 1:
        return whole
    fraction = parts[1]
    return whole + parse_int(fraction) / 10 ** len(fraction)


def is_double(text: str) -> bool:
    """True when ``text`` up to its first newline is non-empty and made of digits, '.', '+' or '-'."""
    body = text.split("\n", 1)[0]
    return bool(body) and all(c in _DOUBLE_CHARS for c in body)


def _three_numbers(text: str, what: str) -> list[str]:
    parts = split_fields(text, ",")
    if len(parts) != 3 or not all(is_double(p) for p in parts):
        raise ParseError(f"invalid {what}: {text!r}")
    return parts


def parse_vec3(text: str) -> Vec3:
    """Vector written as ``x,y,z``."""
    return Vec3(*(parse_double(p) for p in _three_numbers(text, "vector")))


def parse_color(text: str) -> Color:
    """Colour written as ``r,g,b``; each value keeps only its low 8 bits."""
    return Color(*(parse_int(p) % 256 for p in _three_numbers(text, "colour")))


def parse_shine(text: str) -> float:
    """Specular exponent of an object."""
    if not is_double(text):
        raise ParseError(f"invalid shine: {text!r}")
    return parse_double(text)


def check_brightness(value: float) -> float:
    """Return ``value`` if it lies in 0..1, else raise ParseError."""
    if value < 0.0 or value > 1.0:
        raise ParseError(f"brightness out of range: {value}")
    return value


def check_norm(vec: Vec3) -> Vec3:
    """Return ``vec`` if every component is in -1..1 and it is not null, else raise ParseError."""
    if any(c < -1.0 or c > 1.0 for c in vec):
        raise ParseError(f"direction component out of range: {vec}")
    if not (vec.x or vec.y or vec.z):
        raise ParseError("direction is a null vector")
    return vec


def check_angle(angle: float) -> float:
    """Return ``angle`` if it lies in 0..360, else raise ParseError."""
    if angle < 0 or angle > 360:
        raise ParseError(f"angle out of range: {angle}")
    return angle