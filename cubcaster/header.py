"""Parsing of the scene header: wall textures and floor/ceiling colours."""

from __future__ import annotations

from enum import Enum

_DIGITS = frozenset("0123456789")
_ATOI_SPACES = frozenset(" \t\n\v\f\r")
_COLOR_CHARS = _DIGITS | frozenset(",\t +")


class SceneError(Exception):
    """Raised when a scene description is invalid."""


class Option(Enum):
    """Kinds of header entries."""

    FLOOR = "F"
    CEILING = "C"
    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"


_ORIENTATIONS = {
    "NO ": Option.NO,
    "SO ": Option.SO,
    "WE ": Option.WE,
    "EA ": Option.EA,
}


def is_orientation(line: str) -> bool:
    """True when the line starts a wall texture entry."""
    return get_opt(line) is not None


def get_opt(line: str) -> Option | None:
    """Return the texture option the line starts with, if any."""
    return _ORIENTATIONS.get(line[:3])


def _atoi(text: str) -> int:
    i = 0
    n = len(text)
    while i < n and text[i] in _ATOI_SPACES:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    nb = 0
    while i < n and text[i] in _DIGITS:
        nb = nb * 10 + int(text[i])
        i += 1
    value = sign * nb
    return ((value + 2**31) % 2**32) - 2**31


def _check_number(text: str, i: int) -> None:
    if i >= len(text):
        raise SceneError("Wrong color")
    ch = text[i]
    if not (ch in "+ " or ch in _DIGITS):
        raise SceneError("Wrong color")
    if ch == "+" and (i + 1 >= len(text) or text[i + 1] not in _DIGITS):
        raise SceneError("Wrong color")


def parse_rgb(text: str) -> int:
    """Parse 'R,G,B' into a packed 0xRRGGBB integer."""
    pos = 0
    values = []
    for index in range(3):
        if index:
            comma = text.find(",", pos)
            pos = (len(text) if comma < 0 else comma) + 1
        _check_number(text, pos)
        values.append(_atoi(text[pos:]))
    if any(v < 0 or v > 255 for v in values):
        raise SceneError("Wrong color")
    r, g, b = values
    return (r << 16) | (g << 8) | b


def parse_color(text: str, option: Option) -> int:
    """Parse the value of an F or C line into a packed colour."""
    if option not in (Option.FLOOR, Option.CEILING):
        raise ValueError(f"not a colour option: {option}")
    start = 0
    while start < len(text) and text[start] in " \t":
        start += 1
    for ch in text[start:].split("\n", 1)[0]:
        if ch not in _COLOR_CHARS:
            if option is Option.FLOOR:
                raise SceneError("Wrong floor color")
            raise SceneError("Wrong ceiling color")
    if start >= len(text):
        value = ""
    else:
        value = text[start:start + len(text) - 1]
    return parse_rgb(value)


def parse_texture_path(text: str) -> str:
    """Extract a texture path: the last character is dropped, then anything after the last 'g'."""
    value = text[:-1]
    value = value[:value.rfind("g") + 1]
    return value.lstrip(" \t")