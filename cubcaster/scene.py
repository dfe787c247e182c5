"""Reading a .cub scene description: header entries followed by the map."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from .header import (
    Option,
    SceneError,
    get_opt,
    is_orientation,
    parse_color,
    parse_texture_path,
)
from .walls import wall_outline

TEXTURE_OPTIONS = (Option.NO, Option.SO, Option.WE, Option.EA)

_TEXTURE_NAMES = {
    Option.NO: "North",
    Option.SO: "South",
    Option.WE: "West",
    Option.EA: "East",
}
_MAP_LINE_CHARS = frozenset(" \n10NSWE")
_PLAYER_CHARS = frozenset("NSWE")
_HEADER_ENTRIES = 7


@dataclass
class Scene:
    """A parsed scene: wall textures, floor and ceiling colours, and the map."""

    textures: dict[Option, str] = field(default_factory=dict)
    floor_rgb: int | None = None
    ceiling_rgb: int | None = None
    players: int = 0
    map_lines: list[str] = field(default_factory=list)

    def header_complete(self) -> bool:
        """True once both colours and all four textures have been given."""
        return (
            self.floor_rgb is not None
            and self.ceiling_rgb is not None
            and all(option in self.textures for option in TEXTURE_OPTIONS)
        )

    @property
    def rows(self) -> list[str]:
        """The map grid, one string per non-empty row."""
        return [line for line in self.map_lines if line]


class _MapState(Enum):
    BEFORE = auto()
    INSIDE = auto()
    AFTER_BLANK = auto()


class _Reader:
    """Feeds scene lines one at a time into a Scene."""

    def __init__(self) -> None:
        self.scene = Scene()
        self.count = 0
        self.state = _MapState.BEFORE

    def feed(self, line: str) -> None:
        rest = line.lstrip(" \t")
        if rest == "\n":
            if self.count >= _HEADER_ENTRIES and self.state is _MapState.INSIDE:
                self.state = _MapState.AFTER_BLANK
        elif is_orientation(rest):
            self._texture(rest[3:], get_opt(rest))
        elif rest.startswith("F "):
            self._color(rest[2:], Option.FLOOR)
        elif rest.startswith("C "):
            self._color(rest[2:], Option.CEILING)
        elif self.scene.header_complete():
            self._map_line(line)

    def _texture(self, text: str, option: Option) -> None:
        self.count += 1
        if option in self.scene.textures:
            raise SceneError(f"{_TEXTURE_NAMES[option]} texture duplicate")
        self.scene.textures[option] = parse_texture_path(text)

    def _color(self, text: str, option: Option) -> None:
        self.count += 1
        rgb = parse_color(text, option)
        if option is Option.FLOOR:
            self.scene.floor_rgb = rgb
        else:
            self.scene.ceiling_rgb = rgb

    def _map_line(self, line: str) -> None:
        self.count += 1
        if self.state is _MapState.BEFORE:
            self.state = _MapState.INSIDE
        elif self.state is _MapState.AFTER_BLANK:
            raise SceneError("Empty line(s) in map")
        for ch in line:
            if ch == "\t":
                raise SceneError("Replace tabs w/ spaces for alignment")
            if ch not in _MAP_LINE_CHARS:
                raise SceneError("Wrong character in map")
            if ch in _PLAYER_CHARS:
                self.scene.players += 1
            if self.scene.players > 1:
                raise SceneError("Too many players in map")
        self.scene.map_lines.append(line.rstrip(" \n"))


def _check(scene: Scene) -> None:
    if (
        scene.ceiling_rgb is None
        and scene.floor_rgb is None
        and not scene.textures
        and not scene.map_lines
    ):
        raise SceneError("Missing textures, colors and/or map")
    if scene.ceiling_rgb is None or scene.floor_rgb is None:
        raise SceneError("Missing color")
    if any(option not in scene.textures for option in TEXTURE_OPTIONS):
        raise SceneError("Missing texture")
    if not scene.map_lines:
        raise SceneError("Doesn't follow rule of description then map")
    if scene.players != 1:
        raise SceneError("No character in map")
    if not wall_outline(scene.rows):
        raise SceneError("The outline of the map must be walls")


def parse_lines(lines: Iterable[str]) -> Scene:
    """Parse scene lines (each keeping its newline) and validate the result."""
    reader = _Reader()
    for line in lines:
        reader.feed(line)
    _check(reader.scene)
    return reader.scene


def parse_file(path) -> Scene:
    """Read and validate a scene file."""
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise SceneError("Map file opening failure") from exc
    with handle:
        return parse_lines(handle)


def parse_args(argv: Sequence[str]) -> Scene:
    """Check the command-line arguments (without the program name) and parse the scene."""
    if len(argv) != 1:
        raise SceneError("Wrong argument: retry with: cubcaster map.cub")
    name = argv[0]
    if len(name) <= 4 or not name.endswith(".cub"):
        raise SceneError("Wrong extension: must be .cub")
    return parse_file(name)