"""Ray casting through the map grid and drawing of textured wall stripes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .canvas import Image, Texture

FOV_DEGREES = 66.0
MIN_WALL_DISTANCE = 0.1
_FAR = 1e30

_START_DIRECTIONS = {
    "N": (0.0, -1.0),
    "S": (0.0, 1.0),
    "E": (1.0, 0.0),
    "W": (-1.0, 0.0),
}


class Direction(Enum):
    """Face of a wall hit by a ray; the value is the slot of the texture drawn on it."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass
class Player:
    """Position, facing direction and camera plane of the viewer."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how far away it was."""

    map_x: int
    map_y: int
    side: int
    direction: Direction
    perp_wall_dist: float
    wall_x: float


def camera_plane(dir_x: float, dir_y: float) -> tuple[float, float]:
    """Return the camera plane vector for a facing direction."""
    length = math.tan(math.radians(FOV_DEGREES) / 2.0)
    return dir_y * length, -dir_x * length


def start_player(rows: Sequence[str]) -> Player:
    """Place the player at the centre of the first N, S, E or W cell of the map."""
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in _START_DIRECTIONS:
                dir_x, dir_y = _START_DIRECTIONS[ch]
                plane_x, plane_y = camera_plane(dir_x, dir_y)
                return Player(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)
    raise ValueError("no starting position in map")


def _is_wall(rows: Sequence[str], x: int, y: int) -> bool:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x] == "1"
    return True


def cast_ray(rows: Sequence[str], player: Player, camera_x: float) -> RayHit:
    """Follow one ray through the grid until it hits a wall."""
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _FAR if ray_x == 0 else abs(1.0 / ray_x)
    delta_y = _FAR if ray_y == 0 else abs(1.0 / ray_y)

    if ray_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall(rows, map_x, map_y):
            break

    if side == 0:
        direction = Direction.EAST if step_x > 0 else Direction.WEST
        perp = side_x - delta_x
    else:
        direction = Direction.SOUTH if step_y > 0 else Direction.NORTH
        perp = side_y - delta_y
    perp = max(perp, MIN_WALL_DISTANCE)

    if side == 0:
        wall_x = player.pos_y + perp * ray_y
    else:
        wall_x = player.pos_x + perp * ray_x
    wall_x -= math.floor(wall_x)
    return RayHit(map_x, map_y, side, direction, perp, wall_x)


def _line_span(perp_wall_dist: float, height: int) -> tuple[int, int]:
    line_height = int(height / perp_wall_dist)
    half = height // 2
    return half - line_height // 2, half + line_height // 2


def draw_texture_stripe(image: Image, x: int, hit: RayHit, texture: Texture) -> None:
    """Draw the textured wall column for one ray in column x."""
    start, end = _line_span(hit.perp_wall_dist, image.height)
    if end <= start:
        return
    tex_x = int(hit.wall_x * texture.width)
    tex_x = min(max(tex_x, 0), texture.width - 1)
    step = texture.height / (end - start)
    tex_pos = (start - image.height // 2 + (end - start) / 2.0) * step
    first = max(start, 0)
    stop = min(end, image.height)
    pos = tex_pos + (first - start) * step
    mask = texture.height - 1
    for y in range(first, stop):
        image.put_texture_pixel(x, y, texture.pixel(tex_x, int(pos) & mask))
        pos += step


def raycast(
    image: Image, rows: Sequence[str], player: Player, textures: Sequence[Texture]
) -> None:
    """Draw every wall column of the view into the image."""
    for x in range(image.width):
        camera_x = 2 * x / image.width - 1
        hit = cast_ray(rows, player, camera_x)
        draw_texture_stripe(image, x, hit, textures[hit.direction.value])