"""Player movement with wall collisions, and turning."""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from enum import Enum, auto

from .raycast import Player

COLL_RAD = 0.1


class Action(Enum):
    """Movement requests held down by the user."""

    FORWARD = auto()
    BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    TURN_RIGHT = auto()
    TURN_LEFT = auto()


def _cell(rows: Sequence[str], row: float, col: float) -> str:
    r = int(row)
    c = int(col)
    if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
        return rows[r][c]
    return ""


def _wall(rows: Sequence[str], row: float, col: float) -> bool:
    return _cell(rows, row, col) == "1"


def _x_free(rows: Sequence[str], player: Player, new_x: float) -> bool:
    return not _wall(rows, player.pos_y, new_x + COLL_RAD) and not _wall(
        rows, player.pos_y, new_x - COLL_RAD
    )


def _y_free(rows: Sequence[str], player: Player, new_y: float) -> bool:
    return not _wall(rows, new_y + COLL_RAD, player.pos_x) and not _wall(
        rows, new_y - COLL_RAD, player.pos_x
    )


def move_forward(rows: Sequence[str], player: Player, speed: float) -> None:
    """Step along the facing direction, each axis only if it stays clear of walls."""
    new_x = player.pos_x + player.dir_x * speed
    new_y = player.pos_y + player.dir_y * speed
    if _x_free(rows, player, new_x):
        player.pos_x = new_x
    if _y_free(rows, player, new_y):
        player.pos_y = new_y


def move_backward(rows: Sequence[str], player: Player, speed: float) -> None:
    """Step against the facing direction; the y axis checks only the leading edge."""
    new_x = player.pos_x - player.dir_x * speed
    new_y = player.pos_y - player.dir_y * speed
    if _x_free(rows, player, new_x):
        player.pos_x = new_x
    if not _wall(rows, new_y + COLL_RAD, player.pos_x):
        player.pos_y = new_y


def move_left(rows: Sequence[str], player: Player, speed: float) -> None:
    """Strafe against the camera plane."""
    new_x = player.pos_x - player.plane_x * speed
    new_y = player.pos_y - player.plane_y * speed
    if not _wall(rows, player.pos_y, new_x + COLL_RAD) and _cell(
        rows, player.pos_y, new_x - COLL_RAD
    ):
        player.pos_x = new_x
    if _y_free(rows, player, new_y):
        player.pos_y = new_y


def move_right(rows: Sequence[str], player: Player, speed: float) -> None:
    """Strafe along the camera plane."""
    new_x = player.pos_x + player.plane_x * speed
    new_y = player.pos_y + player.plane_y * speed
    if _x_free(rows, player, new_x):
        player.pos_x = new_x
    if _y_free(rows, player, new_y):
        player.pos_y = new_y


def rotate(player: Player, angle: float) -> None:
    """Turn the direction and the camera plane by angle radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dir_x = player.dir_x
    player.dir_x = dir_x * cos_a - player.dir_y * sin_a
    player.dir_y = dir_x * sin_a + player.dir_y * cos_a
    plane_x = player.plane_x
    player.plane_x = plane_x * cos_a - player.plane_y * sin_a
    player.plane_y = plane_x * sin_a + player.plane_y * cos_a


def push_player(rows: Sequence[str], player: Player) -> None:
    """Nudge the player away from a wall it is touching."""
    r = COLL_RAD
    if _wall(rows, player.pos_y, player.pos_x + r):
        if not _wall(rows, player.pos_y, player.pos_x - r):
            player.pos_x -= r
    if _wall(rows, player.pos_y, player.pos_x - r):
        if not _wall(rows, player.pos_y, player.pos_x + r):
            player.pos_x += r
    if _wall(rows, player.pos_y - r, player.pos_x):
        if not _wall(rows, player.pos_y + r, player.pos_x):
            player.pos_y += r
    if _wall(rows, player.pos_y + r, player.pos_x):
        if not _wall(rows, player.pos_y - r, player.pos_x):
            player.pos_y -= r


def update(
    rows: Sequence[str],
    player: Player,
    actions: Collection[Action],
    move_speed: float,
    rot_speed: float,
) -> None:
    """Apply the held actions for one frame, then push the player off walls."""
    if Action.FORWARD in actions:
        move_forward(rows, player, move_speed)
    if Action.BACKWARD in actions:
        move_backward(rows, player, move_speed)
    if Action.STRAFE_LEFT in actions:
        move_left(rows, player, move_speed)
    if Action.STRAFE_RIGHT in actions:
        move_right(rows, player, move_speed)
    if Action.TURN_RIGHT in actions:
        rotate(player, -rot_speed)
    if Action.TURN_LEFT in actions:
        rotate(player, rot_speed)
    push_player(rows, player)