import math

import pytest

from cubcaster.canvas import Image, Texture
from cubcaster.raycast import (
    FOV_DEGREES,
    MIN_WALL_DISTANCE,
    Direction,
    Player,
    RayHit,
    camera_plane,
    cast_ray,
    draw_texture_stripe,
    raycast,
    start_player,
)


def box(start="E"):
    return ["11111", "10001", "10" + start + "01", "10001", "11111"]


def solid(rgba, width=1, height=1):
    return Texture(width, height, bytes(rgba) * (width * height))


def painted_rows(image, x):
    return [y for y in range(image.height) if image.pixels[(y * image.width + x) * 4 + 3]]


@pytest.mark.parametrize(
    "char, direction",
    [("N", (0.0, -1.0)), ("S", (0.0, 1.0)), ("E", (1.0, 0.0)), ("W", (-1.0, 0.0))],
)
def test_start_player_direction_and_centre(char, direction):
    player = start_player(["111", "1" + char + "1", "111"])
    assert (player.pos_x, player.pos_y) == (1.5, 1.5)
    assert (player.dir_x, player.dir_y) == direction
    assert (player.plane_x, player.plane_y) == camera_plane(*direction)


def test_start_player_without_start_raises():
    with pytest.raises(ValueError):
        start_player(["111", "101", "111"])


def test_camera_plane_is_perpendicular_with_fov_length():
    plane_x, plane_y = camera_plane(0.0, -1.0)
    assert plane_x * 0.0 + plane_y * -1.0 == pytest.approx(0.0)
    assert math.hypot(plane_x, plane_y) == pytest.approx(
        math.tan(math.radians(FOV_DEGREES / 2))
    )
    assert plane_x < 0


def test_cast_ray_straight_east():
    player = start_player(box("E"))
    hit = cast_ray(box("E"), player, 0.0)
    assert hit.direction is Direction.EAST
    assert hit.side == 0
    assert (hit.map_x, hit.map_y) == (4, 2)
    assert hit.perp_wall_dist == pytest.approx(1.5)
    assert hit.wall_x == pytest.approx(0.5)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("N", Direction.NORTH),
        ("S", Direction.SOUTH),
        ("E", Direction.EAST),
        ("W", Direction.WEST),
    ],
)
def test_cast_ray_face_matches_facing(char, expected):
    rows = box(char)
    hit = cast_ray(rows, start_player(rows), 0.0)
    assert hit.direction is expected
    assert rows[hit.map_y][hit.map_x] == "1"


def test_cast_ray_distance_is_clamped():
    rows = box("E")
    player = Player(1.05, 2.5, -1.0, 0.0, *camera_plane(-1.0, 0.0))
    hit = cast_ray(rows, player, 0.0)
    assert hit.direction is Direction.WEST
    assert hit.perp_wall_dist == MIN_WALL_DISTANCE


def test_cast_ray_invariants_across_view():
    rows = box("N")
    player = start_player(rows)
    for step in range(21):
        hit = cast_ray(rows, player, -1 + step / 10)
        assert 0.0 <= hit.wall_x < 1.0
        assert hit.perp_wall_dist >= MIN_WALL_DISTANCE
        assert rows[hit.map_y][hit.map_x] == "1"


def test_stripe_at_unit_distance_fills_column():
    image = Image(3, 10)
    hit = RayHit(0, 0, 0, Direction.EAST, 1.0, 0.0)
    draw_texture_stripe(image, 1, hit, solid((10, 20, 30, 255)))
    assert painted_rows(image, 1) == list(range(10))
    assert painted_rows(image, 0) == []
    assert painted_rows(image, 2) == []
    at = (5 * 3 + 1) * 4
    assert bytes(image.pixels[at:at + 4]) == bytes((10, 20, 30, 255))


def test_farther_wall_is_shorter_and_centred():
    near = Image(1, 20)
    far = Image(1, 20)
    texture = solid((1, 2, 3, 255))
    draw_texture_stripe(near, 0, RayHit(0, 0, 0, Direction.EAST, 1.5, 0.0), texture)
    draw_texture_stripe(far, 0, RayHit(0, 0, 0, Direction.EAST, 3.0, 0.0), texture)
    near_rows = painted_rows(near, 0)
    far_rows = painted_rows(far, 0)
    assert 0 < len(far_rows) < len(near_rows)
    assert far_rows == list(range(far_rows[0], far_rows[-1] + 1))
    assert set(far_rows) <= set(near_rows)
    assert far.height // 2 in far_rows


def test_very_far_wall_draws_nothing():
    image = Image(1, 10)
    draw_texture_stripe(
        image, 0, RayHit(0, 0, 0, Direction.EAST, 1e6, 0.0), solid((9, 9, 9, 255))
    )
    assert painted_rows(image, 0) == []


def test_stripe_picks_texture_column_from_wall_x():
    texture = Texture(2, 1, bytes((255, 0, 0, 255, 0, 0, 255, 255)))
    left = Image(1, 4)
    right = Image(1, 4)
    draw_texture_stripe(left, 0, RayHit(0, 0, 0, Direction.EAST, 1.0, 0.25), texture)
    draw_texture_stripe(right, 0, RayHit(0, 0, 0, Direction.EAST, 1.0, 0.75), texture)
    assert bytes(left.pixels[0:4]) == texture.pixels[0:4]
    assert bytes(right.pixels[0:4]) == texture.pixels[4:8]


def test_raycast_paints_every_column_with_facing_texture():
    rows = box("E")
    player = start_player(rows)
    textures = [solid((v, v, v, 255)) for v in (10, 20, 30, 40)]
    image = Image(8, 6)
    raycast(image, rows, player, textures)
    for x in range(image.width):
        assert image.height // 2 in painted_rows(image, x)
    centre = (3 * image.width + 4) * 4
    assert bytes(image.pixels[centre:centre + 4]) == textures[Direction.EAST.value].pixels