# cubcaster

cubcaster is a small first-person maze explorer. It reads the maze from a
`.cub` scene file, then draws textured walls by casting one ray per screen
column through the map grid. It uses pygame for the window, for keyboard input
and for loading wall textures.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
cubcaster path/to/scene.cub
```

The command takes exactly one argument, and the name must end in `.cub`. It
opens a 1024×720 window. The ceiling colour fills the top half of the window,
the floor colour fills the bottom half, and the walls are drawn over both.

| Key           | Action              |
|---------------|---------------------|
| W / S         | move forward / back |
| A / D         | strafe left / right |
| Left / Right  | turn                |
| Escape        | quit                |

Closing the window also quits. Movement and turning speed scale with the
frame time. The player cannot walk into walls, and is pushed back when
standing too close to one.

If the scene cannot be used, the command prints `Error` and a short reason,
then exits with status 1. Examples are a bad argument, a file that cannot be
opened, an invalid header or map, or a texture that cannot be loaded.

## Scene files

A scene file has a header and then a map. The header has six entries, which
may come in any order. Blank lines between them are ignored.

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the image file for each wall face. Each one
  may appear only once. The path is taken up to its last `g`, so it should
  end in `.png`. Relative paths are resolved from the current directory.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value must
  be between 0 and 255.

Map lines are only read once all six entries have been given:

```
111111
100001
10N001
111111
```

- `1` is a wall, `0` is open floor, and a space lies outside the map.
- `N`, `S`, `E` or `W` is the player's starting cell. The letter gives the
  direction the player faces. There must be exactly one.
- Walls must close the map. The first and last rows may hold only walls and
  spaces, and no floor cell may touch the outside.
- The map may not contain empty lines or tab characters.

## Using it as a library

- `cubcaster.scene.parse_file(path)` reads and checks a scene file. It
  returns a `Scene`, or raises `cubcaster.header.SceneError` with the reason.
  `parse_lines(lines)` does the same for lines already in memory. `Scene.rows`
  is the map grid.
- `cubcaster.raycast.start_player(rows)` returns a `Player` at the start
  cell.
- `cubcaster.raycast.cast_ray(rows, player, camera_x)` traces one ray and
  returns a `RayHit`. `camera_x` runs from -1 (left edge) to 1 (right edge).
  The `RayHit` gives the wall cell, its face (`direction`), the distance
  (`perp_wall_dist`) and where along the wall the ray struck (`wall_x`).
- `cubcaster.raycast.raycast(image, rows, player, textures)` draws every wall
  column into a `cubcaster.canvas.Image`.
- `cubcaster.movement.update(rows, player, actions, move_speed, rot_speed)`
  applies a set of `Action` values to a player, with wall collisions.
- `cubcaster.game.Game(scene, textures)` ties these together.
  `render_frame(frame_time, actions)` moves the player and returns the
  redrawn `Image`, whose `pixels` are RGBA bytes.
  `cubcaster.game.load_textures(scene)` loads the four wall textures in north,
  south, west, east order.

```python
from cubcaster.scene import parse_file
from cubcaster.raycast import start_player, cast_ray

scene = parse_file("maps/demo.cub")
player = start_player(scene.rows)
hit = cast_ray(scene.rows, player, 0.0)
print(hit.perp_wall_dist, hit.direction)
```

## What it does not do

cubcaster only lets you walk around a single static maze. There are no doors,
sprites, enemies, minimap, mouse look or sound, and the window size is fixed.