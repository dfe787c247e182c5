"""The game: scene, textures, player and the per-frame rendering loop."""

from __future__ import annotations

import sys
from collections.abc import Collection, Sequence

from .canvas import Image, Texture
from .header import SceneError
from .movement import Action, update
from .raycast import Player, raycast, start_player
from .scene import TEXTURE_OPTIONS, Scene, parse_args

WIDTH = 1024
HEIGHT = 720
MOVE_FACTOR = 2.5
ROT_FACTOR = 3.0

_BOLDRED = "\033[1;31m"
_RED = "\033[31m"
_RESET = "\033[0m"

_TEXTURE_NAMES = ("North", "South", "West", "East")


def load_textures(scene: Scene) -> list[Texture]:
    """Load the north, south, west and east wall textures, in that order."""
    textures = []
    for option, name in zip(TEXTURE_OPTIONS, _TEXTURE_NAMES):
        try:
            textures.append(Texture.load(scene.textures[option]))
        except (OSError, KeyError) as exc:
            raise SceneError(f"{name} texture cannot be loaded") from exc
    return textures


class Game:
    """A running scene: the map, its textures, the player and the frame image."""

    def __init__(
        self,
        scene: Scene,
        textures: Sequence[Texture],
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        if len(textures) != 4:
            raise ValueError("exactly four wall textures are needed")
        self.scene = scene
        self.rows = scene.rows
        self.textures = list(textures)
        self.player: Player = start_player(self.rows)
        self.image = Image(width, height)

    def render_frame(self, frame_time: float, actions: Collection[Action]) -> Image:
        """Apply the held actions for a frame of frame_time seconds and redraw."""
        update(
            self.rows,
            self.player,
            actions,
            frame_time * MOVE_FACTOR,
            frame_time * ROT_FACTOR,
        )
        self.image.clear()
        self.image.fill_ceiling(self.scene.ceiling_rgb)
        self.image.fill_floor(self.scene.floor_rgb)
        raycast(self.image, self.rows, self.player, self.textures)
        return self.image


def _report(message: str) -> None:
    print(f"{_BOLDRED}Error\n{_RESET}", end="")
    print(f"{_RED}{message}\n{_RESET}", end="")


def _run(game: Game) -> int:
    import pygame

    key_actions = (
        (pygame.K_w, Action.FORWARD),
        (pygame.K_s, Action.BACKWARD),
        (pygame.K_a, Action.STRAFE_LEFT),
        (pygame.K_d, Action.STRAFE_RIGHT),
        (pygame.K_RIGHT, Action.TURN_RIGHT),
        (pygame.K_LEFT, Action.TURN_LEFT),
    )
    size = (game.image.width, game.image.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("cubcaster")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            pressed = pygame.key.get_pressed()
            actions = {action for key, action in key_actions if pressed[key]}
            frame_time = clock.tick() / 1000.0
            image = game.render_frame(frame_time, actions)
            surface = pygame.image.frombuffer(bytes(image.pixels), size, "RGBA")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene named on the command line and run the game window."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        scene = parse_args(args)
        textures = load_textures(scene)
    except SceneError as exc:
        _report(str(exc))
        return 1
    return _run(Game(scene, textures))