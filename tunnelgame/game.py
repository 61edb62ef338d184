"""The game window: input, drawing and the main loop."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Sequence
from functools import lru_cache

import pygame

from tunnelgame.enemy import Enemy
from tunnelgame.geometry import CENTER_X, CENTER_Y, HEIGHT, WIDTH, Rect
from tunnelgame.level import build_demo_level
from tunnelgame.logic import update_camera, update_enemies, update_platforms, update_player
from tunnelgame.platform import Platform
from tunnelgame.player import InputState, Player

FRAME_RATE = 60
TITLE = "2D Game"
BACKGROUND = (0, 0, 0)


def read_input(pressed_keys, mouse_buttons: Sequence[bool]) -> InputState:
    """Turn pygame's key and mouse state into the game's controls."""
    return InputState(
        left=bool(pressed_keys[pygame.K_a]),
        right=bool(pressed_keys[pygame.K_d]),
        jump=bool(pressed_keys[pygame.K_SPACE]),
        up=bool(pressed_keys[pygame.K_w]),
        down=bool(pressed_keys[pygame.K_s]),
        attack=bool(pressed_keys[pygame.K_f]) or bool(mouse_buttons[0]),
    )


@lru_cache(maxsize=None)
def _texture(path: str) -> pygame.Surface | None:
    if not os.path.isfile(path):
        return None
    try:
        return pygame.image.load(path)
    except pygame.error:
        return None


def _screen_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(
        round(rect.x), round(rect.y), round(rect.width), round(rect.height)
    )


def _draw(
    surface: pygame.Surface,
    rect: Rect,
    color: tuple[int, int, int],
    texture_path: str | None = None,
) -> None:
    target = _screen_rect(rect)
    texture = _texture(texture_path) if texture_path else None
    if texture is not None and target.width > 0 and target.height > 0:
        surface.blit(pygame.transform.scale(texture, target.size), target)
    else:
        pygame.draw.rect(surface, color, target)


def draw_world(
    surface: pygame.Surface,
    platforms: Iterable[Platform],
    enemies: Iterable[Enemy],
    player: Player,
) -> None:
    """Draw platforms, enemies, the player and any active attack."""
    for platform in platforms:
        _draw(surface, platform.shape, Platform.COLOR, Platform.TEXTURE)
    for enemy in enemies:
        _draw(surface, enemy.shape, Enemy.COLOR, Enemy.TEXTURES.get(enemy.kind))
    _draw(surface, player.shape, Player.COLOR, Player.TEXTURE)
    if player.attacking:
        _draw(surface, player.attack_shape, Player.ATTACK_COLOR)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the demo level until it is closed."""
    parser = argparse.ArgumentParser(
        prog="tunnelgame", description="Run the tunnel platformer demo level."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WIDTH), int(HEIGHT)))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()

        player = Player(CENTER_X, CENTER_Y)
        platforms, enemies = build_demo_level()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            inputs = read_input(pygame.key.get_pressed(), pygame.mouse.get_pressed())
            update_player(player, inputs)
            update_platforms(platforms, player)
            update_enemies(enemies, player)
            update_camera(platforms, enemies, player)
            screen.fill(BACKGROUND)
            draw_world(screen, platforms, enemies, player)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0