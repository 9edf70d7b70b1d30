#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    breakout
    breakout --width 1280 --height 720
    breakout --config tuning.yaml --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

import pygame

from models import Resolution
from breakout.config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, TARGET_FPS, BACKGROUND_COLOR,
    ConfigError, load_config,
)
from breakout.game_mode import BreakoutGame
from breakout.game_state import GameState
from breakout.input import KeyboardInputSource
from breakout.logging import (
    get_logger, configure_logging, register_sink, create_sink_for_environment,
    close_all_sinks,
)
from breakout.skins import BreakoutSkin, GeometricSkin

log = get_logger('main')


class PlatformInitError(Exception):
    """Raised when the window or drawing surface cannot be created."""


def create_display(width: int, height: int, fullscreen: bool) -> pygame.Surface:
    """Open the game window.

    Raises:
        PlatformInitError: If pygame cannot initialize video or the surface
    """
    try:
        pygame.init()
        if fullscreen:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    except pygame.error as e:
        raise PlatformInitError(f"Could not create display: {e}") from e

    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def render_frame(game: BreakoutGame, skin: BreakoutSkin, screen: pygame.Surface) -> None:
    """Paint one frame from the game's snapshot."""
    screen.fill(BACKGROUND_COLOR)

    hud = game.hud()
    if hud.state == GameState.MENU:
        skin.render_menu(screen)
        return

    for draw in game.draw_list():
        skin.render_rect(draw, game.bounds, screen)
    skin.render_hud(screen, hud)

    if hud.state == GameState.GAME_OVER:
        skin.render_game_over(screen, hud)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Breakout")

    # Display options
    parser.add_argument('--width', type=int, default=WINDOW_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=WINDOW_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Game options
    parser.add_argument('--config', type=str, default=None,
                        help='YAML file with tuning values (default: $BREAKOUT_CONFIG)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Console log level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout until the player quits."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(args.log_level)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        log.error("%s", e)
        return 1

    try:
        screen = create_display(args.width, args.height, args.fullscreen)
    except PlatformInitError as e:
        log.error("%s", e)
        pygame.quit()
        return 1

    width, height = screen.get_size()
    game = BreakoutGame(config, Resolution(width=width, height=height))
    register_sink('session', create_sink_for_environment('session'))

    input_source = KeyboardInputSource()
    skin = GeometricSkin()
    clock = pygame.time.Clock()

    log.info("Breakout started at %dx%d", width, height)

    try:
        while not game.quit_requested:
            dt = clock.tick(TARGET_FPS) / 1000.0

            input_source.update(dt)
            resize = input_source.poll_resize()
            if resize is not None:
                game.resize(resize)

            game.update(dt, input_source.poll())

            render_frame(game, skin, screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    log.info("Breakout finished (score %d, level %d)", game.score, game.level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
