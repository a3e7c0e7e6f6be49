"""The playable game: window, event loop and input handling."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from minesweeper.game import Minesweeper
from minesweeper.renderer import CELL_SIZE, GameRenderer, cell_at

GRID_WIDTH = 9
GRID_HEIGHT = 9
MINE_COUNT = 10
WINDOW_WIDTH = GRID_WIDTH * CELL_SIZE + 40
WINDOW_HEIGHT = GRID_HEIGHT * CELL_SIZE + 100
FRAME_RATE = 60

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


def handle_event(game: Minesweeper, event: pygame.event.Event) -> bool:
    """Apply one input event to the game; return False when the player quits."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.MOUSEBUTTONDOWN:
        cell = cell_at(event.pos[0], event.pos[1], game.width, game.height)
        if cell is None or game.game_over or game.game_won:
            return True
        if event.button == LEFT_BUTTON:
            game.reveal(*cell)
        elif event.button == RIGHT_BUTTON:
            game.toggle_flag(*cell)
    elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
        game.reset()

    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description=(
            "Play Minesweeper. Left click reveals a cell, right click flags it, "
            "R starts a new game."
        ),
    )
    parser.parse_args(argv)

    game = Minesweeper(GRID_WIDTH, GRID_HEIGHT, MINE_COUNT)
    renderer = GameRenderer(WINDOW_WIDTH, WINDOW_HEIGHT)
    try:
        renderer.initialize()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        print("Failed to initialize renderer!", file=sys.stderr)
        renderer.cleanup()
        return 1

    clock = pygame.time.Clock()
    try:
        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(game, event):
                    running = False
            renderer.render(game)
            clock.tick(FRAME_RATE)
    finally:
        renderer.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())