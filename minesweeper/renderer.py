"""Drawing of a Minesweeper board with pygame, and mouse-to-cell mapping."""

from __future__ import annotations

import sys
from types import TracebackType

import pygame

from minesweeper.game import Minesweeper

CELL_SIZE = 32
GRID_OFFSET_X = 20
GRID_OFFSET_Y = 60
FONT_SIZE = 18
WINDOW_TITLE = "Minesweeper"

RGBA = tuple[int, int, int, int]

COLOR_BACKGROUND: RGBA = (192, 192, 192, 255)
COLOR_CELL: RGBA = (128, 128, 128, 255)
COLOR_REVEALED: RGBA = (255, 255, 255, 255)
COLOR_MINE: RGBA = (255, 0, 0, 255)
COLOR_FLAG: RGBA = (0, 255, 0, 255)
COLOR_TEXT: RGBA = (0, 0, 0, 255)
COLOR_BORDER: RGBA = (0, 0, 0, 255)

COLOR_WIN_TITLE: RGBA = (0, 255, 0, 255)
COLOR_WIN_HINT: RGBA = (0, 200, 0, 255)
COLOR_LOSS_TITLE: RGBA = (255, 0, 0, 255)
COLOR_LOSS_HINT: RGBA = (200, 0, 0, 255)

# Index is the number shown in the cell; entry 0 is never used.
NUMBER_COLORS: tuple[RGBA, ...] = (
    (0, 0, 0, 255),
    (0, 0, 255, 255),
    (0, 128, 0, 255),
    (255, 0, 0, 255),
    (0, 0, 128, 255),
    (128, 0, 0, 255),
    (0, 128, 128, 255),
    (0, 0, 0, 255),
    (128, 128, 128, 255),
)

# Colours for the square markers drawn when no font could be loaded.
FALLBACK_NUMBER_COLORS: tuple[RGBA, ...] = (
    (0, 0, 0, 255),
    (0, 0, 255, 255),
    (0, 128, 0, 255),
    (255, 0, 0, 255),
    (128, 0, 128, 255),
    (128, 0, 0, 255),
    (0, 128, 128, 255),
    (0, 0, 0, 255),
    (128, 128, 128, 255),
)

FONT_PATHS: tuple[str, ...] = (
    "/System/Library/Fonts/Helvetica.ttc",
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/System/Library/Fonts/Times.ttc",
    "/System/Library/Fonts/ArialHB.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
)


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def cell_at(
    mouse_x: int, mouse_y: int, width: int, height: int
) -> tuple[int, int] | None:
    """Map a window position to a grid cell, or None when it falls outside.

    The division rounds toward zero, so positions up to one cell to the
    left of or above the grid still map to the first column or row.
    """
    cell_x = _truncating_div(mouse_x - GRID_OFFSET_X, CELL_SIZE)
    cell_y = _truncating_div(mouse_y - GRID_OFFSET_Y, CELL_SIZE)
    if not 0 <= cell_x < width or not 0 <= cell_y < height:
        return None
    return cell_x, cell_y


class GameRenderer:
    """A pygame window that draws the state of a Minesweeper game."""

    def __init__(self, window_width: int, window_height: int) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def __enter__(self) -> GameRenderer:
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    @property
    def has_font(self) -> bool:
        """Whether text is drawn with a real font rather than square markers."""
        return self._font is not None

    def initialize(self) -> None:
        """Open the window and load a font; raise RuntimeError on failure."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL could not initialize! SDL_Error: {exc}") from exc
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(
                f"SDL_ttf could not initialize! SDL_ttf Error: {exc}"
            ) from exc
        try:
            self._screen = pygame.display.set_mode(
                (self.window_width, self.window_height)
            )
        except pygame.error as exc:
            raise RuntimeError(
                f"Window could not be created! SDL_Error: {exc}"
            ) from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._font = self._load_font()

    @staticmethod
    def _load_font() -> pygame.font.Font | None:
        for path in FONT_PATHS:
            try:
                font = pygame.font.Font(path, FONT_SIZE)
            except (OSError, pygame.error) as exc:
                print(f"Failed to load font: {path} ({exc})")
                continue
            print(f"Successfully loaded font: {path}")
            return font
        print(
            "Failed to load any font! Numbers will be displayed as colored "
            "squares instead.",
            file=sys.stderr,
        )
        return None

    def cleanup(self) -> None:
        """Release the font and window and shut pygame down."""
        self._font = None
        self._screen = None
        pygame.font.quit()
        pygame.display.quit()
        pygame.quit()

    def render(self, game: Minesweeper) -> None:
        """Draw the status line and every cell, then show the frame."""
        screen = self._require_screen()
        screen.fill(COLOR_BACKGROUND)

        if game.game_won:
            self._render_text("*** CONGRATULATIONS! YOU WIN! ***", 20, 20, COLOR_WIN_TITLE)
            self._render_text("Press 'R' to play again", 20, 40, COLOR_WIN_HINT)
        elif game.game_over:
            self._render_text("GAME OVER! Mine hit!", 20, 20, COLOR_LOSS_TITLE)
            self._render_text("Press 'R' to restart", 20, 40, COLOR_LOSS_HINT)
        else:
            self._render_text(
                "Left click: reveal, Right click: flag", 20, 20, COLOR_TEXT
            )

        for y in range(game.height):
            for x in range(game.width):
                self._render_cell(x, y, game)

        pygame.display.flip()

    def cell_from_mouse(
        self, mouse_x: int, mouse_y: int, game: Minesweeper
    ) -> tuple[int, int] | None:
        """The cell of ``game`` under a window position, or None."""
        return cell_at(mouse_x, mouse_y, game.width, game.height)

    def _require_screen(self) -> pygame.Surface:
        if self._screen is None:
            raise RuntimeError("renderer is not initialized")
        return self._screen

    def _render_cell(self, x: int, y: int, game: Minesweeper) -> None:
        screen = self._require_screen()
        screen_x = GRID_OFFSET_X + x * CELL_SIZE
        screen_y = GRID_OFFSET_Y + y * CELL_SIZE
        cell_rect = pygame.Rect(screen_x, screen_y, CELL_SIZE - 1, CELL_SIZE - 1)

        if game.is_revealed(x, y):
            screen.fill(COLOR_REVEALED, cell_rect)
            if game.is_mine(x, y):
                screen.fill(COLOR_MINE, cell_rect)
            else:
                number = game.number(x, y)
                if number > 0:
                    color = (
                        NUMBER_COLORS[number]
                        if number < len(NUMBER_COLORS)
                        else COLOR_TEXT
                    )
                    self._render_text(str(number), screen_x + 10, screen_y + 8, color)
        else:
            screen.fill(COLOR_CELL, cell_rect)
            if game.is_flagged(x, y):
                flag_rect = pygame.Rect(
                    screen_x + 8, screen_y + 8, CELL_SIZE - 16, CELL_SIZE - 16
                )
                screen.fill(COLOR_FLAG, flag_rect)

        pygame.draw.rect(screen, COLOR_BORDER, cell_rect, 1)

    def _render_text(self, text: str, x: int, y: int, color: RGBA) -> None:
        screen = self._require_screen()
        if self._font is None:
            self._render_number_marker(text, x, y)
            return
        try:
            surface = self._font.render(text, False, color)
        except pygame.error:
            return
        screen.blit(surface, (x, y))

    def _render_number_marker(self, text: str, x: int, y: int) -> None:
        """Stand-in for a digit 1-8: up to four small squares in its colour."""
        if len(text) != 1 or not "1" <= text <= "8":
            return
        screen = self._require_screen()
        num = int(text)
        color = FALLBACK_NUMBER_COLORS[num]
        square_size = 3
        for i in range(min(num, 4)):
            offset_x = (i % 2) * 6
            offset_y = (i // 2) * 6
            screen.fill(
                color,
                pygame.Rect(x + 6 + offset_x, y + 6 + offset_y, square_size, square_size),
            )