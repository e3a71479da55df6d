"""Drawing the board, the side panels and the end-of-turn button."""

from __future__ import annotations

from pathlib import Path

import pygame

from .model import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SIZE,
    CELL_HEIGHT,
    CELL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Cell,
    Game,
)
from .rules import SKIP_BUTTON

MAGENTA = (255, 0, 255)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

PANEL_WIDTH = 251
SPRITE_MARGIN = 10
SPELL_ICON_POSITIONS = ((85, 200), (85, 300), (85, 400))
ROSTER_SKIN_X = 1400
ROSTER_HEALTH_X = 1300
ROSTER_STEP = 200


def highlighted_cells(game: Game) -> list[Cell]:
    """The board cells around the current player, inside the board."""
    col, row = game.current_player().cell
    return [
        (col + dx, row + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
        and 0 <= col + dx < BOARD_SIZE
        and 0 <= row + dy < BOARD_SIZE
    ]


def _cell_origin(cell: Cell) -> tuple[int, int]:
    col, row = cell
    return (col * CELL_WIDTH + BOARD_OFFSET_X, row * CELL_HEIGHT + BOARD_OFFSET_Y)


def _overlay(color: tuple[int, int, int], alpha: int) -> pygame.Surface:
    surface = pygame.Surface((CELL_WIDTH, CELL_HEIGHT))
    surface.fill(color)
    surface.set_alpha(alpha)
    return surface


class Renderer:
    """Draws a game onto a screen surface, loading images from a directory."""

    def __init__(self, screen: pygame.Surface, assets_dir: str | Path) -> None:
        pygame.font.init()
        self.screen = screen
        self.assets_dir = Path(assets_dir)
        self.buffer = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self._font = pygame.font.Font(None, 16)
        self._images: dict[str, pygame.Surface] = {}
        self._highlight = _overlay(BLUE, 40)
        self._target = _overlay(RED, 128)

    def _image(self, name: str) -> pygame.Surface:
        image = self._images.get(name)
        if image is None:
            path = self.assets_dir / name
            if not path.is_file():
                raise FileNotFoundError(f"missing image: {path}")
            image = pygame.image.load(str(path))
            image.set_colorkey(MAGENTA)
            self._images[name] = image
        return image

    def _text(self, text: str, pos: tuple[int, int], color: tuple[int, int, int]) -> None:
        self.buffer.blit(self._font.render(text, True, color, BLACK), pos)

    def _draw_board(self, game: Game) -> None:
        for col, column in enumerate(game.board):
            for row, kind in enumerate(column):
                tile = self._image(game.tile_skins[kind])
                self.buffer.blit(tile, _cell_origin((col, row)))

    def draw(self, game: Game, target: Cell | None = None) -> None:
        """Draw a full frame; a target cell is shaded red for spell aiming."""
        self.buffer.fill(BLACK)
        self._draw_board(game)

        for player in game.players:
            if player.alive:
                x, y = _cell_origin(player.cell)
                self.buffer.blit(
                    self._image(player.skin), (x + SPRITE_MARGIN, y + SPRITE_MARGIN)
                )

        for cell in highlighted_cells(game):
            self.buffer.blit(self._highlight, _cell_origin(cell))

        current = game.current_player()
        self.buffer.fill(BLACK, pygame.Rect(0, 0, PANEL_WIDTH, SCREEN_HEIGHT))
        self.buffer.blit(self._image(current.skin), (100, 0))
        self._text("Tours de :", (10, 35), WHITE)
        self._text(str(current.pm), (125, 130), RED)
        self._text(str(current.pa), (120, 150), BLUE)
        self._text(str(current.health), (115, 170), GREEN)
        for spell_index, pos in zip(current.spells, SPELL_ICON_POSITIONS):
            self.buffer.blit(self._image(game.spells[spell_index].skin), pos)

        for index, player in enumerate(game.players):
            if player.alive:
                top = index * ROSTER_STEP
                self.buffer.blit(self._image(player.skin), (ROSTER_SKIN_X, top))
                self._text(str(player.health), (ROSTER_HEALTH_X, top + 35), GREEN)

        if target is not None:
            self.buffer.blit(self._target, _cell_origin(target))

        self.screen.blit(self.buffer, (0, 0))
        left, top, right, bottom = SKIP_BUTTON
        self.screen.fill(GREEN, pygame.Rect(left, top, right - left + 1, bottom - top + 1))