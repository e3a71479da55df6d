import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from ecefus.display import Renderer, highlighted_cells
from ecefus.model import (
    BOARD_SIZE,
    PLAYER_SKINS,
    TILE_SKINS,
    Game,
    Player,
    default_spells,
)

TILE_COLORS = [(10, 20, 30), (40, 50, 60), (70, 80, 90)]
SKIN_COLORS = [(200, 10, 10), (10, 200, 10), (10, 10, 200)]


def make_game(cells, board_kind=0):
    players = [
        Player(number=i, skin=PLAYER_SKINS[i], col=c, row=r)
        for i, (c, r) in enumerate(cells)
    ]
    board = [[board_kind] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    return Game(players=players, spells=default_spells(), board=board)


@pytest.fixture
def assets(tmp_path):
    for name, color in zip(TILE_SKINS, TILE_COLORS):
        surface = pygame.Surface((100, 100))
        surface.fill(color)
        pygame.image.save(surface, str(tmp_path / name))
    for name, color in zip(PLAYER_SKINS, SKIN_COLORS):
        surface = pygame.Surface((20, 20))
        surface.fill(color)
        pygame.image.save(surface, str(tmp_path / name))
    for spell in default_spells():
        surface = pygame.Surface((30, 30))
        surface.fill((120, 120, 0))
        pygame.image.save(surface, str(tmp_path / spell.skin))
    return tmp_path


@pytest.fixture
def screen():
    return pygame.Surface((1500, 800))


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_highlight_in_corner_has_three_cells():
    game = make_game([(0, 0), (5, 5), (7, 7)])
    assert sorted(highlighted_cells(game)) == [(0, 1), (1, 0), (1, 1)]


def test_highlight_in_middle_has_eight_neighbours():
    game = make_game([(4, 4), (0, 0), (7, 7)])
    cells = highlighted_cells(game)
    assert len(cells) == 8
    assert (4, 4) not in cells
    assert all(abs(c - 4) <= 1 and abs(r - 4) <= 1 for c, r in cells)


def test_highlight_follows_current_player():
    game = make_game([(0, 0), (7, 7), (3, 3)])
    game.turn = 1
    cells = highlighted_cells(game)
    assert len(cells) == 3
    assert all(6 <= c <= 7 and 6 <= r <= 7 for c, r in cells)


def test_draw_shows_board_and_skip_button(assets, screen):
    game = make_game([(0, 0), (7, 7), (7, 0)])
    Renderer(screen, assets).draw(game)
    assert rgb(screen, (190, 750)) == (0, 255, 0)
    assert rgb(screen, (350 + 450, 450)) == TILE_COLORS[0]
    assert rgb(screen, (200, 600)) == (0, 0, 0)


def test_draw_places_player_sprites(assets, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    Renderer(screen, assets).draw(game)
    assert rgb(screen, (350 + 400 + 15, 400 + 15)) == SKIN_COLORS[0]
    assert rgb(screen, (350 + 15, 700 + 15)) == SKIN_COLORS[1]


def test_draw_shades_neighbours_blue(assets, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    Renderer(screen, assets).draw(game)
    shaded = rgb(screen, (350 + 300 + 50, 300 + 50))
    assert shaded != TILE_COLORS[0]
    assert shaded[2] > TILE_COLORS[0][2]


def test_draw_target_is_shaded_red(assets, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    Renderer(screen, assets).draw(game, (1, 1))
    shaded = rgb(screen, (350 + 100 + 50, 100 + 50))
    assert shaded[0] > TILE_COLORS[0][0]


def test_dead_player_is_not_drawn(assets, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    game.players[2].alive = False
    Renderer(screen, assets).draw(game)
    assert rgb(screen, (1405, 2 * 200 + 5)) == (0, 0, 0)
    assert rgb(screen, (1405, 200 + 5)) == SKIN_COLORS[1]
    assert rgb(screen, (350 + 700 + 15, 15)) == TILE_COLORS[0]


def test_current_player_skin_in_side_panel(assets, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    game.turn = 2
    Renderer(screen, assets).draw(game)
    assert rgb(screen, (105, 5)) == SKIN_COLORS[2]


def test_missing_image_raises(tmp_path, screen):
    game = make_game([(4, 4), (0, 7), (7, 0)])
    with pytest.raises(FileNotFoundError):
        Renderer(screen, tmp_path).draw(game)