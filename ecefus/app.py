"""Command-line entry point: open the window and run the game loop."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

import pygame

from .display import Renderer
from .model import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    CELL_HEIGHT,
    CELL_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Cell,
    Game,
    Spell,
    new_game,
)
from .rules import (
    NoLivingPlayerError,
    cast_spell,
    cell_at,
    end_turn,
    is_skip_button,
    select_spell,
    spell_slot_at,
    try_move,
)

FRAME_DELAY_MS = 100
FPS = 20


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="ecefus", description="A three-player turn-based battle on an 8x8 board."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the game's bitmap images",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def _load_frames(assets_dir: Path, spell: Spell) -> list[pygame.Surface]:
    frames = []
    for name in spell.frames:
        path = assets_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"missing image: {path}")
        frame = pygame.image.load(str(path))
        frame.set_colorkey((255, 0, 255))
        frames.append(frame)
    return frames


def _selected(game: Game) -> Spell:
    player = game.current_player()
    return game.spells[player.spells[player.spell_select]]


def _animate(renderer: Renderer, game: Game, cell: Cell, assets_dir: Path) -> None:
    col, row = cell
    x = col * CELL_WIDTH + BOARD_OFFSET_X
    y = row * CELL_HEIGHT + BOARD_OFFSET_Y
    for step, frame in enumerate(_load_frames(assets_dir, _selected(game))):
        renderer.draw(game)
        renderer.screen.blit(frame, (x + 10 * step, y + 10 * step))
        pygame.display.flip()
        pygame.time.wait(FRAME_DELAY_MS)


def _run(game: Game, renderer: Renderer, assets_dir: Path) -> None:
    clock = pygame.time.Clock()
    aiming = False
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
            if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
                continue
            x, y = event.pos
            if aiming:
                cell = cell_at(x, y)
                if cell is not None:
                    _animate(renderer, game, cell, assets_dir)
                    cast_spell(game, cell)
                    aiming = False
                continue
            try_move(game, cell_at(x, y))
            slot = spell_slot_at(x, y)
            if slot is not None and select_spell(game, slot):
                aiming = True
                continue
            if is_skip_button(x, y):
                end_turn(game)

        target = cell_at(*pygame.mouse.get_pos()) if aiming else None
        renderer.draw(game, target)
        pygame.display.flip()
        clock.tick(FPS)


def main(argv: list[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    args = parse_args(argv)
    if not args.assets.is_dir():
        print(f"ecefus: assets directory not found: {args.assets}", file=sys.stderr)
        return 2
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("ECEFUS")
        game = new_game(random.Random(args.seed))
        renderer = Renderer(screen, args.assets)
        _run(game, renderer, args.assets)
    except FileNotFoundError as exc:
        print(f"ecefus: {exc}", file=sys.stderr)
        return 1
    except NoLivingPlayerError:
        print("ecefus: no player is left standing", file=sys.stderr)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())