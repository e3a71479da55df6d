"""Game rules: screen hit tests, moving, melee, spells and turn order."""

from __future__ import annotations

from enum import Enum

from .model import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SIZE,
    CELL_HEIGHT,
    CELL_WIDTH,
    SCREEN_HEIGHT,
    Cell,
    Game,
    Spell,
)

MELEE_PA_COST = 2

SKIP_BUTTON = (150, SCREEN_HEIGHT - 90, 230, SCREEN_HEIGHT - 10)
SPELL_SLOTS = (
    (85, 200, 165, 280),
    (85, 300, 165, 380),
    (85, 400, 165, 480),
)


class MoveOutcome(Enum):
    MOVED = "moved"
    ATTACKED = "attacked"


class NoLivingPlayerError(RuntimeError):
    """Raised when no player is left alive to take the next turn."""


def _inside(box: tuple[int, int, int, int], x: int, y: int) -> bool:
    left, top, right, bottom = box
    return left <= x <= right and top <= y <= bottom


def cell_at(x: int, y: int) -> Cell | None:
    """The board cell under a screen position, or None outside the board."""
    if not (
        BOARD_OFFSET_X < x < BOARD_SIZE * CELL_WIDTH + BOARD_OFFSET_X
        and BOARD_OFFSET_Y < y < BOARD_SIZE * CELL_HEIGHT + BOARD_OFFSET_Y
    ):
        return None
    return ((x - BOARD_OFFSET_X) // CELL_WIDTH, (y - BOARD_OFFSET_Y) // CELL_HEIGHT)


def is_skip_button(x: int, y: int) -> bool:
    """Whether a screen position lies on the end-of-turn button."""
    return _inside(SKIP_BUTTON, x, y)


def spell_slot_at(x: int, y: int) -> int | None:
    """The spell slot under a screen position, or None."""
    for slot, box in enumerate(SPELL_SLOTS):
        if _inside(box, x, y):
            return slot
    return None


def end_turn(game: Game) -> None:
    """Refill the current player's points and pass to the next living player."""
    player = game.current_player()
    player.pa = player.base_pa
    player.pm = player.base_pm
    if not any(p.alive for p in game.players):
        raise NoLivingPlayerError("no living player can take the turn")
    game.turn = (game.turn + 1) % game.player_count
    while not game.current_player().alive:
        game.turn = (game.turn + 1) % game.player_count


def update_life(game: Game) -> None:
    """Mark every player at or below zero health as dead."""
    for player in game.players:
        if player.health <= 0:
            player.alive = False


def _adjacent(a: Cell, b: Cell) -> bool:
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def try_move(game: Game, cell: Cell | None) -> MoveOutcome | None:
    """Move the current player to a neighbouring cell, or strike whoever stands there.

    Needs at least one movement point. Moving costs one; striking costs
    two action points per player hit.
    """
    player = game.current_player()
    if cell is None or player.pm <= 0 or not _adjacent(cell, player.cell):
        return None
    if all(other.cell != cell for other in game.others()):
        player.cell = cell
        player.pm -= 1
        return MoveOutcome.MOVED
    outcome = None
    for target in game.players:
        if target.cell == cell and player.pa >= MELEE_PA_COST:
            target.health -= player.damage
            player.pa -= MELEE_PA_COST
            outcome = MoveOutcome.ATTACKED
    return outcome


def select_spell(game: Game, slot: int) -> bool:
    """Select a spell slot; keep it only if the player can afford it."""
    player = game.current_player()
    if not 0 <= slot < len(player.spells):
        raise ValueError(f"no spell slot {slot}")
    player.spell_select = slot
    if player.pa >= game.spells[player.spells[slot]].pa_cost:
        return True
    player.spell_select = None
    return False


def _selected_spell(game: Game) -> Spell:
    player = game.current_player()
    if player.spell_select is None:
        raise ValueError("no spell selected")
    return game.spells[player.spells[player.spell_select]]


def apply_spell_damage(game: Game, cell: Cell) -> None:
    """Hit every player on a cell with the selected spell."""
    spell = _selected_spell(game)
    for player in game.players:
        if player.cell == cell:
            player.health -= spell.damage
            update_life(game)


def cast_spell(game: Game, cell: Cell) -> Spell:
    """Cast the selected spell on a cell and pay its cost."""
    spell = _selected_spell(game)
    apply_spell_damage(game, cell)
    game.current_player().pa -= spell.pa_cost
    return spell