"""Game state: board geometry, spells, players and the game itself."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

SCREEN_WIDTH = 1500
SCREEN_HEIGHT = 800
CELL_WIDTH = 100
CELL_HEIGHT = 100
BOARD_OFFSET_X = 350
BOARD_OFFSET_Y = 0
BOARD_SIZE = 8
TILE_KINDS = 3
PLAYER_COUNT = 3

TILE_SKINS = ("carre0.bmp", "carre1.bmp", "carre2.bmp")
PLAYER_SKINS = ("perso1.bmp", "perso2.bmp", "perso3.bmp")

Cell = tuple[int, int]


@dataclass
class Spell:
    """A spell a player can cast on a board cell."""

    name: str
    damage: int
    pa_cost: int
    skin: str
    frames: tuple[str, ...]


@dataclass
class Player:
    """One fighter on the board."""

    number: int
    skin: str
    col: int
    row: int
    name: str = ""
    base_pa: int = 10
    base_pm: int = 5
    pa: int = 10
    pm: int = 5
    health: int = 100
    damage: int = 10
    armor: int = 0
    alive: bool = True
    spell_select: int | None = None
    spells: list[int] = field(default_factory=lambda: [0, 1, 2])

    @property
    def cell(self) -> Cell:
        return (self.col, self.row)

    @cell.setter
    def cell(self, value: Cell) -> None:
        self.col, self.row = value


@dataclass
class Game:
    """The whole game: players, spells, board tiles and whose turn it is."""

    players: list[Player]
    spells: list[Spell]
    board: list[list[int]]
    turn: int = 0
    action: int = 1
    tile_skins: tuple[str, ...] = TILE_SKINS

    @property
    def player_count(self) -> int:
        return len(self.players)

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.turn]

    def others(self) -> list[Player]:
        """The other players, in turn order after the current one."""
        count = len(self.players)
        return [self.players[(self.turn + step) % count] for step in range(1, count)]


def _spell(name: str, damage: int, pa_cost: int) -> Spell:
    return Spell(
        name=name,
        damage=damage,
        pa_cost=pa_cost,
        skin=f"{name}_visu.bmp",
        frames=tuple(f"{name}{i}.bmp" for i in range(1, 5)),
    )


def default_spells() -> list[Spell]:
    """The three spells of the game: water, fire and lightning."""
    return [
        _spell("eau", 30, 3),
        _spell("feu", 50, 5),
        _spell("foudre", 70, 7),
    ]


def new_players(rng: random.Random) -> list[Player]:
    """Three fresh players placed at random cells."""
    players = []
    for number, skin in enumerate(PLAYER_SKINS):
        col = rng.randrange(BOARD_SIZE)
        row = rng.randrange(BOARD_SIZE)
        players.append(Player(number=number, skin=skin, col=col, row=row))
    return players


def random_map(rng: random.Random) -> list[list[int]]:
    """An 8x8 grid of tile kinds, indexed as board[col][row]."""
    return [
        [rng.randrange(TILE_KINDS) for _row in range(BOARD_SIZE)]
        for _col in range(BOARD_SIZE)
    ]


def new_game(rng: random.Random | None = None) -> Game:
    """A new game: players are placed first, then the board is drawn."""
    rng = rng if rng is not None else random.Random()
    players = new_players(rng)
    board = random_map(rng)
    return Game(players=players, spells=default_spells(), board=board)