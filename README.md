# ecefus

A small turn-based tactics game for three players who share one machine.
Three fighters stand on an 8x8 board and take turns. On its turn a
fighter can move, strike a neighbour, or cast an elemental spell on any
cell of the board.

## Installing

```
pip install .
```

The game draws with pygame. Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Images

The package does not ship any images. The game loads these bitmap files
from an assets directory (the current directory by default); magenta
(255, 0, 255) is drawn as transparent:

- board tiles: `carre0.bmp`, `carre1.bmp`, `carre2.bmp`
- fighters: `perso1.bmp`, `perso2.bmp`, `perso3.bmp`
- spell icons: `eau_visu.bmp`, `feu_visu.bmp`, `foudre_visu.bmp`
- spell animation frames: `eau1.bmp` to `eau4.bmp`, `feu1.bmp` to
  `feu4.bmp`, `foudre1.bmp` to `foudre4.bmp`

## Playing

```
ecefus
ecefus --assets path/to/images --seed 42
```

- `--assets DIR`: directory holding the images (default `.`).
- `--seed N`: seed for the random board and starting cells.

`ecefus --help` lists the options. The command exits with status 2 if the
assets directory does not exist and 1 if an image is missing.

Each fighter starts with 10 action points (PA), 5 movement points (PM)
and 100 health, and fighters are placed on random cells.

- **Move**: click a free cell next to your fighter (diagonals count).
  This needs and costs 1 PM.
- **Strike**: click a neighbouring cell that holds another fighter.
  This needs at least 1 PM, costs 2 PA and deals 10 damage.
- **Cast a spell**: click one of the three spell icons in the left panel
  (if you have enough PA), then click a target cell on the board. Every
  fighter on that cell takes the spell's damage.

  | Spell     | PA cost | Damage |
  |-----------|---------|--------|
  | Water     | 3       | 30     |
  | Fire      | 5       | 50     |
  | Lightning | 7       | 70     |

- **End the turn**: click the green square in the lower left corner.
  Your PA and PM are refilled and play passes to the next fighter who is
  still alive.

When a spell lands on a fighter, every fighter at zero health or below
leaves the board. Press Escape or close the window to quit.

## What it does not do

The game does not announce a winner or end by itself when one fighter is
left; play goes on until you quit. An aimed spell cannot be cancelled:
the next click on the board casts it. There is no saving or loading of a
game.

## As a library

The rules are plain Python and need no display.

- `ecefus.model.new_game(rng)` builds a `Game` from a `random.Random`;
  `Game.current_player()` and `Game.others()` give the fighters.
- `ecefus.rules` has `try_move`, `select_spell`, `cast_spell`,
  `apply_spell_damage`, `update_life` and `end_turn`, which change the
  game in place, and `cell_at`, `spell_slot_at` and `is_skip_button` to
  map screen positions to board cells and buttons. `end_turn` raises
  `NoLivingPlayerError` when no fighter is left alive.
- `ecefus.display.Renderer(screen, assets_dir).draw(game, target)` draws
  a game onto a pygame surface; `highlighted_cells(game)` lists the cells
  around the current fighter.