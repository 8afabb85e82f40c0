# hexxagon

Hexxagon is a two-player strategy game on a hexagonal board of 61
hexagonal cells, three of which are blocked. Each side starts with three
pieces. On your turn you either grow a piece into a neighbouring free
cell or jump a piece two cells away, which leaves its old cell empty.
Any opponent pieces next to the cell you land on become yours. The match
ends when no free cell is left, or when the opponent has no piece that
can move; the remaining free cells then go to the player who just moved.
The side with the higher score wins.

## Installing

```
pip install .
```

## Playing

```
hexxagon
```

This opens a resizable window with the main menu:

- **New Game**: play against the computer (**AI**) or against another
  person at the same screen (**Hot Seat**). Red always moves first; in a
  game against the computer you play red.
- **Save Game**: type a file path and press **OK**. The path must not
  exist yet. Relative paths are taken from the current directory.
- **Load Game**: type the path of an existing save file and press
  **OK**. A file that is not a valid save is rejected with a message in
  the dialog.
- **Leaderboard**: the ten best scores from games won against the
  computer, each shown with its date.
- **Exit**: close the game.

Press **Escape** to open or close the main menu while a game is running.

Click one of your pieces to see its moves highlighted, then click a
highlighted cell to move there. Clicking the selected piece again drops
the selection.

The leaderboard is kept in `records.bin` in the current directory. Use
`--records` to choose another file:

```
hexxagon --records ~/hexxagon-scores.bin
```

## Using the game logic in code

The rules do not depend on the window, so they can be used on their own:

```python
from hexxagon.board import State
from hexxagon.game import Game
from hexxagon.bot import calculate_move

game = Game()
game.prepare(playing_with_computer=False)
print(game.score(State.RED), game.score(State.BLUE))  # 3 3

move = calculate_move(game.board, 0)
print(move.source, move.target, move.score)
game.make_move(move.target, move.source)
```

- `hexxagon.board`: `Board` (cells indexed 0 to 60, `adjacent`,
  `possible_moves`, `indices`, `copy`), the `State` enum and `opponent`.
- `hexxagon.game`: `Game` with `prepare`, `select` (a click on a cell),
  `make_move`, `load_board`, `calculate_scores` and `score`.
- `hexxagon.bot`: `calculate_move` returns the best `ScoredMove` for the
  side to play, or `ScoredMove(0, 0, 0)` when it has no move.
- `hexxagon.savefile`: `save_game`, `load_game` (raises
  `SaveFormatError` for invalid files) and `validate_path`. A save file
  holds one byte per cell, then one byte for whether the computer plays,
  then the colour to move.
- `hexxagon.records`: `read_records` and `add_score` for the leaderboard
  file; each `Record` holds a day count since 1970-01-01 and a score.

## Running the tests

```
pip install .[test]
pytest
```