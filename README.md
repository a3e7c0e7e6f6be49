# minesweeper

The classic Minesweeper puzzle game in a small desktop window, built on pygame.

The board is 9 × 9 and holds 10 mines. Every cell that is not a mine is numbered with how many mines touch it. Uncover every cell that is not a mine and you win. Uncover a mine and you lose, and all the mines are shown.

## Installing

```
pip install .
```

## Playing

```
minesweeper
```

- **Left click** uncovers a cell. If the cell has no neighbouring mines, its neighbours are uncovered too, and this spreads outward.
- **Right click** puts a flag on a covered cell or takes it off. A flagged cell cannot be uncovered.
- **R** starts a new game with the mines placed again.

Once a game is won or lost, clicks do nothing until you press **R**. The game runs at about 60 frames a second until the window is closed.

`minesweeper --help` prints a short description of the controls. The command takes no other options.

The numbers are drawn with a system font when one can be found, such as Helvetica on macOS or DejaVu Sans or Liberation Sans on Linux. If no font is found, each number is drawn as a small group of coloured squares.

## Using the game logic in your own code

The rules live in `minesweeper.game`, apart from the window code:

```python
import random
from minesweeper.game import Minesweeper

game = Minesweeper(9, 9, 10, random.Random(1))
game.reveal(4, 4)
if game.game_over:
    print("Boom")
elif game.game_won:
    print("Cleared")
print(game.number(0, 0), game.is_revealed(0, 0), game.is_flagged(0, 0))
game.toggle_flag(0, 0)
game.reset()
```

`Minesweeper` raises `ValueError` when the width or height is not positive, the mine count is negative, or there are more mines than cells. `number(x, y)` gives the count of neighbouring mines, `-1` for a mine and `0` outside the board. Passing a `random.Random` makes mine placement repeatable.

`minesweeper.renderer.cell_at(mouse_x, mouse_y, width, height)` turns a position in the window into the `(x, y)` board cell under it. It gives `None` when the position is outside the grid.

`minesweeper.renderer.GameRenderer` opens the window and draws a game. It can be used as a context manager, which calls `initialize()` on entry and `cleanup()` on exit. `initialize()` raises `RuntimeError` if the display or window cannot be set up.

`minesweeper.app.handle_event(game, event)` applies one pygame event to a game and returns `False` when the player closes the window.

## What it does not do

There is one board size and one mine count, and neither can be changed from the command line. The game has no timer, no mine counter, no high scores and no saved games.

## Running the tests

```
pip install ".[test]"
pytest
```