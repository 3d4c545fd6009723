# torres

Towers of Hanoi for the terminal. All prompts and messages are in Spanish. Colours are drawn with ANSI escape sequences.

## Installation

```
pip install .
```

## Playing

```
torres
```

You can also start the game with `python -m torres.game`.

The game first asks for a number of disks from 3 to 7. If the answer is not a whole number in that range, it prints an error and asks again. With a valid count, the game does three things:

- It draws the disks stacked on tower A.
- It prints every move of the recursive solution, for example `Mover disco 1 de A a C`.
- It states how many moves were needed (2ⁿ − 1) and draws the disks stacked on tower C.

A menu then offers three choices:

- `[1]` start again with another number of disks
- `[2]` quit
- `[3]` solve the puzzle yourself

In manual play, each turn asks for a source tower and a destination tower, numbered 1 to 3. The game refuses three kinds of move and prints a message for each:

- a tower number outside 1–3
- a move from an empty tower
- putting a larger disk on a smaller one

When every disk is on tower 3, the game congratulates you and asks whether to play again. The game also exits when standard input runs out.

## Using it as a library

```python
from torres.hanoi import Towers, moves, minimum_moves, validate_disk_count

for move in moves(3, "A", "C", "B"):
    print(move)              # Move(disk, source, target); str() gives the Spanish line

print(minimum_moves(3))      # 7
print(validate_disk_count("5"))  # 5; raises ValueError outside 3-7

towers = Towers(3)
towers.move(1, 3)            # returns the size of the moved disk
print(towers.stacks)         # ((3, 2), (), (1,))
print(towers.render())       # "Torre 1: 3 2 \nTorre 2: \nTorre 3: 1 \n"
print(towers.is_solved())    # False
```

`render_initial(n)` and `render_final(n)` return the plain-text pictures of the starting and finished towers.

`Towers.move` raises one of these errors for a refused move, all subclasses of `HanoiError`:

- `InvalidTowerError`
- `EmptyTowerError`
- `IllegalMoveError`

`torres.game` provides two functions that write to any text stream:

- `solve(num_disks, stream)` prints the solution.
- `manual(num_disks, stdin, stdout)` runs manual play. It returns `True` when the puzzle is solved and `False` if input runs out.

`torres.console` provides the colour and cursor helpers that the game uses:

- `Color`, console attribute numbers from 0 to 15
- `color_code`
- `color`
- `gotoxy`
- `gotox`
- `clear_screen`

## Tic-tac-toe helpers

`torres.tictactoe` provides two functions for a 3×3 board given as three rows of three cells:

- `draw_board(board, stream)` writes the board with separators.
- `has_line(board, mark)` tells whether the mark fills a row, a column or a diagonal.

### What is not included

The package has no tic-tac-toe game: there is no command, no turn handling and no score table. It has only these two helpers.

## Tests

```
pip install .[test]
pytest
```