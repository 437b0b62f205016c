# blastsolver

A solver for the block-placement puzzle played on an 8x8 board. Given the
current board and three pieces, it tries every order of the pieces and looks
for a way to place all three. After each placement, full rows and columns are
cleared. It then prints the steps.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input files

All input is whitespace-separated integers, read left to right and top to
bottom. `1` marks a filled cell and `0` an empty one.

- The board: 64 cells, an 8x8 grid.
- Each piece: 25 cells, a 5x5 grid holding the piece's shape. The largest
  piece is a 1x5 or 5x1 bar.

An integer other than `0` or `1` is skipped, and reading goes on with the next
value. The module's logger records a warning, "Invalid input. Please enter 0
or 1.". A token that is not an integer is an error. So is input that runs out
before the grid is full.

An example piece file, an L shape:

```
0 0 0 0 0
0 0 0 0 0
1 0 0 0 0
1 0 0 0 0
1 1 0 0 0
```

## Running

```
blastsolver [BOARD [PIECE1 [PIECE2 [PIECE3]]]]
```

Any file you do not name takes its default: `demoBoard1.txt`,
`demoPiece1.txt`, `demoPiece2.txt` and `demoPiece3.txt`, read from the
current directory. Run with no arguments, the command uses all four defaults:

```
blastsolver
```

The pieces are numbered 1, 2 and 3 in the order given. The command prints
the three pieces first. Then, for every order in which all three pieces can
be placed, it prints:

- the starting board;
- the order;
- each placement, followed by the board with that piece placed and before
  any lines are cleared;
- the final board after the last clearing;
- `Done!`.

If no order works, it prints `No solution found.`

The command stops with exit status 1 and a message on standard error in
these cases:

- a file cannot be opened (`Unable to open file ...`);
- a file holds a token that is not an integer;
- a file has too few cells.

A placement is reported as `(x, y)`. These are the board column and row on
which the bottom-right corner of the piece's 5x5 grid lands. Values run from
0 to 11. A piece whose grid reaches past the top or left edge can still be
placed, as long as every filled cell lands on an empty board cell.

For each order, only the first placement sequence found is reported. Anchors
are tried row by row, top to bottom, and left to right within a row.

## Using it as a library

Everything lives in `blastsolver.game`:

```python
from blastsolver.game import BlockBlast, read_board, read_shape, where_shape_fits

with open("demoBoard1.txt") as f:
    board = read_board(f.read())

shapes = []
for shape_id, path in enumerate(["demoPiece1.txt", "demoPiece2.txt", "demoPiece3.txt"], 1):
    with open(path) as f:
        shapes.append(read_shape(f.read(), shape_id))

print(where_shape_fits(shapes[0], board))

game = BlockBlast(board, shapes)
for solution in game.solutions():
    print(solution.order, solution.final)

print(game.report())
```

### Reading input

- `read_grid(tokens, size)` reads either a string, which is split on
  whitespace, or any iterable of tokens.
- `read_board(tokens)` builds on it and returns a list of lists.
- `read_shape(tokens, shape_id)` builds on it and returns a `Shape`.
- Reading raises `InvalidCellError`, a subclass of `ValueError`, for a token
  that is not an integer or for input that is too short.

### Shapes

`Shape` is a frozen dataclass with `grid` and `id`. It requires a 5x5 grid of
0s and 1s, and shapes sort by `id`. `Shape.valid_count()` gives the number of
filled cells.

### Board operations

- `empty_board()` returns an 8x8 board of zeros.
- `where_shape_fits(shape, board)` lists every `(x, y)` anchor where the
  shape fits.
- `insert_shape(shape, x, y, board)` fills the shape's cells in place.
- `remove_shape(shape, x, y, board)` empties the shape's cells in place.
- Both skip cells above or left of the board. Both raise `ValueError` if a
  cell would fall below or right of it.
- `clear_full_lines(board)` empties every full row and column at once. It
  returns the indices of the cleared rows and columns.
- `format_board(board)` and `format_shape(shape)` render the text the command
  prints.

### The solver

`BlockBlast(board, shapes)` takes an 8x8 board and raises `ValueError`
otherwise. Its methods are:

- `solve_order(shapes)`: the first list of placements for the shapes in the
  given order, or `None`.
- `solutions()`: yields one `Solution` per working order, with orders taken
  in id order. A `Solution` holds the following:
  - `start`;
  - `steps`: `SolutionStep` objects with `shape`, `x`, `y`, `placed` and
    `cleared`;
  - `order`;
  - `final`.
- `report()`: the full text the command prints after the pieces.

## What it does not do

It reads the board and pieces only from files of 0s and 1s. It has no
interactive play, no scoring and no screen. It solves one round of three
pieces; it does not look ahead to later rounds or pick the best of several
solutions.