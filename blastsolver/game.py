"""Board, shapes and the search that places three shapes on a Block Blast board."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

BOARD_SIZE = 8
SHAPE_SIZE = 5
INVALID_INPUT_MESSAGE = "Invalid input. Please enter 0 or 1."

_BOARD_RULE = "_" * 33
_SHAPE_RULE = "_" * 20

_log = logging.getLogger(__name__)

Grid = tuple[tuple[int, ...], ...]
Board = list[list[int]]


class InvalidCellError(ValueError):
    """Raised when grid input holds a non-integer token or runs out of cells."""


@dataclass(frozen=True)
class Shape:
    """A piece drawn on a SHAPE_SIZE x SHAPE_SIZE grid of 0s and 1s."""

    grid: Grid
    id: int

    def __post_init__(self) -> None:
        grid = tuple(tuple(int(cell) for cell in row) for row in self.grid)
        if len(grid) != SHAPE_SIZE or any(len(row) != SHAPE_SIZE for row in grid):
            raise ValueError(f"shape grid must be {SHAPE_SIZE}x{SHAPE_SIZE}")
        if any(cell not in (0, 1) for row in grid for cell in row):
            raise ValueError("shape cells must be 0 or 1")
        object.__setattr__(self, "grid", grid)

    def valid_count(self) -> int:
        """Number of filled cells in the shape."""
        return sum(map(sum, self.grid))

    def __lt__(self, other: Shape) -> bool:
        return self.id < other.id

    def _offsets(self) -> list[tuple[int, int]]:
        """Filled cells as (up, left) offsets from the bottom-right corner."""
        last = SHAPE_SIZE - 1
        return [
            (last - row, last - col)
            for row, cells in enumerate(self.grid)
            for col, cell in enumerate(cells)
            if cell == 1
        ]


@dataclass(frozen=True)
class SolutionStep:
    """One shape placed with its bottom-right corner at (x, y)."""

    shape: Shape
    x: int
    y: int
    placed: Grid
    cleared: Grid


@dataclass(frozen=True)
class Solution:
    """A complete sequence of placements starting from a board."""

    start: Grid
    steps: tuple[SolutionStep, ...]

    @property
    def order(self) -> tuple[Shape, ...]:
        return tuple(step.shape for step in self.steps)

    @property
    def final(self) -> Grid:
        return self.steps[-1].cleared if self.steps else self.start


def _token_stream(tokens: str | Iterable) -> Iterator:
    if isinstance(tokens, str):
        return iter(tokens.split())
    return iter(tokens)


def read_grid(tokens: str | Iterable, size: int) -> Grid:
    """Read size*size cells row by row; values other than 0 or 1 are skipped."""
    stream = _token_stream(tokens)
    needed = size * size
    cells: list[int] = []
    while len(cells) < needed:
        try:
            token = next(stream)
        except StopIteration:
            raise InvalidCellError(
                f"expected {needed} cells, got {len(cells)}"
            ) from None
        try:
            value = int(token)
        except (TypeError, ValueError):
            raise InvalidCellError(f"not an integer: {token!r}") from None
        if value not in (0, 1):
            _log.warning(INVALID_INPUT_MESSAGE)
            continue
        cells.append(value)
    return tuple(tuple(cells[start:start + size]) for start in range(0, needed, size))


def read_board(tokens: str | Iterable) -> Board:
    """Read a BOARD_SIZE x BOARD_SIZE board."""
    return [list(row) for row in read_grid(tokens, BOARD_SIZE)]


def read_shape(tokens: str | Iterable, shape_id: int) -> Shape:
    """Read a SHAPE_SIZE x SHAPE_SIZE shape and give it an id."""
    return Shape(read_grid(tokens, SHAPE_SIZE), shape_id)


def _format_grid(title: str, rule: str, grid: Sequence[Sequence[int]]) -> str:
    lines = ["", title, rule]
    for row in grid:
        lines.append("".join("| 1 " if cell == 1 else "|   " for cell in row) + "|")
    lines.append(rule)
    return "\n".join(lines) + "\n"


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board, showing 1 for taken squares and blanks for empty ones."""
    return _format_grid("Board", _BOARD_RULE, board)


def format_shape(shape: Shape) -> str:
    """Render a shape with its id."""
    return _format_grid(f"Shape {shape.id}", _SHAPE_RULE, shape.grid)


def empty_board() -> Board:
    """A board with every square empty."""
    return [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _freeze(board: Board) -> Grid:
    return tuple(tuple(row) for row in board)


def where_shape_fits(shape: Shape, board: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """All (x, y) anchors of the shape's bottom-right corner where it fits.

    Anchors are scanned row by row (y outer, x inner) over the board enlarged
    by SHAPE_SIZE - 1 on the right and bottom.
    """
    span = BOARD_SIZE + SHAPE_SIZE - 1
    offsets = shape._offsets()
    fits = []
    for y in range(span):
        for x in range(span):
            free = sum(
                1
                for up, left in offsets
                if 0 <= y - up < BOARD_SIZE
                and 0 <= x - left < BOARD_SIZE
                and board[y - up][x - left] == 0
            )
            if free == len(offsets):
                fits.append((x, y))
    return fits


def _paint(shape: Shape, x: int, y: int, board: Board, value: int) -> None:
    targets = [
        (y - up, x - left)
        for up, left in shape._offsets()
        if y - up >= 0 and x - left >= 0
    ]
    for row, col in targets:
        if row >= len(board) or col >= len(board[row]):
            raise ValueError(f"shape at ({x}, {y}) reaches past the board")
    for row, col in targets:
        board[row][col] = value


def insert_shape(shape: Shape, x: int, y: int, board: Board) -> None:
    """Fill the shape's squares with its bottom-right corner at (x, y).

    Squares that fall above or left of the board are skipped.
    """
    _paint(shape, x, y, board, 1)


def remove_shape(shape: Shape, x: int, y: int, board: Board) -> None:
    """Empty the shape's squares with its bottom-right corner at (x, y)."""
    _paint(shape, x, y, board, 0)


def clear_full_lines(board: Board) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Empty every full row and column at once; return the cleared indices."""
    full_rows = tuple(i for i, row in enumerate(board) if all(cell != 0 for cell in row))
    full_cols = tuple(
        j for j in range(len(board[0]) if board else 0)
        if all(row[j] != 0 for row in board)
    )
    for i in full_rows:
        board[i] = [0] * len(board[i])
    for j in full_cols:
        for row in board:
            row[j] = 0
    return full_rows, full_cols


class BlockBlast:
    """A board with a set of shapes to place on it."""

    def __init__(self, board: Sequence[Sequence[int]], shapes: Iterable[Shape]) -> None:
        self.board: Board = [list(row) for row in board]
        if len(self.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.board):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self.shapes: tuple[Shape, ...] = tuple(sorted(shapes))

    def solve_order(self, shapes: Sequence[Shape]) -> list[tuple[int, int]] | None:
        """First placements that fit the shapes in the given order, or None."""
        return self._search(tuple(shapes), 0, [list(row) for row in self.board])

    def _search(self, shapes: tuple[Shape, ...], index: int, board: Board):
        if index == len(shapes):
            return []
        shape = shapes[index]
        for x, y in where_shape_fits(shape, board):
            trial = [list(row) for row in board]
            insert_shape(shape, x, y, trial)
            clear_full_lines(trial)
            rest = self._search(shapes, index + 1, trial)
            if rest is not None:
                return [(x, y), *rest]
        return None

    def _replay(self, order: tuple[Shape, ...], placements: list[tuple[int, int]]) -> Solution:
        board = [list(row) for row in self.board]
        steps = []
        for shape, (x, y) in zip(order, placements):
            insert_shape(shape, x, y, board)
            placed = _freeze(board)
            clear_full_lines(board)
            steps.append(SolutionStep(shape, x, y, placed, _freeze(board)))
        return Solution(_freeze(self.board), tuple(steps))

    def solutions(self) -> Iterator[Solution]:
        """The first solution of each shape order, orders taken in id order."""
        seen: set[tuple[int, ...]] = set()
        for order in itertools.permutations(self.shapes):
            key = tuple(shape.id for shape in order)
            if key in seen:
                continue
            seen.add(key)
            placements = self.solve_order(order)
            if placements is not None:
                yield self._replay(order, placements)

    def report(self) -> str:
        """Text describing every solution found, step by step."""
        parts = []
        for solution in self.solutions():
            parts.append(format_board(solution.start))
            names = "".join(f"Shape {shape.id} " for shape in solution.order)
            parts.append(f"\nSolution found, order: {names}\n")
            for step in solution.steps:
                parts.append(f"\nShape {step.shape.id}: ({step.x}, {step.y})\n")
                parts.append(format_board(step.placed))
            parts.append(format_board(solution.final))
            parts.append("Done!\n")
        return "".join(parts) if parts else "No solution found.\n"