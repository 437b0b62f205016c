"""Command line entry point: read a board and three pieces, print solutions."""

from __future__ import annotations

import argparse
import sys

from blastsolver.game import BlockBlast, InvalidCellError, format_shape, read_board, read_shape

DEFAULT_BOARD = "demoBoard1.txt"
DEFAULT_PIECES = ("demoPiece1.txt", "demoPiece2.txt", "demoPiece3.txt")


def open_or_die(path: str) -> str:
    """Return the text of a file, raising RuntimeError if it cannot be opened."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise RuntimeError(f"Unable to open file {path}") from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blastsolver",
        description="Find placements for three Block Blast pieces on a board.",
    )
    parser.add_argument("board", nargs="?", default=DEFAULT_BOARD)
    parser.add_argument("piece1", nargs="?", default=DEFAULT_PIECES[0])
    parser.add_argument("piece2", nargs="?", default=DEFAULT_PIECES[1])
    parser.add_argument("piece3", nargs="?", default=DEFAULT_PIECES[2])
    args = parser.parse_args(argv)

    try:
        board = read_board(open_or_die(args.board))
        shapes = [
            read_shape(open_or_die(path), shape_id)
            for shape_id, path in enumerate((args.piece1, args.piece2, args.piece3), start=1)
        ]
    except (RuntimeError, InvalidCellError) as exc:
        print(f"blastsolver: {exc}", file=sys.stderr)
        return 1

    for shape in shapes:
        print(format_shape(shape), end="")
    print(BlockBlast(board, shapes).report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())