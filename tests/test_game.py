import logging

import pytest

from blastsolver.game import (
    BOARD_SIZE,
    INVALID_INPUT_MESSAGE,
    SHAPE_SIZE,
    BlockBlast,
    InvalidCellError,
    Shape,
    clear_full_lines,
    empty_board,
    format_board,
    format_shape,
    insert_shape,
    read_board,
    read_grid,
    read_shape,
    remove_shape,
    where_shape_fits,
)


def make_shape(cells, shape_id):
    grid = [[0] * SHAPE_SIZE for _ in range(SHAPE_SIZE)]
    for row, col in cells:
        grid[row][col] = 1
    return Shape(tuple(tuple(r) for r in grid), shape_id)


def full_board():
    return [[1] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def test_read_grid_round_trip():
    grid = ((0, 1, 1), (1, 0, 0), (0, 0, 1))
    text = "\n".join(" ".join(str(c) for c in row) for row in grid)
    assert read_grid(text, 3) == grid


def test_read_grid_skips_out_of_range_values(caplog):
    with caplog.at_level(logging.WARNING, logger="blastsolver.game"):
        assert read_grid("2 1 0 1 1", 2) == ((1, 0), (1, 1))
    assert caplog.messages == [INVALID_INPUT_MESSAGE]


def test_read_grid_accepts_iterables():
    assert read_grid([1, 0, 0, 1], 2) == ((1, 0), (0, 1))


def test_read_grid_runs_out():
    with pytest.raises(InvalidCellError):
        read_grid("1 0 1", 2)


def test_read_grid_rejects_non_integer():
    with pytest.raises(InvalidCellError):
        read_grid("1 x 0 1", 2)


def test_read_board_and_shape():
    board = read_board(" ".join(["1"] * (BOARD_SIZE * BOARD_SIZE)))
    assert board == full_board()
    shape = read_shape(" ".join(["1"] + ["0"] * (SHAPE_SIZE * SHAPE_SIZE - 1)), 2)
    assert shape.id == 2
    assert shape.valid_count() == 1
    assert shape.grid[0][0] == 1


def test_shape_rejects_bad_grids():
    with pytest.raises(ValueError):
        Shape(((0,) * SHAPE_SIZE,) * (SHAPE_SIZE - 1), 1)
    with pytest.raises(ValueError):
        Shape(((2,) * SHAPE_SIZE,) * SHAPE_SIZE, 1)


def test_shapes_order_by_id():
    a = make_shape([(0, 0)], 3)
    b = make_shape([(1, 1), (2, 2)], 1)
    assert sorted([a, b]) == [b, a]


def test_bottom_right_cell_fits_inside_board():
    shape = make_shape([(4, 4)], 1)
    fits = where_shape_fits(shape, empty_board())
    assert len(fits) == BOARD_SIZE * BOARD_SIZE
    assert fits[0] == (0, 0)
    assert fits[-1] == (BOARD_SIZE - 1, BOARD_SIZE - 1)


def test_top_left_cell_anchor_is_offset():
    shape = make_shape([(0, 0)], 1)
    fits = where_shape_fits(shape, empty_board())
    assert len(fits) == BOARD_SIZE * BOARD_SIZE
    assert all(x >= SHAPE_SIZE - 1 and y >= SHAPE_SIZE - 1 for x, y in fits)


def test_empty_shape_fits_everywhere():
    fits = where_shape_fits(make_shape([], 1), full_board())
    span = BOARD_SIZE + SHAPE_SIZE - 1
    assert len(fits) == span * span


def test_taken_square_blocks_fit():
    board = empty_board()
    board[0][0] = 1
    fits = where_shape_fits(make_shape([(4, 4)], 1), board)
    assert (0, 0) not in fits
    assert len(fits) == BOARD_SIZE * BOARD_SIZE - 1


def test_insert_then_remove_round_trip():
    shape = make_shape([(3, 4), (4, 3), (4, 4)], 1)
    board = empty_board()
    insert_shape(shape, 5, 6, board)
    assert sum(map(sum, board)) == shape.valid_count()
    assert board[6][5] == 1
    remove_shape(shape, 5, 6, board)
    assert board == empty_board()


def test_insert_skips_squares_above_or_left():
    board = empty_board()
    insert_shape(make_shape([(0, 0)], 1), 0, 0, board)
    assert board == empty_board()


def test_insert_past_board_raises():
    board = empty_board()
    with pytest.raises(ValueError):
        insert_shape(make_shape([(4, 4)], 1), BOARD_SIZE, 0, board)
    assert board == empty_board()


def test_clear_full_lines_clears_rows_and_columns_together():
    board = empty_board()
    board[3] = [1] * BOARD_SIZE
    for row in board:
        row[5] = 1
    board[0][0] = 1
    assert clear_full_lines(board) == ((3,), (5,))
    expected = empty_board()
    expected[0][0] = 1
    assert board == expected


def test_clear_full_lines_on_partial_board_changes_nothing():
    board = empty_board()
    board[2][2] = 1
    before = [list(r) for r in board]
    assert clear_full_lines(board) == ((), ())
    assert board == before


def test_format_board_layout():
    lines = format_board(empty_board()).split("\n")
    assert lines[0] == ""
    assert lines[1] == "Board"
    assert lines[2] == "_________________________________"
    assert lines[3] == "|   " * BOARD_SIZE + "|"
    assert lines[-2] == "_________________________________"
    assert lines[-1] == ""


def test_format_shape_marks_filled_cells():
    text = format_shape(make_shape([(0, 0)], 2))
    lines = text.split("\n")
    assert lines[1] == "Shape 2"
    assert lines[2] == "____________________"
    assert lines[3].startswith("| 1 |")
    assert lines[4] == "|   " * SHAPE_SIZE + "|"


def test_solutions_cover_every_order_in_id_order():
    shapes = [make_shape([(4, 4)], i) for i in (3, 1, 2)]
    game = BlockBlast(empty_board(), shapes)
    orders = [tuple(s.id for s in sol.order) for sol in game.solutions()]
    assert orders == [(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)]


def test_solution_final_board_holds_placed_squares():
    shapes = [make_shape([(4, 4)], i) for i in (1, 2, 3)]
    solution = next(BlockBlast(empty_board(), shapes).solutions())
    assert sum(map(sum, solution.final)) == 3
    for step in solution.steps:
        assert step.placed[step.y][step.x] == 1


def test_solve_order_takes_first_fit():
    board = empty_board()
    board[0][0] = 1
    shape = make_shape([(4, 4)], 1)
    game = BlockBlast(board, [shape])
    assert game.solve_order([shape]) == [where_shape_fits(shape, board)[0]]


def test_no_solution_report():
    shapes = [make_shape([(4, 4)], i) for i in (1, 2, 3)]
    game = BlockBlast(full_board(), shapes)
    assert list(game.solutions()) == []
    assert game.report() == "No solution found.\n"


def test_report_describes_solution():
    shapes = [make_shape([(4, 4)], i) for i in (1, 2, 3)]
    report = BlockBlast(empty_board(), shapes).report()
    assert "\nSolution found, order: Shape 1 Shape 2 Shape 3 \n" in report
    assert report.count("Done!\n") == 6
    assert report.startswith(format_board(empty_board()))


def test_board_size_is_checked():
    with pytest.raises(ValueError):
        BlockBlast([[0] * BOARD_SIZE], [])