import random

from blockfall_board import cells, clear_lines, full_rows, is_valid, new_board, place
from blockfall_layout import COLS, ROWS
from blockfall_piece import CATALOG, Anchor, Piece
from tests.helpers import fill_row

LINE = CATALOG[7].shape


def test_new_board_is_empty_and_fixed_size():
    board = new_board()
    assert len(board) == ROWS
    assert all(len(row) == COLS and all(c is None for c in row) for row in board)


def test_line_at_spawn_is_valid_and_can_fall():
    board = new_board()
    anchor = Anchor(4, 0)
    assert is_valid(board, LINE, anchor)
    assert is_valid(board, LINE, anchor, 0, 1)
    assert list(cells(Piece(LINE, 8), anchor)) == [(4, 0), (5, 0), (6, 0), (7, 0)]


def test_rejects_cells_past_the_walls_and_floor():
    board = new_board()
    assert not is_valid(board, LINE, Anchor(0, 0), -1, 0)
    assert not is_valid(board, LINE, Anchor(6, 0), 1, 0)
    assert is_valid(board, LINE, Anchor(6, 0))
    assert not is_valid(board, LINE, Anchor(0, ROWS - 1), 0, 1)


def test_cells_above_the_board_are_accepted():
    board = new_board()
    fill_row(board, 0)
    vertical = ((0, 0), (0, 1), (0, 2), (0, 3))
    assert is_valid(board, vertical, Anchor(3, -4))
    assert not is_valid(board, vertical, Anchor(3, -3))


def test_rejects_overlap_with_settled_cells():
    board = new_board()
    board[1][5] = 3
    assert is_valid(board, LINE, Anchor(4, 0))
    assert not is_valid(board, LINE, Anchor(4, 0), 0, 1)


def test_is_valid_matches_bruteforce_on_random_boards():
    rnd = random.Random(7)
    for _ in range(200):
        board = new_board()
        for r in range(ROWS):
            for c in range(COLS):
                if rnd.random() < 0.2:
                    board[r][c] = rnd.randint(1, 8)
        shape = CATALOG[rnd.randrange(len(CATALOG))].shape
        anchor = Anchor(rnd.randint(-3, COLS + 2), rnd.randint(-4, ROWS + 1))
        expected = True
        for x, y in shape:
            bx, by = anchor.x + x, anchor.y + y
            if not 0 <= bx < COLS or by >= ROWS:
                expected = False
            elif by >= 0 and board[by][bx] is not None:
                expected = False
        assert is_valid(board, shape, anchor) is expected


def test_is_valid_does_not_mutate_board():
    board = new_board()
    board[5][5] = 2
    snapshot = [row[:] for row in board]
    is_valid(board, LINE, Anchor(2, 5))
    assert board == snapshot


def test_place_writes_kind_into_every_cell():
    board = new_board()
    for index, entry in enumerate(CATALOG):
        board = new_board()
        piece = Piece.from_catalog(index)
        place(board, piece, Anchor(4, 10))
        for bx, by in cells(piece, Anchor(4, 10)):
            assert board[by][bx] == index + 1


def test_place_skips_cells_above_the_board():
    board = new_board()
    vertical = Piece(((0, 0), (0, 1), (0, 2), (0, 3)), 8)
    place(board, vertical, Anchor(2, -2))
    assert board[0][2] == 8 and board[1][2] == 8
    assert sum(c is not None for row in board for c in row) == 2


def test_clear_single_row_shifts_everything_down():
    board = new_board()
    fill_row(board, ROWS - 1, kind=2, skip={9})
    board[ROWS - 2][0] = 5
    board[ROWS - 1][9] = 8
    rows_before = board
    assert clear_lines(board) == 1
    assert board is rows_before
    assert len(board) == ROWS
    assert board[ROWS - 1][0] == 5
    assert all(c is None for c in board[0])
    assert sum(c is not None for row in board for c in row) == 1


def test_clear_multiple_rows_in_one_call():
    board = new_board()
    fill_row(board, 19)
    fill_row(board, 17)
    board[18][3] = 4
    board[16][6] = 6
    assert clear_lines(board) == 2
    assert board[19][3] == 4
    assert board[18][6] == 6
    assert not full_rows(board)


def test_clear_lines_is_idempotent():
    board = new_board()
    for r in (10, 12, 13, 19):
        fill_row(board, r)
    board[11][1] = 1
    clear_lines(board)
    snapshot = [row[:] for row in board]
    assert clear_lines(board) == 0
    assert board == snapshot


def test_line_drop_into_gap_clears_bottom_row():
    board = new_board()
    fill_row(board, 19, kind=3, skip={4, 5, 6, 7})
    board[18][0] = 1
    place(board, Piece(LINE, 8), Anchor(4, 19))
    clear_lines(board)
    assert len(board) == ROWS
    assert board[19][0] == 1
    assert all(c is None for c in board[0])
