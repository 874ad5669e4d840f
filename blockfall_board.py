
"""Board helpers: validate, place, clear"""
from typing import Iterator, List, Optional, Tuple
from blockfall_layout import COLS, ROWS
from blockfall_piece import Anchor, Piece, Shape

Board = List[List[Optional[int]]]

def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]

def cells(piece: Piece, anchor: Anchor) -> Iterator[Tuple[int, int]]:
    for x, y in piece.shape:
        yield anchor.x + x, anchor.y + y

def is_valid(board: Board, shape: Shape, anchor: Anchor, dx: int = 0, dy: int = 0) -> bool:
    """True when every cell of ``shape`` at ``anchor + (dx, dy)`` is legal.

    Cells above the top edge are always legal so a piece can spawn or
    rotate while partly outside the visible board.
    """
    for x, y in shape:
        bx, by = anchor.x + x + dx, anchor.y + y + dy
        if bx < 0 or bx >= COLS or by >= ROWS: return False
        if by >= 0 and board[by][bx] is not None: return False
    return True

def place(board: Board, piece: Piece, anchor: Anchor) -> None:
    for bx, by in cells(piece, anchor):
        if 0 <= by < ROWS and 0 <= bx < COLS:
            board[by][bx] = piece.kind

def full_rows(board: Board) -> List[int]:
    return [r for r in range(ROWS) if all(cell is not None for cell in board[r])]

def clear_lines(board: Board) -> int:
    """Drop every full row, rescanning the whole board until none is left."""
    removed = 0
    while True:
        rows = full_rows(board)
        if not rows:
            return removed
        for r in rows:
            # rows above r shift down one; r+1.. keep their index
            del board[r]
            board.insert(0, [None] * COLS)
        removed += len(rows)
