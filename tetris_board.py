"""Board helpers: placement, merge, line clear, game over, ghost"""
from typing import List, Optional, Tuple
from tetris_piece import Piece

Board = List[List[Optional[str]]]


def create_empty(width: int, height: int) -> Board:
    return [[None] * width for _ in range(height)]

def board_width(board: Board) -> int: return len(board[0])
def board_height(board: Board) -> int: return len(board)

def cell_at(board: Board, x: int, y: int) -> Optional[str]:
    assert 0 <= x < board_width(board) and 0 <= y < board_height(board), \
        f"cell ({x}, {y}) outside board"
    return board[y][x]


def is_valid_placement(board: Board, piece: Piece, x: int, y: int) -> bool:
    """Would `piece` fit with its anchor at (x, y)?

    Cells above the top edge are allowed and never checked for occupancy,
    but the side walls and the floor always apply.
    """
    w, h = board_width(board), board_height(board)
    for r, row in enumerate(piece.shape):
        for c, v in enumerate(row):
            if not v: continue
            bx, by = x + c, y + r
            if bx < 0 or bx >= w or by >= h: return False
            if by >= 0 and board[by][bx] is not None: return False
    return True


def merge(board: Board, piece: Piece) -> Board:
    """Copy of `board` with the piece written in (no collision check)."""
    out = [row[:] for row in board]
    for bx, by in piece.cells():
        if by >= 0:
            out[by][bx] = piece.t
    return out


def clear_lines(board: Board) -> Tuple[Board, int]:
    """Drop full rows, pad with empty rows on top; returns (board, cleared)."""
    w, h = board_width(board), board_height(board)
    kept: Board = []
    cleared = 0
    for y in range(h - 1, -1, -1):
        if all(cell is not None for cell in board[y]):
            cleared += 1
        else:
            kept.insert(0, board[y][:])
    while len(kept) < h:
        kept.insert(0, [None] * w)
    return kept, cleared


def is_game_over(board: Board) -> bool:
    return any(cell is not None for cell in board[0])


def ghost_y(board: Board, piece: Piece) -> int:
    """Return the y position where the piece would land if hard-dropped."""
    y = piece.y
    while is_valid_placement(board, piece, piece.x, y + 1):
        y += 1
    return y
