"""Piece catalog, spawn and rotation with horizontal wall kicks"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

PIECE_TYPES = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES: Dict[str, Tuple[Tuple[int, ...], ...]] = {
    "I": ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    "J": ((1,0,0),(1,1,1),(0,0,0)),
    "L": ((0,0,1),(1,1,1),(0,0,0)),
    "O": ((1,1),(1,1)),
    "S": ((0,1,1),(1,1,0),(0,0,0)),
    "T": ((0,1,0),(1,1,1),(0,0,0)),
    "Z": ((1,1,0),(0,1,1),(0,0,0)),
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}

# Horizontal-only corrections, tried in order after the plain rotation.
# No vertical kicks and no per-piece tables.
WALL_KICKS = (1, -1, 2, -2)


def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int) -> "Piece":
        assert t in SHAPES, f"unknown piece type {t!r}"
        s = [list(r) for r in SHAPES[t]]
        return Piece(t, s, cols // 2 - len(s[0]) // 2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x + dx, self.y + dy)

    def with_shape(self, shape: List[List[int]]) -> "Piece":
        return Piece(self.t, [r[:] for r in shape], self.x, self.y)

    def cells(self):
        """Absolute (x, y) of every occupied cell, including ones above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

# rotation

def try_rotate(board, piece: Piece) -> Optional[Piece]:
    """Rotate clockwise, kicking sideways if needed; None when nothing fits."""
    from tetris_board import is_valid_placement
    rotated = piece.with_shape(rotate_cw(piece.shape))
    for dx in (0,) + WALL_KICKS:
        if is_valid_placement(board, rotated, piece.x + dx, piece.y):
            return rotated.moved(dx, 0)
    return None
