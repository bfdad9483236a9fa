"""
Session controller: owns the game state and applies player/timer commands.

States are PLAYING (initial), PAUSED and GAME_OVER. Piece commands only act
while PLAYING; toggle_pause() is ignored once the game is over, and reset()
works from anywhere.

The gravity timer is re-armed on every transition that can change whether or
how fast it should run (pause, resume, game over, reset, soft-drop speed).
Re-arming always disarms first, so no tick armed for an earlier state can act
on the new one.
"""
from __future__ import annotations
import copy
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from tetris_board import Board, create_empty, is_valid_placement, merge, clear_lines, is_game_over, ghost_y
from tetris_config import CONFIG
from tetris_piece import Piece, try_rotate
from tetris_rng import UniformRandom
from tetris_timer import ManualTimer

PLAYING, PAUSED, GAME_OVER = "playing", "paused", "game_over"


@dataclass
class GameState:
    board: Board
    current: Optional[Piece]
    next: Optional[Piece]
    score: int = 0
    is_game_over: bool = False
    is_paused: bool = False

    @property
    def status(self) -> str:
        if self.is_game_over: return GAME_OVER
        if self.is_paused: return PAUSED
        return PLAYING


class Session:
    def __init__(self, timer=None, rng=None, width: Optional[int] = None, height: Optional[int] = None,
                 points_per_line: Optional[int] = None, normal_ms: Optional[int] = None,
                 fast_ms: Optional[int] = None):
        self.timer = timer if timer is not None else ManualTimer()
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.width = width or CONFIG["BOARD_WIDTH"]
        self.height = height or CONFIG["BOARD_HEIGHT"]
        self.points_per_line = CONFIG["POINTS_PER_LINE"] if points_per_line is None else points_per_line
        self.normal_ms = normal_ms or CONFIG["NORMAL_DROP_MS"]
        self.fast_ms = fast_ms or CONFIG["FAST_DROP_MS"]
        self.fast_drop = False
        self._listeners: List[Callable[["Session"], None]] = []
        self.state = self._fresh_state()
        self._rearm()

    # ---------- state ----------
    def _spawn(self) -> Piece:
        return Piece.spawn(self.rng.next_piece(), self.width)

    def _fresh_state(self) -> GameState:
        current = self._spawn()
        return GameState(create_empty(self.width, self.height), current, self._spawn())

    @property
    def status(self) -> str:
        return self.state.status

    @property
    def interval_ms(self) -> int:
        return self.fast_ms if self.fast_drop else self.normal_ms

    def snapshot(self) -> GameState:
        return copy.deepcopy(self.state)

    def ghost_position(self) -> Optional[Tuple[int, int]]:
        p = self.state.current
        if p is None: return None
        return p.x, ghost_y(self.state.board, p)

    def subscribe(self, fn: Callable[["Session"], None]):
        self._listeners.append(fn)

    def _changed(self):
        for fn in self._listeners:
            fn(self)

    def _rearm(self):
        self.timer.disarm()
        if self.status == PLAYING:
            self.timer.arm(self.interval_ms, self.tick)

    # ---------- commands ----------
    def move(self, dx: int, dy: int) -> bool:
        """Shift the active piece; a blocked downward move locks it instead."""
        s = self.state
        if s.status != PLAYING or s.current is None: return False
        p = s.current
        if is_valid_placement(s.board, p, p.x + dx, p.y + dy):
            s.current = p.moved(dx, dy)
            self._changed()
            return True
        if dy > 0:
            self._lock(p)
            return True
        return False

    def move_left(self) -> bool: return self.move(-1, 0)
    def move_right(self) -> bool: return self.move(1, 0)

    def tick(self) -> bool:
        return self.move(0, 1)

    def rotate(self) -> bool:
        s = self.state
        if s.status != PLAYING or s.current is None: return False
        rotated = try_rotate(s.board, s.current)
        if rotated is None: return False
        s.current = rotated
        self._changed()
        return True

    def hard_drop(self) -> bool:
        s = self.state
        if s.status != PLAYING or s.current is None: return False
        p = s.current
        self._lock(p.moved(0, ghost_y(s.board, p) - p.y))
        return True

    def _lock(self, piece: Piece):
        s = self.state
        board, cleared = clear_lines(merge(s.board, piece))
        s.score += cleared * self.points_per_line
        s.board = board
        logging.debug(f"[Session] Locked {piece.t} at ({piece.x}, {piece.y}), cleared {cleared}")
        if is_game_over(board):
            s.current = None
            s.is_game_over = True
            logging.info(f"[Session] Game over with score {s.score}")
            self._rearm()
        else:
            s.current = s.next
            s.next = self._spawn()
        self._changed()

    def soft_drop_start(self): self._set_fast_drop(True)
    def soft_drop_stop(self): self._set_fast_drop(False)

    def _set_fast_drop(self, fast: bool):
        if fast == self.fast_drop: return
        self.fast_drop = fast
        self._rearm()

    def toggle_pause(self) -> bool:
        s = self.state
        if s.is_game_over: return False
        s.is_paused = not s.is_paused
        logging.info(f"[Session] {'Paused' if s.is_paused else 'Resumed'}")
        self._rearm()
        self._changed()
        return True

    def reset(self):
        self.timer.disarm()
        self.state = self._fresh_state()
        logging.info("[Session] New game")
        self._rearm()
        self._changed()
