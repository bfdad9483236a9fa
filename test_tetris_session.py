import unittest

from tetris_board import create_empty
from tetris_piece import Piece, SHAPES, rotate_cw
from tetris_session import Session, PLAYING, PAUSED, GAME_OVER
from tetris_timer import ManualTimer


class FixedRandom:
    def __init__(self, *types):
        self.types = list(types)
        self.i = 0

    def next_piece(self):
        t = self.types[self.i % len(self.types)]
        self.i += 1
        return t


def make_session(*types, **kw):
    kw.setdefault("width", 10)
    kw.setdefault("height", 20)
    kw.setdefault("points_per_line", 100)
    kw.setdefault("normal_ms", 1000)
    kw.setdefault("fast_ms", 50)
    return Session(timer=ManualTimer(), rng=FixedRandom(*(types or ("O",))), **kw)


class SessionStartTests(unittest.TestCase):
    def test_new_session_is_playing_with_two_pieces(self):
        s = make_session("T", "L")
        self.assertEqual(s.status, PLAYING)
        self.assertEqual(s.state.score, 0)
        self.assertEqual(s.state.current.t, "T")
        self.assertEqual(s.state.next.t, "L")
        self.assertTrue(all(c is None for row in s.state.board for c in row))
        self.assertTrue(s.timer.armed)
        self.assertEqual(s.timer.interval_ms, 1000)


class MoveTests(unittest.TestCase):
    def test_o_piece_falls_and_locks_without_scoring(self):
        s = make_session("O")
        for _ in range(18):
            self.assertTrue(s.move(0, 1))
        self.assertEqual((s.state.current.x, s.state.current.y), (4, 18))
        s.move(0, 1)
        board = s.state.board
        self.assertEqual([board[18][4], board[18][5], board[19][4], board[19][5]], ["O"] * 4)
        self.assertEqual(s.state.score, 0)
        self.assertEqual((s.state.current.x, s.state.current.y), (4, 0))
        self.assertEqual(s.status, PLAYING)

    def test_timer_ticks_drive_gravity(self):
        s = make_session("O")
        self.assertEqual(s.timer.fire(5), 5)
        self.assertEqual(s.state.current.y, 5)

    def test_blocked_sideways_move_is_dropped(self):
        s = make_session("O")
        for _ in range(4):
            s.move_left()
        self.assertEqual(s.state.current.x, 0)
        before = s.snapshot()
        self.assertFalse(s.move_left())
        self.assertEqual(s.snapshot(), before)

    def test_blocked_upward_move_does_not_lock(self):
        s = make_session("O")
        s.state.current = Piece("O", [[1, 1], [1, 1]], 4, 1)
        s.state.board[0][4] = "Z"
        self.assertFalse(s.move(0, -1))
        self.assertEqual(s.state.current.y, 1)
        self.assertIsNone(s.state.board[1][4])


class LineClearTests(unittest.TestCase):
    def test_filling_the_last_gap_clears_one_row(self):
        s = make_session("T")
        board = create_empty(10, 20)
        board[19] = [None] + ["J"] * 9
        board[18][5] = "S"
        s.state.board = board
        s.state.current = Piece("I", rotate_cw(SHAPES["I"]), -2, 0)
        s.hard_drop()
        self.assertEqual(s.state.score, 100)
        b = s.state.board
        self.assertEqual(len(b), 20)
        self.assertEqual(b[0], [None] * 10)
        self.assertEqual([row[0] for row in b[17:]], ["I", "I", "I"])
        self.assertEqual(b[16][0], None)
        self.assertEqual(b[19][5], "S")
        self.assertEqual(b[19][1], None)

    def test_points_scale_with_lines(self):
        s = make_session("T", points_per_line=40)
        board = create_empty(10, 20)
        for y in (18, 19):
            board[y] = [None] + ["L"] * 9
        s.state.board = board
        s.state.current = Piece("I", rotate_cw(SHAPES["I"]), -2, 0)
        s.hard_drop()
        self.assertEqual(s.state.score, 80)


class HardDropTests(unittest.TestCase):
    def test_hard_drop_locks_at_ghost_position(self):
        s = make_session("O", "T")
        s.state.board[19][4] = "Z"
        self.assertEqual(s.ghost_position(), (4, 17))
        s.hard_drop()
        self.assertEqual(s.state.board[17][4], "O")
        self.assertEqual(s.state.board[18][5], "O")
        self.assertEqual(s.state.current.t, "T")

    def test_hard_drop_on_landed_piece_still_locks(self):
        s = make_session("O", "T")
        s.state.current = Piece("O", [[1, 1], [1, 1]], 0, 18)
        self.assertTrue(s.hard_drop())
        self.assertEqual(s.state.board[19][0], "O")

    def test_ghost_position_does_not_move_piece(self):
        s = make_session("O")
        s.ghost_position()
        self.assertEqual(s.state.current.y, 0)


class RotateTests(unittest.TestCase):
    def test_rotate_commits_kicked_piece(self):
        s = make_session("O")
        s.state.current = Piece("I", rotate_cw(SHAPES["I"]), -2, 5)
        self.assertTrue(s.rotate())
        self.assertEqual(s.state.current.x, 0)

    def test_failed_rotation_keeps_piece(self):
        s = make_session("O", width=3)
        s.state.current = Piece("I", rotate_cw(SHAPES["I"]), -2, 2)
        before = s.snapshot()
        self.assertFalse(s.rotate())
        self.assertEqual(s.snapshot(), before)


class GameOverTests(unittest.TestCase):
    def top_out(self, s):
        for y in range(1, 20):
            s.state.board[y][4] = "Z"
        s.state.score = 300
        s.tick()

    def test_lock_into_top_row_ends_game(self):
        s = make_session("O")
        self.top_out(s)
        self.assertEqual(s.status, GAME_OVER)
        self.assertIsNone(s.state.current)
        self.assertEqual(s.state.board[0][4], "O")
        self.assertEqual(s.state.score, 300)
        self.assertFalse(s.timer.armed)

    def test_commands_are_ignored_after_game_over(self):
        s = make_session("O")
        self.top_out(s)
        before = s.snapshot()
        self.assertFalse(s.move(1, 0))
        self.assertFalse(s.move(0, 1))
        self.assertFalse(s.rotate())
        self.assertFalse(s.hard_drop())
        self.assertFalse(s.toggle_pause())
        s.soft_drop_start()
        self.assertFalse(s.timer.armed)
        self.assertEqual(s.snapshot(), before)

    def test_reset_after_game_over(self):
        s = make_session("O")
        self.top_out(s)
        s.reset()
        self.assertEqual(s.status, PLAYING)
        self.assertEqual(s.state.score, 0)
        self.assertTrue(all(c is None for row in s.state.board for c in row))
        self.assertIsNotNone(s.state.current)
        self.assertTrue(s.timer.armed)


class PauseAndTimerTests(unittest.TestCase):
    def test_pause_disarms_gravity_until_resume(self):
        s = make_session("O")
        self.assertTrue(s.toggle_pause())
        self.assertEqual(s.status, PAUSED)
        self.assertFalse(s.timer.armed)
        self.assertEqual(s.timer.fire(3), 0)
        self.assertFalse(s.tick())
        self.assertEqual(s.state.current.y, 0)
        s.toggle_pause()
        self.assertEqual(s.status, PLAYING)
        self.assertEqual(s.timer.fire(), 1)
        self.assertEqual(s.state.current.y, 1)

    def test_piece_commands_ignored_while_paused(self):
        s = make_session("O")
        s.toggle_pause()
        self.assertFalse(s.move_right())
        self.assertFalse(s.rotate())
        self.assertFalse(s.hard_drop())
        self.assertEqual(s.state.current.x, 4)

    def test_reset_from_pause(self):
        s = make_session("O")
        s.move(0, 3)
        s.toggle_pause()
        s.reset()
        self.assertEqual(s.status, PLAYING)
        self.assertEqual(s.state.current.y, 0)
        self.assertTrue(s.timer.armed)

    def test_soft_drop_switches_interval(self):
        s = make_session("O")
        armed = s.timer.arm_count
        s.soft_drop_start()
        self.assertEqual(s.timer.interval_ms, 50)
        s.soft_drop_start()
        self.assertEqual(s.timer.arm_count, armed + 1)
        s.soft_drop_stop()
        self.assertEqual(s.timer.interval_ms, 1000)

    def test_fast_drop_held_through_pause(self):
        s = make_session("O")
        s.toggle_pause()
        s.soft_drop_start()
        self.assertFalse(s.timer.armed)
        s.toggle_pause()
        self.assertEqual(s.timer.interval_ms, 50)


class QueryTests(unittest.TestCase):
    def test_listeners_hear_every_change(self):
        s = make_session("O")
        seen = []
        s.subscribe(lambda session: seen.append(session.state.score))
        s.move_left()
        s.rotate()
        s.toggle_pause()
        s.reset()
        self.assertEqual(len(seen), 4)

    def test_snapshot_is_detached(self):
        s = make_session("O")
        snap = s.snapshot()
        snap.board[0][0] = "X"
        snap.current.x = 9
        self.assertIsNone(s.state.board[0][0])
        self.assertEqual(s.state.current.x, 4)


if __name__ == "__main__":
    unittest.main()
