"""Tests for the 2048 puzzle."""

import random

import pytest

from turngames.errors import ConfigurationError, ErrorCode, UsageError
from turngames.games.tofe import Tofe, spawn_exponent
from turngames.models.direction import Direction
from turngames.models.player import Player

E = None  # Empty cell


class ScriptedRandom:
    """Deterministic stand-in for random.Random.

    choice() always picks the last candidate (the last empty cell in
    row-major order) and random() replays the given draws, then 0.0.
    """

    def __init__(self, draws: list[float] | None = None):
        self.draws = list(draws or [])

    def random(self) -> float:
        return self.draws.pop(0) if self.draws else 0.0

    def choice(self, seq):
        return seq[-1]


def new_game(rng=None, rows=None) -> Tofe:
    game = Tofe([Player(id="solo", name="Solo")], rng=rng or ScriptedRandom())
    game.initialize()
    if rows is not None:
        game.load_board(rows)
    return game


def count_tiles(game: Tofe) -> int:
    return sum(cell is not None for row in game.board for cell in row)


def empty_rows() -> list[list[int | None]]:
    return [[E] * 4 for _ in range(4)]


def checkerboard() -> list[list[int | None]]:
    return [[2 if (r + c) % 2 == 0 else 4 for c in range(4)] for r in range(4)]


class TestInitialize:
    """Tests for construction and initialize()."""

    def test_two_tiles_spawned(self):
        """Test that initialize() places exactly two tiles."""
        game = new_game(rng=random.Random(7))
        assert game.occupied_count == 2
        assert count_tiles(game) == 2
        tiles = [cell for row in game.board for cell in row if cell is not None]
        for tile in tiles:
            assert tile >= 2
            assert tile & (tile - 1) == 0
        assert game.max_number == max(tiles)

    def test_scripted_spawn_positions(self):
        """Test that spawns go where the random source says."""
        game = new_game()
        assert game.board[3][3] == 2
        assert game.board[3][2] == 2

    def test_single_player_only(self):
        """Test that the puzzle takes exactly one player."""
        with pytest.raises(ConfigurationError):
            Tofe([Player(id="a"), Player(id="b")])

    def test_operate_before_initialize(self):
        """Test that moves require initialize()."""
        game = Tofe([Player(id="solo")])
        with pytest.raises(UsageError) as exc_info:
            game.operate(Direction.LEFT)
        assert exc_info.value.code == ErrorCode.NOT_INITIALIZED

    def test_hard_mode_flag(self):
        """Test that hard mode is stored."""
        game = Tofe([Player(id="solo")], hard_mode=True)
        assert game.hard_mode

    def test_default_rng_is_random_module(self):
        """Test that spawns use the process-wide random module by default."""
        game = Tofe([Player(id="solo", name="Solo")])
        assert game.rng is random
        game.initialize()
        assert game.occupied_count == 2


class TestOperate:
    """Tests for operate()."""

    def test_merge_example(self):
        """Test [2, 2, 4, _] pushed left."""
        rows = empty_rows()
        rows[0] = [2, 2, 4, E]
        game = new_game(rows=rows)

        assert game.operate(Direction.LEFT)
        assert game.board[0] == [4, 4, E, E]
        # One merge (-1), then one spawn (+1) in the last empty cell
        assert game.board[3][3] == 2
        assert game.occupied_count == 3
        assert game.max_number >= 4

    def test_four_equal_tiles(self):
        """Test that a pair scan does not chain merges."""
        rows = empty_rows()
        rows[1] = [2, 2, 2, 2]
        game = new_game(rows=rows)

        assert game.operate(Direction.LEFT)
        assert game.board[1] == [4, 4, E, E]

    def test_right(self):
        """Test merging towards the right edge."""
        rows = empty_rows()
        rows[0] = [2, 2, 2, 2]
        game = new_game(rows=rows)

        assert game.operate(Direction.RIGHT)
        assert game.board[0] == [E, E, 4, 4]

    def test_down(self):
        """Test pushing and merging a column downwards."""
        rows = empty_rows()
        rows[0][0] = 2
        rows[3][0] = 2
        game = new_game(rows=rows)

        assert game.operate(Direction.DOWN)
        assert [game.board[r][0] for r in range(4)] == [E, E, E, 4]
        assert game.occupied_count == count_tiles(game) == 2

    def test_up(self):
        """Test pushing without merging upwards."""
        rows = empty_rows()
        rows[2][1] = 8
        rows[3][1] = 4
        game = new_game(rows=rows)

        assert game.operate("up")
        assert [game.board[r][1] for r in range(4)] == [8, 4, E, E]

    def test_no_op_move(self):
        """Test that an impossible move changes nothing and spawns nothing."""
        rows = empty_rows()
        rows[0] = [2, 4, 8, 16]
        game = new_game(rows=rows)
        before = [row[:] for row in game.board]

        assert not game.operate(Direction.LEFT)
        assert not game.operate(Direction.RIGHT)
        assert not game.operate(Direction.UP)
        assert game.board == before
        assert game.occupied_count == 4

    def test_no_op_repeat(self):
        """Test that repeating a move on a compacted board is a no-op."""
        rows = [
            [2, 4, E, E],
            [8, E, E, E],
            [16, 2, 8, E],
            [E, E, E, E],
        ]
        game = new_game(rows=rows)

        for _ in range(3):
            assert not game.operate(Direction.LEFT)
            assert game.board == rows
            assert game.occupied_count == 6

    def test_merge_updates_max_number(self):
        """Test that merging raises max_number."""
        rows = empty_rows()
        rows[2] = [64, 64, E, E]
        game = new_game(rows=rows)
        assert game.max_number == 64

        assert game.operate(Direction.LEFT)
        assert game.board[2][0] == 128
        assert game.max_number == 128

    def test_counters_stay_consistent(self):
        """Test invariants over a long random game."""
        rng = random.Random(1234)
        game = new_game(rng=rng)
        highest = game.max_number

        for _ in range(300):
            if game.lose():
                break
            game.operate(rng.choice(list(Direction)))

            tiles = [cell for row in game.board for cell in row if cell is not None]
            assert game.occupied_count == len(tiles)
            assert all(t >= 2 and t & (t - 1) == 0 for t in tiles)
            assert game.max_number >= max(tiles)
            assert game.max_number >= highest
            highest = game.max_number


class TestWinLose:
    """Tests for win(), lose() and operable()."""

    def test_win(self):
        """Test that forming 2048 wins."""
        rows = empty_rows()
        rows[0] = [1024, 1024, E, E]
        game = new_game(rows=rows)
        assert not game.win()

        assert game.operate(Direction.LEFT)
        assert game.win()

    def test_lose_on_stuck_board(self):
        """Test that a full board without pairs is lost."""
        game = new_game(rows=checkerboard())
        assert game.occupied_count == 16
        assert not game.operable()
        assert game.lose()
        for direction in Direction:
            assert not game.operate(direction)

    def test_full_board_with_pair(self):
        """Test that a full board with a pair is not lost."""
        rows = checkerboard()
        rows[3][3] = rows[3][2]
        game = new_game(rows=rows)
        assert game.operable()
        assert not game.lose()

    def test_vertical_pair(self):
        """Test that vertical pairs count as operable."""
        rows = checkerboard()
        rows[1][0] = rows[0][0]
        game = new_game(rows=rows)
        assert not game.lose()

    def test_board_with_gaps_not_lost(self):
        """Test that a board with empty cells is never lost."""
        rows = checkerboard()
        rows[0][0] = E
        game = new_game(rows=rows)
        assert not game.lose()


class TestGenerate:
    """Tests for tile spawning."""

    def test_full_board_no_spawn(self):
        """Test that generate() is a no-op on a full board."""
        game = new_game(rows=checkerboard())
        before = [row[:] for row in game.board]
        game.generate()
        assert game.board == before
        assert game.occupied_count == 16

    def test_spawn_fills_empty_cell(self):
        """Test that generate() only uses empty cells."""
        rows = checkerboard()
        rows[1][2] = E
        game = new_game(rows=rows)
        game.generate()
        assert game.board[1][2] is not None
        assert game.occupied_count == 16

    def test_large_draw_spawns_larger_tile(self):
        """Test that the top of the range needs a large max_number."""
        rows = empty_rows()
        rows[0][0] = 1024
        game = new_game(rng=ScriptedRandom([0.0, 0.0, 0.99999]), rows=rows)
        game.generate()
        # log2(1024) - 4 = 6
        assert game.board[3][3] == 64

    def test_spawns_stay_small_early(self):
        """Test that early spawns are only 2 or 4."""
        rng = random.Random(99)
        for _ in range(50):
            game = new_game(rng=rng)
            tiles = [cell for row in game.board for cell in row if cell is not None]
            assert set(tiles) <= {2, 4}


    def test_generate_before_initialize(self):
        """Test that generate() needs an initialized board."""
        game = Tofe([Player(id="solo", name="Solo")], rng=ScriptedRandom())
        with pytest.raises(UsageError) as exc_info:
            game.generate()
        assert exc_info.value.code == ErrorCode.NOT_INITIALIZED

    def test_generate_after_end(self):
        """Test that no tile is spawned once the game has ended."""
        game = new_game()
        game.end()
        before = [row[:] for row in game.board]
        with pytest.raises(UsageError) as exc_info:
            game.generate()
        assert exc_info.value.code == ErrorCode.ALREADY_ENDED
        assert game.board == before
        assert game.occupied_count == 2


class TestSpawnExponent:
    """Tests for spawn_exponent()."""

    @pytest.mark.parametrize("power", range(0, 12))
    @pytest.mark.parametrize("uniform", [0.0, 0.3, 0.5, 0.8, 0.95, 0.999999])
    def test_within_range(self, power, uniform):
        """Test the exponent bounds for every max_number up to 2048."""
        high = max(2, power - 4)
        exponent = spawn_exponent(uniform, 2**power)
        assert 1 <= exponent <= high

    def test_empty_board(self):
        """Test bounds while max_number is still 1."""
        assert spawn_exponent(0.0, 1) == 1
        assert spawn_exponent(0.999999, 1) == 2

    def test_skewed_towards_small(self):
        """Test that most draws give the smallest tile."""
        rng = random.Random(5)
        exponents = [spawn_exponent(rng.random(), 2048) for _ in range(1000)]
        # P(exponent == 1) = (1/7) ** (1/6), about 0.72
        assert exponents.count(1) > 650
        assert max(exponents) <= 7


class TestLoadBoard:
    """Tests for load_board()."""

    def test_counters_recomputed(self):
        """Test that counters follow the loaded layout."""
        rows = empty_rows()
        rows[0] = [2, 8, E, E]
        game = new_game(rows=rows)
        assert game.occupied_count == 2
        assert game.max_number == 8

    def test_wrong_shape(self):
        """Test that non-4x4 layouts are rejected."""
        game = new_game()
        with pytest.raises(ConfigurationError) as exc_info:
            game.load_board([[2, 4, 8]] * 3)
        assert exc_info.value.code == ErrorCode.INVALID_BOARD

    @pytest.mark.parametrize("value", [1, 3, 6, 0])
    def test_bad_tile(self, value):
        """Test that non powers of two are rejected."""
        rows = empty_rows()
        rows[0][0] = value
        game = new_game()
        with pytest.raises(ConfigurationError):
            game.load_board(rows)

    def test_max_number_never_decreases(self):
        """Test that loading a smaller layout keeps the reached maximum."""
        rows = empty_rows()
        rows[0][0] = 2048
        game = new_game(rows=rows)
        assert game.win()

        smaller = empty_rows()
        smaller[0] = [2, 4, E, E]
        game.load_board(smaller)
        assert game.occupied_count == 2
        assert game.max_number == 2048
        assert game.win()
