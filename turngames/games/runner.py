"""Self-play runner that drives games with random bot moves."""

from __future__ import annotations

import logging
import random
from typing import Callable

from turngames.config import Config
from turngames.core.game import Game
from turngames.logging import GameLogger
from turngames.models.direction import Direction
from turngames.models.player import Player
from turngames.models.result import GameKind, GameResult

from .tictactoe import TicTacToe
from .tofe import Tofe

logger = logging.getLogger(__name__)


class GameRunner:
    """Plays games end to end the way a chat front end would drive them.

    Every move goes through the public game API: one mutating call, then
    the win/draw/lose queries, then a turn advance.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize runner.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for moves and spawns (seeded from config if omitted)
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self.rng = rng or random.Random(self.config.runner.seed)

        self._on_game_end: Callable[[GameResult, Game], None] | None = None

    def set_callbacks(
        self,
        on_game_end: Callable[[GameResult, Game], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_game_end: Called when a game ends (result, finished game)
        """
        self._on_game_end = on_game_end

    def run_games(self, kind: GameKind, num_games: int | None = None) -> list[GameResult]:
        """Run multiple games.

        Args:
            kind: Game to play
            num_games: Number of games (uses config if not specified)

        Returns:
            Results in play order
        """
        num_games = num_games or self.config.runner.num_games
        run_game = {
            GameKind.TICTACTOE: self.run_tictactoe,
            GameKind.TOFE: self.run_tofe,
        }[GameKind(kind)]

        if self.game_logger:
            self.game_logger.log_session_start(GameKind(kind), num_games)

        results: list[GameResult] = []
        for game_num in range(1, num_games + 1):
            logger.info(f"Starting game {game_num}/{num_games}")
            results.append(run_game(game_num))

        if self.game_logger:
            self.game_logger.log_session_end(results)

        return results

    def run_tictactoe(self, game_number: int = 1) -> GameResult:
        """Play one tic-tac-toe game with random moves.

        Returns:
            Result with the winner's id, or is_draw set
        """
        settings = self.config.tictactoe
        players = [
            Player(id=f"bot{i}", name=f"Bot {i}")
            for i in range(settings.num_players)
        ]
        game = TicTacToe(players, board_size=settings.board_size, symbols=settings.symbols)
        game.initialize()
        self._log_game_start(game_number, game)

        result = GameResult(game_number=game_number, kind=GameKind.TICTACTOE)
        while True:
            player = game.player_manager.now_player
            row, col = self.rng.choice(game.empty_cells())
            game.fill(row, col)
            result.moves += 1
            self._log_move(game_number, result.moves, player, {"fill": [row, col]}, game)

            if game.win(row, col):
                result.winner = player.id
                break
            if game.draw():
                result.is_draw = True
                break
            game.player_manager.next()

        return self._finish(game, result)

    def run_tofe(self, game_number: int = 1) -> GameResult:
        """Play one 2048 game, trying directions in random order each move.

        Stops on a win, a loss, or after runner.max_moves moves.

        Returns:
            Result with the player's id as winner if 2048 was reached
        """
        player = Player(id="bot0", name="Bot 0")
        game = Tofe([player], hard_mode=self.config.tofe.hard_mode, rng=self.rng)
        game.initialize()
        self._log_game_start(game_number, game)

        result = GameResult(game_number=game_number, kind=GameKind.TOFE)
        directions = list(Direction)
        while not game.win() and not game.lose():
            if result.moves >= self.config.runner.max_moves:
                logger.warning(f"Game {game_number} stopped after {result.moves} moves")
                break

            self.rng.shuffle(directions)
            moved = next((d for d in directions if game.operate(d)), None)
            if moved is None:
                # Full board with no merges left; lose() is true now
                break
            result.moves += 1
            self._log_move(game_number, result.moves, player, {"operate": moved.value}, game)

        if game.win():
            result.winner = player.id
        result.max_number = game.max_number
        return self._finish(game, result)

    def _finish(self, game: TicTacToe | Tofe, result: GameResult) -> GameResult:
        game.end()
        logger.info(str(result))

        if self.game_logger:
            self.game_logger.log_game_end(result)
        if self._on_game_end:
            self._on_game_end(result, game)
        return result

    def _log_game_start(self, game_number: int, game: TicTacToe | Tofe) -> None:
        if self.game_logger:
            self.game_logger.log_game_start(game_number, game.player_manager.players, game.board)

    def _log_move(
        self,
        game_number: int,
        move_number: int,
        player: Player,
        action: dict,
        game: TicTacToe | Tofe,
    ) -> None:
        if self.game_logger:
            self.game_logger.log_move(game_number, move_number, player.id, action, game.board)
