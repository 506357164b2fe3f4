"""
Presentation state on top of a Game.

The board UI works with clicks: first click selects one of your pieces, second click proposes the move.
The Game itself never learns a square was "selected", it only sees the proposed move.

Every transition here is total: an illegal target simply drops the selection.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.game import Game
from src.chess.moves import Move
from src.chess.square import Square
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    game: Game = field(default_factory=Game.new_game)
    selected_square: Optional[Square] = None

    @classmethod
    def from_game(cls, game: Game, selected_square: Optional[Square] = None) -> Self:
        return cls(game=game, selected_square=selected_square)

    # read-only views on the game
    @property
    def board(self) -> Board:
        return self.game.board

    @property
    def current_player(self) -> Color:
        return self.game.current_player

    @property
    def move_history(self) -> list[str]:
        return self.game.history

    @property
    def status(self) -> str:
        return self.game.status

    def select_square(self, square: Square) -> None:
        """
        Handle a click on a square
        ----

        1. Nothing selected yet: select the square if it holds one of your pieces (otherwise nothing happens).
        2. Clicking the selected square again: deselect.
        3. Clicking another square: try the move. Whether it is accepted or not, the selection is cleared.
        """
        if self.selected_square is None:
            if self._is_own_piece(square):
                self.selected_square = square
            return

        if square == self.selected_square:
            self.selected_square = None
            return

        move = Move(self.selected_square, square)
        self.selected_square = None
        if self.game.is_legal(move):
            self.game.make_move(move)
        else:
            logger.debug(
                "Rejected %s to %s",
                move.from_square.to_algebraic(),
                move.to_square.to_algebraic(),
            )

    def highlighted_squares(self) -> list[Square]:
        """Where the selected piece could go."""
        if self.selected_square is None:
            return []
        return self.game.valid_targets(self.selected_square)

    def reset(self) -> None:
        self.game.reset()
        self.selected_square = None
        logger.info("Game reset. %s", self.status)

    def _is_own_piece(self, square: Square) -> bool:
        piece = self.board.piece(square)
        return piece is not None and piece.color == self.current_player


# --- ENTRY POINTS FOR THE PRESENTATION LAYER ---
def initialize_session() -> GameSession:
    """Standard starting position, white to move, no moves played."""
    return GameSession()


def handle_square_selected(session: GameSession, square: Square) -> GameSession:
    """Same transition as `GameSession.select_square`, but returns a new session and leaves the given one alone."""
    new_session = deepcopy(session)
    new_session.select_square(square)
    return new_session
