"""
The Game class will be the entrypoint into the domain layer for the service layer.
It holds the engine state only (board, whose turn it is, the moves played so far) and
advances by exactly one ply per accepted move.

Selecting squares is a presentation concern and lives in src/chess/session.py.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, apply_move, is_valid_move, valid_targets
from src.chess.square import Square
from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE / SESSION ---

    board: Board
    current_player: Color = Color.WHITE
    history: list[str] = field(default_factory=list)  # move notations, append-only

    @classmethod
    def new_game(
        cls, starting_fen: Optional[str] = None, color_to_move: Color = Color.WHITE
    ) -> Self:
        """Standard starting position unless a placement FEN is given."""
        board = (
            Board.from_fen(starting_fen) if starting_fen else Board.starting_position()
        )
        return cls(board=board, current_player=color_to_move)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        if model.current_player not in [color.value for color in Color]:
            raise GameStateError(
                f"Invalid player color: {model.current_player!r}. \nPick one from {','.join(Color)}"
            )
        return cls(
            board=Board.from_fen(model.board_fen),
            current_player=Color(model.current_player),
            history=list(model.move_history),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board_fen=self.board.to_fen(),
            current_player=str(self.current_player),
            move_history=list(self.history),
            status=self.status,
        )

    @property
    def status(self) -> str:
        return f"{self.current_player.capitalize()} to move"

    def is_legal(self, move: Move) -> bool:
        """Your own piece, and the piece can get there."""
        piece = self.board.piece(move.from_square)
        if piece is None or piece.color != self.current_player:
            return False
        return is_valid_move(self.board, move)

    def valid_targets(self, square: Square) -> list[Square]:
        """Squares the current player's piece on `square` can move to. Nothing for empty squares or opponent pieces."""
        piece = self.board.piece(square)
        if piece is None or piece.color != self.current_player:
            return []
        return valid_targets(self.board, square)

    def make_move(self, move: Move) -> str:
        """
        Attempt to make a move
        -----

        1. make sure you move one of your own pieces
        2. check the move against the movement rules
        3. update the board
        4. update the (history of) moves
        5. hand the turn to the opponent

        Returns the notation of the move.
        """
        self._assert_your_piece(move.from_square)

        if not is_valid_move(self.board, move):
            raise IllegalMoveError(
                f"Move not allowed: {move.from_square.to_algebraic()} to {move.to_square.to_algebraic()}"
            )

        self.board, notation = apply_move(self.board, move)
        self.history.append(notation)
        self.current_player = self.current_player.opponent
        logger.debug("Accepted move %r, %s", notation, self.status)
        return notation

    def reset(self) -> None:
        """Back to the standard starting position, white to move, no moves played."""
        self.board = Board.starting_position()
        self.current_player = Color.WHITE
        self.history = []

    # -- PRIVATE HELPERS ---
    def _assert_your_piece(self, square: Square) -> None:
        piece = self.board.piece(square)
        if piece is None:
            raise NotYourTurnError(
                f"There is no piece on {square.to_algebraic()}. {self.status}."
            )
        if piece.color != self.current_player:
            raise NotYourTurnError(
                f"The {piece.color} {piece.type} on {square.to_algebraic()} is not yours to move. {self.status}."
            )
