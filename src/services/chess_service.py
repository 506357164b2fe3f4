"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ResetGameRequest,
    SelectSquareRequest,
    ValidTargetsRequest,
    ValidTargetsResponse,
)
from src.chess.game import Game
from src.chess.moves import Move
from src.chess.session import GameSession
from src.chess.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up a board (standard starting position unless told otherwise)."""
        new_game = Game.new_game(
            starting_fen=request.starting_fen, color_to_move=request.color_to_move
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to re-render the board.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """A click on the board. Selects, deselects or moves. Never fails on an illegal move."""
        session = self._load_session(request.game_id)
        session.select_square(Square.from_algebraic(request.square))
        return self._store_session(request.game_id, session)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. Unlike `select_square`, an illegal move raises."""
        session = self._load_session(request.game_id)
        move = Move.from_algebraic(request.from_square, request.to_square)
        session.game.make_move(move)
        session.selected_square = None
        return self._store_session(request.game_id, session)

    def valid_targets(self, request: ValidTargetsRequest) -> ValidTargetsResponse:
        """Squares to highlight for the piece on the requested square."""
        game = Game.from_model(self._fetch_game(request.game_id))
        targets = game.valid_targets(Square.from_algebraic(request.square))
        return ValidTargetsResponse(
            game_id=request.game_id,
            square=request.square,
            targets=[square.to_algebraic() for square in targets],
        )

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        session = self._load_session(request.game_id)
        session.reset()
        return self._store_session(request.game_id, session)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self._fetch_game(request.game_id)
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _load_session(self, game_id: UUID) -> GameSession:
        model = self._fetch_game(game_id)
        selected = (
            Square.from_algebraic(model.selected_square)
            if model.selected_square
            else None
        )
        return GameSession.from_game(Game.from_model(model), selected)

    def _store_session(self, game_id: UUID, session: GameSession) -> GameResponse:
        model = session.game.to_model()
        model.selected_square = (
            session.selected_square.to_algebraic() if session.selected_square else None
        )
        self.repo.update_game(game_id, model)
        return self._create_game_response(game_id, model)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            board_fen=model.board_fen,
            current_player=model.current_player,
            selected_square=model.selected_square,
            move_history=model.move_history,
            status=model.status,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
