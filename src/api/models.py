"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

SquareName = str
FEN_CHARACTERS = "pnbrqkPNBRQK12345678"


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    return first_character in "abcdefgh" and second_character in "12345678"


def _validate_square(value: str) -> str:
    if not _is_algebraic_notation(value):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        )
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None
    color_to_move: Color = Color.WHITE

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        """Only the placement part of a FEN string: 8 ranks separated by slashes."""
        if value is None:
            return value

        ranks = value.strip().split("/")
        if len(ranks) != 8:
            raise InvalidRequestError(
                "Board FEN string must contain 8 ranks separated by '/'."
            )
        for rank in ranks:
            if any(character not in FEN_CHARACTERS for character in rank):
                raise InvalidRequestError(
                    f"Rank {rank!r} may only contain piece letters and the digits 1-8."
                )
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class SelectSquareRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square(value)


class ValidTargetsRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square(value)


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board_fen: str
    current_player: Color
    selected_square: Optional[SquareName]
    move_history: list[str]
    status: str


class ValidTargetsResponse(BaseModel):
    game_id: UUID
    square: SquareName
    targets: list[SquareName]
