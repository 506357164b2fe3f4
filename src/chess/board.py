"""The Game board: pure storage of the pieces on an 8x8 grid. It knows nothing about the rules of chess."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import BACK_RANK, FEN_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceType

# First field of the FEN string of the standard starting position
STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Grid = list[list[Optional[Piece]]]


def empty_grid() -> Grid:
    return [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(empty_grid())

    @classmethod
    def starting_position(cls) -> Self:
        """Black pieces on rows 0/1, white pieces on rows 6/7."""
        grid = empty_grid()
        for col, piece_type in enumerate(BACK_RANK):
            grid[0][col] = Piece(piece_type, Color.BLACK)
            grid[1][col] = Piece(PieceType.PAWN, Color.BLACK)
            grid[6][col] = Piece(PieceType.PAWN, Color.WHITE)
            grid[7][col] = Piece(piece_type, Color.WHITE)
        return cls(grid)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank (row 1) entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces.
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[0]:
            raise InvalidFENError(
                f"Expected {BOARD_DIMENSIONS[0]} ranks separated by '/', got {len(fen_by_ranks)}: {fen_str!r}"
            )

        grid = empty_grid()
        # FEN string is read from the top rank (8th), which is row 0
        for row, fen_one_rank in enumerate(fen_by_ranks):
            col = 0
            for character in fen_one_rank:
                if character.lower() in FEN_TO_PIECE:
                    if col >= BOARD_DIMENSIONS[1]:
                        raise InvalidFENError(f"Rank {fen_one_rank!r} is too long.")
                    grid[row][col] = Piece.from_fen(character)
                    col += 1
                elif character in "12345678":
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                else:
                    raise InvalidFENError(
                        f"Unknown character {character!r} in rank {fen_one_rank!r}."
                    )
            if col != BOARD_DIMENSIONS[1]:
                raise InvalidFENError(
                    f"Rank {fen_one_rank!r} describes {col} squares instead of {BOARD_DIMENSIONS[1]}."
                )
        return cls(grid)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    @staticmethod
    def _row_to_fen(row: list[Optional[Piece]]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_occupied(self, square: Square) -> bool:
        return self.piece(square) is not None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> None:
        self.grid[square.row][square.col] = None

    def with_move(self, from_square: Square, to_square: Square) -> Self:
        """Copy of the board with the piece moved. Leaves this board untouched."""
        new_board = deepcopy(self)
        new_board._relocate(from_square, to_square)
        return new_board

    def _relocate(self, from_square: Square, to_square: Square) -> None:
        """Whatever stood on the target square is overwritten (that is how captures happen)."""
        piece_that_moved = self.piece(from_square)
        self.remove_piece(from_square)
        self.grid[to_square.row][to_square.col] = piece_that_moved
