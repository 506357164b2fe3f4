"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement rule for each piece type.
Every rule answers the same question: "can the piece on `from_square` reach `to_square` on this board?"

Whose turn it is gets checked by the Game, not here.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import EmptySourceError
from src.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_occupied(self, square: Square) -> bool: ...
    def with_move(self, from_square: Square, to_square: Square) -> Self: ...


Vector = tuple[int, int]

# White moves UP the board (towards row 0), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_algebraic(cls, from_alg: str, to_alg: str) -> Self:
        return cls(Square.from_algebraic(from_alg), Square.from_algebraic(to_alg))

    @property
    def delta(self) -> Vector:
        """(row difference, column difference)"""
        return (
            self.to_square.row - self.from_square.row,
            self.to_square.col - self.from_square.col,
        )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    The squares strictly in between two squares on the same line (row, column or diagonal).

    Walks exactly max(|d_row|, |d_col|) - 1 steps, so both end points are excluded.
    """
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    if d_row and d_col and abs(d_row) != abs(d_col):
        raise ValueError(
            f"squares_between requires both squares to lie on a common line. \n from: {from_square}\n to:{to_square}"
        )

    step_row, step_col = _sign(d_row), _sign(d_col)
    num_steps = max(abs(d_row), abs(d_col))
    return [
        Square(from_square.row + i * step_row, from_square.col + i * step_col)
        for i in range(1, num_steps)
    ]


def is_path_clear(move: Move, board: Board) -> bool:
    return not any(
        board.is_occupied(square)
        for square in squares_between(move.from_square, move.to_square)
    )


# --- MOVEMENT RULES ---
def is_valid_pawn_move(move: Move, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally, one square forward

    NOTE: No en passant and no promotion.
    """
    pawn = board.piece(move.from_square)
    assert pawn is not None
    direction = PAWN_DIRECTION[pawn.color]
    d_row, d_col = move.delta
    target = board.piece(move.to_square)

    # single push
    if d_col == 0 and d_row == direction and target is None:
        return True

    # double push from the starting row. Intermediate square must be empty too.
    if (
        d_col == 0
        and move.from_square.row == PAWN_START_ROW[pawn.color]
        and d_row == 2 * direction
    ):
        intermediate = Square(move.from_square.row + direction, move.from_square.col)
        return target is None and not board.is_occupied(intermediate)

    # pawns take diagonally
    if abs(d_col) == 1 and d_row == direction:
        return target is not None and target.color != pawn.color

    return False


def is_valid_rook_move(move: Move, board: Board) -> bool:
    """Rooks move either horizontally or vertically, without jumping over pieces"""
    d_row, d_col = move.delta
    if d_row != 0 and d_col != 0:
        return False
    return is_path_clear(move, board)


def is_valid_knight_move(move: Move, board: Board) -> bool:
    """Knights always move such that {|delta_row|, |delta_col|} = {1, 2}. They jump, so never get blocked."""
    d_row, d_col = move.delta
    return (abs(d_row), abs(d_col)) in [(1, 2), (2, 1)]


def is_valid_bishop_move(move: Move, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row, d_col = move.delta
    if abs(d_row) != abs(d_col) or d_row == 0:
        return False
    return is_path_clear(move, board)


def is_valid_queen_move(move: Move, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(move, board) or is_valid_bishop_move(move, board)


def is_valid_king_move(move: Move, board: Board) -> bool:
    """
    The king can move by a single square at the time.

    NOTE: standing still (zero delta) passes as well. Clicking the same square is handled as deselection before this gets called.
    """
    d_row, d_col = move.delta
    return abs(d_row) <= 1 and abs(d_col) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Move, Board], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_valid_move(board: Board, move: Move) -> bool:
    """
    Single entry point of the legality engine
    ----

    1. There must be a piece to move.
    2. You can never land on a piece of your own color (applies to every piece type).
    3. The movement rule of the piece type decides the rest.
    """
    piece = board.piece(move.from_square)
    if piece is None:
        raise EmptySourceError(
            f"No piece on {move.from_square.to_algebraic()} to move."
        )

    target = board.piece(move.to_square)
    if target is not None and target.color == piece.color:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(move, board)


def valid_targets(board: Board, square: Square) -> list[Square]:
    """All squares the piece on `square` can move to. Used for highlighting."""
    return [
        target
        for target in (
            Square(row, col)
            for row in range(BOARD_DIMENSIONS[0])
            for col in range(BOARD_DIMENSIONS[1])
        )
        if target != square and is_valid_move(board, Move(square, target))
    ]


# --- APPLYING MOVES ---
@dataclass(frozen=True)
class AcceptedMove:
    """Snapshot of the pieces involved, taken before the board gets updated"""

    move: Move
    moving_piece: Piece
    captured_piece: Optional[Piece]

    @classmethod
    def from_move_and_board(cls, move: Move, board: Board) -> Self:
        moving_piece = board.piece(move.from_square)
        if moving_piece is None:
            raise EmptySourceError(
                f"No piece on {move.from_square.to_algebraic()} to move."
            )
        return cls(move, moving_piece, board.piece(move.to_square))

    def to_notation(self) -> str:
        """ex) 'pawn e2 to e4', 'rook e4 to b4 captures pawn'"""
        notation = f"{self.moving_piece.type} {self.move.from_square.to_algebraic()} to {self.move.to_square.to_algebraic()}"
        if self.captured_piece is not None:
            notation += f" captures {self.captured_piece.type}"
        return notation


def apply_move(board: Board, move: Move) -> tuple[Board, str]:
    """
    Produce the next board and the notation of the move.

    NOTE: Does not check legality. Call `is_valid_move()` first.
    """
    accepted_move = AcceptedMove.from_move_and_board(move, board)
    new_board = board.with_move(move.from_square, move.to_square)
    return new_board, accepted_move.to_notation()
