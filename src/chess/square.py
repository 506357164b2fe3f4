"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import OutOfRangeError

# (rows, columns). Row 0 is the far (black) side of the board, row 7 the near (white) side.
BOARD_DIMENSIONS = (8, 8)


def is_within_bounds(row: int, col: int) -> bool:
    return (0 <= row < BOARD_DIMENSIONS[0]) and (0 <= col < BOARD_DIMENSIONS[1])


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_within_bounds(self.row, self.col):
            raise OutOfRangeError(
                f"Square ({self.row}, {self.col}) is not on a {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or not sq[1].isdigit():
            raise OutOfRangeError(f"Cannot interpret {sq!r} as a square name.")
        col = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{self.file}{self.rank}"

    @property
    def file(self) -> str:
        return chr(ord("a") + self.col)

    @property
    def rank(self) -> int:
        return BOARD_DIMENSIONS[0] - self.row
