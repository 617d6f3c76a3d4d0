from __future__ import annotations


class LabyrinthError(Exception):
    """Base class for rejected engine commands. State is unchanged when raised."""
    kind = "error"


class OutOfBounds(LabyrinthError, ValueError):
    kind = "out_of_bounds"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"({x}, {y}) is outside the board")
        self.x = x
        self.y = y


class InvalidLine(LabyrinthError, ValueError):
    kind = "invalid_line"


class IllegalReversal(LabyrinthError):
    kind = "illegal_reversal"


class IllegalRotation(LabyrinthError, ValueError):
    kind = "illegal_rotation"


class WrongPhase(LabyrinthError):
    kind = "wrong_phase"


class UnreachableCell(LabyrinthError):
    kind = "unreachable_cell"
