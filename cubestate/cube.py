"""Common cube model: faces, colours, moves and the abstract cube interface."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from enum import Enum


class Face(Enum):
    """The six faces, in layout order U, L, F, R, B, D."""

    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class Color(Enum):
    """Sticker colours; a solved face shows the colour with its own value."""

    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5


class Move(Enum):
    """The eighteen face turns of the half-turn metric."""

    L = 0
    L2 = 1
    LPRIME = 2
    R = 3
    R2 = 4
    RPRIME = 5
    U = 6
    U2 = 7
    UPRIME = 8
    D = 9
    D2 = 10
    DPRIME = 11
    F = 12
    F2 = 13
    FPRIME = 14
    B = 15
    B2 = 16
    BPRIME = 17


_COLOR_LETTERS = {
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.YELLOW: "Y",
    Color.WHITE: "W",
    Color.ORANGE: "O",
}

_MOVE_NAMES = {
    Move.L: "L",
    Move.LPRIME: "L'",
    Move.L2: "L2",
    Move.R: "R",
    Move.RPRIME: "R'",
    Move.R2: "R2",
    Move.U: "U",
    Move.UPRIME: "U'",
    Move.U2: "U2",
    Move.D: "D",
    Move.DPRIME: "D'",
    Move.D2: "D2",
    Move.F: "F",
    Move.FPRIME: "F'",
    Move.F2: "F2",
    Move.B: "B",
    Move.BPRIME: "B'",
    Move.B2: "B2",
}

_MOVE_METHODS = {
    Move.L: "l",
    Move.LPRIME: "l_prime",
    Move.L2: "l2",
    Move.R: "r",
    Move.RPRIME: "r_prime",
    Move.R2: "r2",
    Move.U: "u",
    Move.UPRIME: "u_prime",
    Move.U2: "u2",
    Move.D: "d",
    Move.DPRIME: "d_prime",
    Move.D2: "d2",
    Move.F: "f",
    Move.FPRIME: "f_prime",
    Move.F2: "f2",
    Move.B: "b",
    Move.BPRIME: "b_prime",
    Move.B2: "b2",
}

_INVERSES = {
    Move.L: Move.LPRIME,
    Move.LPRIME: Move.L,
    Move.L2: Move.L2,
    Move.R: Move.RPRIME,
    Move.RPRIME: Move.R,
    Move.R2: Move.R2,
    Move.U: Move.UPRIME,
    Move.UPRIME: Move.U,
    Move.U2: Move.U2,
    Move.D: Move.DPRIME,
    Move.DPRIME: Move.D,
    Move.D2: Move.D2,
    Move.F: Move.FPRIME,
    Move.FPRIME: Move.F,
    Move.F2: Move.F2,
    Move.B: Move.BPRIME,
    Move.BPRIME: Move.B,
    Move.B2: Move.B2,
}

# Stickers of each corner: the U/D sticker first, then front/back, then left/right.
_CORNER_STICKERS = (
    ((Face.UP, 2, 2), (Face.FRONT, 0, 2), (Face.RIGHT, 0, 0)),  # UFR
    ((Face.UP, 2, 0), (Face.FRONT, 0, 0), (Face.LEFT, 0, 2)),  # UFL
    ((Face.UP, 0, 0), (Face.BACK, 0, 2), (Face.LEFT, 0, 0)),  # UBL
    ((Face.UP, 0, 2), (Face.BACK, 0, 0), (Face.RIGHT, 0, 2)),  # UBR
    ((Face.DOWN, 0, 2), (Face.FRONT, 2, 2), (Face.RIGHT, 2, 0)),  # DFR
    ((Face.DOWN, 0, 0), (Face.FRONT, 2, 0), (Face.LEFT, 2, 2)),  # DFL
    ((Face.DOWN, 2, 2), (Face.BACK, 2, 0), (Face.RIGHT, 2, 2)),  # DBR
    ((Face.DOWN, 2, 0), (Face.BACK, 2, 2), (Face.LEFT, 2, 0)),  # DBL
)


def color_letter(color: Color) -> str:
    """Return the one-letter name of a colour."""
    return _COLOR_LETTERS[Color(color)]


def move_name(move: Move) -> str:
    """Return the standard notation of a move, such as "R'" or "U2"."""
    return _MOVE_NAMES[Move(move)]


class RubiksCube(ABC):
    """A 3x3x3 cube; concrete storages supply colours and the six quarter turns.

    Layout::

              U
            L F R B
              D
    """

    @abstractmethod
    def get_color(self, face: Face, row: int, col: int) -> Color:
        """Return the colour of the sticker at (row, col) of a face."""

    @abstractmethod
    def is_solved(self) -> bool:
        """Return True if every face shows a single colour in its home place."""

    @abstractmethod
    def u(self) -> RubiksCube:
        """Turn the up face clockwise."""

    @abstractmethod
    def l(self) -> RubiksCube:  # noqa: E743
        """Turn the left face clockwise."""

    @abstractmethod
    def f(self) -> RubiksCube:
        """Turn the front face clockwise."""

    @abstractmethod
    def r(self) -> RubiksCube:
        """Turn the right face clockwise."""

    @abstractmethod
    def b(self) -> RubiksCube:
        """Turn the back face clockwise."""

    @abstractmethod
    def d(self) -> RubiksCube:
        """Turn the down face clockwise."""

    def u_prime(self) -> RubiksCube:
        return self.u().u().u()

    def u2(self) -> RubiksCube:
        return self.u().u()

    def l_prime(self) -> RubiksCube:
        return self.l().l().l()

    def l2(self) -> RubiksCube:
        return self.l().l()

    def f_prime(self) -> RubiksCube:
        return self.f().f().f()

    def f2(self) -> RubiksCube:
        return self.f().f()

    def r_prime(self) -> RubiksCube:
        return self.r().r().r()

    def r2(self) -> RubiksCube:
        return self.r().r()

    def b_prime(self) -> RubiksCube:
        return self.b().b().b()

    def b2(self) -> RubiksCube:
        return self.b().b()

    def d_prime(self) -> RubiksCube:
        return self.d().d().d()

    def d2(self) -> RubiksCube:
        return self.d().d()

    def move(self, mv: Move) -> RubiksCube:
        """Apply a move and return the cube."""
        getattr(self, _MOVE_METHODS[Move(mv)])()
        return self

    def invert(self, mv: Move) -> RubiksCube:
        """Apply the inverse of a move and return the cube."""
        return self.move(_INVERSES[Move(mv)])

    def random_moves(self, times: int, rng: random.Random | None = None) -> list[Move]:
        """Apply `times` random moves and return them in the order applied."""
        rng = rng if rng is not None else random.Random()
        moves = list(Move)
        performed = []
        for _ in range(times):
            mv = rng.choice(moves)
            performed.append(mv)
            self.move(mv)
        return performed

    def _row(self, face: Face, row: int) -> str:
        return "".join(color_letter(self.get_color(face, row, col)) + " " for col in range(3))

    def render(self) -> str:
        """Return the unfolded net of the cube as text."""
        lines = ["Rubik's Cube:", ""]
        lines.extend(" " * 7 + self._row(Face.UP, row) for row in range(3))
        lines.append("")
        middle = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)
        lines.extend(" ".join(self._row(face, row) for face in middle) for row in range(3))
        lines.append("")
        lines.extend(" " * 7 + self._row(Face.DOWN, row) for row in range(3))
        lines.append("")
        return "\n".join(lines) + "\n"

    def print(self) -> None:
        """Write the net of the cube to standard output."""
        sys.stdout.write(self.render())

    def corner_color_string(self, ind: int) -> str:
        """Return the three letters of corner `ind` (0..7: UFR UFL UBL UBR DFR DFL DBR DBL)."""
        if not 0 <= ind < len(_CORNER_STICKERS):
            raise ValueError(f"corner index out of range: {ind}")
        return "".join(
            color_letter(self.get_color(face, row, col))
            for face, row, col in _CORNER_STICKERS[ind]
        )

    def corner_index(self, ind: int) -> int:
        """Return which corner piece sits at position `ind`, as a 3-bit number."""
        corner = self.corner_color_string(ind)
        ret = 0
        if "Y" in corner:
            ret |= 1 << 2
        if "O" in corner:
            ret |= 1 << 1
        if "G" in corner:
            ret |= 1 << 0
        return ret

    def corner_orientation(self, ind: int) -> int:
        """Return 0, 1 or 2: where the white/yellow sticker of corner `ind` faces."""
        corner = self.corner_color_string(ind)
        top = next((c for c in corner if c in "WY"), None)
        if top is None:
            return 0
        if corner[1] == top:
            return 1
        if corner[2] == top:
            return 2
        return 0