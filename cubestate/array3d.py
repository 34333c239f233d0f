"""Cube stored as six 3x3 grids of sticker letters."""

from __future__ import annotations

from cubestate.cube import Color, RubiksCube, color_letter

_LETTER_COLORS = {
    "B": Color.BLUE,
    "R": Color.RED,
    "G": Color.GREEN,
    "O": Color.ORANGE,
    "Y": Color.YELLOW,
}

_FORWARD = (0, 1, 2)
_BACKWARD = (2, 1, 0)


def _row(face: int, row: int, cols):
    return tuple((face, row, col) for col in cols)


def _col(face: int, col: int, rows):
    return tuple((face, row, col) for row in rows)


# Strip k of a turn takes the stickers of strip k + 1; the last takes the first's.
_SIDE_CYCLES = {
    0: (
        _row(4, 0, _BACKWARD),
        _row(1, 0, _BACKWARD),
        _row(2, 0, _BACKWARD),
        _row(3, 0, _BACKWARD),
    ),
    1: (
        _col(0, 0, _FORWARD),
        _col(4, 2, _BACKWARD),
        _col(5, 0, _FORWARD),
        _col(2, 0, _FORWARD),
    ),
    2: (
        _row(0, 2, _FORWARD),
        _col(1, 2, _BACKWARD),
        _row(5, 0, _BACKWARD),
        _col(3, 0, _FORWARD),
    ),
    3: (
        _col(0, 2, _BACKWARD),
        _col(2, 2, _BACKWARD),
        _col(5, 2, _BACKWARD),
        _col(4, 0, _FORWARD),
    ),
    4: (
        _row(0, 0, _BACKWARD),
        _col(3, 2, _BACKWARD),
        _row(5, 2, _FORWARD),
        _col(1, 0, _FORWARD),
    ),
    5: (
        _row(2, 2, _FORWARD),
        _row(1, 2, _FORWARD),
        _row(4, 2, _FORWARD),
        _row(3, 2, _FORWARD),
    ),
}


class RubiksCube3dArray(RubiksCube):
    """A cube whose stickers are kept as cube[face][row][col] letters."""

    def __init__(self) -> None:
        self.cube: list[list[list[str]]] = [
            [[color_letter(Color(face))] * 3 for _ in range(3)] for face in range(6)
        ]

    def get_color(self, face, row, col) -> Color:
        letter = self.cube[int(getattr(face, "value", face))][row][col]
        return _LETTER_COLORS.get(letter, Color.WHITE)

    def is_solved(self) -> bool:
        return all(
            letter == color_letter(Color(face))
            for face, grid in enumerate(self.cube)
            for line in grid
            for letter in line
        )

    def _rotate_face(self, face: int) -> None:
        self.cube[face] = [list(line) for line in zip(*reversed(self.cube[face]))]

    def _turn(self, face: int) -> RubiksCube3dArray:
        self._rotate_face(face)
        strips = _SIDE_CYCLES[face]
        values = [[self.cube[f][r][c] for f, r, c in strip] for strip in strips]
        for strip, source in zip(strips, values[1:] + values[:1]):
            for (f, r, c), letter in zip(strip, source):
                self.cube[f][r][c] = letter
        return self

    def u(self) -> RubiksCube3dArray:
        return self._turn(0)

    def l(self) -> RubiksCube3dArray:  # noqa: E743
        return self._turn(1)

    def f(self) -> RubiksCube3dArray:
        return self._turn(2)

    def r(self) -> RubiksCube3dArray:
        return self._turn(3)

    def b(self) -> RubiksCube3dArray:
        return self._turn(4)

    def d(self) -> RubiksCube3dArray:
        return self._turn(5)

    def copy(self) -> RubiksCube3dArray:
        """Return an independent cube in the same state."""
        clone = RubiksCube3dArray()
        clone.cube = [[list(line) for line in grid] for grid in self.cube]
        return clone

    def _letters(self) -> str:
        return "".join(letter for grid in self.cube for line in grid for letter in line)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCube3dArray):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash(self._letters())