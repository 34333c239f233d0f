"""Cube stored as a flat sequence of 54 sticker letters."""

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


def _index(face: int, row: int, col: int) -> int:
    return face * 9 + row * 3 + col


def _row_strip(face: int, row: int, cols) -> tuple[int, ...]:
    return tuple(_index(face, row, col) for col in cols)


def _col_strip(face: int, col: int, rows) -> tuple[int, ...]:
    return tuple(_index(face, row, col) for row in rows)


# Each turn moves four strips of three stickers: strip k takes the
# stickers of strip k + 1, and the last strip takes those of the first.
_SIDE_CYCLES = {
    0: (
        _row_strip(4, 0, _BACKWARD),
        _row_strip(1, 0, _BACKWARD),
        _row_strip(2, 0, _BACKWARD),
        _row_strip(3, 0, _BACKWARD),
    ),
    1: (
        _col_strip(0, 0, _FORWARD),
        _col_strip(4, 2, _BACKWARD),
        _col_strip(5, 0, _FORWARD),
        _col_strip(2, 0, _FORWARD),
    ),
    2: (
        _row_strip(0, 2, _FORWARD),
        _col_strip(1, 2, _BACKWARD),
        _row_strip(5, 0, _BACKWARD),
        _col_strip(3, 0, _FORWARD),
    ),
    3: (
        _col_strip(0, 2, _BACKWARD),
        _col_strip(2, 2, _BACKWARD),
        _col_strip(5, 2, _BACKWARD),
        _col_strip(4, 0, _FORWARD),
    ),
    4: (
        _row_strip(0, 0, _BACKWARD),
        _col_strip(3, 2, _BACKWARD),
        _row_strip(5, 2, _FORWARD),
        _col_strip(1, 0, _FORWARD),
    ),
    5: (
        _row_strip(2, 2, _FORWARD),
        _row_strip(1, 2, _FORWARD),
        _row_strip(4, 2, _FORWARD),
        _row_strip(3, 2, _FORWARD),
    ),
}


class RubiksCube1dArray(RubiksCube):
    """A cube whose stickers are kept in one list of 54 colour letters."""

    def __init__(self) -> None:
        self.cube: list[str] = [
            color_letter(Color(face)) for face in range(6) for _ in range(9)
        ]

    def get_color(self, face, row, col) -> Color:
        letter = self.cube[_index(int(getattr(face, "value", face)), row, col)]
        return _LETTER_COLORS.get(letter, Color.WHITE)

    def is_solved(self) -> bool:
        return all(
            letter == color_letter(Color(pos // 9)) for pos, letter in enumerate(self.cube)
        )

    def _rotate_face(self, face: int) -> None:
        base = face * 9
        old = self.cube[base:base + 9]
        self.cube[base:base + 9] = [
            old[(2 - col) * 3 + row] for row in range(3) for col in range(3)
        ]

    def _turn(self, face: int) -> RubiksCube1dArray:
        self._rotate_face(face)
        strips = _SIDE_CYCLES[face]
        values = [[self.cube[i] for i in strip] for strip in strips]
        for strip, source in zip(strips, values[1:] + values[:1]):
            for i, letter in zip(strip, source):
                self.cube[i] = letter
        return self

    def u(self) -> RubiksCube1dArray:
        return self._turn(0)

    def l(self) -> RubiksCube1dArray:  # noqa: E743
        return self._turn(1)

    def f(self) -> RubiksCube1dArray:
        return self._turn(2)

    def r(self) -> RubiksCube1dArray:
        return self._turn(3)

    def b(self) -> RubiksCube1dArray:
        return self._turn(4)

    def d(self) -> RubiksCube1dArray:
        return self._turn(5)

    def copy(self) -> RubiksCube1dArray:
        """Return an independent cube in the same state."""
        clone = RubiksCube1dArray()
        clone.cube = list(self.cube)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCube1dArray):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash("".join(self.cube))