"""Cube stored as six 64-bit words, one byte per non-centre sticker."""

from __future__ import annotations

from cubestate.cube import Color, Face, RubiksCube

_MASK64 = (1 << 64) - 1
_ONE_8 = (1 << 8) - 1
_ONE_24 = (1 << 24) - 1

# Byte slot of each (row, col) of a face, running clockwise from the top-left;
# slot 8 is the centre, which is never stored.
_SLOTS = (
    (0, 1, 2),
    (7, 8, 3),
    (6, 5, 4),
)
_CENTRE = 8

# Corner positions in the order they are packed by `corners`.
_CORNER_ORDER = (0, 1, 3, 2, 4, 5, 6, 7)


def _byte(word: int, slot: int) -> int:
    return (word >> (8 * slot)) & _ONE_8


def _with_byte(word: int, slot: int, value: int) -> int:
    shift = 8 * slot
    return (word & ~(_ONE_8 << shift) & _MASK64) | (value << shift)


class RubiksCubeBitboard(RubiksCube):
    """A cube whose faces are 64-bit words of eight one-hot colour bytes."""

    def __init__(self) -> None:
        self.bitboard: list[int] = []
        for side in range(6):
            clr = 1 << side
            self.bitboard.append(sum(clr << (8 * slot) for slot in range(8)))
        self._solved = tuple(self.bitboard)

    def get_color(self, face, row, col) -> Color:
        face = Face(face)
        slot = _SLOTS[row][col]
        if slot == _CENTRE:
            return Color(face.value)
        color = _byte(self.bitboard[face.value], slot)
        return Color(color.bit_length() - 1)

    def is_solved(self) -> bool:
        return tuple(self.bitboard) == self._solved

    def _rotate_face(self, face: int) -> None:
        word = self.bitboard[face]
        self.bitboard[face] = ((word << 16) & _MASK64) | (word >> 48)

    def _copy_bytes(self, dst: int, dst_slots, src: int, src_slots) -> None:
        """Copy bytes `src_slots` of side `src` into bytes `dst_slots` of side `dst`."""
        values = [_byte(self.bitboard[src], slot) for slot in src_slots]
        self._put_bytes(dst, dst_slots, values)

    def _put_bytes(self, dst: int, dst_slots, values) -> None:
        word = self.bitboard[dst]
        for slot, value in zip(dst_slots, values):
            word = _with_byte(word, slot, value)
        self.bitboard[dst] = word

    def _cycle(self, strips) -> None:
        """Each strip (side, slots) takes the stickers of the next; the last takes the first's."""
        first_side, first_slots = strips[0]
        saved = [_byte(self.bitboard[first_side], slot) for slot in first_slots]
        for (dst, dst_slots), (src, src_slots) in zip(strips, strips[1:]):
            self._copy_bytes(dst, dst_slots, src, src_slots)
        last_side, last_slots = strips[-1]
        self._put_bytes(last_side, last_slots, saved)

    def u(self) -> RubiksCubeBitboard:
        self._rotate_face(0)
        board = self.bitboard
        temp = board[2] & _ONE_24
        board[2] = (board[2] & ~_ONE_24 & _MASK64) | (board[3] & _ONE_24)
        board[3] = (board[3] & ~_ONE_24 & _MASK64) | (board[4] & _ONE_24)
        board[4] = (board[4] & ~_ONE_24 & _MASK64) | (board[1] & _ONE_24)
        board[1] = (board[1] & ~_ONE_24 & _MASK64) | temp
        return self

    def l(self) -> RubiksCubeBitboard:  # noqa: E743
        self._rotate_face(1)
        self._cycle((
            (2, (0, 7, 6)),
            (0, (0, 7, 6)),
            (4, (4, 3, 2)),
            (5, (0, 7, 6)),
        ))
        return self

    def f(self) -> RubiksCubeBitboard:
        self._rotate_face(2)
        self._cycle((
            (0, (4, 5, 6)),
            (1, (2, 3, 4)),
            (5, (0, 1, 2)),
            (3, (6, 7, 0)),
        ))
        return self

    def r(self) -> RubiksCubeBitboard:
        self._rotate_face(3)
        self._cycle((
            (0, (2, 3, 4)),
            (2, (2, 3, 4)),
            (5, (2, 3, 4)),
            (4, (7, 6, 0)),
        ))
        return self

    def b(self) -> RubiksCubeBitboard:
        self._rotate_face(4)
        self._cycle((
            (0, (0, 1, 2)),
            (3, (2, 3, 4)),
            (5, (4, 5, 6)),
            (1, (6, 7, 0)),
        ))
        return self

    def d(self) -> RubiksCubeBitboard:
        self._rotate_face(5)
        self._cycle((
            (2, (4, 5, 6)),
            (1, (4, 5, 6)),
            (4, (4, 5, 6)),
            (3, (4, 5, 6)),
        ))
        return self

    def corners(self) -> int:
        """Pack the eight corners into 5-bit fields.

        Fields run UFR, UFL, UBR, UBL, DFR, DFL, DBR, DBL from the most
        significant end, followed by five zero bits. Each field holds the
        corner's 3-bit piece index, with bit 3 set for orientation 1 and
        bit 4 set for orientation 2.
        """
        ret = 0
        for ind in _CORNER_ORDER:
            code = self.corner_index(ind) | (self.corner_orientation(ind) << 3)
            ret = ((ret | code) << 5) & _MASK64
        return ret

    def copy(self) -> RubiksCubeBitboard:
        """Return an independent cube in the same state."""
        clone = RubiksCubeBitboard()
        clone.bitboard = list(self.bitboard)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCubeBitboard):
            return NotImplemented
        return self.bitboard == other.bitboard

    def __hash__(self) -> int:
        final = 0
        for word in self.bitboard:
            final ^= word
        return hash(final)