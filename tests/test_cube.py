import random

import pytest

from cubestate.cube import (
    Color,
    Face,
    Move,
    RubiksCube,
    color_letter,
    move_name,
)


class RecordingCube(RubiksCube):
    """Solved-looking cube that records the quarter turns applied to it."""

    def __init__(self, paint=None):
        self.log = []
        self.paint = dict(paint or {})

    def get_color(self, face, row, col):
        return self.paint.get((face, row, col), Color(face.value))

    def is_solved(self):
        return not self.log and not self.paint

    def u(self):
        self.log.append("u")
        return self

    def l(self):  # noqa: E743
        self.log.append("l")
        return self

    def f(self):
        self.log.append("f")
        return self

    def r(self):
        self.log.append("r")
        return self

    def b(self):
        self.log.append("b")
        return self

    def d(self):
        self.log.append("d")
        return self


def test_base_is_abstract():
    with pytest.raises(TypeError):
        RubiksCube()


@pytest.mark.parametrize(
    "color, letter",
    [
        (Color.BLUE, "B"),
        (Color.GREEN, "G"),
        (Color.RED, "R"),
        (Color.YELLOW, "Y"),
        (Color.WHITE, "W"),
        (Color.ORANGE, "O"),
    ],
)
def test_color_letter(color, letter):
    assert color_letter(color) == letter


@pytest.mark.parametrize(
    "move, name",
    [
        (Move.L, "L"),
        (Move.LPRIME, "L'"),
        (Move.L2, "L2"),
        (Move.R, "R"),
        (Move.RPRIME, "R'"),
        (Move.U2, "U2"),
        (Move.DPRIME, "D'"),
        (Move.F, "F"),
        (Move.B2, "B2"),
    ],
)
def test_move_name(move, name):
    assert move_name(move) == name


def test_all_move_names_distinct():
    names = {move_name(m) for m in Move}
    assert len(names) == len(Move) == 18


def test_move_enum_order_matches_layout():
    assert [move_name(m) for m in list(Move)[:3]] == ["L", "L2", "L'"]
    assert move_name(Move(17)) == "B'"


@pytest.mark.parametrize(
    "move, turns",
    [
        (Move.L, ["l"]),
        (Move.LPRIME, ["l"] * 3),
        (Move.L2, ["l"] * 2),
        (Move.R, ["r"]),
        (Move.UPRIME, ["u"] * 3),
        (Move.D2, ["d"] * 2),
        (Move.F, ["f"]),
        (Move.BPRIME, ["b"] * 3),
    ],
)
def test_move_dispatch(move, turns):
    cube = RecordingCube()
    assert RubiksCube.move(cube, move) is cube
    assert cube.log == turns


@pytest.mark.parametrize(
    "move, turns",
    [
        (Move.L, ["l"] * 3),
        (Move.LPRIME, ["l"]),
        (Move.L2, ["l"] * 2),
        (Move.U, ["u"] * 3),
        (Move.FPRIME, ["f"]),
        (Move.B2, ["b"] * 2),
    ],
)
def test_invert_dispatch(move, turns):
    cube = RecordingCube()
    assert RubiksCube.invert(cube, move) is cube
    assert cube.log == turns


@pytest.mark.parametrize("move", list(Move))
def test_move_then_invert_is_full_turns(move):
    cube = RecordingCube()
    RubiksCube.move(cube, move)
    RubiksCube.invert(cube, move)
    assert len(set(cube.log)) == 1
    assert len(cube.log) % 4 == 0


def test_random_moves_reproducible_and_applied():
    first = RecordingCube()
    second = RecordingCube()
    moves_a = RubiksCube.random_moves(first, 25, random.Random(7))
    moves_b = RubiksCube.random_moves(second, 25, random.Random(7))
    assert moves_a == moves_b
    assert len(moves_a) == 25
    assert all(isinstance(m, Move) for m in moves_a)
    replay = RecordingCube()
    for m in moves_a:
        RubiksCube.move(replay, m)
    assert replay.log == first.log


def test_random_moves_zero():
    cube = RecordingCube()
    assert RubiksCube.random_moves(cube, 0, random.Random(1)) == []
    assert cube.log == []


def test_render_layout():
    text = RubiksCube.render(RecordingCube())
    lines = text.split("\n")
    assert lines[0] == "Rubik's Cube:"
    assert lines[2] == "       W W W "
    assert lines[6] == "G G G  R R R  B B B  O O O "
    assert lines[10] == "       Y Y Y "
    assert text.endswith("\n\n")


def test_render_counts_each_color_nine_times():
    text = RubiksCube.render(RecordingCube()).split("\n", 1)[1]
    for letter in "WGRBOY":
        assert text.count(letter) == 9


def test_print_writes_render(capsys):
    cube = RecordingCube()
    RubiksCube.print(cube)
    out = capsys.readouterr().out
    assert out.startswith("Rubik's Cube:\n\n       W W W \n")
    assert out.endswith("       Y Y Y \n\n")


def test_print_matches_render(capsys):
    cube = RecordingCube()
    RubiksCube.print(cube)
    assert capsys.readouterr().out == RubiksCube.render(cube)


def test_solved_corner_string():
    assert RubiksCube.corner_color_string(RecordingCube(), 0) == "WRB"


def test_solved_corner_indices_are_a_permutation():
    cube = RecordingCube()
    indices = {RubiksCube.corner_index(cube, i) for i in range(8)}
    assert indices == set(range(8))


def test_solved_corners_have_zero_orientation():
    cube = RecordingCube()
    orientations = [RubiksCube.corner_orientation(cube, i) for i in range(8)]
    assert orientations == [0] * 8


def test_corner_orientation_from_painted_stickers():
    cube = RecordingCube(
        {
            (Face.UP, 2, 2): Color.RED,
            (Face.FRONT, 0, 2): Color.WHITE,
        }
    )
    assert RubiksCube.corner_orientation(cube, 0) == 1
    cube = RecordingCube(
        {
            (Face.UP, 2, 2): Color.BLUE,
            (Face.RIGHT, 0, 0): Color.WHITE,
        }
    )
    assert RubiksCube.corner_orientation(cube, 0) == 2


def test_corner_index_reads_piece_colors():
    cube = RecordingCube(
        {
            (Face.UP, 2, 2): Color.YELLOW,
            (Face.FRONT, 0, 2): Color.ORANGE,
            (Face.RIGHT, 0, 0): Color.GREEN,
        }
    )
    assert RubiksCube.corner_index(cube, 0) == RubiksCube.corner_index(
        RecordingCube(), 7
    )


@pytest.mark.parametrize("ind", [-1, 8, 100])
def test_corner_out_of_range(ind):
    cube = RecordingCube()
    with pytest.raises(ValueError):
        RubiksCube.corner_color_string(cube, ind)
    with pytest.raises(ValueError):
        RubiksCube.corner_index(cube, ind)