# cubestate

Models of a 3x3 Rubik's cube. Each model can turn faces, say whether the cube is solved, render a net of the cube as text and describe its corners.

There are three interchangeable representations:

- `cubestate.array1d.RubiksCube1dArray` keeps the 54 stickers as one flat list of colour letters (`cube` attribute).
- `cubestate.array3d.RubiksCube3dArray` keeps the stickers as `cube[face][row][col]`.
- `cubestate.bitboard.RubiksCubeBitboard` keeps each face as a 64-bit integer (`bitboard` attribute), one one-hot colour byte per sticker around the centre.

All three share the interface of `cubestate.cube.RubiksCube`. Each has a `copy()` method, compares equal to another cube of the same class in the same state, and is hashable, so cubes can be used as keys in sets and dictionaries.

## Layout

```
        U
      L F R B
        D
```

A new cube is solved: white on top (`U`), green on the left (`L`), red on the front (`F`), blue on the right (`R`), orange on the back (`B`) and yellow on the bottom (`D`). The enums `Face`, `Color` and `Move` in `cubestate.cube` name faces, colours and the eighteen face turns.

## Usage

```python
from cubestate.cube import Move, Face, Color
from cubestate.array3d import RubiksCube3dArray

cube = RubiksCube3dArray()
cube.r().u().r_prime().u_prime()
print(cube.is_solved())          # False

cube.move(Move.F2)
cube.invert(Move.F2)

scramble = cube.random_moves(20)
for mv in reversed(scramble):
    cube.invert(mv)

cube.print()
print(cube.get_color(Face.FRONT, 1, 1) is Color.RED)   # True
```

Every turn returns the cube itself, so turns can be chained. `u`, `l`, `f`, `r`, `b` and `d` turn a face a quarter turn clockwise; the `_prime` variants (`u_prime`, ...) turn it back, and the `2` variants (`u2`, ...) turn it twice.

`move(mv)` applies a `Move`; `invert(mv)` applies its inverse. `random_moves(times, rng=None)` applies `times` random moves, taking an optional `random.Random` for repeatable scrambles, and returns the moves in the order they were made.

`render()` returns the net as a string; `print()` writes it to standard output.

### Corners

`corner_color_string(ind)`, `corner_index(ind)` and `corner_orientation(ind)` describe the eight corners, numbered 0 to 7 as UFR, UFL, UBL, UBR, DFR, DFL, DBR, DBL. An index outside 0..7 raises `ValueError`. `corner_index` gives the piece at that position as a 3-bit number; `corner_orientation` gives 0, 1 or 2 according to where its white or yellow sticker faces.

The bitboard model also offers `corners()`, which packs every corner's piece index and orientation into 5-bit fields of one integer.

### Names and letters

```python
from cubestate.cube import Move, move_name, color_letter, Color

move_name(Move.RPRIME)    # "R'"
color_letter(Color.BLUE)  # "B"
```

## What it does not do

The package holds cube state only. It does not search for solutions, and it has no command-line program; use it from Python.

## Tests

```
pip install -e .[test]
pytest
```