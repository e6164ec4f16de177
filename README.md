# linalg3d

Linear algebra for game and graphics code, in plain Python:

- `linalg3d.point.Point` holds N-dimensional coordinates and supports
  element-wise arithmetic with points and scalars. `Axis` names the x, y, z
  and w axes and can be used as an index.
- `linalg3d.direction.Direction` is a vector built from one point (the origin
  to that point) or from two points (the start to the end), and remembers its
  `beginning` and `end`. It provides `length`, `cos_axis_angle`,
  `cos_vector_angle`, `projection`, `dot_product`, `cross_product` (3D only),
  `mixed_product`, `ort` (a new unit direction), `normalize` (in place), and the
  tests `is_zero`, `equal`, `orthogonal`, `colinear` and `complanar`.
- `linalg3d.matrix.Matrix` is a dense rows × columns matrix indexed as
  `m[row, column]`. It supports `*` and `/` by a scalar, `+` and `-` between
  matrices of the same shape, `@` for the matrix product, `transposed`,
  `minor_matrix`, `minor`, `l_decomposition` and `u_decomposition` (Doolittle,
  without pivoting), `determinant` (Gaussian elimination with row exchanges),
  `algebraic_complement`, `union_matrix` (the matrix of cofactors), `inverted`,
  and shape predicates such as `is_diagonal_matrix`, `is_identity_matrix`,
  `is_upper_triangular_matrix`, `is_lower_triangular_matrix` and
  `is_echelon_matrix`. `Matrix.zeros`, `Matrix.identity` and
  `Matrix.from_points` build common matrices.
- `linalg3d.square` provides `Matrix1x1`, `Matrix2x2` and `Matrix3x3`, which
  check their size and compute their determinants with closed-form formulas
  (the 3×3 one by the rule of Sarrus).
- `linalg3d.fader` opens a pygame window whose colour fades smoothly over time;
  `frame_color(now)` gives the colour for a moment in seconds.

The math modules use only the standard library; pygame is needed for the
fader window.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Examples

```python
from linalg3d.point import Point, Axis
from linalg3d.direction import Direction
from linalg3d.matrix import Matrix
from linalg3d.square import Matrix2x2

p = Point([1, 2]) + Point([3, 4])
print(p.coordinate(Axis.X), p.coordinate(Axis.Y))   # 4 6

a = Direction(Point([1.0, 0.0, 0.0]))
b = Direction(Point([0.0, 1.0, 0.0]))
print(a.cross_product(b).coordinates)               # (0.0, 0.0, 1.0)
print(a.orthogonal(b))                              # True

m = Matrix([[2.0, 0.0], [0.0, 4.0]])
print(m.determinant())                              # 8.0
print((m @ m.inverted()).is_identity_matrix())      # True

print(Matrix2x2([[1, 2], [3, 4]]).determinant())    # -2
```

## Errors

- Indexing a point with `p[i]` or a matrix with `m[row, column]` outside its
  bounds raises `IndexError`. `Point.coordinate` returns 0 and `Point.set`
  does nothing for an out-of-range index.
- Dividing a point or a matrix by zero, normalising a zero direction, and an
  LU decomposition that meets a zero pivot raise `ZeroDivisionError`.
- Mismatched sizes or shapes, a cross product of non-3D directions, projecting
  onto a zero direction, colinearity with a zero direction, square-only
  operations on a non-square matrix, and inverting a singular matrix raise
  `ValueError`.

## Demo window

The package ships with a small pygame demo. It opens a window and fills it
with a colour that fades smoothly over time:

```
linalg3d-fader
linalg3d-fader --width 800 --height 600 --title "Fader"
```

Close the window to exit. If the window cannot be created, the command prints
the error and exits with status 1.

## What it does not do

The demo window only fills itself with a colour; the package has no scene,
no 3D rendering and no input handling beyond closing the window.