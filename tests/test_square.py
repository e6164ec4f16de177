import pytest

from linalg3d.matrix import Matrix
from linalg3d.square import Matrix1x1, Matrix2x2, Matrix3x3

SAMPLES_3 = [
    [[2, -1, 0], [1, 3, 4], [5, 2, -2]],
    [[1, 2, 3], [0, 4, 5], [1, 0, 6]],
    [[3, 0, 2], [2, 0, -2], [0, 1, 1]],
]


def test_default_is_zero_matrix():
    for cls, size in ((Matrix1x1, 1), (Matrix2x2, 2), (Matrix3x3, 3)):
        m = cls()
        assert m.rows == size and m.columns == size
        assert m.is_zero_matrix()
        assert m.determinant() == 0


@pytest.mark.parametrize(
    "cls, data",
    [
        (Matrix1x1, [[1, 2]]),
        (Matrix2x2, [[1, 2, 3], [4, 5, 6]]),
        (Matrix3x3, [[1, 2], [3, 4]]),
        (Matrix2x2, [[1]]),
    ],
)
def test_wrong_shape_rejected(cls, data):
    with pytest.raises(ValueError):
        cls(data)


def test_construct_from_matrix_copies_elements():
    base = Matrix([[1, 2], [3, 4]])
    m = Matrix2x2(base)
    assert m.to_lists() == base.to_lists()
    m[0, 0] = 9
    assert base[0, 0] == 1


def test_construct_from_wrong_size_matrix_rejected():
    with pytest.raises(ValueError):
        Matrix3x3(Matrix.identity(2))


def test_1x1_determinant_is_element():
    assert Matrix1x1([[7]]).determinant() == 7
    assert Matrix1x1([[-3.5]]).determinant() == -3.5


def test_2x2_determinant_value():
    assert Matrix2x2([[1, 2], [3, 4]]).determinant() == -2


@pytest.mark.parametrize(
    "data", [[[1, 2], [3, 4]], [[0, 5], [2, 7]], [[4, -1], [6, 3]]]
)
def test_2x2_matches_general_determinant(data):
    assert Matrix2x2(data).determinant() == pytest.approx(Matrix(data).determinant())


@pytest.mark.parametrize("data", SAMPLES_3)
def test_3x3_matches_general_determinant(data):
    assert Matrix3x3(data).determinant() == pytest.approx(Matrix(data).determinant())


def test_identity_determinants():
    assert Matrix2x2(Matrix.identity(2)).determinant() == 1
    assert Matrix3x3(Matrix.identity(3)).determinant() == 1


@pytest.mark.parametrize("data", SAMPLES_3)
def test_3x3_transpose_invariance(data):
    m = Matrix3x3(data)
    assert Matrix3x3(m.transposed()).determinant() == m.determinant()


def test_3x3_determinant_is_multiplicative():
    a = Matrix3x3(SAMPLES_3[0])
    b = Matrix3x3(SAMPLES_3[1])
    product = Matrix3x3(a @ b)
    assert product.determinant() == a.determinant() * b.determinant()


def test_3x3_repeated_row_is_singular():
    m = Matrix3x3([[1, 2, 3], [4, 5, 6], [1, 2, 3]])
    assert m.determinant() == 0


def test_3x3_row_swap_flips_sign():
    data = SAMPLES_3[1]
    swapped = [data[1], data[0], data[2]]
    assert Matrix3x3(swapped).determinant() == -Matrix3x3(data).determinant()


def test_2x2_scaling_scales_determinant_by_square():
    m = Matrix2x2([[4, -1], [6, 3]])
    assert Matrix2x2(m * 3).determinant() == 9 * m.determinant()


def test_inherits_matrix_behaviour():
    m = Matrix3x3(SAMPLES_3[0])
    assert m.trace() == Matrix(SAMPLES_3[0]).trace()
    assert m == Matrix(SAMPLES_3[0])
    with pytest.raises(IndexError):
        m[3, 0]