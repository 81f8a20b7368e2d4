import io

import pytest

from tinylinalg.matrix import Matrix, SingularMatrixError
from tinylinalg.vector import Vector


def flat(m):
    return [value for row in m.rows for value in row]


def assert_close(a, b, tol=1e-9):
    assert a.shape == b.shape
    assert flat(a) == pytest.approx(flat(b), abs=tol)


A = Matrix([[4, 7, 2], [3, 6, 1], [2, 5, 3]])


def test_zeros_and_identity():
    assert flat(Matrix.zeros(2, 3)) == [0.0] * 6
    eye = Matrix.identity(3)
    assert eye(1, 1) == 1.0
    assert eye(1, 2) == 0.0
    assert eye.shape == (3, 3)


@pytest.mark.parametrize("rows", [[], [[]], [[1, 2], [3]]])
def test_invalid_shapes_rejected(rows):
    with pytest.raises(ValueError):
        Matrix(rows)


def test_zeros_rejects_non_positive():
    with pytest.raises(ValueError):
        Matrix.zeros(0, 2)


def test_one_and_zero_based_access_agree():
    m = Matrix([[1, 2], [3, 4]])
    assert m(2, 1) == m[1, 0] == 3.0
    assert m.rows == ((1.0, 2.0), (3.0, 4.0))


def test_access_out_of_range():
    m = Matrix([[1, 2], [3, 4]])
    with pytest.raises(IndexError):
        m(0, 1)
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m.set(3, 1, 1.0)


def test_set_and_setitem():
    m = Matrix.zeros(2, 2)
    m.set(1, 2, 5)
    m[1, 0] = 6
    assert m == Matrix([[0, 5], [6, 0]])


def test_transpose_twice_is_identity_operation():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert m.transpose().shape == (3, 2)
    assert m.transpose().transpose() == m
    assert m.transpose()(3, 1) == m(1, 3)


def test_add_sub_negate():
    m = Matrix([[1, 2], [3, 4]])
    n = Matrix([[5, -6], [7, 8]])
    assert (m + n) - n == m
    assert -m + m == Matrix.zeros(2, 2)


def test_scalar_multiplication():
    m = Matrix([[1, 2], [3, 4]])
    assert 2 * m == m * 2 == m + m


def test_identity_product():
    eye = Matrix.identity(3)
    assert eye @ A == A
    assert A * eye == A
    v = Vector([1, 2, 3])
    assert eye * v == v
    assert eye @ v == v


def test_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) + Matrix([[1], [2]])
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) @ Matrix([[1, 2]])
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) @ Vector([1, 2, 3])


def test_determinant_identity_and_single():
    assert Matrix.identity(4).determinant() == 1.0
    assert Matrix([[7]]).determinant() == 7.0


def test_determinant_singular_is_zero():
    assert Matrix([[1, 2], [2, 4]]).determinant() == 0.0


def test_determinant_multiplicative():
    b = Matrix([[1, 0, 2], [0, 3, 1], [1, 1, 1]])
    assert (A @ b).determinant() == pytest.approx(A.determinant() * b.determinant())


def test_determinant_row_swap_flips_sign():
    swapped = Matrix([A.rows[1], A.rows[0], A.rows[2]])
    assert swapped.determinant() == pytest.approx(-A.determinant())


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]).determinant()


def test_inverse_product_is_identity():
    assert_close(A @ A.inverse(), Matrix.identity(3))
    assert_close(A.inverse() @ A, Matrix.identity(3))


def test_inverse_singular_raises():
    with pytest.raises(SingularMatrixError):
        Matrix([[1, 2], [2, 4]]).inverse()


def test_inverse_requires_square():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3]]).inverse()


def test_pseudo_inverse_of_square_matches_inverse():
    assert_close(A.pseudo_inverse(), A.inverse(), tol=1e-7)


def test_pseudo_inverse_left_inverse_of_tall_matrix():
    tall = Matrix([[1, 2], [3, 4], [5, 7]])
    pinv = tall.pseudo_inverse()
    assert pinv.shape == (2, 3)
    assert_close(pinv @ tall, Matrix.identity(2), tol=1e-7)


def test_is_symmetric():
    assert (A + A.transpose()).is_symmetric()
    assert not A.is_symmetric()
    assert not Matrix([[1, 2, 3]]).is_symmetric()
    assert Matrix([[1, 2], [2.1, 1]]).is_symmetric(0.5)


def test_str_layout():
    assert str(Matrix([[1, 2]])) == "[  1.000000,   2.000000]"


def test_read_from_stream():
    m = Matrix.read(2, 2, io.StringIO("1 2\n3 4\n"))
    assert m == Matrix([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        Matrix.read(2, 2, io.StringIO("1 2 3"))