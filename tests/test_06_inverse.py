"""Matrix inversion through reduction of the augmented matrix."""
import pytest
import sympy

from exactalgebra import (Matrix, InverseEngine, inverse, determinant, NotSquareError, SingularMatrixError,
                          LinearAlgebraError)


def test_two_by_two():
    assert inverse(Matrix.from_rows([[2, 1], [1, 1]])) == Matrix.from_rows([[1, -1], [-1, 2]])


def test_singular():
    with pytest.raises(SingularMatrixError) as err:
        inverse(Matrix.from_rows([[1, 2], [2, 4]]))
    assert err.value.rank == 1
    assert err.value.size == 2
    assert isinstance(err.value, ArithmeticError)
    assert isinstance(err.value, LinearAlgebraError)


def test_not_square():
    with pytest.raises(NotSquareError):
        inverse(Matrix([1, 2, 3, 4, 5, 6], 3, 2))


def test_one_by_one():
    assert inverse(Matrix([5], 1, 1)) == Matrix(["1/5"], 1, 1)
    with pytest.raises(SingularMatrixError):
        inverse(Matrix([0], 1, 1))


def test_identity():
    assert inverse(Matrix.identity(3)) == Matrix.identity(3)


def test_round_trip(square_matrix):
    if determinant(square_matrix) == 0:
        with pytest.raises(SingularMatrixError):
            inverse(square_matrix)
        return
    inv = inverse(square_matrix)
    size = square_matrix.m
    assert square_matrix.multiply(inv) == Matrix.identity(size)
    assert inv.multiply(square_matrix) == Matrix.identity(size)


def test_matches_sympy(square_matrix):
    if determinant(square_matrix) == 0:
        pytest.skip("singular")
    expected = sympy.Matrix(square_matrix.m, square_matrix.n,
                            [c.to_sympy() for c in square_matrix.components]).inv()
    inv = inverse(square_matrix)
    assert [c.to_sympy() for c in inv.components] == list(expected)


def test_inverse_with_steps():
    m = Matrix.from_rows([[0, 1], [1, 0]])
    result, steps = InverseEngine().inverse_with_steps(m)
    assert result == m
    assert len(steps) == 1
    assert steps[0].matrix == Matrix.from_rows([[1, 0, 0, 1], [0, 1, 1, 0]])


def test_input_unchanged():
    m = Matrix.from_rows([[2, 1], [1, 1]])
    inverse(m)
    assert m == Matrix.from_rows([[2, 1], [1, 1]])
