import pytest
from exactalgebra import Matrix

# Square matrices used across the determinant, inverse and reduction tests.
# The last two are singular.
SQUARE_ROWS = [
    [[5]],
    [[2, 1], [1, 1]],
    [[0, 1], [1, 0]],
    [[1, 3, 5], [2, 0, -1], [4, -3, 1]],
    [["1/2", "-3/4", 2], [0, 5, "7/3"], [-1, "1/6", 4]],
    [[0, 2, 1, 3], [1, 0, -2, 0], [4, 1, 0, -1], [2, 2, 2, "1/2"]],
    [[1, 2], [2, 4]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
]


@pytest.fixture
def rref_example() -> Matrix:
    return Matrix.from_rows([[2, 4, 1, 3], [6, 2, 3, 9], [1, 1, 1, 1]])


@pytest.fixture(params=SQUARE_ROWS, ids=[f"square{i}" for i in range(len(SQUARE_ROWS))])
def square_matrix(request: pytest.FixtureRequest) -> Matrix:
    """Provide each of the sample square matrices."""
    return Matrix.from_rows(request.param)


@pytest.fixture(params=[
    [[0, 0], [0, 0]],
    [[1, 2], [2, 4], [3, 6]],
    [[0, 0, 2, 4]],
    [[0, -7, -4, 2], [2, 4, 6, 12], [3, 1, -1, -2]],
    [[2, 1, 12, 1], [1, 2, 9, -1]],
    [[0, 1, 2], [0, 2, 4], [1, 0, 0]],
    [[3], [0], ["-1/2"]],
] + SQUARE_ROWS)
def any_matrix(request: pytest.FixtureRequest) -> Matrix:
    """Provide rectangular, rank-deficient and square sample matrices."""
    return Matrix.from_rows(request.param)
