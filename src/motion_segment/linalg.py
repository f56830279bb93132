"""Dense linear system solver used to fit boundary-condition polynomials."""

from typing import Sequence

import numpy as np

from motion_segment.errors import SingularSystemError


def solve_linear_system(
    matrix: Sequence[Sequence[float]], rhs: Sequence[float]
) -> np.ndarray:
    """Solve ``A x = b`` by Gauss-Jordan elimination with partial pivoting.

    The system is augmented to ``[A | b]``. For each column the row with the
    largest absolute entry among the remaining rows is swapped into the pivot
    position, the pivot row is normalized, and the column is eliminated from
    every other row. After the last column the augmented column holds the
    solution.

    The systems solved here are small (4x4, 6x6 or 8x8), so no blocking or
    scaling is attempted.

    Args:
        matrix: Square coefficient matrix of size n x n
        rhs: Right-hand side of length n

    Returns:
        Solution vector of length n as a float array

    Raises:
        ValueError: If the matrix is not square or rhs does not match it
        SingularSystemError: If a pivot is zero or not finite

    Examples:
        >>> solve_linear_system([[2.0, 0.0], [0.0, 4.0]], [2.0, 8.0])
        array([1., 2.])
    """
    a = np.array(matrix, dtype=float)
    b = np.array(rhs, dtype=float)

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"matrix must be square, got shape {a.shape}")
    n = a.shape[0]
    if b.shape != (n,):
        raise ValueError(f"rhs must have length {n}, got shape {b.shape}")

    augmented = np.hstack([a, b.reshape(n, 1)])

    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(augmented[col:, col])))
        if pivot_row != col:
            augmented[[col, pivot_row]] = augmented[[pivot_row, col]]

        pivot = augmented[col, col]
        if pivot == 0.0 or not np.isfinite(pivot):
            raise SingularSystemError(f"singular system: pivot {pivot} in column {col}")
        augmented[col] /= pivot

        # Eliminate this column from every other row
        factors = augmented[:, col].copy()
        factors[col] = 0.0
        augmented -= np.outer(factors, augmented[col])

    return augmented[:, n]
