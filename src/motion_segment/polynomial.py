"""Power-basis polynomials fitted to boundary conditions.

A polynomial ``s(dt) = sum(c[i] * dt**i)`` is fitted so that its value and
first derivatives match the supplied boundary conditions at ``dt = 0`` and
``dt = T``. Matching position and velocity gives a cubic, adding acceleration
gives a quintic, adding jerk gives a 7th-order polynomial.
"""

from typing import Sequence, Tuple

from motion_segment.linalg import solve_linear_system

# Highest derivative evaluated (0=position, 1=velocity, 2=acceleration, 3=jerk)
MAX_DERIVATIVE = 3


def falling_factorial(n: int, k: int) -> int:
    """Return ``n * (n-1) * ... * (n-k+1)``, the weight of ``dt**(n-k)`` in the k-th derivative."""
    result = 1
    for m in range(n - k + 1, n + 1):
        result *= m
    return result


def _boundary_row(degree: int, derivative: int, tau: float) -> list:
    """Row of the k-th derivative of every basis monomial evaluated at ``tau``."""
    row = []
    for i in range(degree + 1):
        if i < derivative:
            row.append(0.0)
        else:
            row.append(falling_factorial(i, derivative) * tau ** (i - derivative))
    return row


def fit_boundary_polynomial(
    duration: float,
    start: Sequence[float],
    end: Sequence[float],
) -> Tuple[float, ...]:
    """Fit the polynomial matching derivative values at both ends of ``[0, duration]``.

    Args:
        duration: Segment duration T (positive)
        start: Values at dt=0, ordered (position, velocity[, acceleration[, jerk]])
        end: Values at dt=T, in the same order and of the same length as start

    Returns:
        Coefficients ``(c0, c1, ..., cN)`` with N = 2 * len(start) - 1

    Raises:
        ValueError: If start and end differ in length or are not 2 to 4 long
        SingularSystemError: If the boundary system cannot be solved

    Examples:
        >>> fit_boundary_polynomial(1.0, (0.0, 0.0), (1.0, 0.0))
        (0.0, 0.0, 3.0, -2.0)
    """
    if len(start) != len(end):
        raise ValueError(
            f"start and end must match in length: {len(start)} != {len(end)}"
        )
    if not 2 <= len(start) <= MAX_DERIVATIVE + 1:
        raise ValueError(f"between 2 and 4 boundary values required, got {len(start)}")

    orders = len(start)
    degree = 2 * orders - 1

    matrix = [_boundary_row(degree, k, 0.0) for k in range(orders)]
    matrix += [_boundary_row(degree, k, duration) for k in range(orders)]
    rhs = list(start) + list(end)

    return tuple(float(c) for c in solve_linear_system(matrix, rhs))


def evaluate_polynomial(coefficients: Sequence[float], dt: float, derivative: int = 0) -> float:
    """Evaluate a derivative of a power-basis polynomial with Horner's rule.

    Args:
        coefficients: Coefficients ``c0..cN`` of ``sum(c[i] * dt**i)``
        dt: Offset from the segment start
        derivative: Derivative order, 0 (value) to 3 (jerk)

    Returns:
        Value of the requested derivative at dt. Derivatives beyond the
        polynomial degree are 0.
    """
    if not 0 <= derivative <= MAX_DERIVATIVE:
        raise ValueError(f"derivative must be between 0 and {MAX_DERIVATIVE}, got {derivative}")

    result = 0.0
    for i in range(len(coefficients) - 1, derivative - 1, -1):
        result = result * dt + coefficients[i] * falling_factorial(i, derivative)
    return result
