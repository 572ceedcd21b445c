"""Knot slopes of a C2 cubic spline from a tridiagonal system."""

import torch
from torch import Tensor

from .._solve_tridiagonal import solve_tridiagonal
from ._boundary import boundary_row
from ._parabolic_slope_estimate import _parabolic


def tridiagonal_slope(
    dx: Tensor,
    S: Tensor,
    left_boundary: str,
    left_value: float,
    right_boundary: str,
    right_value: float,
) -> Tensor:
    """
    Solve for the first derivatives of a C2 cubic spline at every knot.

    Parameters
    ----------
    dx : Tensor
        Segment widths, shape (n-1,), n >= 3.
    S : Tensor
        Segment secants, shape (n-1,).
    left_boundary, right_boundary : str
        Normalized boundary condition names.
    left_value, right_value : float
        Boundary values.

    Returns
    -------
    b : Tensor
        Slopes at the knots, shape (n,).

    Notes
    -----
    Interior row i enforces continuity of the second derivative at knot i:

        dx[i]*b[i-1] + 2*(dx[i-1] + dx[i])*b[i] + dx[i-1]*b[i+1]
            = 3*(dx[i]*S[i-1] + dx[i-1]*S[i])

    The first and last rows are replaced by the boundary equations.

    With three knots and not-a-knot at both ends the two boundary rows
    coincide; the interpolant is then the parabola through the points.
    """
    n = dx.shape[0] + 1

    if n == 3 and left_boundary == right_boundary == "not_a_knot":
        return _parabola_slope(dx, S)

    diag = torch.zeros(n, dtype=S.dtype, device=S.device)
    upper = torch.zeros(n - 1, dtype=S.dtype, device=S.device)
    lower = torch.zeros(n - 1, dtype=S.dtype, device=S.device)
    rhs = torch.zeros(n, dtype=S.dtype, device=S.device)

    lower[:-1] = dx[1:]
    upper[1:] = dx[:-1]
    diag[1:-1] = 2 * (dx[:-1] + dx[1:])
    rhs[1:-1] = 3 * (dx[1:] * S[:-1] + dx[:-1] * S[1:])

    diag[0], upper[0], rhs[0] = boundary_row(
        left_boundary, left_value, dx[0], dx[1], S[0], S[1], right=False
    )
    diag[-1], lower[-1], rhs[-1] = boundary_row(
        right_boundary, right_value, dx[-1], dx[-2], S[-1], S[-2], right=True
    )

    return solve_tridiagonal(diag, upper, lower, rhs)


def _parabola_slope(dx: Tensor, S: Tensor) -> Tensor:
    span = dx[0] + dx[1]
    return torch.stack(
        [
            ((2 * dx[0] + dx[1]) * S[0] - dx[0] * S[1]) / span,
            _parabolic(dx[0], dx[1], S[0], S[1]),
            ((2 * dx[1] + dx[0]) * S[1] - dx[1] * S[0]) / span,
        ]
    )
