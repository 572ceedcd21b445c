"""End conditions shared by the slope constructions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._cubic_pp import BoundaryCondition

BOUNDARY_CONDITIONS = (
    "not_a_knot",
    "first_derivative",
    "second_derivative",
    "first_difference",
)


def check_boundary(boundary: BoundaryCondition) -> str:
    """Normalize a boundary name, raising ValueError if it is unknown."""
    boundary_lower = boundary.lower()
    if boundary_lower not in BOUNDARY_CONDITIONS:
        raise ValueError(
            f"Unknown boundary condition '{boundary}'. "
            f"Available boundary conditions: {list(BOUNDARY_CONDITIONS)}."
        )
    return boundary_lower


def boundary_row(
    boundary: str,
    value: float,
    dx_near: Tensor,
    dx_far: Tensor,
    s_near: Tensor,
    s_far: Tensor,
    right: bool,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Coefficients of the slope equation at one end of the knot range.

    The equation reads ``diagonal * b_end + off_diagonal * b_next = rhs``,
    where ``b_next`` is the slope at the knot adjacent to the end.

    Parameters
    ----------
    boundary : str
        Normalized boundary condition name.
    value : float
        Boundary value (first or second derivative).
    dx_near, dx_far : Tensor
        Widths of the end segment and of the segment next to it.
    s_near, s_far : Tensor
        Secants of the end segment and of the segment next to it.
    right : bool
        True at the right end, where the end segment is traversed in the
        opposite direction.

    Returns
    -------
    diagonal, off_diagonal, rhs : Tensor

    Notes
    -----
    The right ``second_derivative`` row is the mirror of the left one:

        2*b[n-1] + b[n-2] = 3*S[-1] + value*dx[-1]/2

    so the curvature at the last knot equals ``value``. This differs from
    the unmirrored row ``3*S[-1] - value*dx[-1]/2`` sometimes used for the
    C2 system, under which the last-knot curvature comes out as
    ``-value``. The tridiagonal and limiter constructions share this row.
    """
    if boundary == "not_a_knot":
        # Third derivative continuous across the end knot's neighbour,
        # with the adjacent interior row already eliminated
        span = dx_near + dx_far
        diagonal = dx_far * span
        off_diagonal = span * span
        rhs = (
            s_near * dx_far * (2.0 * dx_far + 3.0 * dx_near)
            + s_far * dx_near**2
        )
    elif boundary == "first_derivative":
        diagonal = s_near.new_tensor(1.0)
        off_diagonal = s_near.new_tensor(0.0)
        rhs = torch.as_tensor(value, dtype=s_near.dtype, device=s_near.device)
    elif boundary == "first_difference":
        diagonal = s_near.new_tensor(1.0)
        off_diagonal = s_near.new_tensor(0.0)
        rhs = s_near
    else:  # second_derivative
        orientation = -1.0 if right else 1.0
        diagonal = s_near.new_tensor(2.0)
        off_diagonal = s_near.new_tensor(1.0)
        rhs = 3.0 * s_near - orientation * value * dx_near / 2.0

    return diagonal, off_diagonal, rhs
