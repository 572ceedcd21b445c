"""Piecewise-cubic polynomial interpolation."""

from typing import Callable, Literal

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._cubic_pp_evaluate import cubic_pp_evaluate
from ._cubic_pp_fit import cubic_pp_fit

BoundaryCondition = Literal[
    "not_a_knot",
    "first_derivative",
    "second_derivative",
    "first_difference",
]

DerivativeKind = Literal[
    "c2",
    "c2_mp",
    "c2_mp2",
    "c2_hyman89",
    "c2_hyman_non_negative",
    "bessel",
    "huyn_rational",
    "van_leer",
    "van_albada",
    "fritsch_butland",
    "brodlie",
]


@tensorclass
class CubicPP:
    """Piecewise-cubic polynomial in Hermite-derived power form.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n,). Strictly increasing.
    a : Tensor
        Values at the knots, shape (n,).
    b : Tensor
        First derivatives at the knots, shape (n,).
    c : Tensor
        Quadratic coefficients per segment, shape (n-1,), empty when n <= 1.
    d : Tensor
        Cubic coefficients per segment, shape (n-1,), empty when n <= 1.

    Notes
    -----
    On segment i, for knots[i] <= t < knots[i+1]:

        a[i] + h*(b[i] + h*(c[i] + h*d[i])),  h = t - knots[i]

    Outside [knots[0], knots[-1]] the interpolant continues linearly with
    slope b[0] (left) or b[-1] (right).

    Instances are produced by the fit functions, which allocate every
    field afresh and return the instance locked; assigning a field of a
    fitted instance raises RuntimeError.
    """

    knots: Tensor
    a: Tensor
    b: Tensor
    c: Tensor
    d: Tensor

    @property
    def n_knots(self) -> int:
        """Number of knots."""
        return self.knots.shape[0]


def cubic_pp(
    x: torch.Tensor,
    y: torch.Tensor,
    left_boundary: BoundaryCondition = "not_a_knot",
    left_value: float = 0.0,
    right_boundary: BoundaryCondition = "not_a_knot",
    right_value: float = 0.0,
    kind: DerivativeKind = "c2",
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a piecewise-cubic interpolator from data.

    This is a convenience function that fits the interpolant and returns
    a callable that evaluates it.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly increasing.
    y : Tensor
        Data y-values, same length as x.
    left_boundary, right_boundary : str, optional
        Boundary condition at each end. One of:

        - ``"not_a_knot"``: Third derivative continuity across the first
          (last) two segments (default).
        - ``"first_derivative"``: Slope equal to the boundary value.
        - ``"second_derivative"``: Curvature equal to the boundary value.
        - ``"first_difference"``: Slope equal to the end secant.

    left_value, right_value : float, optional
        Boundary values, ignored for ``"not_a_knot"`` and
        ``"first_difference"``.
    kind : str, optional
        Derivative construction, see :func:`cubic_pp_fit`.

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function that evaluates the interpolant at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10, dtype=torch.float64)
    >>> y = torch.exp(x)
    >>> f = cubic_pp(x, y, kind="c2_mp")
    >>> f(torch.tensor([0.5], dtype=torch.float64))
    """
    fitted = cubic_pp_fit(
        x,
        y,
        left_boundary=left_boundary,
        left_value=left_value,
        right_boundary=right_boundary,
        right_value=right_value,
        kind=kind,
    )
    return lambda t: cubic_pp_evaluate(fitted, t)
