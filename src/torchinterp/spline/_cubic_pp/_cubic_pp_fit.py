from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ._boundary import check_boundary
from ._filter_slope import SLOPE_FILTERS, filter_slope
from ._hermite_coefficients import hermite_coefficients
from ._limiter_slope import LIMITERS, limiter_slope
from ._linear_cubic_pp_fit import linear_cubic_pp_fit
from ._tridiagonal_slope import tridiagonal_slope
from ._validate import as_float_tensors

if TYPE_CHECKING:
    from ._cubic_pp import BoundaryCondition, CubicPP, DerivativeKind


def cubic_pp_fit(
    x: Tensor,
    y: Tensor,
    left_boundary: BoundaryCondition = "not_a_knot",
    left_value: float = 0.0,
    right_boundary: BoundaryCondition = "not_a_knot",
    right_value: float = 0.0,
    kind: DerivativeKind = "c2",
    validate_knots: bool = False,
) -> CubicPP:
    """
    Fit a piecewise-cubic interpolant to data points.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n,).
    left_boundary, right_boundary : str
        Boundary condition at each end: "not_a_knot", "first_derivative",
        "second_derivative" or "first_difference".
    left_value, right_value : float
        First or second derivative at the end, for "first_derivative" and
        "second_derivative". Ignored otherwise.
    kind : str
        How the slopes at the knots are constructed.

        Global, from a tridiagonal C2 system followed by a shape filter:

        - ``"c2"``: plain C2 cubic spline, no filter.
        - ``"c2_mp"``: monotonicity-preserving clamp.
        - ``"c2_mp2"``: ``minmod``-bounded clamp.
        - ``"c2_hyman89"``: Dougherty-Hyman limiter.
        - ``"c2_hyman_non_negative"``: sign-preserving Hyman bounds.

        Local, each slope from its two adjacent secants:

        - ``"bessel"``: parabolic (Bessel) estimate.
        - ``"huyn_rational"``: Huynh's rational limiter.
        - ``"van_leer"``: harmonic mean.
        - ``"van_albada"``: van Albada limiter.
        - ``"fritsch_butland"``: Fritsch-Butland (1980) mean.
        - ``"brodlie"``: Fritsch-Butland (1984) weighted mean.

    validate_knots : bool
        If True, raise KnotError for mismatched lengths or knots that are
        not strictly increasing. Off by default.

    Returns
    -------
    CubicPP
        Fitted interpolant. With fewer than three points it is the
        piecewise-linear interpolant of :func:`linear_cubic_pp_fit`.

    Raises
    ------
    ValueError
        If ``kind`` or a boundary condition is not recognized.
    KnotError
        If ``validate_knots`` is set and the knots are invalid.
    """
    kind_lower = kind.lower()
    if kind_lower not in SLOPE_FILTERS and kind_lower not in LIMITERS:
        available = list(SLOPE_FILTERS) + list(LIMITERS)
        raise ValueError(
            f"Unknown derivative kind '{kind}'. "
            f"Available kinds: {available}."
        )
    left_boundary = check_boundary(left_boundary)
    right_boundary = check_boundary(right_boundary)

    x, y = as_float_tensors(x, y, validate_knots)
    n = y.shape[0]

    if n <= 2:
        return linear_cubic_pp_fit(x, y)

    dx = x[1:] - x[:-1]
    S = (y[1:] - y[:-1]) / dx

    if kind_lower in SLOPE_FILTERS:
        b = tridiagonal_slope(
            dx, S, left_boundary, left_value, right_boundary, right_value
        )
        filter_slope(kind_lower, y, b, dx, S)
    else:
        b = limiter_slope(
            kind_lower,
            dx,
            S,
            left_boundary,
            left_value,
            right_boundary,
            right_value,
        )

    c, d = hermite_coefficients(b, dx, S)

    # Lazy import to avoid circular dependency
    from ._cubic_pp import CubicPP

    spline = CubicPP(
        knots=x.clone(),
        a=y.clone(),
        b=b,
        c=c,
        d=d,
        batch_size=[],
    )
    spline.lock_()
    return spline
