"""Shape-preserving piecewise-cubic interpolation for PyTorch tensors.

Convenience Functions
---------------------
cubic_pp
    Create a piecewise-cubic interpolator from data (fit + callable).

Construction
------------
cubic_pp_fit
    Fit a piecewise-cubic interpolant with a chosen slope construction
    (C2 spline with optional shape filter, or a local slope limiter).
linear_cubic_pp_fit
    Fit a piecewise-linear interpolant in the same representation.
parabolic_slope_estimate
    Three-point parabolic derivative estimate at the knots.

Evaluation
----------
cubic_pp_evaluate
    Evaluate the interpolant at query points.
cubic_pp_evaluate_derivative
    Evaluate its first derivative.
cubic_pp_evaluate_second_derivative
    Evaluate its second derivative.
cubic_pp_integral
    Compute a definite integral.

Data Types
----------
CubicPP
    Piecewise-cubic polynomial interpolant.
BoundaryCondition
    Names of the end conditions.
DerivativeKind
    Names of the slope constructions.

Exceptions
----------
SplineError
    Base exception for spline operations.
KnotError
    Invalid knot vector.
"""

# Import base exception first
from ._spline_error import SplineError

from ._cubic_pp import (
    BoundaryCondition,
    CubicPP,
    DerivativeKind,
    cubic_pp,
    cubic_pp_evaluate,
    cubic_pp_evaluate_derivative,
    cubic_pp_evaluate_second_derivative,
    cubic_pp_fit,
    cubic_pp_integral,
    linear_cubic_pp_fit,
    parabolic_slope_estimate,
)
from ._knot_error import KnotError
from ._solve_tridiagonal import solve_tridiagonal

__all__ = [
    "BoundaryCondition",
    "CubicPP",
    "DerivativeKind",
    "KnotError",
    "SplineError",
    "cubic_pp",
    "cubic_pp_evaluate",
    "cubic_pp_evaluate_derivative",
    "cubic_pp_evaluate_second_derivative",
    "cubic_pp_fit",
    "cubic_pp_integral",
    "linear_cubic_pp_fit",
    "parabolic_slope_estimate",
    "solve_tridiagonal",
]
