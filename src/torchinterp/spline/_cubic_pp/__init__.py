from ._cubic_pp import (
    BoundaryCondition,
    CubicPP,
    DerivativeKind,
    cubic_pp,
)
from ._cubic_pp_evaluate import cubic_pp_evaluate
from ._cubic_pp_evaluate_derivative import cubic_pp_evaluate_derivative
from ._cubic_pp_evaluate_second_derivative import (
    cubic_pp_evaluate_second_derivative,
)
from ._cubic_pp_fit import cubic_pp_fit
from ._cubic_pp_integral import cubic_pp_integral
from ._linear_cubic_pp_fit import linear_cubic_pp_fit
from ._parabolic_slope_estimate import parabolic_slope_estimate

__all__ = [
    "BoundaryCondition",
    "CubicPP",
    "DerivativeKind",
    "cubic_pp",
    "cubic_pp_evaluate",
    "cubic_pp_evaluate_derivative",
    "cubic_pp_evaluate_second_derivative",
    "cubic_pp_fit",
    "cubic_pp_integral",
    "linear_cubic_pp_fit",
    "parabolic_slope_estimate",
]
