from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._locate import locate_segment, query_points

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def cubic_pp_integral(
    spline: CubicPP,
    lower: Union[float, Tensor],
    upper: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a piecewise-cubic interpolant.

    Parameters
    ----------
    spline : CubicPP
        Fitted interpolant.
    lower : float or Tensor
        Lower bound of integration (scalar).
    upper : float or Tensor
        Upper bound of integration (scalar).

    Returns
    -------
    integral : Tensor
        Definite integral, a 0-d tensor. Negative when ``lower > upper``.

    Notes
    -----
    On segment [x_i, x_{i+1}] the antiderivative of
    a + b*h + c*h^2 + d*h^3 is

        F(h) = a*h + (b/2)*h^2 + (c/3)*h^3 + (d/4)*h^4

    Parts of [lower, upper] outside the knot range integrate the linear
    extension, consistent with cubic_pp_evaluate.
    """
    lower = query_points(spline, lower)
    upper = query_points(spline, upper)

    sign = 1.0
    if lower > upper:
        lower, upper = upper, lower
        sign = -1.0

    knots = spline.knots
    a = spline.a
    b = spline.b
    t_min = knots[0]
    t_max = knots[-1]

    total = torch.zeros((), dtype=knots.dtype, device=knots.device)

    if lower == upper:
        return total

    def linear_part(lo: Tensor, hi: Tensor, k: int) -> Tensor:
        # Integral of a[k] + b[k]*(t - knots[k]) over [lo, hi]
        h_lo = lo - knots[k]
        h_hi = hi - knots[k]
        return a[k] * (hi - lo) + b[k] / 2 * (h_hi**2 - h_lo**2)

    # Left extension
    if lower < t_min:
        total = total + linear_part(lower, torch.minimum(upper, t_min), 0)

    # Right extension
    if upper > t_max:
        total = total + linear_part(torch.maximum(lower, t_max), upper, -1)

    if knots.shape[0] < 2:
        return sign * total

    lo = torch.clamp(lower, t_min, t_max)
    hi = torch.clamp(upper, t_min, t_max)
    if lo == hi:
        return sign * total

    def antiderivative(h: Tensor, k: int) -> Tensor:
        return h * (
            a[k]
            + h * (b[k] / 2 + h * (spline.c[k] / 3 + h * (spline.d[k] / 4)))
        )

    seg_lo, _ = locate_segment(knots, lo.reshape(1))
    seg_hi, _ = locate_segment(knots, hi.reshape(1))

    for k in range(seg_lo.item(), seg_hi.item() + 1):
        seg_start = knots[k]
        seg_end = knots[k + 1]
        h_lo = torch.maximum(lo, seg_start) - seg_start
        h_hi = torch.minimum(hi, seg_end) - seg_start
        total = total + antiderivative(h_hi, k) - antiderivative(h_lo, k)

    return sign * total
