from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._locate import locate_segment, query_points

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def cubic_pp_evaluate(
    spline: CubicPP,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a piecewise-cubic interpolant at query points.

    Parameters
    ----------
    spline : CubicPP
        Fitted interpolant from cubic_pp_fit or linear_cubic_pp_fit.
    t : float or Tensor
        Query points, any shape.

    Returns
    -------
    y : Tensor
        Interpolated values, same shape as ``t``.

    Raises
    ------
    SplineError
        If the interpolant has no knots.

    Notes
    -----
    At or beyond the end knots the interpolant is extended linearly:
    ``a[0] + b[0]*(t - knots[0])`` on the left and
    ``a[-1] + b[-1]*(t - knots[-1])`` on the right.
    """
    t = query_points(spline, t)
    query_shape = t.shape
    t_flat = t.reshape(-1)

    knots = spline.knots
    a = spline.a
    b = spline.b

    left = a[0] + b[0] * (t_flat - knots[0])
    right = a[-1] + b[-1] * (t_flat - knots[-1])

    if knots.shape[0] < 2:
        inside = right
    else:
        i, h = locate_segment(knots, t_flat)
        # Horner's method: a + h*(b + h*(c + h*d))
        inside = a[i] + h * (b[i] + h * (spline.c[i] + h * spline.d[i]))

    y = torch.where(
        t_flat <= knots[0],
        left,
        torch.where(t_flat >= knots[-1], right, inside),
    )

    return y.reshape(query_shape)
