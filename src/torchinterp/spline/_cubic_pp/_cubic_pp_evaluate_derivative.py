from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._locate import locate_segment, query_points

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def cubic_pp_evaluate_derivative(
    spline: CubicPP,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate the first derivative of a piecewise-cubic interpolant.

    Parameters
    ----------
    spline : CubicPP
        Fitted interpolant.
    t : float or Tensor
        Query points, any shape.

    Returns
    -------
    dydt : Tensor
        First derivative, same shape as ``t``. Constant ``b[0]`` at or
        left of the first knot and ``b[-1]`` at or right of the last.
    """
    t = query_points(spline, t)
    query_shape = t.shape
    t_flat = t.reshape(-1)

    knots = spline.knots
    b = spline.b

    left = b[0].expand_as(t_flat)
    right = b[-1].expand_as(t_flat)

    if knots.shape[0] < 2:
        inside = right
    else:
        i, h = locate_segment(knots, t_flat)
        inside = b[i] + h * (2 * spline.c[i] + h * (3 * spline.d[i]))

    dydt = torch.where(
        t_flat <= knots[0],
        left,
        torch.where(t_flat >= knots[-1], right, inside),
    )

    return dydt.reshape(query_shape)
