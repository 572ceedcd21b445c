from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._locate import locate_segment, query_points

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def cubic_pp_evaluate_second_derivative(
    spline: CubicPP,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate the second derivative of a piecewise-cubic interpolant.

    Parameters
    ----------
    spline : CubicPP
        Fitted interpolant.
    t : float or Tensor
        Query points, any shape.

    Returns
    -------
    d2ydt2 : Tensor
        Second derivative ``2*c[i] + 6*d[i]*h`` inside the knot range,
        same shape as ``t``.

    Notes
    -----
    At or beyond the end knots this returns the end *slope* ``b[0]`` or
    ``b[-1]``, the same values as cubic_pp_evaluate_derivative, not the
    zero curvature of the linear extension. Callers relying on the
    outside value should use the boundary slope directly.
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
        inside = 2 * spline.c[i] + h * (6 * spline.d[i])

    d2ydt2 = torch.where(
        t_flat <= knots[0],
        left,
        torch.where(t_flat >= knots[-1], right, inside),
    )

    return d2ydt2.reshape(query_shape)
