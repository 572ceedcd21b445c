from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._spline_error import SplineError

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def query_points(spline: CubicPP, t: Union[float, Tensor]) -> Tensor:
    """Query points as a tensor matching the spline's dtype and device."""
    knots = spline.knots
    if knots.shape[0] == 0:
        raise SplineError("Cannot evaluate an interpolant without knots")
    return torch.as_tensor(t, dtype=knots.dtype, device=knots.device)


def locate_segment(knots: Tensor, t: Tensor) -> Tuple[Tensor, Tensor]:
    """
    Segment index and local offset of each query point.

    Returns ``(i, h)`` with ``knots[i] <= t < knots[i+1]`` and
    ``h = t - knots[i]``. Indices are clamped to the first and last
    segment, so points outside the knot range get the end segment.
    Requires at least two knots.
    """
    n_segments = knots.shape[0] - 1
    i = torch.searchsorted(knots, t.detach(), right=True) - 1
    i = torch.clamp(i, 0, n_segments - 1)
    return i, t - knots[i]
