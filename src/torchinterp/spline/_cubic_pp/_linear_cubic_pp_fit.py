"""Piecewise-linear interpolant in piecewise-cubic form."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ._validate import as_float_tensors

if TYPE_CHECKING:
    from ._cubic_pp import CubicPP


def linear_cubic_pp_fit(
    x: Tensor,
    y: Tensor,
    validate_knots: bool = False,
) -> CubicPP:
    """
    Fit a piecewise-linear interpolant stored as a CubicPP.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n,).
    validate_knots : bool
        If True, raise KnotError for mismatched lengths or knots that are
        not strictly increasing. Off by default; invalid knots then give
        non-finite coefficients instead of an error.

    Returns
    -------
    CubicPP
        Interpolant with ``c = d = 0``.

    Warns
    -----
    RuntimeWarning
        With two knots closer than machine epsilon, the slope is set to 0.

    Notes
    -----
    - n = 0 or 1: the constant ``y``, zero slope.
    - n = 2: the chord through both points; ``b[0] = b[1]``.
    - n > 2: ``b[i]`` is the secant of segment i; the last knot keeps a
      zero slope, so the interpolant is flat to the right of it.
    """
    x, y = as_float_tensors(x, y, validate_knots)
    n = y.shape[0]

    b = torch.zeros(n, dtype=y.dtype, device=y.device)

    if n == 2:
        width = x[1] - x[0]
        if torch.abs(width) > torch.finfo(y.dtype).eps:
            b[0] = (y[1] - y[0]) / width
        else:
            warnings.warn(
                "Coincident knots in two-point interpolant; "
                "using zero slope.",
                RuntimeWarning,
                stacklevel=2,
            )
        b[1] = b[0]
    elif n > 2:
        S = (y[1:] - y[:-1]) / (x[1:] - x[:-1])
        b[:-1] = S

    n_seg = max(n - 1, 0)

    from ._cubic_pp import CubicPP

    spline = CubicPP(
        knots=x.clone(),
        a=y.clone(),
        b=b,
        c=torch.zeros(n_seg, dtype=y.dtype, device=y.device),
        d=torch.zeros(n_seg, dtype=y.dtype, device=y.device),
        batch_size=[],
    )
    spline.lock_()
    return spline
