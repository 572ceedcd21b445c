"""Shape filters applied to solved knot slopes."""

from typing import Callable, Dict

import torch
from torch import Tensor

from ._parabolic_slope_estimate import _parabolic


def filter_slope(
    kind: str, y: Tensor, b: Tensor, dx: Tensor, S: Tensor
) -> None:
    """
    Constrain knot slopes in place according to a shape-preserving rule.

    Parameters
    ----------
    kind : str
        Normalized derivative kind, one of the keys of ``SLOPE_FILTERS``.
    y : Tensor
        Values at knots, shape (n,), n >= 3.
    b : Tensor
        Slopes at knots, shape (n,). Modified in place.
    dx : Tensor
        Segment widths, shape (n-1,).
    S : Tensor
        Segment secants, shape (n-1,).

    Notes
    -----
    - ``"c2"``: no filtering.
    - ``"c2_mp"``: slopes clamped to [0, 3*min secant] with the sign of the
      secants, zero where adjacent secants disagree in sign.
    - ``"c2_mp2"``: slopes clamped between ``minmod`` of the secants and
      the Huynh upper bound.
    - ``"c2_hyman89"``: Dougherty-Hyman (1989) limiter with the parabolic
      slope estimate and the extended bounds near inflections.
    - ``"c2_hyman_non_negative"``: Hyman bounds keeping the interpolant on
      the same side of zero as the data.
    """
    SLOPE_FILTERS[kind](y, b, dx, S)


def minmod(s: Tensor, t: Tensor) -> Tensor:
    """Zero where s and t disagree in sign, else the smaller magnitude."""
    return torch.where(
        s * t <= 0,
        torch.zeros_like(s),
        torch.sign(s) * torch.minimum(torch.abs(s), torch.abs(t)),
    )


def _filter_c2(y: Tensor, b: Tensor, dx: Tensor, S: Tensor) -> None:
    pass


def _clamp_to_secant(
    value: Tensor, bound: Tensor, positive: Tensor
) -> Tensor:
    # [0, bound] when positive, [bound, 0] otherwise
    zeros = torch.zeros_like(value)
    return torch.where(
        positive,
        torch.minimum(torch.maximum(zeros, value), bound),
        torch.maximum(torch.minimum(zeros, value), bound),
    )


def _filter_c2_mp(y: Tensor, b: Tensor, dx: Tensor, S: Tensor) -> None:
    slopes = b.clone()

    b[0] = _clamp_to_secant(slopes[0], 3 * S[0], S[0] > 0)
    b[-1] = _clamp_to_secant(slopes[-1], 3 * S[-1], S[-1] > 0)

    s_left = S[:-1]
    s_right = S[1:]
    interior = slopes[1:-1]
    both_positive = (s_left > 0) & (s_right > 0)
    bound = torch.where(
        both_positive,
        3 * torch.minimum(s_left, s_right),
        3 * torch.maximum(s_left, s_right),
    )
    b[1:-1] = torch.where(
        s_left * s_right <= 0,
        torch.zeros_like(interior),
        _clamp_to_secant(interior, bound, both_positive),
    )


def _filter_c2_mp2(y: Tensor, b: Tensor, dx: Tensor, S: Tensor) -> None:
    slopes = b.clone()

    b[0] = minmod(slopes[0], 3 * S[0])
    b[-1] = minmod(slopes[-1], 3 * S[-1])

    s_left = S[:-1]
    s_right = S[1:]
    abs_left = torch.abs(s_left)
    abs_right = torch.abs(s_right)
    lower_bound = minmod(s_left, s_right)
    upper_bound = (
        (torch.sign(s_left) + torch.sign(s_right))
        / 2
        * torch.minimum(
            torch.maximum(abs_left, abs_right),
            3 * torch.minimum(abs_left, abs_right),
        )
    )
    b[1:-1] = torch.minimum(
        torch.maximum(lower_bound, slopes[1:-1]), upper_bound
    )


def _hyman_end(slope: Tensor, secant: Tensor) -> Tensor:
    if slope * secant > 0:
        return torch.sign(slope) * torch.minimum(
            torch.abs(slope), torch.abs(3 * secant)
        )
    return torch.zeros_like(slope)


def _filter_c2_hyman89(y: Tensor, b: Tensor, dx: Tensor, S: Tensor) -> None:
    n = y.shape[0]
    slopes = b.clone()

    b[0] = _hyman_end(slopes[0], S[0])

    pm_interior = _parabolic(dx[:-1], dx[1:], S[:-1], S[1:])

    for i in range(1, n - 1):
        s_left = S[i - 1]
        s_right = S[i]
        pm = pm_interior[i - 1]
        M = 3 * torch.minimum(
            torch.minimum(torch.abs(s_left), torch.abs(s_right)),
            torch.abs(pm),
        )

        if i > 1:
            s_far = S[i - 2]
            if (s_left - s_far) * (s_right - s_left) > 0:
                pd = (
                    s_left * (2 * dx[i - 1] + dx[i - 2]) - s_far * dx[i - 1]
                ) / (dx[i - 2] + dx[i - 1])
                if pm * pd > 0 and pm * (s_left - s_far) > 0:
                    M = torch.maximum(
                        M, 3 * torch.minimum(torch.abs(pm), torch.abs(pd)) / 2
                    )

        if i < n - 2:
            s_far = S[i + 1]
            if (s_right - s_left) * (s_far - s_right) > 0:
                pu = (
                    s_right * (2 * dx[i] + dx[i + 1]) - s_far * dx[i]
                ) / (dx[i] + dx[i + 1])
                if pm * pu > 0 and -pm * (s_right - s_left) > 0:
                    M = torch.maximum(
                        M, 3 * torch.minimum(torch.abs(pm), torch.abs(pu)) / 2
                    )

        slope = slopes[i]
        if slope * pm > 0:
            b[i] = torch.sign(slope) * torch.minimum(torch.abs(slope), M)
        else:
            b[i] = 0

    b[-1] = _hyman_end(slopes[-1], S[-1])


def _filter_c2_hyman_non_negative(
    y: Tensor, b: Tensor, dx: Tensor, S: Tensor
) -> None:
    slopes = b.clone()
    tau = torch.sign(y)

    # Hyman (1983) eq. 3.3 contradicts its own constraint 3.1 at the ends;
    # the one-sided bounds here follow 3.1.
    b[0] = tau[0] * torch.maximum(
        -3 * tau[0] * y[0] / dx[0], tau[0] * slopes[0]
    )

    t = tau[1:-1]
    v = y[1:-1]
    b[1:-1] = t * torch.minimum(
        3 * t * v / dx[:-1],
        torch.maximum(-3 * t * v / dx[1:], t * slopes[1:-1]),
    )

    b[-1] = tau[-1] * torch.minimum(
        3 * tau[-1] * y[-1] / dx[-1], tau[-1] * slopes[-1]
    )


SlopeFilter = Callable[[Tensor, Tensor, Tensor, Tensor], None]

SLOPE_FILTERS: Dict[str, SlopeFilter] = {
    "c2": _filter_c2,
    "c2_mp": _filter_c2_mp,
    "c2_mp2": _filter_c2_mp2,
    "c2_hyman89": _filter_c2_hyman89,
    "c2_hyman_non_negative": _filter_c2_hyman_non_negative,
}
