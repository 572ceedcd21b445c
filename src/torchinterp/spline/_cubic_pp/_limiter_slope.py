"""Knot slopes from local slope limiters."""

from typing import Callable, Dict

import torch
from torch import Tensor

from ._boundary import boundary_row
from ._parabolic_slope_estimate import _parabolic


def limiter_slope(
    kind: str,
    dx: Tensor,
    S: Tensor,
    left_boundary: str,
    left_value: float,
    right_boundary: str,
    right_value: float,
) -> Tensor:
    """
    Estimate knot slopes directly from the two adjacent secants.

    Parameters
    ----------
    kind : str
        Normalized derivative kind, one of the keys of ``LIMITERS``.
    dx : Tensor
        Segment widths, shape (n-1,), n >= 3.
    S : Tensor
        Segment secants, shape (n-1,).
    left_boundary, right_boundary : str
        Normalized boundary condition names.
    left_value, right_value : float
        Boundary values.

    Returns
    -------
    b : Tensor
        Slopes at the knots, shape (n,).

    Notes
    -----
    Interior slopes are ``limiter(S[i-1], S[i])``. The end slopes solve the
    boundary equation of the tridiagonal construction with the slope at
    the neighbouring knot taken as known, so no linear system is formed.
    """
    n = dx.shape[0] + 1
    b = torch.zeros(n, dtype=S.dtype, device=S.device)

    b[1:-1] = LIMITERS[kind](S[:-1], S[1:], dx[:-1], dx[1:])

    diagonal, off_diagonal, rhs = boundary_row(
        left_boundary, left_value, dx[0], dx[1], S[0], S[1], right=False
    )
    b[0] = (rhs - off_diagonal * b[1]) / diagonal

    diagonal, off_diagonal, rhs = boundary_row(
        right_boundary, right_value, dx[-1], dx[-2], S[-1], S[-2], right=True
    )
    b[-1] = (rhs - off_diagonal * b[-2]) / diagonal

    return b


def _opposite_or_flat(s: Tensor, t: Tensor) -> Tensor:
    return s * t <= 0


def _bessel(s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor) -> Tensor:
    return _parabolic(dx_s, dx_t, s, t)


def _huyn_rational(s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor) -> Tensor:
    st = s * t
    return torch.where(
        _opposite_or_flat(s, t),
        torch.zeros_like(st),
        st * 3 * (s + t) / (s**2 + 4 * st + t**2),
    )


def _van_leer(s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor) -> Tensor:
    st = s * t
    return torch.where(
        _opposite_or_flat(s, t),
        torch.zeros_like(st),
        2 * st / (s + t),
    )


def _van_albada(s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor) -> Tensor:
    # No sign gate: opposite secants give a value of the smaller one's sign
    denom = s**2 + t**2
    return torch.where(
        denom == 0,
        torch.zeros_like(denom),
        s * t * (s + t) / denom,
    )


def _fritsch_butland(
    s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor
) -> Tensor:
    st = s * t
    return torch.where(
        _opposite_or_flat(s, t),
        torch.zeros_like(st),
        torch.where(
            torch.abs(s) <= torch.abs(t),
            3 * st / (2 * s + t),
            3 * st / (s + 2 * t),
        ),
    )


def _brodlie(s: Tensor, t: Tensor, dx_s: Tensor, dx_t: Tensor) -> Tensor:
    st = s * t
    alpha = dx_s + 2 * dx_t / (3 * (dx_s + dx_t))
    return torch.where(
        st == 0,
        torch.zeros_like(st),
        st / (alpha * t + (1 - alpha) * s),
    )


Limiter = Callable[[Tensor, Tensor, Tensor, Tensor], Tensor]

LIMITERS: Dict[str, Limiter] = {
    "bessel": _bessel,
    "huyn_rational": _huyn_rational,
    "van_leer": _van_leer,
    "van_albada": _van_albada,
    "fritsch_butland": _fritsch_butland,
    "brodlie": _brodlie,
}
