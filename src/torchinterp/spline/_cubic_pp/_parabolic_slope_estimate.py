import torch
from torch import Tensor


def parabolic_slope_estimate(x: Tensor, y: Tensor) -> Tensor:
    """
    Three-point parabolic estimate of the derivative at each knot.

    At an interior knot i this is the slope at x[i] of the parabola through
    (x[i-1], y[i-1]), (x[i], y[i]) and (x[i+1], y[i+1]):

        (dx[i-1]*S[i] + dx[i]*S[i-1]) / (dx[i-1] + dx[i])

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n,).

    Returns
    -------
    b : Tensor
        Estimated derivatives, shape (n,). The two end entries are zero.
    """
    n = x.shape[0]
    b = torch.zeros(n, dtype=y.dtype, device=y.device)
    if n < 3:
        return b

    dx = x[1:] - x[:-1]
    S = (y[1:] - y[:-1]) / dx
    b[1:-1] = _parabolic(dx[:-1], dx[1:], S[:-1], S[1:])
    return b


def _parabolic(
    dx_left: Tensor, dx_right: Tensor, s_left: Tensor, s_right: Tensor
) -> Tensor:
    return (dx_left * s_right + dx_right * s_left) / (dx_left + dx_right)
