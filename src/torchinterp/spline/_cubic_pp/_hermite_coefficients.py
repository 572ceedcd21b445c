from typing import Tuple

from torch import Tensor


def hermite_coefficients(
    b: Tensor, dx: Tensor, S: Tensor
) -> Tuple[Tensor, Tensor]:
    """
    Quadratic and cubic coefficients of the cubic Hermite segments.

    Parameters
    ----------
    b : Tensor
        Slopes at the knots, shape (n,).
    dx : Tensor
        Segment widths, shape (n-1,).
    S : Tensor
        Segment secants, shape (n-1,).

    Returns
    -------
    c, d : Tensor
        Coefficients of h^2 and h^3 on each segment, shape (n-1,).

    Notes
    -----
    The segment matching value and slope at both of its ends:
        c = (3*S - 2*b[i] - b[i+1]) / dx
        d = (b[i] + b[i+1] - 2*S) / dx^2
    """
    c = (3 * S - b[1:] - 2 * b[:-1]) / dx
    d = (b[1:] + b[:-1] - 2 * S) / dx**2
    return c, d
