from typing import Tuple

import torch
from torch import Tensor

from .._knot_error import KnotError


def as_float_tensors(
    x: Tensor, y: Tensor, validate_knots: bool = False
) -> Tuple[Tensor, Tensor]:
    """
    Convert knots and values to 1-D tensors of a common floating dtype.

    Raises
    ------
    KnotError
        If ``validate_knots`` is set and the lengths differ or the knots
        are not strictly increasing.
    """
    x = torch.as_tensor(x)
    y = torch.as_tensor(y, device=x.device)

    dtype = torch.promote_types(x.dtype, y.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()
    x = x.to(dtype).reshape(-1)
    y = y.to(dtype).reshape(-1)

    if validate_knots:
        if x.shape[0] != y.shape[0]:
            raise KnotError(
                f"x and y must have the same length, got {x.shape[0]} "
                f"and {y.shape[0]}"
            )
        if not torch.all(x[1:] > x[:-1]):
            raise KnotError("Knots must be strictly increasing")

    return x, y
