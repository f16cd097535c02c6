"""Weighted distribution of a size surplus or deficit over tracks."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def distribute(
    natural_sizes: Sequence[int] | NDArray[np.int64],
    weights: Sequence[int] | NDArray[np.int64],
    weight_sum: int,
    desired_total: int,
    clamp: bool = False,
) -> NDArray[np.int64]:
    """Stretch or shrink track sizes to fill a desired total.

    The difference between the desired total and the sum of the natural
    sizes is split into a per-weight unit, and every track grows by its
    weight times that unit, truncated toward zero. Because of truncation the
    result may fall a few pixels short of the desired total.

    Args:
        natural_sizes: Resolved natural size per track
        weights: Weight per track
        weight_sum: Sum of the weights; 0 leaves every track at its natural size
        desired_total: Total size to fill
        clamp: Floor shrunk tracks at 0 instead of letting them go negative

    Returns:
        New array of final sizes
    """
    natural = np.array(natural_sizes, dtype=np.int64)
    if weight_sum == 0:
        return natural

    unit = float(desired_total - natural.sum()) / float(weight_sum)
    growth = np.trunc(unit * np.asarray(weights, dtype=np.float64)).astype(np.int64)
    final = natural + growth
    if clamp:
        np.maximum(final, 0, out=final)
    return final
