from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from skillmap.config import ARROW_LENGTH, ARROW_SPREAD_DEG, ARROW_TIP_OFFSET

if TYPE_CHECKING:
    import numpy.typing as npt


def first_hit(
    centers: npt.NDArray[np.float64],
    radii: npt.NDArray[np.float64],
    point: tuple[float, float],
) -> Optional[int]:
    """
    Index of the first circle containing the point.

    Args:
        centers: (N, 2) array of circle centres.
        radii: (N,) array of radii.
        point: (x, y) query point.

    Returns:
        The lowest index whose circle contains the point (boundary included),
        or None.
    """
    centers = np.asarray(centers, dtype=np.float64).reshape(-1, 2)
    if centers.shape[0] == 0:
        return None
    d2 = np.sum((centers - np.asarray(point, dtype=np.float64)) ** 2, axis=1)
    hits = np.flatnonzero(d2 <= np.asarray(radii, dtype=np.float64) ** 2)
    if hits.size == 0:
        return None
    return int(hits[0])


def arrowhead(
    start: Sequence[float],
    end: Sequence[float],
    end_radius: float,
    *,
    tip_offset: float = ARROW_TIP_OFFSET,
    length: float = ARROW_LENGTH,
    spread_deg: float = ARROW_SPREAD_DEG,
) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
    """
    Arrowhead for a line from ``start`` to ``end``.

    The tip sits on the line, ``tip_offset + end_radius`` before ``end``.
    The two barbs of the given length leave the tip at +/- ``spread_deg``
    from the reversed line direction.

    Returns:
        (tip, left barb end, right barb end)
    """
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    back = tip_offset + end_radius
    tip_x = end[0] - back * math.cos(angle)
    tip_y = end[1] - back * math.sin(angle)

    spread = math.radians(spread_deg)
    left = (
        tip_x - length * math.cos(angle - spread),
        tip_y - length * math.sin(angle - spread),
    )
    right = (
        tip_x - length * math.cos(angle + spread),
        tip_y - length * math.sin(angle + spread),
    )
    return (tip_x, tip_y), left, right
