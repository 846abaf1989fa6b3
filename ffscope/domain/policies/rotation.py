# ffscope/domain/policies/rotation.py
from __future__ import annotations

import math
from typing import Optional

from ffscope.domain.entities.media import FrameSize


def swaps_axes(rotation: Optional[float]) -> bool:
    """
    True when a display rotation turns the stored frame on its side,
    i.e. for odd multiples of 90 degrees (90, -90, 270, ...).

    Angles that are not multiples of 90 leave the axes alone.
    """
    if rotation is None or not math.isfinite(rotation):
        return False
    return math.isclose(rotation % 180.0, 90.0, abs_tol=0.01)


def apply_rotation(size: FrameSize, rotation: Optional[float]) -> FrameSize:
    """Displayed size for a stored frame `size` under `rotation` degrees."""
    return size.swapped() if swaps_axes(rotation) else size
