from typing import Tuple

import numpy as np

from .coordinate_mapper import BoundingBox
from .primitives import Path


def grid_positions(
    bounds: BoundingBox, x_divisions: int, y_divisions: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evenly spaced grid line positions, both edges included.

    Parameters
    ----------
    bounds : BoundingBox
        Drawing area.
    x_divisions, y_divisions : int
        Number of divisions along each axis.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``x_divisions + 1`` x positions of the vertical lines and
        ``y_divisions + 1`` y positions of the horizontal lines.
    """
    xs = bounds.x + (np.arange(x_divisions + 1) / x_divisions) * bounds.w
    ys = bounds.y + (np.arange(y_divisions + 1) / y_divisions) * bounds.h
    return xs, ys


def grid_path(bounds: BoundingBox, x_divisions: int, y_divisions: int) -> Path:
    """All grid lines as one path: vertical lines first, then horizontal."""
    xs, ys = grid_positions(bounds, x_divisions, y_divisions)
    path = Path()

    for x_pos in xs:
        path.move_to(x_pos, bounds.y)
        path.line_to(x_pos, bounds.y + bounds.h)
    for y_pos in ys:
        path.move_to(bounds.x, y_pos)
        path.line_to(bounds.x + bounds.w, y_pos)

    return path
