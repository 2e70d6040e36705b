from typing import NamedTuple, Tuple, Union

import numpy as np

from .colors import Color

ArrayOrFloat = Union[np.ndarray, float]


class BoundingBox(NamedTuple):
    """Drawing area in pixels. ``y`` grows downwards."""

    x: float
    y: float
    w: float
    h: float

    def validate(self) -> None:
        """Raise ``ValueError`` unless the box has a positive area."""
        if not (self.w > 0 and self.h > 0):
            raise ValueError(
                f"Bounding box must have positive width and height, got {self.w}x{self.h}"
            )


class CoordinateMapper:
    """
    Handles coordinate transformations from signal space to pixel space.

    The line types do not share a vertical convention: envelopes are drawn with
    positive amplitudes upwards, dense signals and constants are not inverted.
    Each line type goes through its own method.
    """

    # Brightness falloff of the fainter envelope layers
    COLOR_SCALE_EXPONENT = 1.0 / 5.0

    def __init__(self, bounds: BoundingBox):
        """
        Initialise the coordinate mapper.

        Parameters
        ----------
        bounds : BoundingBox
            Drawing area for the current render pass.
        """
        self.bounds = bounds

    def midline_y(self) -> float:
        """Vertical centre of the drawing area."""
        return self.bounds.y + self.bounds.h / 2.0

    def amplitude_to_y(self, v: ArrayOrFloat, scale: float = 1.0) -> ArrayOrFloat:
        """Map envelope amplitudes to pixel y, +1 at the top edge."""
        b = self.bounds
        return b.y - scale * np.clip(v, -1.0, 1.0) * b.h / 2.0 + b.h / 2.0

    def signal_to_y(self, v: ArrayOrFloat) -> ArrayOrFloat:
        """Map dense signal values to pixel y, +1 at the bottom edge."""
        b = self.bounds
        return b.y + np.clip(v, -1.0, 1.0) * b.h / 2.0 + b.h / 2.0

    def constant_to_y(self, constant: float) -> Tuple[float, float]:
        """
        Pixel y of both mirrored lines of a constant.

        Parameters
        ----------
        constant : float
            Threshold level. Not clamped.

        Returns
        -------
        Tuple[float, float]
            ``(base_y + offset, base_y - offset)``.
        """
        offset = constant * self.bounds.h / 2.0
        base_y = self.midline_y()
        return base_y + offset, base_y - offset

    def bucket_to_x(self, i: Union[np.ndarray, int]) -> ArrayOrFloat:
        """One bucket per pixel column, starting at the left edge."""
        return self.bounds.x + i

    @classmethod
    def scale_color(cls, color: Color, scale: float) -> Color:
        """
        Dim a color for a layered envelope draw.

        Each RGB channel becomes ``round(255 * c * scale ** (1/5))``.

        Parameters
        ----------
        color : Color
            Base line color.
        scale : float
            Layer scale, 1.0 for the outer layer.

        Returns
        -------
        Color
            Opaque dimmed color.
        """
        factor = scale**cls.COLOR_SCALE_EXPONENT

        def channel(c: float) -> int:
            return min(255, max(0, int(round(255.0 * c * factor))))

        return Color.rgb(channel(color.r), channel(color.g), channel(color.b))
