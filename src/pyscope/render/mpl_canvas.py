from typing import Optional

from loguru import logger
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.patches import Rectangle

from pyscope.scopeview.colors import Color
from pyscope.scopeview.primitives import Paint, Path

POINTS_PER_INCH = 72.0


class MatplotlibCanvas:
    """
    Canvas drawing pixel-space paths onto a matplotlib ``Axes``.

    The axes are set up so that one data unit is one figure pixel, with the
    origin in the top-left corner and y growing downwards.
    """

    def __init__(self, ax: Axes, width: int, height: int):
        """
        Initialise the canvas.

        Parameters
        ----------
        ax : Axes
            Axes spanning the whole figure.
        width, height : int
            Figure size in pixels.
        """
        self.ax = ax
        self.width = width
        self.height = height
        self._zorder = 0
        self.setup_axes()

    def setup_axes(self) -> None:
        """Pixel coordinates, no ticks, no frame."""
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_axis_off()
        self.ax.set_aspect("auto")

    def clear(self) -> None:
        """Remove everything drawn so far."""
        self.ax.cla()
        self._zorder = 0
        self.setup_axes()

    def _next_zorder(self) -> int:
        # Later requests paint over earlier ones
        self._zorder += 1
        return self._zorder

    def _px_to_points(self, width_px: float) -> float:
        dpi: Optional[float] = getattr(self.ax.figure, "dpi", None)
        if not dpi:
            return width_px
        return width_px * POINTS_PER_INCH / dpi

    def clear_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        rect = Rectangle(
            (x, y),
            w,
            h,
            facecolor=tuple(color),
            edgecolor="none",
            zorder=self._next_zorder(),
        )
        self.ax.add_patch(rect)

    def stroke_path(self, path: Path, paint: Paint) -> None:
        if len(path) == 0:
            logger.debug("Skipping empty path")
            return

        collection = LineCollection(
            path.subpaths,
            colors=[tuple(paint.color)],
            linewidths=self._px_to_points(paint.line_width),
            zorder=self._next_zorder(),
        )
        self.ax.add_collection(collection)
