from typing import Optional

import matplotlib as mpl
import matplotlib.pyplot as plt
from loguru import logger

from pyscope.scopeview.coordinate_mapper import BoundingBox
from pyscope.scopeview.view import ParamUpdateEvent, ScopeConfig, ScopeData, ScopeView

from .mpl_canvas import MatplotlibCanvas


class ScopePlot:
    """
    Hosts a ``ScopeView`` in a matplotlib figure.

    Plays the part of the widget framework: it lays out the drawing area, fires
    the recalculation trigger and redraws the whole scope on request.
    """

    DEFAULT_WIDTH = 800
    DEFAULT_HEIGHT = 400
    DEFAULT_DPI = 100
    # Room for the border, which is drawn centred on the edge of the scope
    DEFAULT_MARGIN = 4

    def __init__(
        self,
        scope_data: ScopeData,
        config: Optional[ScopeConfig] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        dpi: int = DEFAULT_DPI,
        margin: int = DEFAULT_MARGIN,
    ):
        """
        Initialise the plot.

        Parameters
        ----------
        scope_data : ScopeData
            Object holding the data to show and defining the lines.
        config : Optional[ScopeConfig], default=None
            Grid configuration. Defaults to 10x10 divisions.
        width, height : int, default=800, 400
            Figure size in pixels.
        dpi : int, default=100
            Figure resolution.
        margin : int, default=4
            Pixels between the figure edge and the scope area.

        Raises
        ------
        ValueError
            If the margin leaves no room for the scope.
        """
        if width - 2 * margin <= 0 or height - 2 * margin <= 0:
            raise ValueError(
                f"Figure of {width}x{height} px has no room for a scope with margin {margin}"
            )

        self.view = ScopeView(scope_data, config)
        self.width = width
        self.height = height
        self.dpi = dpi
        self.bounds = BoundingBox(
            float(margin),
            float(margin),
            float(width - 2 * margin),
            float(height - 2 * margin),
        )

        self.fig: Optional[mpl.figure.Figure] = None
        self.ax: Optional[mpl.axes.Axes] = None
        self.canvas: Optional[MatplotlibCanvas] = None

    def render(self) -> None:
        """Create the figure and draw the scope into it."""
        if self.fig is not None:
            logger.warning("Plot already rendered. Call `refresh()` to redraw.")
            return

        logger.info("Rendering scope...")
        self.fig = plt.figure(
            figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi
        )
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self.canvas = MatplotlibCanvas(self.ax, self.width, self.height)

        self.view.draw(self.canvas, self.bounds)
        self.fig.canvas.draw_idle()
        logger.info("Scope rendering complete.")

    def refresh(self) -> None:
        """Redraw the scope from the current sample buffers."""
        if self.canvas is None:
            logger.warning("Plot not rendered yet. Cannot refresh.")
            return

        self.canvas.clear()
        self.view.draw(self.canvas, self.bounds)
        self.fig.canvas.draw_idle()

    def param_update(self) -> None:
        """Recalculate the scope data, then redraw if the plot is on screen."""
        logger.info("Parameter update received")
        self.view.event(ParamUpdateEvent.PARAM_UPDATE)
        if self.canvas is not None:
            self.refresh()

    def save(self, filepath: str) -> None:
        """
        Save the current plot to a file.

        Parameters
        ----------
        filepath : str
            Path to save the plot image.
        """
        if self.fig is None:
            raise RuntimeError("Plot has not been rendered yet.")
        self.fig.savefig(filepath, dpi=self.dpi)
        logger.info(f"Plot saved to {filepath}")

    def close(self) -> None:
        """Release the matplotlib figure."""
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
        self.canvas = None

    def show(self) -> None:
        """Display the plot."""
        if self.fig is None:
            self.render()
        plt.show()
