"""
Matplotlib rendering for PyScope.

This package paints the drawing requests of a scope view into a matplotlib
figure and hosts the view the way a widget framework would.
"""

from pyscope.render.mpl_canvas import MatplotlibCanvas
from pyscope.render.plot import ScopePlot

__all__ = [
    "MatplotlibCanvas",
    "ScopePlot",
]
