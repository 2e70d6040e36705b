"""
PyScope: Oscilloscope-style Scope Rendering

A library for drawing audio, envelopes and thresholds on a fixed-size pixel grid.
"""

from pyscope.log import configure_logging

# Import from render subpackage
from pyscope.render.mpl_canvas import MatplotlibCanvas
from pyscope.render.plot import ScopePlot

# Import from scopeview subpackage
from pyscope.scopeview.colors import Color
from pyscope.scopeview.coordinate_mapper import BoundingBox, CoordinateMapper
from pyscope.scopeview.lines import AudioLine, ConstantLine, ScopeLine, SignalLine
from pyscope.scopeview.primitives import Paint, Path, RecordingCanvas
from pyscope.scopeview.reduction import BucketReducer
from pyscope.scopeview.view import ParamUpdateEvent, ScopeConfig, ScopeData, ScopeView

__all__ = [
    # Scope view
    "ScopeView",
    "ScopeConfig",
    "ScopeData",
    "ParamUpdateEvent",
    "ScopeLine",
    "ConstantLine",
    "SignalLine",
    "AudioLine",
    "Color",
    "BucketReducer",
    "BoundingBox",
    "CoordinateMapper",
    "Path",
    "Paint",
    "RecordingCanvas",
    # Matplotlib host
    "ScopePlot",
    "MatplotlibCanvas",
    "configure_logging",
]
