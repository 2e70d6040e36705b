"""
Oscilloscope-style scope view for PyScope.

This package reduces sample buffers to pixel columns and turns them into
drawing requests. It does not paint pixels itself; see ``pyscope.render``.
"""

from pyscope.scopeview.colors import Color
from pyscope.scopeview.coordinate_mapper import BoundingBox, CoordinateMapper
from pyscope.scopeview.grid import grid_path, grid_positions
from pyscope.scopeview.lines import AudioLine, ConstantLine, ScopeLine, SignalLine
from pyscope.scopeview.primitives import Canvas, Paint, Path, RecordingCanvas
from pyscope.scopeview.reduction import BucketReducer
from pyscope.scopeview.view import ParamUpdateEvent, ScopeConfig, ScopeData, ScopeView

__all__ = [
    "ScopeView",
    "ScopeConfig",
    "ScopeData",
    "ParamUpdateEvent",
    # Line descriptions
    "ScopeLine",
    "ConstantLine",
    "SignalLine",
    "AudioLine",
    "Color",
    # Reduction and mapping
    "BucketReducer",
    "BoundingBox",
    "CoordinateMapper",
    "grid_positions",
    "grid_path",
    # Drawing requests
    "Canvas",
    "Path",
    "Paint",
    "RecordingCanvas",
]
