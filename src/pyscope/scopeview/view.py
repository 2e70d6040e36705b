from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, Tuple

import numpy as np
from loguru import logger

from .colors import BLACK, Color
from .coordinate_mapper import BoundingBox, CoordinateMapper
from .grid import grid_path
from .lines import AudioLine, ConstantLine, ScopeLine, SignalLine
from .primitives import Canvas, Paint, Path
from .reduction import BucketReducer


class ParamUpdateEvent(Enum):
    """Fired when plugin parameters change; scopes recalculate their signal."""

    PARAM_UPDATE = "param_update"


class ScopeData(Protocol):
    """
    Owner of the live signal state shown on a scope.

    * ``recalculate``: given the current state, recompute the sample buffers.
    * ``scope_lines``: which lines to show. Called on every draw, so it should
      hand out the buffers it already holds rather than building new ones.
    """

    def recalculate(self) -> None: ...

    def scope_lines(self) -> Sequence[ScopeLine]: ...


@dataclass(frozen=True)
class ScopeConfig:
    """Grid divisions of the scope."""

    x_divisions: int = 10
    y_divisions: int = 10

    def __post_init__(self):
        for name in ("x_divisions", "y_divisions"):
            value = getattr(self, name)
            if int(value) != value or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value}")
            object.__setattr__(self, name, int(value))


class ScopeView:
    """
    Draws a scope: background, grid, every configured line, border.

    Owns the data collaborator and its configuration. Every ``draw`` call is a
    full redraw straight from the raw samples.
    """

    BACKGROUND_COLOR = BLACK
    GRID_COLOR = Color.rgb(50, 50, 40)
    BORDER_COLOR = Color.hex("#ccccdc")
    BORDER_WIDTH = 3.0
    AUDIO_LINE_WIDTH = 2.0
    # Outer layer first, fainter inner layer drawn on top
    AUDIO_LAYER_SCALES: Tuple[float, ...] = (1.0, 0.5)

    def __init__(self, scope_data: ScopeData, config: Optional[ScopeConfig] = None):
        """
        Initialise the view and compute the first signal.

        Parameters
        ----------
        scope_data : ScopeData
            Object holding the data to show and defining the lines.
        config : ScopeConfig, optional
            Grid configuration. Defaults to 10x10 divisions.
        """
        self.scope_data = scope_data
        self.config = config if config is not None else ScopeConfig()
        self.reducer = BucketReducer()

        self.scope_data.recalculate()

    def event(self, event: Any) -> None:
        """Recalculate the scope data on ``ParamUpdateEvent.PARAM_UPDATE``."""
        if event is ParamUpdateEvent.PARAM_UPDATE:
            logger.debug("Parameter update, recalculating scope data")
            self.scope_data.recalculate()

    def draw(self, canvas: Canvas, bounds: BoundingBox) -> None:
        """
        Render the full scope.

        Parameters
        ----------
        canvas : Canvas
            Receives the clear and stroke requests.
        bounds : BoundingBox
            Drawing area for this pass.

        Raises
        ------
        ValueError
            If the bounding box has no area or a line has an empty buffer.
        TypeError
            If ``scope_lines`` returns something that is not a scope line.
        """
        bounds = BoundingBox(*bounds)
        bounds.validate()
        mapper = CoordinateMapper(bounds)

        canvas.clear_rect(
            int(bounds.x),
            int(bounds.y),
            int(bounds.w),
            int(bounds.h),
            self.BACKGROUND_COLOR,
        )

        self.draw_grid(canvas, bounds)

        lines = list(self.scope_data.scope_lines())
        logger.debug(f"Drawing {len(lines)} scope lines in {bounds}")
        for line in lines:
            if isinstance(line, ConstantLine):
                self.draw_horizontal(canvas, mapper, line)
            elif isinstance(line, SignalLine):
                self.draw_signal(canvas, mapper, line)
            elif isinstance(line, AudioLine):
                self.draw_audio(canvas, mapper, line)
            else:
                raise TypeError(f"Unknown scope line type: {type(line).__name__}")

        self.draw_border(canvas, bounds)

    def draw_grid(self, canvas: Canvas, bounds: BoundingBox) -> None:
        """Grid lines for the configured divisions."""
        path = grid_path(bounds, self.config.x_divisions, self.config.y_divisions)
        canvas.stroke_path(path, Paint.color_paint(self.GRID_COLOR))

    def draw_horizontal(
        self, canvas: Canvas, mapper: CoordinateMapper, line: ConstantLine
    ) -> None:
        """Draws a ``ConstantLine`` mirrored around the midline."""
        b = mapper.bounds
        path = Path()
        for y in mapper.constant_to_y(line.constant):
            path.move_to(b.x, y)
            path.line_to(b.x + b.w, y)

        paint = Paint.color_paint(line.color)
        paint.set_line_width(line.width)
        canvas.stroke_path(path, paint)

    def draw_signal(
        self, canvas: Canvas, mapper: CoordinateMapper, line: SignalLine
    ) -> None:
        """Draws a ``SignalLine`` through the mean of every bucket."""
        b = mapper.bounds
        means = self.reducer.reduce_mean(line.samples, b.w)
        xs = mapper.bucket_to_x(np.arange(len(means)))
        ys = mapper.signal_to_y(means)

        path = Path()
        path.move_to(b.x, mapper.midline_y())
        for x, y in zip(xs, ys):
            path.line_to(x, y)

        paint = Paint.color_paint(line.color)
        paint.set_line_width(line.width)
        canvas.stroke_path(path, paint)

    def draw_audio(
        self, canvas: Canvas, mapper: CoordinateMapper, line: AudioLine
    ) -> None:
        """Draws an ``AudioLine`` as layered min/max columns."""
        for scale in self.AUDIO_LAYER_SCALES:
            self._draw_wave(canvas, mapper, line, scale)

    def _draw_wave(
        self, canvas: Canvas, mapper: CoordinateMapper, line: AudioLine, scale: float
    ) -> None:
        b = mapper.bounds
        x_min, x_max = self.reducer.reduce_envelope(line.samples, b.w)
        x_max = self.reducer.apply_min_thickness(x_min, x_max, b.h)
        n_draw = self.reducer.envelope_draw_count(len(x_min))

        xs = mapper.bucket_to_x(np.arange(n_draw))
        y_low = mapper.amplitude_to_y(x_min[:n_draw], scale)
        y_high = mapper.amplitude_to_y(x_max[:n_draw], scale)

        path = Path()
        for x, y0, y1 in zip(xs, y_low, y_high):
            path.move_to(x, y0)
            path.line_to(x, y1)

        paint = Paint.color_paint(mapper.scale_color(line.color, scale))
        paint.set_line_width(self.AUDIO_LINE_WIDTH)
        canvas.stroke_path(path, paint)

    def draw_border(self, canvas: Canvas, bounds: BoundingBox) -> None:
        """Border around the scope, centred on the edge of the drawing area."""
        width = self.BORDER_WIDTH
        path = Path()
        path.rect(
            bounds.x - width / 2.0,
            bounds.y - width / 2.0,
            bounds.w + width,
            bounds.h + width,
        )
        paint = Paint.color_paint(self.BORDER_COLOR)
        paint.set_line_width(width)
        canvas.stroke_path(path, paint)
