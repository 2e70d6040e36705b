"""
Drawing requests the scope hands to whatever paints pixels.

A ``Canvas`` only has to clear rectangles and stroke paths. ``RecordingCanvas``
keeps every request in order, which is all a headless consumer or a test needs.
"""

from typing import Any, List, Protocol, Tuple

from .colors import Color

Point = Tuple[float, float]


class Path:
    """Sequence of subpaths built with move/line commands, in pixel space."""

    def __init__(self):
        self.subpaths: List[List[Point]] = []

    def move_to(self, x: float, y: float) -> None:
        self.subpaths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        if not self.subpaths:
            self.move_to(x, y)
            return
        self.subpaths[-1].append((float(x), float(y)))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        """Closed rectangle; the first corner is repeated at the end."""
        self.move_to(x, y)
        self.line_to(x + w, y)
        self.line_to(x + w, y + h)
        self.line_to(x, y + h)
        self.line_to(x, y)

    def segments(self) -> List[Tuple[Point, Point]]:
        """Every straight segment in drawing order."""
        return [
            (sub[i], sub[i + 1]) for sub in self.subpaths for i in range(len(sub) - 1)
        ]

    def __len__(self) -> int:
        return len(self.subpaths)

    def __repr__(self) -> str:
        return f"Path(subpaths={len(self.subpaths)})"


class Paint:
    """Solid stroke color and width."""

    def __init__(self, color: Color, line_width: float = 1.0):
        self.color = Color.from_any(color)
        self.line_width = float(line_width)

    @classmethod
    def color_paint(cls, color: Color) -> "Paint":
        return cls(color)

    def set_line_width(self, width: float) -> None:
        self.line_width = float(width)

    def __repr__(self) -> str:
        return f"Paint(color={self.color}, line_width={self.line_width})"


class Canvas(Protocol):
    def stroke_path(self, path: Path, paint: Paint) -> None: ...

    def clear_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...


class RecordingCanvas:
    """
    Canvas that stores the requests it receives instead of drawing them.

    ``calls`` holds ``("clear_rect", (x, y, w, h), color)`` and
    ``("stroke_path", path, paint)`` tuples in call order.
    """

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []

    def stroke_path(self, path: Path, paint: Paint) -> None:
        self.calls.append(("stroke_path", path, paint))

    def clear_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        self.calls.append(("clear_rect", (x, y, w, h), color))

    def strokes(self) -> List[Tuple[Path, Paint]]:
        """Stroke requests as ``(path, paint)`` pairs."""
        return [(c[1], c[2]) for c in self.calls if c[0] == "stroke_path"]

    def reset(self) -> None:
        self.calls.clear()
