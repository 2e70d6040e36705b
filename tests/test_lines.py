import numpy as np
import pytest

from pyscope.scopeview.colors import Color
from pyscope.scopeview.lines import AudioLine, ConstantLine, SignalLine, as_sample_view
from pyscope.scopeview.primitives import Paint, Path


def test_sample_view_shares_float32_memory():
    samples = np.zeros(16, dtype=np.float32)

    line = AudioLine(samples, Color.rgb(255, 0, 0))

    assert np.shares_memory(line.samples, samples)
    assert not line.samples.flags.writeable
    # the caller keeps ownership of a writeable buffer
    samples[0] = 0.5
    assert line.samples[0] == 0.5


def test_sample_view_converts_lists():
    view = as_sample_view([0.0, 0.5, 1.0])

    assert view.dtype == np.float32
    np.testing.assert_array_equal(view, [0.0, 0.5, 1.0])


def test_sample_view_rejects_2d():
    with pytest.raises(ValueError, match="1-D"):
        SignalLine(np.zeros((2, 3)), "red", 1.0)


def test_lines_accept_matplotlib_colors():
    line = SignalLine([0.0, 1.0], "red", 1.5)

    assert line.color == Color(1.0, 0.0, 0.0, 1.0)
    assert line.width == 1.5


def test_constant_line_defaults():
    line = ConstantLine(Color.rgb(163, 144, 95), 0.25)

    assert line.constant == 0.25
    assert line.width == 1.0


def test_color_constructors():
    assert Color.rgb(255, 0, 0) == Color(1.0, 0.0, 0.0, 1.0)
    assert Color.hex("#ccccdc").to_rgb_bytes() == (204, 204, 220)
    assert Color.hex("ccccdc") == Color.hex("#ccccdc")
    assert Color.rgbf(0.5, 0.25, 0.0) == Color(0.5, 0.25, 0.0, 1.0)
    assert Color.from_any((0.0, 0.0, 1.0)) == Color(0.0, 0.0, 1.0, 1.0)


def test_path_commands():
    path = Path()
    path.move_to(0, 0)
    path.line_to(1, 2)
    path.move_to(5, 5)
    path.line_to(6, 6)

    assert path.subpaths == [[(0.0, 0.0), (1.0, 2.0)], [(5.0, 5.0), (6.0, 6.0)]]
    assert path.segments() == [((0.0, 0.0), (1.0, 2.0)), ((5.0, 5.0), (6.0, 6.0))]


def test_path_rect_is_closed():
    path = Path()
    path.rect(1, 2, 3, 4)

    points = path.subpaths[0]
    assert points[0] == points[-1] == (1.0, 2.0)
    assert (4.0, 6.0) in points


def test_line_to_without_move_starts_subpath():
    path = Path()
    path.line_to(3, 4)

    assert path.subpaths == [[(3.0, 4.0)]]


def test_paint_line_width():
    paint = Paint.color_paint(Color.rgb(0, 0, 0))
    assert paint.line_width == 1.0

    paint.set_line_width(3)
    assert paint.line_width == 3.0
