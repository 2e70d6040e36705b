"""
Descriptions of the lines a scope can draw.

* ``ConstantLine``: a horizontal threshold, drawn mirrored at ``+constant`` and
  ``-constant``.
* ``SignalLine``: the signal as a single line, averaging all samples that fall
  into the same pixel column. Suited to signals that don't vary much over short
  time spans (envelopes, or short pieces of audio with roughly as many samples as
  the scope is wide).
* ``AudioLine``: a min/max silhouette in the style of Audacity, for zoomed out
  audio with far more samples than pixel columns.

The sample buffers are owned by the caller. Lines only hold a float32 view of
them; nothing is copied when the caller already hands over a float32 array.
"""

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .colors import Color


def as_sample_view(samples) -> np.ndarray:
    """
    Return a read-only float32 view of a sample buffer.

    Parameters
    ----------
    samples : array_like
        One-dimensional sample buffer.

    Returns
    -------
    np.ndarray
        Float32 array sharing memory with ``samples`` when possible.

    Raises
    ------
    ValueError
        If the buffer is not one-dimensional.
    """
    view = np.asarray(samples, dtype=np.float32)
    if view.ndim != 1:
        raise ValueError(f"Sample buffer must be 1-D, got shape {view.shape}")
    view = view.view()
    view.flags.writeable = False
    return view


@dataclass(frozen=True)
class ConstantLine:
    """Horizontal line pair at ``+constant`` and ``-constant``."""

    color: Color
    constant: float
    width: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "color", Color.from_any(self.color))
        object.__setattr__(self, "constant", float(self.constant))


@dataclass(frozen=True, eq=False)
class SignalLine:
    """
    Samples drawn as one line.

    If there are more samples than the scope is wide, all samples that fall in
    the same pixel column are averaged.
    """

    samples: np.ndarray = field(repr=False)
    color: Color
    width: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "samples", as_sample_view(self.samples))
        object.__setattr__(self, "color", Color.from_any(self.color))


@dataclass(frozen=True, eq=False)
class AudioLine:
    """Samples drawn as a min/max envelope per pixel column."""

    samples: np.ndarray = field(repr=False)
    color: Color

    def __post_init__(self):
        object.__setattr__(self, "samples", as_sample_view(self.samples))
        object.__setattr__(self, "color", Color.from_any(self.color))


ScopeLine = Union[ConstantLine, SignalLine, AudioLine]
