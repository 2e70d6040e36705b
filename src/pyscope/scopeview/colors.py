from typing import NamedTuple, Tuple, Union

from matplotlib.colors import to_rgba


class Color(NamedTuple):
    """
    RGBA color with float channels in [0, 1].

    Stored as a plain tuple so it can be handed to matplotlib unchanged.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Build an opaque color from 0..255 integer channels."""
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @classmethod
    def rgbf(cls, r: float, g: float, b: float) -> "Color":
        """Build an opaque color from float channels in [0, 1]."""
        return cls(float(r), float(g), float(b), 1.0)

    @classmethod
    def hex(cls, code: str) -> "Color":
        """Build a color from a ``#rrggbb`` or ``#rrggbbaa`` string."""
        return cls(*to_rgba(code if code.startswith("#") else f"#{code}"))

    @classmethod
    def from_any(cls, spec: Union["Color", str, Tuple[float, ...]]) -> "Color":
        """
        Build a color from anything matplotlib understands.

        Parameters
        ----------
        spec : Union[Color, str, Tuple[float, ...]]
            A ``Color``, a named color ("red"), a hex string or an RGB(A) tuple.

        Returns
        -------
        Color
            The equivalent RGBA color.
        """
        if isinstance(spec, Color):
            return spec
        return cls(*to_rgba(spec))

    def to_rgb_bytes(self) -> Tuple[int, int, int]:
        """Channels as 0..255 integers, rounded."""
        return (
            int(round(self.r * 255.0)),
            int(round(self.g * 255.0)),
            int(round(self.b * 255.0)),
        )


BLACK = Color.rgb(0, 0, 0)
