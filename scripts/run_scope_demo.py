from warnings import warn

import matplotlib as mpl
import numpy as np
from loguru import logger

from pyscope import (
    AudioLine,
    Color,
    ConstantLine,
    ScopeConfig,
    ScopePlot,
    SignalLine,
    configure_logging,
)

SIGNAL_COLOR = Color.rgbf(243.0 / 255.0, 250.0 / 255.0, 146.0 / 255.0)
THRESHOLD_COLOR = Color.rgbf(163.0 / 255.0, 144.0 / 255.0, 95.0 / 255.0)
ENVELOPE_COLOR = Color.rgbf(255.0 / 255.0, 137.0 / 255.0, 137.0 / 255.0)

# --- User configuration dictionary ---
CONFIG = {
    "LOG_LEVEL": "INFO",  # logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    "SAMPLE_RATE": 48000,  # Hz
    "DURATION": 0.5,  # seconds of audio shown on the scope
    "WIDTH": 800,  # figure size in pixels
    "HEIGHT": 300,
    "X_DIVISIONS": 10,
    "Y_DIVISIONS": 8,
    "ENVELOPE_POINTS": 800,  # envelope samples, about one per pixel column
    "OUTPUT_PATH": "scope_{name}.png",
    # ---
    "SCOPES": [
        {"name": "gate", "threshold": 0.3, "tone_hz": 220.0},
        {"name": "compressor", "threshold": 0.6, "tone_hz": 110.0, "Y_DIVISIONS": 4},
    ],
}


class DecayingToneScope:
    """
    Example scope data: a decaying tone burst, its peak envelope and a threshold.

    Buffers are recomputed in ``recalculate`` and only handed out by reference in
    ``scope_lines``.
    """

    def __init__(
        self,
        threshold: float,
        tone_hz: float,
        sample_rate: int,
        duration: float,
        envelope_points: int,
    ):
        self.threshold = threshold
        self.tone_hz = tone_hz
        self.sample_rate = sample_rate
        self.duration = duration
        self.envelope_points = envelope_points
        self.audio = np.zeros(0, dtype=np.float32)
        self.envelope = np.zeros(0, dtype=np.float32)

    def recalculate(self) -> None:
        t = np.arange(int(self.sample_rate * self.duration)) / self.sample_rate
        decay = np.exp(-t / (self.duration / 4))
        self.audio = (decay * np.sin(2 * np.pi * self.tone_hz * t)).astype(np.float32)

        # Peak follower over windows, drawn as a line
        windows = np.array_split(np.abs(self.audio), self.envelope_points)
        self.envelope = np.array([w.max() for w in windows], dtype=np.float32)
        logger.debug(
            f"Recalculated {len(self.audio)} audio samples, {len(self.envelope)} envelope points"
        )

    def scope_lines(self):
        return [
            ConstantLine(THRESHOLD_COLOR, self.threshold),
            AudioLine(self.audio, SIGNAL_COLOR),
            SignalLine(self.envelope, ENVELOPE_COLOR, 1.5),
        ]


def main() -> None:
    """
    Main function to render all configured scopes.
    """
    configure_logging(CONFIG.get("LOG_LEVEL", "INFO"))

    for scope in CONFIG["SCOPES"]:
        # Merge global config with scope-specific overrides
        merged_config = CONFIG.copy()
        merged_config.update(scope)

        data = DecayingToneScope(
            threshold=merged_config["threshold"],
            tone_hz=merged_config["tone_hz"],
            sample_rate=merged_config["SAMPLE_RATE"],
            duration=merged_config["DURATION"],
            envelope_points=merged_config["ENVELOPE_POINTS"],
        )
        plot = ScopePlot(
            data,
            ScopeConfig(
                x_divisions=merged_config["X_DIVISIONS"],
                y_divisions=merged_config["Y_DIVISIONS"],
            ),
            width=merged_config["WIDTH"],
            height=merged_config["HEIGHT"],
        )
        plot.render()
        plot.save(merged_config["OUTPUT_PATH"].format(name=merged_config["name"]))
        plot.close()


if __name__ == "__main__":
    for optn, val in {
        "backend": "Agg",
        "savefig.facecolor": "black",
    }.items():
        try:
            mpl.rcParams[optn] = val
        except KeyError:
            warn(f"mpl rcparams key '{optn}' not recognised as a valid rc parameter.")
    main()
