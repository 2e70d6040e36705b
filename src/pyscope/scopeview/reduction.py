from typing import Tuple

import numpy as np
from loguru import logger
from numba import njit


@njit
def _reduce_mean_numba(x: np.ndarray, step: int, n_bins: int) -> np.ndarray:
    """
    Numba-optimized mean reduction.

    Parameters
    ----------
    x : np.ndarray
        Input sample array.
    step : int
        Number of samples per bucket.
    n_bins : int
        Number of buckets. The last bucket may hold fewer than ``step`` samples.

    Returns
    -------
    np.ndarray
        Mean value of each bucket.
    """
    x_reduced = np.zeros(n_bins, dtype=np.float32)

    for i in range(n_bins):
        start_idx = i * step
        end_idx = min((i + 1) * step, len(x))

        bin_sum = 0.0
        for j in range(start_idx, end_idx):
            bin_sum += x[j]
        x_reduced[i] = bin_sum / (end_idx - start_idx)

    return x_reduced


@njit
def _reduce_envelope_numba(
    x: np.ndarray, step: int, n_bins: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Numba-optimized min/max reduction in a single pass.

    Parameters
    ----------
    x : np.ndarray
        Input sample array.
    step : int
        Number of samples per bucket.
    n_bins : int
        Number of buckets. The last bucket may hold fewer than ``step`` samples.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Min envelope and max envelope arrays.
    """
    x_min_envelope = np.zeros(n_bins, dtype=np.float32)
    x_max_envelope = np.zeros(n_bins, dtype=np.float32)

    for i in range(n_bins):
        start_idx = i * step
        end_idx = min((i + 1) * step, len(x))

        bin_min = x[start_idx]
        bin_max = x[start_idx]
        for j in range(start_idx + 1, end_idx):
            val = x[j]
            if val < bin_min:
                bin_min = val
            if val > bin_max:
                bin_max = val

        x_min_envelope[i] = bin_min
        x_max_envelope[i] = bin_max

    return x_min_envelope, x_max_envelope


class BucketReducer:
    """
    Reduces a sample buffer to one value (or one min/max pair) per pixel column.

    Samples are split into contiguous buckets of ``floor(n_samples / width)``
    samples; the last bucket may be shorter. Nothing is cached, every call works
    on the buffer it is given.
    """

    # Envelopes thinner than this many pixels get bumped
    MIN_THICKNESS_PX = 2.0
    THICKNESS_BUMP_PX = 4.0
    # The envelope renderer stops this many buckets before the end
    TAIL_GUARD_BUCKETS = 2

    @staticmethod
    def _contiguous(samples: np.ndarray) -> np.ndarray:
        x = np.ascontiguousarray(samples, dtype=np.float32)
        if x.ndim != 1:
            raise ValueError(f"Sample buffer must be 1-D, got shape {x.shape}")
        if len(x) == 0:
            raise ValueError("Cannot reduce an empty sample buffer")
        return x

    def bucket_size(self, n_samples: int, width: float) -> int:
        """
        Number of samples per bucket for a given pixel width.

        Parameters
        ----------
        n_samples : int
            Length of the sample buffer.
        width : float
            Width of the drawing area in pixels.

        Returns
        -------
        int
            ``floor(n_samples / width)``, or 1 when there are fewer samples than
            pixels.

        Raises
        ------
        ValueError
            If ``width`` is not positive.
        """
        if not width > 0:
            raise ValueError(f"Width must be positive, got {width}")

        step = int(n_samples / width)
        if step == 0:
            logger.debug(
                f"Only {n_samples} samples for {width} pixels, using one sample per bucket"
            )
            step = 1
        return step

    def bucket_count(self, n_samples: int, step: int) -> int:
        """Number of buckets of ``step`` samples, counting a short last bucket."""
        return -(-n_samples // step)

    def reduce_mean(self, samples: np.ndarray, width: float) -> np.ndarray:
        """
        Average every bucket.

        Parameters
        ----------
        samples : np.ndarray
            Sample buffer, must not be empty.
        width : float
            Width of the drawing area in pixels.

        Returns
        -------
        np.ndarray
            One mean per bucket.
        """
        x = self._contiguous(samples)
        step = self.bucket_size(len(x), width)
        n_bins = self.bucket_count(len(x), step)
        logger.debug(
            f"Mean reduction: {len(x)} samples, bucket size {step}, {n_bins} buckets"
        )
        return _reduce_mean_numba(x, step, n_bins)

    def reduce_envelope(
        self, samples: np.ndarray, width: float
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Exact min and max of every bucket.

        Parameters
        ----------
        samples : np.ndarray
            Sample buffer, must not be empty.
        width : float
            Width of the drawing area in pixels.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            Per-bucket minimum and maximum.
        """
        x = self._contiguous(samples)
        step = self.bucket_size(len(x), width)
        n_bins = self.bucket_count(len(x), step)
        logger.debug(
            f"Envelope reduction: {len(x)} samples, bucket size {step}, {n_bins} buckets"
        )
        return _reduce_envelope_numba(x, step, n_bins)

    def apply_min_thickness(
        self, x_min: np.ndarray, x_max: np.ndarray, height: float
    ) -> np.ndarray:
        """
        Raise the max of buckets that would render thinner than two pixels.

        Parameters
        ----------
        x_min, x_max : np.ndarray
            Envelope arrays as returned by ``reduce_envelope``.
        height : float
            Height of the drawing area in pixels.

        Returns
        -------
        np.ndarray
            New max envelope. ``x_max`` is left untouched.
        """
        too_thin = (x_max - x_min) < self.MIN_THICKNESS_PX / height
        return np.where(too_thin, x_max + self.THICKNESS_BUMP_PX / height, x_max)

    def envelope_draw_count(self, n_bins: int) -> int:
        """How many leading buckets the envelope renderer draws."""
        if n_bins > self.TAIL_GUARD_BUCKETS:
            return n_bins - self.TAIL_GUARD_BUCKETS
        return n_bins
