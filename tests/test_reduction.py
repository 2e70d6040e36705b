import numpy as np
import pytest

from pyscope.scopeview.reduction import BucketReducer


@pytest.fixture
def reducer():
    return BucketReducer()


def test_bucket_size_truncates(reducer):
    assert reducer.bucket_size(1000, 100.0) == 10
    assert reducer.bucket_size(1099, 100.0) == 10
    assert reducer.bucket_size(250, 100.0) == 2


def test_bucket_size_falls_back_to_one_sample_per_bucket(reducer):
    assert reducer.bucket_size(10, 100.0) == 1


def test_bucket_size_rejects_non_positive_width(reducer):
    with pytest.raises(ValueError):
        reducer.bucket_size(100, 0.0)
    with pytest.raises(ValueError):
        reducer.bucket_size(100, -5.0)


def test_bucket_count_includes_short_last_bucket(reducer):
    assert reducer.bucket_count(1000, 10) == 100
    assert reducer.bucket_count(5, 2) == 3
    assert reducer.bucket_count(250, 2) == 125


def test_reduce_mean_evenly_divisible(reducer):
    samples = np.array([0.0, 1.0, 0.5, 0.5, -1.0, -0.5, 0.25, 0.75], dtype=np.float32)

    means = reducer.reduce_mean(samples, 4.0)

    np.testing.assert_allclose(means, [0.5, 0.5, -0.75, 0.5])
    assert means.dtype == np.float32


def test_reduce_mean_short_last_bucket(reducer):
    samples = np.array([1.0, 0.0, 0.5, 0.25, -0.5], dtype=np.float32)

    means = reducer.reduce_mean(samples, 2.0)

    np.testing.assert_allclose(means, [0.5, 0.375, -0.5])


def test_reduce_mean_fewer_samples_than_pixels(reducer):
    samples = np.linspace(-1.0, 1.0, 10, dtype=np.float32)

    means = reducer.reduce_mean(samples, 100.0)

    np.testing.assert_allclose(means, samples)


def test_reduce_envelope_alternating_full_scale(reducer, alternating_full_scale):
    x_min, x_max = reducer.reduce_envelope(alternating_full_scale, 100.0)

    assert len(x_min) == len(x_max) == 100
    assert np.all(x_min == -1.0)
    assert np.all(x_max == 1.0)


def test_reduce_envelope_exact_extrema(reducer):
    samples = np.array([0.1, -0.3, 0.7, 0.2, 0.2, 0.2, -0.9], dtype=np.float32)

    x_min, x_max = reducer.reduce_envelope(samples, 2.0)

    np.testing.assert_array_equal(x_min, np.float32([-0.3, 0.2, -0.9]))
    np.testing.assert_array_equal(x_max, np.float32([0.7, 0.2, -0.9]))


def test_reduce_does_not_modify_input(reducer):
    samples = np.array([3.0, -2.0, 0.5, 0.25], dtype=np.float32)
    before = samples.copy()

    reducer.reduce_mean(samples, 2.0)
    reducer.reduce_envelope(samples, 2.0)

    np.testing.assert_array_equal(samples, before)


def test_empty_buffer_fails_fast(reducer):
    with pytest.raises(ValueError, match="empty"):
        reducer.reduce_mean(np.array([], dtype=np.float32), 100.0)
    with pytest.raises(ValueError, match="empty"):
        reducer.reduce_envelope(np.array([], dtype=np.float32), 100.0)


def test_two_dimensional_buffer_rejected(reducer):
    with pytest.raises(ValueError):
        reducer.reduce_mean(np.zeros((2, 10), dtype=np.float32), 5.0)


def test_min_thickness_bumps_thin_buckets(reducer):
    x_min = np.float32([0.0, 0.0, -0.5])
    x_max = np.float32([0.0, 0.01, 0.5])

    bumped = reducer.apply_min_thickness(x_min, x_max, 100.0)

    assert bumped[0] == pytest.approx(0.04, abs=1e-6)
    assert bumped[1] == pytest.approx(0.05, abs=1e-6)
    assert bumped[2] == pytest.approx(0.5)
    # original array untouched
    assert x_max[0] == 0.0


def test_min_thickness_leaves_bucket_at_threshold(reducer):
    x_min = np.float32([0.0])
    x_max = np.float32([0.5])

    bumped = reducer.apply_min_thickness(x_min, x_max, 4.0)

    assert bumped[0] == pytest.approx(0.5)


@pytest.mark.parametrize(
    "n_bins, expected",
    [(1, 1), (2, 2), (3, 1), (4, 2), (100, 98)],
)
def test_envelope_draw_count_stops_two_buckets_early(reducer, n_bins, expected):
    assert reducer.envelope_draw_count(n_bins) == expected
