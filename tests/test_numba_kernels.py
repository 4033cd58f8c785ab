import numpy as np
import pytest
from numba.core.caching import NullCache

from noisefield import NoiseField
from noisefield.accel.numba_kernels import blend_kernel, smooth_kernel
from noisefield.core.perlin import blend, generate_base_noise, smooth


@pytest.fixture(scope="module")
def base():
    return generate_base_noise(40, 24, rng=21)


@pytest.mark.parametrize("octave", [0, 1, 3])
def test_numba_smoothing_matches_numpy(base, octave):
    np.testing.assert_allclose(smooth(base, octave, backend="numba"),
                               smooth(base, octave, backend="numpy"))


def test_numba_blend_matches_numpy(base):
    np.testing.assert_allclose(blend(base, 4, amplitude=1.0, persistence=0.6, backend="numba"),
                               blend(base, 4, amplitude=1.0, persistence=0.6, backend="numpy"))


def test_numba_blend_with_prominence_matches_numpy(base):
    prominence = [0.1, 0.0, 2.0]
    np.testing.assert_allclose(blend(base, 3, prominence=prominence, backend="numba"),
                               blend(base, 3, prominence=prominence, backend="numpy"))


def test_numba_blend_of_constant_grid_is_constant():
    out = blend(np.full((4, 4), 0.5), 2, backend="numba")
    np.testing.assert_array_equal(out, 0.5)


def test_numba_field_matches_numpy_field():
    np.testing.assert_allclose(NoiseField(seed=8, backend="numba").noise(33, 17, 3, persistence=0.5),
                               NoiseField(seed=8, backend="numpy").noise(33, 17, 3, persistence=0.5))


@pytest.mark.parametrize("kernel", [smooth_kernel, blend_kernel])
def test_kernels_cache_compiled_code_on_disk(kernel):
    assert not isinstance(kernel._cache, NullCache)
