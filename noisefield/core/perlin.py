"""Value noise on a fixed grid: base sampling, octave smoothing and blending.

Grids are numpy arrays of shape ``(height, width)`` indexed ``grid[y, x]``.
Every stage returns a freshly allocated array and leaves its input untouched.
"""
import logging
import math
import numbers

import numpy as np

from noisefield.core import config
from noisefield.core.errors import (
    DegenerateWeight,
    InvalidDimension,
    InvalidOctaveCount,
    ProminenceLengthMismatch,
)
from noisefield.utils.backend import resolve_backend

logger = logging.getLogger(__name__)


def lerp(a, b, t):
    """Linear interpolation, ``t`` is not clamped."""
    return (1.0 - t) * a + t * b


def _is_positive_int(value):
    return not isinstance(value, bool) and isinstance(value, numbers.Integral) and value > 0


def check_dimensions(width, height):
    for name, value in (("width", width), ("height", height)):
        if not _is_positive_int(value):
            raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")


def check_octave_count(octave_count):
    if not _is_positive_int(octave_count):
        raise InvalidOctaveCount(f"octave_count must be a positive integer, got {octave_count!r}")
    if octave_count > config.MAX_OCTAVE_COUNT:
        raise InvalidOctaveCount(
            f"octave_count must be at most {config.MAX_OCTAVE_COUNT}, got {octave_count}")


def as_grid(base_noise):
    """Return ``base_noise`` as a contiguous float grid, rejecting empty or non 2-D input."""
    grid = np.asarray(base_noise, dtype=config.DTYPE)
    if grid.ndim != 2 or grid.size == 0:
        raise InvalidDimension(f"base noise must be a non-empty 2-D grid, got shape {grid.shape}")
    return np.ascontiguousarray(grid)


def octave_period(octave):
    if not 0 <= octave < config.MAX_OCTAVE_COUNT:
        raise ValueError(f"octave index must be in [0, {config.MAX_OCTAVE_COUNT}), got {octave}")
    return config.BASE_PERIOD << octave


# --- Base noise ---

def generate_base_noise(width, height, rng=None, sample_size=config.SAMPLE_SIZE):
    """Draw an unstructured ``(height, width)`` field.

    Each cell is uniform over ``{0, 1/S, ..., (S-1)/S}`` with ``S = sample_size``.
    ``rng`` may be a ``numpy.random.Generator``, an integer seed or None (OS entropy).
    """
    check_dimensions(width, height)
    if sample_size <= 0:
        raise ValueError(f"sample_size must be positive, got {sample_size}")

    rng = np.random.default_rng(rng)
    samples = rng.integers(0, sample_size, size=(height, width))
    return samples.astype(config.DTYPE) / sample_size


# --- Smoothing ---

def _anchors(length, period):
    """Lower anchor, upper anchor (wrapped) and blend fraction for every index on one axis."""
    index = np.arange(length)
    first = (index // period) * period
    second = (first + period) % length
    fraction = (index - first) * (1.0 / period)
    return first, second, fraction


def smooth(base_noise, octave, backend=None):
    """Smooth ``base_noise`` at period ``BASE_PERIOD << octave``.

    Anchor values are interpolated horizontally at both vertical anchors, then
    vertically between those results. Only anchor cells (multiples of the
    period) are read. The last block wraps back to anchor 0, so the output
    tiles at the grid size.
    """
    base = as_grid(base_noise)
    period = octave_period(octave)
    height, width = base.shape

    if resolve_backend(backend, base.size) == "numba":
        from noisefield.accel.numba_kernels import smooth_numba
        return smooth_numba(base, period)

    x0, x1, bx = _anchors(width, period)
    y0, y1, by = _anchors(height, period)

    top = lerp(base[np.ix_(y0, x0)], base[np.ix_(y0, x1)], bx)
    bottom = lerp(base[np.ix_(y1, x0)], base[np.ix_(y1, x1)], bx)
    return lerp(top, bottom, by[:, np.newaxis])


def smooth_octaves(base_noise, octave_count, backend=None):
    """Smooth the same base grid once per octave, index 0 being the finest."""
    check_octave_count(octave_count)
    base = as_grid(base_noise)
    backend = resolve_backend(backend, base.size)
    return [smooth(base, octave, backend=backend) for octave in range(octave_count)]


# --- Blending ---

def blend_weights(octave_count, prominence=(), amplitude=config.DEFAULT_AMPLITUDE,
                  persistence=config.DEFAULT_PERSISTENCE):
    """Return ``(order, weights, total)`` for a blend.

    Octaves are visited from the coarsest index down to 0; ``order[k]`` is the
    octave index visited at step ``k`` and ``weights[k]`` its weight. The
    amplitude is multiplied by ``persistence`` before each step is weighted.

    Note that ``prominence[k]`` applies to step ``k``, i.e. to octave
    ``octave_count - 1 - k``, not to octave ``k``. Existing callers rely on
    this ordering.
    """
    check_octave_count(octave_count)
    prominence = [] if prominence is None else [float(p) for p in prominence]
    if prominence and len(prominence) != octave_count:
        raise ProminenceLengthMismatch(
            f"prominence has {len(prominence)} entries, expected {octave_count}")

    order = np.arange(octave_count - 1, -1, -1, dtype=np.int64)
    weights = np.empty(octave_count, dtype=config.DTYPE)
    step_amplitude = amplitude
    for step in range(octave_count):
        step_amplitude *= persistence
        weights[step] = step_amplitude * (prominence[step] if prominence else 1.0)

    total = float(weights.sum())
    if total == 0.0 or not math.isfinite(total):
        raise DegenerateWeight(
            f"total octave weight is {total} (amplitude={amplitude}, persistence={persistence})")
    return order, weights, total


def blend(base_noise, octave_count, prominence=(), amplitude=config.DEFAULT_AMPLITUDE,
          persistence=config.DEFAULT_PERSISTENCE, backend=None):
    """Blend the smoothed octaves of ``base_noise`` into one normalized grid.

    The result is ``sum(octave * weight) / sum(weight)``; with non-negative
    weights every cell stays within the range of the octave values.
    """
    base = as_grid(base_noise)
    order, weights, total = blend_weights(octave_count, prominence, amplitude, persistence)
    backend = resolve_backend(backend, base.size)
    logger.debug(f"Blending {octave_count} octaves on a {base.shape[1]}x{base.shape[0]} grid "
                 f"with backend {backend}, total weight {total}")

    octaves = smooth_octaves(base, octave_count, backend=backend)

    if backend == "numba":
        from noisefield.accel.numba_kernels import blend_numba
        return blend_numba(octaves, order, weights, total)

    output = np.zeros_like(base)
    for octave, weight in zip(order, weights):
        output += octaves[octave] * weight
    output /= total
    return output
