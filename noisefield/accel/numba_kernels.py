"""Numba-accelerated smoothing and blending.

Kernels parallelize over rows with ``prange``. Each output cell is written
by exactly one iteration and the blend weights are computed beforehand, so
no accumulator is shared between threads.
"""
import logging
import time

import numpy as np
from numba import njit, prange

from noisefield.core import config

logger = logging.getLogger(__name__)


@njit(cache=True)
def _lerp(a, b, t):
    return (1.0 - t) * a + t * b


@njit(cache=True, parallel=True)
def smooth_kernel(base, period, out):
    """Bilinear value-noise smoothing of ``base`` at ``period`` into ``out``."""
    height, width = base.shape
    frequency = 1.0 / period
    for row in prange(height):
        y = np.int64(row)
        y0 = (y // period) * period
        y1 = (y0 + period) % height
        by = (y - y0) * frequency
        for x in range(width):
            x0 = (x // period) * period
            x1 = (x0 + period) % width
            bx = (x - x0) * frequency
            top = _lerp(base[y0, x0], base[y0, x1], bx)
            bottom = _lerp(base[y1, x0], base[y1, x1], bx)
            out[y, x] = _lerp(top, bottom, by)


@njit(cache=True, parallel=True)
def blend_kernel(octaves, order, weights, total, out):
    """Weighted sum of ``octaves[order[k]] * weights[k]`` divided by ``total``."""
    steps = order.shape[0]
    height = out.shape[0]
    width = out.shape[1]
    for y in prange(height):
        for x in range(width):
            acc = 0.0
            for k in range(steps):
                acc += octaves[order[k], y, x] * weights[k]
            out[y, x] = acc / total


def smooth_numba(base, period):
    base = np.ascontiguousarray(base, dtype=config.DTYPE)
    out = np.empty_like(base)
    start_time = time.time()
    smooth_kernel(base, int(period), out)
    logger.debug(f"Numba smoothing at period {period} done in {time.time() - start_time:.3f}s")
    return out


def blend_numba(octaves, order, weights, total):
    stack = np.ascontiguousarray(np.stack(octaves), dtype=config.DTYPE)
    out = np.empty(stack.shape[1:], dtype=config.DTYPE)
    start_time = time.time()
    blend_kernel(stack,
                 np.ascontiguousarray(order, dtype=np.int64),
                 np.ascontiguousarray(weights, dtype=config.DTYPE),
                 float(total), out)
    logger.debug(f"Numba blend of {len(octaves)} octaves done in {time.time() - start_time:.3f}s")
    return out
