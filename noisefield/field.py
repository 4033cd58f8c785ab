"""Octave-blended value noise fields."""
import logging
import time

import numpy as np

from noisefield.core import config
from noisefield.core.perlin import (
    blend,
    check_dimensions,
    check_octave_count,
    generate_base_noise,
)

logger = logging.getLogger(__name__)


class NoiseField:
    """Generates normalized ``(height, width)`` noise grids in [0, 1).

    ``seed`` may be an integer, a ``numpy.random.Generator`` or None for OS
    entropy. Successive calls on the same instance draw fresh base noise from
    the same generator, so a seeded instance replays the same sequence.
    """

    def __init__(self, seed=None, sample_size=config.SAMPLE_SIZE, backend=None):
        if seed is None:
            seed = config.SEED
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.sample_size = sample_size
        self.backend = backend

    def base_noise(self, width, height):
        return generate_base_noise(width, height, rng=self.rng, sample_size=self.sample_size)

    def noise(self, width, height, octave_count, persistence=config.DEFAULT_PERSISTENCE,
              amplitude=config.DEFAULT_AMPLITUDE):
        """Blend ``octave_count`` octaves with geometric decay.

        The octave visited at step ``k`` weighs ``amplitude * persistence ** (k + 1)``.
        """
        return self._generate(width, height, octave_count, (), amplitude, persistence)

    def noise_with_prominence(self, width, height, octave_count, prominence):
        """Blend ``octave_count`` octaves with an explicit weight per step.

        ``prominence[0]`` weighs the coarsest octave and ``prominence[-1]`` the
        finest one (octave index 0).
        """
        return self._generate(width, height, octave_count, prominence,
                              config.DEFAULT_AMPLITUDE, config.DEFAULT_PERSISTENCE)

    def _generate(self, width, height, octave_count, prominence, amplitude, persistence):
        # Validate before drawing so a rejected call leaves the generator untouched
        check_dimensions(width, height)
        check_octave_count(octave_count)

        start_time = time.time()
        base = self.base_noise(width, height)
        field = blend(base, octave_count, prominence=prominence, amplitude=amplitude,
                      persistence=persistence, backend=self.backend)
        logger.info(f"Noise field {width}x{height} with {octave_count} octaves (seed {self.seed}) "
                    f"generated in {time.time() - start_time:.3f}s")
        return field


def perlin_noise(width, height, octave_count, persistence=config.DEFAULT_PERSISTENCE,
                 amplitude=config.DEFAULT_AMPLITUDE, seed=None, backend=None):
    return NoiseField(seed=seed, backend=backend).noise(
        width, height, octave_count, persistence=persistence, amplitude=amplitude)


def perlin_noise_with_prominence(width, height, octave_count, prominence, seed=None, backend=None):
    return NoiseField(seed=seed, backend=backend).noise_with_prominence(
        width, height, octave_count, prominence)
