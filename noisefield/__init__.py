from noisefield.core.errors import (
    DegenerateWeight,
    InvalidDimension,
    InvalidOctaveCount,
    NoiseError,
    ProminenceLengthMismatch,
)
from noisefield.core.perlin import (
    blend,
    blend_weights,
    generate_base_noise,
    lerp,
    smooth,
    smooth_octaves,
)
from noisefield.field import NoiseField, perlin_noise, perlin_noise_with_prominence

__version__ = "0.1.0"

__all__ = [
    "DegenerateWeight",
    "InvalidDimension",
    "InvalidOctaveCount",
    "NoiseError",
    "NoiseField",
    "ProminenceLengthMismatch",
    "blend",
    "blend_weights",
    "generate_base_noise",
    "lerp",
    "perlin_noise",
    "perlin_noise_with_prominence",
    "smooth",
    "smooth_octaves",
]
