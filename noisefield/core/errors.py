"""Exceptions raised while building a noise field."""


class NoiseError(ValueError):
    """Base class for every noise generation error."""


class InvalidDimension(NoiseError):
    """Width or height is not a positive integer."""


class InvalidOctaveCount(NoiseError):
    """Octave count is zero or negative."""


class ProminenceLengthMismatch(NoiseError):
    """Prominence vector is non-empty and its length differs from the octave count."""


class DegenerateWeight(NoiseError):
    """Total blend weight is zero or not finite, normalization is undefined."""
