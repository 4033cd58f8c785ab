import numpy as np

# --- Sampling ---

SAMPLE_SIZE = 8192  # Quantization of the base noise: values are k / SAMPLE_SIZE
SEED = None  # Default seed for NoiseField (None = OS entropy, non-deterministic)

# --- Octaves ---

BASE_PERIOD = 8  # Period of octave 0, each octave doubles it
# BASE_PERIOD << (MAX_OCTAVE_COUNT - 1) must fit in an int64
MAX_OCTAVE_COUNT = 60
DEFAULT_AMPLITUDE = 1.0
DEFAULT_PERSISTENCE = 1.0

# --- Grids ---

DTYPE = np.float64

# --- Backend ---
# "numpy", "numba" or "auto"
BACKEND = "auto"
# Below this many cells the JIT warm-up costs more than it saves
NUMBA_MIN_CELLS = 256 * 256
