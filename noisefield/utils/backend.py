"""Selection of the array backend used to smooth and blend octaves."""
import logging

import numba

from noisefield.core import config

logger = logging.getLogger(__name__)

BACKENDS = ("numpy", "numba", "auto")


def resolve_backend(name=None, cells=0):
    """Return the concrete backend ("numpy" or "numba") for a grid of ``cells`` cells.

    ``None`` falls back to ``config.BACKEND``. "auto" only pays for the JIT
    when the grid is at least ``config.NUMBA_MIN_CELLS`` large.
    """
    if name is None:
        name = config.BACKEND
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend {name!r}, expected one of {BACKENDS}")
    if name == "auto":
        name = "numba" if cells >= config.NUMBA_MIN_CELLS else "numpy"
        logger.debug(f"Backend auto-selected: {name} for {cells} cells")
    return name


def backend_info():
    """Describe the numba runtime the "numba" backend runs on."""
    return {
        "numba_version": numba.__version__,
        "threads": numba.config.NUMBA_NUM_THREADS,
        "threading_layer": numba.config.THREADING_LAYER,
        "min_cells": config.NUMBA_MIN_CELLS,
    }
