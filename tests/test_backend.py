import pytest

from noisefield.core import config
from noisefield.utils.backend import backend_info, resolve_backend


def test_explicit_backends_pass_through():
    assert resolve_backend("numpy", 10 ** 9) == "numpy"
    assert resolve_backend("numba", 1) == "numba"


def test_auto_switches_on_grid_size(monkeypatch):
    monkeypatch.setattr(config, "NUMBA_MIN_CELLS", 100)
    assert resolve_backend("auto", 99) == "numpy"
    assert resolve_backend("auto", 100) == "numba"


def test_none_uses_configured_backend(monkeypatch):
    monkeypatch.setattr(config, "BACKEND", "numba")
    assert resolve_backend(None, 1) == "numba"


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        resolve_backend("opencl", 1)


def test_backend_info_reports_numba_runtime():
    info = backend_info()
    assert info["threads"] >= 1
    assert info["min_cells"] == config.NUMBA_MIN_CELLS
    assert isinstance(info["numba_version"], str)
