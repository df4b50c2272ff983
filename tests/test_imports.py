import importlib
import pytest

@pytest.mark.parametrize("module", [
    "kmeansviz",
    "kmeansviz.base",
    "kmeansviz.algorithms",
    "kmeansviz.assignments",
    "kmeansviz.updates",
    "kmeansviz.distances",
    "kmeansviz.initialization",
    "kmeansviz.utils",
    "kmeansviz.visualization",
    "kmeansviz.datasets",
    "kmeansviz.session",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_public_names_exported():
    import kmeansviz

    for name in kmeansviz.__all__:
        assert hasattr(kmeansviz, name), f"kmeansviz.{name} should exist"
