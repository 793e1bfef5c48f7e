import pytest

from ds_linkedlist import build_sequential


@pytest.fixture
def hundred():
    """The demo fixture: 0 .. 99."""
    return build_sequential(100)


@pytest.fixture
def ten():
    return build_sequential(10)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "NTH_LIST_SIZE",
        "NTH_DEMO_OFFSETS",
        "NTH_LOG_LEVEL",
        "MEDIAN_BENCHMARK_SIZE",
        "MEDIAN_BENCHMARK_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
