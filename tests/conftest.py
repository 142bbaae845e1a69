import pytest

from elapsed.config import load_config
from elapsed.store import TimerStore


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000):
        self.current = start

    def __call__(self) -> int:
        return self.current

    def advance(self, ms: int) -> None:
        self.current += ms


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ELAPSED_CONFIG", raising=False)
    monkeypatch.delenv("ELAPSED_DIR", raising=False)


@pytest.fixture
def config(tmp_path):
    return load_config(directory=str(tmp_path))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(config, clock):
    return TimerStore(config, clock=clock)
