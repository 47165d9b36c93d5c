from tests.fakes.clock import FakeClock
from tests.fakes.logger import FakeLogger

__all__ = [
    "FakeClock",
    "FakeLogger",
]
