from datetime import datetime, timezone

import pytest

from prcheck.core.schema import PRData
from tests.fakes import FakeClock, FakeLogger
from tests.settings import get_test_settings

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings():
    return get_test_settings()


@pytest.fixture
def clock():
    return FakeClock(FIXED_NOW)


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def example_pr():
    return PRData(
        number=123,
        title="feat(api): 添加用户认证功能",
        additions=150,
        deletions=30,
        files=("src/auth.js", "src/utils.js", "README.md"),
    )
