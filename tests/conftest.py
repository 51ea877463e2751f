import logging

import pytest

from tests._helpers import DropCounter


@pytest.fixture
def counter() -> DropCounter:
    return DropCounter()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="pyomore")
    return caplog
