import logging
import pytest
from common.logging_utils import setup_logging
from common.models import StreamCounter

@pytest.fixture(autouse=True)
def _quiet_logs():
    setup_logging(logging.ERROR)

@pytest.fixture
def counter():
    # fresh ordinals per scenario: first stream is s1
    return StreamCounter()
