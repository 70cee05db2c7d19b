"""Root test configuration: loguru capture and sink reset"""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore a single stderr sink after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture(name="log_messages")
def log_messages_fixture():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
