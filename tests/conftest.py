"""Pytest fixtures for all tests."""
from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
