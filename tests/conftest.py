from unittest.mock import Mock

import pytest
from loguru import logger


@pytest.fixture
def supplier():
    """A callable that records how it's used, configure `supplier.return_value` as needed."""
    return Mock(return_value="supplied")


@pytest.fixture
def consumer():
    return Mock(return_value=None)


@pytest.fixture
def logs():
    """Capture anything optionals logs while the test runs."""
    messages = []

    # the library disables itself on import, switch it back on for the duration of the test
    logger.enable("optionals")
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}|{name}|{message}")

    try:
        yield messages

    finally:
        logger.remove(sink_id)
        logger.disable("optionals")
