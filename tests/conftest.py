import logging

import pytest


@pytest.fixture(autouse=True)
def fresh_logger():
    # handler binds sys.stderr when created; rebind to each test's capture
    logger = logging.getLogger("filecrypt")
    logger.handlers.clear()
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
