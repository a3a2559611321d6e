import sys

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def _reset_loguru():
    """CLI tests reconfigure loguru with a sink bound to the runner's stream.

    Restore a sink that always writes to the current sys.stderr so later
    tests never log into a closed stream.
    """
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="WARNING")
