import logging

import pytest


@pytest.fixture(autouse=True)
def reset_vieta_logging():
    """Drop handlers installed by main_entry so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("vieta")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
