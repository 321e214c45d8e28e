import logging

import pytest


@pytest.fixture(autouse=True)
def reset_argx_logger():
    """Undo whatever setup_logging did to the argx logger."""
    logger = logging.getLogger("argx")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
