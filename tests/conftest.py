import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Give each test a freshly configured logger."""
    yield
    logger = logging.getLogger("voi_sim")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if hasattr(logger, "_configured"):
        del logger._configured
    logger.propagate = True
