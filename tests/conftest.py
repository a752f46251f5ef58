import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from onionplot.config import EnvelopeConfig


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("onionplot")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_config() -> EnvelopeConfig:
    return EnvelopeConfig(half_width=2.0, resolution=8)
