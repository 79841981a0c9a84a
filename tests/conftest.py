import pytest

from colorhash.core import log as CH_log


@pytest.fixture(autouse=True)
def reset_verbosity():
    previous = CH_log.get_verbosity()
    yield
    CH_log.set_verbosity(previous)
