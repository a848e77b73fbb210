import logging
import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import ratfun.config

logging.basicConfig(filename="ratfun_test.log", format='%(levelname)s:%(message)s', level=logging.DEBUG)
ratfun.config.load_configuration()


@pytest.fixture
def tolerance():
    return ratfun.config.configuration.get_tolerance()
