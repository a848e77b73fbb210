import sys
import os
import logging

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import ratfun.config

logging.basicConfig(filename="ratfun_script_test.log", format='%(levelname)s:%(message)s', level=logging.DEBUG)
ratfun.config.load_configuration()


@pytest.fixture
def logfile(tmp_path):
    return str(tmp_path / "ratfun.log")
