#!/usr/bin/env python3

import configparser
import os
import logging

thisfilepath = os.path.dirname(os.path.realpath(__file__))

DEFAULT_TOLERANCE = 1e-9
DEFAULT_PRECISION = 4


def get_initial_config(config, tolerance=None, precision=None):
    # Degeneracy check of denominators
    config_evaluation = {}
    config_evaluation["tolerance"] = str(tolerance if tolerance is not None else DEFAULT_TOLERANCE)
    config["evaluation"] = config_evaluation

    # Display of results
    config_output = {}
    config_output["precision"] = str(precision if precision is not None else DEFAULT_PRECISION)
    config["output"] = config_output

    # Functions of the demonstration
    config_demo = {}
    config_demo["linear_numerator"] = "2,-4"
    config_demo["linear_denominator"] = "1,2"
    config_demo["quadratic_numerator"] = "3,-1,5"
    config_demo["quadratic_denominator"] = "1,0,-9"
    config["demo"] = config_demo


def write_initial_config(tolerance=None, precision=None, path=None):
    """
    Write the configuration file of ratfun.
    :param tolerance: Magnitude below which denominators count as zero.
    :param precision: Number of decimals of displayed results.
    :param path: Target file. Defaults to the file shipped within the ratfun package.
    :return: Path of the written file.
    """
    config = configparser.ConfigParser()
    get_initial_config(config, tolerance, precision)
    if path is None:
        path = os.path.join(thisfilepath, "ratfun", "ratfun.cfg")
    logging.info("Writing config to " + path)
    with open(path, 'w') as configfile:
        config.write(configfile)
    return path


if __name__ == "__main__":
    write_initial_config()
