import os
import logging

from ratfun.util import Configuration
from ratfun.exceptions.configuration_error import ConfigurationError
from ratfun.input.parsing import parse_coefficients_string

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.realpath(__file__)), "ratfun.cfg")


class RatfunConfig(Configuration):
    # section names
    EVALUATION = "evaluation"
    OUTPUT = "output"
    DEMO = "demo"

    def __init__(self, config_file=DEFAULT_CONFIG_FILE):
        super().__init__(config_file)

    def get_tolerance(self):
        # Magnitude below which a denominator counts as zero
        tolerance = self.get_float(RatfunConfig.EVALUATION, "tolerance")
        if not tolerance > 0:
            raise ConfigurationError("Tolerance must be positive, got {}".format(tolerance))
        return tolerance

    def get_precision(self):
        # Number of decimals for displaying results
        precision = self.get_int(RatfunConfig.OUTPUT, "precision")
        if precision < 0:
            raise ConfigurationError("Precision must not be negative, got {}".format(precision))
        return precision

    def get_demo_coefficients(self, key):
        """
        Get the coefficients of one of the demonstration functions.
        :param key: Key in the demo section, e.g. 'linear_numerator'.
        :return: List of floats.
        """
        try:
            return parse_coefficients_string(self.get(RatfunConfig.DEMO, key))
        except ValueError as e:
            raise ConfigurationError("Invalid coefficients for {}: {}".format(key, e))


configuration = RatfunConfig()


def load_configuration(config_file=None):
    """
    (Re-)load the global configuration.
    :param config_file: Path to config file. If None, the default file shipped with ratfun is used.
    :return: The loaded configuration.
    """
    global configuration
    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE
    logger.debug("Load configuration from %s", config_file)
    configuration = RatfunConfig(config_file)
    return configuration
