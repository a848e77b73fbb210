import configparser
import logging

from ratfun.exceptions.configuration_error import ConfigurationError

logger = logging.getLogger(__name__)


class Configuration:
    """
    Configuration backed by an ini file.
    """

    def __init__(self, config_file):
        """
        Constructor.
        :param config_file: Path to config file.
        """
        self._config = configparser.ConfigParser()
        self._import_from_file(config_file)
        self._file_path = config_file

    def _import_from_file(self, config_file):
        """
        Import configuration from file.
        :param config_file: Configuration file.
        """
        parsed_files = self._config.read(config_file)
        if len(parsed_files) == 0:
            raise ConfigurationError(
                "Unable to read configuration file '{}'".format(config_file))
        logger.debug("Read configuration from %s", config_file)

    def check_existence(self, section, key):
        """
        Check if the given key exists in the configuration and raise a ConfigurationError if not.
        :param section: Section.
        :param key: Key.
        """
        if section not in self._config:
            raise ConfigurationError("Cannot find section {} in file {}".format(section, self._file_path))

        if key not in self._config[section]:
            raise ConfigurationError(
                "Cannot find key {} in section {} in file {}".format(key, section, self._file_path))

    def get(self, section, key):
        """
        Get config value for given key.
        :param section: Section.
        :param key: Key.
        :return: Config value.
        """
        self.check_existence(section, key)
        return self._config[section][key]

    def get_float(self, section, key):
        """
        Get config value as float.
        :param section: Section.
        :param key: Key.
        :return: Config value as float.
        """
        self.check_existence(section, key)
        try:
            return self._config.getfloat(section, key)
        except ValueError:
            raise ConfigurationError("Value of {} in section {} is not a number".format(key, section))

    def get_int(self, section, key):
        """
        Get config value as integer.
        :param section: Section.
        :param key: Key.
        :return: Config value as integer.
        """
        self.check_existence(section, key)
        try:
            return self._config.getint(section, key)
        except ValueError:
            raise ConfigurationError("Value of {} in section {} is not an integer".format(key, section))

    def get_all(self):
        """
        Get all entries of the configuration.
        :return: Dict with all entries.
        """
        result = {}
        for section in self._config.sections():
            result[section] = dict(self._config.items(section))
        return result
