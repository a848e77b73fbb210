import logging
from enum import Enum

import numpy

from ratfun.exceptions.invalid_configuration_error import InvalidConfigurationError

logger = logging.getLogger(__name__)


class Degree(Enum):
    linear = 1
    quadratic = 2

    def number_of_coefficients(self):
        return self.value + 1

    @classmethod
    def from_value(cls, value):
        """
        Get the degree from a Degree, its number or its name.

        :param value: Degree, 1, 2, 'linear' or 'quadratic'
        :return: The degree
        """
        if isinstance(value, Degree):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().lower()]
            except KeyError:
                raise InvalidConfigurationError("Unknown degree '{}'".format(value))
        try:
            return cls(value)
        except ValueError:
            raise InvalidConfigurationError("Unsupported degree {}, expected 1 or 2".format(value))


def is_zero_polynomial(coefficients, tolerance):
    """
    Is the polynomial zero for all x, i.e. are all coefficients (near-)zero.

    :param coefficients: Coefficients of the polynomial
    :param tolerance: Magnitude below which a coefficient is considered zero
    :return: True iff every coefficient is below the tolerance in magnitude.
    """
    return all(abs(c) < tolerance for c in coefficients)


def _to_coefficients(values, name, degree):
    if isinstance(values, (str, bytes)):
        raise InvalidConfigurationError("Invalid {} coefficients {!r}: expected a sequence of numbers".format(name, values))
    try:
        coefficients = tuple(float(v) for v in values)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError("Invalid {} coefficients {!r}: {}".format(name, values, e)) from e
    if len(coefficients) != degree.number_of_coefficients():
        raise InvalidConfigurationError(
            "A {} {} needs {} coefficients, got {}".format(degree.name, name, degree.number_of_coefficients(),
                                                           len(coefficients)))
    return coefficients


def _to_tolerance(tolerance):
    try:
        tolerance = float(tolerance)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError("Invalid tolerance {!r}".format(tolerance)) from e
    if not tolerance > 0:
        raise InvalidConfigurationError("Tolerance must be positive, got {}".format(tolerance))
    return tolerance


class Coefficients:
    """
    Numerator and denominator coefficients of a rational function,
    ordered from the highest degree term down to the constant term.
    Instances are immutable.
    """

    def __init__(self, numerator, denominator, degree, tolerance):
        """
        :param numerator: Iterable of numbers
        :param denominator: Iterable of numbers
        :param degree: Degree (or anything Degree.from_value accepts)
        :param tolerance: Magnitude below which the denominator is considered zero
        """
        degree = Degree.from_value(degree)
        tolerance = _to_tolerance(tolerance)
        numerator = _to_coefficients(numerator, "numerator", degree)
        denominator = _to_coefficients(denominator, "denominator", degree)
        if is_zero_polynomial(denominator, tolerance):
            logger.debug("Reject denominator %s, it is the zero polynomial", denominator)
            raise InvalidConfigurationError(
                "Denominator {} is identically zero".format(", ".join(map(str, denominator))))
        self._numerator = numerator
        self._denominator = denominator
        self._degree = degree
        self._tolerance = tolerance

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def degree(self):
        return self._degree

    @property
    def tolerance(self):
        return self._tolerance

    def numerator_at(self, x):
        return float(numpy.polyval(self._numerator, x))

    def denominator_at(self, x):
        return float(numpy.polyval(self._denominator, x))

    def __eq__(self, other):
        return isinstance(other, Coefficients) and self._degree == other._degree and \
               self._numerator == other._numerator and self._denominator == other._denominator

    def __hash__(self):
        return hash((self._degree, self._numerator, self._denominator))

    def __repr__(self):
        return "Coefficients({!r}, {!r}, {})".format(list(self._numerator), list(self._denominator), self._degree)
