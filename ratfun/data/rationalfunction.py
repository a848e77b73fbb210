import logging
from abc import ABC, abstractmethod

import ratfun.config
from ratfun.data.coefficients import Coefficients, Degree
from ratfun.data.undefined import UNDEFINED
from ratfun.output.formatting import format_rational_function, format_coefficient_listing

logger = logging.getLogger(__name__)


class RationalFunction(ABC):
    """
    Base class for rational functions f(x) = N(x) / D(x) in one variable.
    """

    @abstractmethod
    def evaluate(self, x):
        """
        Evaluate the function at a point.

        :param x: The point
        :return: The value as float, or UNDEFINED if the denominator vanishes at x
        """
        raise NotImplementedError("Abstract evaluation called")

    @abstractmethod
    def render(self):
        """
        :return: The formula as string, e.g. '(2*x - 4) / (1*x + 2)'
        """
        raise NotImplementedError("Abstract rendering called")

    @abstractmethod
    def describe(self):
        """
        :return: A multi-line listing of the formula and its coefficients
        """
        raise NotImplementedError("Abstract description called")

    def __str__(self):
        return self.render()


class PolynomialQuotient(RationalFunction):
    """Rational function given by the coefficients of its numerator and denominator.
    Subclasses fix the degree."""
    degree = None

    def __init__(self, numerator, denominator, tolerance=None):
        """
        :param numerator: Numerator coefficients, highest degree first
        :param denominator: Denominator coefficients, highest degree first
        :param tolerance: Magnitude below which the denominator counts as zero.
            Taken from the configuration if None.
        """
        if tolerance is None:
            tolerance = ratfun.config.configuration.get_tolerance()
        self._coefficients = Coefficients(numerator, denominator, self.degree, tolerance)
        logger.debug("Constructed %s", self)

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def tolerance(self):
        return self._coefficients.tolerance

    def evaluate(self, x):
        denominator = self._coefficients.denominator_at(x)
        if abs(denominator) < self._coefficients.tolerance:
            return UNDEFINED
        return self._coefficients.numerator_at(x) / denominator

    def render(self):
        return format_rational_function(self._coefficients.numerator, self._coefficients.denominator)

    def describe(self):
        return format_coefficient_listing(self._coefficients.numerator, self._coefficients.denominator)

    def __eq__(self, other):
        return type(self) is type(other) and self._coefficients == other._coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __repr__(self):
        return "{}({!r}, {!r})".format(type(self).__name__, list(self._coefficients.numerator),
                                       list(self._coefficients.denominator))


class LinearRationalFunction(PolynomialQuotient):
    """f(x) = (a1*x + a0) / (b1*x + b0)"""
    degree = Degree.linear


class QuadraticRationalFunction(PolynomialQuotient):
    """f(x) = (a2*x^2 + a1*x + a0) / (b2*x^2 + b1*x + b0)"""
    degree = Degree.quadratic
