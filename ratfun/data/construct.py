from ratfun.data.coefficients import Degree
from ratfun.data.rationalfunction import LinearRationalFunction, QuadraticRationalFunction
from ratfun.data.scaled import ScaledRationalFunction

_functions_by_degree = {Degree.linear: LinearRationalFunction, Degree.quadratic: QuadraticRationalFunction}


def make_rational_function(degree, numerator, denominator, scale=None, tolerance=None):
    """
    Construct a rational function of the given degree.

    :param degree: Degree, 1, 2, 'linear' or 'quadratic'
    :param numerator: Numerator coefficients, highest degree first
    :param denominator: Denominator coefficients, highest degree first
    :param scale: If not None, the function is wrapped in a ScaledRationalFunction with this factor
    :param tolerance: Magnitude below which the denominator counts as zero.
        Taken from the configuration if None.
    :return: The rational function
    :rtype: RationalFunction
    :raises InvalidConfigurationError: If the coefficients do not describe a rational function.
    """
    function_class = _functions_by_degree[Degree.from_value(degree)]
    function = function_class(numerator, denominator, tolerance)
    if scale is not None:
        function = ScaledRationalFunction(function, scale)
    return function
