"""
Textual representation of rational functions and their values.

Polynomials are written from the highest degree term down to the constant,
e.g. ``3*x^2 - 1*x + 5``. The leading coefficient carries its own sign, every
further coefficient is preceded by an explicit sign token.
"""
from ratfun.data.undefined import is_undefined

UNDEFINED_STRING = "undefined"


def format_number(value):
    """
    Locale independent string of a coefficient; integral values have no decimal part.

    :param value: A number
    :return: String of the number
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _power(exponent):
    if exponent == 0:
        return ""
    if exponent == 1:
        return "x"
    return "x^{}".format(exponent)


def _term(magnitude, exponent):
    if exponent == 0:
        return magnitude
    return "{}*{}".format(magnitude, _power(exponent))


def format_polynomial(coefficients):
    """
    :param coefficients: Coefficients, highest degree first
    :return: String such as '2*x - 4'
    """
    coefficients = list(coefficients)
    assert len(coefficients) > 0
    degree = len(coefficients) - 1
    result = _term(format_number(coefficients[0]), degree)
    for exponent, c in zip(range(degree - 1, -1, -1), coefficients[1:]):
        sign = "-" if c < 0 else "+"
        result += " {} {}".format(sign, _term(format_number(abs(c)), exponent))
    return result


def format_rational_function(numerator, denominator):
    """
    :param numerator: Numerator coefficients, highest degree first
    :param denominator: Denominator coefficients, highest degree first
    :return: String such as '(2*x - 4) / (1*x + 2)'
    """
    return "({}) / ({})".format(format_polynomial(numerator), format_polynomial(denominator))


def format_scaled(scale, base_string):
    return "{} * [{}]".format(format_number(scale), base_string)


def _symbolic_polynomial(name, degree):
    return " + ".join(_term("{}{}".format(name, exponent), exponent) for exponent in range(degree, -1, -1))


def _named_coefficients(name, coefficients):
    degree = len(coefficients) - 1
    return ", ".join("{}{} = {}".format(name, degree - i, format_number(c)) for i, c in enumerate(coefficients))


def format_coefficient_listing(numerator, denominator):
    """
    Lists the general form of the function and the value of each coefficient.

    :param numerator: Numerator coefficients, highest degree first
    :param denominator: Denominator coefficients, highest degree first
    :return: Multi-line string
    """
    numerator = list(numerator)
    denominator = list(denominator)
    lines = [
        "Function: ({}) / ({})".format(_symbolic_polynomial("a", len(numerator) - 1),
                                       _symbolic_polynomial("b", len(denominator) - 1)),
        "Numerator coefficients: {}".format(_named_coefficients("a", numerator)),
        "Denominator coefficients: {}".format(_named_coefficients("b", denominator)),
    ]
    return "\n".join(lines)


def format_scale_listing(scale, base_listing):
    return "{}\nScale factor: {}".format(base_listing, format_number(scale))


def format_result(value, precision=4):
    """
    :param value: Result of an evaluation
    :param precision: Number of decimals
    :return: Fixed-point string of the value, or 'undefined'
    """
    if is_undefined(value):
        return UNDEFINED_STRING
    return "{:.{}f}".format(value, precision)
