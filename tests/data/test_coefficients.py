import pytest

from ratfun.data.coefficients import Coefficients, Degree, is_zero_polynomial
from ratfun.exceptions.invalid_configuration_error import InvalidConfigurationError

TOLERANCE = 1e-9


def test_degree_from_value():
    assert Degree.from_value(1) == Degree.linear
    assert Degree.from_value(2) == Degree.quadratic
    assert Degree.from_value("linear") == Degree.linear
    assert Degree.from_value(" Quadratic ") == Degree.quadratic
    assert Degree.from_value(Degree.quadratic) == Degree.quadratic
    assert Degree.linear.number_of_coefficients() == 2
    assert Degree.quadratic.number_of_coefficients() == 3


@pytest.mark.parametrize("value", [0, 3, "cubic", ""])
def test_degree_unsupported(value):
    with pytest.raises(InvalidConfigurationError):
        Degree.from_value(value)


def test_zero_polynomial():
    assert is_zero_polynomial([0, 0], TOLERANCE)
    assert is_zero_polynomial([1e-12, -1e-10, 0], TOLERANCE)
    assert not is_zero_polynomial([0, 1e-8], TOLERANCE)
    assert not is_zero_polynomial([0, 1, 2], TOLERANCE)


def test_valid_coefficients():
    linear = Coefficients([2, -4], [1, 2], Degree.linear, TOLERANCE)
    assert linear.numerator == (2.0, -4.0)
    assert linear.denominator == (1.0, 2.0)
    assert linear.degree == Degree.linear
    assert linear.tolerance == TOLERANCE

    quadratic = Coefficients([3, -1, 5], [0, 1, 2], Degree.quadratic, TOLERANCE)
    assert quadratic.denominator == (0.0, 1.0, 2.0)


@pytest.mark.parametrize("denominator,degree", [([0, 0], Degree.linear), ([0, 0, 0], Degree.quadratic),
                                                ([1e-10, -1e-10], Degree.linear)])
def test_zero_denominator(denominator, degree):
    numerator = [1] * len(denominator)
    with pytest.raises(InvalidConfigurationError) as excinfo:
        Coefficients(numerator, denominator, degree, TOLERANCE)
    assert "identically zero" in excinfo.value.message


@pytest.mark.parametrize("numerator,denominator,degree", [
    ([1, 2, 3], [1, 2], Degree.linear),
    ([1, 2], [1, 2, 3], Degree.linear),
    ([1, 2], [1, 2], Degree.quadratic),
    ([], [], Degree.linear),
])
def test_length_mismatch(numerator, denominator, degree):
    with pytest.raises(InvalidConfigurationError):
        Coefficients(numerator, denominator, degree, TOLERANCE)


def test_non_numeric_coefficients():
    with pytest.raises(InvalidConfigurationError):
        Coefficients(["a", 1], [1, 2], Degree.linear, TOLERANCE)
    with pytest.raises(InvalidConfigurationError):
        Coefficients([1, None], [1, 2], Degree.linear, TOLERANCE)


def test_polynomial_values():
    coefficients = Coefficients([3, -1, 5], [1, 0, -9], Degree.quadratic, TOLERANCE)
    assert coefficients.numerator_at(2) == pytest.approx(3 * 4 - 2 + 5)
    assert coefficients.denominator_at(2) == pytest.approx(4 - 9)
    assert coefficients.denominator_at(3) == 0.0


def test_immutable():
    coefficients = Coefficients([2, -4], [1, 2], Degree.linear, TOLERANCE)
    with pytest.raises(AttributeError):
        coefficients.numerator = (1, 1)
    assert coefficients == Coefficients((2.0, -4.0), (1.0, 2.0), Degree.linear, TOLERANCE)
    assert coefficients != Coefficients((2.0, -4.0), (1.0, 3.0), Degree.linear, TOLERANCE)


@pytest.mark.parametrize("tolerance", [0, -1e-9, float("nan"), "small", None])
def test_invalid_tolerance(tolerance):
    with pytest.raises(InvalidConfigurationError):
        Coefficients([1, 1], [0, 0], Degree.linear, tolerance)
    with pytest.raises(InvalidConfigurationError):
        Coefficients([1, 1], [1, 2], Degree.linear, tolerance)


@pytest.mark.parametrize("numerator,denominator", [("24", [1, 2]), ([2, 4], "12"), ([2, 4], b"12")])
def test_string_coefficients(numerator, denominator):
    with pytest.raises(InvalidConfigurationError):
        Coefficients(numerator, denominator, Degree.linear, TOLERANCE)
