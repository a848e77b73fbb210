import pytest

from ratfun.input.parsing import parse_coefficients_string, parse_point


def test_parse_coefficients():
    assert parse_coefficients_string("2,-4") == [2.0, -4.0]
    assert parse_coefficients_string(" 3, -1 ,5 ") == [3.0, -1.0, 5.0]
    assert parse_coefficients_string("1.5,0,-9e-1") == [1.5, 0.0, -0.9]


@pytest.mark.parametrize("text", [None, "", "  ", "1,,2", "1,a", "1;2"])
def test_parse_coefficients_invalid(text):
    with pytest.raises(ValueError):
        parse_coefficients_string(text)


def test_parse_point():
    assert parse_point("3") == 3.0
    assert parse_point(" -2.5\n") == -2.5
    assert parse_point("1e-3") == 0.001


@pytest.mark.parametrize("text", [None, "", "abc", "1,5", "2 3"])
def test_parse_point_invalid(text):
    with pytest.raises(ValueError):
        parse_point(text)
