import math

# Result of evaluating a rational function where its denominator vanishes
UNDEFINED = math.nan


def is_undefined(value):
    """
    Check whether an evaluation result is the undefined sentinel.

    :param value: Result of evaluate()
    :return: True iff the value carries no meaningful result.
    """
    return math.isnan(value)
