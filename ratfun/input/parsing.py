def parse_coefficients_string(input_string):
    """
    Parses a comma separated list of coefficients, highest degree first.

    :param input_string: A string of the format c_n,...,c_0
    :return: A list of floats
    """
    if input_string is None or input_string.strip() == "":
        raise ValueError("Expected a comma separated list of coefficients, found nothing")
    result = []
    for entry in input_string.split(","):
        entry = entry.strip()
        if entry == "":
            raise ValueError("Empty coefficient in '{}'".format(input_string))
        try:
            result.append(float(entry))
        except ValueError:
            raise ValueError("Expected a number, found '{}'".format(entry))
    return result


def parse_point(input_string):
    """
    Parses the point at which a function is evaluated.

    :param input_string: A decimal number, using '.' as decimal separator
    :return: The point as float
    """
    if input_string is None:
        raise ValueError("No point given")
    try:
        return float(input_string.strip())
    except ValueError:
        raise ValueError("Expected a number, found '{}'".format(input_string.strip()))
