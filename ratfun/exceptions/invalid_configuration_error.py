class InvalidConfigurationError(Exception):
    """
    Error which is meant to be raised when the coefficients of a rational function
    do not describe a valid function, e.g. when the denominator is the zero polynomial.
    """

    def __init__(self, message):
        """
        Constructor.
        :param message: Error message.
        """
        super().__init__(message)
        self.message = message
