import logging

from ratfun.data.rationalfunction import RationalFunction
from ratfun.data.undefined import is_undefined
from ratfun.exceptions.invalid_configuration_error import InvalidConfigurationError
from ratfun.output.formatting import format_scaled, format_scale_listing

logger = logging.getLogger(__name__)


class ScaledRationalFunction(RationalFunction):
    """
    Multiplies every defined result of a wrapped rational function by a constant factor.
    Undefined results of the wrapped function stay undefined.
    """

    def __init__(self, base, scale):
        """
        :param base: RationalFunction to wrap; it is referenced, not copied
        :param scale: Real factor, 0 and negative values included
        """
        assert isinstance(base, RationalFunction)
        try:
            scale = float(scale)
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError("Invalid scale factor {!r}".format(scale)) from e
        self._base = base
        self._scale = scale
        logger.debug("Constructed %s", self)

    @property
    def base(self):
        return self._base

    @property
    def scale(self):
        return self._scale

    def evaluate(self, x):
        value = self._base.evaluate(x)
        if is_undefined(value):
            return value
        if self._scale == 0:
            # 0 * inf would be nan for an overflowing base
            return 0.0
        return value * self._scale

    def render(self):
        return format_scaled(self._scale, self._base.render())

    def describe(self):
        return format_scale_listing(self._scale, self._base.describe())

    def __eq__(self, other):
        return isinstance(other, ScaledRationalFunction) and self._scale == other._scale and self._base == other._base

    def __hash__(self):
        return hash((self._scale, self._base))

    def __repr__(self):
        return "ScaledRationalFunction({!r}, {!r})".format(self._base, self._scale)
