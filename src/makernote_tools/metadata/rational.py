"""
Exact fraction type used for rational tag values.
"""

import math
from typing import Any

from attrs import define, field


@define(frozen=True, repr=False)
class Rational:
    """
    Immutable numerator/denominator pair.

    Camera settings that need non-integer precision (exposure, zoom, focal
    length) are stored as rationals. A zero denominator is tolerated: the
    value still formats and converts, it just does not divide.

    Example::

        zoom = Rational(3, 2)
        zoom.float_value()            # 1.5
        zoom.to_simple_string(True)   # '1.5'

    .. py:attribute:: numerator
    .. py:attribute:: denominator
    """

    numerator: int = field(converter=int)
    denominator: int = field(default=1, converter=int)

    def int_value(self) -> int:
        """Value truncated toward zero, or 0 when the denominator is zero."""
        if self.denominator == 0:
            return 0
        quotient = abs(self.numerator) // abs(self.denominator)
        if (self.numerator < 0) != (self.denominator < 0):
            return -quotient
        return quotient

    def float_value(self) -> float:
        if self.denominator == 0:
            if self.numerator == 0:
                return math.nan
            return math.inf if self.numerator > 0 else -math.inf
        try:
            return self.numerator / self.denominator
        except OverflowError:
            if (self.numerator < 0) != (self.denominator < 0):
                return -math.inf
            return math.inf

    def is_integer(self) -> bool:
        if self.denominator == 0:
            return self.numerator == 0
        return self.denominator == 1 or self.numerator % self.denominator == 0

    def simplified(self) -> "Rational":
        """Return the rational reduced to lowest terms."""
        divisor = math.gcd(self.numerator, self.denominator)
        if divisor <= 1:
            return self
        return Rational(self.numerator // divisor, self.denominator // divisor)

    def to_simple_string(self, allow_decimal: bool) -> str:
        """
        Render the simplest form of the value.

        Integral values render as integers, ``2/4`` renders as ``1/2``. With
        `allow_decimal`, short decimal forms such as ``0.5`` or ``1.5`` are
        preferred over the fraction.
        """
        if self.denominator == 0 and self.numerator != 0:
            return str(self)
        if self.is_integer():
            return str(self.int_value())
        if self.numerator != 1 and self.denominator % self.numerator == 0:
            return Rational(
                1, self.denominator // self.numerator
            ).to_simple_string(allow_decimal)
        simple = self.simplified()
        if allow_decimal:
            text = repr(simple.float_value())
            if len(text) < 5:
                return text
        return str(simple)

    def __int__(self) -> int:
        return self.int_value()

    def __float__(self) -> float:
        return self.float_value()

    def __str__(self) -> str:
        return "%d/%d" % (self.numerator, self.denominator)

    def __repr__(self) -> str:
        return "Rational(%d, %d)" % (self.numerator, self.denominator)

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        p.text(str(self))
