"""
Tagged raw values stored in a tag directory.

Every value a binary reader hands to a
:py:class:`~makernote_tools.metadata.directory.TagDirectory` is wrapped in one
of the variants here. The variant set is closed:

- :py:class:`IntValue`
- :py:class:`IntArrayValue`
- :py:class:`RationalValue`
- :py:class:`RationalArrayValue`
- :py:class:`ByteArrayValue`
- :py:class:`StringValue`

All variants implement the coercion methods of :py:class:`BaseValue`. A
coercion that does not make sense for a variant returns ``None`` rather than
raising, so typed accessors on the directory never fail on mistyped data.
The only coercions allowed across variants are numeric widening (integers to
rationals with denominator 1, bytes to integers) and narrowing integer arrays
to bytes when every element fits. Arrays are never turned into scalars.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from attrs import define, field
from attrs.validators import deep_iterable, instance_of

from makernote_tools.metadata.rational import Rational

logger = logging.getLogger(__name__)


def _join(items: Sequence[Any]) -> str:
    return ", ".join(str(item) for item in items)


class BaseValue:
    """
    Base of the tagged value variants.

    .. py:method:: to_int(self)
    .. py:method:: to_int_array(self)
    .. py:method:: to_rational(self)
    .. py:method:: to_rational_array(self)
    .. py:method:: to_byte_array(self)
    .. py:method:: to_string(self)

        Canonical text form. Every variant has one.
    """

    def to_int(self) -> Optional[int]:
        return None

    def to_int_array(self) -> Optional[Tuple[int, ...]]:
        return None

    def to_rational(self) -> Optional[Rational]:
        return None

    def to_rational_array(self) -> Optional[Tuple[Rational, ...]]:
        return None

    def to_byte_array(self) -> Optional[bytes]:
        return None

    def to_string(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.to_string()


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, int):
        raise TypeError("byte array cannot be built from int: %r" % (value,))
    return bytes(value)


def _check_int(instance: Any, attribute: Any, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            "'{name}' must be int, got {value!r}".format(
                name=attribute.name, value=value
            )
        )


@define(frozen=True)
class IntValue(BaseValue):
    """
    Signed or unsigned integer.
    """

    value: int = field(validator=_check_int)

    def to_int(self) -> Optional[int]:
        return self.value

    def to_rational(self) -> Optional[Rational]:
        return Rational(self.value, 1)

    def to_string(self) -> str:
        return str(self.value)


@define(frozen=True)
class IntArrayValue(BaseValue):
    """
    Array of integers, such as SHORT or LONG values with a count above one.
    """

    values: Tuple[int, ...] = field(
        converter=tuple, validator=deep_iterable(_check_int)
    )

    def to_int_array(self) -> Optional[Tuple[int, ...]]:
        return self.values

    def to_rational_array(self) -> Optional[Tuple[Rational, ...]]:
        return tuple(Rational(value, 1) for value in self.values)

    def to_byte_array(self) -> Optional[bytes]:
        if all(0 <= value <= 0xFF for value in self.values):
            return bytes(self.values)
        logger.debug("Integer array does not fit in bytes: %r", self.values)
        return None

    def to_string(self) -> str:
        return _join(self.values)


@define(frozen=True)
class RationalValue(BaseValue):
    """
    Single rational.
    """

    value: Rational = field(validator=instance_of(Rational))

    def to_rational(self) -> Optional[Rational]:
        return self.value

    def to_string(self) -> str:
        return str(self.value)


@define(frozen=True)
class RationalArrayValue(BaseValue):
    """
    Array of rationals.
    """

    values: Tuple[Rational, ...] = field(
        converter=tuple, validator=deep_iterable(instance_of(Rational))
    )

    def to_rational_array(self) -> Optional[Tuple[Rational, ...]]:
        return self.values

    def to_string(self) -> str:
        return _join(self.values)


@define(frozen=True)
class ByteArrayValue(BaseValue):
    """
    Raw bytes, such as UNDEFINED or BYTE values. Elements read back as
    unsigned integers.
    """

    value: bytes = field(converter=_to_bytes)

    def to_byte_array(self) -> Optional[bytes]:
        return self.value

    def to_int_array(self) -> Optional[Tuple[int, ...]]:
        return tuple(self.value)

    def to_string(self) -> str:
        return _join(self.value)


@define(frozen=True)
class StringValue(BaseValue):
    """
    Text value, such as an ASCII tag with its terminator removed.
    """

    value: str = field(validator=instance_of(str))

    def to_string(self) -> str:
        return self.value


def wrap(value: Any) -> BaseValue:
    """
    Build a tagged value from a plain Python value.

    Used by readers populating a directory::

        wrap(3)                          # IntValue
        wrap([0, 200])                   # IntArrayValue
        wrap(Rational(35, 10))           # RationalValue
        wrap(b"0200")                    # ByteArrayValue

    :raise TypeError: when the value has no matching variant.
    """
    if isinstance(value, BaseValue):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a tag value: %r" % value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, Rational):
        return RationalValue(value)
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ByteArrayValue(value)
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(item, Rational) for item in value):
            return RationalArrayValue(value)
        return IntArrayValue(value)
    raise TypeError("Unsupported tag value: %r" % (value,))
