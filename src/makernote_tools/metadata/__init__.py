"""
Tag directories and the typed values they hold.

All values stored in a directory are variants defined in
:py:mod:`makernote_tools.metadata.values`.
"""

from .directory import Tag as Tag, TagDirectory as TagDirectory
from .nikon_type2 import NikonType2MakernoteDirectory as NikonType2MakernoteDirectory
from .rational import Rational as Rational
from .values import (
    BaseValue as BaseValue,
    ByteArrayValue as ByteArrayValue,
    IntArrayValue as IntArrayValue,
    IntValue as IntValue,
    RationalArrayValue as RationalArrayValue,
    RationalValue as RationalValue,
    StringValue as StringValue,
    wrap as wrap,
)

__all__ = [
    "Tag",
    "TagDirectory",
    "NikonType2MakernoteDirectory",
    "Rational",
    "BaseValue",
    "ByteArrayValue",
    "IntArrayValue",
    "IntValue",
    "RationalArrayValue",
    "RationalValue",
    "StringValue",
    "wrap",
]
