"""
makernote-tools: typed tag directories and human-readable descriptions for
camera makernote metadata.

Basic usage::

    from makernote_tools import NikonType2MakernoteDirectory, Rational
    from makernote_tools import get_descriptor
    from makernote_tools.constants import NikonType2Tag

    directory = NikonType2MakernoteDirectory.from_items({
        NikonType2Tag.LENS: [Rational(24, 1), Rational(120, 1),
                             Rational(35, 10), Rational(56, 10)],
        NikonType2Tag.ISO_1: [0, 200],
    })

    descriptor = get_descriptor(directory)
    descriptor.get_description(NikonType2Tag.LENS)   # '24-120mm f/3.5-5.6'

Architecture:

- :py:mod:`makernote_tools.metadata`: tag directories and typed values
- :py:mod:`makernote_tools.descriptors`: per-namespace formatting rules
- :py:mod:`makernote_tools.exceptions`: fatal reader faults

Directories are populated by a binary reader and frozen before they are
described; reading and describing never raise on malformed values.
"""

from makernote_tools.descriptors import TagDescriptor, describe_all, get_descriptor
from makernote_tools.exceptions import (
    ImageProcessingError,
    MetadataError,
    TiffProcessingError,
)
from makernote_tools.metadata import (
    NikonType2MakernoteDirectory,
    Rational,
    Tag,
    TagDirectory,
)
from makernote_tools.version import __version__

__all__ = [
    "ImageProcessingError",
    "MetadataError",
    "NikonType2MakernoteDirectory",
    "Rational",
    "Tag",
    "TagDescriptor",
    "TagDirectory",
    "TiffProcessingError",
    "__version__",
    "describe_all",
    "get_descriptor",
]
