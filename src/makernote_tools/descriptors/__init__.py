"""
Description layer: turns raw tag values into display strings.

Rule tables are registered per directory namespace in :py:data:`DESCRIPTORS`.
Use :py:func:`get_descriptor` to obtain a descriptor for a directory::

    from makernote_tools.descriptors import get_descriptor

    descriptor = get_descriptor(directory)
    for tag in descriptor.describe_all():
        print(tag)
"""

import logging
from typing import Iterator, Mapping

from makernote_tools.descriptors import nikon_type2
from makernote_tools.descriptors.base import (
    Rule,
    TagDescriptor,
    convert_bytes_to_version_string,
    format_decimal,
    format_float32,
)
from makernote_tools.metadata.directory import Tag, TagDirectory
from makernote_tools.metadata.nikon_type2 import NikonType2MakernoteDirectory
from makernote_tools.registry import new_registry

logger = logging.getLogger(__name__)

DESCRIPTORS, register = new_registry()

DESCRIPTORS.update(
    {
        NikonType2MakernoteDirectory.NAME: nikon_type2.RULES,
    }
)


def get_rules(namespace: str) -> Mapping[int, Rule]:
    """Rule table for a namespace; empty when none is registered."""
    rules = DESCRIPTORS.get(namespace)
    if rules is None:
        logger.debug("No descriptor rules for %s", namespace)
        return {}
    return rules


def get_descriptor(directory: TagDirectory) -> TagDescriptor:
    """
    Return a descriptor bound to the rules of the directory's namespace.
    Directories without registered rules get a descriptor that renders every
    tag through :py:meth:`~makernote_tools.metadata.TagDirectory.get_string`.
    """
    return TagDescriptor(directory, get_rules(directory.name))


def describe_all(directory: TagDirectory) -> Iterator[Tag]:
    """Shortcut for ``get_descriptor(directory).describe_all()``."""
    return get_descriptor(directory).describe_all()


__all__ = [
    "DESCRIPTORS",
    "TagDescriptor",
    "convert_bytes_to_version_string",
    "describe_all",
    "format_decimal",
    "format_float32",
    "get_descriptor",
    "get_rules",
    "register",
]
