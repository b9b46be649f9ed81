"""
Tag descriptor base and shared formatters.

A descriptor renders the raw values of a
:py:class:`~makernote_tools.metadata.TagDirectory` as display strings. Each
tag with special formatting has a rule, a plain function taking the
directory::

    def describe_hue(directory):
        value = directory.get_string(NikonType2Tag.CAMERA_HUE_ADJUSTMENT)
        if value is None:
            return None
        return value + " degrees"

Tags without a rule fall back to
:py:meth:`~makernote_tools.metadata.TagDirectory.get_string`.

Rules return ``None`` when the tag is absent and an ``"Unknown (...)"``
string when the value is present but malformed. They never raise.
"""

import logging
import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Callable, Iterator, Mapping, Optional, Sequence

import numpy as np

from makernote_tools.metadata.directory import Tag, TagDirectory

logger = logging.getLogger(__name__)

Rule = Callable[[TagDirectory], Optional[str]]


class TagDescriptor:
    """
    Dispatch from tag ids to formatting rules for one directory.

    :param directory: the directory to describe.
    :param rules: mapping of tag id to rule.
    """

    def __init__(
        self, directory: TagDirectory, rules: Optional[Mapping[int, Rule]] = None
    ) -> None:
        self._directory = directory
        self._rules = rules or {}

    @property
    def directory(self) -> TagDirectory:
        return self._directory

    def get_description(self, tag_id: int) -> Optional[str]:
        """
        Display text for the tag, or `None` when there is nothing to show.
        """
        rule = self._rules.get(tag_id)
        if rule is None:
            return self._directory.get_string(tag_id)
        return rule(self._directory)

    def describe_all(self) -> Iterator[Tag]:
        """
        Iterate over report rows for every present tag with a description.
        """
        for tag_id in self._directory:
            description = self.get_description(tag_id)
            if description is None:
                continue
            yield Tag(
                tag_id=tag_id,
                name=self._directory.get_tag_name(tag_id),
                description=description,
                directory_name=self._directory.name,
            )

    def __repr__(self) -> str:
        return "{cls}({directory!r})".format(
            cls=self.__class__.__name__, directory=self._directory
        )


def unknown(raw: object) -> str:
    return "Unknown ({raw})".format(raw=raw)


def convert_bytes_to_version_string(
    components: Optional[Sequence[int]], major_digits: int = 2
) -> Optional[str]:
    """
    Render up to four version bytes as a dotted version string.

    Components are usually ASCII digits; small values are shifted into the
    digit range. A leading zero is dropped, and a dot is inserted before the
    component at index `major_digits`::

        convert_bytes_to_version_string(b"0210")        # '2.10'
        convert_bytes_to_version_string([0, 1, 0, 2])   # '1.02'
    """
    if components is None:
        return None
    version = []
    for index, component in enumerate(components[:4]):
        if index == major_digits:
            version.append(".")
        code = component & 0xFFFF
        if code < ord("0"):
            code += ord("0")
        char = chr(code)
        if index == 0 and char == "0":
            continue
        version.append(char)
    return "".join(version)


def format_decimal(value: float, places: int = 2) -> str:
    """
    Format a number with at most `places` fraction digits, rounding half to
    even and trimming trailing zeros. Output does not depend on the locale.
    """
    if not math.isfinite(value):
        return str(value)
    number = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as context:
        context.prec = max(context.prec, number.adjusted() + places + 2)
        text = format(number.quantize(quantum, ROUND_HALF_EVEN), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_float32(value: float) -> str:
    """
    Shortest text that identifies the value as a 32-bit float, so ``1 / 3``
    renders as ``0.33333334`` and ``3.5`` as ``3.5``.
    """
    with np.errstate(over="ignore"):
        return str(np.float32(value))
