"""
Tag directory structure.

A directory holds the decoded tags of one metadata segment, keyed by integer
tag id. A binary reader populates it once and freezes it; from then on it is
a read-only snapshot that can be shared freely.

Example::

    from makernote_tools.metadata import Rational, TagDirectory

    directory = TagDirectory(name="Example")
    directory.set(0x0086, Rational(2, 1))
    directory.freeze()

    directory.get_rational(0x0086)   # Rational(2, 1)
    directory.get_int(0x0086)        # None, a rational is not an int
    directory.get_string(0x0999)     # None, tag not present

Typed getters return ``None`` when the tag is missing or its stored variant
cannot be read in the requested shape. They never raise.
"""

import logging
from typing import Any, ClassVar, Dict, Iterator, Mapping, Optional, Tuple, TypeVar

from attrs import Factory, define, field

from makernote_tools.exceptions import MetadataError
from makernote_tools.metadata.rational import Rational
from makernote_tools.metadata.values import BaseValue, wrap

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="TagDirectory")


@define(repr=False)
class TagDirectory:
    """
    Lenient key/value store over the tags of one metadata segment.

    Subclasses describe one tag namespace through the ``NAME`` and
    ``TAG_NAMES`` class attributes.

    .. py:attribute:: name

        Tag namespace, for example ``"NikonType2Makernote"``.
    """

    NAME: ClassVar[str] = "Unknown"
    TAG_NAMES: ClassVar[Mapping[int, str]] = {}

    name: str = field(
        default=Factory(lambda self: type(self).NAME, takes_self=True)
    )
    _values: Dict[int, BaseValue] = field(factory=dict, init=False)
    _frozen: bool = field(default=False, init=False)

    @classmethod
    def from_items(cls: type[T], items: Mapping[int, Any], **kwargs: Any) -> T:
        """
        Create a frozen directory from a mapping of tag ids to values.
        """
        directory = cls(**kwargs)
        for tag_id, value in items.items():
            directory.set(tag_id, value)
        directory.freeze()
        return directory

    @property
    def frozen(self) -> bool:
        return self._frozen

    def set(self, tag_id: int, value: Any) -> None:
        """
        Store a tag value. Plain Python values are wrapped with
        :py:func:`~makernote_tools.metadata.values.wrap`.

        :raise MetadataError: when the directory is frozen or the tag is
            already set.
        """
        if self._frozen:
            raise MetadataError(
                "Directory %s is frozen; cannot set tag 0x%04x"
                % (self.name, tag_id)
            )
        if tag_id in self._values:
            raise MetadataError(
                "Tag 0x%04x is already set in directory %s" % (tag_id, self.name)
            )
        self._values[int(tag_id)] = wrap(value)

    def freeze(self) -> None:
        """Mark population as finished."""
        self._frozen = True

    def contains(self, tag_id: int) -> bool:
        return tag_id in self._values

    def tag_ids(self) -> Tuple[int, ...]:
        return tuple(self._values)

    def get_value(self, tag_id: int) -> Optional[BaseValue]:
        return self._values.get(tag_id)

    def get_int(self, tag_id: int) -> Optional[int]:
        return self._coerce(tag_id, "to_int")

    def get_int_array(self, tag_id: int) -> Optional[Tuple[int, ...]]:
        return self._coerce(tag_id, "to_int_array")

    def get_rational(self, tag_id: int) -> Optional[Rational]:
        return self._coerce(tag_id, "to_rational")

    def get_rational_array(self, tag_id: int) -> Optional[Tuple[Rational, ...]]:
        return self._coerce(tag_id, "to_rational_array")

    def get_byte_array(self, tag_id: int) -> Optional[bytes]:
        return self._coerce(tag_id, "to_byte_array")

    def get_string(self, tag_id: int) -> Optional[str]:
        """
        Tag value as text. Non-string variants render in their canonical
        form: decimal integers, ``n/d`` rationals, arrays joined by ``", "``.
        """
        return self._coerce(tag_id, "to_string")

    def get_tag_name(self, tag_id: int) -> str:
        name = self.TAG_NAMES.get(tag_id)
        if name is None:
            return "Unknown tag (0x%04x)" % tag_id
        return name

    def _coerce(self, tag_id: int, method: str) -> Any:
        value = self._values.get(tag_id)
        if value is None:
            return None
        result = getattr(value, method)()
        if result is None:
            logger.debug(
                "%s in %s is %s; %s not possible",
                self.get_tag_name(tag_id),
                self.name,
                type(value).__name__,
                method,
            )
        return result

    def __contains__(self, tag_id: Any) -> bool:
        return self._values.__contains__(tag_id)

    def __iter__(self) -> Iterator[int]:
        return self._values.__iter__()

    def __len__(self) -> int:
        return self._values.__len__()

    def __repr__(self) -> str:
        return "{cls}(name={name!r}, tags={count})".format(
            cls=self.__class__.__name__, name=self.name, count=len(self)
        )

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("{name}(...)".format(name=self.__class__.__name__))
            return

        with p.group(2, "{name}(".format(name=self.name), ")"):
            p.breakable("")
            for idx, tag_id in enumerate(self._values):
                if idx:
                    p.text(",")
                    p.breakable()
                p.text("{tag}: ".format(tag=self.get_tag_name(tag_id)))
                p.text(self._values[tag_id].to_string())
            p.breakable("")


@define
class Tag:
    """
    One row of a metadata report: a present tag and its description.
    """

    tag_id: int
    name: str
    description: str
    directory_name: str

    def __str__(self) -> str:
        return "[{directory}] {name} - {description}".format(
            directory=self.directory_name,
            name=self.name,
            description=self.description,
        )
