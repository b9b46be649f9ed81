"""
Descriptions of Nikon Type-2 makernote tags.

Type-2 applies to the E990 and D-series cameras such as the D1, D70 and D100.
Each rule below is registered for one tag id in :py:data:`RULES`.
"""

import logging
from typing import Optional

from makernote_tools.constants import NikonType2Tag
from makernote_tools.descriptors.base import (
    convert_bytes_to_version_string,
    format_decimal,
    format_float32,
    unknown,
)
from makernote_tools.metadata.directory import TagDirectory
from makernote_tools.metadata.nikon_type2 import NikonType2MakernoteDirectory
from makernote_tools.registry import new_registry

logger = logging.getLogger(__name__)

RULES, register = new_registry(attribute="tag_id")

AF_FOCUS_POSITIONS = {
    0: "Centre",
    1: "Top",
    2: "Bottom",
    3: "Left",
    4: "Right",
}


@register(NikonType2Tag.AF_FOCUS_POSITION)
def describe_auto_focus_position(directory: TagDirectory) -> Optional[str]:
    tag_id = NikonType2Tag.AF_FOCUS_POSITION
    values = directory.get_int_array(tag_id)
    if values is None:
        return None
    if len(values) != 4 or values[0] != 0 or values[2] != 0 or values[3] != 0:
        logger.debug("Unexpected AF focus position layout: %r", values)
        return unknown(directory.get_string(tag_id))
    position = AF_FOCUS_POSITIONS.get(values[1])
    if position is None:
        return unknown(values[1])
    return position


@register(NikonType2Tag.DIGITAL_ZOOM)
def describe_digital_zoom(directory: TagDirectory) -> Optional[str]:
    value = directory.get_rational(NikonType2Tag.DIGITAL_ZOOM)
    if value is None:
        return None
    if value.int_value() == 1:
        return "No digital zoom"
    return value.to_simple_string(True) + "x digital zoom"


@register(NikonType2Tag.ISO_1)
def describe_iso_setting(directory: TagDirectory) -> Optional[str]:
    tag_id = NikonType2Tag.ISO_1
    values = directory.get_int_array(tag_id)
    if values is None:
        return None
    if len(values) < 2 or values[0] != 0 or values[1] == 0:
        return unknown(directory.get_string(tag_id))
    return "ISO {}".format(values[1])


@register(NikonType2Tag.AUTO_FLASH_COMPENSATION)
def describe_auto_flash_compensation(directory: TagDirectory) -> str:
    """
    Always returns text; a missing or malformed value reads ``"Unknown"``.
    """
    ev = None
    if isinstance(directory, NikonType2MakernoteDirectory):
        ev = directory.get_auto_flash_compensation()
    if ev is None:
        return "Unknown"
    return format_decimal(ev.float_value()) + " EV"


@register(NikonType2Tag.LENS)
def describe_lens(directory: TagDirectory) -> Optional[str]:
    """
    Focal length and aperture range, such as ``24-120mm f/3.5-5.6``.
    """
    tag_id = NikonType2Tag.LENS
    values = directory.get_rational_array(tag_id)
    if values is None:
        return None
    if len(values) != 4:
        return directory.get_string(tag_id)
    return "{}-{}mm f/{}-{}".format(
        values[0].int_value(),
        values[1].int_value(),
        format_float32(values[2].float_value()),
        format_float32(values[3].float_value()),
    )


@register(NikonType2Tag.CAMERA_HUE_ADJUSTMENT)
def describe_hue_adjustment(directory: TagDirectory) -> Optional[str]:
    value = directory.get_string(NikonType2Tag.CAMERA_HUE_ADJUSTMENT)
    if value is None:
        return None
    return value + " degrees"


@register(NikonType2Tag.CAMERA_COLOR_MODE)
def describe_color_mode(directory: TagDirectory) -> Optional[str]:
    value = directory.get_string(NikonType2Tag.CAMERA_COLOR_MODE)
    if value is None:
        return None
    if value.startswith("MODE1"):
        return "Mode I (sRGB)"
    return value


@register(NikonType2Tag.FIRMWARE_VERSION)
def describe_firmware_version(directory: TagDirectory) -> Optional[str]:
    values = directory.get_int_array(NikonType2Tag.FIRMWARE_VERSION)
    if values is None:
        return None
    return convert_bytes_to_version_string(values)
