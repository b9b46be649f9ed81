import logging

import pytest

from makernote_tools.constants import NikonType2Tag
from makernote_tools.descriptors import get_descriptor
from makernote_tools.descriptors.nikon_type2 import (
    RULES,
    describe_auto_flash_compensation,
    describe_auto_focus_position,
    describe_color_mode,
    describe_digital_zoom,
    describe_firmware_version,
    describe_hue_adjustment,
    describe_iso_setting,
    describe_lens,
)
from makernote_tools.metadata.directory import TagDirectory
from makernote_tools.metadata.nikon_type2 import NikonType2MakernoteDirectory
from makernote_tools.metadata.rational import Rational

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.nikon


def describe(tag_id, value):
    directory = NikonType2MakernoteDirectory.from_items({tag_id: value})
    return get_descriptor(directory).get_description(tag_id)


def test_rules_are_registered():
    assert RULES == {
        NikonType2Tag.LENS: describe_lens,
        NikonType2Tag.CAMERA_HUE_ADJUSTMENT: describe_hue_adjustment,
        NikonType2Tag.CAMERA_COLOR_MODE: describe_color_mode,
        NikonType2Tag.AUTO_FLASH_COMPENSATION: describe_auto_flash_compensation,
        NikonType2Tag.ISO_1: describe_iso_setting,
        NikonType2Tag.DIGITAL_ZOOM: describe_digital_zoom,
        NikonType2Tag.AF_FOCUS_POSITION: describe_auto_focus_position,
        NikonType2Tag.FIRMWARE_VERSION: describe_firmware_version,
    }
    assert describe_lens.tag_id == NikonType2Tag.LENS


@pytest.mark.parametrize(
    "value, expected",
    [
        (
            [Rational(24, 1), Rational(120, 1), Rational(35, 10), Rational(56, 10)],
            "24-120mm f/3.5-5.6",
        ),
        (
            [Rational(50, 1), Rational(50, 1), Rational(14, 10), Rational(14, 10)],
            "50-50mm f/1.4-1.4",
        ),
        (
            [Rational(180, 1), Rational(180, 1), Rational(28, 10), Rational(4, 1)],
            "180-180mm f/2.8-4.0",
        ),
        (
            [Rational(24, 1), Rational(120, 1), Rational(35, 10)],
            "24/1, 120/1, 35/10",
        ),
        ([24, 120, 3, 5], "24-120mm f/3.0-5.0"),
        (
            [Rational(18, 1), Rational(55, 1), Rational(1, 3), Rational(10, 3)],
            "18-55mm f/0.33333334-3.3333333",
        ),
        (
            [Rational(24, 1), Rational(1, 0), Rational(10**400, 1), Rational(0, 0)],
            "24-0mm f/inf-nan",
        ),
        ("24-120mm", None),
    ],
)
def test_lens(value, expected):
    assert describe(NikonType2Tag.LENS, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ([0, 0, 0, 0], "Centre"),
        ([0, 1, 0, 0], "Top"),
        ([0, 2, 0, 0], "Bottom"),
        ([0, 3, 0, 0], "Left"),
        ([0, 4, 0, 0], "Right"),
        ([0, 7, 0, 0], "Unknown (7)"),
        ([0, 2, 0, 1], "Unknown (0, 2, 0, 1)"),
        ([1, 2, 0, 0], "Unknown (1, 2, 0, 0)"),
        ([0, 2, 0], "Unknown (0, 2, 0)"),
        (b"\x00\x01\x00\x00", "Top"),
        ("Centre", None),
    ],
)
def test_auto_focus_position(value, expected):
    assert describe(NikonType2Tag.AF_FOCUS_POSITION, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (Rational(1, 1), "No digital zoom"),
        (Rational(100, 100), "No digital zoom"),
        (Rational(3, 2), "No digital zoom"),
        (Rational(2, 1), "2x digital zoom"),
        (Rational(5, 2), "2.5x digital zoom"),
        (Rational(0, 1), "0x digital zoom"),
        (2, "2x digital zoom"),
        ([2, 1], None),
    ],
)
def test_digital_zoom(value, expected):
    assert describe(NikonType2Tag.DIGITAL_ZOOM, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ([0, 200], "ISO 200"),
        ([0, 1600, 0], "ISO 1600"),
        ([1, 200], "Unknown (1, 200)"),
        ([0, 0], "Unknown (0, 0)"),
        ([0], "Unknown (0)"),
        ([], "Unknown ()"),
        (200, None),
    ],
)
def test_iso_setting(value, expected):
    assert describe(NikonType2Tag.ISO_1, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"\xfa\x01\x06\x00", "-1 EV"),
        (b"\x00\x01\x06\x00", "0 EV"),
        (b"\x02\x01\x06\x00", "0.33 EV"),
        (b"\x03\x01\x06\x00", "0.5 EV"),
        (b"\xfc\x01\x06\x00", "-0.67 EV"),
        ([12, 1, 6], "2 EV"),
        ([10**15, 10**15, 1], "1" + "0" * 30 + " EV"),
        ([10**200, 10**200, 1], "inf EV"),
        ([-(10**200), 10**200, 1], "-inf EV"),
        ([1, 1, 0], "Unknown"),
        ("Off", "Unknown"),
    ],
)
def test_auto_flash_compensation(value, expected):
    assert describe(NikonType2Tag.AUTO_FLASH_COMPENSATION, value) == expected


def test_auto_flash_compensation_absent():
    assert describe_auto_flash_compensation(NikonType2MakernoteDirectory()) == "Unknown"
    assert (
        get_descriptor(NikonType2MakernoteDirectory()).get_description(
            NikonType2Tag.AUTO_FLASH_COMPENSATION
        )
        == "Unknown"
    )


def test_auto_flash_compensation_generic_directory():
    directory = TagDirectory.from_items(
        {NikonType2Tag.AUTO_FLASH_COMPENSATION: [6, 1, 6]},
        name="NikonType2Makernote",
    )
    assert describe_auto_flash_compensation(directory) == "Unknown"


@pytest.mark.parametrize(
    "value, expected",
    [("3", "3 degrees"), ("-9", "-9 degrees"), (3, "3 degrees")],
)
def test_hue_adjustment(value, expected):
    assert describe(NikonType2Tag.CAMERA_HUE_ADJUSTMENT, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("MODE1a", "Mode I (sRGB)"),
        ("MODE1", "Mode I (sRGB)"),
        ("MODE2", "MODE2"),
        ("mode1", "mode1"),
        ("", ""),
    ],
)
def test_color_mode(value, expected):
    assert describe(NikonType2Tag.CAMERA_COLOR_MODE, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"0200", "2.00"),
        (b"0210", "2.10"),
        ([0x30, 0x31, 0x30, 0x33], "1.03"),
        ("0200", None),
    ],
)
def test_firmware_version(value, expected):
    assert describe(NikonType2Tag.FIRMWARE_VERSION, value) == expected


@pytest.mark.parametrize("tag_id", [tag for tag in RULES])
def test_absent_tags(tag_id):
    description = get_descriptor(NikonType2MakernoteDirectory()).get_description(
        tag_id
    )
    if tag_id == NikonType2Tag.AUTO_FLASH_COMPENSATION:
        assert description == "Unknown"
    else:
        assert description is None


def test_tags_without_rule_fall_back(nikon_directory):
    descriptor = get_descriptor(nikon_directory)
    assert descriptor.get_description(NikonType2Tag.QUALITY_AND_FILE_FORMAT) == "FINE"
    assert descriptor.get_description(NikonType2Tag.CAMERA_SERIAL_NUMBER) is None


def test_idempotent(nikon_directory):
    descriptor = get_descriptor(nikon_directory)
    first = [descriptor.get_description(tag_id) for tag_id in nikon_directory]
    second = [descriptor.get_description(tag_id) for tag_id in nikon_directory]
    assert first == second
    assert [str(tag) for tag in descriptor.describe_all()] == [
        str(tag) for tag in descriptor.describe_all()
    ]


def test_describe_all(nikon_directory):
    rows = [str(tag) for tag in get_descriptor(nikon_directory).describe_all()]
    assert rows == [
        "[NikonType2Makernote] Firmware Version - 2.00",
        "[NikonType2Makernote] ISO - ISO 200",
        "[NikonType2Makernote] Quality & File Format - FINE",
        "[NikonType2Makernote] Auto Flash Compensation - -1 EV",
        "[NikonType2Makernote] Lens - 24-120mm f/3.5-5.6",
        "[NikonType2Makernote] Digital Zoom - No digital zoom",
        "[NikonType2Makernote] AF Focus Position - Bottom",
        "[NikonType2Makernote] Colour Mode - Mode I (sRGB)",
        "[NikonType2Makernote] Camera Hue Adjustment - 3 degrees",
    ]
