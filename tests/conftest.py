"""Pytest configuration for makernote-tools tests."""

from typing import Any, Iterator

import pytest

from makernote_tools.constants import NikonType2Tag
from makernote_tools.metadata import NikonType2MakernoteDirectory, Rational


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "nikon: mark test as exercising Nikon Type-2 makernote values",
    )


@pytest.fixture
def nikon_directory() -> Iterator[NikonType2MakernoteDirectory]:
    """A frozen Nikon Type-2 directory as a D100 would write it."""
    yield NikonType2MakernoteDirectory.from_items(
        {
            NikonType2Tag.FIRMWARE_VERSION: b"0200",
            NikonType2Tag.ISO_1: [0, 200],
            NikonType2Tag.QUALITY_AND_FILE_FORMAT: "FINE",
            NikonType2Tag.AUTO_FLASH_COMPENSATION: b"\xfa\x01\x06\x00",
            NikonType2Tag.LENS: [
                Rational(24, 1),
                Rational(120, 1),
                Rational(35, 10),
                Rational(56, 10),
            ],
            NikonType2Tag.DIGITAL_ZOOM: Rational(1, 1),
            NikonType2Tag.AF_FOCUS_POSITION: [0, 2, 0, 0],
            NikonType2Tag.CAMERA_COLOR_MODE: "MODE1a",
            NikonType2Tag.CAMERA_HUE_ADJUSTMENT: "3",
        }
    )
