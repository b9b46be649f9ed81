"""
Nikon Type-2 makernote directory.

Type-2 applies to the E990 and D-series cameras such as the D1, D70 and D100.
"""

import logging
from typing import Optional

from attrs import define

from makernote_tools.constants import NikonType2Tag
from makernote_tools.metadata.directory import TagDirectory
from makernote_tools.metadata.rational import Rational
from makernote_tools.metadata.values import ByteArrayValue

logger = logging.getLogger(__name__)

TAG_NAMES = {
    NikonType2Tag.FIRMWARE_VERSION: "Firmware Version",
    NikonType2Tag.ISO_1: "ISO",
    NikonType2Tag.COLOR_MODE: "Color Mode",
    NikonType2Tag.QUALITY_AND_FILE_FORMAT: "Quality & File Format",
    NikonType2Tag.CAMERA_WHITE_BALANCE: "White Balance",
    NikonType2Tag.CAMERA_SHARPENING: "Sharpening",
    NikonType2Tag.AF_TYPE: "AF Type",
    NikonType2Tag.FLASH_SYNC_MODE: "Flash Sync Mode",
    NikonType2Tag.AUTO_FLASH_MODE: "Auto Flash Mode",
    NikonType2Tag.UNKNOWN_34: "Unknown 34",
    NikonType2Tag.CAMERA_WHITE_BALANCE_FINE: "White Balance Fine",
    NikonType2Tag.CAMERA_WHITE_BALANCE_RB_COEFF: "White Balance RB Coefficients",
    NikonType2Tag.PROGRAM_SHIFT: "Program Shift",
    NikonType2Tag.EXPOSURE_DIFFERENCE: "Exposure Difference",
    NikonType2Tag.ISO_MODE: "ISO Mode",
    NikonType2Tag.DATA_DUMP: "Data Dump",
    NikonType2Tag.PREVIEW_IFD: "Preview IFD",
    NikonType2Tag.AUTO_FLASH_COMPENSATION: "Auto Flash Compensation",
    NikonType2Tag.ISO_REQUESTED: "ISO Requested",
    NikonType2Tag.IMAGE_BOUNDARY: "Image Boundary",
    NikonType2Tag.FLASH_EXPOSURE_COMPENSATION: "Flash Exposure Compensation",
    NikonType2Tag.FLASH_BRACKET_COMPENSATION: "Flash Bracket Compensation",
    NikonType2Tag.AE_BRACKET_COMPENSATION: "AE Bracket Compensation",
    NikonType2Tag.FLASH_MODE: "Flash Mode",
    NikonType2Tag.CROP_HIGH_SPEED: "Crop High Speed",
    NikonType2Tag.EXPOSURE_TUNING: "Exposure Tuning",
    NikonType2Tag.CAMERA_SERIAL_NUMBER: "Camera Serial Number",
    NikonType2Tag.COLOR_SPACE: "Color Space",
    NikonType2Tag.VR_INFO: "VR Info",
    NikonType2Tag.IMAGE_AUTHENTICATION: "Image Authentication",
    NikonType2Tag.ACTIVE_D_LIGHTING: "Active D-Lighting",
    NikonType2Tag.PICTURE_CONTROL: "Picture Control",
    NikonType2Tag.WORLD_TIME: "World Time",
    NikonType2Tag.ISO_INFO: "ISO Info",
    NikonType2Tag.VIGNETTE_CONTROL: "Vignette Control",
    NikonType2Tag.IMAGE_ADJUSTMENT: "Image Adjustment",
    NikonType2Tag.CAMERA_TONE_COMPENSATION: "Tone Compensation",
    NikonType2Tag.ADAPTER: "Adapter",
    NikonType2Tag.LENS_TYPE: "Lens Type",
    NikonType2Tag.LENS: "Lens",
    NikonType2Tag.MANUAL_FOCUS_DISTANCE: "Manual Focus Distance",
    NikonType2Tag.DIGITAL_ZOOM: "Digital Zoom",
    NikonType2Tag.FLASH_USED: "Flash Used",
    NikonType2Tag.AF_FOCUS_POSITION: "AF Focus Position",
    NikonType2Tag.SHOOTING_MODE: "Shooting Mode",
    NikonType2Tag.UNKNOWN_20: "Unknown 20",
    NikonType2Tag.LENS_STOPS: "Lens Stops",
    NikonType2Tag.CONTRAST_CURVE: "Contrast Curve",
    NikonType2Tag.CAMERA_COLOR_MODE: "Colour Mode",
    NikonType2Tag.UNKNOWN_37: "Unknown 37",
    NikonType2Tag.SCENE_MODE: "Scene Mode",
    NikonType2Tag.LIGHT_SOURCE: "Light source",
    NikonType2Tag.SHOT_INFO: "Shot Info",
    NikonType2Tag.CAMERA_HUE_ADJUSTMENT: "Camera Hue Adjustment",
    NikonType2Tag.NEF_COMPRESSION: "NEF Compression",
    NikonType2Tag.SATURATION: "Saturation",
    NikonType2Tag.NOISE_REDUCTION: "Noise Reduction",
    NikonType2Tag.LINEARIZATION_TABLE: "Linearization Table",
    NikonType2Tag.COLOR_BALANCE: "Color Balance",
    NikonType2Tag.LENS_DATA: "Lens Data",
    NikonType2Tag.NEF_THUMBNAIL_SIZE: "NEF Thumbnail Size",
    NikonType2Tag.SENSOR_PIXEL_SIZE: "Sensor Pixel Size",
    NikonType2Tag.RETOUCH_HISTORY: "Retouch History",
    NikonType2Tag.IMAGE_DATA_SIZE: "Image Data Size",
    NikonType2Tag.IMAGE_COUNT: "Image Count",
    NikonType2Tag.DELETED_IMAGE_COUNT: "Deleted Image Count",
    NikonType2Tag.EXPOSURE_SEQUENCE_NUMBER: "Exposure Sequence Number",
    NikonType2Tag.FLASH_INFO: "Flash Info",
    NikonType2Tag.IMAGE_OPTIMISATION: "Image Optimisation",
    NikonType2Tag.SATURATION_2: "Saturation 2",
    NikonType2Tag.DIGITAL_VARI_PROGRAM: "Digital Vari Program",
    NikonType2Tag.IMAGE_STABILISATION: "Image Stabilisation",
    NikonType2Tag.AF_RESPONSE: "AF Response",
    NikonType2Tag.MULTI_EXPOSURE: "Multi Exposure",
    NikonType2Tag.HIGH_ISO_NOISE_REDUCTION: "High ISO Noise Reduction",
    NikonType2Tag.POWER_UP_TIME: "Power Up Time",
    NikonType2Tag.AF_INFO_2: "AF Info 2",
    NikonType2Tag.FILE_INFO: "File Info",
    NikonType2Tag.AF_TUNE: "AF Tune",
    NikonType2Tag.PRINT_IM: "Print IM",
    NikonType2Tag.CAPTURE_EDITOR_DATA: "Capture Editor Data",
    NikonType2Tag.CAPTURE_OUTPUT_OFFSET: "Capture Output Offset",
}


def _signed_byte(value: int) -> int:
    return value - 0x100 if value > 0x7F else value


@define(repr=False)
class NikonType2MakernoteDirectory(TagDirectory):
    """
    Tags of the Nikon Type-2 makernote. See
    :py:class:`~makernote_tools.constants.NikonType2Tag` for tag ids.
    """

    NAME = "NikonType2Makernote"
    TAG_NAMES = TAG_NAMES

    def get_auto_flash_compensation(self) -> Optional[Rational]:
        """
        Auto flash compensation in EV.

        The tag holds at least three values ``(a, b, c)`` meaning
        ``a * b / c`` EV. When read from raw bytes, ``a`` is a signed byte,
        so ``b'\\xfa\\x01\\x06\\x00'`` is -1 EV.

        :return: `None` when the tag is missing or malformed.
        """
        tag_id = NikonType2Tag.AUTO_FLASH_COMPENSATION
        values = self.get_int_array(tag_id)
        if values is None:
            return None
        if len(values) < 3 or values[2] == 0:
            logger.debug("Malformed auto flash compensation: %r", values)
            return None
        numerator = values[0]
        if isinstance(self.get_value(tag_id), ByteArrayValue):
            numerator = _signed_byte(numerator)
        return Rational(numerator * values[1], values[2])
