"""
Various constants for makernote_tools
"""
from enum import IntEnum


class NikonType2Tag(IntEnum):
    """
    Tag ids of the Nikon Type-2 makernote.

    Type-2 applies to the E990 and D-series cameras such as the D1, D70 and
    D100.
    """
    FIRMWARE_VERSION = 0x0001
    ISO_1 = 0x0002
    COLOR_MODE = 0x0003
    QUALITY_AND_FILE_FORMAT = 0x0004
    CAMERA_WHITE_BALANCE = 0x0005
    CAMERA_SHARPENING = 0x0006
    AF_TYPE = 0x0007
    FLASH_SYNC_MODE = 0x0008
    AUTO_FLASH_MODE = 0x0009
    UNKNOWN_34 = 0x000A
    CAMERA_WHITE_BALANCE_FINE = 0x000B
    CAMERA_WHITE_BALANCE_RB_COEFF = 0x000C
    PROGRAM_SHIFT = 0x000D
    EXPOSURE_DIFFERENCE = 0x000E
    ISO_MODE = 0x000F
    DATA_DUMP = 0x0010
    PREVIEW_IFD = 0x0011
    AUTO_FLASH_COMPENSATION = 0x0012
    ISO_REQUESTED = 0x0013
    IMAGE_BOUNDARY = 0x0016
    FLASH_EXPOSURE_COMPENSATION = 0x0017
    FLASH_BRACKET_COMPENSATION = 0x0018
    AE_BRACKET_COMPENSATION = 0x0019
    FLASH_MODE = 0x001A
    CROP_HIGH_SPEED = 0x001B
    EXPOSURE_TUNING = 0x001C
    CAMERA_SERIAL_NUMBER = 0x001D
    COLOR_SPACE = 0x001E
    VR_INFO = 0x001F
    IMAGE_AUTHENTICATION = 0x0020
    ACTIVE_D_LIGHTING = 0x0022
    PICTURE_CONTROL = 0x0023
    WORLD_TIME = 0x0024
    ISO_INFO = 0x0025
    VIGNETTE_CONTROL = 0x002A
    IMAGE_ADJUSTMENT = 0x0080
    CAMERA_TONE_COMPENSATION = 0x0081
    ADAPTER = 0x0082
    LENS_TYPE = 0x0083
    LENS = 0x0084
    MANUAL_FOCUS_DISTANCE = 0x0085
    DIGITAL_ZOOM = 0x0086
    FLASH_USED = 0x0087
    AF_FOCUS_POSITION = 0x0088
    SHOOTING_MODE = 0x0089
    UNKNOWN_20 = 0x008A
    LENS_STOPS = 0x008B
    CONTRAST_CURVE = 0x008C
    CAMERA_COLOR_MODE = 0x008D
    UNKNOWN_37 = 0x008E
    SCENE_MODE = 0x008F
    LIGHT_SOURCE = 0x0090
    SHOT_INFO = 0x0091
    CAMERA_HUE_ADJUSTMENT = 0x0092
    NEF_COMPRESSION = 0x0093
    SATURATION = 0x0094
    NOISE_REDUCTION = 0x0095
    LINEARIZATION_TABLE = 0x0096
    COLOR_BALANCE = 0x0097
    LENS_DATA = 0x0098
    NEF_THUMBNAIL_SIZE = 0x0099
    SENSOR_PIXEL_SIZE = 0x009A
    RETOUCH_HISTORY = 0x009E
    IMAGE_DATA_SIZE = 0x00A2
    IMAGE_COUNT = 0x00A5
    DELETED_IMAGE_COUNT = 0x00A6
    EXPOSURE_SEQUENCE_NUMBER = 0x00A7
    FLASH_INFO = 0x00A8
    IMAGE_OPTIMISATION = 0x00A9
    SATURATION_2 = 0x00AA
    DIGITAL_VARI_PROGRAM = 0x00AB
    IMAGE_STABILISATION = 0x00AC
    AF_RESPONSE = 0x00AD
    MULTI_EXPOSURE = 0x00B0
    HIGH_ISO_NOISE_REDUCTION = 0x00B1
    POWER_UP_TIME = 0x00B6
    AF_INFO_2 = 0x00B7
    FILE_INFO = 0x00B8
    AF_TUNE = 0x00B9
    PRINT_IM = 0x0E00
    CAPTURE_EDITOR_DATA = 0x0E01
    CAPTURE_OUTPUT_OFFSET = 0x0E1E
