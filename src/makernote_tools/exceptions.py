"""
Exception types.

Binary readers raise :py:class:`ImageProcessingError` subclasses when a byte
stream cannot be interpreted at all. The directory and descriptor layers do
not raise these; malformed tag values surface as ``None`` or as
``"Unknown (...)"`` text instead.
"""

from typing import Optional


class ImageProcessingError(Exception):
    """
    Unexpected and fatal condition while processing an image file.

    Either argument may be omitted. The cause is chained as ``__cause__`` so
    tracebacks show the original failure, and its text is used as the message
    when no message is given::

        try:
            byte_order, magic = struct.unpack("2sH", data[:4])
        except struct.error as e:
            raise TiffProcessingError("truncated TIFF header", e)
    """

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        if message is None and cause is not None:
            message = str(cause)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class TiffProcessingError(ImageProcessingError):
    """
    Unexpected and fatal condition while processing a TIFF file.
    """


class MetadataError(Exception):
    """
    Misuse of a tag directory while it is being populated, such as setting a
    tag twice or writing to a frozen directory.
    """
