"""
Exception types raised while decoding SPR sprite sheets.

All decode failures derive from SpriteFormatError, which is itself a
ValueError so callers that only care about "bad file" can catch that.
"""


class SpriteFormatError(ValueError):
    """Base class for malformed sprite sheet data."""


class TruncatedHeaderError(SpriteFormatError):
    """A header field would read past the end of the buffer.
    
    Attributes:
        field: Name of the field that could not be read
        cursor: Byte position where the field starts
        needed: Number of bytes the field requires
        available: Number of bytes left in the buffer at ``cursor``
    """
    
    def __init__(self, field: str, cursor: int, needed: int, available: int):
        self.field = field
        self.cursor = cursor
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated header: field '{field}' at byte {cursor} needs "
            f"{needed} bytes, only {available} available"
        )


class OutOfBoundsFrameError(SpriteFormatError):
    """A frame's pixel range extends past the end of the buffer.
    
    Attributes:
        index: Zero-based index of the offending frame
        offset: Absolute start of the frame's pixel data
        length: Number of pixel bytes (width * height)
        buffer_length: Total size of the buffer
    """
    
    def __init__(self, index: int, offset: int, length: int, buffer_length: int):
        self.index = index
        self.offset = offset
        self.length = length
        self.buffer_length = buffer_length
        super().__init__(
            f"Frame {index} out of bounds: pixels [{offset}, {offset + length}) "
            f"exceed buffer of {buffer_length} bytes"
        )
