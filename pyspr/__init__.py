"""
PySpr - Python library for reading SPR sprite sheets.

This library decodes the legacy SPR container used by Creatures 1: a small
little-endian header listing one or more indexed-color frames, each frame
stored as width * height palette indices at an absolute file offset.

The main entry points are `load()`, which reads a file from disk or a
stream, and `decode_sprite()`, which decodes a buffer already in memory.
Both return a list of `Frame` objects whose pixels are NumPy arrays.
"""

from ._core import decode_sprite, load
from ._errors import OutOfBoundsFrameError, SpriteFormatError, TruncatedHeaderError
from ._fields import (
    FILE_HEADER_SCHEMA,
    FRAME_HEADER_SCHEMA,
    FieldSpec,
    combine_bytes,
    read_fields,
)
from ._frame import Frame
from ._header import FileHeader, FrameHeader
from ._palette import decode_palette, load_palette, render_frame

__version__ = "0.1.0"
__all__ = [
    "load",
    "decode_sprite",
    "Frame",
    "FileHeader",
    "FrameHeader",
    "FieldSpec",
    "FILE_HEADER_SCHEMA",
    "FRAME_HEADER_SCHEMA",
    "combine_bytes",
    "read_fields",
    "decode_palette",
    "load_palette",
    "render_frame",
    "SpriteFormatError",
    "TruncatedHeaderError",
    "OutOfBoundsFrameError",
]
