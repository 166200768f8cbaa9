"""
Core functionality for decoding SPR sprite sheets.

This module handles reading the file header, walking the packed frame
headers, and cutting each frame's palette indices out of the buffer.
"""

import logging
import os
from typing import BinaryIO, List, Union

import numpy as np

from ._errors import OutOfBoundsFrameError
from ._fields import as_byte_array
from ._frame import Frame
from ._header import FileHeader, FrameHeader

logger = logging.getLogger(__name__)


def load(source: Union[str, os.PathLike, BinaryIO], strict: bool = True) -> List[Frame]:
    """
    Load all frames from an SPR file.
    
    Args:
        source: Path to .spr file or binary file-like object.
        strict: Abort on a frame whose pixels lie outside the file. When
            False such frames are replaced by an empty frame.
        
    Returns:
        List of Frame objects, one per sprite in file order.
        
    Raises:
        SpriteFormatError: If the file is malformed
        RuntimeError: If the file cannot be read
    """
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, 'rb') as f:
                data = f.read()
        else:
            data = source.read()
    except OSError as e:
        raise RuntimeError(f"Error reading SPR file: {e}") from e
    
    return decode_sprite(data, strict=strict)


def decode_sprite(buffer, strict: bool = True) -> List[Frame]:
    """Decode a complete sprite sheet held in memory.
    
    Args:
        buffer: Entire file contents (bytes-like, uint8 array, or ints)
        strict: See ``load``
        
    Returns:
        List of exactly ``num_sprites`` frames
        
    Raises:
        TruncatedHeaderError: If the file or a frame header is cut short
        OutOfBoundsFrameError: If a frame's pixels overrun the buffer and
            ``strict`` is set
    """
    data = as_byte_array(buffer)
    headers = _read_frame_headers(data)
    return [_extract_frame(data, header, i, strict) for i, header in enumerate(headers)]


def _read_frame_headers(data: np.ndarray) -> List[FrameHeader]:
    """Read the file header and every frame header that follows it.
    
    Frame headers are packed back to back right after the file header.
    """
    file_header, cursor = FileHeader.from_buffer(data)
    logger.debug("SPR sheet with %d sprites (%d bytes)", file_header.num_sprites, len(data))
    
    headers = []
    for _ in range(file_header.num_sprites):
        header, cursor = FrameHeader.from_buffer(data, cursor)
        headers.append(header)
    return headers


def _extract_frame(data: np.ndarray, header: FrameHeader, index: int, strict: bool) -> Frame:
    """Copy one frame's pixels out of the buffer.
    
    Offsets are absolute from the start of the buffer.
    """
    if header.end > len(data):
        if strict:
            raise OutOfBoundsFrameError(index, header.offset, header.pixel_count, len(data))
        logger.warning(
            "Frame %d pixels [%d, %d) exceed %d-byte buffer, substituting an empty frame",
            index, header.offset, header.end, len(data)
        )
        return Frame.empty()
    
    pixels = data[header.offset:header.end].copy()
    pixels.flags.writeable = False
    logger.debug("Frame %d: %s", index, header)
    return Frame(width=header.width, height=header.height, pixels=pixels)
