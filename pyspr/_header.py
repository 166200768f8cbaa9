"""
Header records for SPR sprite sheets.

An SPR file opens with a 2-byte sprite count, followed immediately by one
8-byte frame header per sprite. Both records are little-endian.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ._fields import FILE_HEADER_SCHEMA, FRAME_HEADER_SCHEMA, FieldSpec, read_fields


@dataclass(frozen=True)
class FileHeader:
    """SPR file header.
    
    Attributes:
        num_sprites: Number of frame headers that follow
    """
    num_sprites: int
    
    SCHEMA: ClassVar[Tuple[FieldSpec, ...]] = FILE_HEADER_SCHEMA
    
    @classmethod
    def from_buffer(cls, buffer, cursor: int = 0) -> Tuple['FileHeader', int]:
        """Parse the file header.
        
        Args:
            buffer: Complete sprite sheet contents
            cursor: Byte position of the header, normally 0
            
        Returns:
            Parsed FileHeader and the cursor after it
            
        Raises:
            TruncatedHeaderError: If the buffer is shorter than the header
        """
        values, cursor = read_fields(cls.SCHEMA, buffer, cursor)
        return cls(**values), cursor
    
    def __str__(self) -> str:
        return f"FileHeader(sprites={self.num_sprites})"


@dataclass(frozen=True)
class FrameHeader:
    """Per-frame header.
    
    Attributes:
        offset: Absolute byte offset of the frame's pixel data
        width: Frame width in pixels
        height: Frame height in pixels
    """
    offset: int
    width: int
    height: int
    
    SCHEMA: ClassVar[Tuple[FieldSpec, ...]] = FRAME_HEADER_SCHEMA
    
    @classmethod
    def from_buffer(cls, buffer, cursor: int) -> Tuple['FrameHeader', int]:
        """Parse one frame header at ``cursor``.
        
        Returns:
            Parsed FrameHeader and the cursor of the next record
            
        Raises:
            TruncatedHeaderError: If the record runs past the end of the buffer
        """
        values, cursor = read_fields(cls.SCHEMA, buffer, cursor)
        return cls(**values), cursor
    
    @property
    def pixel_count(self) -> int:
        """Number of palette-index bytes the frame occupies."""
        return self.width * self.height
    
    @property
    def end(self) -> int:
        """Byte position just past the frame's pixel data."""
        return self.offset + self.pixel_count
    
    def __str__(self) -> str:
        return f"FrameHeader(offset={self.offset}, size={self.width}x{self.height})"
