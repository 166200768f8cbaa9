"""
Schema-driven reading of little-endian header fields.

A schema is an ordered tuple of FieldSpec entries. read_fields walks the
schema from a starting cursor, decoding each field as an unsigned
little-endian integer, and hands back the values together with the cursor
just past the last field so reads can be chained.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple

import numpy as np

from ._errors import TruncatedHeaderError


@dataclass(frozen=True)
class FieldSpec:
    """A named fixed-width unsigned integer field.
    
    Attributes:
        name: Key under which the decoded value is returned
        width: Field size in bytes
    """
    name: str
    width: int


FILE_HEADER_SCHEMA: Tuple[FieldSpec, ...] = (
    FieldSpec("num_sprites", 2),
)

FRAME_HEADER_SCHEMA: Tuple[FieldSpec, ...] = (
    FieldSpec("offset", 4),
    FieldSpec("width", 2),
    FieldSpec("height", 2),
)


def combine_bytes(values: Iterable[int]) -> int:
    """Combine bytes into an unsigned integer, first byte least significant.
    
    Args:
        values: Byte values in file order
        
    Returns:
        sum(values[i] * 256**i)
        
    Example:
        >>> combine_bytes([0x34, 0x12])
        4660
    """
    result = 0
    for i, value in enumerate(values):
        result += int(value) * (256 ** i)
    return result


def as_byte_array(buffer) -> np.ndarray:
    """View any supported byte buffer as a 1-D uint8 array.
    
    bytes-like objects are wrapped without copying. Lists of ints and
    integer arrays of another dtype are converted only if every value
    fits in a byte.
    
    Raises:
        ValueError: For text, non-integer data, or values outside 0-255
    """
    if isinstance(buffer, str):
        raise ValueError("Expected a bytes-like buffer, got str (was the file opened in text mode?)")
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    
    if not isinstance(buffer, np.ndarray):
        values = list(buffer)
        if not values:
            return np.zeros(0, dtype=np.uint8)
        buffer = np.asarray(values)
    
    if buffer.ndim != 1:
        raise ValueError(f"Buffer must be one-dimensional, got shape {buffer.shape}")
    if buffer.dtype == np.uint8:
        return np.ascontiguousarray(buffer)
    if not np.issubdtype(buffer.dtype, np.integer):
        raise ValueError(f"Buffer must hold integers, got dtype {buffer.dtype}")
    if buffer.size and (buffer.min() < 0 or buffer.max() > 255):
        raise ValueError(
            f"Buffer values must be in 0-255, got range [{buffer.min()}, {buffer.max()}]"
        )
    return buffer.astype(np.uint8)


def _check_schema(schema: Sequence[FieldSpec]) -> None:
    seen = set()
    for spec in schema:
        if spec.width < 1:
            raise ValueError(f"Field '{spec.name}' must be at least 1 byte wide, got {spec.width}")
        if spec.name in seen:
            raise ValueError(f"Duplicate field name in schema: '{spec.name}'")
        seen.add(spec.name)


def read_fields(schema: Sequence[FieldSpec], buffer, cursor: int = 0) -> Tuple[Dict[str, int], int]:
    """Read every field of a schema starting at ``cursor``.
    
    Args:
        schema: Ordered field specifications
        buffer: Byte buffer to read from
        cursor: Byte position of the first field
        
    Returns:
        Tuple of (field name -> value, cursor after the last field)
        
    Raises:
        TruncatedHeaderError: If any field runs past the end of the buffer
        ValueError: If the schema is malformed or the cursor is negative
    """
    if cursor < 0:
        raise ValueError(f"Cursor must be non-negative, got {cursor}")
    _check_schema(schema)
    
    data = as_byte_array(buffer)
    size = len(data)
    
    values = {}
    for spec in schema:
        end = cursor + spec.width
        if end > size:
            raise TruncatedHeaderError(spec.name, cursor, spec.width, max(size - cursor, 0))
        values[spec.name] = combine_bytes(data[cursor:end])
        cursor = end
    
    return values, cursor
