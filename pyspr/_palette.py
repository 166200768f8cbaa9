"""
Palette decoding and frame rendering.

Palettes are 256 RGB triples stored as 768 consecutive bytes. Rendering
maps each palette index of a frame to a color and leaves index 0
transparent.
"""

import logging
import os
from typing import BinaryIO, Union

import numpy as np

from ._frame import Frame

logger = logging.getLogger(__name__)

PALETTE_ENTRIES = 256
PALETTE_SIZE = PALETTE_ENTRIES * 3
TRANSPARENT_INDEX = 0


def decode_palette(data: bytes, bits: int = 8) -> np.ndarray:
    """Decode a raw 256-color palette.
    
    Args:
        data: At least 768 bytes of RGB triples
        bits: Component depth. 6-bit components (0-63) are scaled to 0-255.
        
    Returns:
        (256, 3) uint8 array of RGB colors
    """
    if bits not in (6, 8):
        raise ValueError(f"Unsupported palette depth: {bits}, supported depths: 6, 8")
    if len(data) < PALETTE_SIZE:
        raise ValueError(f"Expected {PALETTE_SIZE} bytes for palette, got {len(data)}")
    if len(data) > PALETTE_SIZE:
        logger.warning("Ignoring %d extra bytes after palette", len(data) - PALETTE_SIZE)
    
    palette = np.frombuffer(bytes(data[:PALETTE_SIZE]), dtype=np.uint8).reshape(PALETTE_ENTRIES, 3)
    
    if bits == 6:
        # 0-63 -> 0-252, top bits masked off for out-of-range input
        palette = (palette & 0x3F) << 2
    
    return palette.copy()


def load_palette(source: Union[str, os.PathLike, BinaryIO], bits: int = 8) -> np.ndarray:
    """Load a palette from a path or binary file-like object."""
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, 'rb') as f:
                data = f.read()
        else:
            data = source.read()
    except OSError as e:
        raise RuntimeError(f"Error reading palette file: {e}") from e
    
    return decode_palette(data, bits)


def render_frame(frame: Frame, palette: np.ndarray) -> np.ndarray:
    """Render a frame to RGBA.
    
    Args:
        frame: Decoded frame
        palette: (256, 3) uint8 palette
        
    Returns:
        (height, width, 4) uint8 array. Pixels with index 0 are fully
        transparent black, all others opaque.
    """
    palette = np.asarray(palette)
    if palette.shape != (PALETTE_ENTRIES, 3):
        raise ValueError(f"Palette must have shape (256, 3), got {palette.shape}")
    
    indices = frame.as_2d()
    rgba = np.zeros((frame.height, frame.width, 4), dtype=np.uint8)
    rgba[..., :3] = palette.astype(np.uint8)[indices]
    rgba[..., 3] = 255
    rgba[indices == TRANSPARENT_INDEX] = 0
    
    return rgba
