"""
Decoded frame container.
"""

from dataclasses import dataclass

import numpy as np

from ._fields import as_byte_array


@dataclass(frozen=True, eq=False)
class Frame:
    """One decoded sprite image.
    
    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Read-only (width * height,) uint8 array of palette indices,
            row-major. Index 0 is transparent. Any byte sequence is
            accepted; writable arrays are copied before being frozen.
    """
    width: int
    height: int
    pixels: np.ndarray
    
    def __post_init__(self):
        pixels = as_byte_array(self.pixels)
        if pixels.flags.writeable:
            pixels = pixels.copy()
            pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)
        
        if self.pixels.shape != (self.width * self.height,):
            raise ValueError(
                f"Frame of {self.width}x{self.height} needs {self.width * self.height} pixels, "
                f"got array of shape {self.pixels.shape}"
            )
    
    @classmethod
    def empty(cls) -> 'Frame':
        """A zero-area frame."""
        pixels = np.zeros(0, dtype=np.uint8)
        pixels.flags.writeable = False
        return cls(width=0, height=0, pixels=pixels)
    
    @property
    def size(self) -> int:
        return self.width * self.height
    
    def as_2d(self) -> np.ndarray:
        """Return the pixels as a (height, width) view."""
        return self.pixels.reshape(self.height, self.width)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and np.array_equal(self.pixels, other.pixels))
    
    __hash__ = None
    
    def __str__(self) -> str:
        return f"Frame({self.width}x{self.height})"
