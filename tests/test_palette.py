"""
Tests for palette decoding and frame rendering.
"""

import pytest
import io
import logging
import numpy as np
from unittest.mock import patch
from pyspr._palette import decode_palette, load_palette, render_frame
from pyspr._frame import Frame


def gradient_palette():
    """Palette where entry i is (i, 255 - i, i // 2)."""
    i = np.arange(256)
    return np.stack([i, 255 - i, i // 2], axis=1).astype(np.uint8)


class TestDecodePalette:
    """Test cases for palette decoding."""
    
    def test_eight_bit(self):
        """Test that 8-bit components are kept as-is."""
        raw = gradient_palette().tobytes()
        
        palette = decode_palette(raw)
        
        assert palette.shape == (256, 3)
        assert palette.dtype == np.uint8
        np.testing.assert_array_equal(palette, gradient_palette())
    
    def test_six_bit(self):
        """Test scaling of 6-bit components."""
        raw = bytearray(768)
        raw[0:3] = bytes([0, 1, 63])
        
        palette = decode_palette(bytes(raw), bits=6)
        
        np.testing.assert_array_equal(palette[0], [0, 4, 252])
    
    def test_six_bit_masks_high_bits(self):
        """Test that out-of-range 6-bit components do not overflow."""
        raw = bytes([0xFF] * 768)
        palette = decode_palette(raw, bits=6)
        assert palette.max() == 252
    
    def test_short_palette(self):
        """Test error handling for a truncated palette."""
        with pytest.raises(ValueError, match="Expected 768 bytes for palette"):
            decode_palette(b"\x00" * 767)
    
    def test_extra_bytes(self, caplog):
        """Test that trailing bytes are ignored with a warning."""
        with caplog.at_level(logging.WARNING, logger="pyspr._palette"):
            palette = decode_palette(b"\x01" * 770)
        
        assert palette.shape == (256, 3)
        assert "2 extra bytes" in caplog.text
    
    def test_unsupported_depth(self):
        """Test rejection of depths other than 6 and 8."""
        with pytest.raises(ValueError, match="Unsupported palette depth"):
            decode_palette(b"\x00" * 768, bits=5)


class TestLoadPalette:
    """Test cases for palette loading."""
    
    def test_from_file_object(self):
        """Test loading from a binary stream."""
        palette = load_palette(io.BytesIO(gradient_palette().tobytes()))
        np.testing.assert_array_equal(palette[10], [10, 245, 5])
    
    def test_unreadable_file(self):
        """Test that I/O failures are wrapped as RuntimeError."""
        with patch('builtins.open', side_effect=PermissionError("palette.dta")):
            with pytest.raises(RuntimeError, match="Error reading palette file"):
                load_palette('palette.dta')


class TestRenderFrame:
    """Test cases for frame rendering."""
    
    def test_colors_and_transparency(self):
        """Test that index 0 is transparent and others are opaque."""
        frame = Frame(2, 2, np.array([0, 1, 2, 255], dtype=np.uint8))
        
        rgba = render_frame(frame, gradient_palette())
        
        assert rgba.shape == (2, 2, 4)
        assert rgba.dtype == np.uint8
        np.testing.assert_array_equal(rgba[0, 0], [0, 0, 0, 0])
        np.testing.assert_array_equal(rgba[0, 1], [1, 254, 0, 255])
        np.testing.assert_array_equal(rgba[1, 0], [2, 253, 1, 255])
        np.testing.assert_array_equal(rgba[1, 1], [255, 0, 127, 255])
    
    def test_row_major_layout(self):
        """Test that pixel i maps to row i // width."""
        frame = Frame(3, 2, np.array([1, 1, 1, 0, 0, 0], dtype=np.uint8))
        
        rgba = render_frame(frame, gradient_palette())
        
        np.testing.assert_array_equal(rgba[0, :, 3], [255, 255, 255])
        np.testing.assert_array_equal(rgba[1, :, 3], [0, 0, 0])
    
    def test_empty_frame(self):
        """Test rendering a zero-area frame."""
        rgba = render_frame(Frame.empty(), gradient_palette())
        assert rgba.shape == (0, 0, 4)
    
    def test_bad_palette_shape(self):
        """Test rejection of a palette that is not 256 RGB entries."""
        frame = Frame(1, 1, np.array([1], dtype=np.uint8))
        with pytest.raises(ValueError, match="Palette must have shape"):
            render_frame(frame, np.zeros((16, 3), dtype=np.uint8))
