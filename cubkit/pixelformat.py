"""Conversion of 0xRRGGBB colours to pixel values of a visual."""

from __future__ import annotations

from dataclasses import dataclass

_TRUE_COLOR_DEPTH = 24


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return the shift and width of the lowest run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (~run & (run + 1)).bit_length() - 1
    return shift, bits


def _scale(component: int, bits: int) -> int:
    """Reduce a 16-bit channel value to ``bits`` bits."""
    if bits <= 16:
        return component >> (16 - bits)
    return component << (bits - 16)


@dataclass(frozen=True)
class ColorFormat:
    """Where each colour channel sits inside a pixel of a given depth."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(
        cls, red_mask: int, green_mask: int, blue_mask: int, depth: int
    ) -> "ColorFormat":
        """Build a format from the channel masks of a TrueColor visual."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(
            depth=depth,
            red_shift=red_shift,
            red_bits=red_bits,
            green_shift=green_shift,
            green_bits=green_bits,
            blue_shift=blue_shift,
            blue_bits=blue_bits,
        )

    def pixel_value(self, color: int) -> int:
        """Return the pixel value for a 0xRRGGBB colour.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= _TRUE_COLOR_DEPTH:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            (_scale(red, self.red_bits) << self.red_shift)
            + (_scale(green, self.green_bits) << self.green_shift)
            + (_scale(blue, self.blue_bits) << self.blue_shift)
        )