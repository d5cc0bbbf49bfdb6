"""In-memory pixel images."""

from __future__ import annotations

from dataclasses import dataclass, field

_ROW_PAD_BITS = 32
_SUPPORTED_BPP = (8, 16, 24, 32)


@dataclass(eq=False)
class Image:
    """A ZPixmap-style image: rows of packed pixels, padded to 32 bits."""

    width: int
    height: int
    bits_per_pixel: int = 32
    big_endian: bool = False
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        if self.bits_per_pixel not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        row_bits = self.width * self.bits_per_pixel
        self.size_line = (row_bits + _ROW_PAD_BITS - 1) // _ROW_PAD_BITS * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def endian(self) -> int:
        """0 for little-endian pixel storage, 1 for big-endian."""
        return int(self.big_endian)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color``, truncated to the pixel width, at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._byteorder)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``, padding included."""
        start = self._offset(0, y)
        return bytes(self.data[start:start + self.size_line])