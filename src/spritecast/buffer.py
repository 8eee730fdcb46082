"""Flat RGBA pixel buffer owned by a single conversion."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from spritecast.models import Rect


@dataclass
class PixelBuffer:
    """Row-major RGBA bytes of a fixed ``width`` × ``height`` canvas.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        data: ``width * height * 4`` channel values (R, G, B, A per pixel).
    """

    width: int
    height: int
    data: bytearray

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Buffer holds {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """Create a fully transparent buffer."""
        return cls(width, height, bytearray(width * height * 4))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(image.width, image.height, bytearray(image.tobytes()))

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), bytes(self.data))

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, bytearray(self.data))

    def index(self, x: int, y: int) -> int:
        """Offset of the red channel of pixel ``(x, y)``."""
        return (y * self.width + x) * 4

    def rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        i = self.index(x, y)
        d = self.data
        return (d[i], d[i + 1], d[i + 2], d[i + 3])

    def alpha(self, x: int, y: int) -> int:
        return self.data[self.index(x, y) + 3]

    def crop(self, rect: Rect) -> "PixelBuffer":
        """Copy the pixels inside *rect* into a new buffer.

        Raises:
            ValueError: If *rect* extends beyond the buffer.
        """
        if rect.x + rect.width > self.width or rect.y + rect.height > self.height:
            raise ValueError(
                f"Rect {rect.width}x{rect.height}+{rect.x}+{rect.y} exceeds "
                f"{self.width}x{self.height} buffer"
            )
        out = bytearray()
        for y in range(rect.y, rect.y + rect.height):
            start = self.index(rect.x, y)
            out.extend(self.data[start : start + rect.width * 4])
        return PixelBuffer(rect.width, rect.height, out)
