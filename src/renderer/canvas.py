# renderer/canvas.py
import numpy as np
from PIL import Image

from core.color import Color
from renderer.tone_mapping import quantize


class Canvas:
    """
    A width x height grid of linear float colors, stored as a numpy array of
    shape (height, width, 3). Starts out black.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x].tolist()
        return Color(r, g, b)

    def to_rgb8(self) -> np.ndarray:
        return quantize(self.pixels)

    def to_ppm(self) -> str:
        """
        Serialize as a plain-text P3 PPM: header, then one line of
        space-separated 0-255 RGB values per row of pixels.
        """
        rgb = self.to_rgb8()
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in rgb.reshape(self.height, self.width * 3):
            lines.append(" ".join(str(v) for v in row.tolist()))
        return "\n".join(lines) + "\n"

    def save_ppm(self, path: str):
        with open(path, "w", encoding="ascii") as f:
            f.write(self.to_ppm())

    def to_image(self) -> Image.Image:
        """Quantized copy of the canvas as a Pillow RGB image."""
        return Image.fromarray(self.to_rgb8())
