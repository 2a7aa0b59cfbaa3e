# raytracer/core/extent.py
"""Размер изображения в пикселях."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageExtent2D:
    width: int
    height: int

    def size(self) -> int:
        """Количество пикселей."""
        return self.width * self.height

    def aspect(self) -> float:
        return self.width / self.height if self.height else 0.0
