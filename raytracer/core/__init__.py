"""
Базовые типы: цвет, размер изображения, таймер.
"""

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.core.timer import Timer

__all__ = ["Color", "ImageExtent2D", "Timer"]
