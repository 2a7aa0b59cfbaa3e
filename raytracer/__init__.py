"""
raytracer – прогрессивный многопоточный трассировщик лучей.

Хост раз в кадр вызывает Tracer.update() и, если он вернул True,
пересоздаёт текстуру из Tracer.bytes() размером Tracer.extent().
"""

from raytracer.utils import logger, init_logger
from raytracer.math import Vec3
from raytracer.core import Color, ImageExtent2D, Timer
from raytracer.scene import Camera, Light
from raytracer.tracer import (
    Ray,
    Hit,
    Hitable,
    Sphere,
    ChunkStrategy,
    ImageBuffer,
    Tracer,
    TracerBuilder,
)

__version__ = "0.1.0"

__all__ = [
    "init_logger",
    "Vec3",
    "Color",
    "ImageExtent2D",
    "Timer",
    "Camera",
    "Light",
    "Ray",
    "Hit",
    "Hitable",
    "Sphere",
    "ChunkStrategy",
    "ImageBuffer",
    "Tracer",
    "TracerBuilder",
]
