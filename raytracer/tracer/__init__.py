"""
Ядро трассировщика: геометрия, буфер с чанками, Tracer и его сборщик.
"""

from raytracer.tracer.ray import Ray
from raytracer.tracer.hit import Hit, Hitable
from raytracer.tracer.sphere import Sphere
from raytracer.tracer.buffer import (
    ChunkStrategy, ImageBuffer, RandomChunk, LineChunk, BoxChunk
)
from raytracer.tracer.tracer import Tracer, RenderState, SHADOW_FACTOR
from raytracer.tracer.builder import TracerBuilder, default_background

__all__ = [
    "Ray",
    "Hit",
    "Hitable",
    "Sphere",
    "ChunkStrategy",
    "ImageBuffer",
    "RandomChunk",
    "LineChunk",
    "BoxChunk",
    "Tracer",
    "RenderState",
    "SHADOW_FACTOR",
    "TracerBuilder",
    "default_background",
]
