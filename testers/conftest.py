# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: маленькие кадры и сцены,
которые считаются за доли секунды.
"""

import pytest

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.math.vec3 import Vec3
from raytracer.scene.camera import Camera
from raytracer.scene.light import Light
from raytracer.tracer import ChunkStrategy, Sphere, TracerBuilder


@pytest.fixture
def small_extent() -> ImageExtent2D:
    return ImageExtent2D(4, 4)


@pytest.fixture
def camera() -> Camera:
    """Камера в начале координат, луч центра кадра идёт вдоль +Z."""
    return Camera.perspective(Vec3(0.0, 0.0, 0.0), 1.0, 0.8, 0.1, 100.0)


@pytest.fixture
def make_builder(camera):
    """Фабрика сборщика с одной красной сферой перед камерой."""
    def _make(extent=ImageExtent2D(4, 4), strategy=ChunkStrategy.LINE,
              threads=1, rays=1, reflects=3):
        return (
            TracerBuilder(extent)
            .camera(camera)
            .model(Sphere("target", Vec3(0.0, 0.0, 3.0), 2.5, Color.RED, 0.2))
            .light(Light(Vec3(0.0, 10.0, 0.0)))
            .rays(rays)
            .reflects(reflects)
            .threads(threads)
            .strategy(strategy)
        )
    return _make
