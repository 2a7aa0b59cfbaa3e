# raytracer/tracer/builder.py
"""
Fluent‑сборщик трассировщика с настройками по‑умолчанию.
Свет и модели добавляются (повторные вызовы не заменяют, а дополняют).
"""

import math

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.math.vec3 import Vec3
from raytracer.scene.camera import Camera
from raytracer.scene.light import Light
from raytracer.tracer.buffer import ChunkStrategy, ImageBuffer
from raytracer.tracer.hit import Hitable
from raytracer.tracer.ray import Ray
from raytracer.tracer.tracer import Background, Tracer


def default_background(_ray: Ray) -> Color:
    return Color.BLACK


def default_camera(extent: ImageExtent2D) -> Camera:
    return Camera.perspective(
        Vec3(0.0, 0.2, 0.0),
        extent.aspect(),
        math.radians(45.0),
        0.1,
        100.0,
        math.radians(-90.0),
        math.radians(0.0),
        Vec3(0.0, 1.0, 0.0),
    )


class TracerBuilder:
    def __init__(self, extent: ImageExtent2D):
        self.extent = extent
        self.models = []
        self.lights = []
        self._camera = default_camera(extent)
        self._background: Background = default_background
        self.n_rays = 10
        self.n_reflects = 10
        self.n_threads = 1
        self._strategy = ChunkStrategy.BOX

    def background(self, background: Background) -> "TracerBuilder":
        self._background = background
        return self

    def camera(self, camera: Camera) -> "TracerBuilder":
        self._camera = camera
        return self

    def light(self, light: Light) -> "TracerBuilder":
        self.lights.append(light)
        return self

    def model(self, model: Hitable) -> "TracerBuilder":
        self.models.append(model)
        return self

    def rays(self, rays: int) -> "TracerBuilder":
        self.n_rays = rays
        return self

    def reflects(self, reflects: int) -> "TracerBuilder":
        self.n_reflects = reflects
        return self

    def threads(self, threads: int) -> "TracerBuilder":
        self.n_threads = threads
        return self

    def strategy(self, strategy: ChunkStrategy) -> "TracerBuilder":
        self._strategy = strategy
        return self

    # -----------------------------------------------------------------
    def _validate(self) -> None:
        if self.extent.width <= 0 or self.extent.height <= 0:
            raise ValueError(f"Extent must be non-empty, got {self.extent.width}x{self.extent.height}")
        if self.n_rays < 1:
            raise ValueError(f"At least one ray per pixel is required, got {self.n_rays}")
        if self.n_threads < 1:
            raise ValueError(f"At least one thread is required, got {self.n_threads}")
        if self.n_reflects < 0:
            raise ValueError(f"Reflect limit must not be negative, got {self.n_reflects}")
        if not isinstance(self._strategy, ChunkStrategy):
            raise ValueError(f"Unknown chunk strategy: {self._strategy!r}")

    def build(self) -> Tracer:
        """Готовый трассировщик; пиксели появятся при первом update()."""
        self._validate()

        image_buffer = ImageBuffer(self.extent, self._strategy)

        return Tracer(
            image_buffer,
            models=list(self.models),
            lights=list(self.lights),
            camera=self._camera,
            background=self._background,
            n_rays=self.n_rays,
            n_reflects=self.n_reflects,
            n_threads=self.n_threads,
        )
