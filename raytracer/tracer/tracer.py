# raytracer/tracer/tracer.py
"""
Прогрессивный трассировщик.

Хост вызывает `update()` раз в кадр. Каждый вызов считает один раунд:
до `n_threads` чанков, по задаче на чанк, затем результаты пишутся
в буфер из вызывающего потока. Когда `update()` вернул True – буфер
изменился и текстуру нужно пересоздать из `framebuffer()`/`bytes()`.

Освещение (Уиттед, упрощённое):
    * зеркальное отражение рекурсивно, до `n_reflects` уровней;
    * тень бинарная – первый незаслонённый источник даёт полный вес,
      если заслонены все, результат умножается на SHADOW_FACTOR.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

import numpy as np

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.core.timer import Timer
from raytracer.math.vec3 import Vec3
from raytracer.multithread.task_pool import TaskPool
from raytracer.scene.camera import Camera
from raytracer.scene.light import Light
from raytracer.tracer.buffer import ImageBuffer
from raytracer.tracer.hit import Hitable
from raytracer.tracer.ray import Ray
from raytracer.utils.logger import logger
from raytracer.utils.profiler import Profiler

Background = Callable[[Ray], Color]

SHADOW_FACTOR = 0.5


@dataclass
class RenderState:
    """Флаг «сцена изменилась» + таймер кадра. Читает и сбрасывает только update()."""
    changed: bool = True
    timer: Timer = field(default_factory=Timer)


class Tracer:
    def __init__(self,
                 image_buffer: ImageBuffer,
                 models: Sequence[Hitable],
                 lights: Sequence[Light],
                 camera: Camera,
                 background: Background,
                 n_rays: int,
                 n_reflects: int,
                 n_threads: int):
        self.image_buffer = image_buffer
        self.models: Tuple[Hitable, ...] = tuple(models)
        self.lights: Tuple[Light, ...] = tuple(lights)
        self.camera = camera
        self.background = background
        self.n_rays = n_rays
        self.n_reflects = n_reflects
        self.n_threads = n_threads
        self.state = RenderState()

    # -----------------------------------------------------------------
    # доступ для хоста
    # -----------------------------------------------------------------
    def extent(self) -> ImageExtent2D:
        return self.image_buffer.extent

    def framebuffer(self) -> np.ndarray:
        return self.image_buffer.framebuffer

    def bytes(self) -> bytes:
        return self.image_buffer.bytes()

    def is_complete(self) -> bool:
        return self.image_buffer.is_complete()

    def reset(self) -> None:
        self.image_buffer.reset()

    def invalidate(self) -> None:
        """Следующий update() начнёт кадр заново."""
        self.state.changed = True

    # -----------------------------------------------------------------
    def update(self) -> bool:
        """Один раунд трассировки. True – в буфере была несделанная работа."""
        if self.state.changed:
            self.reset()
            self.state.timer.reset()

        result = not self.image_buffer.is_complete()

        if result:
            self._update_buffer()

            if self.image_buffer.is_complete():
                logger.info(f"[Tracer] Rendering time: {self.state.timer.tick():.2f}s")

        self.state.changed = False

        return result

    def _update_buffer(self) -> None:
        chunks: List[List[int]] = []
        for _ in range(self.n_threads):
            if self.image_buffer.is_complete():
                break
            chunks.append(self.image_buffer.get_chunk())

        with Profiler(f"Tracer round ({len(chunks)} chunks)"):
            if self.n_threads > 1:
                with TaskPool(max_workers=self.n_threads) as pool:
                    results = pool.map(self.compute_chunk, chunks)
            else:
                results = [self.compute_chunk(chunk) for chunk in chunks]

        for result in results:
            for idx, c in result:
                self.image_buffer.update_pixel(idx, c)

    # -----------------------------------------------------------------
    # параллельная часть: только чтение сцены
    # -----------------------------------------------------------------
    def compute_chunk(self, chunk: Sequence[int]) -> List[Tuple[int, Color]]:
        # (пиксель, сэмпл, x/y) – смещения внутри пикселя, свои у каждого чанка
        jitter = np.random.default_rng().random((len(chunk), self.n_rays, 2))

        return [(idx, self.compute_pixel(idx, jitter[k]))
                for k, idx in enumerate(chunk)]

    def compute_pixel(self, idx: int, jitter: np.ndarray) -> Color:
        extent = self.image_buffer.extent
        i, j = divmod(idx, extent.width)

        c = Color.BLACK
        for jx, jy in jitter:
            # -2..2
            x = -2.0 + 4.0 * ((j + jx) / extent.width)
            # -1..1
            y = 1.0 - 2.0 * ((i + jy) / extent.height)

            ray = Ray(self.camera.position, Vec3(x, y, 1.0))

            c = c + self.cast(ray, self.n_reflects)

        return c / self.n_rays

    def cast(self, ray: Ray, limit: int) -> Color:
        if limit <= 0:
            return Color.BLACK

        near, far = self.camera.near, self.camera.far

        hit = None
        for model in self.models:
            h = model.hit(ray, near, far)
            if h is not None and (hit is None or h.distance < hit.distance):
                hit = h

        if hit is None:
            return self.background(ray)

        reflect_color = self.cast(ray.reflect(hit.position, hit.normal), limit - 1)
        color = hit.color * (1.0 - hit.reflect) + reflect_color * hit.reflect

        for light in self.lights:
            light_ray = Ray(hit.position, light.position - hit.position)
            blocked = any(m.hit_distance(light_ray, near, far) is not None
                          for m in self.models)
            if not blocked:
                return color

        return color * SHADOW_FACTOR
