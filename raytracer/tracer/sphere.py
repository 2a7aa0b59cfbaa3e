# raytracer/tracer/sphere.py
"""
Сфера – единственный примитив трассировщика.
Квадратное уравнение решается в numba‑ядре (nogil), чтобы задачи‑чанки
в пуле потоков не упирались в GIL.
"""

import math
from typing import Optional

import numpy as np
from numba import njit

from raytracer.core.color import Color
from raytracer.math.vec3 import Vec3
from raytracer.tracer.hit import Hit, Hitable
from raytracer.tracer.ray import Ray


@njit(nogil=True)
def sphere_root(origin, direction, center, radius, t_min, t_max):
    """
    Меньший корень |o + t d - c|² = r² на отрезке [t_min, t_max].
    Возвращает (found, t). Считаем в float64 – у «земли» радиусом 5000
    float32 теряет всё в c = |oc|² - r².
    """
    ocx = float(origin[0]) - float(center[0])
    ocy = float(origin[1]) - float(center[1])
    ocz = float(origin[2]) - float(center[2])
    dx = float(direction[0])
    dy = float(direction[1])
    dz = float(direction[2])

    a = dx * dx + dy * dy + dz * dz
    half_b = ocx * dx + ocy * dy + ocz * dz
    c = ocx * ocx + ocy * ocy + ocz * ocz - radius * radius
    disc = half_b * half_b - a * c
    if a == 0.0 or disc < 0.0:
        return False, 0.0

    sq = math.sqrt(disc)
    t = (-half_b - sq) / a
    if t_min <= t <= t_max:
        return True, t
    t = (-half_b + sq) / a
    if t_min <= t <= t_max:
        return True, t
    return False, 0.0


class Sphere(Hitable):
    """Сфера с базовым цветом и коэффициентом отражения ∈ [0, 1]."""

    def __init__(self, name: str, center: Vec3, radius: float,
                 color: Color, reflect: float):
        if radius <= 0.0:
            raise ValueError(f"Sphere '{name}': radius must be positive, got {radius}")
        if not 0.0 <= reflect <= 1.0:
            raise ValueError(f"Sphere '{name}': reflect must be in [0, 1], got {reflect}")
        self._name = name
        self.center = center if isinstance(center, Vec3) else Vec3(*center)
        self.radius = float(radius)
        self.color = color
        self.reflect = float(reflect)
        self._center_np = self.center.as_np()

    def name(self) -> str:
        return self._name

    def _root(self, ray: Ray, t_min: float, t_max: float):
        return sphere_root(ray.origin.as_np(), ray.direction.as_np(),
                           self._center_np, self.radius,
                           float(t_min), float(t_max))

    def hit(self, ray: Ray, min: float, max: float) -> Optional[Hit]:
        found, t = self._root(ray, min, max)
        if not found:
            return None
        position = ray.at(t)
        normal = (position - self.center) / self.radius
        return Hit(t, position, normal, self.color, self.reflect)

    def hit_distance(self, ray: Ray, min: float, max: float) -> Optional[float]:
        found, t = self._root(ray, min, max)
        return t if found else None

    def __repr__(self):
        return f"Sphere({self._name!r}, {self.center!r}, {self.radius})"
