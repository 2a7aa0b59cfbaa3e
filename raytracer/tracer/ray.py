# -*- coding: utf-8 -*-
"""Луч: начало + направление (не обязательно единичной длины)."""

from raytracer.math.vec3 import Vec3


class Ray:
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vec3:
        """Точка origin + t * direction."""
        return self.origin + self.direction * t

    def reflect(self, point: Vec3, normal: Vec3) -> "Ray":
        """Зеркальный луч из `point`: d - 2 (d·n) n."""
        d = self.direction
        return Ray(point, d - normal * (2.0 * d.dot(normal)))

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"
