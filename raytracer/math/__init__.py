"""
Математический суб‑пакет: Vec3.
"""

from raytracer.math.vec3 import Vec3

__all__ = ["Vec3"]
