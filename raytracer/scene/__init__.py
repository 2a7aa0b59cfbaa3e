"""
Пакет scene – камера и свет, которые хост передаёт трассировщику.
"""

from raytracer.scene.camera import Camera, Perspective, Ortho
from raytracer.scene.light import Light

__all__ = ["Camera", "Perspective", "Ortho", "Light"]
