"""
Камера: позиция + режим проекции (перспектива / орто).
"""

from dataclasses import dataclass
from raytracer.math.vec3 import Vec3


@dataclass(frozen=True)
class Perspective:
    aspect: float
    fovy: float      # радианы
    near: float
    far: float


@dataclass(frozen=True)
class Ortho:
    width: float
    height: float
    near: float
    far: float


class Camera:
    """
    Камера трассировщика.

    Трассировщик использует только `position` и плоскости `near`/`far`:
    они ограничивают дистанцию любого запроса пересечения.
    """
    def __init__(self, position: Vec3, mode, yaw: float = 0.0,
                 pitch: float = 0.0, up: Vec3 = Vec3(0.0, 1.0, 0.0),
                 name="Camera"):
        self.name = name
        self.position = position
        self.mode = mode
        self.yaw = yaw
        self.pitch = pitch
        self.up = up

    @classmethod
    def perspective(cls, position, aspect, fovy, near, far,
                    yaw=0.0, pitch=0.0, up=Vec3(0.0, 1.0, 0.0)):
        return cls(_as_vec3(position), Perspective(aspect, fovy, near, far),
                   yaw, pitch, up)

    @classmethod
    def ortho(cls, position, width, height, near, far,
              yaw=0.0, pitch=0.0, up=Vec3(0.0, 1.0, 0.0)):
        return cls(_as_vec3(position), Ortho(width, height, near, far),
                   yaw, pitch, up)

    @property
    def near(self) -> float:
        return self.mode.near

    @property
    def far(self) -> float:
        return self.mode.far

    def __repr__(self):
        return f"Camera({self.position!r}, {self.mode!r})"


def _as_vec3(value) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3(*value)
