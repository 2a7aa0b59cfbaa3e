# raytracer/scene/light.py
# ---------------------------------------------------------------
# Точечный источник света. Для трассировщика важна только позиция:
# затенение бинарное, цвет света в смешивание не входит.
# ---------------------------------------------------------------

from raytracer.core.color import Color
from raytracer.math.vec3 import Vec3


class Light:
    """Точечный свет."""
    def __init__(self, position, color: Color = Color.WHITE, name="Light"):
        self.name = name
        self.position = position if isinstance(position, Vec3) else Vec3(*position)
        self.color = color

    def __repr__(self):
        return f"Light({self.name!r}, {self.position!r})"
