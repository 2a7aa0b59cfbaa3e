# raytracer/core/color.py
"""
RGBA‑цвет (float32). Каналы хранятся в диапазоне [0, 1], но арифметика
их не ограничивает – обрезка происходит только при переводе в байты.

Сложение и умножение/деление на скаляр работают только с RGB‑каналами,
альфа берётся у левого операнда: так непрозрачный цвет остаётся
непрозрачным при усреднении сэмплов и смешивании с отражением.
"""

import numpy as np
from typing import Tuple


class Color:
    """Цвет RGBA поверх 4‑компонентного ndarray."""

    __slots__ = ("_v",)

    def __init__(self, r: float = 0.0, g: float = 0.0,
                 b: float = 0.0, a: float = 1.0):
        self._v = np.array([r, g, b, a], dtype=np.float32)

    @classmethod
    def from_np(cls, array) -> "Color":
        r, g, b, a = np.asarray(array, dtype=np.float32).reshape(4)
        return cls(r, g, b, a)

    # -----------------------------------------------------------------
    # каналы
    # -----------------------------------------------------------------
    @property
    def r(self) -> float:
        return float(self._v[0])

    @property
    def g(self) -> float:
        return float(self._v[1])

    @property
    def b(self) -> float:
        return float(self._v[2])

    @property
    def a(self) -> float:
        return float(self._v[3])

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Color") -> "Color":
        v = self._v.copy()
        v[:3] += other._v[:3]
        return Color(*v)

    def __mul__(self, scalar: float) -> "Color":
        v = self._v.copy()
        v[:3] *= scalar
        return Color(*v)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Color":
        v = self._v.copy()
        v[:3] /= scalar
        return Color(*v)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -----------------------------------------------------------------
    # преобразования
    # -----------------------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_bytes(self) -> bytes:
        """RGBA8: каждый канал обрезается в [0, 1] и переводится в 0..255."""
        return to_rgba8(self._v).tobytes()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Color({self.r:.3f}, {self.g:.3f}, {self.b:.3f}, {self.a:.3f})"


def to_rgba8(colors: np.ndarray) -> np.ndarray:
    """float‑каналы [..., 4] → uint8 с обрезкой по [0, 1]."""
    return (np.clip(colors, 0.0, 1.0) * 255.0).astype(np.uint8)


Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.GREY = Color(0.5, 0.5, 0.5, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
