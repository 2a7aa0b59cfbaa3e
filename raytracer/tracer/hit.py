# -*- coding: utf-8 -*-
"""
Контракт пересечения: любой примитив сцены умеет отвечать на запрос
«где луч впервые попадает в меня на отрезке [min, max]».
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from raytracer.core.color import Color
from raytracer.math.vec3 import Vec3
from raytracer.tracer.ray import Ray


@dataclass(frozen=True)
class Hit:
    distance: float
    position: Vec3
    normal: Vec3        # внешняя единичная нормаль
    color: Color
    reflect: float


class Hitable(ABC):
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def hit(self, ray: Ray, min: float, max: float) -> Optional[Hit]:
        """Ближайшее пересечение с distance ∈ [min, max] или None."""
        pass

    @abstractmethod
    def hit_distance(self, ray: Ray, min: float, max: float) -> Optional[float]:
        """Только дистанция – для теневых лучей, без построения Hit."""
        pass
