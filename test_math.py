# -*- coding: utf-8 -*-
import numpy as np
import pytest
from raytracer.math.vec3 import Vec3
from raytracer.core.color import Color
from raytracer.tracer.ray import Ray

def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (a / 2).as_np().tolist() == [0.5, 1, 1.5]
    assert (-a).as_np().tolist() == [-1, -2, -3]
    assert a.dot(b) == pytest.approx(2.0)

def test_vec3_normalisation_safe():
    assert Vec3(0, 0, 0).normalized() == Vec3(0, 0, 0)
    assert Vec3(2, 0, 0).normalized().length() == pytest.approx(1.0)

def test_color_arithmetic_keeps_alpha():
    c = Color(0.2, 0.4, 0.6, 1.0)
    assert np.allclose((c * 0.5).as_np(), [0.1, 0.2, 0.3, 1.0])
    assert np.allclose((c + Color.WHITE).as_np(), [1.2, 1.4, 1.6, 1.0])
    assert np.allclose((c / 2).as_np(), [0.1, 0.2, 0.3, 1.0])

def test_color_average_of_samples_stays_opaque():
    acc = Color.BLACK
    for _ in range(4):
        acc = acc + Color(1.0, 0.5, 0.25, 1.0)
    avg = acc / 4
    assert np.allclose(avg.as_np(), [1.0, 0.5, 0.25, 1.0])

def test_color_to_bytes_clamps():
    assert Color(2.0, -1.0, 0.5, 1.0).to_bytes() == bytes([255, 0, 127, 255])
    assert Color.BLACK.to_bytes() == bytes([0, 0, 0, 255])

def test_ray_at():
    ray = Ray(Vec3(1, 0, 0), Vec3(0, 2, 0))
    assert np.allclose(ray.at(1.5).as_np(), [1, 3, 0])

@pytest.mark.parametrize("direction, normal", [
    (Vec3(1, -1, 0), Vec3(0, 1, 0)),
    (Vec3(0.3, 0.2, 1.0), Vec3(0, 0, -1)),
    (Vec3(-2, 5, 0.5), Vec3(1, 1, 1).normalized()),
])
def test_reflect_flips_normal_component(direction, normal):
    ray = Ray(Vec3(0, 0, 0), direction)
    point = Vec3(1, 2, 3)
    reflected = ray.reflect(point, normal)
    assert reflected.origin == point
    assert reflected.direction.dot(normal) == pytest.approx(-direction.dot(normal), rel=1e-5, abs=1e-5)
    # касательная составляющая не меняется
    tangent_in = direction - normal * direction.dot(normal)
    tangent_out = reflected.direction - normal * reflected.direction.dot(normal)
    assert np.allclose(tangent_in.as_np(), tangent_out.as_np(), atol=1e-5)
