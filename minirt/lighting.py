"""Phong shading with hard shadows."""

from __future__ import annotations

import math

from .color import Color
from .intersect import closest_hit, surface_normal
from .scene import EPSILON, Light, ObjType, Ray, Scene, SceneObject
from .vec3 import Vec3


def in_shadow(scene: Scene, light: Light, point: Vec3) -> bool:
    """True when an object lies between ``point`` and ``light``."""
    to_light = light.position - point
    distance = to_light.norm()
    direction = to_light.normalized()
    ray = Ray(point + EPSILON * direction, direction)
    hit = closest_hit(scene.objects, ray)
    if hit is None:
        return False
    _, t = hit
    return EPSILON < t < distance


def _power(base: float, exponent: float) -> float:
    if base == 0.0 and exponent < 0:
        return math.inf
    return base**exponent


def _diffuse(normal: Vec3, to_light: Vec3, obj: SceneObject, light: Light) -> Color:
    cosine = to_light.dot(normal)
    if obj.kind is ObjType.PLANE:
        factor = light.brightness * abs(cosine)
    else:
        factor = light.brightness * max(0.0, cosine)
    return (light.color * obj.color).scaled(factor * light.brightness)


def _specular(normal: Vec3, to_light: Vec3, view: Vec3, obj: SceneObject, light: Light) -> Color:
    cosine = normal.dot(to_light)
    reflected = (2.0 * abs(cosine)) * normal - to_light
    factor = 0.0
    if cosine > 0.0:
        factor = light.brightness * _power(max(0.0, reflected.dot(view)), obj.shine)
    return light.color.scaled(factor * light.brightness)


def shade(scene: Scene, obj: SceneObject, point: Vec3, view_origin: Vec3) -> Color:
    """Colour of ``obj`` at ``point`` seen from ``view_origin``.

    Ambient light plus, for every light that reaches the point, a
    diffuse and a specular term.
    """
    if scene.ambient is not None:
        result = (scene.ambient.color * obj.color).scaled(scene.ambient.brightness)
    else:
        result = Color()
    normal = surface_normal(obj, point)
    view = (view_origin - point).normalized()
    for light in scene.lights:
        if in_shadow(scene, light, point):
            continue
        to_light = (light.position - point).normalized()
        result = result + _diffuse(normal, to_light, obj, light)
        result = result + _specular(normal, to_light, view, obj, light)
    return result