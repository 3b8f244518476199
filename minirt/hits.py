"""Ray/object intersection distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .cubic import solve_cubic
from .scene import EPSILON, Ray, SceneObject
from .vec3 import Vec3


def hit_sphere(ray: Ray, obj: SceneObject) -> float:
    """Distance to the nearest hit on a sphere, or infinity.

    The ray direction is expected to be a unit vector.
    """
    oc = ray.origin - obj.position
    b = oc.dot(ray.direction)
    c = oc.dot(oc) - obj.radius * obj.radius
    delta = b * b - c
    if delta < 0:
        return math.inf
    sqrt_d = math.sqrt(delta)
    for t in (-b - sqrt_d, -b + sqrt_d):
        if t > EPSILON:
            return t
    return math.inf


def hit_plane(ray: Ray, obj: SceneObject) -> float:
    """Distance to an infinite plane, or infinity."""
    a = ray.direction.dot(obj.normal)
    b = obj.normal.dot(ray.origin - obj.position)
    if abs(a) < EPSILON:
        return math.inf
    t = -b / a
    if t < EPSILON:
        return math.inf
    return t


def _valid_body_hit(ray: Ray, obj: SceneObject, t: float) -> bool:
    if t < EPSILON:
        return False
    h = (ray.at(t) - obj.position).dot(obj.normal)
    return abs(h) <= obj.height / 2.0


def _cylinder_body(ray: Ray, obj: SceneObject, oc: Vec3) -> float:
    n = obj.normal
    d_proj = ray.direction - ray.direction.dot(n) * n
    oc_proj = oc - oc.dot(n) * n
    a = d_proj.dot(d_proj)
    b = 2.0 * d_proj.dot(oc_proj)
    c = oc_proj.dot(oc_proj) - obj.radius * obj.radius
    delta = b * b - 4 * a * c
    if delta < 0 or a == 0:
        return math.inf
    sqrt_d = math.sqrt(delta)
    candidates = ((-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a))
    return min((t for t in candidates if _valid_body_hit(ray, obj, t)), default=math.inf)


def _cylinder_cap(ray: Ray, obj: SceneObject, side: float) -> float:
    center = obj.position + (side * obj.height / 2.0) * obj.normal
    delta = ray.direction.dot(obj.normal)
    if abs(delta) < EPSILON:
        return math.inf
    t = (center - ray.origin).dot(obj.normal) / delta
    if t < EPSILON:
        return math.inf
    if (ray.at(t) - center).norm() <= obj.radius:
        return t
    return math.inf


def hit_cylinder(ray: Ray, obj: SceneObject) -> float:
    """Distance to a capped cylinder (body or either disc), or infinity."""
    oc = ray.origin - obj.position
    return min(
        _cylinder_body(ray, obj, oc),
        _cylinder_cap(ray, obj, -1.0),
        _cylinder_cap(ray, obj, 1.0),
    )


@dataclass(frozen=True)
class _Basis:
    """Orthonormal frame whose third axis is an object's normal."""

    u: Vec3
    v: Vec3
    w: Vec3

    @classmethod
    def from_normal(cls, normal: Vec3) -> _Basis:
        w = normal.normalized()
        if abs(w.x) < 1e-6 and abs(w.z) < 1e-6:
            helper = Vec3(1.0, 0.0, 0.0)
        else:
            helper = Vec3(0.0, 1.0, 0.0)
        u = helper.cross(w).normalized()
        return cls(u, w.cross(u), w)

    def to_local(self, vec: Vec3) -> Vec3:
        return Vec3(vec.dot(self.u), vec.dot(self.v), vec.dot(self.w))

    def to_world(self, vec: Vec3) -> Vec3:
        return vec.x * self.u + vec.y * self.v + vec.z * self.w


def _sign(x: float) -> int:
    if x < -EPSILON:
        return -1
    return 1 if x > EPSILON else 0


def inside_moebius(obj: SceneObject, point: Vec3) -> bool:
    """True when ``point`` (in the strip's own frame) lies on the bounded strip."""
    t = math.atan2(point.y, point.x)
    half = t / 2
    if _sign(math.sin(half)) != 0:
        s = point.z / math.sin(half)
    elif _sign(math.cos(t)):
        s = (point.x / math.cos(t) - obj.radius) / math.cos(half)
    else:
        s = (point.y / math.sin(t) - obj.radius) / math.cos(half)
    offset = obj.radius + s * math.cos(half)
    dx = point.x - offset * math.cos(t)
    dy = point.y - offset * math.sin(t)
    dz = point.z - s * math.sin(half)
    if _sign(dx * dx + dy * dy + dz * dz):
        return False
    return -obj.extent <= s <= obj.extent


def _moebius_coefficients(radius: float, origin: Vec3, direction: Vec3):
    a = radius
    b, d, f = origin
    c, e, g = direction
    denom = c * c * e + e * e * e - 2 * c * c * g - 2 * e * e * g + e * g * g
    if denom == 0:
        return None
    a0 = (
        b * b * d + d * d * d - 2 * b * b * f - 2 * d * d * f + d * f * f
        - 2 * b * f * a - d * a * a
    ) / denom
    a1 = (
        e * b * b - 2 * g * b * b + 2 * c * b * d + 3 * e * d * d - 2 * g * d * d
        - 4 * c * b * f - 4 * e * d * f + 2 * g * d * f + e * f * f
        - 2 * g * b * a - 2 * c * f * a - e * a * a
    ) / denom
    a2 = (
        2 * c * e * b - 4 * c * g * b + c * c * d + 3 * e * e * d - 4 * e * g * d
        + g * g * d - 2 * c * c * f - 2 * e * e * f + 2 * e * g * f - 2 * c * g * a
    ) / denom
    coeffs = (a0, a1, a2)
    if not all(math.isfinite(x) for x in coeffs):
        return None
    return coeffs


def hit_moebius(ray: Ray, obj: SceneObject) -> float:
    """Distance to a Moebius strip placed at ``position`` around ``normal``, or infinity."""
    basis = _Basis.from_normal(obj.normal)
    local = Ray(basis.to_local(ray.origin - obj.position), basis.to_local(ray.direction))
    coeffs = _moebius_coefficients(obj.radius, local.origin, local.direction)
    if coeffs is None:
        return math.inf
    for t in solve_cubic(*coeffs):
        if t > EPSILON and inside_moebius(obj, local.at(t)):
            return t
    return math.inf