"""Surface normals at hit points."""

from __future__ import annotations

from .hits import _Basis
from .scene import EPSILON, SceneObject
from .vec3 import Vec3


def sphere_normal(obj: SceneObject, point: Vec3) -> Vec3:
    """Outward unit normal of a sphere."""
    return (point - obj.position).normalized()


def plane_normal(obj: SceneObject, point: Vec3) -> Vec3:
    """The plane's own normal, whatever the point."""
    return obj.normal


def check_discs(obj: SceneObject, point: Vec3) -> int:
    """1 if ``point`` is on the bottom disc of a cylinder, -1 on the top disc, else 0."""
    n = obj.normal
    half = obj.height / 2.0
    h = (point - obj.position).dot(n)
    bottom = obj.position + (-half) * n
    if (point - bottom).norm() <= obj.radius and h <= -half + EPSILON:
        return 1
    top = obj.position + half * n
    if (point - top).norm() <= obj.radius and h >= half - EPSILON:
        return -1
    return 0


def cylinder_normal(obj: SceneObject, point: Vec3) -> Vec3:
    """Normal of a capped cylinder: along the axis on the discs, radial on the body."""
    disc = check_discs(obj, point)
    if disc:
        return float(disc) * obj.normal
    axis_point = obj.position + (point - obj.position).dot(obj.normal) * obj.normal
    return (point - axis_point).normalized()


def moebius_normal(obj: SceneObject, point: Vec3) -> Vec3:
    """Unit normal of a Moebius strip from its implicit equation, mapped to the world frame."""
    basis = _Basis.from_normal(obj.normal)
    x, y, z = point
    local = Vec3(
        -2 * obj.radius * z + 2 * x * y - 4 * x * z,
        -obj.height + x * x + 3 * y * y - 4 * y * z + z * z,
        -2 * obj.radius * x - 2 * x * x - 2 * y * y + 2 * y * z,
    ).normalized()
    return basis.to_world(local).normalized()