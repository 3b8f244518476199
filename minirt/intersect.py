"""Dispatch of intersection and normal computations by object kind."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .hits import hit_cylinder, hit_moebius, hit_plane, hit_sphere
from .normals import cylinder_normal, moebius_normal, plane_normal, sphere_normal
from .scene import ObjType, Ray, SceneObject
from .vec3 import Vec3

_HITTERS = {
    ObjType.SPHERE: hit_sphere,
    ObjType.PLANE: hit_plane,
    ObjType.CYLINDER: hit_cylinder,
    ObjType.MOEBIUS: hit_moebius,
}

_NORMALS = {
    ObjType.SPHERE: sphere_normal,
    ObjType.PLANE: plane_normal,
    ObjType.CYLINDER: cylinder_normal,
    ObjType.MOEBIUS: moebius_normal,
}


class UnsupportedObjectError(ValueError):
    """Raised for an object kind that cannot be rendered."""


def _lookup(table, obj: SceneObject):
    try:
        return table[obj.kind]
    except KeyError:
        raise UnsupportedObjectError(f"cannot render objects of kind {obj.kind.name}") from None


def hit_object(ray: Ray, obj: SceneObject) -> float:
    """Distance along ``ray`` to ``obj``, or infinity when it misses."""
    return _lookup(_HITTERS, obj)(ray, obj)


def surface_normal(obj: SceneObject, point: Vec3) -> Vec3:
    """Normal of ``obj`` at ``point``."""
    return _lookup(_NORMALS, obj)(obj, point)


def closest_hit(objects: Iterable[SceneObject], ray: Ray) -> tuple[SceneObject, float] | None:
    """The nearest object hit by ``ray`` with its distance, or None.

    On equal distances the object met first in ``objects`` wins.
    """
    closest = None
    closest_t = math.inf
    for obj in objects:
        t = hit_object(ray, obj)
        if 0 < t < closest_t:
            closest, closest_t = obj, t
    if closest is None:
        return None
    return closest, closest_t