"""Scene description: rays, objects, lights and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .color import Color
from .vec3 import Vec3

WIDTH = 600
HEIGHT = 400
EPSILON = 1e-6
DEFAULT_SHINE = 100.0
MOEBIUS_EXTENT = 5.0


class ObjType(IntEnum):
    """Kinds of object a scene may hold."""

    SPHERE = 0
    PLANE = 1
    CYLINDER = 2
    CONE = 3
    TORUS = 4
    TRIANGLE = 5
    PARABOLOID = 6
    MOEBIUS = 7
    HYPERBOLOID = 8


_ORIENTED_TYPES = frozenset({ObjType.PLANE, ObjType.CYLINDER, ObjType.MOEBIUS})


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and going along ``direction``."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling ``t`` times the direction."""
        return self.origin + t * self.direction


@dataclass
class SceneObject:
    """A renderable object.

    ``radius`` and ``height`` carry the object's two sizes: radius and
    height for cylinders, main radius and width for Moebius strips,
    the two radii for tori, the opening factor for paraboloids and
    hyperboloids. ``extent`` bounds the strip parameter of a Moebius strip.
    """

    kind: ObjType
    position: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0
    height: float = 0.0
    angle: float = 0.0
    extent: float = 0.0
    point2: Vec3 = field(default_factory=Vec3)
    point3: Vec3 = field(default_factory=Vec3)
    color: Color = field(default_factory=Color)
    shine: float = 0.0


@dataclass
class Light:
    """A point light, or the ambient light when its position is unused."""

    position: Vec3 = field(default_factory=Vec3)
    brightness: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Camera:
    """Viewpoint with a viewing direction and a horizontal field of view in degrees."""

    position: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    fov: int = 0


@dataclass
class Scene:
    """Everything needed to render an image."""

    camera: Camera | None = None
    ambient: Light | None = None
    lights: list[Light] = field(default_factory=list)
    objects: list[SceneObject] = field(default_factory=list)

    def prepare(self) -> Scene:
        """Normalize directions and fill in rendering defaults, in place."""
        for obj in self.objects:
            if not obj.shine:
                obj.shine = DEFAULT_SHINE
            if obj.kind in _ORIENTED_TYPES:
                obj.normal = obj.normal.normalized()
            if obj.kind is ObjType.MOEBIUS:
                obj.extent = MOEBIUS_EXTENT
        if self.camera is not None:
            self.camera.direction = self.camera.direction.normalized()
        return self

    def is_complete(self) -> bool:
        """True when a camera, an ambient light and at least one light are set."""
        return self.camera is not None and self.ambient is not None and bool(self.lights)