"""Reading scene description (.rt) files."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from functools import partial

from .scene import Camera, Light, ObjType, Scene, SceneObject
from .values import (
    ParseError,
    check_angle,
    check_brightness,
    check_norm,
    is_double,
    parse_color,
    parse_double,
    parse_int,
    parse_shine,
    parse_vec3,
    split_fields,
)
from .vec3 import Vec3

EXTENSION = ".rt"
_MAX_FOV = 180


class SceneFileError(ValueError):
    """Raised when a scene file cannot be read or describes an invalid scene."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


def check_extension(path: str | os.PathLike) -> str | os.PathLike:
    """Return ``path`` if its name ends with '.rt', else raise SceneFileError."""
    if not str(os.fspath(path)).endswith(EXTENSION):
        raise SceneFileError("file extension invalid")
    return path


def _expect_count(fields: list[str], *allowed: int) -> None:
    if len(fields) not in allowed:
        raise ParseError(
            f"{fields[0]!r} takes {' or '.join(map(str, allowed))} fields, got {len(fields)}"
        )


def _number(text: str) -> float:
    if not is_double(text):
        raise ParseError(f"not a number: {text!r}")
    return parse_double(text)


def _direction(text: str) -> Vec3:
    return check_norm(parse_vec3(text))


def _set_shine(obj: SceneObject, fields: list[str], index: int) -> None:
    if len(fields) > index:
        obj.shine = parse_shine(fields[index])


def _add_object(scene: Scene, obj: SceneObject) -> None:
    # Later objects come first, so they win ties when looking for the closest hit.
    scene.objects.insert(0, obj)


def _ambient(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 3)
    if scene.ambient is not None:
        raise ParseError("ambient light already set")
    brightness = check_brightness(parse_double(fields[1]))
    scene.ambient = Light(brightness=brightness, color=parse_color(fields[2]))


def _camera(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 4)
    if scene.camera is not None:
        raise ParseError("camera already set")
    position = parse_vec3(fields[1])
    direction = _direction(fields[2])
    fov = parse_int(fields[3]) % 256
    if fov > _MAX_FOV:
        raise ParseError(f"field of view out of range: {fov}")
    scene.camera = Camera(position=position, direction=direction, fov=fov)


def _light(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 4)
    scene.lights.append(
        Light(
            position=parse_vec3(fields[1]),
            brightness=parse_double(fields[2]),
            color=parse_color(fields[3]),
        )
    )


def _sphere(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 4, 5)
    obj = SceneObject(ObjType.SPHERE, position=parse_vec3(fields[1]))
    obj.radius = _number(fields[2]) / 2
    obj.color = parse_color(fields[3])
    _set_shine(obj, fields, 4)
    _add_object(scene, obj)


def _plane(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 4, 5)
    obj = SceneObject(ObjType.PLANE, position=parse_vec3(fields[1]))
    obj.normal = _direction(fields[2])
    obj.color = parse_color(fields[3])
    _set_shine(obj, fields, 4)
    _add_object(scene, obj)


def _cylinder(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 6, 7)
    obj = SceneObject(ObjType.CYLINDER, position=parse_vec3(fields[1]))
    obj.normal = _direction(fields[2])
    diameter = _number(fields[3])
    height = _number(fields[4])
    obj.radius = diameter / 2
    obj.height = height
    obj.color = parse_color(fields[5])
    _set_shine(obj, fields, 6)
    _add_object(scene, obj)


def _cone(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 5, 6)
    obj = SceneObject(ObjType.CONE, position=parse_vec3(fields[1]))
    obj.normal = _direction(fields[2])
    obj.angle = check_angle(_number(fields[3]))
    obj.color = parse_color(fields[4])
    _set_shine(obj, fields, 5)
    _add_object(scene, obj)


def _torus(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 6, 7)
    obj = SceneObject(ObjType.TORUS, position=parse_vec3(fields[1]))
    obj.normal = _direction(fields[2])
    small = _number(fields[3])
    large = _number(fields[4])
    obj.radius = small
    obj.height = large
    obj.color = parse_color(fields[5])
    _set_shine(obj, fields, 6)
    _add_object(scene, obj)


def _triangle(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 5, 6)
    obj = SceneObject(
        ObjType.TRIANGLE,
        position=parse_vec3(fields[1]),
        point2=parse_vec3(fields[2]),
        point3=parse_vec3(fields[3]),
    )
    obj.color = parse_color(fields[4])
    _set_shine(obj, fields, 5)
    _add_object(scene, obj)


def _boloid(kind: ObjType, fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 5, 6)
    obj = SceneObject(kind, position=parse_vec3(fields[1]))
    obj.normal = _direction(fields[2])
    obj.radius = _number(fields[3])
    obj.color = parse_color(fields[4])
    _set_shine(obj, fields, 5)
    _add_object(scene, obj)


def _moebius(fields: list[str], scene: Scene) -> None:
    _expect_count(fields, 7, 8)
    obj = SceneObject(ObjType.MOEBIUS, position=parse_vec3(fields[1]))
    radius, width, extent = (_number(field) for field in fields[2:5])
    obj.radius = radius
    obj.height = width
    obj.extent = extent
    obj.normal = _direction(fields[5])
    obj.color = parse_color(fields[6])
    _set_shine(obj, fields, 7)
    _add_object(scene, obj)


_HANDLERS: dict[str, Callable[[list[str], Scene], None]] = {
    "A": _ambient,
    "C": _camera,
    "L": _light,
    "sp": _sphere,
    "pl": _plane,
    "cy": _cylinder,
    "co": _cone,
    "to": _torus,
    "tr": _triangle,
    "pa": partial(_boloid, ObjType.PARABOLOID),
    "hy": partial(_boloid, ObjType.HYPERBOLOID),
    "mo": _moebius,
}


def parse_line(fields: list[str], scene: Scene) -> Scene:
    """Apply one line, already split into fields, to ``scene``; raises ParseError."""
    if not fields:
        raise ParseError("empty line")
    handler = _HANDLERS.get(fields[0])
    if handler is None:
        raise ParseError(f"unknown identifier {fields[0]!r}")
    handler(fields, scene)
    return scene


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from lines of a scene file (line endings kept)."""
    scene = Scene()
    seen_any = False
    for number, line in enumerate(lines, start=1):
        seen_any = True
        try:
            parse_line(split_fields(line, " "), scene)
        except ParseError as exc:
            raise SceneFileError(f"file content error at line {number}: {exc}", number) from exc
    if not seen_any:
        raise SceneFileError("scene file is empty")
    if not scene.is_complete():
        raise SceneFileError("scene needs a camera, an ambient light and a light")
    return scene


def _split_lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


def load_scene(path: str | os.PathLike) -> Scene:
    """Read and parse the scene file at ``path``."""
    check_extension(path)
    try:
        with open(path, "rb") as stream:
            data = stream.read()
    except OSError as exc:
        raise SceneFileError(f"{os.fspath(path)}: {exc.strerror or exc}") from exc
    return parse_scene(_split_lines(data.decode("utf-8", errors="replace")))