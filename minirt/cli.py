"""Command-line entry point: render a scene file to a PPM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .intersect import UnsupportedObjectError
from .parser import SceneFileError, load_scene
from .render import render
from .scene import HEIGHT, WIDTH, Camera, Light, ObjType, Scene, SceneObject
from .vec3 import Vec3, ZeroVectorError


def _vec(v: Vec3) -> str:
    return ", ".join(f"{c:.6f}" for c in v)


def _rgb(obj) -> str:
    return ", ".join(str(c) for c in obj.color)


def _describe_object(obj: SceneObject) -> list[str]:
    kind = obj.kind
    if kind is ObjType.SPHERE:
        lines = ["SPHERE ----", f"pos = {_vec(obj.position)}", f"r = {obj.radius:.6f}"]
    elif kind is ObjType.PLANE:
        lines = ["PLANE ----", f"pt = {_vec(obj.position)}", f"n = {_vec(obj.normal)}"]
    elif kind is ObjType.CYLINDER:
        lines = [
            "CYLINDER ----",
            f"center = {_vec(obj.position)}",
            f"n = {_vec(obj.normal)}",
            f"r = {obj.radius:.6f}",
            f"height = {obj.height:.6f}",
        ]
    elif kind is ObjType.CONE:
        lines = [
            "CONE ----",
            f"pos = {_vec(obj.position)}",
            f"n = {_vec(obj.normal)}",
            f"a = {obj.angle:.6f}",
        ]
    elif kind is ObjType.TORUS:
        lines = [
            "TORE ----",
            f"pos = {_vec(obj.position)}",
            f"n = {_vec(obj.normal)}",
            f"short ray = {obj.radius:.6f}",
            f"long ray = {obj.height:.6f}",
        ]
    elif kind is ObjType.TRIANGLE:
        lines = [
            "TRIANGLE ----",
            f"pt1 = {_vec(obj.position)}",
            f"pt2 = {_vec(obj.point2)}",
            f"pt3 = {_vec(obj.point3)}",
        ]
    elif kind in (ObjType.PARABOLOID, ObjType.HYPERBOLOID):
        title = "PARABOLOID ----" if kind is ObjType.PARABOLOID else "HYPERBOLOID ----"
        lines = [
            title,
            f"summit = {_vec(obj.position)}",
            f"n = {_vec(obj.normal)}",
            f"open factor {obj.radius:.6f}",
        ]
    else:
        lines = [
            "MOEBIUS ----",
            f"O ray origin = {_vec(obj.position)}",
            f"D ray dir = {_vec(obj.normal)}",
            f"main ray = {obj.radius:.6f}",
            f"width = {obj.height:.6f}",
        ]
    lines.append(f"color = {_rgb(obj)}\n\n")
    return lines


def describe_scene(scene: Scene) -> str:
    """Human-readable dump of the scene's settings and objects."""
    ambient = scene.ambient or Light()
    camera = scene.camera or Camera()
    spot = scene.lights[0] if scene.lights else Light()
    lines = [
        "",
        "",
        "DEBUG : SET",
        "///////////",
        "set amb light ---- ",
        f"brightness = {ambient.brightness:.6f}",
        f"color = {_rgb(ambient)}\n\n",
        "set cam ---- ",
        f"pos = {_vec(camera.position)}",
        f"dir = {_vec(camera.direction)}",
        f"fov = {camera.fov}\n\n",
        "set spot light ---- ",
        f"pos = {_vec(spot.position)}",
        f"brightness = {spot.brightness:.6f}",
        f"color = {_rgb(spot)}\n\n",
        "DEBUG : OBJECTS",
        "///////////",
    ]
    for obj in scene.objects:
        lines.extend(_describe_object(obj))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Render the scene file named on the command line; returns the exit status."""
    parser = argparse.ArgumentParser(prog="minirt", description="Ray-trace a .rt scene into a PPM image.")
    parser.add_argument("scene", nargs="?", help="scene file (.rt)")
    parser.add_argument("-o", "--output", help="output PPM file (default: scene name with .ppm)")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    args = parser.parse_args(argv)

    if args.scene is None:
        print("Argument file needed")
        return 0
    if args.width <= 0 or args.height <= 0:
        parser.error("image dimensions must be positive")

    try:
        scene = load_scene(args.scene)
    except SceneFileError as exc:
        print(f"miniRT : {exc}", file=sys.stderr)
        return 1

    try:
        scene.prepare()
        print(describe_scene(scene), end="")
        image = render(scene, args.width, args.height)
    except (UnsupportedObjectError, ZeroVectorError) as exc:
        print(exc, file=sys.stderr)
        return 1

    output = args.output or Path(args.scene).with_suffix(".ppm")
    try:
        image.save(output)
    except OSError as exc:
        print(f"miniRT : {output}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())