"""Camera rays, the render loop and the output image."""

from __future__ import annotations

import math
from os import PathLike

from .color import Color
from .intersect import closest_hit
from .lighting import shade
from .scene import HEIGHT, WIDTH, Camera, Ray, Scene
from .vec3 import Vec3


class Image:
    """A width x height grid of colours, black to begin with."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [Color() for _ in range(width * height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; coordinates outside the image are ignored."""
        if self._inside(x, y):
            self._pixels[x + y * self.width] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Colour of a pixel; raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self._pixels[x + y * self.width]

    def to_ppm(self) -> bytes:
        """Binary PPM (P6) encoding of the image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(channel for pixel in self._pixels for channel in pixel)

    def save(self, path: str | PathLike) -> None:
        """Write the image as a binary PPM file."""
        with open(path, "wb") as stream:
            stream.write(self.to_ppm())


def camera_transform(dir_local: Vec3, cam_dir: Vec3) -> Vec3:
    """Map a direction from camera space (z forward, y up) to world space."""
    fwd = cam_dir.normalized()
    up_ref = Vec3(0.0, 0.0, 1.0) if abs(fwd.y) > 0.99 else Vec3(0.0, 1.0, 0.0)
    right = fwd.cross(up_ref).normalized()
    up = right.cross(fwd).normalized()
    return dir_local.x * right + dir_local.y * up + dir_local.z * fwd


def compute_ray_dir(camera: Camera, i: int, j: int, width: int = WIDTH, height: int = HEIGHT) -> Vec3:
    """Unit direction of the primary ray through the centre of pixel (i, j)."""
    half = math.tan(math.radians(camera.fov) / 2)
    px = (2 * ((i + 0.5) / width) - 1) * half * (width / height)
    py = (1 - 2 * ((j + 0.5) / height)) * half
    return camera_transform(Vec3(px, py, 1.0), camera.direction).normalized()


def primary_ray(camera: Camera, i: int, j: int, width: int = WIDTH, height: int = HEIGHT) -> Ray:
    """Ray leaving the camera through pixel (i, j)."""
    return Ray(camera.position, compute_ray_dir(camera, i, j, width, height))


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> Image:
    """Ray-trace ``scene`` into a new image; the scene is prepared in place first."""
    if scene.camera is None:
        raise ValueError("scene has no camera")
    scene.prepare()
    image = Image(width, height)
    for j in range(height):
        for i in range(width):
            ray = primary_ray(scene.camera, i, j, width, height)
            hit = closest_hit(scene.objects, ray)
            if hit is None:
                continue
            obj, t = hit
            image.put_pixel(i, j, shade(scene, obj, ray.at(t), ray.origin))
    return image