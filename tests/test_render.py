import math

import pytest

from minirt.color import Color
from minirt.render import Image, camera_transform, compute_ray_dir, primary_ray, render
from minirt.scene import Camera, Light, ObjType, Scene, SceneObject
from minirt.vec3 import Vec3


def test_image_starts_black():
    image = Image(3, 2)
    assert image.get_pixel(2, 1) == Color(0, 0, 0)


def test_put_and_get_pixel_round_trip():
    image = Image(3, 2)
    image.put_pixel(1, 1, Color(10, 20, 30))
    assert image.get_pixel(1, 1) == Color(10, 20, 30)
    assert image.get_pixel(0, 0) == Color(0, 0, 0)


def test_put_pixel_outside_is_ignored():
    image = Image(2, 2)
    image.put_pixel(5, 0, Color(1, 2, 3))
    image.put_pixel(-1, 0, Color(1, 2, 3))
    assert all(image.get_pixel(x, y) == Color() for x in range(2) for y in range(2))


def test_get_pixel_outside_raises():
    with pytest.raises(IndexError):
        Image(2, 2).get_pixel(2, 0)


def test_ppm_encoding():
    image = Image(2, 1)
    image.put_pixel(0, 0, Color(255, 0, 1))
    assert image.to_ppm() == b"P6\n2 1\n255\n" + bytes([255, 0, 1, 0, 0, 0])


def test_save_writes_ppm(tmp_path):
    image = Image(1, 1)
    image.put_pixel(0, 0, Color(7, 8, 9))
    path = tmp_path / "out.ppm"
    image.save(path)
    assert path.read_bytes() == image.to_ppm()


def test_camera_transform_forward_stays_forward():
    result = camera_transform(Vec3(0, 0, 1), Vec3(0, 0, 1))
    assert result.x == pytest.approx(0.0)
    assert result.y == pytest.approx(0.0)
    assert result.z == pytest.approx(1.0)


@pytest.mark.parametrize("cam_dir", [Vec3(1, 2, 3), Vec3(0, 1, 0), Vec3(0, -1, 0.001)])
def test_camera_transform_preserves_length(cam_dir):
    local = Vec3(0.3, -0.4, 1.0)
    assert camera_transform(local, cam_dir).norm() == pytest.approx(local.norm())


def test_camera_transform_follows_camera_direction():
    cam_dir = Vec3(1, 0, 0)
    result = camera_transform(Vec3(0, 0, 2), cam_dir)
    assert result.x == pytest.approx(2.0)
    assert math.hypot(result.y, result.z) == pytest.approx(0.0, abs=1e-12)


def test_ray_directions_are_unit_and_symmetric():
    camera = Camera(position=Vec3(0, 0, 0), direction=Vec3(0, 0, 1), fov=90)
    left = compute_ray_dir(camera, 0, 0, 4, 4)
    right = compute_ray_dir(camera, 3, 0, 4, 4)
    assert left.norm() == pytest.approx(1.0)
    assert left.x == pytest.approx(-right.x)
    assert left.y == pytest.approx(right.y)


def test_primary_ray_starts_at_camera():
    camera = Camera(position=Vec3(1, 2, 3), direction=Vec3(0, 0, 1), fov=60)
    ray = primary_ray(camera, 2, 2, 5, 5)
    assert ray.origin == Vec3(1, 2, 3)
    assert ray.direction.z == pytest.approx(1.0)


def _scene(objects):
    return Scene(
        camera=Camera(position=Vec3(0, 0, 0), direction=Vec3(0, 0, 1), fov=90),
        ambient=Light(brightness=0.1, color=Color(255, 255, 255)),
        lights=[Light(position=Vec3(0, 0, 0), brightness=1.0, color=Color(255, 255, 255))],
        objects=objects,
    )


def test_render_sphere_in_front_of_camera():
    sphere = SceneObject(ObjType.SPHERE, position=Vec3(0, 0, 10), radius=1.0, color=Color(255, 0, 0))
    image = render(_scene([sphere]), 5, 5)
    assert (image.width, image.height) == (5, 5)
    assert image.get_pixel(2, 2).r > 0
    assert image.get_pixel(0, 0) == Color(0, 0, 0)


def test_render_empty_scene_is_black():
    image = render(_scene([]), 3, 3)
    assert all(image.get_pixel(x, y) == Color() for x in range(3) for y in range(3))


def test_render_requires_camera():
    with pytest.raises(ValueError):
        render(Scene(), 2, 2)