# minirt

A small ray tracer. It reads a scene description from a `.rt` file and renders
it with ambient, diffuse and specular (Phong) lighting and hard shadows. The
result is written as a binary PPM (P6) image.

Spheres, planes, capped cylinders and Möbius strips can be rendered. The
parser also accepts cones, tori, triangles, paraboloids and hyperboloids, but
these cannot be rendered: a scene that contains one of them is read without
complaint, and rendering it then fails with an error.

## Installation

```
pip install .
```

## Command line

```
minirt scene.rt
minirt scene.rt -o picture.ppm --width 800 --height 600
```

| Option | Meaning |
|--------|---------|
| `scene` | the scene file; it must end in `.rt` |
| `-o`, `--output` | output file; by default the scene's name with `.ppm` |
| `--width` | image width in pixels (default 600) |
| `--height` | image height in pixels (default 400) |

The command reads the scene, prints a summary of the ambient light, the
camera, the first light and every object, and then renders the image. Without
a scene argument it prints `Argument file needed` and exits with status 0.
If the file name does not end in `.rt`, the file cannot be read, a line is
malformed, or the scene holds an object that cannot be rendered, it prints the
error and exits with status 1.

## Scene files

Each line starts with an identifier; fields are separated by single spaces.
Vectors and colours are three comma-separated values. Every line must hold a
known identifier: a blank line is an error.

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,5 4 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,0,8 0,1,0 2 4 0,0,255
```

| Identifier | Fields |
|------------|--------|
| `A`  | brightness (0 to 1), colour |
| `C`  | position, direction, field of view (0 to 180) |
| `L`  | position, brightness, colour (may appear several times) |
| `sp` | centre, diameter, colour, optional shine |
| `pl` | point, normal, colour, optional shine |
| `cy` | centre, axis, diameter, height, colour, optional shine |
| `mo` | centre, radius, width, half-width limit, axis, colour, optional shine |
| `co` | apex, axis, angle (0 to 360), colour, optional shine |
| `to` | centre, axis, small radius, large radius, colour, optional shine |
| `tr` | three points, colour, optional shine |
| `pa`, `hy` | summit, axis, opening factor, colour, optional shine |

Directions and normals must have every component between -1 and 1 and must not
be the null vector. Colour values keep their low 8 bits. Numbers are written as
`<integer>[.<digits>]`. An object without a shine value gets 100. When a scene
is prepared for rendering, the half-width limit of every Möbius strip is set
to 5, whatever the file says.

A scene must have exactly one `A` line, exactly one `C` line, and at least one
`L` line.

## Library use

```python
from minirt.parser import load_scene
from minirt.render import render

scene = load_scene("scene.rt")
image = render(scene, 600, 400)
image.save("scene.ppm")
```

- `minirt.parser`: `load_scene(path)`, `parse_scene(lines)`, `parse_line(fields, scene)`;
  errors are raised as `SceneFileError` (with the line number in `.line`).
- `minirt.scene`: `Scene`, `Camera`, `Light`, `SceneObject`, `ObjType`, `Ray`.
- `minirt.render`: `render`, `primary_ray`, `camera_transform` and `Image`,
  with `put_pixel`, `get_pixel`, `to_ppm` and `save`.
- `minirt.intersect`: `closest_hit`, `hit_object`, `surface_normal`.
- `minirt.lighting`: `shade`, `in_shadow`.
- `minirt.cubic`: `solve_cubic(a0, a1, a2)` for the real roots of a monic cubic.
- `minirt.cli`: `describe_scene(scene)` and `main(argv)`.

Vectors (`minirt.vec3.Vec3`) and colours (`minirt.color.Color`) are immutable
values that support arithmetic operators. Normalizing a null vector raises
`ZeroVectorError`.

## What it does not do

The package does not open a window or show the image on screen; it only
writes a PPM file. Cones, tori, triangles, paraboloids and hyperboloids are
parsed and listed in the summary but not rendered.