# weekendtracer

A compact path tracer written in plain Python. It renders scenes made of
spheres, moving spheres, axis-aligned rectangles and boxes, with diffuse,
metal, glass, light-emitting and volumetric (smoke and fog) materials.
Large scenes are grouped in a bounding volume hierarchy, and one scene
uses importance sampling towards its light and glass sphere. Images are
written in the plain-text PPM (P3) format.

The package also carries a set of small Monte Carlo experiments: estimating
pi, stratified sampling, and integrating simple functions with different
probability densities.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Rendering from the command line

```
weekendtracer --scene cornell_box --width 100 --height 100 --samples 8 > image.ppm
```

The image goes to standard output (or to the file given with `--output`)
and progress goes to standard error. Rendering in pure Python is slow, so
start with a small image and few samples.

Options:

- `--scene NAME` – one of `weekend`, `random`, `two_spheres`,
  `two_perlin_spheres`, `globe`, `simple_light`, `cornell_box`,
  `cornell_box_blocks`, `cornell_balls`, `cornell_smoke`, `cornell_final`,
  `final` and `cornell_glass`. The default is `final`.
- `quality` – an optional first argument `MQ`, `HQ` or `SH` that picks a
  larger image and more samples per pixel.
- `--width`, `--height`, `--samples` – override the chosen size and the
  samples per pixel.
- `--image PATH` – the picture wrapped around the globe in the `globe` and
  `final` scenes; the default is `assets/earthmap.jpg`, which must exist
  for those two scenes to load.
- `--output PATH` – write the image to a file instead of standard output.

The `weekend` scene is lit by a white-to-blue sky; the other scenes have a
black background and are lit only by their own light sources.

## Monte Carlo experiments

```
weekendtracer-montecarlo pi -n 100000
```

Each experiment is a subcommand and takes `-n` for the number of samples:
`pi`, `pi-stratified` (where `-n` is the side of the sampling grid),
`x-squared`, `x-squared-linear`, `x-squared-uniform`, `x-squared-perfect`,
`cosine-squared`, `sphere-points`, `cosine-points`,
`cosine-cubed-uniform` and `cosine-cubed-cosine`. The `pi-running`
subcommand prints an ever-improving estimate of pi every `--every`
samples, forever, or until `--reports` estimates have been printed.

The same experiments are available as functions in
`weekendtracer.montecarlo`, such as `estimate_pi(n)`,
`estimate_pi_stratified(sqrt_n)`, `running_pi_estimates(report_every)` and
`integrate_cosine_cubed_cosine_pdf(n)`.

## Using the library

The building blocks live in separate modules:

- `weekendtracer.vec3` – `Vec3`, `Ray` and the shared random source
  (`random_double`, `seed`, `random_in_unit_sphere`, `random_in_unit_disk`).
- `weekendtracer.aabb` – `AABB` and `surrounding_box`.
- `weekendtracer.camera` – `Camera`, a thin-lens camera with a shutter
  interval for motion blur.
- `weekendtracer.sphere`, `weekendtracer.aarect` – `Sphere`,
  `MovingSphere`, `XYRect`, `XZRect`, `YZRect` and `Box`.
- `weekendtracer.hittable` – `HitRecord`, `Hittable`, `HittableList`,
  `FlipNormals`, `Translate` and `RotateY`.
- `weekendtracer.bvh` – `BVHNode`.
- `weekendtracer.material` – `Lambertian`, `Metal`, `Dielectric`,
  `DiffuseLight` and `Isotropic`, with `reflect`, `refract` and `schlick`.
- `weekendtracer.texture` – `ConstantTexture`, `CheckerTexture`,
  `NoiseTexture` and `ImageTexture` (loaded with `ImageTexture.from_file`).
- `weekendtracer.perlin` – `Perlin` noise with turbulence.
- `weekendtracer.onb` – `ONB` and direction sampling helpers.
- `weekendtracer.medium` – `ConstantMedium` for smoke and fog.
- `weekendtracer.pdf` – `CosinePdf`, `HittablePdf` and `MixturePdf`.
- `weekendtracer.scenes` – `Scene` and the ready-made scenes, such as
  `cornell_box()`, `random_scene()`, `two_perlin_spheres()`,
  `cornell_glass()` and `final_scene(image_path)`.
- `weekendtracer.render` – `render`, `write_ppm` and the shading functions
  `sky_color`, `color` and `color_with_lights`.

A scene can be rendered and saved like this:

```python
import sys

from weekendtracer.render import render, write_ppm
from weekendtracer.scenes import cornell_box
from weekendtracer.vec3 import seed

seed(1)
scene = cornell_box()
pixels = render(scene, 100, 100, 8)
write_ppm(sys.stdout, 100, 100, pixels)
```

`render` returns the pixels as `(r, g, b)` tuples, top row first. It shades
with `color`, against a black background, unless the scene names shapes to
sample as lights, in which case it uses `color_with_lights`.

## What it does not do

Images are written only as plain-text PPM; there is no other output format
and no window to view them in. Rendering runs in a single process on the
CPU.