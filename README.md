# raytracer

A compact path tracer that renders scenes made of spheres. Every sphere
carries one of three materials:

- **Diffuse**: a matte surface. It scatters light in random directions and
  tints it with its colour.
- **Metallic**: a reflective surface with an albedo and a fuzz factor. The
  fuzz factor blurs reflections and is capped at 1.
- **Crystalline**: a glass-like dielectric with a refractive index. It
  refracts or reflects according to Schlick's approximation.

Rays that hit nothing take their colour from a gradient. The gradient runs
from white (`Scene.horizon`) to sky blue (`Scene.sky`) as the ray points
upward. Each ray follows at most `Scene.depth` bounces (50 by default). A
ray still bouncing after that gives black. The camera is a thin-lens
camera with depth of field.

Pixel colours are averaged over several samples and gamma-corrected with a
square root. They are stored as BGR byte triplets, bottom row first, and
written as an uncompressed 24-bit BMP. The image width must be a multiple
of 8.

## Installation

```console
pip install .
```

To run the tests:

```console
pip install ".[test]"
pytest
```

## Command line

Installing the package puts a `raytracer` command on your path:

```console
raytracer
```

By default the command renders a random scene at 256×256 pixels with 10
samples per pixel. It writes the result to `imgMPI_hibrido.bmp`. The random
scene has these parts:

- a large grey ground sphere
- a grid of small spheres with randomly chosen materials
- three large spheres: glass, diffuse and metal

The camera looks from `(13, 2, 3)` towards the origin.

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `render` (positional) | Before the main image, also render a separate image to `imgCPU_f0.bmp`. | off |
| `--width`, `--height` | Image size in pixels. | 256 |
| `--samples` | Samples per pixel. | 10 |
| `--strategy` | How work is split: `rows`, `columns` or `blocks`. | `rows` |
| `--workers` | Number of worker processes. | number of CPUs |
| `--seed` | Seed for the scene and the render. | random |
| `--scene` | Scene description file to render instead of the random scene. | none |
| `--output` | Output file. | `imgMPI_hibrido.bmp` |

The command prints the strategy, the worker count and the rendering time.
It then prints the name of each image it writes. The exit status is 0 on
success. The status is 1, with a message on standard error, in these cases:

- the image cannot be encoded, for example when the width is not a multiple
  of 8
- a file cannot be read or written

## Library use

```python
import random

from raytracer.bmp import write_bmp
from raytracer.render import ParallelStrategy, default_camera, render
from raytracer.scene_loader import random_scene

scene = random_scene(random.Random(1))
camera = default_camera(256, 256)
pixels = render(
    width=256,
    height=256,
    samples=10,
    camera=camera,
    scene=scene,
    strategy=ParallelStrategy.ROWS,
    workers=4,
    seed=1,
)
write_bmp("out.bmp", pixels, 256, 256)
```

`render` cuts the image into pieces according to `ParallelStrategy`:

- `ROWS`: one piece per row.
- `COLUMNS`: one piece per column.
- `BLOCKS`: a 4×4 grid of rectangles.

Each piece is rendered with its own generator derived from `seed`. For a
fixed seed and strategy the result is therefore the same whatever the
number of `workers`. With `workers` above 1 the pieces are rendered in
separate processes.

Lower-level helpers in `raytracer.render`:

- `render_region` renders one `RenderRegion`.
- `render_pixel` renders a single pixel.
- `row_partition(height, parts)` splits rows into contiguous ranges. The
  first ranges take one extra row each.
- `block_regions(width, height, blocks_x, blocks_y)` builds a grid of
  regions. The last column and the last row of the grid take the
  remainder.

### Scene files

`raytracer.scene_loader.load_scene` reads a text file with one sphere per
line:

```text
Object Sphere ( (0, -1000, 0, 1000 ) Diffuse ( (0.5, 0.5, 0.5) )
Object Sphere ( (4, 1, 0, 1.0 ) Metallic ( (0.7, 0.6, 0.5, 0.0) )
Object Sphere ( (0, 1, 0, 1.0 ) Crystalline ( 1.5 )
```

Tokens are separated by whitespace, and the parentheses shown as separate
tokens must stand alone. A line gives the sphere's centre and radius, then
its material:

- `Diffuse` takes a colour.
- `Metallic` takes a colour and a fuzz value.
- `Crystalline` takes a refractive index.

`load_scene` skips blank lines. It logs malformed lines as warnings and
skips them too. `parse_scene_line` parses a single line:

- it returns a `SceneObject`;
- it returns `None` for a blank line;
- it raises `SceneFormatError` for a malformed line.

### Building blocks

| Module | Contents |
| --- | --- |
| `raytracer.vec3` | `Vec3`, `dot`, `cross`, `unit_vector` |
| `raytracer.ray` | `Ray` |
| `raytracer.geometry` | `Shape`, `Sphere`, `Collision` |
| `raytracer.materials` | `Material`, `Diffuse`, `Metallic`, `Crystalline`, `Scatter` |
| `raytracer.optics` | `reflect`, `refract`, `schlick` |
| `raytracer.sampling` | `random_float`, `random_in_unit_sphere`, `random_in_unit_disk` |
| `raytracer.camera` | `Camera` |
| `raytracer.scene` | `Scene`, `SceneObject` |
| `raytracer.scene_loader` | `load_scene`, `parse_scene_line`, `random_scene`, `SceneFormatError` |
| `raytracer.render` | `render`, `render_region`, `render_pixel`, `default_camera`, `ParallelStrategy`, `RenderRegion`, `row_partition`, `block_regions` |
| `raytracer.bmp` | `encode_bmp`, `write_bmp`, `BMPError` |

Sampling, scattering and scene generation all draw from a `random.Random`
instance that you pass in. A fixed seed gives the same output every time.

## Limitations

- Spheres are the only shape.
- Light comes only from the background gradient; there are no light sources.
- BMP is the only output format.
- Work is spread over processes on the local machine only. There is no
  distribution across several machines.