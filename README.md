# rasterkit

A small toolkit for software rasterisation in pure Python, with no
dependencies outside the standard library.

## Modules

- **`rasterkit.tga`**: `TGAImage`, an in-memory raster that decodes and
  encodes Truevision TGA data (uncompressed types 2/3 and RLE types 10/11;
  1, 3 or 4 bytes per pixel). It has `get`, `set`, `flip_horizontally`,
  `flip_vertically`, `scale`, `clear` and `copy`, plus `from_bytes`/`read`
  and `to_bytes`/`write`. `get` outside the image returns a blank colour and
  `set` outside it returns `False`. Colours are `TGAColor` values (built with
  `TGAColor.from_rgba` or `TGAColor.from_value`; multiplying by a number
  scales every channel). `Format` names the pixel sizes (`GRAYSCALE`, `RGB`,
  `RGBA`). Malformed or unsupported data raises `TGAError`, a `ValueError`.
- **`rasterkit.geometry`**: frozen `Vec2` and `Vec3` vectors with `+`, `-`,
  scaling by `*`; `Vec3` also has `dot` (or `*` with a vector), `cross` (or
  `^`), `norm` and `normalize`, which returns a new vector and raises
  `ValueError` for a zero vector.
- **`rasterkit.model`**: `Model`, a Wavefront OBJ reader that keeps only
  vertex positions (`v` lines) and the vertex indices of faces written as
  `v/vt/vn` triples (`f` lines). Use `Model.parse(text)` or
  `Model.load(path)`, then `nverts`, `nfaces`, `vert(i)` and `face(i)`.
- **`rasterkit.raster`**: lines (`draw_line_bresenham`, `draw_line_dda`,
  `draw_line`, `draw_line_dda_step`, `line`), circles (`circle_bresenham`,
  `circle_dda`, `circle_parametric`, `circle_arg`) and scanline triangle
  filling (`triangle`). Every function takes the image first and draws on it
  in place; pixels that fall outside are skipped.
- **`rasterkit.antialias`**: `line_bresenham_mod`, a Bresenham line with an
  intensity-weighted error term, and `line_wu`, a Wu-style line that shades
  two neighbouring pixels per step. `sign(a)` returns 1, -1 or 0.
- **`rasterkit.render`**: `render_wireframe`, `render_flat_shaded` (lit by a
  directional light, `(0, 0, -1)` by default) and `render_random_colors`
  turn a `Model` into an RGB `TGAImage` with the origin at the bottom left.
  `to_screen` maps a vertex from the [-1, 1] cube to pixel coordinates.
- **`rasterkit.colors`**: `RGB`, `CMY`, `CMYK`, `HSV`, `HLS` and `XYZ`
  values and the conversions `rgb_to_cmy`, `cmy_to_rgb`, `rgb_to_cmyk`,
  `cmyk_to_rgb`, `rgb_to_hsv`, `hsv_to_rgb`, `rgb_to_hls`, `hls_to_rgb`,
  `rgb_to_xyz` and `xyz_to_rgb`. Hues are integer degrees, and a hue of 0
  means "undefined": it prints as `NaN`, and converting it back to RGB
  gives no hue. `hsv_to_rgb` rejects negative hues and `hls_to_rgb` hues
  outside 0..359 with `ValueError`.
- **`rasterkit.cli`**: the command-line tool; `draw_shapes(choice, values)`
  and `draw_antialiased(choice, values)` return the 100×100 image the
  interactive commands would write.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from rasterkit.tga import TGAImage, TGAColor, Format
from rasterkit.raster import draw_line_bresenham, circle_bresenham

white = TGAColor.from_rgba(255, 255, 255, 255)
red = TGAColor.from_rgba(255, 0, 0, 255)

image = TGAImage(100, 100, Format.RGB)
draw_line_bresenham(image, 10, 10, 90, 60, white)
circle_bresenham(image, 50, 50, 30, white)
image.set(50, 50, red)

image.flip_vertically()          # put the origin in the bottom-left corner
image.write("output.tga", True)  # RLE-compressed

again = TGAImage.read("output.tga")
pixel = again.get(10, 89)
```

```python
from rasterkit.model import Model
from rasterkit.render import render_wireframe

model = Model.load("head.obj")
render_wireframe(model, 800, 800).write("wireframe.tga", True)
```

```python
from rasterkit.colors import RGB, rgb_to_cmyk, rgb_to_hsv

cmyk = rgb_to_cmyk(RGB(0.2, 0.4, 0.6))
hsv = rgb_to_hsv(RGB(0.2, 0.4, 0.6))
```

## Command-line tools

`rasterkit shapes` (also what plain `rasterkit` does) reads from standard
input a menu choice (1–5: line, DDA line, DDA circle, parametric circle,
Bresenham circle) and then its coordinates, draws it in white on a 100×100
canvas with the end points or centre marked in red, and writes a TGA file
(`output.tga`, or the path given with `-o`). An unknown choice writes a
blank image.

```
rasterkit
rasterkit shapes -o shapes.tga
```

`rasterkit antialias` works the same way with two choices: the modified
Bresenham line and the Wu line.

```
rasterkit antialias -o smooth.tga
```

`rasterkit render STYLE [MODEL]` renders an OBJ file (default
`obj/african_head.obj`) as `wireframe`, `shaded` or `random`; `--size`
sets the square image size (800), `--seed` seeds the random colours and
`-o` sets the output file. The vertex and face counts go to standard error.

```
rasterkit render shaded head.obj --size 512 -o head.tga
```

`rasterkit colors`, or `rasterkit-colors`, asks repeatedly for a colour in
one of the RGB, CMY, CMYK, HSV, HLS or XYZ models and prints it in all six;
enter `0` to quit.

```
rasterkit-colors
```

All commands return exit status 1 and print a message on bad input or a
file that cannot be read or written.

## What it does not do

There is no image viewer: results are only written as TGA files. TGA
reading covers true-colour and grayscale images, not colour-mapped ones.
The OBJ reader ignores texture coordinates, normals and every line other
than `v` and `f`, and the renderers have no depth buffer, textures or
perspective projection.