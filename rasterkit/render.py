"""Render OBJ meshes to TGA images as wireframes or filled triangles."""

from __future__ import annotations

import random
from typing import Optional

from .geometry import Vec2, Vec3
from .model import Model
from .raster import line, triangle
from .tga import Format, TGAColor, TGAImage

WHITE = TGAColor.from_rgba(255, 255, 255, 255)
DEFAULT_SIZE = 800
DEFAULT_LIGHT = Vec3(0.0, 0.0, -1.0)


def to_screen(vertex: Vec3, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE) -> Vec2:
    """Map a vertex from the [-1, 1] cube onto integer pixel coordinates."""
    return Vec2(int((vertex.x + 1.0) * width / 2.0), int((vertex.y + 1.0) * height / 2.0))


def _as_float(vertex: Vec3) -> Vec3:
    return Vec3(*(float(c) for c in vertex))


def render_wireframe(model: Model, width: int = DEFAULT_SIZE,
                     height: int = DEFAULT_SIZE) -> TGAImage:
    """Draw every triangle edge in white; the origin ends up at the bottom left."""
    image = TGAImage(width, height, Format.RGB)
    for index in range(model.nfaces()):
        face = model.face(index)
        for j in range(3):
            start = to_screen(model.vert(face[j]), width, height)
            end = to_screen(model.vert(face[(j + 1) % 3]), width, height)
            line(image, start, end, WHITE)
    image.flip_vertically()
    return image


def render_flat_shaded(model: Model, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE,
                       light_dir: Vec3 = DEFAULT_LIGHT) -> TGAImage:
    """Fill faces lit by a directional light in grey; faces turned away are skipped."""
    image = TGAImage(width, height, Format.RGB)
    light = _as_float(light_dir)
    for index in range(model.nfaces()):
        face = model.face(index)[:3]
        world = [_as_float(model.vert(i)) for i in face]
        screen = [to_screen(v, width, height) for v in world]
        normal = (world[2] - world[0]) ^ (world[1] - world[0])
        try:
            normal = normal.normalize()
        except ValueError:
            continue
        intensity = normal * light
        if intensity > 0:
            level = int(intensity * 255)
            triangle(image, *screen, TGAColor.from_rgba(level, level, level, 255))
    image.flip_vertically()
    return image


def render_random_colors(model: Model, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE,
                         rng: Optional[random.Random] = None) -> TGAImage:
    """Fill every face with a random colour whose channels lie in 0..254."""
    rng = rng if rng is not None else random.Random()
    image = TGAImage(width, height, Format.RGB)
    for index in range(model.nfaces()):
        face = model.face(index)[:3]
        screen = [to_screen(model.vert(i), width, height) for i in face]
        color = TGAColor.from_rgba(rng.randrange(255), rng.randrange(255),
                                   rng.randrange(255), 255)
        triangle(image, *screen, color)
    image.flip_vertically()
    return image