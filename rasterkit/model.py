"""Wavefront OBJ meshes: vertex positions and triangle faces."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union
import os

from .geometry import Vec3

PathLike = Union[str, "os.PathLike[str]"]


def _parse_vertex(tokens: Sequence[str]) -> Vec3:
    coords: list[float] = []
    for token in tokens[:3]:
        try:
            coords.append(float(token))
        except ValueError:
            break
    coords.extend([0.0] * (3 - len(coords)))
    return Vec3(*coords)


def _parse_face(tokens: Sequence[str]) -> list[int]:
    """Collect the vertex index of every "v/vt/vn" triple, stopping at the first bad one."""
    indices: list[int] = []
    for token in tokens:
        parts = token.split("/")
        if len(parts) != 3:
            break
        try:
            vertex, _, _ = (int(part) for part in parts)
        except ValueError:
            break
        indices.append(vertex - 1)
    return indices


class Model:
    """A mesh of vertices and faces given as zero-based vertex indices."""

    def __init__(self, vertices: Iterable[Vec3], faces: Iterable[Iterable[int]]) -> None:
        self._verts = list(vertices)
        self._faces = [list(face) for face in faces]

    def __repr__(self) -> str:
        return f"Model(nverts={self.nverts()}, nfaces={self.nfaces()})"

    @classmethod
    def parse(cls, text: str) -> "Model":
        """Build a model from OBJ text; only "v" and "f" lines are used."""
        vertices: list[Vec3] = []
        faces: list[list[int]] = []
        for line in text.splitlines():
            if line.startswith("v "):
                vertices.append(_parse_vertex(line.split()[1:]))
            elif line.startswith("f "):
                faces.append(_parse_face(line.split()[1:]))
        return cls(vertices, faces)

    @classmethod
    def load(cls, path: PathLike) -> "Model":
        """Read an OBJ file from disk."""
        return cls.parse(Path(path).read_text())

    def nverts(self) -> int:
        return len(self._verts)

    def nfaces(self) -> int:
        return len(self._faces)

    def vert(self, i: int) -> Vec3:
        return self._verts[i]

    def face(self, idx: int) -> list[int]:
        """Return a copy of the vertex indices of one face."""
        return list(self._faces[idx])