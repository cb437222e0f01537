"""Back-face culling and perspective projection of a convex polyhedron."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Vertex:
    """A point or vector in three dimensions."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vertex) -> Vertex:
        return Vertex(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vertex) -> Vertex:
        return Vertex(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vertex:
        return Vertex(-self.x, -self.y, -self.z)

    def __truediv__(self, divisor: float) -> Vertex:
        return Vertex(self.x / divisor, self.y / divisor, self.z / divisor)

    def dot(self, other: Vertex) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vertex) -> Vertex:
        """Return the vector product with ``other``."""
        return Vertex(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


LIGHT = Vertex(0, 0, 100)
PROJECTION_DISTANCE = 1e10
ROTATION_STEP = 5 * 3.14 / 180


def _mean(points: Iterable[Vertex]) -> Vertex:
    items = list(points)
    total = Vertex(0, 0, 0)
    for point in items:
        total = total + point
    return total / len(items)


@dataclass(frozen=True)
class Polyhedron:
    """A convex solid given by its vertices and its faces.

    Each surface lists vertex indices in order around the face.
    """

    vertices: tuple[Vertex, ...]
    surfaces: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        surfaces = tuple(tuple(surface) for surface in self.surfaces)
        if not vertices:
            raise ValueError("a polyhedron needs vertices")
        for surface in surfaces:
            if len(surface) < 3:
                raise ValueError(f"surface {surface} has fewer than three vertices")
            if any(not 0 <= index < len(vertices) for index in surface):
                raise ValueError(f"surface {surface} names a missing vertex")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "surfaces", surfaces)

    @classmethod
    def pyramid(cls) -> Polyhedron:
        """Return a square pyramid with its apex on the y axis."""
        return cls(
            vertices=(
                Vertex(0, 40, 0),
                Vertex(-20, 0, -20),
                Vertex(20, 0, -20),
                Vertex(20, 0, 20),
                Vertex(-20, 0, 20),
            ),
            surfaces=((0, 1, 2), (0, 2, 3), (0, 3, 4), (0, 4, 1), (1, 2, 3, 4)),
        )

    def centroid(self) -> Vertex:
        """Return the mean of the vertices."""
        return _mean(self.vertices)

    def visible_surfaces(self, light: Vertex = LIGHT) -> list[bool]:
        """Return, for each surface, whether it faces the light source.

        Normals are turned to point away from the centroid; a surface is
        visible when the vector from the light to its mean opposes its normal.
        Dot products are truncated to integers before their sign is taken.
        """
        centre = self.centroid()
        result = []
        for surface in self.surfaces:
            a, b, c = (self.vertices[index] for index in surface[:3])
            normal = (b - a).cross(c - a)
            if int((a - centre).dot(normal)) < 0:
                normal = -normal
            mean = _mean(self.vertices[index] for index in surface)
            result.append(int((mean - light).dot(normal)) < 0)
        return result

    def project(self, distance: float = PROJECTION_DISTANCE) -> list[tuple[float, float]]:
        """Project every vertex onto the plane z = 0 from a centre at z = -distance."""
        return [
            (v.x * distance / (distance + v.z), v.y * distance / (distance + v.z))
            for v in self.vertices
        ]

    def visible_edges(
        self, distance: float = PROJECTION_DISTANCE, light: Vertex = LIGHT
    ) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Return the projected edges of every visible surface, each face closed."""
        projected = self.project(distance)
        edges = []
        for surface, visible in zip(self.surfaces, self.visible_surfaces(light)):
            if not visible:
                continue
            closing: Sequence[int] = surface[1:] + surface[:1]
            edges.extend((projected[a], projected[b]) for a, b in zip(surface, closing))
        return edges

    def rotate_y(self, angle: float) -> Polyhedron:
        """Return a copy turned by ``angle`` radians about the y axis."""
        cos, sin = math.cos(angle), math.sin(angle)
        rotated = tuple(
            Vertex(cos * v.x + sin * v.z, v.y, -sin * v.x + cos * v.z)
            for v in self.vertices
        )
        return Polyhedron(vertices=rotated, surfaces=self.surfaces)