"""Curves, colours, emission shapes and mesh data used by particle emitters."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from quadplay.geometry import Vec2, polar_to_cartesian

Mesh = tuple[tuple[float, ...], tuple[int, ...]]


class Interpolation(Enum):
    """How the points between a curve's key points are built."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at a fixed resolution, ready for fast lookups."""

    points: tuple[float, ...]

    def sample(self, t: float) -> float:
        """Value of the curve at t in [0, 1], linearly blended between samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last) if t_scaled > 0 else 0
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """Key points (x, y) from which a lookup curve is built."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve every 1/resolution along x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for start, end in zip(self.points, self.points[1:]):
            while x <= end[0]:
                t = (x - start[0]) / (end[0] - start[0])
                samples.append(start[1] + (end[1] - start[1]) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def lerp(self, other: Color, t: float) -> Color:
        """Blend towards other; t=0 gives self, t=1 gives other."""
        return Color(
            self.r * (1.0 - t) + other.r * t,
            self.g * (1.0 - t) + other.g * t,
            self.b * (1.0 - t) + other.b * t,
            self.a * (1.0 - t) + other.a * t,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colour over a particle's life: start, then mid at half-life, then end."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def color_at(self, t: float) -> Color:
        """Colour at life fraction t."""
        if t < 0.5:
            return self.start.lerp(self.mid, t * 2.0)
        return self.mid.lerp(self.end, (t - 0.5) * 2.0)


@dataclass(frozen=True)
class EmissionPoint:
    """Emit every particle exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class EmissionRect:
    """Emit particles uniformly inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class EmissionSphere:
    """Emit particles uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout: n columns, m rows, frames start_index..end_index (exclusive)."""

    n: int
    m: int
    start_index: int = 0
    end_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas dimensions must be positive")
        if self.end_index is None:
            object.__setattr__(self, "end_index", self.n * self.m)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle (u, v, width, height) of a frame."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


_WHITE_RGBA = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class RectangleShape:
    """A quad particle, stretched horizontally by aspect_ratio."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        """Vertices (position xyz, uv, rgba per vertex) and triangle indices."""
        a = self.aspect_ratio
        corners = [
            (-a, -1.0, 0.0, 0.0),
            (a, -1.0, 1.0, 0.0),
            (a, 1.0, 1.0, 1.0),
            (-a, 1.0, 0.0, 1.0),
        ]
        vertices: list[float] = []
        for x, y, u, v in corners:
            vertices.extend((x, y, 0.0, u, v, *_WHITE_RGBA))
        return tuple(vertices), (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class CircleShape:
    """A disc particle made of a triangle fan."""

    subdivisions: int

    def mesh(self) -> Mesh:
        """Centre vertex plus subdivisions + 1 rim vertices, fanned into triangles."""
        if self.subdivisions <= 0:
            raise ValueError("subdivisions must be positive")
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, *_WHITE_RGBA]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, *_WHITE_RGBA))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return tuple(vertices), tuple(indices)


@dataclass(frozen=True)
class CustomMesh:
    """A particle with user-supplied vertex and index data."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> Mesh:
        return tuple(self.vertices), tuple(self.indices)


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = "alpha"
    ADDITIVE = "additive"

    def blend_factors(self) -> tuple[str, str]:
        """Source and destination colour factors for additive-equation blending."""
        if self is BlendMode.ALPHA:
            return ("source_alpha", "one_minus_source_alpha")
        return ("source_alpha", "one")