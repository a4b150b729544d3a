"""Particle emitters: spawning, simulation and a pool of reusable emitters."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from quadplay.curves import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    CircleShape,
    Color,
    ColorCurve,
    Curve,
    CustomMesh,
    EmissionPoint,
    EmissionRect,
    EmissionSphere,
    Mesh,
    RectangleShape,
)
from quadplay.geometry import Vec2

EmissionShape = Union[EmissionPoint, EmissionRect, EmissionSphere]
ParticleShape = Union[RectangleShape, CircleShape, CustomMesh]

_FULL_UV = (0.0, 0.0, 1.0, 1.0)


@dataclass
class EmitterConfig:
    """Everything that describes how an emitter spawns and animates particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=EmissionPoint)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleShape)
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Optional[Curve] = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    atlas: Optional[AtlasConfig] = None


@dataclass
class Particle:
    """State of one live particle."""

    position: Vec2
    rotation: float
    size: float
    index: int
    color: Color
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    life_fraction: float = 0.0
    lived: float = 0.0
    frame: int = 0


def _randomized(base: float, randomness: float, rng: random.Random) -> float:
    return base - base * rng.uniform(0.0, randomness)


def _initial_velocity(direction: Vec2, spread: float, speed: float, rng: random.Random) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotated = Vec2(
        direction.x * cos_a - direction.y * sin_a,
        direction.x * sin_a + direction.y * cos_a,
    )
    return rotated * speed


class Emitter:
    """Spawns particles according to its config and advances them in time."""

    MAX_PARTICLES = 10000

    def __init__(
        self,
        config: Optional[EmitterConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config if config is not None else EmitterConfig()
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.mesh: Mesh = self.config.shape.mesh()
        self._batched_size_curve: Optional[BatchedCurve] = None
        self._mesh_dirty = False
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_current_cycle = 0
        self._particles_spawned = 0
        self.rebuild_size_curve()

    @property
    def particles_spawned(self) -> int:
        """Spawn counter used to cap emission at config.amount."""
        return self._particles_spawned

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_spawned = 0
        self._particles_current_cycle = 0

    def rebuild_size_curve(self) -> None:
        """Re-sample config.size_curve after it has been changed."""
        curve = self.config.size_curve
        self._batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from config.shape on the next update."""
        self._mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        cfg = self.config
        rng = self._rng
        offset = offset + cfg.emission_shape.random_point(rng)
        size = _randomized(cfg.size, cfg.size_randomness, rng)
        rotation = _randomized(cfg.initial_rotation, cfg.initial_rotation_randomness, rng)
        position = offset if cfg.local_coords else self.position + offset

        index = self._particles_spawned
        self._particles_spawned += 1
        self._particles_current_cycle += 1

        speed = _randomized(cfg.initial_velocity, cfg.initial_velocity_randomness, rng)
        velocity = _initial_velocity(
            cfg.initial_direction, cfg.initial_direction_spread, speed, rng
        )
        angular_velocity = _randomized(
            cfg.initial_angular_velocity, cfg.initial_angular_velocity_randomness, rng
        )
        lifetime = _randomized(cfg.lifetime, cfg.lifetime_randomness, rng)

        self.particles.append(
            Particle(
                position=position,
                rotation=rotation,
                size=size,
                index=index,
                color=cfg.colors_curve.start,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
            )
        )

    def _spawn_amount(self) -> int:
        cfg = self.config
        if cfg.amount <= 0:
            return 0
        gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
        if gap < 0.001:
            return cfg.amount
        return max(int((self._time_passed - self._last_emit_time) / gap), 0)

    def update(self, dt: float) -> None:
        """Advance the emitter by dt seconds: emit, move and expire particles."""
        cfg = self.config
        if self._mesh_dirty:
            self.mesh = cfg.shape.mesh()
            self._mesh_dirty = False

        if cfg.emitting:
            self._time_passed += dt
            for _ in range(self._spawn_amount()):
                self._last_emit_time = self._time_passed
                if self._particles_spawned < cfg.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= cfg.amount:
                    break

        if cfg.one_shot and self._particles_current_cycle >= cfg.amount:
            self._time_passed = 0.0
            self._last_emit_time = 0.0
            self._particles_current_cycle = 0
            cfg.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        survivors: list[Particle] = []
        for particle in self.particles:
            if particle.lived >= particle.lifetime or particle.lived > cfg.lifetime:
                if particle.lived != particle.lifetime:
                    self._particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def _advance(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        particle.velocity = particle.velocity + particle.velocity * (cfg.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * cfg.angular_accel * dt
        particle.angular_velocity *= 1.0 - cfg.angular_damping

        t = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 0.0
        particle.color = cfg.colors_curve.color_at(t)
        particle.position = particle.position + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self._batched_size_curve.sample(t) if self._batched_size_curve else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.life_fraction = t

        particle.lived += dt
        particle.velocity = particle.velocity + cfg.gravity * dt

        atlas = cfg.atlas
        if atlas is not None:
            if particle.lifetime != 0.0:
                span = atlas.end_index - atlas.start_index
                particle.frame = (
                    max(int(particle.lived / particle.lifetime * span), 0) + atlas.start_index
                )
            particle.uv = atlas.frame_uv(particle.frame)
        else:
            particle.uv = _FULL_UV

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit n particles at once, ignoring the emitting flag and amount."""
        for _ in range(n):
            self._emit_particle(pos)
            self._particles_spawned += 1

    def step(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at pos and advance it by dt."""
        self.position = pos
        self.update(dt)


class EmittersCache:
    """A pool of emitters sharing one config, spawned and recycled on demand."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self._cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self._rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self._active: list[tuple[Emitter, Vec2]] = []

    @property
    def active(self) -> list[tuple[Emitter, Vec2]]:
        """Emitters currently running, with their positions."""
        return list(self._active)

    @property
    def cached(self) -> int:
        """Number of idle emitters ready for reuse."""
        return len(self._cache)

    def spawn(self, pos: Vec2) -> None:
        """Start an emitter at pos, reusing an idle one when available."""
        if self._cache:
            emitter = self._cache.pop()
        else:
            emitter = Emitter(replace(self.config), self._rng)
        emitter.update_particle_mesh()
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, pos))

    def update(self, dt: float) -> None:
        """Advance every active emitter; finished ones go back to the pool."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self._active:
            emitter.step(pos, dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active


def explosion() -> EmitterConfig:
    """A one-shot additive burst, triggered by setting emitting."""
    return EmitterConfig(
        one_shot=True,
        emitting=False,
        lifetime=0.3,
        lifetime_randomness=0.7,
        explosiveness=0.95,
        amount=30,
        initial_direction_spread=2.0 * math.pi,
        initial_velocity=200.0,
        size=30.0,
        gravity=Vec2(0.0, -1000.0),
        atlas=AtlasConfig(4, 4, 8),
        blend_mode=BlendMode.ADDITIVE,
    )


def smoke() -> EmitterConfig:
    """A slow, narrow stream of smoke puffs."""
    return EmitterConfig(
        lifetime=0.8,
        amount=20,
        initial_direction_spread=0.2,
        atlas=AtlasConfig(4, 4, 0, 8),
    )


def fire() -> EmitterConfig:
    """A fast additive flame stream."""
    return EmitterConfig(
        lifetime=0.4,
        lifetime_randomness=0.1,
        amount=10,
        initial_direction_spread=0.5,
        initial_velocity=300.0,
        atlas=AtlasConfig(4, 4, 8),
        size=20.0,
        blend_mode=BlendMode.ADDITIVE,
    )