"""Asteroids game logic: ship, bullets and splitting asteroids on a wrapping field."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from quadplay.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
SHOT_INTERVAL = 0.5
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
MAX_SPEED = 5.0
TURN_STEP = 5.0
THRUST = 1.0 / 3.0
FRICTION = 1.0 / 100.0
ASTEROID_COUNT = 10
SPLIT_SCALE = 0.8


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the field to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    """The player's ship; rot is in degrees, 0 pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    """A shot fired by the ship."""

    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    """A drifting, spinning polygon."""

    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """State of an asteroids game on a width x height field; time is passed in."""

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("field dimensions must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.last_shot = now
        self.restart()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once the game is over with every asteroid destroyed."""
        return self.gameover and not self.asteroids

    def _random_direction(self) -> Vec2:
        while True:
            candidate = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            if candidate.length() > 0:
                return candidate.normalize()

    def restart(self) -> None:
        """Reset the ship and scatter a fresh ring of asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.gameover = False
        short_side = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center + self._random_direction() * short_side / 2.0,
                vel=Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self._rng.uniform(-2.0, 2.0),
                size=short_side / 10.0,
                sides=self._rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _split(self, asteroid: Asteroid, bullet: Bullet) -> list[Asteroid]:
        perpendiculars = (
            Vec2(bullet.vel.y, -bullet.vel.x),
            Vec2(-bullet.vel.y, bullet.vel.x),
        )
        return [
            Asteroid(
                pos=asteroid.pos,
                vel=direction.normalize() * self._rng.uniform(1.0, 3.0),
                rot=self._rng.uniform(0.0, 360.0),
                rot_speed=self._rng.uniform(-2.0, 2.0),
                size=asteroid.size * SPLIT_SCALE,
                sides=asteroid.sides - 1,
            )
            for direction in perpendiculars
        ]

    def update(self, now: float, thrust: bool = False, fire: bool = False, turn: int = 0) -> None:
        """Advance one frame; turn > 0 steers right, turn < 0 steers left."""
        if self.gameover:
            return

        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel * FRICTION
        if thrust:
            acc = heading * THRUST

        if fire and now - self.last_shot > SHOT_INTERVAL:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=now,
                )
            )
            self.last_shot = now

        if turn > 0:
            ship.rot += TURN_STEP
        elif turn < 0:
            ship.rot -= TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel

        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.extend(self._split(asteroid, bullet))
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.gameover = True

    def ship_vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """Nose, left and right corners of the ship's triangle."""
        pos = self.ship.pos
        rotation = math.radians(self.ship.rot)
        sin_r, cos_r = math.sin(rotation), math.cos(rotation)
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(pos.x + sin_r * half_h, pos.y - cos_r * half_h)
        left = Vec2(
            pos.x - cos_r * half_b - sin_r * half_h,
            pos.y - sin_r * half_b + cos_r * half_h,
        )
        right = Vec2(
            pos.x + cos_r * half_b - sin_r * half_h,
            pos.y + sin_r * half_b + cos_r * half_h,
        )
        return nose, left, right