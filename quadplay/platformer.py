"""Tile-based platformer physics with pixel-stepped actors and moving solids."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from quadplay.geometry import Rect, Vec2


class Tile(Enum):
    """Kind of a collision cell."""

    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two tile hits: empty and jump-through stay soft, anything else is solid."""
        if self is Tile.EMPTY and other is Tile.EMPTY:
            return Tile.EMPTY
        soft = {Tile.EMPTY, Tile.JUMP_THROUGH}
        if self in soft and other in soft:
            return Tile.JUMP_THROUGH
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle of an actor in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a moving solid in a World."""

    index: int


@dataclass
class _StaticTiledLayer:
    colliders: tuple
    tile_width: float
    tile_height: float
    width: int
    tag: int


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, float(self.width), float(self.height))


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _trunc(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(value)


class World:
    """Collision world made of static tile layers, actors and moving solids."""

    def __init__(self) -> None:
        self._layers: list[_StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(
        self,
        static_colliders: Iterable[Tile],
        tile_width: float,
        tile_height: float,
        width: int,
        tag: int,
    ) -> None:
        """Add a row-major grid of tiles, `width` tiles per row."""
        self._layers.append(
            _StaticTiledLayer(
                colliders=tuple(static_colliders),
                tile_width=tile_width,
                tile_height=tile_height,
                width=width,
                tag=tag,
            )
        )

    def add_actor(self, pos: Vec2, width: int, height: int) -> Actor:
        """Add an actor; one spawned inside a jump-through tile starts descending."""
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) is Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(
                pos=pos,
                width=width,
                height=height,
                descent=inside_wood,
                seen_wood=inside_wood,
            )
        )
        return actor

    def add_solid(self, pos: Vec2, width: int, height: int) -> Solid:
        """Add a moving solid."""
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=pos, width=width, height=height))
        return solid

    def set_actor_position(self, actor: Actor, pos: Vec2) -> None:
        """Teleport an actor, dropping any accumulated sub-pixel movement."""
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = pos

    def descent(self, actor: Actor) -> None:
        """Let the actor fall through jump-through tiles."""
        self._actors[actor.index].descent = True

    def move_v(self, actor: Actor, dy: float) -> bool:
        """Move an actor vertically pixel by pixel; False if it was blocked."""
        collider = self._actors[actor.index]
        collider.y_remainder += dy

        step = _round_half_away(collider.y_remainder)
        if step != 0:
            collider.y_remainder -= step
            sign = 1 if step > 0 else -1

            while step != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(0.0, float(sign)),
                    collider.width,
                    collider.height,
                )
                if tile is Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile is Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile is Tile.EMPTY or (
                    tile is Tile.JUMP_THROUGH and collider.descent
                ):
                    collider.pos = Vec2(collider.pos.x, collider.pos.y + sign)
                    step -= sign
                else:
                    return False

        tile = self.collide_solids(collider.pos, collider.width, collider.height)
        if tile is not Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor: Actor, dx: float) -> bool:
        """Move an actor horizontally pixel by pixel; False if it was blocked."""
        collider = self._actors[actor.index]
        collider.x_remainder += dx

        step = _round_half_away(collider.x_remainder)
        if step != 0:
            collider.x_remainder -= step
            sign = 1 if step > 0 else -1

            while step != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(float(sign), 0.0),
                    collider.width,
                    collider.height,
                )
                if tile is Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = Vec2(collider.pos.x + sign, collider.pos.y)
                    step -= sign
                else:
                    return False
        return True

    def solid_move(self, solid: Solid, dx: float, dy: float) -> None:
        """Move a solid, carrying riders and pushing (or squishing) actors."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round_half_away(collider.x_remainder)
        move_y = _round_half_away(collider.y_remainder)

        riding_rect = Rect(
            collider.pos.x, collider.pos.y - 1.0, float(collider.width), 1.0
        )
        pushing_rect = Rect(
            collider.pos.x + move_x,
            collider.pos.y,
            float(collider.width),
            float(collider.height),
        )

        riding_actors: list[Actor] = []
        pushing_actors: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            rider_rect = Rect(
                actor_collider.pos.x,
                actor_collider.pos.y + actor_collider.height - 1.0,
                float(actor_collider.width),
                1.0,
            )
            pushed = pushing_rect.overlaps(actor_collider.rect)
            if riding_rect.overlaps(rider_rect):
                riding_actors.append(Actor(index))
            elif pushed and not actor_collider.squished:
                pushing_actors.append(Actor(index))

            if not pushed:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding_actors:
            self.move_h(actor, float(move_x))
        for actor in pushing_actors:
            if not self.move_h(actor, float(move_x)):
                pushed_collider = self._actors[actor.index]
                pushed_collider.squished = True
                pushed_collider.squishers.add(solid)
        collider.collidable = True

        if move_x != 0:
            collider.x_remainder -= move_x
            collider.pos = Vec2(collider.pos.x + move_x, collider.pos.y)
        if move_y != 0:
            collider.y_remainder -= move_y
            collider.pos = Vec2(collider.pos.x, collider.pos.y + move_y)

    def solid_at(self, pos: Vec2) -> bool:
        """True if a solid tile (tag 1) or a collidable solid is at the point."""
        return self.tag_at(pos, 1)

    def tag_at(self, pos: Vec2, tag: int) -> bool:
        """True if the first non-empty tile at the point has the tag, or a solid covers it."""
        for layer in self._layers:
            y = _trunc(pos.y / layer.tile_width)
            x = _trunc(pos.x / layer.tile_height)
            ix = y * layer.width + x
            if 0 <= ix < len(layer.colliders) and layer.colliders[ix] is not Tile.EMPTY:
                return layer.tag == tag

        return any(
            solid.collidable and solid.rect.contains(pos) for solid in self._solids
        )

    def collide_solids(self, pos: Vec2, width: int, height: int) -> Tile:
        """Tile hit by a box against tag-1 layers, else COLLIDER if a solid overlaps."""
        tile = self.collide_tag(1, pos, width, height)
        if tile is not Tile.EMPTY:
            return tile

        box = Rect(pos.x, pos.y, float(width), float(height))
        if any(solid.collidable and solid.rect.overlaps(box) for solid in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag: int, pos: Vec2, width: int, height: int) -> Tile:
        """Tile hit by a box against the static layers carrying the given tag."""
        for layer in self._layers:
            colliders = layer.colliders
            layer_height = len(colliders) // layer.width + 1

            def check(point: Vec2, layer: _StaticTiledLayer = layer) -> Tile:
                y = _trunc(point.y / layer.tile_width)
                x = _trunc(point.x / layer.tile_height)
                ix = y * layer.width + x
                if (
                    0 <= y < layer_height
                    and 0 <= x < layer.width
                    and 0 <= ix < len(colliders)
                    and layer.tag == tag
                    and colliders[ix] is not Tile.EMPTY
                ):
                    return colliders[ix]
                return Tile.EMPTY

            far_x = width - 1.0
            far_y = height - 1.0
            tile = (
                check(pos)
                .combine(check(pos + Vec2(far_x, 0.0)))
                .combine(check(pos + Vec2(far_x, far_y)))
                .combine(check(pos + Vec2(0.0, far_y)))
            )
            if tile is not Tile.EMPTY:
                return tile

            if width > _trunc(layer.tile_width):
                x = pos.x + layer.tile_width
                while x < pos.x + width - 1.0:
                    tile = check(Vec2(x, pos.y)).combine(check(Vec2(x, pos.y + far_y)))
                    if tile is not Tile.EMPTY:
                        return tile
                    x += layer.tile_width

            if height > _trunc(layer.tile_height):
                y = pos.y + layer.tile_height
                while y < pos.y + height - 1.0:
                    tile = check(Vec2(pos.x, y)).combine(check(Vec2(pos.x + far_x, y)))
                    if tile is not Tile.EMPTY:
                        return tile
                    y += layer.tile_height

        return Tile.EMPTY

    def squished(self, actor: Actor) -> bool:
        """True if a solid pushed the actor into an obstacle."""
        return self._actors[actor.index].squished

    def actor_pos(self, actor: Actor) -> Vec2:
        return self._actors[actor.index].pos

    def solid_pos(self, solid: Solid) -> Vec2:
        return self._solids[solid.index].pos

    def collide_check(self, actor: Actor, pos: Vec2) -> bool:
        """Would the actor collide at pos; jump-through tiles are ignored while descending."""
        collider = self._actors[actor.index]
        tile = self.collide_solids(pos, collider.width, collider.height)
        if collider.descent:
            return tile in (Tile.SOLID, Tile.COLLIDER)
        return tile in (Tile.SOLID, Tile.COLLIDER, Tile.JUMP_THROUGH)