"""Collision type table: which kinds of collider interact with which."""

from __future__ import annotations

from enum import IntEnum


class CollisionType(IntEnum):
    """Kinds of collider known to the engine."""

    DEFAULT = 0
    PLAYER = 1
    HURT_BOX = 2
    ENEMY = 3
    BLOCK = 4
    ITEM = 5
    CHEST = 6
    DART = 7
    BULLET = 8


_GAME_MAPPINGS: tuple[tuple[CollisionType, CollisionType], ...] = (
    (CollisionType.HURT_BOX, CollisionType.ENEMY),
    (CollisionType.PLAYER, CollisionType.BLOCK),
    (CollisionType.ENEMY, CollisionType.BLOCK),
    (CollisionType.ITEM, CollisionType.BLOCK),
    (CollisionType.ITEM, CollisionType.HURT_BOX),
    (CollisionType.CHEST, CollisionType.HURT_BOX),
    (CollisionType.DART, CollisionType.BLOCK),
    (CollisionType.DART, CollisionType.ENEMY),
    (CollisionType.DART, CollisionType.HURT_BOX),
    (CollisionType.BULLET, CollisionType.PLAYER),
    (CollisionType.BULLET, CollisionType.BLOCK),
)


class CollisionManager:
    """Holds the ordered pairs of collision types that collide."""

    def __init__(self) -> None:
        self._pairs: set[tuple[CollisionType, CollisionType]] = {
            (CollisionType.DEFAULT, CollisionType.DEFAULT)
        }

    def initialize(self) -> None:
        """Fill the table with the game's collision pairs."""
        for first, second in _GAME_MAPPINGS:
            self.add_mapping(first, second)

    def find_mapping(self, type1: CollisionType, type2: CollisionType) -> bool:
        """Return whether the ordered pair (type1, type2) is in the table."""
        return (CollisionType(type1), CollisionType(type2)) in self._pairs

    def add_mapping(self, type1: CollisionType, type2: CollisionType) -> None:
        """Record that type1 collides with type2 (in that order)."""
        self._pairs.add((CollisionType(type1), CollisionType(type2)))

    def __len__(self) -> int:
        return len(self._pairs)