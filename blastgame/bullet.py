"""Projectile fired by an entity, travelling along the X axis."""

from __future__ import annotations

from typing import Iterable, Optional

from blastgame.entity import Entity, Texture

BULLET_TEXTURE_PATH = "resources/Projectiles/bullet.png"
BULLET_DAMAGE = 30.0


class Bullet(Entity):
    """A bullet that damages the first entity it hits, ignoring its shooter."""

    def __init__(
        self,
        parent: Optional[Entity],
        velocity: float,
        positive_x_direction: bool = False,
        texture: Optional[Texture] = None,
    ):
        super().__init__(texture if texture is not None else BULLET_TEXTURE_PATH, "Bullet", 1.0)
        self.parent = parent
        self.positive_x_direction = positive_x_direction
        self.velocity = float(velocity)
        self.texture = self.texture.halved()

    def on_update(self, dt: float) -> None:
        # A true flag moves the bullet towards smaller X.
        if self.positive_x_direction:
            self.position.x -= self.velocity * dt
        else:
            self.position.x += self.velocity * dt

    def collides_with(self, other: Entity) -> bool:
        """On a hit, damage ``other``, spend this bullet and return True."""
        if self.parent is not None and other is self.parent:
            return False
        if other is self:
            return False
        if not self._overlaps(other):
            return False
        other.take_damage(BULLET_DAMAGE)
        self.alive = False
        return True

    def check_collision(self, others: Iterable[Entity]) -> bool:
        """Hit at most one of ``others``; report whether a hit happened."""
        return any(self.collides_with(other) for other in others)