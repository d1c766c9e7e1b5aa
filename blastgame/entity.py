"""Base game entity: a textured, positioned object with health and box collisions."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

import pygame

logger = logging.getLogger(__name__)


@dataclass
class Texture:
    """Image data plus the size used for drawing and collision."""

    width: int
    height: int
    surface: Optional[pygame.Surface] = None

    def halved(self) -> "Texture":
        """Return a texture sharing the image but with half the width and height."""
        return replace(self, width=self.width // 2, height=self.height // 2)


def load_texture(path: Union[str, os.PathLike]) -> Texture:
    """Load an image file; an unreadable file gives an empty 0x0 texture."""
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        logger.warning("Could not load texture %s", path)
        return Texture(0, 0)
    width, height = surface.get_size()
    return Texture(width, height, surface)


class Entity:
    """Something in the game world that can be updated, drawn, hit and killed."""

    def __init__(self, texture: Union[Texture, str, os.PathLike], name: str, hp: float):
        self.name = name
        self.hp = float(hp)
        self.texture = texture if isinstance(texture, Texture) else load_texture(texture)
        self.velocity = 100.0
        self.alive = True
        self._position = pygame.Vector2(0, 0)

    @property
    def position(self) -> pygame.Vector2:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = pygame.Vector2(value)

    def update(self, dt: float) -> None:
        """Advance the entity by ``dt`` seconds."""
        self.on_update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the texture at the entity's position, then any extras."""
        texture = self.texture
        if texture.surface is not None and texture.width > 0 and texture.height > 0:
            surface.blit(
                texture.surface,
                (int(self._position.x), int(self._position.y)),
                pygame.Rect(0, 0, texture.width, texture.height),
            )
        self.on_draw(surface)

    def _overlaps(self, other: "Entity") -> bool:
        ox, oy = other.position.x, other.position.y
        x, y = self._position.x, self._position.y
        if ox + other.texture.width < x:
            return False
        if x + self.texture.width < ox:
            return False
        if oy + other.texture.height < y:
            return False
        if y + self.texture.height < oy:
            return False
        return True

    def collides_with(self, other: "Entity") -> bool:
        """Whether this entity's bounding box touches another's; never itself."""
        if other is self:
            return False
        if not self._overlaps(other):
            return False
        logger.info("Hit!")
        return True

    def check_collision(self, others: Iterable["Entity"]) -> bool:
        """Whether this entity collides with any of ``others``, stopping at the first."""
        return any(self.collides_with(other) for other in others)

    def take_damage(self, damage: float) -> None:
        """Lose ``abs(damage)`` health; die at zero or below."""
        self.hp -= abs(damage)
        if self.hp <= 0:
            self.alive = False

    def on_update(self, dt: float) -> None:
        """Per-frame behaviour for subclasses."""

    def on_draw(self, surface: pygame.Surface) -> None:
        """Extra drawing for subclasses."""