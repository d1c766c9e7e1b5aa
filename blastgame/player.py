"""The user-controlled player and its bullets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pygame

from blastgame.bullet import Bullet
from blastgame.entity import Entity, Texture, load_texture

IDLE = "resources/Player/idle.png"
LEFT = "resources/Player/left.png"
RIGHT = "resources/Player/right.png"
UP = "resources/Player/up.png"

PLAYER_HP = 300.0
BULLET_VELOCITY = 1000.0
BULLET_RANGE = 5000.0


@dataclass(frozen=True)
class Controls:
    """Input state for one frame: held movement keys and a fire press."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False


@dataclass
class PlayerTextures:
    """Sprites shown for each movement direction."""

    idle: Texture
    left: Texture
    right: Texture
    up: Texture

    @classmethod
    def load(cls) -> "PlayerTextures":
        return cls(
            idle=load_texture(IDLE),
            left=load_texture(LEFT),
            right=load_texture(RIGHT),
            up=load_texture(UP),
        )


class Player(Entity):
    """Moves with the controls, fires bullets and keeps track of them."""

    def __init__(
        self,
        textures: Optional[PlayerTextures] = None,
        bullet_texture: Optional[Texture] = None,
    ):
        textures = textures if textures is not None else PlayerTextures.load()
        super().__init__(textures.idle, "Player", PLAYER_HP)
        self.textures = textures
        self.bullet_texture = bullet_texture
        self.bullets: List[Bullet] = []
        self.aiming_left = False
        self.controls = Controls()

    def on_update(self, dt: float) -> None:
        controls = self.controls
        step = self.velocity * dt
        if controls.left:
            self.aiming_left = True
            self.texture = self.textures.left
            self.position.x -= step
        if controls.right:
            self.aiming_left = False
            self.texture = self.textures.right
            self.position.x += step
        # Vertical movement wins over horizontal for aim and sprite.
        if controls.up:
            self.aiming_left = False
            self.texture = self.textures.up
            self.position.y -= step
        if controls.down:
            self.aiming_left = False
            self.texture = self.textures.idle
            self.position.y += step

        if controls.fire:
            self.fire()

        self.bullets = [
            bullet for bullet in self.bullets if -BULLET_RANGE <= bullet.position.x <= BULLET_RANGE
        ]
        for bullet in self.bullets:
            bullet.update(dt)

    def on_draw(self, surface: pygame.Surface) -> None:
        for bullet in self.bullets:
            bullet.draw(surface)

    def fire(self) -> Bullet:
        """Spawn a bullet at the centre of the current sprite, aimed as the player faces."""
        bullet = Bullet(self, BULLET_VELOCITY, self.aiming_left, self.bullet_texture)
        bullet.position = (
            self.texture.width // 2 + self.position.x,
            self.texture.height // 2 + self.position.y,
        )
        self.bullets.append(bullet)
        return bullet