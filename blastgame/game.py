"""Window, main loop and world update for the game."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import pygame

from blastgame.entity import Entity
from blastgame.player import IDLE, Controls, Player

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
TARGET_FPS = 144
BACKGROUND = pygame.Color(230, 41, 55)
ENEMY_POSITION = (500, 0)


def _read_controls(events: Sequence[pygame.event.Event]) -> Controls:
    held = pygame.key.get_pressed()
    fired = any(
        (event.type == pygame.KEYDOWN and event.key == pygame.K_f)
        or (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1)
        for event in events
    )
    return Controls(
        left=bool(held[pygame.K_a]),
        right=bool(held[pygame.K_d]),
        up=bool(held[pygame.K_w]),
        down=bool(held[pygame.K_s]),
        fire=fired,
    )


def _should_close(events: Sequence[pygame.event.Event]) -> bool:
    return any(
        event.type == pygame.QUIT
        or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
        for event in events
    )


class Game:
    """Holds the entities and drives them each frame."""

    def __init__(self, width: int, height: int, title: str):
        self.width = width
        self.height = height
        self.title = title
        self.entities: List[Optional[Entity]] = []

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)

            player = Player()
            enemy = Entity(IDLE, "Enemy", 100.0)
            self.entities.extend([player, enemy])
            enemy.position = ENEMY_POSITION

            clock = pygame.time.Clock()
            dt = 0.0
            while True:
                events = pygame.event.get()
                if _should_close(events):
                    break
                controls = _read_controls(events)
                for entity in self.entities:
                    if isinstance(entity, Player):
                        entity.controls = controls
                self.update(dt)
                screen.fill(BACKGROUND)
                self.draw(screen)
                pygame.display.flip()
                dt = clock.tick(TARGET_FPS) / 1000.0
        finally:
            pygame.quit()

    def update(self, dt: float) -> None:
        """Advance every entity, resolve collisions and drop the dead."""
        present = [entity for entity in self.entities if entity is not None]
        for entity in present:
            entity.update(dt)
            entity.check_collision(present)
            if isinstance(entity, Player):
                entity.bullets = [
                    bullet for bullet in entity.bullets if not bullet.check_collision(present)
                ]
        self.entities = [entity for entity in present if entity.alive]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entities in list order."""
        for entity in self.entities:
            if entity is not None:
                entity.draw(surface)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="blastgame", description="Run the game.")
    parser.parse_args(argv)
    Game(WINDOW_WIDTH, WINDOW_HEIGHT, "Game").run()
    return 0