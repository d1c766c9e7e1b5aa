import pygame

from blastgame.entity import Entity, Texture
from blastgame.game import Game
from blastgame.player import Player, PlayerTextures


def make_player():
    textures = PlayerTextures(
        idle=Texture(20, 20), left=Texture(20, 20), right=Texture(20, 20), up=Texture(20, 20)
    )
    return Player(textures, Texture(4, 4))


def make_enemy(x=500, y=0):
    enemy = Entity(Texture(20, 20), "Enemy", 100.0)
    enemy.position = (x, y)
    return enemy


def test_constructor_stores_settings():
    game = Game(1920, 1080, "Game")
    assert (game.width, game.height, game.title) == (1920, 1080, "Game")
    assert game.entities == []


def test_dead_entities_are_removed():
    game = Game(1920, 1080, "Game")
    player = make_player()
    enemy = make_enemy()
    game.entities = [player, enemy]
    enemy.take_damage(100)
    game.update(0.0)
    assert game.entities == [player]


def test_none_entries_are_ignored():
    game = Game(1920, 1080, "Game")
    enemy = make_enemy()
    game.entities = [None, enemy]
    game.update(0.0)
    assert game.entities == [enemy]


def test_bullet_hit_damages_enemy_and_is_removed():
    game = Game(1920, 1080, "Game")
    player = make_player()
    enemy = make_enemy()
    twin = make_enemy()
    twin.take_damage(30)
    bullet = player.fire()
    enemy.position = bullet.position.copy()
    game.entities = [player, enemy]
    game.update(0.0)
    assert player.bullets == []
    assert enemy.hp == twin.hp
    assert enemy in game.entities


def test_missing_bullet_is_kept():
    game = Game(1920, 1080, "Game")
    player = make_player()
    enemy = make_enemy(0, 500)
    bullet = player.fire()
    game.entities = [player, enemy]
    game.update(0.0)
    assert player.bullets == [bullet]
    assert enemy.hp == 100.0


def test_draw_in_list_order():
    first_image = pygame.Surface((4, 4))
    first_image.fill(pygame.Color("blue"))
    second_image = pygame.Surface((4, 4))
    second_image.fill(pygame.Color("green"))
    first = Entity(Texture(4, 4, first_image), "a", 1.0)
    second = Entity(Texture(4, 4, second_image), "b", 1.0)
    game = Game(8, 8, "Game")
    game.entities = [first, second]
    target = pygame.Surface((8, 8))
    game.draw(target)
    assert target.get_at((1, 1)) == pygame.Color("green")