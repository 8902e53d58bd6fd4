import pygame
import pytest

from distract.animable import Animable, AnimableInfo, Animation
from distract.graphics import create_sprite
from distract.vector import Vector2


def _info(sprite=None):
    return AnimableInfo(
        frame_size=Vector2(16, 8),
        frames_per_line=4,
        animations=[Animation(0, 3), Animation(5, 9)],
        sprite=sprite,
    )


def test_starts_on_first_animation_first_frame():
    anim = Animable(_info())
    assert anim.animation() == 0
    assert anim.frame() == 0
    assert anim.texture_rect() == pygame.Rect(0, 0, 16, 8)


def test_set_animation_moves_to_its_start():
    anim = Animable(_info())
    anim.set_animation(1)
    assert anim.animation() == 1
    assert anim.frame() == 0
    assert anim.current_sheet_frame == 5


def test_texture_rect_wraps_lines():
    anim = Animable(_info())
    anim.set_animation(1)
    rect = anim.texture_rect()
    assert rect.size == (16, 8)
    assert rect.topleft == (16, 8)


def test_frame_round_trip():
    anim = Animable(_info())
    anim.set_animation(1)
    for frame in range(5):
        anim.set_frame(frame)
        assert anim.frame() == frame


def test_is_done_at_end_id():
    anim = Animable(_info())
    anim.set_frame(2)
    assert anim.is_done() is False
    anim.set_frame(3)
    assert anim.is_done() is True


def test_zero_frames_per_line_raises():
    info = AnimableInfo(Vector2(8, 8), 0, [Animation(0, 1)])
    with pytest.raises(ValueError):
        Animable(info)


def test_unknown_animation_raises():
    anim = Animable(_info())
    with pytest.raises(IndexError):
        anim.set_animation(5)


def test_set_info_resets_animation():
    anim = Animable(_info())
    anim.set_animation(1)
    anim.set_info(_info())
    assert anim.animation() == 0
    assert anim.frame() == 0


def test_sprite_image_follows_frame():
    texture = pygame.Surface((64, 32))
    sprite = create_sprite(texture, None)
    anim = Animable(_info(sprite))
    anim.set_frame(2)
    assert sprite.texture_rect == anim.texture_rect()
    assert sprite.image.get_size() == (16, 8)