"""Positioning helpers for text bounds and sprite creation."""

from __future__ import annotations

import pygame


def align_bottom(rect: pygame.Rect, y_pos: int) -> pygame.Rect:
    """A copy of ``rect`` moved so that its bottom lies at ``y_pos``."""
    moved = pygame.Rect(rect)
    moved.y = y_pos - int(rect.height)
    return moved


def align_right(rect: pygame.Rect, x_pos: int) -> pygame.Rect:
    """A copy of ``rect`` moved so that its right lies at ``x_pos``."""
    moved = pygame.Rect(rect)
    moved.x = x_pos - int(rect.width)
    return moved


def center_x(rect: pygame.Rect, start_x: int, end_x: int) -> pygame.Rect:
    """A copy of ``rect`` centred horizontally on half of ``end_x``, less ``start_x``."""
    moved = pygame.Rect(rect)
    moved.x = int((int(end_x / 2) - start_x) - rect.width / 2)
    return moved


def center_y(rect: pygame.Rect, start_y: int, end_y: int) -> pygame.Rect:
    """A copy of ``rect`` centred vertically between ``start_y`` and ``end_y``."""
    moved = pygame.Rect(rect)
    moved.y = int((int((end_y - start_y) / 2) + start_y) - rect.height / 2)
    return moved


def create_sprite(
    texture: pygame.Surface | None = None,
    rect: pygame.Rect | None = None,
) -> pygame.sprite.Sprite:
    """A sprite showing ``texture``, cut to ``rect`` when one is given."""
    sprite = pygame.sprite.Sprite()
    sprite.texture = texture
    sprite.texture_rect = pygame.Rect(rect) if rect is not None else None
    if texture is not None and rect is not None:
        sprite.image = texture.subsurface(sprite.texture_rect)
    else:
        sprite.image = texture
    if sprite.image is not None:
        sprite.rect = sprite.image.get_rect()
    elif rect is not None:
        sprite.rect = pygame.Rect(0, 0, rect.width, rect.height)
    else:
        sprite.rect = pygame.Rect(0, 0, 0, 0)
    return sprite