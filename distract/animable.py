"""Sprite-sheet animation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame

from distract.vector import Vector2


@dataclass(frozen=True)
class Animation:
    """First and last sheet frame of an animation."""

    start_id: int
    end_id: int


@dataclass
class AnimableInfo:
    """Layout of a sprite sheet and the animations it holds."""

    frame_size: Vector2
    frames_per_line: int
    animations: list[Animation] = field(default_factory=list)
    sprite: Any = None


def _apply_rect(sprite: Any, rect: pygame.Rect) -> None:
    sprite.texture_rect = rect
    texture = getattr(sprite, "texture", None)
    if texture is not None:
        sprite.image = texture.subsurface(rect)
        sprite.rect = sprite.image.get_rect(topleft=sprite.rect.topleft)


class Animable:
    """An object that steps through frames of a sprite sheet."""

    def __init__(self, info: AnimableInfo) -> None:
        self.current_animation = 0
        self.current_sheet_frame = 0
        self.info = info
        self.set_info(info)

    def set_info(self, info: AnimableInfo) -> None:
        """Replace the sheet layout and restart at the first animation."""
        self.info = info
        self.set_animation(0)

    def set_animation(self, animation: int) -> None:
        """Switch to an animation and show its first frame."""
        self.current_animation = animation
        self.set_frame(0)

    def set_frame(self, frame: int) -> None:
        """Show a frame of the current animation, counted from its start."""
        if self.info.frames_per_line == 0:
            raise ValueError("animable has an invalid frames per line")
        start = self.info.animations[self.current_animation].start_id
        self.current_sheet_frame = start + frame
        if self.info.sprite is not None:
            _apply_rect(self.info.sprite, self.texture_rect())

    def frame(self) -> int:
        """Current frame, counted from the start of the current animation."""
        start = self.info.animations[self.current_animation].start_id
        return self.current_sheet_frame - start

    def animation(self) -> int:
        """Index of the current animation."""
        return self.current_animation

    def is_done(self) -> bool:
        """Whether the current frame is the last one of the animation."""
        end = self.info.animations[self.current_animation].end_id
        return self.current_sheet_frame == end

    def texture_rect(self) -> pygame.Rect:
        """Area of the sheet covered by the current frame."""
        per_line = self.info.frames_per_line
        width, height = self.info.frame_size
        column = self.current_sheet_frame % per_line
        line = self.current_sheet_frame // per_line
        return pygame.Rect(
            int(column * width), int(line * height), int(width), int(height)
        )