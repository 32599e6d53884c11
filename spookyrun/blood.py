"""Blood splat animation played when the avatar dies."""

from __future__ import annotations

import random
from pathlib import Path
from typing import NamedTuple, Optional, Tuple, Union

from .texture_loader import Texture, TextureLoader


class TextureRect(NamedTuple):
    """A rectangle of texture pixels."""

    left: int
    top: int
    width: int
    height: int


_FRAME_SIZE = 128
_FRAMES_PER_ANIM = 9

# two splat animations share one sprite sheet, one per row
FIRST_ANIM_FRAMES: Tuple[TextureRect, ...] = tuple(
    TextureRect(i * _FRAME_SIZE, 0, _FRAME_SIZE, _FRAME_SIZE) for i in range(_FRAMES_PER_ANIM)
)
SECOND_ANIM_FRAMES: Tuple[TextureRect, ...] = tuple(
    TextureRect(i * _FRAME_SIZE, _FRAME_SIZE, _FRAME_SIZE, _FRAME_SIZE)
    for i in range(_FRAMES_PER_ANIM)
)


class Blood:
    """A one-shot blood splat that plays through its frames and then hides."""

    time_per_frame = 0.05

    def __init__(self, texture: Texture) -> None:
        self.texture = texture
        width, height = texture.size
        self.texture_rect = TextureRect(0, 0, width, height)
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.scale: Tuple[float, float] = (1.0, 1.0)
        self.is_using_first_anim = True
        self.elapsed_time_sec = 0.0
        self.texture_index = 0
        self.is_finished = True

    @classmethod
    def load(cls, loader: TextureLoader, media_path: Union[str, Path]) -> "Blood":
        return cls(loader.load(Path(media_path) / "image" / "blood.png", True))

    @property
    def frames(self) -> Tuple[TextureRect, ...]:
        return FIRST_ANIM_FRAMES if self.is_using_first_anim else SECOND_ANIM_FRAMES

    @property
    def is_visible(self) -> bool:
        return not self.is_finished

    def start(
        self,
        position: Tuple[float, float],
        will_splash_right: bool,
        use_first_anim: Optional[bool] = None,
    ) -> None:
        """Begin the splat at ``position``; the animation is picked at random unless given."""
        if use_first_anim is None:
            use_first_anim = random.random() < 0.5

        self.is_finished = False
        self.elapsed_time_sec = 0.0
        self.texture_index = 0
        self.is_using_first_anim = use_first_anim
        self.position = position
        self.texture_rect = self.frames[0]
        self.scale = (1.0, 1.0) if will_splash_right else (-1.0, 1.0)

    def update(self, frame_time_sec: float) -> None:
        if self.is_finished:
            return

        self.elapsed_time_sec += frame_time_sec
        if self.elapsed_time_sec < self.time_per_frame:
            return

        self.elapsed_time_sec -= self.time_per_frame

        self.texture_index += 1
        if self.texture_index >= len(FIRST_ANIM_FRAMES):
            self.texture_index = 0
            self.is_finished = True
            return

        self.texture_rect = self.frames[self.texture_index]