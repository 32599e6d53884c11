"""Frame-by-frame avatar animation built from numbered image files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from .texture_loader import Texture, TextureLoader


class AvatarAnim:
    """Steps through a list of textures at a fixed rate, looping or stopping at the end."""

    def __init__(
        self,
        textures: Sequence[Texture],
        time_per_frame_sec: float,
        will_loop: bool,
    ) -> None:
        if not textures:
            raise ValueError("an animation needs at least one frame")
        self.textures: List[Texture] = list(textures)
        self.time_per_frame_sec = time_per_frame_sec
        self.will_loop = will_loop
        self.index = 0
        self.elapsed_time_sec = 0.0
        self.is_finished = False

    @classmethod
    def load(
        cls,
        loader: TextureLoader,
        media_path: Union[str, Path],
        name: str,
        frame_count: int,
        time_per_frame_sec: float,
        will_loop: bool,
    ) -> "AvatarAnim":
        """Load frames named ``<name>-0.png`` through ``<name>-<frame_count - 1>.png``."""
        folder = Path(media_path)
        textures = [loader.load(folder / f"{name}-{i}.png", True) for i in range(frame_count)]
        return cls(textures, time_per_frame_sec, will_loop)

    @property
    def frame_count(self) -> int:
        return len(self.textures)

    @property
    def texture(self) -> Texture:
        return self.textures[self.index]

    def restart(self) -> None:
        self.index = 0
        self.elapsed_time_sec = 0.0
        self.is_finished = False

    def update(self, frame_time_sec: float) -> bool:
        """Advance the clock; return True when the current frame changed."""
        self.elapsed_time_sec += frame_time_sec
        if self.elapsed_time_sec < self.time_per_frame_sec:
            return False

        self.elapsed_time_sec -= self.time_per_frame_sec

        self.index += 1
        if self.index >= self.frame_count:
            if self.will_loop:
                self.index = 0
            else:
                self.index = self.frame_count - 1
                self.is_finished = True

        return True