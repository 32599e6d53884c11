"""Loading image files into textures, with running totals of what was loaded."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

log = logging.getLogger(__name__)

FALLBACK_SIZE = (64, 64)
FALLBACK_COLOR = (255, 0, 0, 255)


@dataclass
class Texture:
    """An RGBA image ready for drawing."""

    image: Image.Image
    smooth: bool = False
    path: Optional[Path] = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


class TextureLoader:
    """Loads textures and keeps count of the files and bytes loaded."""

    def __init__(self) -> None:
        self.file_count = 0
        self.byte_count = 0

    def load(self, path: Union[str, Path], will_smooth: bool = False) -> Texture:
        """Load ``path``; a file that cannot be read gives a solid red 64x64 texture."""
        path = Path(path)
        try:
            with Image.open(path) as source:
                image = source.convert("RGBA")
        except OSError as error:
            log.warning("failed to load texture %s: %s", path, error)
            return Texture(Image.new("RGBA", FALLBACK_SIZE, FALLBACK_COLOR), False, None)

        self.file_count += 1
        width, height = image.size
        self.byte_count += width * height * 4
        return Texture(image, will_smooth, path)

    def dump_info(self) -> str:
        """Write a one-line summary of what was loaded to stderr and return it."""
        text = (
            f"{self.file_count:,} texture files loaded "
            f"for a total of {self.byte_count:,} bytes."
        )
        print(text, file=sys.stderr)
        return text