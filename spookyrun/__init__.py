"""Helpers, colors, tile sets, texture loading and sprite animations for a Halloween platformer."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "texture_loader",
    "tileset",
    "color_range",
    "color_fill",
    "avatar_anim",
    "blood",
]