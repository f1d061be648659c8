"""Parts of a small 2D game runtime: bitmaps, a software painter with bitmap fonts, PNG loading, random numbers, timing, mouse state, system queries, settings and a module registry."""

__version__ = "0.0.1"

__all__ = [
    "bitmap",
    "image_loader",
    "lmath",
    "mouse",
    "painter",
    "runtime",
    "settings",
    "system",
    "timer",
]