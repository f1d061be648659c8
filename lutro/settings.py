"""Engine-wide settings and asset path resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

_EXT_MAX = 15


@dataclass
class Settings:
    """Screen size, timing counters and frontend callbacks shared by the engine."""

    width: int = 320
    height: int = 240
    pitch: int = 0
    pitch_pixels: int = 0
    framebuffer: Any = None
    input_cb: Callable[..., int] | None = None
    live_enable: bool = False
    live_call_load: bool = False
    gamedir: str = ""
    identity: str = ""
    delta: float = 0.0
    delta_counter: float = 0.0
    frame_counter: int = 0
    fps: int = 0
    environ_cb: Callable[..., Any] | None = None

    def update_timing(self, delta: float) -> None:
        """Record a frame's duration and refresh the FPS and per-second counters."""
        if delta == 0:
            raise ValueError("frame delta must not be zero")
        self.delta = delta
        self.delta_counter += delta
        self.frame_counter += 1
        self.fps = int(1 / delta)
        if self.delta_counter >= 1.0:
            self.frame_counter = 0
            self.delta_counter = 0.0


@dataclass(frozen=True)
class AssetPath:
    """Full path of an asset and its lower-case extension."""

    fullpath: str
    ext: str


def _extension(path: str) -> str:
    base = path[path.rfind("/") + 1:]
    dot = base.rfind(".")
    return base[dot + 1:] if dot >= 0 else ""


def asset_path(gamedir: str, path: str) -> AssetPath:
    """Resolve an asset path against the game directory."""
    return AssetPath(gamedir + path, _extension(path).lower()[:_EXT_MAX])