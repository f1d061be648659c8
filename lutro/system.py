"""System information queries with fixed answers and a private clipboard."""

from __future__ import annotations

from typing import Any

from .runtime import LutroError


def _check_string(value: Any, index: int, fname: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(
        f"bad argument #{index} to '{fname}' (string expected, got {type(value).__name__})"
    )


class System:
    """Implements ``lutro.system``; the clipboard lives only inside this object."""

    def __init__(self) -> None:
        self.clipboard_text = ""
        self.url_requests: list[Any] = []
        self.vibration_requests: list[tuple[Any, ...]] = []

    def get_os(self) -> str:
        return "Lutro"

    def get_processor_count(self) -> int:
        """Threads are not supported, so one processor is reported."""
        return 1

    def set_clipboard_text(self, *args: Any) -> None:
        n = len(args)
        if n < 1:
            raise LutroError(f"lutro.system.setClipboardText requires 1 argument, {n} given.")
        self.clipboard_text = _check_string(args[0], 1, "setClipboardText")

    def get_clipboard_text(self, *args: Any) -> str:
        n = len(args)
        if n > 0:
            raise LutroError(f"lutro.system.getClipboardText requires 0 argument, {n} given.")
        return self.clipboard_text

    def get_power_info(self) -> str:
        return "unknown"

    def open_url(self, *args: Any) -> bool:
        """Opening URLs is unsupported: the request is recorded and failure reported."""
        self.url_requests.append(args[0] if args else None)
        return False

    def vibrate(self, *args: Any) -> None:
        """Vibration is unsupported: the request is only recorded."""
        self.vibration_requests.append(args)