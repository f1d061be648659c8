"""Module registry, version information and small runtime helpers."""

from __future__ import annotations

from typing import Any, Callable

VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_PATCH = 1
VERSION_STRING = "0.0.1"
CODENAME = "Lutro"


class LutroError(RuntimeError):
    """Raised when an engine API is called with invalid arguments."""


class ModuleLoadError(LutroError):
    """Raised when a module cannot be found or its loader fails."""


class ModuleRegistry:
    """Lazily built modules: loaders are registered by name and run once on require."""

    def __init__(self) -> None:
        self._loaders: dict[str, Callable[[], Any]] = {}
        self.loaded: dict[str, Any] = {}

    def preload(self, name: str, factory: Callable[[], Any]) -> None:
        """Register a loader to be called the first time ``name`` is required."""
        self._loaders[name] = factory

    def require(self, name: str) -> Any:
        """Return the module for ``name``, running its loader if it is not loaded yet."""
        if name in self.loaded:
            return self.loaded[name]
        try:
            factory = self._loaders[name]
        except KeyError:
            raise ModuleLoadError(f"module '{name}' not found") from None
        try:
            module = factory()
        except Exception as exc:
            raise ModuleLoadError(f"error loading module '{name}': {exc}") from exc
        if module is None:
            module = True
        self.loaded[name] = module
        return module


def relpath_to_modname(relpath: str) -> str:
    """Turn a relative file path such as ``a/b.lua`` into a module name ``a.b``."""
    slash = relpath.rfind("/")
    dot = relpath.rfind(".", slash + 1)
    stem = relpath[:dot] if dot >= 0 else relpath
    return stem.replace("/", ".")


def get_version() -> tuple[int, int, int, str]:
    """Return major, minor, patch and codename of the engine."""
    return VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH, CODENAME


def not_implemented(*args: Any) -> None:
    """Stand-in for API entries the engine does not provide; always raises.

    The arguments it was called with are discarded and kept on the error.
    """
    error = NotImplementedError("Not implemented.")
    error.ignored_arguments = args
    raise error