import pytest

from lutro.runtime import (
    CODENAME,
    VERSION_MAJOR,
    VERSION_MINOR,
    VERSION_PATCH,
    ModuleLoadError,
    ModuleRegistry,
    get_version,
    not_implemented,
    relpath_to_modname,
)


def test_require_runs_loader_once_and_caches():
    registry = ModuleRegistry()
    calls = []

    def loader():
        calls.append(1)
        return {"name": "graphics"}

    registry.preload("lutro.graphics", loader)
    first = registry.require("lutro.graphics")
    second = registry.require("lutro.graphics")
    assert first is second
    assert len(calls) == 1
    assert registry.loaded["lutro.graphics"] is first


def test_require_unknown_module_raises():
    registry = ModuleRegistry()
    with pytest.raises(ModuleLoadError):
        registry.require("missing")


def test_require_failing_loader_raises_and_does_not_cache():
    registry = ModuleRegistry()

    def loader():
        raise ValueError("boom")

    registry.preload("bad", loader)
    with pytest.raises(ModuleLoadError) as info:
        registry.require("bad")
    assert isinstance(info.value.__cause__, ValueError)
    assert "bad" not in registry.loaded


def test_loader_returning_none_stores_true():
    registry = ModuleRegistry()
    registry.preload("empty", lambda: None)
    assert registry.require("empty") is True


def test_preload_replaces_loader():
    registry = ModuleRegistry()
    registry.preload("m", lambda: "old")
    registry.preload("m", lambda: "new")
    assert registry.require("m") == "new"


def test_relpath_to_modname_nested():
    assert relpath_to_modname("foo/bar.lua") == "foo.bar"


def test_relpath_to_modname_without_extension_keeps_name():
    assert relpath_to_modname("main") == "main"


def test_relpath_to_modname_dot_in_directory_is_kept():
    result = relpath_to_modname("dir.v2/mod")
    assert result == "dir.v2.mod"
    assert "/" not in result


def test_get_version():
    assert get_version() == (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH, CODENAME)
    assert get_version()[3] == "Lutro"


def test_not_implemented_raises():
    with pytest.raises(NotImplementedError):
        not_implemented(1, 2, 3)