import pytest

from lutro.settings import Settings, asset_path


def test_defaults():
    settings = Settings()
    assert (settings.width, settings.height) == (320, 240)
    assert settings.live_enable is False
    assert settings.gamedir == ""


def test_update_timing_records_frame():
    settings = Settings()
    settings.update_timing(0.5)
    assert settings.delta == 0.5
    assert settings.frame_counter == 1
    assert settings.delta_counter == 0.5
    assert settings.fps == 2


def test_update_timing_resets_after_a_second():
    settings = Settings()
    settings.update_timing(0.5)
    settings.update_timing(0.5)
    assert settings.frame_counter == 0
    assert settings.delta_counter == 0.0
    assert settings.delta == 0.5


def test_update_timing_counts_frames_within_second():
    settings = Settings()
    for _ in range(5):
        settings.update_timing(0.1)
    assert settings.frame_counter == 5
    assert settings.delta_counter < 1.0


def test_update_timing_zero_delta_raises():
    with pytest.raises(ValueError):
        Settings().update_timing(0)


def test_asset_path_concatenates_and_lowercases_extension():
    result = asset_path("/games/demo/", "gfx/IMG.PNG")
    assert result.fullpath == "/games/demo/" + "gfx/IMG.PNG"
    assert result.ext == "png"


def test_asset_path_without_extension():
    result = asset_path("/g/", "dir.d/file")
    assert result.ext == ""
    assert result.fullpath.endswith("dir.d/file")


def test_asset_path_extension_is_truncated():
    result = asset_path("", "a." + "x" * 40)
    assert len(result.ext) <= 15
    assert set(result.ext) == {"x"}