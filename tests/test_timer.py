from lutro.settings import Settings
from lutro.timer import Timer


def test_get_time_converts_microseconds():
    timer = Timer(Settings(), clock=lambda: 2_500_000)
    assert timer.get_time() == 2.5


def test_default_clock_is_monotonic():
    timer = Timer(Settings())
    first = timer.get_time()
    second = timer.get_time()
    assert second >= first


def test_delta_and_fps_follow_settings():
    settings = Settings()
    timer = Timer(settings)
    settings.update_timing(0.25)
    assert timer.get_delta() == 0.25
    assert timer.get_fps() == settings.fps
    assert timer.get_fps() == 4


def test_initial_delta_is_zero():
    timer = Timer(Settings())
    assert timer.get_delta() == 0.0
    assert timer.get_fps() == 0