import pytest

from lightgame.timer import (
    TIME_LOG_FRAMES,
    TimeContext,
    fps_as_duration,
    sleep,
    yield_now,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += round(seconds * 1_000_000_000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ctx(clock):
    return TimeContext(clock=clock)


def run_frames(ctx, clock, count, step):
    for _ in range(count):
        clock.advance(step)
        ctx.tick()


def test_initial_delta_is_sixteen_milliseconds(ctx):
    assert ctx.delta() == pytest.approx(0.016)
    assert ctx.average_delta() == pytest.approx(0.016)


def test_initial_state_has_no_ticks_and_no_residual(ctx):
    assert ctx.ticks() == 0
    assert ctx.remaining_update_time() == 0.0


def test_tick_records_delta_and_count(ctx, clock):
    clock.advance(0.02)
    ctx.tick()
    assert ctx.delta() == pytest.approx(0.02)
    assert ctx.ticks() == 1


def test_average_lies_between_samples(ctx, clock):
    run_frames(ctx, clock, 1, 0.03)
    assert 0.016 < ctx.average_delta() < 0.03


def test_average_before_buffer_wraps_includes_initial_value(ctx, clock):
    run_frames(ctx, clock, TIME_LOG_FRAMES - 1, 0.01)
    assert ctx.average_delta() > 0.01


def test_average_after_buffer_wraps_is_exact(ctx, clock):
    run_frames(ctx, clock, TIME_LOG_FRAMES, 0.01)
    assert ctx.average_delta() == pytest.approx(0.01)
    run_frames(ctx, clock, 50, 0.01)
    assert ctx.average_delta() == pytest.approx(0.01)
    assert ctx.ticks() == TIME_LOG_FRAMES + 50


def test_fps_is_reciprocal_of_average(ctx, clock):
    run_frames(ctx, clock, 10, 0.025)
    assert ctx.fps() * ctx.average_delta() == pytest.approx(1.0)


def test_fps_with_zero_length_frames_is_infinite(ctx):
    for _ in range(TIME_LOG_FRAMES):
        ctx.tick()
    assert ctx.fps() == float("inf")


def test_time_since_start_follows_clock(ctx, clock):
    clock.advance(1.5)
    assert ctx.time_since_start() == pytest.approx(1.5)
    assert ctx.ticks() == 0


def test_check_update_time_worked_example(ctx, clock):
    clock.advance(0.045)
    ctx.tick()
    assert ctx.check_update_time(25) is True
    assert ctx.remaining_update_time() == pytest.approx(0.005)
    assert ctx.check_update_time(25) is False
    assert ctx.remaining_update_time() == pytest.approx(0.005)


def test_check_update_time_false_without_elapsed_time(ctx):
    assert ctx.check_update_time(60) is False


def test_check_update_time_consumes_multiple_steps(ctx, clock):
    clock.advance(0.1)
    ctx.tick()
    steps = 0
    while ctx.check_update_time(50):
        steps += 1
    assert steps >= 4
    assert 0.0 <= ctx.remaining_update_time() <= fps_as_duration(50)


def test_check_update_time_rejects_zero_fps(ctx):
    with pytest.raises(ValueError):
        ctx.check_update_time(0)


def test_fps_as_duration():
    assert fps_as_duration(25) == pytest.approx(0.04)
    assert fps_as_duration(1) == pytest.approx(1.0)


def test_fps_as_duration_rejects_non_positive():
    with pytest.raises(ValueError):
        fps_as_duration(0)
    with pytest.raises(ValueError):
        fps_as_duration(-5)


def test_real_clock_is_monotonic():
    ctx = TimeContext()
    sleep(0.001)
    yield_now()
    ctx.tick()
    assert ctx.delta() > 0.0
    assert ctx.time_since_start() >= ctx.delta()


def test_sleep_rejects_negative_duration():
    with pytest.raises(ValueError):
        sleep(-1.0)