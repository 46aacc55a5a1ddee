"""Tests for the progress animation model."""
import math

import pytest


def _model(clock, duration=1000, interpolator=None):
    from gradientring.services.progress_model import ProgressModel
    from gradientring.services.interpolators import linear
    return ProgressModel(duration_ms=duration, interpolator=interpolator or linear, clock=clock)


class TestImmediate:
    def test_initial_state(self, clock):
        m = _model(clock)
        assert m.current == 0.0
        assert m.target == 0.0
        assert not m.is_animating

    def test_set_without_animation(self, clock):
        m = _model(clock)
        seen = []
        m.on_change(seen.append)
        m.set_progress(42)
        assert m.current == m.target == 42
        assert seen == [42]

    def test_notifies_even_when_unchanged(self, clock):
        m = _model(clock)
        seen = []
        m.on_change(seen.append)
        m.set_progress(0)
        assert seen == [0]

    @pytest.mark.parametrize("value,expected", [
        (-5, 0.0), (150, 100.0), (math.inf, 100.0), (-math.inf, 0.0),
    ])
    def test_clamps_out_of_range(self, clock, value, expected):
        m = _model(clock)
        m.set_progress(value)
        assert m.current == expected

    def test_nan_ignored(self, clock):
        m = _model(clock)
        m.set_progress(30)
        seen = []
        m.on_change(seen.append)
        m.set_progress(float("nan"))
        assert m.current == 30
        assert seen == []

    def test_immediate_set_cancels_animation(self, clock):
        m = _model(clock)
        m.set_progress(80, animate=True)
        m.set_progress(10)
        assert not m.is_animating
        clock.advance(2000)
        assert m.tick() is False
        assert m.current == 10


class TestAnimation:
    def test_halfway_linear(self, clock):
        m = _model(clock)
        m.set_progress(30, animate=True)
        clock.advance(500)
        m.tick()
        assert m.current == pytest.approx(15)
        assert m.is_animating

    def test_start_not_notified_until_tick(self, clock):
        m = _model(clock)
        seen = []
        m.on_change(seen.append)
        m.set_progress(30, animate=True)
        assert seen == []
        assert m.target == 30
        assert m.current == 0

    def test_tick_at_start_yields_from(self, clock):
        m = _model(clock)
        m.set_progress(20)
        m.set_progress(90, animate=True)
        m.tick()
        assert m.current == 20

    @pytest.mark.parametrize("name", [
        "linear", "accelerate", "decelerate", "accelerate_decelerate", "overshoot", "anticipate",
    ])
    def test_end_is_exact(self, clock, name):
        from gradientring.services.interpolators import get_interpolator
        m = _model(clock, interpolator=get_interpolator(name))
        m.set_progress(37.5, animate=True)
        clock.advance(1000)
        m.tick()
        assert m.current == 37.5
        assert not m.is_animating

    def test_overshoot_stays_in_range(self, clock):
        from gradientring.services.interpolators import overshoot
        m = _model(clock, interpolator=overshoot)
        seen = []
        m.on_change(seen.append)
        m.set_progress(100, animate=True)
        for _ in range(10):
            clock.advance(100)
            m.tick()
        assert seen[-1] == 100
        assert all(0 <= v <= 100 for v in seen)

    def test_anticipate_stays_in_range(self, clock):
        from gradientring.services.interpolators import anticipate
        m = _model(clock, interpolator=anticipate)
        seen = []
        m.on_change(seen.append)
        m.set_progress(100, animate=True)
        for _ in range(5):
            clock.advance(200)
            m.tick()
        assert seen[0] == 0
        assert all(0 <= v <= 100 for v in seen)

    def test_ticks_after_completion_are_idempotent(self, clock):
        m = _model(clock)
        seen = []
        m.on_change(seen.append)
        m.set_progress(60, animate=True)
        clock.advance(1500)
        assert m.tick() is True
        for _ in range(3):
            assert m.tick() is False
            clock.advance(100)
        assert m.current == m.target == 60
        assert not m.is_animating
        assert seen == [60]

    def test_explicit_timestamps(self, clock):
        m = _model(clock)
        m.set_progress(100, animate=True, now=1000)
        m.tick(now=1250)
        assert m.current == pytest.approx(25)

    def test_tick_before_start_clamps_to_from(self, clock):
        m = _model(clock)
        m.set_progress(50, animate=True, now=1000)
        m.tick(now=900)
        assert m.current == 0

    def test_restart_tracks_only_second_target(self, clock):
        m = _model(clock)
        seen = []
        m.on_change(seen.append)
        m.set_progress(100, animate=True)
        clock.advance(250)
        m.tick()
        assert m.current == pytest.approx(25)
        m.set_progress(50, animate=True)
        assert m.animation.from_value == pytest.approx(25)
        assert m.target == 50
        clock.advance(500)
        m.tick()
        assert m.current == pytest.approx(37.5)
        clock.advance(500)
        m.tick()
        assert m.current == 50
        assert 100 not in seen

    def test_zero_duration_applies_immediately(self, clock):
        m = _model(clock, duration=0)
        m.set_progress(70, animate=True)
        assert m.current == 70
        assert not m.is_animating

    def test_duration_change_applies_to_next_animation(self, clock):
        m = _model(clock)
        m.set_progress(100, animate=True)
        m.duration_ms = 2000
        clock.advance(500)
        m.tick()
        assert m.current == pytest.approx(50)

    def test_cancel_holds_value(self, clock):
        m = _model(clock)
        m.set_progress(80, animate=True)
        clock.advance(500)
        m.tick()
        m.cancel()
        assert not m.is_animating
        assert m.target == m.current == pytest.approx(40)
        clock.advance(1000)
        assert m.tick() is False


class TestListeners:
    def test_order_and_removal(self, clock):
        m = _model(clock)
        calls = []
        first = m.on_change(lambda v: calls.append(("a", v)))
        m.on_change(lambda v: calls.append(("b", v)))
        m.set_progress(10)
        m.remove_listener(first)
        m.set_progress(20)
        assert calls == [("a", 10), ("b", 10), ("b", 20)]


class TestInterpolators:
    def test_endpoints(self):
        from gradientring.services.interpolators import INTERPOLATORS
        for name, fn in INTERPOLATORS.items():
            assert fn(0.0) == pytest.approx(0.0), name
            assert fn(1.0) == pytest.approx(1.0), name

    def test_overshoot_exceeds_one(self):
        from gradientring.services.interpolators import overshoot
        assert max(overshoot(i / 20) for i in range(21)) > 1.0

    def test_lookup(self):
        from gradientring.services.interpolators import get_interpolator, decelerate
        assert get_interpolator("Decelerate") is decelerate
        assert get_interpolator("accelerate-decelerate")(0.5) == pytest.approx(0.5)
        fn = lambda t: t
        assert get_interpolator(fn) is fn
        with pytest.raises(KeyError):
            get_interpolator("bouncy")
