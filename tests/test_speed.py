"""
Unit tests for tick pacing.
"""

import pytest

from game.speed import SpeedController, SpeedMode


class TestSpeedController:
    def test_fixed_interval_ignores_score(self):
        speed = SpeedController(mode=SpeedMode.FIXED, base_interval=0.2)
        assert speed.interval(0) == pytest.approx(0.2)
        assert speed.interval(50) == pytest.approx(0.2)

    def test_progressive_interval_shrinks(self):
        speed = SpeedController(base_interval=0.2, speed_step=0.1, max_multiplier=3.0)
        assert speed.interval(0) == pytest.approx(0.2)
        assert speed.interval(5) == pytest.approx(0.2 / 1.5)
        assert speed.interval(10) < speed.interval(5)

    def test_progressive_multiplier_capped(self):
        speed = SpeedController(speed_step=0.1, max_multiplier=3.0)
        assert speed.multiplier(20) == pytest.approx(3.0)
        assert speed.multiplier(1000) == pytest.approx(3.0)

    def test_ticks_per_second(self):
        speed = SpeedController(mode=SpeedMode.FIXED, base_interval=0.125)
        assert speed.ticks_per_second(0) == pytest.approx(8.0)

    def test_advance_accumulates(self):
        speed = SpeedController(mode=SpeedMode.FIXED, base_interval=0.1)
        assert not speed.advance(0.04, 0)
        assert not speed.advance(0.04, 0)
        assert speed.advance(0.04, 0)
        assert speed.accumulated == 0.0

    def test_advance_resets_to_zero(self):
        speed = SpeedController(mode=SpeedMode.FIXED, base_interval=0.1)
        assert speed.advance(0.35, 0)
        # overshoot is discarded, not carried
        assert not speed.advance(0.05, 0)

    def test_negative_elapsed_rejected(self):
        with pytest.raises(ValueError):
            SpeedController().advance(-0.1, 0)

    def test_toggle(self):
        speed = SpeedController(mode=SpeedMode.FIXED)
        speed.advance(0.01, 0)
        assert speed.toggle() is SpeedMode.PROGRESSIVE
        assert speed.progressive
        assert speed.accumulated == pytest.approx(0.01)
        assert speed.toggle() is SpeedMode.FIXED

    def test_invalid_settings(self):
        with pytest.raises(ValueError):
            SpeedController(base_interval=0)
        with pytest.raises(ValueError):
            SpeedController(max_multiplier=0.5)
