"""
Tests for the Workout Planner

Run with: python -m pytest tests/test_workout.py -v
"""

import pytest

from cacher import workout
from cacher.workout import generate_workout, simulated_expensive_calculation


@pytest.fixture
def calculation_calls(monkeypatch):
    """Record calls to the expensive calculation without sleeping."""
    calls = []

    def fake(intensity, delay):
        calls.append(intensity)
        return intensity

    monkeypatch.setattr(workout, "simulated_expensive_calculation", fake)
    return calls


class TestGenerateWorkout:
    """Test generate_workout()."""

    def test_low_intensity(self, calculation_calls):
        """Low intensity prescribes pushups and situps."""
        plan = generate_workout(10, 7)

        assert plan == ["Today, do 10 pushups!", "Next, do 10 situps!"]

    def test_low_intensity_calculates_once(self, calculation_calls):
        """The intensity is calculated once for both lines."""
        generate_workout(10, 7)
        assert calculation_calls == [10]

    def test_break_day(self, calculation_calls):
        """High intensity with the break number skips the calculation."""
        plan = generate_workout(30, 3)

        assert plan == ["Take a break today. Remember to stay hydrated"]
        assert calculation_calls == []

    def test_run_day(self, calculation_calls):
        """High intensity otherwise prescribes a run."""
        assert generate_workout(30, 7) == ["Today, run for 30 minutes!"]
        assert calculation_calls == [30]

    def test_boundary_is_high_intensity(self, calculation_calls):
        """Intensity 25 is no longer low intensity."""
        assert generate_workout(25, 1) == ["Today, run for 25 minutes!"]

    def test_zero_delay(self):
        """The real calculation runs with an explicit zero delay."""
        assert generate_workout(5, 0, delay=0) == [
            "Today, do 5 pushups!",
            "Next, do 5 situps!",
        ]


class TestExpensiveCalculation:
    """Test simulated_expensive_calculation()."""

    def test_returns_intensity(self):
        assert simulated_expensive_calculation(12, 0) == 12

    def test_logs(self, caplog):
        """The calculation announces itself."""
        with caplog.at_level("INFO", logger="cacher.workout"):
            simulated_expensive_calculation(1, 0)
        assert "Calculating slowly..." in caplog.text
