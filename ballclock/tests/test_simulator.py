"""
Tests for run_simulation and run_sweep.
"""

import threading

import pytest
from ballclock import SimulationConfig, compute, run_simulation, run_sweep
from ballclock.core import BRUTEFORCECYCLES, ClockMechanism, ReturnOrder, hit_percentage
from ballclock.analysis import exact_half_days


class TestRunSimulation:
    """Tests for the single ball-count entry point."""

    @pytest.mark.parametrize("n,cam_days,no_cam_days", [
        (27, 35, 12),
        (28, 20, 13),
        (30, 20, 190),
        (45, 3705, 74),
        (253, 727987260, 7371),  # 0.75 hit-percentage override
    ])
    def test_golden_values(self, n, cam_days, no_cam_days):
        result = run_simulation(n)
        assert result.days_with_cam == cam_days
        assert result.days_without_cam == no_cam_days
        assert result.cam.hit_percentage == hit_percentage(n)
        assert result.no_cam.hit_percentage == hit_percentage(n)

    @pytest.mark.parametrize("n", [27, 28, 30, 45, 52])
    def test_days_positive(self, n):
        result = run_simulation(n)
        assert result.balls == n
        assert result.days_with_cam > 0
        assert result.days_without_cam > 0
        assert result.elapsed_seconds >= 0

    def test_deterministic(self):
        first = run_simulation(47)
        second = run_simulation(47)
        assert first.days_with_cam == second.days_with_cam
        assert first.days_without_cam == second.days_without_cam
        assert first.cam.unit_half_days == second.cam.unit_half_days

    def test_parallel_matches_sequential(self):
        parallel = run_simulation(39, SimulationConfig(parallel=True))
        sequential = run_simulation(39, SimulationConfig(parallel=False))
        assert parallel.cam == sequential.cam
        assert parallel.no_cam == sequential.no_cam

    @pytest.mark.parametrize("n", [27, 33, 45])
    def test_multiple_of_exact_period(self, n):
        result = run_simulation(n)
        for variant in (result.cam, result.no_cam):
            exact = exact_half_days(n, variant.order)
            assert variant.half_days % exact == 0

    def test_tick_by_tick_ground_truth(self):
        """Plain simulation for the accelerated number of half-days lands on REF."""
        result = run_simulation(27)
        clock = ClockMechanism(27, ReturnOrder.CAM)
        for _ in range(result.cam.half_days * BRUTEFORCECYCLES):
            clock.tick()
        assert clock.is_reset()

    def test_as_tuple(self):
        result = compute(30)
        elapsed, cam, no_cam = result.as_tuple()
        assert elapsed == result.elapsed_seconds
        assert cam == result.days_with_cam
        assert no_cam == result.days_without_cam

    def test_verify_option(self):
        result = run_simulation(36, SimulationConfig(verify=True))
        assert result.days_with_cam > 0

    def test_fixed_hit_percentage(self):
        result = run_simulation(30, SimulationConfig(hit_percentage=1.0))
        assert result.cam.hit_percentage == 1.0
        assert result.cam.applications == 1
        assert result.no_cam.applications == 1

    def test_invalid_ball_count(self):
        with pytest.raises(ValueError):
            run_simulation(0)
        with pytest.raises(ValueError):
            run_simulation(26)


class TestRunSweep:
    """Tests for sweeps over a range of ball counts."""

    def test_range_inclusive(self):
        sweep = run_sweep(27, 30)
        assert sweep.balls == [27, 28, 29, 30]
        assert sweep.complete
        assert sweep.elapsed_seconds == pytest.approx(
            sum(r.elapsed_seconds for r in sweep.results)
        )

    def test_callback(self):
        seen = []
        run_sweep(27, 29, callback=seen.append)
        assert [r.balls for r in seen] == [27, 28, 29]

    def test_stop_before_start(self):
        stop = threading.Event()
        stop.set()
        sweep = run_sweep(27, 40, stop_event=stop)
        assert sweep.results == []
        assert sweep.stopped
        assert not sweep.complete

    def test_stop_between_ball_counts(self):
        stop = threading.Event()
        sweep = run_sweep(27, 40, stop_event=stop, callback=lambda r: stop.set())
        assert sweep.balls == [27]
        assert sweep.stopped

    def test_reversed_range(self):
        with pytest.raises(ValueError):
            run_sweep(40, 30)
