"""
Simulation orchestration.

run_simulation computes days-to-repeat for one ball count, cam and no-cam
side by side. run_sweep loops it over a range of ball counts.
"""

from __future__ import annotations
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ballclock.analysis import verify_result
from ballclock.config import SimulationConfig
from ballclock.core import (
    AccelerationResult,
    CycleAccelerator,
    PermutationBuilder,
    ReturnOrder,
    validate_ball_count,
)


logger = logging.getLogger(__name__)


@dataclass
class VariantResult:
    """Result for one return-order policy."""
    order: ReturnOrder
    hit_percentage: float
    unit_half_days: int
    hits: int
    applications: int

    @property
    def half_days(self) -> int:
        return self.applications * self.unit_half_days

    @property
    def days(self) -> int:
        return self.half_days // 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            'order': self.order.name,
            'hit_percentage': self.hit_percentage,
            'unit_half_days': self.unit_half_days,
            'hits': self.hits,
            'applications': self.applications,
            'days': self.days,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "VariantResult":
        d = dict(d)
        d.pop('days', None)
        d['order'] = ReturnOrder[d['order']]
        return cls(**d)


@dataclass
class SimulationResult:
    """Result of run_simulation for one ball count."""
    balls: int
    elapsed_seconds: float
    cam: VariantResult
    no_cam: VariantResult

    @property
    def days_with_cam(self) -> int:
        return self.cam.days

    @property
    def days_without_cam(self) -> int:
        return self.no_cam.days

    def as_tuple(self):
        """(elapsed seconds, days with cam, days without cam)."""
        return (self.elapsed_seconds, self.days_with_cam, self.days_without_cam)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'balls': self.balls,
            'elapsed_seconds': self.elapsed_seconds,
            'cam': self.cam.to_dict(),
            'no_cam': self.no_cam.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SimulationResult":
        return cls(
            balls=d['balls'],
            elapsed_seconds=d['elapsed_seconds'],
            cam=VariantResult.from_dict(d['cam']),
            no_cam=VariantResult.from_dict(d['no_cam']),
        )


@dataclass
class SweepResult:
    """Results of run_sweep, in ball-count order."""
    min_balls: int
    max_balls: int
    results: List[SimulationResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    stopped: bool = False

    @property
    def balls(self) -> List[int]:
        return [r.balls for r in self.results]

    @property
    def complete(self) -> bool:
        return not self.stopped and len(self.results) == self.max_balls - self.min_balls + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min_balls': self.min_balls,
            'max_balls': self.max_balls,
            'elapsed_seconds': self.elapsed_seconds,
            'stopped': self.stopped,
            'results': [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SweepResult":
        return cls(
            min_balls=d['min_balls'],
            max_balls=d['max_balls'],
            results=[SimulationResult.from_dict(r) for r in d['results']],
            elapsed_seconds=d.get('elapsed_seconds', 0.0),
            stopped=d.get('stopped', False),
        )


def compute_variant(
    n_balls: int,
    order: ReturnOrder,
    hit_percentage: Optional[float] = None,
) -> VariantResult:
    """Builder then accelerator for one return order."""
    builder = PermutationBuilder(order, hit_percentage=hit_percentage)
    vector = builder.build(n_balls)
    accel: AccelerationResult = CycleAccelerator().run(vector)
    return VariantResult(
        order=vector.order,
        hit_percentage=builder.percentage_for(n_balls),
        unit_half_days=vector.unit_half_days,
        hits=vector.hits,
        applications=accel.applications,
    )


def run_simulation(
    n_balls: int,
    config: Optional[SimulationConfig] = None,
) -> SimulationResult:
    """
    Days until an n-ball clock repeats, with and without the cam.

    Args:
        n_balls: Number of balls (at least MIN_BALLS)
        config: Simulation parameters (defaults if None)

    Returns:
        SimulationResult with wall-clock compute time and both day counts
    """
    if config is None:
        config = SimulationConfig()
    n = validate_ball_count(n_balls)
    p = config.hit_percentage

    start = time.perf_counter()
    if config.parallel:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ballclock") as pool:
            cam_future = pool.submit(compute_variant, n, ReturnOrder.CAM, p)
            no_cam_future = pool.submit(compute_variant, n, ReturnOrder.NO_CAM, p)
            cam = cam_future.result()
            no_cam = no_cam_future.result()
    else:
        cam = compute_variant(n, ReturnOrder.CAM, p)
        no_cam = compute_variant(n, ReturnOrder.NO_CAM, p)
    elapsed = time.perf_counter() - start

    result = SimulationResult(
        balls=n,
        elapsed_seconds=elapsed,
        cam=cam,
        no_cam=no_cam,
    )
    logger.info(
        f"{n} balls: {result.days_with_cam} days with cam, "
        f"{result.days_without_cam} days without ({elapsed:.4f}s)"
    )

    if config.verify:
        verify_result(result)

    return result


def compute(ball_count: int) -> SimulationResult:
    """Entry point for front ends: run_simulation with default settings."""
    return run_simulation(ball_count)


def run_sweep(
    min_balls: int,
    max_balls: int,
    config: Optional[SimulationConfig] = None,
    stop_event: Optional[threading.Event] = None,
    callback: Optional[Callable[[SimulationResult], None]] = None,
) -> SweepResult:
    """
    Run the simulation for every ball count in [min_balls, max_balls].

    The stop event is checked between ball counts, never inside one.

    Args:
        min_balls: First ball count
        max_balls: Last ball count (inclusive)
        config: Simulation parameters
        stop_event: Set to stop after the current ball count
        callback: Called with each result as it finishes
    """
    validate_ball_count(min_balls)
    validate_ball_count(max_balls)
    if max_balls < min_balls:
        raise ValueError(f"max_balls ({max_balls}) < min_balls ({min_balls})")

    sweep = SweepResult(min_balls=min_balls, max_balls=max_balls)
    logger.info(f"Sweeping {min_balls}..{max_balls} balls")

    for n in range(min_balls, max_balls + 1):
        if stop_event is not None and stop_event.is_set():
            sweep.stopped = True
            logger.info(f"Stopped before {n} balls")
            break

        result = run_simulation(n, config)
        sweep.results.append(result)
        sweep.elapsed_seconds += result.elapsed_seconds

        if callback is not None:
            callback(result)

    return sweep
