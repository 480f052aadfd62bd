"""
Cycle accelerator ("tick-tock").

Applies a permutation vector to the reference arrangement over and over,
ping-ponging between two buffers, until the arrangement is the reference
again. Each application stands for `unit_half_days` half-days of clock time,
so the accelerator covers in thousands of steps what would take billions of
ticks.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

import numpy as np

from .permutation import PermutationVector
from .kernels import _count_applications


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccelerationResult:
    """Outcome of accelerating one permutation vector."""
    applications: int
    unit_half_days: int

    @property
    def half_days(self) -> int:
        return self.applications * self.unit_half_days

    @property
    def days(self) -> int:
        """Whole days until the clock repeats (truncated)."""
        return self.half_days // 2


class CycleAccelerator:
    """
    Count applications of a permutation vector until it returns to REF.

    Example:
        vector = PermutationBuilder(ReturnOrder.CAM).build(30)
        result = CycleAccelerator().run(vector)
        result.days
    """

    def run(self, vector: PermutationVector) -> AccelerationResult:
        applications = int(_count_applications(vector.perm))
        logger.debug(
            f"{vector.n_balls} balls ({vector.order}): {applications} "
            f"applications of {vector.unit_time} days"
        )
        return AccelerationResult(
            applications=applications,
            unit_half_days=vector.unit_half_days,
        )

    @staticmethod
    def iterate(vector: PermutationVector, start: np.ndarray, steps: int):
        """Yield the arrangement after each of `steps` applications."""
        tick = np.array(start, dtype=np.int64)
        tock = np.empty_like(tick)
        for _ in range(steps):
            np.take(tick, vector.perm, out=tock)
            tick, tock = tock, tick
            yield tick.copy()
