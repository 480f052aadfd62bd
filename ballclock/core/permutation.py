"""
Permutation builder.

Brute-forces the clock one 12-hour block at a time, starting from the
reference arrangement, until enough balls are back in place. The pool order
at that point is the permutation vector: applying it once advances the
clock by `unit_half_days` half-days.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

import numpy as np

from .mechanism import (
    BRUTEFORCECYCLES,
    HOUR_CAPACITY,
    MIN1_CAPACITY,
    MIN5_CAPACITY,
    ReturnOrder,
    reference_arrangement,
    validate_ball_count,
)
from .heuristics import hit_percentage as table_hit_percentage, hit_target
from .kernels import _cycle_block


logger = logging.getLogger(__name__)


def cycle_block(pool: np.ndarray, order: ReturnOrder) -> np.ndarray:
    """Pool order after one 12-hour block starting from `pool`."""
    return _cycle_block(
        np.array(pool, dtype=np.int64),
        int(order),
        MIN1_CAPACITY,
        MIN5_CAPACITY,
        HOUR_CAPACITY,
        BRUTEFORCECYCLES,
    )


@dataclass(frozen=True)
class PermutationVector:
    """
    Discovered permutation and the clock time one application represents.

    Attributes:
        perm: perm[i] is the ball at position i after one application
        unit_half_days: Half-days advanced per application
        order: Return-order policy it was built with
        hits: Balls in their reference position when building stopped
    """
    perm: np.ndarray
    unit_half_days: int
    order: ReturnOrder
    hits: int

    def __post_init__(self):
        self.perm.flags.writeable = False

    @property
    def n_balls(self) -> int:
        return len(self.perm)

    @property
    def unit_time(self) -> float:
        """Days advanced per application (a multiple of 0.5)."""
        return self.unit_half_days / 2

    def apply(self, arrangement: np.ndarray) -> np.ndarray:
        """One application: out[i] = arrangement[perm[i]]."""
        return arrangement[self.perm]


class PermutationBuilder:
    """
    Build a PermutationVector for one return-order policy.

    Args:
        order: Cam or no-cam return order
        hit_percentage: Fixed hit fraction; None uses the heuristic table
    """

    def __init__(
        self,
        order: ReturnOrder,
        hit_percentage: Optional[float] = None,
    ):
        self.order = ReturnOrder(order)
        self.hit_percentage = hit_percentage

    def percentage_for(self, n: int) -> float:
        if self.hit_percentage is not None:
            return self.hit_percentage
        return table_hit_percentage(n)

    def build(self, n_balls: int) -> PermutationVector:
        n = validate_ball_count(n_balls)
        ref = reference_arrangement(n)
        target = hit_target(n, self.percentage_for(n))

        perm = ref.copy()
        half_days = 0
        hits = 0
        while True:
            perm = cycle_block(perm, self.order)
            half_days += 1
            hits = int(np.count_nonzero(perm == ref))
            if hits >= target:
                break

        logger.debug(
            f"{n} balls ({self.order}): {hits}/{n} in place after "
            f"{half_days} half-days (target {target})"
        )
        return PermutationVector(
            perm=perm,
            unit_half_days=half_days,
            order=self.order,
            hits=hits,
        )
