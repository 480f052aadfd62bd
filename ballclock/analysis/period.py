"""
Exact period analysis.

The accelerator only knows that its permutation vector is some power of the
12-hour permutation. Decomposing the 12-hour permutation into cycles gives
the true period directly (lcm of the cycle lengths), which is used to check
accelerated results. Small clocks can also be checked against plain
tick-by-tick simulation.
"""

from __future__ import annotations
import logging
import math
from typing import List, Optional

import numpy as np

from ballclock.core import (
    BRUTEFORCECYCLES,
    ClockMechanism,
    ReturnOrder,
    cycle_block,
    reference_arrangement,
    validate_ball_count,
)


logger = logging.getLogger(__name__)


class PeriodMismatch(AssertionError):
    """Accelerated result disagrees with the exact period."""


def half_day_permutation(n_balls: int, order: ReturnOrder) -> np.ndarray:
    """Pool order after one 12-hour block from the reference arrangement."""
    n = validate_ball_count(n_balls)
    return cycle_block(reference_arrangement(n), order)


def cycle_lengths(perm: np.ndarray) -> List[int]:
    """Lengths of the disjoint cycles of a permutation."""
    perm = np.asarray(perm)
    seen = np.zeros(len(perm), dtype=bool)
    lengths = []

    for start in range(len(perm)):
        if seen[start]:
            continue
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            i = int(perm[i])
            length += 1
        lengths.append(length)

    return lengths


def permutation_order(perm: np.ndarray) -> int:
    """Smallest k > 0 with perm^k = identity."""
    return math.lcm(*cycle_lengths(perm))


def exact_half_days(n_balls: int, order: ReturnOrder) -> int:
    """True number of half-days before the clock repeats."""
    return permutation_order(half_day_permutation(n_balls, order))


def verify_result(result) -> None:
    """
    Check a SimulationResult against the exact periods.

    Each accelerated half-day count must be a positive multiple of the true
    period. It is larger than the period when the unit time does not divide
    the period.

    Raises:
        PeriodMismatch: If either variant fails the check
    """
    for variant in (result.cam, result.no_cam):
        exact = exact_half_days(result.balls, variant.order)
        accelerated = variant.half_days
        if accelerated <= 0 or accelerated % exact:
            raise PeriodMismatch(
                f"{result.balls} balls ({variant.order}): accelerated "
                f"{accelerated} half-days is not a multiple of {exact}"
            )
        if accelerated != exact:
            logger.warning(
                f"{result.balls} balls ({variant.order}): accelerated result is "
                f"{accelerated // exact}x the exact period of {exact} half-days"
            )


def ground_truth_half_days(
    n_balls: int,
    order: ReturnOrder,
    limit: int,
) -> Optional[int]:
    """
    Tick-by-tick simulation until the clock is back to its starting order.

    Only for small clocks: costs 720 Python-level ticks per half-day.

    Returns:
        First half-day count at which the clock is reset, or None if not
        reset within `limit` half-days
    """
    clock = ClockMechanism(n_balls, order)
    for half_day in range(1, limit + 1):
        for _ in range(BRUTEFORCECYCLES):
            clock.tick()
        if clock.is_reset():
            return half_day
    return None
