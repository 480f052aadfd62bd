"""
Core module for the Ball Clock Simulator.

Contains:
- ClockMechanism: tick-level model of the pool and the three tracks
- ReturnOrder: cam / no-cam reset order
- hit_percentage: per-ball-count brute-force thresholds
- PermutationBuilder: 12-hour brute force producing a permutation vector
- CycleAccelerator: repeated application of the vector until the clock repeats
"""

from .mechanism import (
    BRUTEFORCECYCLES,
    HOUR_CAPACITY,
    MIN1_CAPACITY,
    MIN5_CAPACITY,
    MIN_BALLS,
    ClockMechanism,
    ReturnOrder,
    Track,
    reference_arrangement,
    validate_ball_count,
)
from .heuristics import (
    DEFAULT_HIT_PERCENTAGE,
    HIT_RULES,
    HitRule,
    hit_percentage,
    hit_target,
)
from .permutation import PermutationBuilder, PermutationVector, cycle_block
from .accelerator import AccelerationResult, CycleAccelerator

__all__ = [
    "BRUTEFORCECYCLES",
    "HOUR_CAPACITY",
    "MIN1_CAPACITY",
    "MIN5_CAPACITY",
    "MIN_BALLS",
    "ClockMechanism",
    "ReturnOrder",
    "Track",
    "reference_arrangement",
    "validate_ball_count",
    # Heuristics
    "DEFAULT_HIT_PERCENTAGE",
    "HIT_RULES",
    "HitRule",
    "hit_percentage",
    "hit_target",
    # Builder / accelerator
    "PermutationBuilder",
    "PermutationVector",
    "cycle_block",
    "AccelerationResult",
    "CycleAccelerator",
]
