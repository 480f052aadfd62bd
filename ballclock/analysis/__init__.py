"""
Analysis module for the Ball Clock Simulator.

Provides:
- Exact periods from the cycle structure of the 12-hour permutation
- Verification of accelerated results
- Tick-by-tick ground truth for small clocks
"""

from .period import (
    PeriodMismatch,
    cycle_lengths,
    exact_half_days,
    ground_truth_half_days,
    half_day_permutation,
    permutation_order,
    verify_result,
)

__all__ = [
    "PeriodMismatch",
    "cycle_lengths",
    "exact_half_days",
    "ground_truth_half_days",
    "half_day_permutation",
    "permutation_order",
    "verify_result",
]
