"""
Ball Clock Simulator

Computes how many days a ball clock runs before its balls return to their
starting order, with and without the timing cam.

Main components:
- core: clock mechanism, heuristics, permutation builder, cycle accelerator
- simulator: run_simulation / run_sweep
- analysis: exact periods and tick-by-tick ground truth
- storage: CSV and JSON persistence
- visualization: sweep plots
"""

__version__ = "0.1.0"
__author__ = "Ball Clock Team"

from .core import (
    ClockMechanism,
    CycleAccelerator,
    PermutationBuilder,
    PermutationVector,
    ReturnOrder,
    hit_percentage,
)
from .config import ClockConfig, SimulationConfig, SweepConfig
from .simulator import (
    SimulationResult,
    SweepResult,
    VariantResult,
    compute,
    run_simulation,
    run_sweep,
)

__all__ = [
    "ClockMechanism",
    "CycleAccelerator",
    "PermutationBuilder",
    "PermutationVector",
    "ReturnOrder",
    "hit_percentage",
    "ClockConfig",
    "SimulationConfig",
    "SweepConfig",
    "SimulationResult",
    "SweepResult",
    "VariantResult",
    "compute",
    "run_simulation",
    "run_sweep",
]
