"""
Visualization module for the Ball Clock Simulator.

Provides plots of sweep results:
- Days to repeat per ball count (cam and no cam)
- Compute time per ball count
"""

from .sweep_viz import plot_compute_time, plot_sweep, plot_sweep_summary

__all__ = [
    "plot_compute_time",
    "plot_sweep",
    "plot_sweep_summary",
]
