"""
Sweep visualization functions.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple
import numpy as np

from ballclock.simulator import SweepResult

_plt = None
def _get_plt():
    global _plt
    if _plt is None:
        import matplotlib.pyplot as plt
        _plt = plt
    return _plt


def plot_sweep(
    sweep: SweepResult,
    ax: Optional[Any] = None,
    log_scale: bool = True,
    title: str = "Days until the clock repeats",
) -> Any:
    """
    Plot days-to-repeat against ball count for both variants.

    Args:
        sweep: Sweep results
        ax: Matplotlib axis
        log_scale: Logarithmic day axis (results span many decades)
        title: Plot title

    Returns:
        Matplotlib axis
    """
    plt = _get_plt()

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))

    balls = np.array(sweep.balls)
    # float: day counts can exceed int64 in principle
    cam = np.array([float(r.days_with_cam) for r in sweep.results])
    no_cam = np.array([float(r.days_without_cam) for r in sweep.results])

    ax.plot(balls, cam, 'b.-', linewidth=0.5, markersize=3, label='With cam')
    ax.plot(balls, no_cam, 'r.-', linewidth=0.5, markersize=3, label='Without cam')
    ax.set_xlabel('Balls')
    ax.set_ylabel('Days')
    if log_scale:
        ax.set_yscale('log')
    ax.legend()

    if title:
        ax.set_title(title)

    return ax


def plot_compute_time(
    sweep: SweepResult,
    ax: Optional[Any] = None,
    title: str = "Compute time",
) -> Any:
    """Plot wall-clock seconds per ball count."""
    plt = _get_plt()

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))

    balls = np.array(sweep.balls)
    seconds = np.array([r.elapsed_seconds for r in sweep.results])

    ax.plot(balls, seconds, 'g-', linewidth=0.8)
    ax.set_xlabel('Balls')
    ax.set_ylabel('Seconds')

    if title:
        ax.set_title(title)

    return ax


def plot_sweep_summary(
    sweep: SweepResult,
    figsize: Tuple[int, int] = (12, 8),
) -> Any:
    """
    Two-panel summary: days to repeat and compute time.

    Returns:
        Matplotlib figure
    """
    plt = _get_plt()

    fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)
    plot_sweep(sweep, ax=axes[0])
    plot_compute_time(sweep, ax=axes[1])
    axes[0].set_xlabel('')

    fig.suptitle(f"Ball clock, {sweep.min_balls}-{sweep.max_balls} balls")
    plt.tight_layout()

    return fig
