"""
Tests for visualization module.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from ballclock.core import ReturnOrder
from ballclock.main import main
from ballclock.simulator import SimulationResult, SweepResult, VariantResult
from ballclock.visualization import plot_compute_time, plot_sweep, plot_sweep_summary


@pytest.fixture
def sweep():
    results = [
        SimulationResult(
            balls=n,
            elapsed_seconds=0.01 * n,
            cam=VariantResult(ReturnOrder.CAM, 0.5, 1, 14, 2 * cam),
            no_cam=VariantResult(ReturnOrder.NO_CAM, 0.5, 1, 14, 2 * no_cam),
        )
        for n, cam, no_cam in [(27, 35, 12), (28, 20, 13), (29, 10, 7)]
    ]
    return SweepResult(27, 29, results, 0.84)


class TestSweepPlots:
    """Smoke tests for sweep plots."""

    def test_plot_sweep(self, sweep):
        ax = plot_sweep(sweep)
        assert len(ax.get_lines()) == 2
        assert ax.get_yscale() == 'log'
        assert list(ax.get_lines()[0].get_ydata()) == [35.0, 20.0, 10.0]
        plt.close(ax.figure)

    def test_plot_linear(self, sweep):
        ax = plot_sweep(sweep, log_scale=False)
        assert ax.get_yscale() == 'linear'
        plt.close(ax.figure)

    def test_plot_compute_time(self, sweep):
        ax = plot_compute_time(sweep)
        assert list(ax.get_lines()[0].get_xdata()) == [27, 28, 29]
        plt.close(ax.figure)

    def test_summary_figure(self, sweep, tmp_path):
        fig = plot_sweep_summary(sweep)
        assert len(fig.axes) == 2
        fig.savefig(tmp_path / "summary.png")
        plt.close(fig)
        assert (tmp_path / "summary.png").stat().st_size > 0


class TestMainPlot:
    """The --plot flag writes a PNG beside the CSV."""

    def test_plot_flag(self, tmp_path):
        main(["--min-balls", "27", "--max-balls", "28",
              "--output", str(tmp_path), "--name", "run", "--plot"])
        assert (tmp_path / "run.csv").exists()
        assert (tmp_path / "run.png").stat().st_size > 0
