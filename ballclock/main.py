"""
Ball Clock Simulator - days until a ball clock repeats, with and without cam.

Main entry point for sweeps over a range of ball counts.
"""

from __future__ import annotations
import argparse
import logging
import signal
import threading
from pathlib import Path
from typing import List, Optional

from ballclock.config import ClockConfig, SweepConfig, SWEEP_MAX_BALLS, SWEEP_MIN_BALLS
from ballclock.simulator import SimulationResult, SweepResult, run_sweep
from ballclock.storage import JSONStorage, format_duration, write_csv


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def log_result(result: SimulationResult) -> None:
    logger.info(
        f"{result.balls:>5} | {result.days_with_cam:>16} | "
        f"{result.days_without_cam:>16} | {format_duration(result.elapsed_seconds)}"
    )


def save_outputs(sweep: SweepResult, config: SweepConfig) -> List[Path]:
    """Write CSV (always), JSON and plot (if enabled); return the paths."""
    out_dir = Path(config.output_path)
    paths = [write_csv(sweep.results, out_dir / f"{config.csv_name}.csv")]

    if config.save_json:
        storage = JSONStorage(out_dir)
        paths.append(storage.save_sweep(sweep, config.csv_name))

    if config.plot and sweep.results:
        import matplotlib.pyplot as plt
        from ballclock.visualization import plot_sweep_summary

        fig = plot_sweep_summary(sweep)
        plot_path = out_dir / f"{config.csv_name}.png"
        fig.savefig(plot_path, dpi=150)
        plt.close(fig)
        paths.append(plot_path)

    return paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ball Clock Simulator")

    parser.add_argument('--min-balls', type=int, default=None,
                       help=f'First ball count (default: {SWEEP_MIN_BALLS})')
    parser.add_argument('--max-balls', type=int, default=None,
                       help='Last ball count (default: same as --min-balls)')
    parser.add_argument('--hit-percentage', type=float, default=None,
                       help='Fixed brute-force hit fraction (default: per-size table)')
    parser.add_argument('--sequential', action='store_true',
                       help='Run cam and no-cam one after the other')
    parser.add_argument('--verify', action='store_true',
                       help='Check each result against the exact period')
    parser.add_argument('--output', type=str, default=None,
                       help='Output directory (default: ./runs)')
    parser.add_argument('--name', type=str, default=None,
                       help='Output file name without extension (default: "Ball Clock Run")')
    parser.add_argument('--json', action='store_true',
                       help='Also save results as JSON')
    parser.add_argument('--plot', action='store_true',
                       help='Save a plot of the sweep')
    parser.add_argument('--config', type=str, default=None,
                       help='Load configuration from JSON file')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Save the effective configuration to JSON file')

    return parser


def config_from_args(args: argparse.Namespace) -> ClockConfig:
    """Command-line flags override values from --config."""
    config = ClockConfig.load(args.config) if args.config else ClockConfig()

    if args.min_balls is not None:
        config.sweep.min_balls = args.min_balls
        if args.max_balls is None:
            config.sweep.max_balls = args.min_balls
    if args.max_balls is not None:
        config.sweep.max_balls = args.max_balls
    if args.hit_percentage is not None:
        config.simulation.hit_percentage = args.hit_percentage
    if args.sequential:
        config.simulation.parallel = False
    if args.verify:
        config.simulation.verify = True
    if args.output is not None:
        config.sweep.output_path = Path(args.output)
    if args.name is not None:
        config.sweep.csv_name = args.name
    if args.json:
        config.sweep.save_json = True
    if args.plot:
        config.sweep.plot = True

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for running sweeps."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    issues = config.validate()
    if issues:
        parser.error("; ".join(issues))

    if args.save_config:
        config.save(args.save_config)
        logger.info(f"Configuration saved to: {args.save_config}")

    # Ctrl-C finishes the current ball count, then stops
    stop_event = threading.Event()

    def request_stop(signum, frame):
        logger.info("Stopping after the current ball count...")
        stop_event.set()

    previous = signal.signal(signal.SIGINT, request_stop)

    logger.info(f"{'Balls':>5} | {'Days (cam)':>16} | {'Days (no cam)':>16} | Clock time")
    try:
        sweep = run_sweep(
            config.sweep.min_balls,
            config.sweep.max_balls,
            config=config.simulation,
            stop_event=stop_event,
            callback=log_result,
        )
    finally:
        signal.signal(signal.SIGINT, previous)

    status = "Stopped" if sweep.stopped else "Complete"
    logger.info(f"{status}: {len(sweep.results)} clocks in {format_duration(sweep.elapsed_seconds)}")

    for path in save_outputs(sweep, config.sweep):
        logger.info(f"Saved: {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
