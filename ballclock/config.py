"""
Configuration module for the Ball Clock Simulator.

Contains all configurable parameters for single computations and sweeps.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path
import json

from ballclock.core.mechanism import MIN_BALLS


# Range accepted by the sweep front end
SWEEP_MIN_BALLS = MIN_BALLS
SWEEP_MAX_BALLS = 1000


@dataclass
class SimulationConfig:
    """Parameters for one run_simulation call."""
    parallel: bool = True                   # Cam and no-cam on two threads
    hit_percentage: Optional[float] = None  # None = heuristic table
    verify: bool = False                    # Cross-check against exact period


@dataclass
class SweepConfig:
    """Parameters for a sweep over a range of ball counts."""
    min_balls: int = SWEEP_MIN_BALLS
    max_balls: int = SWEEP_MAX_BALLS
    output_path: Path = field(default_factory=lambda: Path("./runs"))
    csv_name: str = "Ball Clock Run"
    save_json: bool = False
    plot: bool = False


@dataclass
class ClockConfig:
    """
    Main configuration container for the Ball Clock Simulator.

    Example:
        config = ClockConfig(sweep=SweepConfig(min_balls=27, max_balls=60))
        config.save("my_config.json")
    """
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    sweep: SweepConfig = field(default_factory=SweepConfig)

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self._to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: str | Path) -> "ClockConfig":
        """Load configuration from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls._from_dict(data)

    def _to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        def convert(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif hasattr(obj, '__dataclass_fields__'):
                return {k: convert(v) for k, v in obj.__dict__.items()}
            return obj

        return convert(self)

    @classmethod
    def _from_dict(cls, data: dict) -> "ClockConfig":
        """Reconstruct from dictionary."""
        if 'simulation' in data:
            data['simulation'] = SimulationConfig(**data['simulation'])
        if 'sweep' in data:
            if 'output_path' in data['sweep']:
                data['sweep']['output_path'] = Path(data['sweep']['output_path'])
            data['sweep'] = SweepConfig(**data['sweep'])
        return cls(**data)

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors."""
        issues = []

        p = self.simulation.hit_percentage
        if p is not None and not 0 < p <= 1:
            issues.append("hit_percentage must be in (0, 1]")

        if self.sweep.min_balls < SWEEP_MIN_BALLS:
            issues.append(f"min_balls must be at least {SWEEP_MIN_BALLS}")
        if self.sweep.max_balls > SWEEP_MAX_BALLS:
            issues.append(f"max_balls must be at most {SWEEP_MAX_BALLS}")
        if self.sweep.max_balls < self.sweep.min_balls:
            issues.append("max_balls must not be less than min_balls")
        if not self.sweep.csv_name:
            issues.append("csv_name must not be empty")

        return issues


# Preset configurations
def quick_config() -> ClockConfig:
    """Small range that finishes in seconds."""
    return ClockConfig(sweep=SweepConfig(min_balls=27, max_balls=40))


def full_range_config() -> ClockConfig:
    """Every ball count the front end accepts, with JSON and plot output."""
    return ClockConfig(
        sweep=SweepConfig(
            min_balls=SWEEP_MIN_BALLS,
            max_balls=SWEEP_MAX_BALLS,
            save_json=True,
            plot=True,
        ),
    )
