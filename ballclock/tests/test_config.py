"""
Tests for configuration and the command-line front end.
"""

from pathlib import Path

import pytest
from ballclock.config import (
    ClockConfig,
    SimulationConfig,
    SweepConfig,
    full_range_config,
    quick_config,
)
from ballclock.main import main
from ballclock.storage import JSONStorage, read_csv


class TestClockConfig:
    """Tests for ClockConfig."""

    def test_defaults_valid(self):
        config = ClockConfig()
        assert config.validate() == []
        assert config.simulation.parallel
        assert config.simulation.hit_percentage is None

    def test_presets_valid(self):
        assert quick_config().validate() == []
        assert full_range_config().validate() == []

    def test_save_load(self, tmp_path):
        config = ClockConfig(
            simulation=SimulationConfig(parallel=False, hit_percentage=0.6),
            sweep=SweepConfig(min_balls=30, max_balls=35, output_path=Path("out")),
        )
        path = tmp_path / "config.json"
        config.save(path)

        loaded = ClockConfig.load(path)
        assert loaded == config
        assert isinstance(loaded.sweep.output_path, Path)

    @pytest.mark.parametrize("sim,sweep", [
        (SimulationConfig(hit_percentage=0.0), SweepConfig()),
        (SimulationConfig(hit_percentage=1.5), SweepConfig()),
        (SimulationConfig(), SweepConfig(min_balls=10)),
        (SimulationConfig(), SweepConfig(max_balls=1001)),
        (SimulationConfig(), SweepConfig(min_balls=50, max_balls=40)),
        (SimulationConfig(), SweepConfig(csv_name="")),
    ])
    def test_invalid(self, sim, sweep):
        assert ClockConfig(simulation=sim, sweep=sweep).validate()


class TestMain:
    """Tests for the command-line interface."""

    def test_sweep_writes_outputs(self, tmp_path):
        code = main([
            "--min-balls", "27", "--max-balls", "29",
            "--output", str(tmp_path), "--name", "run", "--json",
        ])
        assert code == 0

        rows = read_csv(tmp_path / "run.csv")
        assert [r.balls for r in rows] == [27, 28, 29]
        assert (rows[0].days_with_cam, rows[0].days_without_cam) == (35, 12)
        assert JSONStorage(tmp_path).load_sweep("run").balls == [27, 28, 29]

    def test_single_ball_count(self, tmp_path):
        main(["--min-balls", "30", "--output", str(tmp_path), "--sequential"])
        rows = read_csv(tmp_path / "Ball Clock Run.csv")
        assert [r.balls for r in rows] == [30]

    def test_config_file(self, tmp_path):
        config = quick_config()
        config.sweep.min_balls = 27
        config.sweep.max_balls = 27
        config.sweep.output_path = tmp_path
        config.save(tmp_path / "config.json")

        main(["--config", str(tmp_path / "config.json"),
              "--save-config", str(tmp_path / "saved.json")])
        assert len(read_csv(tmp_path / "Ball Clock Run.csv")) == 1
        assert ClockConfig.load(tmp_path / "saved.json") == config

    @pytest.mark.parametrize("argv", [
        ["--min-balls", "10"],
        ["--min-balls", "40", "--max-balls", "30"],
        ["--max-balls", "2000"],
        ["--hit-percentage", "0"],
    ])
    def test_rejects_bad_arguments(self, argv):
        with pytest.raises(SystemExit):
            main(argv)
