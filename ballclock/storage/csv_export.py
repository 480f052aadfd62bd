"""
CSV export of sweep results.

One row per ball count, no header:

    balls,days_with_cam,days_without_cam,HH:MM:SS.SSSS
"""

from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable, List, NamedTuple, Union

from ballclock.simulator import SimulationResult


DURATION_PRECISION = 4


class CSVRow(NamedTuple):
    balls: int
    days_with_cam: int
    days_without_cam: int
    clock_time: str


def format_duration(seconds: float, precision: int = DURATION_PRECISION) -> str:
    """
    Format seconds as HH:MM:SS.SSSS.

    Hours grow past two digits when needed; seconds are rounded to
    `precision` places and zero padded.
    """
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")

    hours = int(seconds // 3600)
    minutes = int((seconds - hours * 3600) // 60)
    secs = round(seconds - hours * 3600 - minutes * 60, precision)

    # Rounding can carry into the next minute
    if secs >= 60:
        secs -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        hours += 1

    width = 3 + precision
    return f"{hours:02d}:{minutes:02d}:{secs:0{width}.{precision}f}"


def to_row(result: SimulationResult) -> CSVRow:
    return CSVRow(
        balls=result.balls,
        days_with_cam=result.days_with_cam,
        days_without_cam=result.days_without_cam,
        clock_time=format_duration(result.elapsed_seconds),
    )


def write_csv(results: Iterable[SimulationResult], path: Union[str, Path]) -> Path:
    """Write results to `path`, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f, lineterminator='\n')
        for result in results:
            writer.writerow(to_row(result))

    return path


def read_csv(path: Union[str, Path]) -> List[CSVRow]:
    """Read rows written by write_csv."""
    rows = []
    with open(path, 'r', encoding='utf-8', newline='') as f:
        for record in csv.reader(f):
            if not record:
                continue
            balls, cam, no_cam, clock_time = record
            rows.append(CSVRow(int(balls), int(cam), int(no_cam), clock_time))
    return rows
