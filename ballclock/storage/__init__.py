"""
Storage module for the Ball Clock Simulator.

Provides persistence for:
- Sweep results (CSV rows and JSON)
- Permutation vectors
"""

from .csv_export import CSVRow, format_duration, read_csv, to_row, write_csv
from .json_storage import JSONStorage, NumpyEncoder, numpy_decoder

__all__ = [
    "CSVRow",
    "format_duration",
    "read_csv",
    "to_row",
    "write_csv",
    "JSONStorage",
    "NumpyEncoder",
    "numpy_decoder",
]
