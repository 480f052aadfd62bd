"""
JSON storage for sweeps and permutation vectors.
"""

from __future__ import annotations
import json
import gzip
from pathlib import Path
from typing import Any, Union
import numpy as np

from ballclock.core import PermutationVector, ReturnOrder
from ballclock.simulator import SweepResult


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy arrays."""

    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return {
                '__numpy__': True,
                'dtype': str(obj.dtype),
                'shape': obj.shape,
                'data': obj.tolist(),
            }
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def numpy_decoder(dct):
    """JSON decoder hook for numpy arrays."""
    if '__numpy__' in dct:
        return np.array(dct['data'], dtype=dct['dtype']).reshape(dct['shape'])
    return dct


class JSONStorage:
    """
    JSON-based storage backend.

    Supports:
    - Plain JSON files
    - Gzipped JSON files
    - Automatic numpy array handling
    """

    def __init__(self, base_path: Union[str, Path]):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def save(
        self,
        data: Any,
        filename: str,
        compress: bool = False,
    ) -> Path:
        """
        Save data to JSON file.

        Args:
            data: Data to save
            filename: Filename (without extension)
            compress: Use gzip compression

        Returns:
            Path to saved file
        """
        if compress:
            filepath = self.base_path / f"{filename}.json.gz"
            with gzip.open(filepath, 'wt', encoding='utf-8') as f:
                json.dump(data, f, cls=NumpyEncoder, indent=2)
        else:
            filepath = self.base_path / f"{filename}.json"
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(data, f, cls=NumpyEncoder, indent=2)

        return filepath

    def _find(self, filename: str) -> Path:
        for ext in ['', '.json', '.json.gz']:
            filepath = self.base_path / f"{filename}{ext}"
            if filepath.is_file():
                return filepath
        raise FileNotFoundError(f"No JSON file found for {filename}")

    def load(self, filename: str) -> Any:
        """Load data from JSON file (with or without extension)."""
        filepath = self._find(filename)

        if filepath.suffix == '.gz':
            with gzip.open(filepath, 'rt', encoding='utf-8') as f:
                return json.load(f, object_hook=numpy_decoder)
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f, object_hook=numpy_decoder)

    def exists(self, filename: str) -> bool:
        """Check if file exists."""
        try:
            self._find(filename)
        except FileNotFoundError:
            return False
        return True

    def save_sweep(self, sweep: SweepResult, filename: str) -> Path:
        return self.save(sweep.to_dict(), filename)

    def load_sweep(self, filename: str) -> SweepResult:
        return SweepResult.from_dict(self.load(filename))

    def save_vector(self, vector: PermutationVector, filename: str) -> Path:
        """Save a permutation vector (gzipped; large clocks give long arrays)."""
        data = {
            'perm': np.asarray(vector.perm),
            'unit_half_days': vector.unit_half_days,
            'order': vector.order.name,
            'hits': vector.hits,
        }
        return self.save(data, filename, compress=True)

    def load_vector(self, filename: str) -> PermutationVector:
        data = self.load(filename)
        return PermutationVector(
            perm=np.asarray(data['perm'], dtype=np.int64),
            unit_half_days=int(data['unit_half_days']),
            order=ReturnOrder[data['order']],
            hits=int(data['hits']),
        )
