"""
Result exporter - write tabular results and run summaries.

Usage:
    from rotations.io import ResultExporter

    exporter = ResultExporter('results/default')
    exporter.write_csv('look_rotation_samples.csv', rows)
    exporter.write_summary({'passed': True, 'num_samples': 100})
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence
import csv
import yaml
import numpy as np


def _plain(value: Any) -> Any:
    """Convert NumPy scalars/arrays to built-ins so YAML stays readable."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class ResultExporter:
    """Write CSV tables and a YAML summary into one output directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _prepare(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def write_csv(self, filename: str, rows: Sequence[Mapping[str, Any]]) -> Path:
        """
        Write rows (dicts sharing the same keys) to a CSV file.

        Returns:
            Path of the written file
        """
        if not rows:
            raise ValueError("No rows to export")

        self._prepare()
        path = self.directory / filename
        fieldnames: List[str] = list(rows[0].keys())
        with open(path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _plain(v) for k, v in row.items()})
        return path

    def write_summary(self, summary: Dict[str, Any], filename: str = "summary.yaml") -> Path:
        """Write a summary mapping as YAML."""
        self._prepare()
        path = self.directory / filename
        with open(path, 'w') as f:
            yaml.safe_dump(_plain(summary), f, sort_keys=False)
        return path
