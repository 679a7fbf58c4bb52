"""
Case class - container for a loaded case directory.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from ..config.schemas import CaseConfig


@dataclass
class Case:
    """
    A validated case and where it lives.

    Usage:
        from rotations.io import CaseLoader

        case = CaseLoader.load_case('cases/default')
        print(case.name)
        print(case.output_dir)
    """

    config: CaseConfig
    case_dir: Path

    @property
    def name(self) -> str:
        """Case name."""
        return self.config.name

    @property
    def description(self) -> str:
        """Case description."""
        return self.config.description

    @property
    def output_dir(self) -> Path:
        """Output directory, resolved against the case directory when relative."""
        directory = Path(self.config.output.directory)
        if directory.is_absolute():
            return directory
        return self.case_dir / directory

    def __repr__(self) -> str:
        return f"Case(name='{self.name}', case_dir='{self.case_dir}')"
