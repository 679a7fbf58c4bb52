"""IO utilities: case loader and result exporter."""

from .case_loader import CaseLoader
from .case_exporter import ResultExporter
from .case import Case

__all__ = [
    "CaseLoader",
    "ResultExporter",
    "Case",
]
