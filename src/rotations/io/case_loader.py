"""
YAML case file loader with validation.
"""

from pathlib import Path
import yaml

from ..config.schemas import CaseConfig
from .case import Case


class CaseLoader:
    """Load and validate cases from YAML files."""

    @staticmethod
    def load(filepath: str | Path) -> CaseConfig:
        """
        Load and validate a case file.

        Args:
            filepath: Path to YAML case file

        Returns:
            Validated config

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the contents are invalid
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Case file not found: {filepath}")

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f) or {}

        return CaseConfig(**raw_config)

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate case file.

        Returns:
            True if valid, raises ValidationError otherwise
        """
        CaseLoader.load(filepath)
        return True

    @staticmethod
    def load_case(case_path: str | Path) -> Case:
        """
        Load a case from a directory (containing case.yaml) or a YAML file.

        Args:
            case_path: Case directory or YAML file

        Returns:
            Case object
        """
        case_path = Path(case_path)
        if case_path.is_dir():
            case_file = case_path / "case.yaml"
            if not case_file.exists():
                raise FileNotFoundError(f"No case.yaml found in {case_path}")
        else:
            case_file = case_path

        config = CaseLoader.load(case_file)
        return Case(config=config, case_dir=case_file.parent)
