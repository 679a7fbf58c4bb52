"""
Test case schemas, YAML loading and result export.
"""

import csv
import pytest
import numpy as np
import yaml
from pathlib import Path
from pydantic import ValidationError

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from rotations.config import (
    CaseConfig,
    CrossValidationConfig,
    HandleConfig,
    InterpolationConfig,
    OutputConfig,
)
from rotations.geometry import RotationOrder
from rotations.io import CaseLoader, ResultExporter

CASES_DIR = Path(__file__).parent.parent.parent / "cases"


class TestSchemas:
    """Test pydantic validation."""

    def test_defaults(self):
        config = CaseConfig(name="demo")
        assert config.cross_validation.num_samples == 100
        assert config.cross_validation.tolerance == 1e-4
        assert config.interpolation.rate == 0.2
        assert config.interpolation.wait == 1.3
        assert config.euler.order is RotationOrder.ZXY
        assert config.handle.base_vector == (0.0, 0.0, 1.0)
        assert config.output.formats == ["csv", "yaml"]

    def test_name_stripped(self):
        assert CaseConfig(name="  demo ").name == "demo"

    def test_blank_name(self):
        with pytest.raises(ValidationError):
            CaseConfig(name="   ")

    def test_unknown_key(self):
        with pytest.raises(ValidationError):
            CaseConfig(name="demo", crossvalidation={})

    def test_component_range_order(self):
        with pytest.raises(ValidationError):
            CrossValidationConfig(component_range=(5.0, 1.0))

    def test_positive_samples(self):
        with pytest.raises(ValidationError):
            CrossValidationConfig(num_samples=0)

    def test_pitch_limits(self):
        with pytest.raises(ValidationError):
            HandleConfig(pitch_limits=(-100.0, 0.0))
        with pytest.raises(ValidationError):
            HandleConfig(pitch_limits=(10.0, -10.0))

    def test_zero_base_vector(self):
        with pytest.raises(ValidationError):
            HandleConfig(base_vector=(0.0, 0.0, 0.0))

    def test_num_steps(self):
        with pytest.raises(ValidationError):
            InterpolationConfig(num_steps=1)

    def test_output_formats(self):
        with pytest.raises(ValidationError):
            OutputConfig(formats=["json"])

    def test_order_from_string(self):
        config = CaseConfig(name="demo", euler={"order": "XZY", "intrinsic": True})
        assert config.euler.order is RotationOrder.XZY


class TestCaseLoader:
    """Test YAML loading."""

    def _write(self, directory: Path, data) -> Path:
        path = directory / "case.yaml"
        with open(path, 'w') as f:
            yaml.safe_dump(data, f)
        return path

    def test_load(self, tmp_path):
        path = self._write(tmp_path, {
            'name': 'tmp',
            'cross_validation': {'num_samples': 10, 'seed': 3, 'component_range': [-2, 2]},
            'handle': {'pitch_limits': [-45, 45]},
        })
        config = CaseLoader.load(path)
        assert config.cross_validation.num_samples == 10
        assert config.cross_validation.component_range == (-2.0, 2.0)
        assert config.handle.pitch_limits == (-45.0, 45.0)

    def test_load_case_from_directory(self, tmp_path):
        self._write(tmp_path, {'name': 'tmp', 'output': {'directory': 'out'}})
        case = CaseLoader.load_case(tmp_path)
        assert case.name == "tmp"
        assert case.output_dir == tmp_path / "out"

    def test_absolute_output_dir(self, tmp_path):
        target = tmp_path / "elsewhere"
        path = self._write(tmp_path, {'name': 'tmp', 'output': {'directory': str(target)}})
        assert CaseLoader.load_case(path).output_dir == target

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CaseLoader.load(tmp_path / "nope.yaml")

    def test_directory_without_case(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CaseLoader.load_case(tmp_path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "case.yaml"
        path.write_text("")
        with pytest.raises(ValidationError):
            CaseLoader.load(path)

    def test_invalid_file(self, tmp_path):
        path = self._write(tmp_path, {'name': 'tmp', 'interpolation': {'rate': -1}})
        with pytest.raises(ValidationError):
            CaseLoader.validate(path)

    @pytest.mark.parametrize("case_name", ["default", "float_components"])
    def test_bundled_cases(self, case_name):
        assert CaseLoader.validate(CASES_DIR / case_name / "case.yaml")


class TestResultExporter:
    """Test CSV and YAML export."""

    def test_write_csv(self, tmp_path):
        exporter = ResultExporter(tmp_path / "results")
        rows = [
            {'label': 'a', 'error': np.float64(1e-9)},
            {'label': 'b', 'error': np.float64(2e-9)},
        ]
        path = exporter.write_csv("samples.csv", rows)
        with open(path, newline='') as f:
            read = list(csv.DictReader(f))
        assert [r['label'] for r in read] == ['a', 'b']
        assert float(read[1]['error']) == 2e-9

    def test_write_csv_empty(self, tmp_path):
        with pytest.raises(ValueError):
            ResultExporter(tmp_path).write_csv("empty.csv", [])

    def test_write_summary(self, tmp_path):
        exporter = ResultExporter(tmp_path)
        path = exporter.write_summary({
            'passed': np.bool_(True),
            'max_error': np.float64(3e-12),
            'counts': np.array([1, 2, 3]),
            'nested': {'n': np.int64(4)},
        })
        with open(path) as f:
            data = yaml.safe_load(f)
        assert data == {'passed': True, 'max_error': 3e-12, 'counts': [1, 2, 3], 'nested': {'n': 4}}
