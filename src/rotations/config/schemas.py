"""
Pydantic schemas for case configuration.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Tuple, Optional, Literal

from ..geometry.euler import RotationOrder


class CrossValidationConfig(BaseModel):
    """Random look-rotation comparison against the reference library."""
    num_samples: int = Field(
        default=100,
        gt=0,
        description="Number of random (forward, up) pairs"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed (None = nondeterministic)"
    )
    component_range: Tuple[float, float] = Field(
        default=(-10.0, 10.0),
        description="Range [low, high) for random vector components"
    )
    integer_components: bool = Field(
        default=True,
        description="Draw integer components, which exercises axis-aligned cases"
    )
    vector_length: float = Field(
        default=5.0,
        gt=0,
        description="Length the random vectors are rescaled to"
    )
    tolerance: float = Field(
        default=1e-4,
        gt=0,
        description="Component-wise quaternion tolerance"
    )

    @field_validator('component_range')
    @classmethod
    def check_range(cls, v):
        """Low bound must be below high bound."""
        low, high = v
        if low >= high:
            raise ValueError(f"component_range low must be < high, got {v}")
        return v


class InterpolationConfig(BaseModel):
    """Interpolation comparison settings."""
    rate: float = Field(
        default=0.2,
        gt=0,
        description="Progress per second"
    )
    wait: float = Field(
        default=1.3,
        ge=0,
        description="Seconds to hold the end pose before restarting"
    )
    num_steps: int = Field(
        default=50,
        ge=2,
        description="Samples per strategy in traces and plots"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for start/end rotations"
    )


class EulerConfig(BaseModel):
    """Euler-order demo settings."""
    rate: float = Field(
        default=60.0,
        gt=0,
        description="Angle change per second while a key is held [deg/s]"
    )
    order: RotationOrder = Field(
        default=RotationOrder.ZXY,
        description="Axis application order"
    )
    intrinsic: bool = Field(
        default=False,
        description="Rotate about body axes instead of world axes"
    )


class HandleConfig(BaseModel):
    """Handle rig settings (spin / pitch / orbit)."""
    rate: float = Field(
        default=90.0,
        gt=0,
        description="Angle change per second while a key is held [deg/s]"
    )
    pitch_limits: Tuple[float, float] = Field(
        default=(-90.0, 90.0),
        description="Pitch clamp range [deg]"
    )
    base_vector: Tuple[float, float, float] = Field(
        default=(0.0, 0.0, 1.0),
        description="Handle direction before rotation"
    )

    @field_validator('pitch_limits')
    @classmethod
    def check_limits(cls, v):
        """Limits must be ordered and within [-90, 90]."""
        low, high = v
        if low > high:
            raise ValueError(f"pitch_limits must be ordered, got {v}")
        if low < -90.0 or high > 90.0:
            raise ValueError(f"pitch_limits must lie within [-90, 90], got {v}")
        return v

    @field_validator('base_vector')
    @classmethod
    def check_base(cls, v):
        """Base vector must be non-zero."""
        if sum(c * c for c in v) < 1e-12:
            raise ValueError("base_vector cannot be zero")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""
    directory: str = Field(
        default="./results",
        description="Output directory path"
    )
    formats: List[Literal["csv", "yaml"]] = Field(
        default=["csv", "yaml"],
        description="Output formats"
    )


class VisualizationConfig(BaseModel):
    """Visualization settings."""
    enabled: bool = Field(default=True, description="Save figures")
    show: bool = Field(default=False, description="Open interactive windows")
    dpi: int = Field(default=120, gt=0, description="Figure resolution")


class CaseConfig(BaseModel):
    """Top-level case configuration."""
    name: str = Field(..., description="Case name")
    description: str = Field(default="", description="Case description")

    cross_validation: CrossValidationConfig = Field(
        default_factory=CrossValidationConfig,
        description="Look-rotation cross-validation"
    )
    interpolation: InterpolationConfig = Field(
        default_factory=InterpolationConfig,
        description="Interpolation comparison"
    )
    euler: EulerConfig = Field(
        default_factory=EulerConfig,
        description="Euler-order demo"
    )
    handle: HandleConfig = Field(
        default_factory=HandleConfig,
        description="Handle rig"
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output settings"
    )
    visualization: VisualizationConfig = Field(
        default_factory=VisualizationConfig,
        description="Visualization settings"
    )

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch typos in YAML
        validate_assignment = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Check name is not blank."""
        if not v or not v.strip():
            raise ValueError("Case name cannot be empty")
        return v.strip()
