"""
Input validation for the quantity calculator.

The geometry and reinforcement models accept any numbers; this module is the
explicit pass that rejects malformed inputs before quantities are computed.
Every violated field is collected and reported in a single
InputValidationError.
"""

from typing import List

import numpy as np
from pydantic import BaseModel

from .geometry import ColumnGeometry, ColumnShape, FoundationGeometry, FoundationType
from .materials import CONCRETE_GRADES, STEEL_GRADES, MaterialSpec
from .reinforcement import ColumnReinforcement, FootingReinforcement


class FieldViolation(BaseModel):
    """A single invalid input field."""
    field: str
    message: str

    class Config:
        frozen = True

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InputValidationError(ValueError):
    """Raised when calculator inputs fail validation."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = list(violations)
        summary = "; ".join(str(v) for v in self.violations)
        super().__init__(f"{len(self.violations)} invalid input(s): {summary}")

    @property
    def fields(self) -> List[str]:
        """Names of the violated fields."""
        return [v.field for v in self.violations]


def _positive(violations: List[FieldViolation], name: str, value: float) -> None:
    if not np.isfinite(value):
        violations.append(FieldViolation(field=name, message="must be a valid number"))
    elif value <= 0:
        violations.append(FieldViolation(field=name, message="must be a positive number"))


def _non_negative(violations: List[FieldViolation], name: str, value: float) -> None:
    if not np.isfinite(value):
        violations.append(FieldViolation(field=name, message="must be a valid number"))
    elif value < 0:
        violations.append(FieldViolation(field=name, message="must not be negative"))


def _check_material(violations: List[FieldViolation], material: MaterialSpec) -> None:
    if material.concrete_grade not in CONCRETE_GRADES:
        violations.append(
            FieldViolation(
                field="material.concrete_grade",
                message=f"unknown grade '{material.concrete_grade}'",
            )
        )
    if material.steel_grade not in STEEL_GRADES:
        violations.append(
            FieldViolation(
                field="material.steel_grade",
                message=f"unknown grade '{material.steel_grade}'",
            )
        )
    _positive(violations, "material.concrete_density", material.concrete_density)
    _positive(violations, "material.steel_density", material.steel_density)
    _non_negative(violations, "material.concrete_waste_factor", material.concrete_waste_factor)
    _non_negative(violations, "material.steel_waste_factor", material.steel_waste_factor)
    _non_negative(violations, "material.admixture_percent", material.admixture_percent)


def check_column_inputs(
    geometry: ColumnGeometry,
    material: MaterialSpec,
    reinforcement: ColumnReinforcement,
) -> List[FieldViolation]:
    """Return every violation for a column calculation (empty when valid)."""
    violations: List[FieldViolation] = []

    for name in geometry.relevant_fields:
        _positive(violations, f"geometry.{name}", getattr(geometry, name))

    # Stirrup length is always taken from width/depth
    if geometry.shape not in (ColumnShape.RECTANGULAR, ColumnShape.LSHAPE, ColumnShape.POLYGON):
        _non_negative(violations, "geometry.width", geometry.width)
        _non_negative(violations, "geometry.depth", geometry.depth)

    if geometry.shape == ColumnShape.TSHAPE and geometry.flange_thickness > geometry.height:
        violations.append(
            FieldViolation(field="geometry.flange_thickness", message="must not exceed column height")
        )
    if geometry.shape == ColumnShape.POLYGON and geometry.number_of_sides < 3:
        violations.append(
            FieldViolation(field="geometry.number_of_sides", message="must be at least 3")
        )

    _check_material(violations, material)

    main = reinforcement.main_bars
    _positive(violations, "reinforcement.main_bars.count", main.count)
    _positive(violations, "reinforcement.main_bars.diameter", main.diameter)
    _non_negative(violations, "reinforcement.main_bars.cover", main.cover)

    stirrups = reinforcement.stirrups
    _positive(violations, "reinforcement.stirrups.diameter", stirrups.diameter)
    _positive(violations, "reinforcement.stirrups.spacing", stirrups.spacing)

    return violations


def check_foundation_inputs(
    geometry: FoundationGeometry,
    material: MaterialSpec,
    reinforcement: FootingReinforcement,
) -> List[FieldViolation]:
    """Return every violation for a foundation calculation (empty when valid)."""
    violations: List[FieldViolation] = []

    _positive(violations, "geometry.width", geometry.width)
    _positive(violations, "geometry.length", geometry.length)
    _positive(violations, "geometry.thickness", geometry.thickness)
    if geometry.type == FoundationType.SLOPED:
        _non_negative(violations, "geometry.embedded_depth", geometry.embedded_depth)

    _check_material(violations, material)

    for layer_name in ("bottom_bars_x", "bottom_bars_y"):
        layer = getattr(reinforcement, layer_name)
        _positive(violations, f"reinforcement.{layer_name}.count", layer.count)
        _positive(violations, f"reinforcement.{layer_name}.diameter", layer.diameter)
        _positive(violations, f"reinforcement.{layer_name}.spacing", layer.spacing)

    if reinforcement.top_bars.enabled:
        _positive(violations, "reinforcement.top_bars.count", reinforcement.top_bars.count)
        _positive(violations, "reinforcement.top_bars.diameter", reinforcement.top_bars.diameter)

    if reinforcement.mesh.enabled:
        _positive(violations, "reinforcement.mesh.bar_size", reinforcement.mesh.bar_size)
        _positive(violations, "reinforcement.mesh.mesh_size", reinforcement.mesh.mesh_size)

    return violations


def validate_column_inputs(
    geometry: ColumnGeometry,
    material: MaterialSpec,
    reinforcement: ColumnReinforcement,
) -> None:
    """
    Validate column calculator inputs.

    Raises:
        InputValidationError: Listing every violated field
    """
    violations = check_column_inputs(geometry, material, reinforcement)
    if violations:
        raise InputValidationError(violations)


def validate_foundation_inputs(
    geometry: FoundationGeometry,
    material: MaterialSpec,
    reinforcement: FootingReinforcement,
) -> None:
    """
    Validate foundation calculator inputs.

    Raises:
        InputValidationError: Listing every violated field
    """
    violations = check_foundation_inputs(geometry, material, reinforcement)
    if violations:
        raise InputValidationError(violations)
