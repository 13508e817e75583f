"""
Quantity Calculator for RCC columns and foundations.

Converts geometry + material + reinforcement into a QuantityResult holding
concrete volume, steel weight components and their costs.

Units:
    Inputs: mm, kg/m³, waste factors in %
    Outputs: m³, kg, currency units of the supplied CostRates

The steel weights are nominal takeoff-grade estimates: bar lengths do not
include development lengths, laps or hooks.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field, field_validator

from .geometry import ColumnGeometry, ColumnShape, FoundationGeometry, VolumeBasis
from .materials import CostRates, MaterialLoader, MaterialSpec
from .reinforcement import ColumnReinforcement, FootingReinforcement
from .validation import validate_column_inputs, validate_foundation_inputs

logger = logging.getLogger(__name__)

MM3_TO_M3 = 1e9
MM2_TO_M2 = 1e6
MM_TO_M = 1e3


class QuantityResult(BaseModel):
    """
    Material quantities and costs for one element.

    Attributes:
        element: "column" or "foundation"
        raw_concrete_volume: Geometric volume before waste (m³)
        concrete_volume: Volume including concrete waste (m³)
        steel_weights: Named steel components before waste (kg)
        total_steel_weight: Sum of components including steel waste (kg)
        concrete_cost: concrete_volume × concrete_rate
        steel_costs: Component weight × steel_rate, same keys as steel_weights
        total_cost: concrete_cost + Σ steel_costs
        volume_basis: EXACT, or APPROXIMATED_RECTANGULAR for shapes without
            a dedicated formula
    """
    element: str
    raw_concrete_volume: float
    concrete_volume: float
    steel_weights: Mapping[str, float]
    total_steel_weight: float
    concrete_cost: float
    steel_costs: Mapping[str, float]
    total_cost: float
    volume_basis: VolumeBasis = VolumeBasis.EXACT

    class Config:
        """Pydantic configuration."""
        frozen = True

    @field_validator('steel_weights', 'steel_costs')
    @classmethod
    def freeze_components(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        """Store steel components as a read-only mapping."""
        return MappingProxyType(dict(v))

    def __hash__(self) -> int:
        return hash((
            self.element,
            self.raw_concrete_volume,
            self.concrete_volume,
            tuple(sorted(self.steel_weights.items())),
            self.total_steel_weight,
            self.concrete_cost,
            tuple(sorted(self.steel_costs.items())),
            self.total_cost,
            self.volume_basis,
        ))

    @property
    def is_approximate(self) -> bool:
        """True when the concrete volume came from a fallback formula."""
        return self.volume_basis != VolumeBasis.EXACT


class CombinedQuantities(BaseModel):
    """Totals across several elements."""
    total_concrete_volume: float = Field(..., description="m³")
    total_steel_weight: float = Field(..., description="kg")
    total_cost: float

    class Config:
        """Pydantic configuration."""
        frozen = True


def bar_weight(count: float, diameter: float, length: float, density: float) -> float:
    """
    Weight of a group of identical straight bars.

    Args:
        count: Number of bars
        diameter: Bar diameter (mm)
        length: Bar length (mm)
        density: Steel density (kg/m³)

    Returns:
        Weight in kg
    """
    area = np.pi * (diameter / 2) ** 2 / MM2_TO_M2  # m²
    return float(count * area * (length / MM_TO_M) * density)


def estimate_stirrup_count(height: float, spacing: float) -> int:
    """Number of ties over the height: floor(height / spacing) + 1."""
    if spacing <= 0:
        return 0
    return int(np.floor(height / spacing)) + 1


def column_raw_volume(geometry: ColumnGeometry) -> float:
    """
    Geometric concrete volume of a column (m³), no waste.

    - rectangular: b·d·H
    - circular: π·(D/2)²·H
    - tshape: bf·tf·H + bw·(H - tf)·tw (extruded flange + extruded web)
    - lshape, polygon: rectangular formula on width/depth
    """
    shape = geometry.shape
    H = geometry.height

    if shape == ColumnShape.CIRCULAR:
        volume = np.pi * (geometry.diameter / 2) ** 2 * H
    elif shape == ColumnShape.TSHAPE:
        flange_volume = geometry.flange_width * geometry.flange_thickness * H
        web_volume = geometry.web_width * (H - geometry.flange_thickness) * geometry.web_thickness
        volume = flange_volume + web_volume
    else:
        volume = geometry.width * geometry.depth * H

    return float(volume / MM3_TO_M3)


def _apply_waste(value: float, waste_percent: float) -> float:
    return value * (1 + waste_percent / 100)


def _costs(
    concrete_volume: float,
    steel_weights: Dict[str, float],
    rates: CostRates,
) -> tuple:
    concrete_cost = concrete_volume * rates.concrete_rate
    steel_costs = {name: weight * rates.steel_rate for name, weight in steel_weights.items()}
    total_cost = concrete_cost + sum(steel_costs.values())
    return concrete_cost, steel_costs, total_cost


def compute_column_quantities(
    geometry: ColumnGeometry,
    material: MaterialSpec,
    reinforcement: ColumnReinforcement,
    rates: Optional[CostRates] = None,
    validate: bool = True,
) -> QuantityResult:
    """
    Compute concrete and steel quantities for a column.

    Args:
        geometry: Column geometry (mm)
        material: Material specification
        reinforcement: Main bars and stirrups
        rates: Unit rates (defaults to CostRates())
        validate: Run the input validation pass first

    Returns:
        QuantityResult with steel components 'main_bars' and 'stirrups'

    Raises:
        InputValidationError: If validate is True and any input is invalid

    Example:
        >>> res = compute_column_quantities(
        ...     ColumnGeometry(shape="rectangular", width=400, depth=400, height=3000),
        ...     MaterialSpec(), ColumnReinforcement())
        >>> round(res.concrete_volume, 3)
        0.504
    """
    if validate:
        validate_column_inputs(geometry, material, reinforcement)
    rates = rates or CostRates()

    if geometry.volume_basis != VolumeBasis.EXACT:
        logger.warning(
            f"No dedicated volume formula for '{geometry.shape.value}' columns; "
            f"using rectangular width × depth"
        )

    raw_volume = column_raw_volume(geometry)
    concrete_volume = _apply_waste(raw_volume, material.concrete_waste_factor)

    main = reinforcement.main_bars
    main_bars_weight = bar_weight(main.count, main.diameter, geometry.height, material.steel_density)

    stirrups = reinforcement.stirrups
    n_stirrups = estimate_stirrup_count(geometry.height, stirrups.spacing)
    stirrups_weight = bar_weight(
        n_stirrups, stirrups.diameter, geometry.stirrup_perimeter, material.steel_density
    )

    steel_weights = {"main_bars": main_bars_weight, "stirrups": stirrups_weight}
    total_steel = _apply_waste(main_bars_weight + stirrups_weight, material.steel_waste_factor)
    concrete_cost, steel_costs, total_cost = _costs(concrete_volume, steel_weights, rates)

    logger.debug(
        f"Column {geometry.shape.value}: V = {concrete_volume:.4f} m³, "
        f"steel = {total_steel:.2f} kg ({n_stirrups} stirrups)"
    )

    return QuantityResult(
        element="column",
        raw_concrete_volume=raw_volume,
        concrete_volume=concrete_volume,
        steel_weights=steel_weights,
        total_steel_weight=total_steel,
        concrete_cost=concrete_cost,
        steel_costs=steel_costs,
        total_cost=total_cost,
        volume_basis=geometry.volume_basis,
    )


def compute_foundation_quantities(
    geometry: FoundationGeometry,
    material: MaterialSpec,
    reinforcement: FootingReinforcement,
    rates: Optional[CostRates] = None,
    validate: bool = True,
) -> QuantityResult:
    """
    Compute concrete and steel quantities for a foundation.

    Bottom bars in X run along the footing length, bars in Y along its width.
    Top bars use the longer plan dimension as bar length. Mesh wire length is
    approximated as 2·(width + length).

    Returns:
        QuantityResult with steel components 'bottom_bars_x', 'bottom_bars_y',
        'top_bars' and 'mesh'

    Raises:
        InputValidationError: If validate is True and any input is invalid
    """
    if validate:
        validate_foundation_inputs(geometry, material, reinforcement)
    rates = rates or CostRates()

    raw_volume = float(geometry.width * geometry.length * geometry.thickness / MM3_TO_M3)
    concrete_volume = _apply_waste(raw_volume, material.concrete_waste_factor)
    density = material.steel_density

    bx = reinforcement.bottom_bars_x
    by = reinforcement.bottom_bars_y
    steel_weights = {
        "bottom_bars_x": bar_weight(bx.count, bx.diameter, geometry.length, density),
        "bottom_bars_y": bar_weight(by.count, by.diameter, geometry.width, density),
        "top_bars": 0.0,
        "mesh": 0.0,
    }

    top = reinforcement.top_bars
    if top.enabled:
        top_length = max(geometry.width, geometry.length)
        steel_weights["top_bars"] = bar_weight(top.count, top.diameter, top_length, density)

    mesh = reinforcement.mesh
    if mesh.enabled:
        mesh_length = (geometry.width + geometry.length) * 2  # Approximate
        steel_weights["mesh"] = bar_weight(1, mesh.bar_size, mesh_length, density)

    total_steel = _apply_waste(sum(steel_weights.values()), material.steel_waste_factor)
    concrete_cost, steel_costs, total_cost = _costs(concrete_volume, steel_weights, rates)

    logger.debug(
        f"Foundation {geometry.type.value}: V = {concrete_volume:.4f} m³, "
        f"steel = {total_steel:.2f} kg"
    )

    return QuantityResult(
        element="foundation",
        raw_concrete_volume=raw_volume,
        concrete_volume=concrete_volume,
        steel_weights=steel_weights,
        total_steel_weight=total_steel,
        concrete_cost=concrete_cost,
        steel_costs=steel_costs,
        total_cost=total_cost,
    )


def combine_quantities(results: Iterable[QuantityResult]) -> CombinedQuantities:
    """Sum concrete volume, total steel weight and total cost."""
    results = list(results)
    return CombinedQuantities(
        total_concrete_volume=sum(r.concrete_volume for r in results),
        total_steel_weight=sum(r.total_steel_weight for r in results),
        total_cost=sum(r.total_cost for r in results),
    )


def dry_volume(wet_volume: float, concrete_grade: str) -> float:
    """
    Dry constituent volume for a wet concrete volume.

    Raises:
        ValueError: If the grade is unknown
    """
    return wet_volume * MaterialLoader.get_concrete(concrete_grade).dry_volume_factor


def quantities_summary(results: Dict[str, QuantityResult]) -> pd.DataFrame:
    """
    Tabulate results, one row per labelled element.

    Columns: Element, Type, Concrete_m3, Steel_kg, Concrete_Cost, Steel_Cost,
    Total_Cost, Approximate
    """
    rows = []
    for label, res in results.items():
        rows.append(
            {
                "Element": label,
                "Type": res.element,
                "Concrete_m3": res.concrete_volume,
                "Steel_kg": res.total_steel_weight,
                "Concrete_Cost": res.concrete_cost,
                "Steel_Cost": sum(res.steel_costs.values()),
                "Total_Cost": res.total_cost,
                "Approximate": res.is_approximate,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "Element", "Type", "Concrete_m3", "Steel_kg",
            "Concrete_Cost", "Steel_Cost", "Total_Cost", "Approximate",
        ],
    )
