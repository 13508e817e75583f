"""
Bar Bending Schedule (BBS) cost rollup.

Combines element quantities with an explicit rebar cutting list into a
BBSBreakdown. The cutting list is supplied by the caller; it is not derived
from the reinforcement specs.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, Field

from .materials import CostRates
from .quantities import QuantityResult


class CuttingCostBasis(Enum):
    """How RebarCut.cost_per_cut is charged."""
    PER_LINE_ITEM = "per_line_item"  # Once per RebarCut entry, count ignored
    PER_PIECE = "per_piece"  # cost_per_cut × count


class RebarCut(BaseModel):
    """
    One line item of a bar bending schedule.

    Attributes:
        shape: Shape code or tag (e.g., "straight", "stirrup", "L")
        cut_length: Cutting length per piece (mm)
        count: Number of identical pieces
        bend_allowance: Bend deduction/allowance (mm), informational
        cost_per_cut: Cutting cost for the line
    """
    shape: str
    cut_length: float = Field(..., description="Cutting length (mm)")
    count: int = Field(default=1, ge=0, description="Number of pieces")
    bend_allowance: Optional[float] = Field(default=None, description="Bend allowance (mm)")
    cost_per_cut: Optional[float] = Field(default=None, description="Cutting cost")

    class Config:
        frozen = True

    @property
    def total_length(self) -> float:
        """Total cut length of the line (m)."""
        return self.cut_length * self.count / 1000

    def cutting_cost(self, basis: CuttingCostBasis = CuttingCostBasis.PER_LINE_ITEM) -> float:
        """Cutting cost charged for this line under the given basis."""
        cost = self.cost_per_cut or 0.0
        if basis == CuttingCostBasis.PER_PIECE:
            return cost * self.count
        return cost


class BBSBreakdown(BaseModel):
    """Aggregate BBS totals; total_cost is the sum of the three cost parts."""
    total_concrete_volume: float
    total_concrete_cost: float
    total_steel_weight: float
    total_steel_cost: float
    total_cutting_cost: float
    total_cost: float

    class Config:
        frozen = True


def rollup_bbs(
    total_steel_weight: float,
    steel_rate: float,
    total_concrete_volume: float,
    concrete_rate: float,
    rebar_cuts: Sequence[RebarCut] = (),
    cost_basis: CuttingCostBasis = CuttingCostBasis.PER_LINE_ITEM,
) -> BBSBreakdown:
    """
    Roll quantities and cutting list up into a BBSBreakdown.

    Args:
        total_steel_weight: Steel weight (kg)
        steel_rate: Cost per kg
        total_concrete_volume: Concrete volume (m³)
        concrete_rate: Cost per m³
        rebar_cuts: Cutting list
        cost_basis: PER_LINE_ITEM (default) sums cost_per_cut once per entry;
            PER_PIECE multiplies it by the entry's count

    Returns:
        BBSBreakdown

    Example:
        >>> bbs = rollup_bbs(300, 60, 2.604, 150, [RebarCut(shape="straight",
        ...                  cut_length=3000, cost_per_cut=5)])
        >>> round(bbs.total_cost, 1)
        18395.6
    """
    total_concrete_cost = total_concrete_volume * concrete_rate
    total_steel_cost = total_steel_weight * steel_rate
    total_cutting_cost = sum(cut.cutting_cost(cost_basis) for cut in rebar_cuts)

    return BBSBreakdown(
        total_concrete_volume=total_concrete_volume,
        total_concrete_cost=total_concrete_cost,
        total_steel_weight=total_steel_weight,
        total_steel_cost=total_steel_cost,
        total_cutting_cost=total_cutting_cost,
        total_cost=total_concrete_cost + total_steel_cost + total_cutting_cost,
    )


def rollup_quantities(
    results: Iterable[QuantityResult],
    rates: Optional[CostRates] = None,
    rebar_cuts: Sequence[RebarCut] = (),
    cost_basis: CuttingCostBasis = CuttingCostBasis.PER_LINE_ITEM,
) -> BBSBreakdown:
    """Roll up several QuantityResults (e.g., column + foundation) into one BBS."""
    rates = rates or CostRates()
    results = list(results)
    return rollup_bbs(
        total_steel_weight=sum(r.total_steel_weight for r in results),
        steel_rate=rates.steel_rate,
        total_concrete_volume=sum(r.concrete_volume for r in results),
        concrete_rate=rates.concrete_rate,
        rebar_cuts=rebar_cuts,
        cost_basis=cost_basis,
    )


def cutting_schedule(
    rebar_cuts: Sequence[RebarCut],
    cost_basis: CuttingCostBasis = CuttingCostBasis.PER_LINE_ITEM,
) -> pd.DataFrame:
    """
    Cutting list as a DataFrame, one row per RebarCut.

    Columns: Shape, Cut_Length_mm, Count, Bend_Allowance_mm, Total_Length_m,
    Cutting_Cost
    """
    rows: List[dict] = []
    for cut in rebar_cuts:
        rows.append(
            {
                "Shape": cut.shape,
                "Cut_Length_mm": cut.cut_length,
                "Count": cut.count,
                "Bend_Allowance_mm": cut.bend_allowance if cut.bend_allowance is not None else 0.0,
                "Total_Length_m": cut.total_length,
                "Cutting_Cost": cut.cutting_cost(cost_basis),
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "Shape", "Cut_Length_mm", "Count", "Bend_Allowance_mm",
            "Total_Length_m", "Cutting_Cost",
        ],
    )
