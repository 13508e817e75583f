"""
Quantity takeoff for RCC columns and foundations.

Geometry, material and reinforcement models, the quantity calculator and the
bar bending schedule (BBS) cost rollup.
"""

from .geometry import (
    ColumnShape,
    FoundationType,
    VolumeBasis,
    ColumnGeometry,
    FoundationGeometry,
)
from .materials import (
    ConcreteGrade,
    SteelGrade,
    MaterialLoader,
    MaterialSpec,
    CostRates,
)
from .reinforcement import (
    MainBars,
    Stirrups,
    ColumnReinforcement,
    BarLayer,
    TopBars,
    Mesh,
    FootingReinforcement,
)
from .validation import FieldViolation, InputValidationError
from .quantities import (
    QuantityResult,
    CombinedQuantities,
    compute_column_quantities,
    compute_foundation_quantities,
    combine_quantities,
    dry_volume,
    quantities_summary,
)
from .bbs import (
    CuttingCostBasis,
    RebarCut,
    BBSBreakdown,
    rollup_bbs,
    rollup_quantities,
    cutting_schedule,
)
from .units import convert_unit

__all__ = [
    # Geometry
    'ColumnShape',
    'FoundationType',
    'VolumeBasis',
    'ColumnGeometry',
    'FoundationGeometry',
    # Materials
    'ConcreteGrade',
    'SteelGrade',
    'MaterialLoader',
    'MaterialSpec',
    'CostRates',
    # Reinforcement
    'MainBars',
    'Stirrups',
    'ColumnReinforcement',
    'BarLayer',
    'TopBars',
    'Mesh',
    'FootingReinforcement',
    # Validation
    'FieldViolation',
    'InputValidationError',
    # Quantities
    'QuantityResult',
    'CombinedQuantities',
    'compute_column_quantities',
    'compute_foundation_quantities',
    'combine_quantities',
    'dry_volume',
    'quantities_summary',
    # BBS
    'CuttingCostBasis',
    'RebarCut',
    'BBSBreakdown',
    'rollup_bbs',
    'rollup_quantities',
    'cutting_schedule',
    'convert_unit',
]
