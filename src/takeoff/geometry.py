"""
Geometry models for reinforced concrete columns and foundations.

All linear dimensions are in millimetres. The models are union-like: every
shape carries the full set of dimension fields and only the ones relevant to
the selected shape are read by the quantity calculator.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

import numpy as np
from pydantic import BaseModel, Field


class ColumnShape(Enum):
    """Column cross-section shape."""
    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"
    TSHAPE = "tshape"
    LSHAPE = "lshape"
    POLYGON = "polygon"


class FoundationType(Enum):
    """Foundation (footing) type."""
    ISOLATED = "isolated"
    STRIP = "strip"
    RAFT = "raft"
    COMBINED = "combined"
    SLOPED = "sloped"


class VolumeBasis(Enum):
    """How the concrete volume of an element was obtained."""
    EXACT = "exact"  # Dedicated formula for the shape
    APPROXIMATED_RECTANGULAR = "approximated_rectangular"  # width × depth fallback


# Shapes with a dedicated volume formula, and the fields each one reads
SHAPE_FIELDS: Dict[ColumnShape, Tuple[str, ...]] = {
    ColumnShape.RECTANGULAR: ("width", "depth", "height"),
    ColumnShape.CIRCULAR: ("diameter", "height"),
    ColumnShape.TSHAPE: (
        "flange_width", "flange_thickness", "web_width", "web_thickness", "height"
    ),
    # No dedicated formula: rectangular-equivalent width/depth are used
    ColumnShape.LSHAPE: ("width", "depth", "height"),
    ColumnShape.POLYGON: ("width", "depth", "height"),
}

APPROXIMATED_SHAPES = (ColumnShape.LSHAPE, ColumnShape.POLYGON)


class ColumnGeometry(BaseModel):
    """
    Column geometry (mm).

    Attributes:
        shape: Cross-section shape
        width, depth: Rectangular dimensions (also the stirrup perimeter basis)
        diameter: Circular column diameter
        flange_width, flange_thickness, web_width, web_thickness: T-section
        side_length, number_of_sides: Regular polygon description
        height: Column clear height

    Example:
        >>> col = ColumnGeometry(shape="rectangular", width=400, depth=400, height=3000)
        >>> col.volume_basis
        <VolumeBasis.EXACT: 'exact'>
    """
    shape: ColumnShape = Field(default=ColumnShape.RECTANGULAR, description="Cross-section shape")
    width: float = Field(default=0.0, description="Width (mm)")
    depth: float = Field(default=0.0, description="Depth (mm)")
    height: float = Field(default=0.0, description="Height (mm)")
    diameter: float = Field(default=0.0, description="Diameter (mm)")
    flange_width: float = Field(default=0.0, description="T-section flange width (mm)")
    flange_thickness: float = Field(default=0.0, description="T-section flange thickness (mm)")
    web_width: float = Field(default=0.0, description="T-section web width (mm)")
    web_thickness: float = Field(default=0.0, description="T-section web thickness (mm)")
    side_length: float = Field(default=0.0, description="Polygon side length (mm)")
    number_of_sides: int = Field(default=0, description="Polygon side count")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def volume_basis(self) -> VolumeBasis:
        """Whether the shape has a dedicated volume formula."""
        if self.shape in APPROXIMATED_SHAPES:
            return VolumeBasis.APPROXIMATED_RECTANGULAR
        return VolumeBasis.EXACT

    @property
    def relevant_fields(self) -> Tuple[str, ...]:
        """Dimension fields read for this shape."""
        return SHAPE_FIELDS[self.shape]

    @property
    def stirrup_perimeter(self) -> float:
        """Stirrup effective length 2·(width + depth) in mm."""
        return 2 * (self.width + self.depth)

    @property
    def cross_section_area(self) -> float:
        """Gross cross-sectional area Ag (mm²), consistent with the volume formulas."""
        if self.shape == ColumnShape.CIRCULAR:
            return float(np.pi * (self.diameter / 2) ** 2)
        if self.shape == ColumnShape.TSHAPE:
            return self.flange_width * self.flange_thickness + self.web_width * self.web_thickness
        return self.width * self.depth

    @property
    def minimum_lateral_dimension(self) -> float:
        """Least lateral dimension of the section (mm)."""
        if self.shape == ColumnShape.CIRCULAR:
            return self.diameter
        if self.shape == ColumnShape.TSHAPE:
            return min(self.flange_thickness, self.web_width)
        return min(self.width, self.depth)


class FoundationGeometry(BaseModel):
    """
    Foundation geometry (mm).

    ``embedded_depth`` is only meaningful for sloped footings.
    """
    type: FoundationType = Field(default=FoundationType.ISOLATED, description="Foundation type")
    width: float = Field(default=0.0, description="Width (mm)")
    length: float = Field(default=0.0, description="Length (mm)")
    thickness: float = Field(default=0.0, description="Thickness (mm)")
    embedded_depth: float = Field(default=0.0, description="Embedded depth, sloped only (mm)")
    element_label: Optional[str] = Field(default=None, description="Drawing label")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def plan_area(self) -> float:
        """Plan area in m²."""
        return self.width * self.length / 1e6
