"""
Material specifications and grade catalog.

Concrete grades (M-series) and reinforcing steel grades (Fe-series) are loaded
from ``data/standards/materials.yaml`` on module import.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

MATERIALS_PATH = Path(__file__).parent.parent / "data" / "standards" / "materials.yaml"

ADMIXTURE_TYPES = [
    "none", "plasticizer", "superplasticizer", "retarder", "accelerator", "airentraining"
]


class ConcreteGrade(BaseModel):
    """
    Concrete grade properties.

    Attributes:
        name: Grade designation (e.g., "M25")
        fck: Characteristic compressive strength (MPa)
        dry_volume_factor: Dry constituent volume per unit wet volume
        mix_ratio: Nominal cement:sand:aggregate ratio, if any
    """
    name: str = Field(..., description="Concrete grade designation")
    fck: float = Field(..., gt=0, description="Characteristic strength (MPa)")
    dry_volume_factor: float = Field(default=1.54, gt=1.0, description="Wet to dry volume factor")
    mix_ratio: Optional[str] = Field(default=None, description="Nominal mix ratio")
    application: Optional[str] = Field(default=None, description="Typical use")

    class Config:
        """Pydantic configuration."""
        frozen = True


class SteelGrade(BaseModel):
    """Reinforcing steel grade (fy in MPa)."""
    name: str = Field(..., description="Steel grade designation")
    fy: float = Field(..., gt=0, description="Yield strength (MPa)")

    class Config:
        """Pydantic configuration."""
        frozen = True


def _load_materials(path: Path = MATERIALS_PATH) -> Dict[str, Any]:
    """Load material grades from YAML file."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    logger.debug(
        f"Loaded {len(data['concrete'])} concrete and {len(data['steel'])} steel grades from {path}"
    )
    return data


_MATERIALS = _load_materials()

CONCRETE_GRADES: Dict[str, ConcreteGrade] = {
    name: ConcreteGrade(name=name, **props) for name, props in _MATERIALS['concrete'].items()
}

STEEL_GRADES: Dict[str, SteelGrade] = {
    name: SteelGrade(name=name, **props) for name, props in _MATERIALS['steel'].items()
}


class MaterialLoader:
    """
    Helper class to look up predefined concrete and steel grades.

    Example:
        >>> MaterialLoader.get_concrete("M25").fck
        25.0
        >>> MaterialLoader.get_steel("Fe415").fy
        415.0
    """

    @staticmethod
    def get_concrete(grade_name: str) -> ConcreteGrade:
        """
        Get predefined concrete grade.

        Raises:
            ValueError: If grade_name not found
        """
        if grade_name not in CONCRETE_GRADES:
            available = ", ".join(CONCRETE_GRADES.keys())
            raise ValueError(
                f"Unknown concrete grade: {grade_name}. "
                f"Available grades: {available}"
            )
        return CONCRETE_GRADES[grade_name]

    @staticmethod
    def get_steel(grade_name: str) -> SteelGrade:
        """
        Get predefined steel grade.

        Raises:
            ValueError: If grade_name not found
        """
        if grade_name not in STEEL_GRADES:
            available = ", ".join(STEEL_GRADES.keys())
            raise ValueError(
                f"Unknown steel grade: {grade_name}. "
                f"Available grades: {available}"
            )
        return STEEL_GRADES[grade_name]

    @staticmethod
    def list_concrete_grades() -> List[str]:
        """Get list of available concrete grade names."""
        return list(CONCRETE_GRADES.keys())

    @staticmethod
    def list_steel_grades() -> List[str]:
        """Get list of available steel grade names."""
        return list(STEEL_GRADES.keys())

    @staticmethod
    def get_parameters() -> Dict[str, Any]:
        """Default densities and unit rates from YAML."""
        return dict(_MATERIALS.get('parameters', {}))


class MaterialSpec(BaseModel):
    """
    Concrete and steel specification for an element.

    Waste factors are percentages applied multiplicatively
    (``quantity × (1 + waste/100)``).

    Example:
        >>> spec = MaterialSpec(concrete_grade="M25", steel_grade="Fe415")
        >>> spec.fck, spec.fy
        (25.0, 415.0)
    """
    concrete_grade: str = Field(default="M25", description="Concrete grade label")
    concrete_density: float = Field(default=2400.0, description="Concrete density (kg/m³)")
    admixture_type: str = Field(default="none", description="Admixture type")
    admixture_percent: float = Field(default=0.0, description="Admixture dosage (%)")
    slump: float = Field(default=75.0, description="Slump (mm)")
    steel_grade: str = Field(default="Fe415", description="Steel grade label")
    steel_density: float = Field(default=7850.0, description="Steel density (kg/m³)")
    concrete_waste_factor: float = Field(default=5.0, description="Concrete waste (%)")
    steel_waste_factor: float = Field(default=3.0, description="Steel waste (%)")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @field_validator('admixture_type')
    @classmethod
    def validate_admixture(cls, v: str) -> str:
        """Validate admixture type."""
        if v not in ADMIXTURE_TYPES:
            raise ValueError(f"Admixture '{v}' not in allowed values: {ADMIXTURE_TYPES}")
        return v

    @property
    def fck(self) -> float:
        """Characteristic concrete strength implied by the grade label."""
        return MaterialLoader.get_concrete(self.concrete_grade).fck

    @property
    def fy(self) -> float:
        """Steel yield strength implied by the grade label."""
        return MaterialLoader.get_steel(self.steel_grade).fy


class CostRates(BaseModel):
    """
    Unit rates used for costing.

    Attributes:
        concrete_rate: Cost per m³ of concrete
        steel_rate: Cost per kg of reinforcement
    """
    concrete_rate: float = Field(default=150.0, ge=0, description="Cost per m³")
    steel_rate: float = Field(default=60.0, ge=0, description="Cost per kg")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def from_defaults(cls) -> 'CostRates':
        """Rates from the materials dataset ``parameters`` block."""
        params = MaterialLoader.get_parameters()
        return cls(
            concrete_rate=params.get('concrete_rate', 150.0),
            steel_rate=params.get('steel_rate', 60.0),
        )
