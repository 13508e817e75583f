"""
Engineering standard data models.

An EngineeringStandard owns its sections; each StandardSection owns its
requirements, formulas and reference tables. All models are frozen.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator


class StandardCategory(Enum):
    """Subject area of a standard."""
    CONCRETE = "concrete"
    STEEL = "steel"
    SEISMIC = "seismic"
    WIND = "wind"
    LOADS = "loads"
    MATERIALS = "materials"


class Comparator(Enum):
    """How a checked value is compared with the requirement value."""
    AT_LEAST = "at_least"
    AT_MOST = "at_most"
    EQUALS = "equals"

    @classmethod
    def from_condition(cls, condition: str) -> 'Comparator':
        """
        Classify a free-text condition (case-sensitive).

        "minimum" / "not be less than" -> AT_LEAST,
        "maximum" / "not exceed" -> AT_MOST, anything else -> EQUALS.
        """
        if "minimum" in condition or "not be less than" in condition:
            return cls.AT_LEAST
        if "maximum" in condition or "not exceed" in condition:
            return cls.AT_MOST
        return cls.EQUALS

    def holds(self, value: float, required: float) -> bool:
        """True when value satisfies the requirement."""
        if self == Comparator.AT_LEAST:
            return value >= required
        if self == Comparator.AT_MOST:
            return value <= required
        return value == required


class Requirement(BaseModel):
    """
    A single checkable requirement of a clause.

    ``comparator`` is normally stated in the dataset; when it is omitted it is
    classified from the condition text.
    """
    parameter: str
    condition: str
    value: Union[float, str]
    unit: Optional[str] = None
    notes: Optional[str] = None
    comparator: Optional[Comparator] = None

    class Config:
        frozen = True

    @model_validator(mode='before')
    @classmethod
    def _classify_condition(cls, data):
        if isinstance(data, dict) and data.get('comparator') is None:
            data = {**data, 'comparator': Comparator.from_condition(data.get('condition', ''))}
        return data

    @property
    def numeric_value(self) -> Optional[float]:
        """Requirement value as a float, or None for textual values."""
        try:
            return float(self.value)
        except (TypeError, ValueError):
            return None


class VariableRange(BaseModel):
    min: float
    max: float

    class Config:
        frozen = True


class Variable(BaseModel):
    """A symbol used in a formula."""
    symbol: str
    description: str
    unit: str
    range: Optional[VariableRange] = None

    class Config:
        frozen = True


class Formula(BaseModel):
    """A reference formula (for display; not evaluated)."""
    id: str
    description: str
    formula: str
    variables: Tuple[Variable, ...] = ()
    applicability: str = ""

    class Config:
        frozen = True


class StandardTable(BaseModel):
    """A reference table for human readers; not machine-checked."""
    id: str
    title: str
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[Union[float, str], ...], ...]
    notes: Tuple[str, ...] = ()

    class Config:
        frozen = True


class StandardSection(BaseModel):
    """A numbered clause of a standard."""
    clause: str
    title: str
    description: str = ""
    requirements: Tuple[Requirement, ...] = ()
    formulas: Tuple[Formula, ...] = ()
    tables: Tuple[StandardTable, ...] = ()

    class Config:
        frozen = True

    def find_requirement(self, parameter: str) -> Optional[Requirement]:
        """Exact-match lookup of a requirement by parameter name."""
        for requirement in self.requirements:
            if requirement.parameter == parameter:
                return requirement
        return None


class EngineeringStandard(BaseModel):
    """
    An engineering standard (code of practice).

    Example:
        >>> std = EngineeringStandard(id="X", name="X 1", full_name="X code",
        ...     country="Nowhere", year=2020, category="concrete")
        >>> std.category
        <StandardCategory.CONCRETE: 'concrete'>
    """
    id: str
    name: str
    full_name: str
    country: str
    year: int
    category: StandardCategory
    applicable_regions: Tuple[str, ...] = ()
    sections: Tuple[StandardSection, ...] = ()

    class Config:
        frozen = True

    def find_section(self, clause: str) -> Optional[StandardSection]:
        """Exact-match lookup of a section by clause identifier."""
        for section in self.sections:
            if section.clause == clause:
                return section
        return None

    def applies_to(self, region: str) -> bool:
        """Case-insensitive substring match against applicable regions."""
        needle = region.lower()
        return any(needle in r.lower() for r in self.applicable_regions)
