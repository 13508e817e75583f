"""
Standards Compliance Engine.

Evaluates (clause, parameter, value) checks against one or more standards from
the registry. Lookups are exact-match only. Unresolved standards, clauses or
parameters are reported as non-compliant results, never raised, so that every
check produces something a caller can display.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import pandas as pd
from pydantic import BaseModel, Field

from ..takeoff.geometry import ColumnGeometry, ColumnShape
from ..takeoff.reinforcement import ColumnReinforcement
from .models import Comparator, Requirement
from .registry import StandardsRegistry, get_registry

logger = logging.getLogger(__name__)

STANDARD_NOT_FOUND = "Standard not found"
SECTION_NOT_FOUND = "Section not found in standard"
PARAMETER_NOT_FOUND = "Parameter not found in section"
UNKNOWN_STANDARD_NAME = "Unknown Standard"


class ComplianceCheck(BaseModel):
    """A value to check against ``clause`` / ``parameter``."""
    clause: str
    parameter: str
    value: float

    class Config:
        frozen = True


class CheckResult(BaseModel):
    """Outcome of one check against one standard."""
    standard_id: str
    standard_name: str = ""
    clause: str
    parameter: str
    is_compliant: bool
    message: str
    requirement: Optional[Requirement] = None

    class Config:
        frozen = True


class ComplianceResult(BaseModel):
    """All checks against one standard; overall_compliant is the AND of them."""
    standard_id: str
    standard_name: str
    checks: Tuple[CheckResult, ...]
    overall_compliant: bool

    class Config:
        frozen = True


class ComplianceStatus(Enum):
    """Aggregate status over several standards."""
    COMPLIANT = "compliant"
    PARTIAL = "partial"
    NON_COMPLIANT = "non-compliant"
    UNKNOWN = "unknown"


def _fmt(value: float) -> str:
    return f"{value:.10g}"


def _describe(comparator: Comparator, value: float, required: float, unit: str) -> Tuple[bool, str]:
    ok = comparator.holds(value, required)
    suffix = f" {unit}" if unit else ""
    v, r = _fmt(value), _fmt(required)

    if comparator == Comparator.AT_LEAST:
        text = f"Compliant: {v} ≥ {r}{suffix}" if ok else \
            f"Non-compliant: {v} < {r}{suffix} (minimum required)"
    elif comparator == Comparator.AT_MOST:
        text = f"Compliant: {v} ≤ {r}{suffix}" if ok else \
            f"Non-compliant: {v} > {r}{suffix} (maximum allowed)"
    else:
        text = f"Compliant: {v} = {r}{suffix}" if ok else \
            f"Non-compliant: {v} ≠ {r}{suffix} (required value)"
    return ok, text


def check_compliance(
    standard_id: str,
    clause: str,
    parameter: str,
    value: float,
    registry: Optional[StandardsRegistry] = None,
) -> CheckResult:
    """
    Check one value against a requirement of a standard.

    Args:
        standard_id: Registry id (e.g., "IS456_2000")
        clause: Clause identifier (e.g., "26.5.3.1")
        parameter: Requirement parameter (e.g., "minimum_reinforcement_ratio")
        value: Design value, in the requirement's unit
        registry: Registry to use (default: process-wide registry)

    Returns:
        CheckResult; not-found cases are non-compliant with a message

    Example:
        >>> res = check_compliance("IS456_2000", "26.5.3.1",
        ...                        "minimum_reinforcement_ratio", 0.5)
        >>> res.is_compliant
        False
        >>> res.message
        'Non-compliant: 0.5 < 0.8 % (minimum required) (IS 456:2000, Cl. 26.5.3.1)'
    """
    registry = registry if registry is not None else get_registry()
    base = dict(standard_id=standard_id, clause=clause, parameter=parameter, is_compliant=False)

    standard = registry.find_standard_by_id(standard_id)
    if standard is None:
        return CheckResult(**base, message=STANDARD_NOT_FOUND)

    section = standard.find_section(clause)
    if section is None:
        return CheckResult(**base, standard_name=standard.name, message=SECTION_NOT_FOUND)

    requirement = section.find_requirement(parameter)
    if requirement is None:
        return CheckResult(**base, standard_name=standard.name, message=PARAMETER_NOT_FOUND)

    required = requirement.numeric_value
    if required is None:
        is_compliant = False
        text = f"Non-compliant: requirement '{requirement.value}' is not numeric"
    else:
        is_compliant, text = _describe(requirement.comparator, value, required, requirement.unit or "")

    return CheckResult(
        **{**base, 'is_compliant': is_compliant},
        standard_name=standard.name,
        message=f"{text} ({standard.name}, Cl. {clause})",
        requirement=requirement,
    )


def _check_standard(
    standard_id: str,
    checks: Sequence[ComplianceCheck],
    registry: StandardsRegistry,
) -> ComplianceResult:
    standard = registry.find_standard_by_id(standard_id)
    results = tuple(
        check_compliance(standard_id, c.clause, c.parameter, c.value, registry) for c in checks
    )
    return ComplianceResult(
        standard_id=standard_id,
        standard_name=standard.name if standard else UNKNOWN_STANDARD_NAME,
        checks=results,
        overall_compliant=all(r.is_compliant for r in results),
    )


def check_multi_standard_compliance(
    standard_ids: Sequence[str],
    checks: Sequence[ComplianceCheck],
    registry: Optional[StandardsRegistry] = None,
    max_workers: Optional[int] = None,
) -> List[ComplianceResult]:
    """
    Run every check against every standard.

    Args:
        standard_ids: Standards to check, in output order
        checks: ComplianceCheck instances (or dicts with clause/parameter/value)
        registry: Registry to use (default: process-wide registry)
        max_workers: If set, evaluate standards on a thread pool of this size

    Returns:
        One ComplianceResult per standard id, in the order given. A standard
        with no matching requirements still yields a result whose checks all
        fail.
    """
    registry = registry if registry is not None else get_registry()
    checks = [c if isinstance(c, ComplianceCheck) else ComplianceCheck(**c) for c in checks]

    logger.debug(f"Checking {len(checks)} requirement(s) against {len(standard_ids)} standard(s)")

    if max_workers:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda sid: _check_standard(sid, checks, registry), standard_ids))
    return [_check_standard(sid, checks, registry) for sid in standard_ids]


def overall_status(results: Sequence[ComplianceResult]) -> ComplianceStatus:
    """Aggregate per-standard results into one status."""
    if not results:
        return ComplianceStatus.UNKNOWN
    if all(r.overall_compliant for r in results):
        return ComplianceStatus.COMPLIANT
    if any(r.overall_compliant for r in results):
        return ComplianceStatus.PARTIAL
    return ComplianceStatus.NON_COMPLIANT


def compliance_summary(results: Sequence[ComplianceResult]) -> pd.DataFrame:
    """One row per (standard, check)."""
    rows = [
        {
            "Standard": res.standard_name,
            "Clause": chk.clause,
            "Parameter": chk.parameter,
            "Compliant": chk.is_compliant,
            "Message": chk.message,
        }
        for res in results
        for chk in res.checks
    ]
    return pd.DataFrame(rows, columns=["Standard", "Clause", "Parameter", "Compliant", "Message"])


# ============================================================================
# DESIGN PARAMETERS FROM TAKEOFF INPUTS
# ============================================================================

class ColumnDesignParameters(BaseModel):
    """Design values of a column, in the units used by the standards dataset."""
    reinforcement_ratio: float = Field(..., description="As / Ag (%)")
    minimum_dimension: float = Field(..., description="Least lateral dimension (mm)")
    clear_cover: float = Field(..., description="Clear cover (mm)")
    number_of_bars: int = Field(..., description="Longitudinal bars")
    bar_diameter: float = Field(default=0.0, description="Longitudinal bar diameter (mm)")
    tie_diameter: float = Field(default=0.0, description="Tie diameter (mm)")
    tie_spacing: float = Field(default=0.0, description="Tie pitch (mm)")
    circular: bool = False

    class Config:
        frozen = True


def derive_column_design_parameters(
    geometry: ColumnGeometry,
    reinforcement: ColumnReinforcement,
) -> ColumnDesignParameters:
    """
    Derive checkable design values from column geometry and reinforcement.

    reinforcement_ratio = As / Ag × 100, with Ag from the same cross-section
    model as the quantity calculator.
    """
    gross_area = geometry.cross_section_area
    main = reinforcement.main_bars
    ratio = main.area / gross_area * 100 if gross_area > 0 else 0.0

    return ColumnDesignParameters(
        reinforcement_ratio=ratio,
        minimum_dimension=geometry.minimum_lateral_dimension,
        clear_cover=main.cover,
        number_of_bars=main.count,
        bar_diameter=main.diameter,
        tie_diameter=reinforcement.stirrups.diameter,
        tie_spacing=reinforcement.stirrups.spacing,
        circular=geometry.shape == ColumnShape.CIRCULAR,
    )


def build_column_checks(
    params: ColumnDesignParameters,
    exposure: str = "moderate_exposure",
    detailing: bool = False,
) -> List[ComplianceCheck]:
    """
    Standard column checks, keyed by IS 456:2000 clause identifiers.

    Args:
        params: Derived design parameters
        exposure: Cover requirement parameter of Table 16
        detailing: Also check bar diameter and tie pitch/diameter

    Returns:
        Checks for min/max reinforcement ratio, minimum dimension, cover and
        bar count (plus detailing checks if requested)
    """
    bars_parameter = "minimum_bars_circular" if params.circular else "minimum_bars"
    checks = [
        ComplianceCheck(clause="26.5.3.1", parameter="minimum_reinforcement_ratio",
                        value=params.reinforcement_ratio),
        ComplianceCheck(clause="26.5.3.1", parameter="maximum_reinforcement_ratio",
                        value=params.reinforcement_ratio),
        ComplianceCheck(clause="26.5.1.1", parameter="minimum_dimension",
                        value=params.minimum_dimension),
        ComplianceCheck(clause="Table 16", parameter=exposure, value=params.clear_cover),
        ComplianceCheck(clause="26.5.3.1", parameter=bars_parameter,
                        value=params.number_of_bars),
    ]
    if detailing:
        checks += [
            ComplianceCheck(clause="26.5.3.1", parameter="minimum_bar_diameter",
                            value=params.bar_diameter),
            ComplianceCheck(clause="26.5.3.2", parameter="maximum_tie_pitch",
                            value=params.tie_spacing),
            ComplianceCheck(clause="26.5.3.2", parameter="minimum_tie_diameter",
                            value=params.tie_diameter),
        ]
    return checks
