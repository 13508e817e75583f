"""
Engineering standards registry and compliance checking.
Bundled dataset: IS 456:2000, IS 1893:2016, ACI 318-19, EN 1992-1-1, BS 8110:1997
"""

from .models import (
    StandardCategory,
    Comparator,
    Requirement,
    Variable,
    Formula,
    StandardTable,
    StandardSection,
    EngineeringStandard,
)
from .registry import (
    StandardsRegistry,
    get_registry,
    load_standards_file,
    get_standards_by_region,
    get_standards_by_category,
    find_standard_by_id,
    get_recommended_standards,
    get_formulas_for_parameter,
    get_standard_tables,
)
from .compliance import (
    ComplianceCheck,
    CheckResult,
    ComplianceResult,
    ComplianceStatus,
    ColumnDesignParameters,
    check_compliance,
    check_multi_standard_compliance,
    overall_status,
    compliance_summary,
    derive_column_design_parameters,
    build_column_checks,
)


def get_standard(standard_id: str) -> EngineeringStandard:
    """
    Strict lookup of a standard in the default registry.

    Args:
        standard_id: Standard identifier (e.g., "IS456_2000")

    Returns:
        EngineeringStandard

    Raises:
        ValueError: If standard_id not found in registry
    """
    standard = find_standard_by_id(standard_id)
    if standard is None:
        available = ", ".join(get_registry().standard_ids)
        raise ValueError(f"Unknown standard: {standard_id}. Available: {available}")
    return standard


__all__ = [
    'StandardCategory',
    'Comparator',
    'Requirement',
    'Variable',
    'Formula',
    'StandardTable',
    'StandardSection',
    'EngineeringStandard',
    'StandardsRegistry',
    'get_registry',
    'load_standards_file',
    'get_standards_by_region',
    'get_standards_by_category',
    'find_standard_by_id',
    'get_recommended_standards',
    'get_formulas_for_parameter',
    'get_standard_tables',
    'get_standard',
    'ComplianceCheck',
    'CheckResult',
    'ComplianceResult',
    'ComplianceStatus',
    'ColumnDesignParameters',
    'check_compliance',
    'check_multi_standard_compliance',
    'overall_status',
    'compliance_summary',
    'derive_column_design_parameters',
    'build_column_checks',
]
