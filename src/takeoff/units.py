"""
Metric/imperial conversion factors.

Calculations run in metric (mm, kg/m³); these factors convert user inputs
entered in the imperial system before they reach the calculator.
"""

from typing import Dict, Tuple

# (from, to) -> factor, grouped by quantity
UNIT_CONVERSIONS: Dict[str, Dict[Tuple[str, str], float]] = {
    "length": {
        ("mm", "m"): 0.001,
        ("m", "mm"): 1000,
        ("cm", "m"): 0.01,
        ("m", "cm"): 100,
        ("ft", "m"): 0.3048,
        ("m", "ft"): 3.28084,
        ("in", "mm"): 25.4,
        ("mm", "in"): 0.0393701,
    },
    "area": {
        ("mm²", "m²"): 0.000001,
        ("m²", "mm²"): 1000000,
        ("cm²", "m²"): 0.0001,
        ("m²", "cm²"): 10000,
        ("ft²", "m²"): 0.092903,
        ("m²", "ft²"): 10.7639,
    },
    "density": {
        ("lb/ft³", "kg/m³"): 16.0185,
        ("kg/m³", "lb/ft³"): 0.062428,
    },
    "force": {
        ("N", "kN"): 0.001,
        ("kN", "N"): 1000,
        ("lbf", "N"): 4.44822,
        ("N", "lbf"): 0.224809,
        ("kgf", "N"): 9.80665,
        ("N", "kgf"): 0.101972,
    },
    "pressure": {
        ("Pa", "MPa"): 0.000001,
        ("MPa", "Pa"): 1000000,
        ("psi", "MPa"): 0.00689476,
        ("MPa", "psi"): 145.038,
        ("ksi", "MPa"): 6.89476,
        ("MPa", "ksi"): 0.145038,
    },
}


def convert_unit(value: float, from_unit: str, to_unit: str, category: str) -> float:
    """
    Convert a value between units of the same category.

    Args:
        value: Quantity in from_unit
        from_unit: Source unit (e.g., "in")
        to_unit: Target unit (e.g., "mm")
        category: "length", "area", "density", "force" or "pressure"

    Returns:
        Converted value (unchanged when from_unit == to_unit)

    Raises:
        ValueError: If the category or unit pair is not modelled
    """
    if from_unit == to_unit:
        return value
    if category not in UNIT_CONVERSIONS:
        available = ", ".join(UNIT_CONVERSIONS.keys())
        raise ValueError(f"Unknown unit category: {category}. Available: {available}")
    factor = UNIT_CONVERSIONS[category].get((from_unit, to_unit))
    if factor is None:
        raise ValueError(f"No {category} conversion from {from_unit} to {to_unit}")
    return value * factor


def inches_to_mm(value: float) -> float:
    """Convert inches to millimetres."""
    return convert_unit(value, "in", "mm", "length")
