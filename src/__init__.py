"""
PyRCC Takeoff - reinforced concrete quantity takeoff and code compliance.

Subpackages:
- takeoff: geometry, materials, quantity calculator, bar bending schedule
- standards: engineering standards registry and compliance engine
"""

__version__ = "0.1.0"
