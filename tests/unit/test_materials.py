"""
Unit tests for the material catalog, MaterialSpec, CostRates and unit conversions.
"""

import pytest

from src.takeoff.materials import (
    CONCRETE_GRADES,
    STEEL_GRADES,
    ConcreteGrade,
    CostRates,
    MaterialLoader,
    MaterialSpec,
)
from src.takeoff.units import convert_unit, inches_to_mm


class TestMaterialLoader:
    """Test grade lookup from the YAML catalog."""

    def test_concrete_grades_loaded(self):
        assert "M25" in CONCRETE_GRADES
        assert MaterialLoader.get_concrete("M25").fck == 25
        assert MaterialLoader.get_concrete("M20").dry_volume_factor == pytest.approx(1.52)

    def test_steel_grades_loaded(self):
        assert set(STEEL_GRADES) == {"Fe415", "Fe500", "Fe550", "Fe600"}
        assert MaterialLoader.get_steel("Fe500").fy == 500

    def test_unknown_concrete(self):
        with pytest.raises(ValueError, match="Unknown concrete grade"):
            MaterialLoader.get_concrete("C30/37")

    def test_unknown_steel(self):
        with pytest.raises(ValueError, match="Unknown steel grade"):
            MaterialLoader.get_steel("Grade60")

    def test_list_grades(self):
        grades = MaterialLoader.list_concrete_grades()
        assert grades[0] == "M10"
        assert "M50" in grades
        assert "Fe415" in MaterialLoader.list_steel_grades()

    def test_parameters(self):
        params = MaterialLoader.get_parameters()
        assert params["steel_density"] == 7850
        assert params["concrete_density"] == 2400

    def test_grade_validation(self):
        with pytest.raises(ValueError):
            ConcreteGrade(name="bad", fck=-5)


class TestMaterialSpec:
    """Test material specification."""

    def test_defaults(self):
        spec = MaterialSpec()
        assert spec.concrete_grade == "M25"
        assert spec.steel_density == 7850
        assert spec.concrete_waste_factor == 5
        assert spec.steel_waste_factor == 3

    def test_strengths_from_grade(self):
        spec = MaterialSpec(concrete_grade="M30", steel_grade="Fe500")
        assert spec.fck == 30
        assert spec.fy == 500

    def test_admixture_validation(self):
        MaterialSpec(admixture_type="superplasticizer", admixture_percent=1.2)
        with pytest.raises(ValueError, match="Admixture"):
            MaterialSpec(admixture_type="glue")


class TestCostRates:
    """Test configurable unit rates."""

    def test_defaults(self):
        rates = CostRates()
        assert rates.concrete_rate == 150
        assert rates.steel_rate == 60

    def test_from_dataset(self):
        assert CostRates.from_defaults() == CostRates(concrete_rate=150, steel_rate=60)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError):
            CostRates(steel_rate=-1)


class TestUnits:
    """Test metric/imperial conversion factors."""

    def test_length(self):
        assert inches_to_mm(1) == pytest.approx(25.4)
        assert convert_unit(10, "ft", "m", "length") == pytest.approx(3.048)

    def test_density(self):
        assert convert_unit(150, "lb/ft³", "kg/m³", "density") == pytest.approx(2402.8, rel=1e-3)

    def test_pressure(self):
        assert convert_unit(4000, "psi", "MPa", "pressure") == pytest.approx(27.58, rel=1e-3)

    def test_same_unit(self):
        assert convert_unit(12.5, "mm", "mm", "length") == 12.5

    def test_unknown_pair(self):
        with pytest.raises(ValueError, match="No length conversion"):
            convert_unit(1, "mm", "ft", "length")

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown unit category"):
            convert_unit(1, "K", "C", "temperature")
