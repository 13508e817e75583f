"""
Unit tests for the engineering standards registry.

Tests cover:
- Bundled dataset contents
- Region, category and id lookups
- Regional preferences and fallback
- Advisory formula search and reference tables
- Building custom registries from YAML
"""

import logging

import pytest

from src.standards import get_standard
from src.standards.models import EngineeringStandard, StandardCategory
from src.standards.registry import (
    StandardsRegistry,
    find_standard_by_id,
    get_formulas_for_parameter,
    get_recommended_standards,
    get_registry,
    get_standard_tables,
    get_standards_by_category,
    get_standards_by_region,
    load_standards_file,
)


def _standard(standard_id: str, **kwargs) -> EngineeringStandard:
    return EngineeringStandard(
        id=standard_id,
        name=kwargs.get("name", standard_id),
        full_name=f"{standard_id} code",
        country="Nowhere",
        year=2020,
        category=kwargs.get("category", "concrete"),
        applicable_regions=kwargs.get("regions", ()),
    )


class TestBundledDataset:
    """Test the dataset shipped with the package."""

    def test_all_standards_loaded(self):
        registry = get_registry()
        assert len(registry) == 5
        assert registry.standard_ids == [
            "IS456_2000", "IS1893_2016", "ACI318_19", "EN1992_1_1", "BS8110_1997",
        ]

    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_find_by_id(self):
        std = find_standard_by_id("IS456_2000")
        assert std.name == "IS 456:2000"
        assert std.year == 2000
        assert std.category == StandardCategory.CONCRETE
        assert "IS456_2000" in get_registry()

    def test_unknown_id(self):
        assert find_standard_by_id("NOPE") is None

    def test_strict_lookup(self):
        assert get_standard("ACI318_19").name == "ACI 318-19"
        with pytest.raises(ValueError, match="Unknown standard"):
            get_standard("NOPE")

    def test_registry_is_read_only(self):
        registry = get_registry()
        with pytest.raises(TypeError):
            registry.combinations["NEW"] = ("IS456_2000",)
        std = registry.find_standard_by_id("IS456_2000")
        with pytest.raises(Exception):
            std.name = "changed"


class TestLookups:
    """Test region and category queries."""

    def test_region_case_insensitive(self):
        ids = [s.id for s in get_standards_by_region("india")]
        assert ids == ["IS456_2000", "IS1893_2016"]

    def test_region_substring(self):
        assert [s.id for s in get_standards_by_region("europe")] == ["EN1992_1_1"]
        assert [s.id for s in get_standards_by_region("United")] == ["BS8110_1997"]

    def test_region_no_match(self):
        assert get_standards_by_region("Antarctica") == []

    def test_category(self):
        assert [s.id for s in get_standards_by_category("seismic")] == ["IS1893_2016"]
        assert len(get_standards_by_category(StandardCategory.CONCRETE)) == 4
        assert get_standards_by_category("wind") == []


class TestRecommendations:
    """Test regional preferences."""

    @pytest.mark.parametrize("region, expected", [
        ("India", ["IS456_2000", "IS1893_2016"]),
        ("USA", ["ACI318_19"]),
        ("Canada", ["ACI318_19"]),
        ("UK", ["BS8110_1997"]),
        ("Germany", ["EN1992_1_1"]),
    ])
    def test_known_regions(self, region, expected):
        assert get_recommended_standards(region) == expected

    def test_unknown_region_falls_back_to_india(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.standards.registry"):
            result = get_recommended_standards("Atlantis")
        assert result == get_recommended_standards("India")
        assert "Atlantis" in caplog.text

    def test_region_preferences(self):
        prefs = get_registry().region_preferences
        assert prefs["France"] == ["EN1992_1_1"]
        assert set(prefs) >= {"India", "USA", "UK"}


class TestFormulasAndTables:
    """Test advisory formula search and reference tables."""

    def test_formulas_by_symbol(self):
        formulas = get_formulas_for_parameter("IS456_2000", "Ag")
        assert [f.id for f in formulas] == ["min_steel_area", "max_steel_area"]

    def test_formulas_by_description(self):
        formulas = get_formulas_for_parameter("IS1893_2016", "SEISMIC")
        assert [f.id for f in formulas] == ["design_horizontal_coefficient"]

    def test_formulas_unknown_standard(self):
        assert get_formulas_for_parameter("NOPE", "Ag") == []

    def test_formula_variable_range(self):
        formula = get_formulas_for_parameter("IS1893_2016", "Z")[0]
        zone = next(v for v in formula.variables if v.symbol == "Z")
        assert zone.range.min == pytest.approx(0.10)
        assert zone.range.max == pytest.approx(0.36)

    def test_tables(self):
        tables = get_standard_tables("IS456_2000")
        assert [t.id for t in tables] == ["cover_table"]
        assert tables[0].rows[1][1] == 30

    def test_tables_by_clause(self):
        assert len(get_standard_tables("IS456_2000", "Table 16")) == 1
        assert get_standard_tables("IS456_2000", "26.5.3.1") == []
        assert get_standard_tables("NOPE") == []


class TestCustomRegistry:
    """Test building registries from code and from YAML."""

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate standard id"):
            StandardsRegistry(
                standards=[_standard("A"), _standard("A")],
                combinations={"X": ["A"]},
                regional_preferences={},
                default_combination="X",
            )

    def test_combination_with_unknown_standard(self):
        with pytest.raises(ValueError, match="unknown standards"):
            StandardsRegistry(
                standards=[_standard("A")],
                combinations={"X": ["A", "B"]},
                regional_preferences={},
                default_combination="X",
            )

    def test_unknown_default_combination(self):
        with pytest.raises(ValueError, match="default combination"):
            StandardsRegistry(
                standards=[_standard("A")],
                combinations={"X": ["A"]},
                regional_preferences={},
                default_combination="Y",
            )

    def test_region_with_unknown_combination(self):
        with pytest.raises(ValueError, match="unknown combination"):
            StandardsRegistry(
                standards=[_standard("A")],
                combinations={"X": ["A"]},
                regional_preferences={"Mars": "Y"},
                default_combination="X",
            )

    def test_from_yaml(self, tmp_path):
        codes = tmp_path / "codes"
        codes.mkdir()
        (codes / "local.yaml").write_text(
            "- id: LOCAL_1\n"
            "  name: \"LC 1\"\n"
            "  full_name: \"Local concrete code\"\n"
            "  country: Atlantis\n"
            "  year: 2024\n"
            "  category: concrete\n"
            "  applicable_regions: [Atlantis]\n"
            "  sections:\n"
            "    - clause: \"1.1\"\n"
            "      title: \"Columns\"\n"
            "      requirements:\n"
            "        - parameter: minimum_reinforcement_ratio\n"
            "          condition: \"Shall not be less than\"\n"
            "          value: 1.2\n"
            "          unit: \"%\"\n"
        )
        index = tmp_path / "index.yaml"
        index.write_text(
            "version: \"test\"\n"
            "files: [codes/local.yaml]\n"
            "combinations:\n"
            "  LOCAL: [LOCAL_1]\n"
            "default_combination: LOCAL\n"
            "regional_preferences:\n"
            "  Atlantis: LOCAL\n"
        )

        registry = StandardsRegistry.from_yaml(index)

        assert registry.version == "test"
        assert registry.standard_ids == ["LOCAL_1"]
        assert registry.get_recommended_standards("Elsewhere") == ["LOCAL_1"]
        std = registry.find_standard_by_id("LOCAL_1")
        assert std.sections[0].requirements[0].comparator.value == "at_least"

    def test_standards_file_must_be_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("id: NOT_A_LIST\n")
        with pytest.raises(ValueError, match="must contain a list"):
            load_standards_file(path)
