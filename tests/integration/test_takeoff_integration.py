"""
Integration test: column + isolated footing takeoff, BBS rollup and
multi-standard compliance for a single design.
"""

import pytest

from src.standards import (
    ComplianceStatus,
    build_column_checks,
    check_multi_standard_compliance,
    compliance_summary,
    derive_column_design_parameters,
    get_recommended_standards,
    overall_status,
)
from src.takeoff import (
    BarLayer,
    ColumnGeometry,
    ColumnReinforcement,
    CostRates,
    FootingReinforcement,
    FoundationGeometry,
    MainBars,
    MaterialSpec,
    RebarCut,
    Stirrups,
    combine_quantities,
    compute_column_quantities,
    compute_foundation_quantities,
    cutting_schedule,
    quantities_summary,
    rollup_quantities,
)


@pytest.fixture
def design():
    """400×400×3000 column, 8φ16, φ8@150 ties on a 2000×2000×500 footing."""
    material = MaterialSpec(concrete_grade="M25", steel_grade="Fe415")
    column = ColumnGeometry(shape="rectangular", width=400, depth=400, height=3000)
    column_rf = ColumnReinforcement(
        main_bars=MainBars(count=8, diameter=16, cover=40),
        stirrups=Stirrups(diameter=8, spacing=150),
    )
    footing = FoundationGeometry(type="isolated", width=2000, length=2000, thickness=500,
                                 element_label="F1")
    layer = BarLayer(count=12, diameter=12, spacing=150)
    footing_rf = FootingReinforcement(bottom_bars_x=layer, bottom_bars_y=layer)
    return material, column, column_rf, footing, footing_rf


def test_takeoff_and_bbs(design):
    """Quantities of both elements roll up into one BBS."""
    material, column, column_rf, footing, footing_rf = design
    rates = CostRates(concrete_rate=150, steel_rate=60)

    col = compute_column_quantities(column, material, column_rf, rates)
    fnd = compute_foundation_quantities(footing, material, footing_rf, rates)

    assert col.concrete_volume == pytest.approx(0.504)
    assert fnd.concrete_volume == pytest.approx(2.1)
    assert col.steel_weights["main_bars"] == pytest.approx(37.87, rel=1e-3)

    combined = combine_quantities([col, fnd])
    assert combined.total_concrete_volume == pytest.approx(2.604)
    assert combined.total_steel_weight == pytest.approx(col.total_steel_weight + fnd.total_steel_weight)
    assert combined.total_cost == pytest.approx(col.total_cost + fnd.total_cost)

    cuts = [
        RebarCut(shape="straight", cut_length=3600, count=8, cost_per_cut=5),
        RebarCut(shape="stirrup", cut_length=1600, count=21, bend_allowance=48, cost_per_cut=3),
        RebarCut(shape="straight", cut_length=1900, count=24, cost_per_cut=4),
    ]
    bbs = rollup_quantities([col, fnd], rates, cuts)

    assert bbs.total_concrete_volume == pytest.approx(2.604)
    assert bbs.total_concrete_cost == pytest.approx(390.6)
    assert bbs.total_steel_cost == pytest.approx(combined.total_steel_weight * 60)
    assert bbs.total_cutting_cost == pytest.approx(12)
    assert bbs.total_cost == bbs.total_concrete_cost + bbs.total_steel_cost + bbs.total_cutting_cost

    table = quantities_summary({"C1": col, footing.element_label: fnd})
    assert list(table["Element"]) == ["C1", "F1"]
    assert not table["Approximate"].any()

    schedule = cutting_schedule(cuts)
    assert schedule["Count"].sum() == 53


def test_compliance_for_recommended_standards(design):
    """The column passes IS 456; the seismic code has none of the IS clauses."""
    _, column, column_rf, _, _ = design
    params = derive_column_design_parameters(column, column_rf)
    checks = build_column_checks(params, detailing=True)

    ids = get_recommended_standards("India")
    results = check_multi_standard_compliance(ids, checks, max_workers=2)

    assert [r.standard_id for r in results] == ["IS456_2000", "IS1893_2016"]
    assert results[0].overall_compliant
    assert not results[1].overall_compliant
    assert overall_status(results) == ComplianceStatus.PARTIAL

    df = compliance_summary(results)
    assert len(df) == 2 * len(checks)
    assert df[df["Standard"] == "IS 456:2000"]["Compliant"].all()


def test_under_reinforced_column():
    """4φ12 on 400×400 is below the IS minimum but above the Eurocode one."""
    column = ColumnGeometry(shape="rectangular", width=400, depth=400, height=3000)
    rf = ColumnReinforcement(main_bars=MainBars(count=4, diameter=12, cover=40))
    params = derive_column_design_parameters(column, rf)

    assert params.reinforcement_ratio == pytest.approx(0.2827, rel=1e-3)

    is456, en1992 = check_multi_standard_compliance(
        ["IS456_2000", "EN1992_1_1"],
        [
            {"clause": "26.5.3.1", "parameter": "minimum_reinforcement_ratio",
             "value": params.reinforcement_ratio},
            {"clause": "9.5.2", "parameter": "minimum_reinforcement_ratio",
             "value": params.reinforcement_ratio},
        ],
    )

    assert not is456.checks[0].is_compliant
    assert "(minimum required)" in is456.checks[0].message
    assert en1992.checks[1].is_compliant
