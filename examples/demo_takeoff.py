"""
RCC Takeoff Quick Demonstration
===============================

This script demonstrates:
1. Column and footing quantity takeoff
2. Bar bending schedule (BBS) cost rollup
3. Multi-standard compliance check of the column
"""

import logging

from src.standards import (
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
    compute_column_quantities,
    compute_foundation_quantities,
    cutting_schedule,
    dry_volume,
    quantities_summary,
    rollup_quantities,
)


MATERIAL = MaterialSpec(concrete_grade="M25", steel_grade="Fe415")
RATES = CostRates(concrete_rate=150, steel_rate=60)

COLUMN = ColumnGeometry(shape="rectangular", width=400, depth=400, height=3000)
COLUMN_RF = ColumnReinforcement(
    main_bars=MainBars(count=8, diameter=16, cover=40),
    stirrups=Stirrups(diameter=8, spacing=150),
)

FOOTING = FoundationGeometry(type="isolated", width=2000, length=2000, thickness=500)
FOOTING_RF = FootingReinforcement(
    bottom_bars_x=BarLayer(count=12, diameter=12, spacing=150),
    bottom_bars_y=BarLayer(count=12, diameter=12, spacing=150),
)


def demo_quantities():
    """Demonstrate column and footing takeoff."""
    print("\n" + "="*70)
    print("QUANTITY TAKEOFF DEMO")
    print("="*70)

    col = compute_column_quantities(COLUMN, MATERIAL, COLUMN_RF, RATES)
    fnd = compute_foundation_quantities(FOOTING, MATERIAL, FOOTING_RF, RATES)

    print(f"\nColumn: {COLUMN.width:.0f}×{COLUMN.depth:.0f}×{COLUMN.height:.0f} mm")
    print(f"Concrete: {MATERIAL.concrete_grade} (fck = {MATERIAL.fck:.0f} MPa), "
          f"waste {MATERIAL.concrete_waste_factor:.0f}%")
    print(f"Steel: {MATERIAL.steel_grade} (fy = {MATERIAL.fy:.0f} MPa), "
          f"waste {MATERIAL.steel_waste_factor:.0f}%")

    print("\n--- COLUMN ---")
    print(f"Concrete volume = {col.concrete_volume:.3f} m³ "
          f"(dry {dry_volume(col.concrete_volume, MATERIAL.concrete_grade):.3f} m³)")
    for name, weight in col.steel_weights.items():
        print(f"  {name}: {weight:.2f} kg")
    print(f"Total steel = {col.total_steel_weight:.2f} kg")

    print("\n--- FOOTING ---")
    print(f"Concrete volume = {fnd.concrete_volume:.3f} m³")
    for name, weight in fnd.steel_weights.items():
        print(f"  {name}: {weight:.2f} kg")
    print(f"Total steel = {fnd.total_steel_weight:.2f} kg")

    print("\n--- SUMMARY ---")
    print(quantities_summary({"C1": col, "F1": fnd}).to_string(index=False))

    return col, fnd


def demo_bbs(col, fnd):
    """Demonstrate BBS rollup."""
    print("\n" + "="*70)
    print("BAR BENDING SCHEDULE DEMO")
    print("="*70)

    cuts = [
        RebarCut(shape="straight", cut_length=3600, count=8, cost_per_cut=5),
        RebarCut(shape="stirrup", cut_length=1600, count=21, bend_allowance=48, cost_per_cut=3),
        RebarCut(shape="straight", cut_length=1900, count=24, cost_per_cut=4),
    ]
    print()
    print(cutting_schedule(cuts).to_string(index=False))

    bbs = rollup_quantities([col, fnd], RATES, cuts)
    print(f"\nConcrete: {bbs.total_concrete_volume:.3f} m³ → {bbs.total_concrete_cost:.2f}")
    print(f"Steel:    {bbs.total_steel_weight:.2f} kg → {bbs.total_steel_cost:.2f}")
    print(f"Cutting:  {bbs.total_cutting_cost:.2f}")
    print(f"TOTAL:    {bbs.total_cost:.2f}")


def demo_compliance(region: str = "India"):
    """Demonstrate multi-standard compliance of the column."""
    print("\n" + "="*70)
    print(f"COMPLIANCE DEMO ({region})")
    print("="*70)

    params = derive_column_design_parameters(COLUMN, COLUMN_RF)
    print(f"\nReinforcement ratio = {params.reinforcement_ratio:.3f} %")

    ids = get_recommended_standards(region) + ["EN1992_1_1"]
    results = check_multi_standard_compliance(ids, build_column_checks(params), max_workers=4)

    for res in results:
        status = "✅ PASS" if res.overall_compliant else "❌ FAIL"
        print(f"\n{res.standard_name}: {status}")
        for chk in res.checks:
            print(f"  [{chk.clause}] {chk.parameter}: {chk.message}")

    print(f"\nOverall: {overall_status(results).value}")
    return compliance_summary(results)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("\n" + "="*70)
    print("RCC QUANTITY TAKEOFF & COMPLIANCE")
    print("="*70)

    col, fnd = demo_quantities()
    demo_bbs(col, fnd)
    demo_compliance("India")

    print("\n" + "="*70)
    print("✅ DEMO COMPLETED")
    print("="*70)
