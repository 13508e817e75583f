"""
Unit tests for the bar bending schedule cost rollup.
"""

import pytest

from src.takeoff.bbs import (
    BBSBreakdown,
    CuttingCostBasis,
    RebarCut,
    cutting_schedule,
    rollup_bbs,
    rollup_quantities,
)
from src.takeoff.materials import CostRates
from src.takeoff.quantities import QuantityResult


def _result(volume: float, steel: float) -> QuantityResult:
    return QuantityResult(
        element="column",
        raw_concrete_volume=volume,
        concrete_volume=volume,
        steel_weights={"main_bars": steel},
        total_steel_weight=steel,
        concrete_cost=0.0,
        steel_costs={"main_bars": 0.0},
        total_cost=0.0,
    )


class TestRebarCut:
    """Test a single schedule line."""

    def test_defaults(self):
        cut = RebarCut(shape="straight", cut_length=3000)
        assert cut.count == 1
        assert cut.bend_allowance is None
        assert cut.cutting_cost() == 0.0

    def test_total_length(self):
        cut = RebarCut(shape="stirrup", cut_length=1600, count=21)
        assert cut.total_length == pytest.approx(33.6)

    def test_cost_basis(self):
        cut = RebarCut(shape="straight", cut_length=3000, count=4, cost_per_cut=5)
        assert cut.cutting_cost(CuttingCostBasis.PER_LINE_ITEM) == 5
        assert cut.cutting_cost(CuttingCostBasis.PER_PIECE) == 20

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            RebarCut(shape="straight", cut_length=3000, count=-1)


class TestRollup:
    """Test BBS rollup totals."""

    def test_reference_scenario(self):
        """2.604 m³ @150 + 300 kg @60 + one cut at 5."""
        bbs = rollup_bbs(
            total_steel_weight=300,
            steel_rate=60,
            total_concrete_volume=2.604,
            concrete_rate=150,
            rebar_cuts=[RebarCut(shape="straight", cut_length=3000, cost_per_cut=5)],
        )
        assert bbs.total_concrete_cost == pytest.approx(390.6)
        assert bbs.total_steel_cost == pytest.approx(18000)
        assert bbs.total_cutting_cost == pytest.approx(5)
        assert bbs.total_cost == pytest.approx(18395.6)

    def test_cutting_cost_is_per_line_by_default(self):
        cuts = [
            RebarCut(shape="straight", cut_length=3000, count=8, cost_per_cut=5),
            RebarCut(shape="stirrup", cut_length=1600, count=21, cost_per_cut=2),
        ]
        assert rollup_bbs(0, 60, 0, 150, cuts).total_cutting_cost == 7
        per_piece = rollup_bbs(0, 60, 0, 150, cuts, cost_basis=CuttingCostBasis.PER_PIECE)
        assert per_piece.total_cutting_cost == 8 * 5 + 21 * 2

    def test_missing_cost_counts_as_zero(self):
        cuts = [RebarCut(shape="L", cut_length=1200, bend_allowance=32)]
        assert rollup_bbs(10, 60, 1, 150, cuts).total_cutting_cost == 0

    @pytest.mark.parametrize(
        "steel, steel_rate, volume, concrete_rate, costs",
        [
            (300, 60, 2.604, 150, [5]),
            (0, 0, 0, 0, []),
            (123.456, 58.5, 0.777, 149.9, [1.1, 2.2, 3.3]),
            (1e6, 0.01, 1e-3, 1e4, [0.0]),
        ],
    )
    def test_total_is_sum_of_parts(self, steel, steel_rate, volume, concrete_rate, costs):
        cuts = [RebarCut(shape="s", cut_length=1000, cost_per_cut=c) for c in costs]
        bbs = rollup_bbs(steel, steel_rate, volume, concrete_rate, cuts)
        assert bbs.total_cost == bbs.total_concrete_cost + bbs.total_steel_cost + bbs.total_cutting_cost

    def test_empty_cuts(self):
        bbs = rollup_bbs(300, 60, 2.604, 150, [])
        assert bbs.total_cutting_cost == 0
        assert isinstance(bbs, BBSBreakdown)

    def test_idempotent(self):
        cuts = [RebarCut(shape="straight", cut_length=3000, cost_per_cut=5)]
        assert rollup_bbs(300, 60, 2.604, 150, cuts) == rollup_bbs(300, 60, 2.604, 150, cuts)

    def test_rollup_quantities(self):
        bbs = rollup_quantities(
            [_result(0.504, 100), _result(2.1, 200)],
            rates=CostRates(concrete_rate=150, steel_rate=60),
        )
        assert bbs.total_concrete_volume == pytest.approx(2.604)
        assert bbs.total_steel_weight == pytest.approx(300)
        assert bbs.total_cost == pytest.approx(2.604 * 150 + 300 * 60)


class TestCuttingSchedule:
    """Test tabular cutting list."""

    def test_schedule(self):
        cuts = [
            RebarCut(shape="straight", cut_length=3000, count=8, cost_per_cut=5),
            RebarCut(shape="stirrup", cut_length=1600, count=21, bend_allowance=48),
        ]
        df = cutting_schedule(cuts)

        assert list(df["Shape"]) == ["straight", "stirrup"]
        assert df.loc[0, "Total_Length_m"] == pytest.approx(24.0)
        assert df.loc[1, "Bend_Allowance_mm"] == 48
        assert df["Cutting_Cost"].sum() == pytest.approx(5)

    def test_empty_schedule(self):
        df = cutting_schedule([])
        assert df.empty
        assert "Cut_Length_mm" in df.columns
