"""
Scenario presets, the pipeline entry points, and Swedish display formatting.

Tests:
1-4.   Scenario presets (values, apply, unknown key, selection)
5-6.   run_pipeline / package-level functions
7-13.  Formatting helpers, the "–" sentinel, values near float max
"""

import math

import pytest

from handfat_roi import calculate, evaluate, normalize, run_pipeline
from handfat_roi.formatting import (
    SENTINEL, fmt1, fmt_int, fmt_money_sek, fmt_pct, fmt_years, format_result,
)
from handfat_roi.scenarios import (
    DEFAULT_INPUT, SCENARIO_PRESETS, apply_scenario, get_scenario, selected_scenario,
)
from handfat_roi.schemas import RawInput


# ============================================================
# Scenarios
# ============================================================

def test_scenario_preset_values():
    assert {p.key: p.effect_pct for p in SCENARIO_PRESETS} == {
        "conservative": 5,
        "low": 10,
        "ambitious": 20,
    }


def test_apply_scenario_only_touches_effect():
    raw = RawInput(beds="40", cost_per_vri="75 000")
    updated = apply_scenario(raw, "ambitious")
    assert updated.effect_pct == 20
    assert updated.beds == "40"
    assert updated.cost_per_vri == "75 000"
    # original snapshot untouched
    assert raw.effect_pct == 10


def test_unknown_scenario_raises_key_error():
    with pytest.raises(KeyError):
        get_scenario("reckless")


def test_selected_scenario_uses_rounded_effect(make_params):
    assert selected_scenario(make_params()) == "low"
    assert selected_scenario(make_params(effect_pct=4.6)) == "conservative"
    assert selected_scenario(make_params(effect_pct=19.5)) == "ambitious"
    assert selected_scenario(make_params(effect_pct=15)) is None


# ============================================================
# Pipeline
# ============================================================

def test_run_pipeline_matches_individual_stages():
    params, result, advisories = run_pipeline(DEFAULT_INPUT)
    assert params == normalize(DEFAULT_INPUT)
    assert repr(result.model_dump()) == repr(calculate(params).model_dump())
    assert advisories == evaluate(params, result)


def test_run_pipeline_survives_garbage():
    raw = RawInput(**{
        "beds": "many", "occupancy_pct": "", "cost_per_bed_day": "—",
        "capex_amort_years": "never", "vri_per_year_override": "?",
    })
    params, result, advisories = run_pipeline(raw)
    assert params.beds == 0
    assert params.capex_amort_years == 1
    assert result.bed_days == 0
    codes = [a.code for a in advisories]
    assert "zero_bed_day_cost" in codes


# ============================================================
# Formatting
# ============================================================

def test_fmt_int_swedish_grouping():
    assert fmt_int(8059.2) == "8 059"
    assert fmt_int(1234567) == "1 234 567"
    assert fmt_int(0.5) == "1"  # half-up


def test_fmt1_decimal_comma():
    assert fmt1(48.3552) == "48,4"
    assert fmt1(0.846216) == "0,8"
    assert fmt1(12345.67) == "12 345,7"


def test_fmt_money_and_pct():
    assert fmt_money_sek(10154.592) == "10 155 kr"
    assert fmt_money_sek(-84845.408) == "-84 845 kr"
    assert fmt_pct(35) == "35,0 %"
    assert fmt_years(3.24) == "3,2 år"


@pytest.mark.parametrize("fmt", [fmt_int, fmt1, fmt_money_sek, fmt_pct, fmt_years])
def test_non_finite_renders_sentinel(fmt):
    assert fmt(math.nan) == SENTINEL
    assert fmt(math.inf) == SENTINEL
    assert fmt(None) == SENTINEL


@pytest.mark.parametrize("fmt", [fmt_int, fmt1, fmt_money_sek, fmt_pct, fmt_years])
def test_huge_finite_values_still_format(fmt):
    """An unclamped override can push values close to float max."""
    text = fmt(1e308)
    assert text != SENTINEL
    assert text.startswith("100 000")
    assert fmt1(-1e308).endswith(",0")


def test_format_result_defaults():
    params, result, _ = run_pipeline(DEFAULT_INPUT)
    formatted = format_result(params, result)
    assert formatted["bedDays"] == "8 059"
    assert formatted["savedSEK"] == "10 155 kr"
    assert formatted["annualCost"] == "95 000 kr"
    assert formatted["paybackYears"] == SENTINEL
    assert formatted["costBasis"] == "kostnad/vårddygn: 12 000 kr"
    assert "10,0 % handfatskoppling" in formatted["summary"]


def test_format_result_per_vri_cost_basis(make_params):
    params = make_params(pricing_mode="perVRI")
    result = calculate(params)
    assert format_result(params, result)["costBasis"] == "kostnad/VRI: 90 000 kr"
