"""
Stage 1 tests: input normalizer.

Tests:
1-8.   to_number parsing (decimal comma, whitespace, garbage, non-finite,
       ASCII-only digits, radix prefixes, exponents)
9-11.  clamp
12-16. normalize bounds, unparseable -> lo, override handling
"""

import math

import pytest

from handfat_roi.normalizer import FIELD_BOUNDS, InputNormalizer, clamp, to_number
from handfat_roi.schemas import PricingMode, RawInput


# ============================================================
# to_number
# ============================================================

def test_to_number_decimal_comma():
    """'4,5' is a Swedish decimal, not a thousands separator."""
    assert to_number("4,5") == 4.5
    assert to_number("0,92") == 0.92


def test_to_number_strips_all_whitespace():
    """'12 000' typed with a space separator parses as 12000."""
    assert to_number("12 000") == 12000.0
    assert to_number("  7 ") == 7.0
    assert to_number("1 250,5") == 1250.5


def test_to_number_passes_numbers_through():
    assert to_number(24) == 24.0
    assert to_number(6.0) == 6.0
    assert to_number(-3) == -3.0


def test_to_number_garbage_is_nan():
    for value in ["", "   ", "abc", "12kr", "1,2,3", "1_000", None, True]:
        assert math.isnan(to_number(value)), f"{value!r} should not parse"


def test_to_number_non_finite_is_nan():
    assert math.isnan(to_number("inf"))
    assert math.isnan(to_number(float("inf")))
    assert math.isnan(to_number(float("nan")))
    assert math.isnan(to_number("nan"))
    assert math.isnan(to_number("1e400"))


def test_to_number_rejects_non_ascii_digits():
    for value in ["١٢", "１２", "१२"]:
        assert math.isnan(to_number(value)), f"{value!r} should not parse"


def test_to_number_accepts_radix_prefixes():
    assert to_number("0x10") == 16.0
    assert to_number("0X1f") == 31.0
    assert to_number("0o10") == 8.0
    assert to_number("0b101") == 5.0
    assert math.isnan(to_number("-0x10"))
    assert math.isnan(to_number("0x"))


def test_to_number_exponent_and_bare_point():
    assert to_number("1e3") == 1000.0
    assert to_number("-2,5E-1") == -0.25
    assert to_number(".5") == 0.5
    assert to_number("5.") == 5.0
    assert math.isnan(to_number("."))


# ============================================================
# clamp
# ============================================================

def test_clamp_inside_range_unchanged():
    assert clamp(50, 0, 100) == 50


def test_clamp_limits():
    assert clamp(-5, 0, 100) == 0
    assert clamp(250, 0, 100) == 100


def test_clamp_nan_goes_to_lo():
    assert clamp(math.nan, 1, 20) == 1


# ============================================================
# normalize
# ============================================================

def test_normalize_defaults():
    """Default snapshot normalizes to the documented default values."""
    params = InputNormalizer().normalize(RawInput())
    assert params.beds == 24
    assert params.occupancy_pct == 92
    assert params.alos_days == 4.0
    assert params.vri_per_1000_bed_days == 6.0
    assert params.vri_per_year_override is None
    assert params.gram_neg_pct == 35
    assert params.sink_attributable_pct == 10
    assert params.effect_pct == 10
    assert params.extra_days_per_vri == 5
    assert params.cost_per_bed_day == 12000
    assert params.cost_per_vri == 90000
    assert params.pricing_mode == PricingMode.BED_DAYS
    assert params.capex == 350000
    assert params.opex_year == 25000
    assert params.capex_amort_years == 5


def test_normalize_every_field_within_bounds():
    """Way-out-of-range values on every field land inside [lo, hi]."""
    normalizer = InputNormalizer()
    high = RawInput(**{field: 1e12 for field in FIELD_BOUNDS})
    low = RawInput(**{field: -1e12 for field in FIELD_BOUNDS})

    for raw in (high, low):
        params = normalizer.normalize(raw)
        for field, (lo, hi) in FIELD_BOUNDS.items():
            value = getattr(params, field)
            assert math.isfinite(value)
            assert lo <= value <= hi, f"{field}={value} outside [{lo}, {hi}]"


@pytest.mark.parametrize("field", sorted(FIELD_BOUNDS))
def test_normalize_unparseable_goes_to_lo(field):
    params = InputNormalizer().normalize(RawInput(**{field: "not a number"}))
    assert getattr(params, field) == FIELD_BOUNDS[field][0]


def test_normalize_amortization_floor_is_one():
    """capexAmortYears never drops below 1: blank, zero or garbage all give 1."""
    normalizer = InputNormalizer()
    for value in ["", 0, "x", -4]:
        params = normalizer.normalize(RawInput(capex_amort_years=value))
        assert params.capex_amort_years == 1


def test_normalize_override_not_clamped():
    """Override is parsed but never range-clamped; blank means unset."""
    normalizer = InputNormalizer()
    assert normalizer.normalize(RawInput(vri_per_year_override="")).vri_per_year_override is None
    assert normalizer.normalize(RawInput(vri_per_year_override=None)).vri_per_year_override is None
    assert normalizer.normalize(RawInput(vri_per_year_override="n/a")).vri_per_year_override is None
    assert normalizer.normalize(RawInput(vri_per_year_override="0")).vri_per_year_override == 0
    assert normalizer.normalize(RawInput(vri_per_year_override=-12)).vri_per_year_override == -12
    assert normalizer.normalize(RawInput(vri_per_year_override="5 000")).vri_per_year_override == 5000


def test_normalize_accepts_camel_case_aliases():
    """JSON payloads from the front end use camelCase field names."""
    raw = RawInput.model_validate({"beds": "30", "occupancyPct": "85,5", "pricingMode": "perVRI"})
    params = InputNormalizer().normalize(raw)
    assert params.beds == 30
    assert params.occupancy_pct == 85.5
    assert params.pricing_mode == PricingMode.PER_VRI
