"""
Stage 1: Input normalizer.

Turns a RawInput snapshot (free text, slider numbers, blanks) into a
NormalizedInput the calculation engine can trust: every numeric field finite
and clamped to its domain range.

Total function. Malformed input degrades to the field's lower bound, never to
an error.
"""

import math
import re

from .schemas import NormalizedInput, RawInput

# (lo, hi) inclusive, per NormalizedInput field
FIELD_BOUNDS = {
    "beds": (0, 2000),
    "occupancy_pct": (0, 100),
    "alos_days": (0, 365),
    "vri_per_1000_bed_days": (0, 200),
    "gram_neg_pct": (0, 100),
    "sink_attributable_pct": (0, 100),
    "effect_pct": (0, 100),
    "extra_days_per_vri": (0, 365),
    "cost_per_bed_day": (0, 1_000_000),
    "cost_per_vri": (0, 10_000_000),
    "capex": (0, 100_000_000),
    "opex_year": (0, 100_000_000),
    "capex_amort_years": (1, 20),
}

# ASCII only: float() would also take "1_000", "nan" or non-Latin digits
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def to_number(value) -> float:
    """
    Parse a raw field value. Handles "12 000", "4,5", " 7 " etc.
    Anything that doesn't parse to a finite number returns NaN.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, str):
        text = "".join(value.split()).replace(",", ".", 1)
        if _DECIMAL_RE.fullmatch(text):
            n = float(text)
        elif _RADIX_RE.fullmatch(text):
            try:
                n = float(int(text, 0))
            except OverflowError:
                return math.nan
        else:
            return math.nan
    else:
        try:
            n = float(value)
        except (ValueError, TypeError):
            return math.nan
    return n if math.isfinite(n) else math.nan


def clamp(n: float, lo: float, hi: float) -> float:
    """NaN clamps to lo."""
    if math.isnan(n):
        return lo
    return min(hi, max(lo, n))


class InputNormalizer:
    """
    Stage 1 of the pipeline.
    Parses and clamps every numeric field of a RawInput.
    """

    def normalize(self, raw: RawInput) -> NormalizedInput:
        values = {}
        for field, (lo, hi) in FIELD_BOUNDS.items():
            values[field] = float(clamp(to_number(getattr(raw, field)), lo, hi))

        values["vri_per_year_override"] = self._parse_override(raw.vri_per_year_override)
        values["pricing_mode"] = raw.pricing_mode

        return NormalizedInput(**values)

    def _parse_override(self, value):
        """
        Absolute VRI/year override. Not range-clamped: blank or unparseable
        means unset (None); zero and negatives are kept and ignored downstream.
        """
        n = to_number(value)
        if math.isnan(n):
            return None
        return n
