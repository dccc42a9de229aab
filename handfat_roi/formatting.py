"""
Swedish display formatting for ROI numbers.

Space as thousands separator, decimal comma. Any non-finite value renders
as the "–" sentinel instead of a number. Rounding is half-up, as in the
web front end.
"""

import math

from .config import settings
from .schemas import PricingMode

SENTINEL = "–"

_SV_SEPARATORS = str.maketrans({",": " ", ".": ","})


def _is_number(n) -> bool:
    return isinstance(n, (int, float)) and not isinstance(n, bool) and math.isfinite(n)


def _round_half_up(n: float, digits: int = 0) -> float:
    factor = 10 ** digits
    scaled = n * factor
    # Near float max the scaled value overflows; such magnitudes have no fraction left
    if not math.isfinite(scaled):
        return n
    return math.floor(scaled + 0.5) / factor


def fmt_int(n) -> str:
    """8059.2 -> '8 059'"""
    if not _is_number(n):
        return SENTINEL
    return f"{int(_round_half_up(n)):,}".translate(_SV_SEPARATORS)


def fmt1(n) -> str:
    """48.3552 -> '48,4'"""
    if not _is_number(n):
        return SENTINEL
    return f"{_round_half_up(n, 1):,.1f}".translate(_SV_SEPARATORS)


def fmt_money_sek(n, suffix: str = None) -> str:
    """10154.59 -> '10 155 kr'"""
    if not _is_number(n):
        return SENTINEL
    return f"{fmt_int(n)} {suffix or settings.CURRENCY_SUFFIX}"


def fmt_pct(n) -> str:
    """35 -> '35,0 %'"""
    if not _is_number(n):
        return SENTINEL
    return f"{fmt1(n)} %"


def fmt_years(n) -> str:
    """Payback-style years: '3,2 år', or the sentinel."""
    if not _is_number(n):
        return SENTINEL
    return f"{fmt1(n)} år"


def format_result(params, result) -> dict:
    """Display strings for every metric the calculator page shows."""
    if params.pricing_mode == PricingMode.PER_VRI:
        cost_basis = f"kostnad/VRI: {fmt_money_sek(params.cost_per_vri)}"
    else:
        cost_basis = f"kostnad/vårddygn: {fmt_money_sek(params.cost_per_bed_day)}"

    return {
        "bedDays": fmt_int(result.bed_days),
        "vri": fmt1(result.vri),
        "vriPer1000": fmt1(result.vri_per_1000),
        "gramNeg": fmt1(result.gram_neg),
        "sinkGramNeg": fmt1(result.sink_gram_neg),
        "avoided": fmt1(result.avoided),
        "savedBedDays": fmt1(result.saved_bed_days),
        "savedSEK": fmt_money_sek(result.saved_sek),
        "costBasis": cost_basis,
        "annualCost": fmt_money_sek(result.annual_cost),
        "net": fmt_money_sek(result.net),
        "paybackYears": fmt_years(result.payback_years),
        "summary": summary_sentence(params, result),
    }


def summary_sentence(params, result) -> str:
    return (
        f"Med antagandet {fmt_pct(params.sink_attributable_pct)} handfatskoppling och "
        f"{fmt_pct(params.effect_pct)} effekt undviks cirka {fmt1(result.avoided)} "
        f"gramnegativa vårdrelaterade infektioner per år, vilket motsvarar "
        f"{fmt1(result.saved_bed_days)} sparade vårddygn och ungefär "
        f"{fmt_money_sek(result.saved_sek)} i årlig besparing."
    )
