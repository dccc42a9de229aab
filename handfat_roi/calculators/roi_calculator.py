"""
Sink ROI calculator.

Volume -> VRI -> gram-negative -> sink-attributable -> avoided infections
-> saved bed-days -> saved SEK, set against annualized CAPEX + OPEX.

Every step only consumes earlier steps. NaN propagates silently; nothing
here raises.
"""

import math

from .base import BaseCalculator
from .registry import get_savings_function
from ..schemas import NormalizedInput, RoiResult


class RoiCalculator(BaseCalculator):

    def calculate(self, params: NormalizedInput) -> RoiResult:
        # --- Volume ---
        occupancy = self.fraction(params.occupancy_pct)
        bed_days = params.beds * self.DAYS_PER_YEAR * occupancy

        # --- Infections per year (override wins when positive) ---
        vri_from_rate = (params.vri_per_1000_bed_days / self.RATE_DENOMINATOR) * bed_days
        used_override = self.is_positive(params.vri_per_year_override)
        vri = params.vri_per_year_override if used_override else vri_from_rate

        # --- Attribution chain ---
        gram_neg = vri * self.pct(params.gram_neg_pct)
        sink_gram_neg = gram_neg * self.pct(params.sink_attributable_pct)
        avoided = sink_gram_neg * self.pct(params.effect_pct)
        saved_bed_days = avoided * params.extra_days_per_vri

        # --- Savings ---
        savings_fn = get_savings_function(params.pricing_mode)
        saved_sek = savings_fn(params, avoided, saved_bed_days)

        # --- Cost ---
        annual_cost = self._annualized_capex(params) + params.opex_year
        net = saved_sek - annual_cost
        roi = self.safe_ratio(net, annual_cost)
        payback_years = self._payback_years(params.capex, params.opex_year, saved_sek)

        vri_per_1000 = self.safe_ratio(vri, bed_days) * self.RATE_DENOMINATOR

        return RoiResult(
            bed_days=bed_days,
            vri=vri,
            vri_per_1000=vri_per_1000,
            gram_neg=gram_neg,
            sink_gram_neg=sink_gram_neg,
            avoided=avoided,
            saved_bed_days=saved_bed_days,
            saved_sek=saved_sek,
            annual_cost=annual_cost,
            net=net,
            roi=roi,
            payback_years=payback_years,
            used_override=used_override,
            vri_from_rate=vri_from_rate,
        )

    def _annualized_capex(self, params: NormalizedInput) -> float:
        """CAPEX spread evenly over the amortization period."""
        if params.capex_amort_years > 0:
            return params.capex / params.capex_amort_years
        return params.capex

    def _payback_years(self, capex: float, opex_year: float, saved_sek: float) -> float:
        """
        Years until CAPEX is recovered from savings net of OPEX.

        Only defined when yearly savings exceed OPEX. The denominator is
        floored at 1 SEK.
        """
        if saved_sek > opex_year:
            return capex / max(1.0, saved_sek - opex_year)
        return math.nan
