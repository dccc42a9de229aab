"""
Stage 3: Advisory rule evaluator ("rimlighetsnotiser").

Looks at the normalized input and the result and flags degenerate or very
defensive configurations. Rules are independent, none suppresses another,
and they always fire in declaration order.
"""

import logging

from .schemas import Advisory, NormalizedInput, PricingMode, RoiResult

logger = logging.getLogger(__name__)


ADVISORY_MESSAGES = {
    "zero_infection_rate": (
        "Du har satt VRI/1000 vårddygn till 0 och ingen override är angiven "
        "→ kalkylen ger 0 infektioner."
    ),
    "low_sink_attribution": (
        "Handfatskoppling är satt mycket lågt (≤ 5%). "
        "Det är defensivt, men kan underskatta potentialen."
    ),
    "low_effect": "Effekt är satt mycket lågt (≤ 5%). Bra som worst-case-scenario.",
    "zero_bed_day_cost": "Kostnad per vårddygn är 0 → besparing blir 0 i vårddygnsläget.",
    "zero_vri_cost": "Kostnad per VRI är 0 → besparing blir 0 i kostnad/VRI-läget.",
}


class AdvisoryEvaluator:
    """
    Stage 3 of the pipeline.
    Produces the ordered advisory list for one calculation.
    """

    LOW_ASSUMPTION_PCT = 5.0  # at or below this, attribution/effect count as very low

    def evaluate(self, params: NormalizedInput, result: RoiResult) -> list[Advisory]:
        codes = []

        if not result.used_override and params.vri_per_1000_bed_days == 0:
            codes.append("zero_infection_rate")

        if params.sink_attributable_pct <= self.LOW_ASSUMPTION_PCT:
            codes.append("low_sink_attribution")

        if params.effect_pct <= self.LOW_ASSUMPTION_PCT:
            codes.append("low_effect")

        if params.pricing_mode == PricingMode.BED_DAYS and params.cost_per_bed_day == 0:
            codes.append("zero_bed_day_cost")

        if params.pricing_mode == PricingMode.PER_VRI and params.cost_per_vri == 0:
            codes.append("zero_vri_cost")

        if codes:
            logger.info("Advisories fired: %s", ", ".join(codes))

        return [Advisory(code=code, message=ADVISORY_MESSAGES[code]) for code in codes]
