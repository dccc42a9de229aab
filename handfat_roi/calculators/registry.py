"""
Pricing-mode registry: maps a PricingMode to the function that turns
avoided infections into saved SEK.

Exactly one pricing function runs per calculation; there is no blended mode.
"""

from typing import Callable

from ..schemas import NormalizedInput, PricingMode


def bed_day_savings(params: NormalizedInput, avoided: float, saved_bed_days: float) -> float:
    """Saved bed-days valued at the cost of one bed-day."""
    return saved_bed_days * params.cost_per_bed_day


def per_vri_savings(params: NormalizedInput, avoided: float, saved_bed_days: float) -> float:
    """Avoided infections valued at the full cost of one VRI."""
    return avoided * params.cost_per_vri


PRICING_REGISTRY: dict[PricingMode, Callable[..., float]] = {
    PricingMode.BED_DAYS: bed_day_savings,
    PricingMode.PER_VRI: per_vri_savings,
}


def get_savings_function(pricing_mode: PricingMode):
    """Returns the savings function for a pricing mode. Anything but perVRI prices by bed-day."""
    return PRICING_REGISTRY.get(pricing_mode, bed_day_savings)


def list_pricing_modes() -> list[str]:
    """List all registered pricing modes."""
    return [mode.value for mode in PRICING_REGISTRY]
