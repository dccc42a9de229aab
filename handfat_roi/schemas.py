from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union
import enum


class PricingMode(str, enum.Enum):
    BED_DAYS = "bedDays"
    PER_VRI = "perVRI"


# Raw form values: whatever the user typed, or a number from a slider.
RawValue = Optional[Union[float, str]]


class RawInput(BaseModel):
    """
    Unvalidated input snapshot, as held by the presentation layer.

    Every numeric field may be a number, free text ("12 000", "4,5", ""),
    or null. Defaults are the reset target of the calculator.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    beds: RawValue = Field(24.0, alias="beds")
    occupancy_pct: RawValue = Field(92.0, alias="occupancyPct")
    alos_days: RawValue = Field(4.0, alias="alosDays")
    vri_per_1000_bed_days: RawValue = Field(6.0, alias="vriPer1000BedDays")
    vri_per_year_override: RawValue = Field("", alias="vriPerYearOverride")
    gram_neg_pct: RawValue = Field(35.0, alias="gramNegPct")
    sink_attributable_pct: RawValue = Field(10.0, alias="sinkAttributablePct")
    effect_pct: RawValue = Field(10.0, alias="effectPct")
    extra_days_per_vri: RawValue = Field(5.0, alias="extraDaysPerVRI")
    cost_per_bed_day: RawValue = Field(12000.0, alias="costPerBedDay")
    cost_per_vri: RawValue = Field(90000.0, alias="costPerVRI")
    pricing_mode: PricingMode = Field(PricingMode.BED_DAYS, alias="pricingMode")
    capex: RawValue = Field(350000.0, alias="capex")
    opex_year: RawValue = Field(25000.0, alias="opexYear")
    capex_amort_years: RawValue = Field(5.0, alias="capexAmortYears")


class NormalizedInput(BaseModel):
    """Calculation engine contract: finite, clamped numbers only."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    beds: float = Field(alias="beds")
    occupancy_pct: float = Field(alias="occupancyPct")
    alos_days: float = Field(alias="alosDays")  # informational, not used by the engine
    vri_per_1000_bed_days: float = Field(alias="vriPer1000BedDays")
    vri_per_year_override: Optional[float] = Field(None, alias="vriPerYearOverride")
    gram_neg_pct: float = Field(alias="gramNegPct")
    sink_attributable_pct: float = Field(alias="sinkAttributablePct")
    effect_pct: float = Field(alias="effectPct")
    extra_days_per_vri: float = Field(alias="extraDaysPerVRI")
    cost_per_bed_day: float = Field(alias="costPerBedDay")
    cost_per_vri: float = Field(alias="costPerVRI")
    pricing_mode: PricingMode = Field(alias="pricingMode")
    capex: float = Field(alias="capex")
    opex_year: float = Field(alias="opexYear")
    capex_amort_years: float = Field(alias="capexAmortYears")


class RoiResult(BaseModel):
    """
    Derived metrics for one NormalizedInput.

    NaN is a valid value for roi, payback_years and vri_per_1000 and means
    "undefined under the current inputs".
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bed_days: float = Field(alias="bedDays")
    vri: float = Field(alias="vri")
    vri_per_1000: float = Field(alias="vriPer1000")
    gram_neg: float = Field(alias="gramNeg")
    sink_gram_neg: float = Field(alias="sinkGramNeg")
    avoided: float = Field(alias="avoided")
    saved_bed_days: float = Field(alias="savedBedDays")
    saved_sek: float = Field(alias="savedSEK")
    annual_cost: float = Field(alias="annualCost")
    net: float = Field(alias="net")
    roi: float = Field(alias="roi")
    payback_years: float = Field(alias="paybackYears")
    used_override: bool = Field(alias="usedOverride")
    vri_from_rate: float = Field(alias="vriFromRate")


class Advisory(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class ScenarioPreset(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str
    label: str
    effect_pct: float = Field(alias="effectPct")
    tag: str
