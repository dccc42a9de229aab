"""
Default parameter set and effect scenarios.

DEFAULT_INPUT is the reset target for the form. Scenario presets only ever
pre-fill effectPct; they are not part of the engine contract.
"""

from .schemas import NormalizedInput, RawInput, ScenarioPreset

DEFAULT_INPUT = RawInput()

SCENARIO_PRESETS = [
    ScenarioPreset(key="conservative", label="Konservativt", effect_pct=5, tag="Lågt antagande"),
    ScenarioPreset(key="low", label="Lågt (10%)", effect_pct=10, tag="Defensivt"),
    ScenarioPreset(key="ambitious", label="Ambitiöst", effect_pct=20, tag="Tryck"),
]


def get_scenario(key: str) -> ScenarioPreset:
    """Returns the preset for a key, or raises KeyError."""
    for preset in SCENARIO_PRESETS:
        if preset.key == key:
            return preset
    raise KeyError(
        f"No scenario named: {key}. "
        f"Available: {[p.key for p in SCENARIO_PRESETS]}"
    )


def apply_scenario(raw: RawInput, key: str) -> RawInput:
    """New snapshot with effectPct taken from the preset; every other field untouched."""
    preset = get_scenario(key)
    return raw.model_copy(update={"effect_pct": preset.effect_pct})


def selected_scenario(params: NormalizedInput):
    """Key of the preset matching the (rounded) effect, or None."""
    rounded = int(params.effect_pct + 0.5)
    for preset in SCENARIO_PRESETS:
        if rounded == preset.effect_pct:
            return preset.key
    return None
