"""
ROI calculator API.

GET  /api/roi/defaults         default input (reset target)
GET  /api/roi/scenarios        effect scenario presets
GET  /api/roi/pricing-modes    registered pricing modes
POST /api/roi/scenarios/{key}  apply a preset to an input snapshot
POST /api/roi/calculate        run normalize -> calculate -> evaluate
POST /api/roi/report           download the PDF report for an input snapshot

Stateless: every request carries the full input snapshot.
"""

import logging
import math
from datetime import date

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..calculators.registry import list_pricing_modes
from ..formatting import format_result
from ..pdf_generator import generate_roi_pdf, report_filename
from ..pipeline import run_pipeline
from ..scenarios import DEFAULT_INPUT, SCENARIO_PRESETS, apply_scenario, selected_scenario
from ..schemas import RawInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roi", tags=["roi"])


def _json_safe(data: dict) -> dict:
    """NaN and inf are not valid JSON, send them as null."""
    return {
        key: None if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in data.items()
    }


@router.get("/defaults")
def get_defaults():
    return DEFAULT_INPUT.model_dump(by_alias=True, mode="json")


@router.get("/scenarios")
def list_scenarios():
    return [preset.model_dump(by_alias=True) for preset in SCENARIO_PRESETS]


@router.get("/pricing-modes")
def get_pricing_modes():
    return list_pricing_modes()


@router.post("/scenarios/{key}")
def apply_scenario_preset(key: str, raw: RawInput):
    """Returns the snapshot with effectPct replaced by the preset's value."""
    try:
        updated = apply_scenario(raw, key)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown scenario: {key}")
    return updated.model_dump(by_alias=True, mode="json")


@router.post("/calculate")
def calculate_roi(raw: RawInput):
    """
    Run the full pipeline on one input snapshot.

    Returns normalized input, result (undefined metrics as null),
    advisories in rule order, display strings and the matching scenario.
    """
    params, result, advisories = run_pipeline(raw)

    return {
        "input": _json_safe(params.model_dump(by_alias=True, mode="python")),
        "result": _json_safe(result.model_dump(by_alias=True, mode="python")),
        "advisories": [a.model_dump() for a in advisories],
        "formatted": format_result(params, result),
        "selectedScenario": selected_scenario(params),
    }


@router.post("/report")
def download_report(raw: RawInput):
    """
    Generate and download the PDF report.

    Returns: application/pdf
    """
    params, result, _ = run_pipeline(raw)
    generated_on = date.today()

    try:
        pdf_bytes = generate_roi_pdf(params, result, generated_on=generated_on)
    except Exception:
        logger.exception("ROI report generation failed")
        raise HTTPException(status_code=500, detail="Report generation failed")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{report_filename(generated_on)}"',
        },
    )
