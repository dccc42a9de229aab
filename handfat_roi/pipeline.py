"""
The three-stage ROI pipeline.

Stage 1, normalize:  RawInput -> NormalizedInput
Stage 2, calculate:  NormalizedInput -> RoiResult
Stage 3, evaluate:   (NormalizedInput, RoiResult) -> advisories

Every stage is a pure function of its arguments. Callers re-run the whole
pipeline after each input change; nothing is cached between runs.
"""

import logging

from .advisories import AdvisoryEvaluator
from .calculators.roi_calculator import RoiCalculator
from .normalizer import InputNormalizer
from .schemas import Advisory, NormalizedInput, RawInput, RoiResult

logger = logging.getLogger(__name__)

# Stateless singletons
_normalizer = InputNormalizer()
_calculator = RoiCalculator()
_evaluator = AdvisoryEvaluator()


def normalize(raw: RawInput) -> NormalizedInput:
    return _normalizer.normalize(raw)


def calculate(params: NormalizedInput) -> RoiResult:
    return _calculator.calculate(params)


def evaluate(params: NormalizedInput, result: RoiResult) -> list[Advisory]:
    return _evaluator.evaluate(params, result)


def run_pipeline(raw: RawInput) -> tuple[NormalizedInput, RoiResult, list[Advisory]]:
    """Runs all three stages on one input snapshot."""
    params = normalize(raw)
    result = calculate(params)
    advisories = evaluate(params, result)
    logger.debug(
        "ROI pipeline: override=%s avoided=%.4f saved_sek=%.2f net=%.2f",
        result.used_override, result.avoided, result.saved_sek, result.net,
    )
    return params, result, advisories
