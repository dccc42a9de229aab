"""
Abstract base class for ROI calculators.

Input: NormalizedInput (from Stage 1)
Output: RoiResult
"""

import math
from abc import ABC, abstractmethod

from ..normalizer import clamp
from ..schemas import NormalizedInput, RoiResult


class BaseCalculator(ABC):
    """All ROI calculators inherit from this."""

    DAYS_PER_YEAR = 365
    RATE_DENOMINATOR = 1000.0  # rates are per 1 000 bed-days

    @abstractmethod
    def calculate(self, params: NormalizedInput) -> RoiResult:
        """
        Takes the normalized parameters from Stage 1.
        Returns a complete RoiResult. Must never raise.
        """
        pass

    # --- Helper methods for all calculators ---

    def pct(self, value: float) -> float:
        """Percent (0-100) to fraction."""
        return value / 100.0

    def fraction(self, pct_value: float) -> float:
        """Percent to fraction, clamped to [0, 1]."""
        return clamp(pct_value / 100.0, 0.0, 1.0)

    def safe_ratio(self, numerator: float, denominator: float) -> float:
        """numerator / denominator, or NaN when the denominator isn't positive."""
        if denominator > 0:
            return numerator / denominator
        return math.nan

    def is_positive(self, value) -> bool:
        """True for a finite number > 0. None and NaN are not positive."""
        if value is None:
            return False
        return math.isfinite(value) and value > 0
