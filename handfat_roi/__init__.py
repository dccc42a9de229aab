"""
Handfat ROI calculator.

Projects avoided gram-negative VRI, saved bed-days and saved SEK for a
sink/drain hygiene investment, and sets them against the investment's
annualized cost.
"""

from .pipeline import calculate, evaluate, normalize, run_pipeline

__all__ = ["normalize", "calculate", "evaluate", "run_pipeline"]
