"""
Stage 2: Deterministic calculation engine.

Pure Python math. No I/O, no state.
Given a NormalizedInput (from Stage 1), produce a complete RoiResult.
"""
