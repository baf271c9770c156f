"""
Numerical support shared by the regression backends.

    timing: Timer for per-section backend timings
    tolerances: Comparison tiers and near-zero thresholds
"""
