"""
Numerical tolerances.

Used by diagnostics to decide when a leverage is one for practical
purposes, and by the test suite to compare closed-form and QR results.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Agreement expected between two double-precision solvers
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Leverage this close to 1 leaves no residual variance for the observation
LEVERAGE_EPS = 64 * np.finfo(np.float64).eps
