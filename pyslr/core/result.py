"""
Generic result container for PySLR computations.

Every backend returns its parameter payload inside a Result. The envelope
carries what is common to all fits: metadata, section timings, the backend
that produced it and any non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, centering, sample size)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True, eq=False)
class Result(Generic[P]):
    """
    Immutable result envelope for a regression fit.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Fitted quantities (coefficients, residuals, sums of squares)
        info: Structured metadata (method, column names, sample size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SimpleLinearParams(...),
        ...     info={'method': 'closed_form', 'n': 48},
        ...     timing={'total_seconds': 0.0004},
        ...     backend_name='cpu_closed_form'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
