"""
Regression backends.

Available backends:
    CPUClosedFormBackend: centered-sums reference solution
    CPUQRBackend: QR decomposition of the [1, x] design matrix
"""

from pyslr.regression.backends.cpu import CPUClosedFormBackend, CPUQRBackend

__all__ = [
    "CPUClosedFormBackend",
    "CPUQRBackend",
]
