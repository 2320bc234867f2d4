"""
Numerics subpackage

Shared numerical toolkit used by the distributions without closed-form
characteristics:

- special functions (:mod:`.special`);
- adaptive Simpson integration (:mod:`.integration`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .integration import (
    IntegrationResult,
    adaptive_simpson,
    integrate,
    integrate_piecewise,
)
from .special import (
    gamma,
    log_factorial,
    log_gamma,
    log_modified_bessel_first_kind,
    modified_bessel_first_kind,
    regularized_incomplete_gamma_lower,
    regularized_incomplete_gamma_upper,
)

__all__ = [
    # integration
    "IntegrationResult",
    "adaptive_simpson",
    "integrate",
    "integrate_piecewise",
    # special functions
    "gamma",
    "log_gamma",
    "log_factorial",
    "modified_bessel_first_kind",
    "log_modified_bessel_first_kind",
    "regularized_incomplete_gamma_lower",
    "regularized_incomplete_gamma_upper",
]
