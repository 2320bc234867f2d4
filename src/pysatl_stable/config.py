"""
Numerical Configuration
=======================

Default tolerances shared by every distribution that falls back to
numerical integration.

Notes
-----
- :data:`DEFAULT_INTEGRATION_SETTINGS` keeps the integration error of the
  stable engine below ``1e-9`` for all regimes covered by the test suite.
- Settings are immutable; use :meth:`IntegrationSettings.with_overrides`
  to derive a tuned copy and pass it to a distribution constructor.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from dataclasses import dataclass, replace
from typing import Any

MIN_POSITIVE = sys.float_info.min
"""Smallest positive normal double; floor for strictly positive parameters."""


@dataclass(frozen=True, slots=True)
class IntegrationSettings:
    """
    Tolerances of the adaptive Simpson integrator.

    Parameters
    ----------
    target_abs_error : float, default 1e-11
        Absolute error requested from a single integration.
    max_depth : int, default 20
        Maximum recursion depth. Bounds the worst-case number of integrand
        evaluations by ``2 ** (max_depth + 2) + 1``.
    """

    target_abs_error: float = 1e-11
    max_depth: int = 20

    def __post_init__(self) -> None:
        if not self.target_abs_error > 0:
            raise ValueError("target_abs_error must be positive")
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")

    def with_overrides(self, **changes: Any) -> IntegrationSettings:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_INTEGRATION_SETTINGS = IntegrationSettings()

__all__ = [
    "MIN_POSITIVE",
    "IntegrationSettings",
    "DEFAULT_INTEGRATION_SETTINGS",
]
