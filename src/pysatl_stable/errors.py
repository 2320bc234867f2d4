"""
Error and Warning Types
=======================

Exceptions and warnings raised by PySATL Stable.

- :class:`DomainError`: a special function was called outside its
  mathematical domain. This is a programming-contract violation: the
  distributions clamp their parameters so that it never happens.
- :class:`FitError`: an estimation routine received an invalid sample.
- :class:`IntegrationImprecisionWarning`: the adaptive integrator ran out
  of recursion depth and returned its best estimate.

Out-of-range distribution parameters are never reported; they are clamped
to the nearest valid value on assignment.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """Argument lies outside the domain where a special function is defined."""


class FitError(ValueError):
    """Sample violates the assumptions of a parameter estimator."""

    NON_NEGATIVITY_VIOLATION = "all elements should be non-negative"
    LOWER_LIMIT_VIOLATION = "all elements should be greater than {limit}"
    EMPTY_SAMPLE = "sample should not be empty"

    def __init__(self, family: str, reason: str) -> None:
        super().__init__(f"{family}: wrong sample, {reason}")
        self.family = family
        self.reason = reason


class IntegrationImprecisionWarning(RuntimeWarning):
    """Adaptive integration stopped at the depth cap before meeting its tolerance."""


__all__ = [
    "DomainError",
    "FitError",
    "IntegrationImprecisionWarning",
]
