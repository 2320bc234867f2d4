"""
Distribution Interfaces
=======================

This module defines the public capability protocols implemented by every
distribution of the library:

- :class:`Distribution`: characteristics shared by all univariate laws;
- :class:`ContinuousDistribution`: adds ``pdf`` and ``quantile``;
- :class:`DiscreteDistribution`: adds ``pmf`` and ``log_pmf``.

Notes
-----
- Distribution types implement these protocols independently; reuse
  between types goes through delegation (the stable distribution owns a
  Normal, Cauchy or Lévy instance in its closed-form regimes).
- Characteristics are scalar (``float -> float``); ``sample(n)`` is the
  only batched operation.
- ``pdf``, ``pmf``, ``cdf``, ``variate`` and ``sample`` never raise for
  valid-typed input: parameters are clamped on assignment.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pysatl_stable.distributions.support import Support
    from pysatl_stable.types import EuclideanDistributionType, FloatArray


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def family_name(self) -> str: ...

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def support(self) -> Support: ...

    def cdf(self, x: float) -> float: ...

    def variate(self) -> float: ...

    def sample(self, n: int) -> FloatArray: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...

    def characteristic_function(self, t: float) -> complex: ...


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    """Distribution with a density."""

    def pdf(self, x: float) -> float: ...

    def quantile(self, p: float) -> float: ...


@runtime_checkable
class DiscreteDistribution(Distribution, Protocol):
    """Distribution with a probability mass function on a lattice."""

    def pmf(self, k: float) -> float: ...

    def log_pmf(self, k: float) -> float: ...
