"""
Cauchy distribution family implementation.

Closed-form component of the stable distribution for ``alpha == 1, beta == 0``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_stable.distributions.fitters import check_probability
from pysatl_stable.distributions.support import ContinuousSupport
from pysatl_stable.distributions.variates import resolve_variate_source, uniform_angle
from pysatl_stable.families.parametrizations import Parametrization, finite_or, positive
from pysatl_stable.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_stable.distributions.variates import VariateSourceLike
    from pysatl_stable.types import EuclideanDistributionType, FloatArray


@dataclass(frozen=True, slots=True)
class CauchyParameters(Parametrization):
    """
    Location-scale parametrization of Cauchy distribution.

    Parameters
    ----------
    mu : float
        Location (median) of the distribution
    sigma : float
        Scale (half width at half maximum)
    """

    __param_name__ = "locScale"

    mu: float
    sigma: float

    @classmethod
    def clamped(cls, mu: float, sigma: float) -> CauchyParameters:
        return cls(mu=finite_or(mu, 0.0), sigma=positive(sigma))


class CauchyDistribution:
    """
    Cauchy distribution.

    Probability density function:
        f(x) = 1 / (πσ (1 + ((x-μ)/σ)²))

    Mean is undefined and variance is infinite; ``mean()`` returns ``nan``
    and ``variance()`` returns ``inf``.
    """

    def __init__(
        self, mu: float = 0.0, sigma: float = 1.0, *, source: VariateSourceLike = None
    ) -> None:
        self._source = resolve_variate_source(source)
        self.set_parameters(mu, sigma)

    def set_parameters(self, mu: float, sigma: float) -> None:
        self._parameters = CauchyParameters.clamped(mu, sigma)

    @property
    def parameters(self) -> CauchyParameters:
        return self._parameters

    @property
    def mu(self) -> float:
        return self._parameters.mu

    @property
    def sigma(self) -> float:
        return self._parameters.sigma

    @property
    def family_name(self) -> str:
        return FamilyName.CAUCHY

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def pdf(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return 1.0 / (math.pi * self.sigma * (1.0 + z * z))

    def cdf(self, x: float) -> float:
        return 0.5 + math.atan((x - self.mu) / self.sigma) / math.pi

    def sf(self, x: float) -> float:
        return 0.5 - math.atan((x - self.mu) / self.sigma) / math.pi

    def quantile(self, p: float) -> float:
        check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return self.mu + self.sigma * math.tan(math.pi * (p - 0.5))

    def variate(self) -> float:
        return float(self.sample(1)[0])

    def sample(self, n: int) -> FloatArray:
        return self.mu + self.sigma * np.tan(uniform_angle(self._source, n))

    def mean(self) -> float:
        return math.nan

    def variance(self) -> float:
        return math.inf

    def median(self) -> float:
        return self.mu

    def characteristic_function(self, t: float) -> complex:
        return cmath.exp(complex(-self.sigma * abs(t), self.mu * t))

    def __repr__(self) -> str:
        return f"CauchyDistribution(mu={self.mu!r}, sigma={self.sigma!r})"


__all__ = ["CauchyParameters", "CauchyDistribution"]
