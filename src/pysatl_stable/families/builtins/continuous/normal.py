"""
Normal distribution family implementation.

Closed-form Gaussian law; also the component the stable distribution
delegates to when ``alpha == 2``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scipy.special import ndtr, ndtri

from pysatl_stable.distributions.fitters import check_probability
from pysatl_stable.distributions.support import ContinuousSupport
from pysatl_stable.distributions.variates import resolve_variate_source, standard_normal
from pysatl_stable.families.parametrizations import Parametrization, finite_or, positive
from pysatl_stable.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_stable.distributions.variates import VariateSourceLike
    from pysatl_stable.types import EuclideanDistributionType, FloatArray

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


@dataclass(frozen=True, slots=True)
class NormalParameters(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    __param_name__ = "meanStd"

    mu: float
    sigma: float

    @classmethod
    def clamped(cls, mu: float, sigma: float) -> NormalParameters:
        """Build parameters, moving invalid values to the nearest valid ones."""
        return cls(mu=finite_or(mu, 0.0), sigma=positive(sigma))


class NormalDistribution:
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float, default 0.0
        Mean.
    sigma : float, default 1.0
        Standard deviation; non-positive values are clamped.
    source : VariateSource, int or None
        Randomness source or seed.
    """

    def __init__(
        self, mu: float = 0.0, sigma: float = 1.0, *, source: VariateSourceLike = None
    ) -> None:
        self._source = resolve_variate_source(source)
        self.set_parameters(mu, sigma)

    def set_parameters(self, mu: float, sigma: float) -> None:
        """Assign new parameters (clamped into the valid range)."""
        self._parameters = NormalParameters.clamped(mu, sigma)

    @property
    def parameters(self) -> NormalParameters:
        return self._parameters

    @property
    def mu(self) -> float:
        return self._parameters.mu

    @property
    def sigma(self) -> float:
        return self._parameters.sigma

    @property
    def family_name(self) -> str:
        return FamilyName.NORMAL

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def pdf(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return _INV_SQRT_2PI * math.exp(-0.5 * z * z) / self.sigma

    def cdf(self, x: float) -> float:
        return float(ndtr((x - self.mu) / self.sigma))

    def sf(self, x: float) -> float:
        return float(ndtr((self.mu - x) / self.sigma))

    def quantile(self, p: float) -> float:
        """
        Percent point function (inverse cdf).

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)
        return float(self.mu + self.sigma * ndtri(p))

    def variate(self) -> float:
        return float(self.sample(1)[0])

    def sample(self, n: int) -> FloatArray:
        return self.mu + self.sigma * standard_normal(self._source, n)

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma**2

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        return 0.0

    def characteristic_function(self, t: float) -> complex:
        return cmath.exp(complex(-0.5 * (self.sigma * t) ** 2, self.mu * t))

    def __repr__(self) -> str:
        return f"NormalDistribution(mu={self.mu!r}, sigma={self.sigma!r})"


__all__ = ["NormalParameters", "NormalDistribution"]
