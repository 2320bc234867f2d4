"""
Lévy distribution family implementation.

The Lévy law is the stable law ``S(1/2, 1, σ, μ)``; the stable
distribution delegates to :class:`LevyDistribution` in that regime and to a
mirrored instance for ``S(1/2, -1, σ, μ)``.
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
from scipy.special import erf, erfc, erfcinv

from pysatl_stable.distributions.fitters import check_probability
from pysatl_stable.distributions.support import ContinuousSupport
from pysatl_stable.distributions.variates import resolve_variate_source, standard_normal
from pysatl_stable.errors import FitError
from pysatl_stable.families.parametrizations import Parametrization, finite_or, positive
from pysatl_stable.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_stable.distributions.variates import VariateSourceLike
    from pysatl_stable.types import EuclideanDistributionType, FloatArray

_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


@dataclass(frozen=True, slots=True)
class LevyParameters(Parametrization):
    """
    Location-scale parametrization of Lévy distribution.

    Parameters
    ----------
    mu : float
        Location (left end of the support)
    sigma : float
        Scale
    """

    __param_name__ = "locScale"

    mu: float
    sigma: float

    @classmethod
    def clamped(cls, mu: float, sigma: float) -> LevyParameters:
        return cls(mu=finite_or(mu, 0.0), sigma=positive(sigma))


class LevyDistribution:
    """
    Lévy distribution.

    Probability density function:
        f(x | μ, σ) = sqrt(σ / (2π)) * exp(-σ / (2(x - μ))) / (x - μ)^(3/2),  x > μ

    Related distributions:
        If X ~ Lévy(0, 1), then μ + σX ~ Lévy(μ, σ).
        If Y ~ Normal(0, 1), then 1 / Y² ~ Lévy(0, 1).
    """

    def __init__(
        self, mu: float = 0.0, sigma: float = 1.0, *, source: VariateSourceLike = None
    ) -> None:
        self._source = resolve_variate_source(source)
        self.set_parameters(mu, sigma)

    def set_parameters(self, mu: float, sigma: float) -> None:
        self._parameters = LevyParameters.clamped(mu, sigma)
        self._log_sigma = math.log(self._parameters.sigma)

    @property
    def parameters(self) -> LevyParameters:
        return self._parameters

    @property
    def mu(self) -> float:
        return self._parameters.mu

    @property
    def sigma(self) -> float:
        return self._parameters.sigma

    @property
    def family_name(self) -> str:
        return FamilyName.LEVY

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.mu, left_closed=False)

    def log_pdf(self, x: float) -> float:
        if not x > self.mu:
            return -math.inf
        shifted = x - self.mu
        return (
            0.5 * self._log_sigma
            - _HALF_LOG_2PI
            - 0.5 * self.sigma / shifted
            - 1.5 * math.log(shifted)
        )

    def pdf(self, x: float) -> float:
        return math.exp(self.log_pdf(x))

    def cdf(self, x: float) -> float:
        if not x > self.mu:
            return 0.0
        return float(erfc(math.sqrt(0.5 * self.sigma / (x - self.mu))))

    def sf(self, x: float) -> float:
        if not x > self.mu:
            return 1.0
        return float(erf(math.sqrt(0.5 * self.sigma / (x - self.mu))))

    def quantile(self, p: float) -> float:
        check_probability(p)
        if p == 0.0:
            return self.mu
        if p == 1.0:
            return math.inf
        y = float(erfcinv(p))
        return self.mu + 0.5 * self.sigma / (y * y)

    def variate(self) -> float:
        return float(self.sample(1)[0])

    def sample(self, n: int) -> FloatArray:
        normal = standard_normal(self._source, n)
        return self.mu + self.sigma / (normal * normal)

    def mean(self) -> float:
        return math.inf

    def variance(self) -> float:
        return math.inf

    def median(self) -> float:
        y = float(erfcinv(0.5))
        return self.mu + 0.5 * self.sigma / (y * y)

    def mode(self) -> float:
        return self.mu + self.sigma / 3.0

    def characteristic_function(self, t: float) -> complex:
        drift = complex(0.0, self.mu * t)
        return cmath.exp(drift - cmath.sqrt(complex(0.0, -2.0 * self.sigma * t)))

    def fit_scale_mle(self, sample: Sequence[float]) -> None:
        """
        Set ``sigma`` to its maximum-likelihood estimate for fixed ``mu``.

        ``σ̂ = n / Σ 1 / (x_i - μ)``

        Raises
        ------
        FitError
            If the sample is empty or has an element not greater than ``mu``.
        """
        data = np.asarray(sample, dtype=np.float64)
        if data.size == 0:
            raise FitError(self.family_name, FitError.EMPTY_SAMPLE)
        if not np.all(data > self.mu):
            raise FitError(self.family_name, FitError.LOWER_LIMIT_VIOLATION.format(limit=self.mu))
        inverse_sum = float(np.sum(1.0 / (data - self.mu)))
        self.set_parameters(self.mu, data.size / inverse_sum)

    def __repr__(self) -> str:
        return f"LevyDistribution(mu={self.mu!r}, sigma={self.sigma!r})"


__all__ = ["LevyParameters", "LevyDistribution"]
