"""
Noncentral chi-squared distribution family implementation.

Density through the modified Bessel function of the first kind, distribution
function through adaptive integration of the density.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_stable.config import DEFAULT_INTEGRATION_SETTINGS
from pysatl_stable.distributions.fitters import check_probability, quantile_from_cdf
from pysatl_stable.distributions.support import ContinuousSupport
from pysatl_stable.distributions.variates import (
    chi_squared,
    resolve_variate_source,
    standard_normal,
)
from pysatl_stable.families.builtins.discrete.poisson import PoissonDistribution
from pysatl_stable.families.parametrizations import Parametrization, clamp, positive
from pysatl_stable.numerics.integration import adaptive_simpson, integrate_piecewise
from pysatl_stable.numerics.special import log_gamma, log_modified_bessel_first_kind
from pysatl_stable.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_stable.config import IntegrationSettings
    from pysatl_stable.distributions.variates import VariateSourceLike
    from pysatl_stable.types import EuclideanDistributionType, FloatArray

_LOG_HALF = math.log(0.5)
_BREAKPOINT_OFFSETS = range(-5, 31)
"""Piece borders of the cdf integral, in standard deviations from the mean."""


@dataclass(frozen=True, slots=True)
class NoncentralChiSquaredParameters(Parametrization):
    """
    Standard parametrization of noncentral chi-squared distribution.

    Parameters
    ----------
    degree : float
        Degrees of freedom ``k > 0`` (not necessarily integer).
    noncentrality : float
        Noncentrality ``λ >= 0``.
    """

    __param_name__ = "degreeNoncentrality"

    degree: float
    noncentrality: float

    @classmethod
    def clamped(cls, degree: float, noncentrality: float) -> NoncentralChiSquaredParameters:
        """Non-positive ``degree`` becomes ``1``, negative ``noncentrality`` becomes ``0``."""
        return cls(
            degree=positive(degree, fallback=1.0),
            noncentrality=clamp(noncentrality, 0.0, sys.float_info.max, fallback=0.0),
        )


class NoncentralChiSquaredDistribution:
    """
    Noncentral chi-squared distribution.

    Probability density function:
        f(x | k, λ) = 1/2 e^(-(x+λ)/2) (x/λ)^(k/4 - 1/2) I_(k/2-1)(sqrt(λx)),  x > 0

    Related distributions:
        If Z_i ~ Normal(μ_i, 1) independent, then Σ Z_i² has ``k`` degrees
        of freedom and noncentrality ``Σ μ_i²``.
        With ``λ = 0`` it reduces to the central chi-squared law.
    """

    def __init__(
        self,
        degree: float = 1.0,
        noncentrality: float = 0.0,
        *,
        source: VariateSourceLike = None,
        settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS,
    ) -> None:
        self._source = resolve_variate_source(source)
        self._settings = settings
        self.set_parameters(degree, noncentrality)

    def set_parameters(self, degree: float, noncentrality: float) -> None:
        parameters = NoncentralChiSquaredParameters.clamped(degree, noncentrality)
        self._parameters = parameters
        half_degree = 0.5 * parameters.degree
        # log of lim_{x->0} f(x) / x^(k/2 - 1)
        self._log_origin_factor = (
            -0.5 * parameters.noncentrality - half_degree * math.log(2.0) - log_gamma(half_degree)
        )

    @property
    def parameters(self) -> NoncentralChiSquaredParameters:
        return self._parameters

    @property
    def degree(self) -> float:
        return self._parameters.degree

    @property
    def noncentrality(self) -> float:
        return self._parameters.noncentrality

    @property
    def family_name(self) -> str:
        return FamilyName.NONCENTRAL_CHI_SQUARED

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def log_pdf(self, x: float) -> float:
        k, lam = self.degree, self.noncentrality
        if math.isnan(x):
            return math.nan
        if x < 0 or math.isinf(x):
            return -math.inf
        if x == 0:
            if k < 2:
                return math.inf
            if k == 2:
                return self._log_origin_factor
            return -math.inf
        if lam == 0:
            return (0.5 * k - 1.0) * math.log(x) - 0.5 * x + self._log_origin_factor
        return (
            _LOG_HALF
            - 0.5 * (x + lam)
            + (0.25 * k - 0.5) * math.log(x / lam)
            + log_modified_bessel_first_kind(math.sqrt(lam * x), 0.5 * k - 1.0)
        )

    def pdf(self, x: float) -> float:
        return math.exp(self.log_pdf(x))

    def _breakpoints(self, x: float) -> list[float]:
        center = self.mean()
        spread = math.sqrt(self.variance())
        points = (center + j * spread for j in _BREAKPOINT_OFFSETS)
        return [0.0, *sorted(p for p in points if 0.0 < p < x), x]

    def _origin_piece(self, upper: float, eps: float) -> tuple[float, bool]:
        """
        Mass of ``[0, upper]`` for ``k < 2`` with ``t = u^(2/k)``.

        The substitution turns the integrable singularity ``t^(k/2 - 1)`` at
        zero into a bounded integrand.
        """
        power = 2.0 / self.degree
        log_power = math.log(power)
        at_origin = power * math.exp(self._log_origin_factor)

        def integrand(u: float) -> float:
            t = u**power
            if t == 0:
                return at_origin
            return math.exp(log_power + (power - 1.0) * math.log(u) + self.log_pdf(t))

        result = adaptive_simpson(
            integrand, 0.0, upper ** (0.5 * self.degree), eps, self._settings.max_depth
        )
        return result.value, result.failed

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        points = self._breakpoints(x)
        eps = self._settings.target_abs_error / (len(points) - 1)
        total = 0.0
        if self.degree < 2:
            head, failed = self._origin_piece(points[1], eps)
            if failed:
                return 0.0
            total += head
            points = points[1:]
        if len(points) > 1:
            tail = integrate_piecewise(
                self.pdf, points, eps * (len(points) - 1), self._settings.max_depth
            )
            if tail.failed:
                return 0.0
            total += tail.value
        return min(max(total, 0.0), 1.0)

    def sf(self, x: float) -> float:
        return 1.0 - self.cdf(x)

    def quantile(self, p: float) -> float:
        """
        Percent point function (inverse cdf), by bracketing search.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)
        if p == 0.0:
            return 0.0
        ppf = quantile_from_cdf(self.cdf, x0=self.mean(), init_step=math.sqrt(self.variance()))
        return ppf(p)

    def variate(self) -> float:
        return float(self.sample(1)[0])

    def sample(self, n: int) -> FloatArray:
        """
        Draw ``n`` variates.

        For ``k >= 1``: ``(sqrt(λ) + N)^2 + χ²(k - 1)``; for ``k < 1``: the
        Poisson mixture ``χ²(k + 2J)`` with ``J ~ Poisson(λ / 2)``.
        """
        k, lam = self.degree, self.noncentrality
        if k >= 1:
            shifted = math.sqrt(lam) + standard_normal(self._source, n)
            return shifted * shifted + chi_squared(self._source, k - 1.0, n)
        if lam == 0:
            return chi_squared(self._source, k, n)
        mixing = PoissonDistribution(0.5 * lam, source=self._source).sample(n)
        return chi_squared(self._source, k + 2.0 * mixing, n)

    def mean(self) -> float:
        return self.degree + self.noncentrality

    def variance(self) -> float:
        return 2.0 * (self.degree + 2.0 * self.noncentrality)

    def skewness(self) -> float:
        k, lam = self.degree, self.noncentrality
        return (2.0 / (k + 2.0 * lam)) ** 1.5 * (k + 3.0 * lam)

    def excess_kurtosis(self) -> float:
        k, lam = self.degree, self.noncentrality
        return 12.0 * (k + 4.0 * lam) / (k + 2.0 * lam) ** 2

    def characteristic_function(self, t: float) -> complex:
        denominator = complex(1.0, -2.0 * t)
        return cmath.exp(complex(0.0, self.noncentrality * t) / denominator) / denominator ** (
            0.5 * self.degree
        )

    def __repr__(self) -> str:
        return (
            f"NoncentralChiSquaredDistribution(degree={self.degree!r}, "
            f"noncentrality={self.noncentrality!r})"
        )


__all__ = ["NoncentralChiSquaredParameters", "NoncentralChiSquaredDistribution"]
