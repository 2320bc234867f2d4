"""
Stable distribution implementation.

``S(alpha, beta, sigma, mu)`` in the ``S1`` parametrization, with
characteristic function

    φ(t) = exp(iμt - |σt|^α (1 - iβ sign(t) tan(πα/2))),            α ≠ 1
    φ(t) = exp(iμt - σ|t| (1 + iβ (2/π) sign(t) log|t|)),           α = 1

Closed-form regimes delegate to Normal, Cauchy or Lévy components; the
remaining regimes evaluate the integral representations of
:mod:`.zolotarev` and sample with the Chambers–Mallows–Stuck transform.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_stable.config import DEFAULT_INTEGRATION_SETTINGS
from pysatl_stable.distributions.fitters import check_probability, quantile_from_cdf
from pysatl_stable.distributions.support import ContinuousSupport
from pysatl_stable.distributions.variates import (
    resolve_variate_source,
    standard_exponential,
    uniform_angle,
)
from pysatl_stable.families.builtins.continuous.stable.coefficients import (
    AlphaOneCoefficients,
    ClosedFormCoefficients,
    GeneralCoefficients,
    Regime,
    StableCoefficients,
    StableParameters,
    classify_regime,
    derive_coefficients,
)
from pysatl_stable.families.builtins.continuous.stable.zolotarev import (
    alpha_one_cdf,
    alpha_one_pdf,
    general_cdf,
    general_pdf,
)
from pysatl_stable.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_stable.config import IntegrationSettings
    from pysatl_stable.distributions.variates import VariateSource, VariateSourceLike
    from pysatl_stable.types import EuclideanDistributionType, FloatArray

_LOG_MAX = math.log(float(np.finfo(float).max))


@dataclass(frozen=True, slots=True)
class _Snapshot:
    parameters: StableParameters
    regime: Regime
    coefficients: StableCoefficients


def _cms_general(
    source: VariateSource, coefficients: GeneralCoefficients, size: int
) -> FloatArray:
    """
    Standard ``S1`` draws for ``alpha != 1`` (Chambers, Mallows & Stuck, 1976).

    The transform is evaluated through ``log |x|``: for ``alpha`` near the
    clamp floor ``1 / alpha`` is of order ``1e307`` and the factors of the
    product overflow separately. Magnitudes beyond the double range
    saturate at the largest finite double.
    """
    alpha = coefficients.alpha
    u = uniform_angle(source, size)
    w = standard_exponential(source, size)
    shifted = alpha * (u + coefficients.theta0)
    sin_shifted = np.sin(shifted)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        log_tail = np.log(np.maximum(np.cos(u - shifted), 0.0)) - np.log(w)
        log_magnitude = (
            math.log(coefficients.b_factor)
            + np.log(np.abs(sin_shifted))
            + coefficients.alpha_inv * ((1.0 - alpha) * log_tail - np.log(np.cos(u)))
        )
        magnitude = np.exp(np.minimum(log_magnitude, _LOG_MAX))
    return np.sign(sin_shifted) * np.nan_to_num(magnitude, nan=0.0)


def _cms_alpha_one(source: VariateSource, beta: float, size: int) -> FloatArray:
    """Standard ``S1`` draws for ``alpha == 1``."""
    u = uniform_angle(source, size)
    w = standard_exponential(source, size)
    shifted = 0.5 * np.pi + beta * u
    return (2.0 / np.pi) * (
        shifted * np.tan(u) - beta * np.log(0.5 * np.pi * w * np.cos(u) / shifted)
    )


class StableDistribution:
    """
    Stable distribution ``S(alpha, beta, sigma, mu)``.

    Parameters
    ----------
    alpha : float, default 2.0
        Characteristic exponent in ``(0, 2]``.
    beta : float, default 0.0
        Skewness in ``[-1, 1]``.
    sigma : float, default 1.0
        Scale, ``> 0``.
    mu : float, default 0.0
        Location.
    source : VariateSource, int or None
        Randomness source or seed; shared with closed-form components.
    settings : IntegrationSettings
        Tolerances of the integral representations.
    closed_forms : bool, default True
        If ``False``, the integral representation is used for every
        ``alpha != 1``; closed forms are then only a reference.

    Notes
    -----
    Out-of-range parameters are clamped, never rejected. The regime and the
    coefficients are re-derived on every :meth:`set_parameters` call and
    replaced together with the parameters in a single assignment.
    Instances are not safe for concurrent mutation and queries.
    """

    def __init__(
        self,
        alpha: float = 2.0,
        beta: float = 0.0,
        sigma: float = 1.0,
        mu: float = 0.0,
        *,
        source: VariateSourceLike = None,
        settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS,
        closed_forms: bool = True,
    ) -> None:
        self._source = resolve_variate_source(source)
        self._settings = settings
        self._closed_forms = closed_forms
        self.set_parameters(alpha, beta, sigma, mu)

    def set_parameters(self, alpha: float, beta: float, sigma: float, mu: float) -> None:
        """Clamp parameters, reclassify the regime and derive coefficients."""
        parameters = StableParameters.clamped(alpha, beta, sigma, mu)
        self._state = _Snapshot(
            parameters=parameters,
            regime=classify_regime(parameters),
            coefficients=derive_coefficients(
                parameters, closed_forms=self._closed_forms, source=self._source
            ),
        )

    @property
    def parameters(self) -> StableParameters:
        return self._state.parameters

    @property
    def alpha(self) -> float:
        return self._state.parameters.alpha

    @property
    def beta(self) -> float:
        return self._state.parameters.beta

    @property
    def sigma(self) -> float:
        return self._state.parameters.sigma

    @property
    def mu(self) -> float:
        return self._state.parameters.mu

    @property
    def regime(self) -> Regime:
        return self._state.regime

    @property
    def coefficients(self) -> StableCoefficients:
        return self._state.coefficients

    @property
    def settings(self) -> IntegrationSettings:
        return self._settings

    @property
    def family_name(self) -> str:
        return FamilyName.STABLE

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        """Real line, or a half-line for totally skewed laws with ``alpha < 1``."""
        parameters = self._state.parameters
        if parameters.alpha < 1 and parameters.beta == 1.0:
            return ContinuousSupport(left=parameters.mu, left_closed=False)
        if parameters.alpha < 1 and parameters.beta == -1.0:
            return ContinuousSupport(right=parameters.mu, right_closed=False)
        return ContinuousSupport()

    def pdf(self, x: float) -> float:
        state = self._state
        sigma, mu = state.parameters.sigma, state.parameters.mu
        match state.coefficients:
            case ClosedFormCoefficients(regime=Regime.LEVY_NEGATIVE, component=levy):
                return levy.pdf(-x)
            case ClosedFormCoefficients(component=component):
                return component.pdf(x)
            case GeneralCoefficients() as coefficients:
                return general_pdf((x - mu) / sigma, coefficients, self._settings) / sigma
            case AlphaOneCoefficients(beta=beta, shift=shift):
                return alpha_one_pdf((x - mu - shift) / sigma, beta, self._settings) / sigma
        raise AssertionError("unreachable")

    def cdf(self, x: float) -> float:
        state = self._state
        sigma, mu = state.parameters.sigma, state.parameters.mu
        match state.coefficients:
            case ClosedFormCoefficients(regime=Regime.LEVY_NEGATIVE, component=levy):
                return levy.sf(-x)
            case ClosedFormCoefficients(component=component):
                return component.cdf(x)
            case GeneralCoefficients() as coefficients:
                return general_cdf((x - mu) / sigma, coefficients, self._settings)
            case AlphaOneCoefficients(beta=beta, shift=shift):
                return alpha_one_cdf((x - mu - shift) / sigma, beta, self._settings)
        raise AssertionError("unreachable")

    def sf(self, x: float) -> float:
        """Survival function ``1 - cdf(x)``."""
        match self._state.coefficients:
            case ClosedFormCoefficients(regime=Regime.LEVY_NEGATIVE, component=levy):
                return levy.cdf(-x)
            case ClosedFormCoefficients(component=component):
                return component.sf(x)
        return 1.0 - self.cdf(x)

    def quantile(self, p: float) -> float:
        """
        Percent point function (inverse cdf).

        Closed-form regimes invert analytically; the integral regimes use a
        bracketing search on :meth:`cdf`. For totally skewed laws with
        ``alpha < 1`` the probability at the finite end of the support maps
        to ``mu``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        check_probability(p)
        state = self._state
        match state.coefficients:
            case ClosedFormCoefficients(regime=Regime.LEVY_NEGATIVE, component=levy):
                return -levy.quantile(1.0 - p)
            case ClosedFormCoefficients(component=component):
                return component.quantile(p)
        support = self.support
        if p == 0.0 and math.isfinite(support.left):
            return support.left
        if p == 1.0 and math.isfinite(support.right):
            return support.right
        ppf = quantile_from_cdf(
            self.cdf, x0=state.parameters.mu, init_step=state.parameters.sigma
        )
        return ppf(p)

    def variate(self) -> float:
        return float(self.sample(1)[0])

    def sample(self, n: int) -> FloatArray:
        """
        Draw ``n`` independent variates.

        Closed-form regimes sample their component; the others use the
        Chambers–Mallows–Stuck transform of a ``Uniform(-pi/2, pi/2)`` and an
        ``Exponential(1)`` draw.
        """
        state = self._state
        sigma, mu = state.parameters.sigma, state.parameters.mu
        match state.coefficients:
            case ClosedFormCoefficients(regime=Regime.LEVY_NEGATIVE, component=levy):
                return -levy.sample(n)
            case ClosedFormCoefficients(component=component):
                return component.sample(n)
            case GeneralCoefficients() as coefficients:
                return sigma * _cms_general(self._source, coefficients, n) + mu
            case AlphaOneCoefficients(beta=beta, shift=shift):
                return sigma * _cms_alpha_one(self._source, beta, n) + shift + mu
        raise AssertionError("unreachable")

    def mean(self) -> float:
        """``mu`` for ``alpha > 1``; undefined (``nan``) otherwise."""
        parameters = self._state.parameters
        return parameters.mu if parameters.alpha > 1 else math.nan

    def variance(self) -> float:
        """``2 sigma^2`` for ``alpha == 2``; infinite otherwise."""
        parameters = self._state.parameters
        return 2.0 * parameters.sigma**2 if parameters.alpha == 2.0 else math.inf

    def characteristic_function(self, t: float) -> complex:
        parameters = self._state.parameters
        alpha, beta, sigma, mu = (
            parameters.alpha,
            parameters.beta,
            parameters.sigma,
            parameters.mu,
        )
        if t == 0:
            return complex(1.0, 0.0)
        sign = math.copysign(1.0, t)
        if alpha == 1.0:
            skew = beta * 2.0 / math.pi * sign * math.log(abs(t))
            exponent = -sigma * abs(t) * complex(1.0, skew)
        else:
            exponent = -(abs(sigma * t) ** alpha) * complex(
                1.0, -beta * sign * math.tan(0.5 * math.pi * alpha)
            )
        return cmath.exp(complex(0.0, mu * t) + exponent)

    def __repr__(self) -> str:
        return (
            f"StableDistribution(alpha={self.alpha!r}, beta={self.beta!r}, "
            f"sigma={self.sigma!r}, mu={self.mu!r})"
        )


__all__ = ["StableDistribution"]
