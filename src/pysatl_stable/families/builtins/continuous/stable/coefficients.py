"""
Stable Parameters, Regimes and Coefficients
===========================================

Everything the stable distribution derives from its parameters:

- :class:`StableParameters`: clamped ``S1`` parameters
  ``(alpha, beta, sigma, mu)``;
- :class:`Regime` and :func:`classify_regime`: which evaluation path
  applies;
- coefficient bundles, one type per path:
  :class:`ClosedFormCoefficients`, :class:`GeneralCoefficients`,
  :class:`AlphaOneCoefficients`;
- :func:`derive_coefficients`: the only place bundles are built.

Notes
-----
Bundles are immutable. A distribution derives a new bundle on every
parameter change and replaces the old one as a whole, so a query never mixes
coefficients from two parameter sets.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from pysatl_stable.config import MIN_POSITIVE
from pysatl_stable.families.builtins.continuous.cauchy import CauchyDistribution
from pysatl_stable.families.builtins.continuous.levy import LevyDistribution
from pysatl_stable.families.builtins.continuous.normal import NormalDistribution
from pysatl_stable.families.parametrizations import Parametrization, clamp, finite_or, positive

if TYPE_CHECKING:
    from pysatl_stable.distributions.variates import VariateSource

_SQRT2 = math.sqrt(2.0)


@dataclass(frozen=True, slots=True)
class StableParameters(Parametrization):
    """
    ``S1`` parametrization of the stable family.

    Parameters
    ----------
    alpha : float
        Characteristic exponent, ``0 < alpha <= 2``.
    beta : float
        Skewness, ``-1 <= beta <= 1``.
    sigma : float
        Scale, ``sigma > 0``.
    mu : float
        Location.
    """

    __param_name__ = "S1"

    alpha: float
    beta: float
    sigma: float
    mu: float

    @classmethod
    def clamped(cls, alpha: float, beta: float, sigma: float, mu: float) -> StableParameters:
        """
        Build parameters, moving every invalid value to the nearest valid one.

        ``alpha`` NaN or ``<= 0`` becomes :data:`~pysatl_stable.config.MIN_POSITIVE`
        and ``alpha > 2`` becomes ``2``; ``beta`` is clipped to ``[-1, 1]``
        (NaN becomes ``0``); ``sigma`` NaN or ``<= 0`` becomes ``MIN_POSITIVE``;
        a non-finite ``mu`` becomes ``0``.
        """
        return cls(
            alpha=min(positive(alpha, fallback=MIN_POSITIVE), 2.0),
            beta=clamp(beta, -1.0, 1.0, fallback=0.0),
            sigma=positive(sigma),
            mu=finite_or(mu, 0.0),
        )


class Regime(StrEnum):
    """
    Evaluation regimes of the stable distribution.

    Attributes
    ----------
    NORMAL
        ``alpha == 2``; Gaussian with standard deviation ``sigma * sqrt(2)``.
    CAUCHY
        ``alpha == 1, beta == 0``.
    LEVY
        ``alpha == 1/2, beta == 1``.
    LEVY_NEGATIVE
        ``alpha == 1/2, beta == -1``; mirrored Lévy law.
    GENERAL_ALPHA_EQ_1
        ``alpha == 1, beta != 0``; integral representation.
    GENERAL
        Any other parameters; integral representation.
    """

    NORMAL = "normal"
    CAUCHY = "cauchy"
    LEVY = "levy"
    LEVY_NEGATIVE = "levy_negative"
    GENERAL_ALPHA_EQ_1 = "general_alpha_eq_1"
    GENERAL = "general"

    @property
    def is_closed_form(self) -> bool:
        return self in _CLOSED_FORM_REGIMES


_CLOSED_FORM_REGIMES = frozenset({Regime.NORMAL, Regime.CAUCHY, Regime.LEVY, Regime.LEVY_NEGATIVE})


def classify_regime(parameters: StableParameters) -> Regime:
    """Classify clamped parameters into exactly one :class:`Regime`."""
    alpha, beta = parameters.alpha, parameters.beta
    if alpha == 2.0:
        return Regime.NORMAL
    if alpha == 1.0:
        return Regime.CAUCHY if beta == 0.0 else Regime.GENERAL_ALPHA_EQ_1
    if alpha == 0.5 and beta == 1.0:
        return Regime.LEVY
    if alpha == 0.5 and beta == -1.0:
        return Regime.LEVY_NEGATIVE
    return Regime.GENERAL


@dataclass(frozen=True, slots=True)
class ClosedFormCoefficients:
    """
    Closed-form regime: queries are delegated to ``component``.

    ``location`` and ``scale`` are the component's parameters; for
    :attr:`Regime.LEVY_NEGATIVE` the component is ``Lévy(-mu, sigma)``
    evaluated at ``-x``.
    """

    regime: Regime
    location: float
    scale: float
    component: NormalDistribution | CauchyDistribution | LevyDistribution = field(compare=False)


@dataclass(frozen=True, slots=True)
class GeneralCoefficients:
    """
    Constants of the ``alpha != 1`` integral representation and CMS transform.

    Attributes
    ----------
    zeta : float
        ``-beta * tan(pi * alpha / 2)``.
    theta0 : float
        ``atan(beta * tan(pi * alpha / 2)) / alpha``; the integration
        variable runs over ``[-theta0, pi / 2]``. Exactly ``±pi / 2`` when
        ``alpha < 1`` and ``|beta| == 1``.
    b_factor : float
        ``(1 + zeta^2) ^ (1 / (2 alpha))``, scale of the CMS transform.
    alpha_inv : float
        ``1 / alpha``.
    a_factor : float
        ``alpha / (alpha - 1)``, exponent of the standardized variable.
    log_cos_term : float
        ``log(cos(alpha * theta0)) / (alpha - 1)``.
    pdf_coef : float
        ``alpha / (pi * |alpha - 1|)``.
    """

    alpha: float
    beta: float
    zeta: float
    theta0: float
    b_factor: float
    alpha_inv: float
    a_factor: float
    log_cos_term: float
    pdf_coef: float


@dataclass(frozen=True, slots=True)
class AlphaOneCoefficients:
    """
    Constants of the ``alpha == 1, beta != 0`` path.

    ``shift = (2 / pi) * beta * sigma * log(sigma)`` is the location
    correction of the ``S1`` parametrization at ``alpha == 1``.
    """

    beta: float
    log_sigma: float
    shift: float


StableCoefficients: TypeAlias = ClosedFormCoefficients | GeneralCoefficients | AlphaOneCoefficients


def _general_coefficients(alpha: float, beta: float) -> GeneralCoefficients:
    tan_term = math.tan(0.5 * math.pi * alpha)
    zeta = -beta * tan_term
    if alpha < 1 and abs(beta) == 1.0:
        # atan(tan(pi * alpha / 2)) / alpha only rounds to this
        theta0 = math.copysign(0.5 * math.pi, beta)
    else:
        theta0 = math.atan(beta * tan_term) / alpha
    return GeneralCoefficients(
        alpha=alpha,
        beta=beta,
        zeta=zeta,
        theta0=theta0,
        b_factor=math.exp(math.log1p(zeta * zeta) / (2.0 * alpha)),
        alpha_inv=1.0 / alpha,
        a_factor=alpha / (alpha - 1.0),
        log_cos_term=math.log(math.cos(alpha * theta0)) / (alpha - 1.0),
        pdf_coef=alpha / (math.pi * abs(alpha - 1.0)),
    )


def _closed_form_coefficients(
    regime: Regime, parameters: StableParameters, source: VariateSource | None
) -> ClosedFormCoefficients:
    sigma, mu = parameters.sigma, parameters.mu
    component: NormalDistribution | CauchyDistribution | LevyDistribution
    match regime:
        case Regime.NORMAL:
            location, scale = mu, sigma * _SQRT2
            component = NormalDistribution(location, scale, source=source)
        case Regime.CAUCHY:
            location, scale = mu, sigma
            component = CauchyDistribution(location, scale, source=source)
        case Regime.LEVY:
            location, scale = mu, sigma
            component = LevyDistribution(location, scale, source=source)
        case Regime.LEVY_NEGATIVE:
            location, scale = -mu, sigma
            component = LevyDistribution(location, scale, source=source)
        case _:
            raise ValueError(f"Regime {regime} has no closed form")
    # the component clamps on its own; keep the values it actually uses
    return ClosedFormCoefficients(
        regime=regime,
        location=component.mu,
        scale=component.sigma,
        component=component,
    )


def derive_coefficients(
    parameters: StableParameters,
    *,
    closed_forms: bool = True,
    source: VariateSource | None = None,
) -> StableCoefficients:
    """
    Derive the coefficient bundle for ``parameters``.

    Parameters
    ----------
    parameters : StableParameters
        Clamped parameters.
    closed_forms : bool, default True
        If ``False``, every ``alpha != 1`` regime uses the integral
        representation, including ``NORMAL``, ``LEVY`` and ``LEVY_NEGATIVE``.
        ``CAUCHY`` stays closed-form: the ``alpha == 1`` kernel needs
        ``beta != 0``.
    source : VariateSource, optional
        Randomness source handed to closed-form components.

    Returns
    -------
    ClosedFormCoefficients, GeneralCoefficients or AlphaOneCoefficients
        Bundle of the active evaluation path.
    """
    regime = classify_regime(parameters)
    if regime is Regime.CAUCHY or (closed_forms and regime.is_closed_form):
        return _closed_form_coefficients(regime, parameters, source)
    if regime is Regime.GENERAL_ALPHA_EQ_1:
        log_sigma = math.log(parameters.sigma)
        return AlphaOneCoefficients(
            beta=parameters.beta,
            log_sigma=log_sigma,
            shift=2.0 / math.pi * parameters.beta * parameters.sigma * log_sigma,
        )
    return _general_coefficients(parameters.alpha, parameters.beta)


__all__ = [
    "StableParameters",
    "Regime",
    "classify_regime",
    "ClosedFormCoefficients",
    "GeneralCoefficients",
    "AlphaOneCoefficients",
    "StableCoefficients",
    "derive_coefficients",
]
