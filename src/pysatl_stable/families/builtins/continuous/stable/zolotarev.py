"""
Integral Representations of Stable Laws
=======================================

Density and distribution function of a standardized stable variable ``z``
as one-dimensional integrals over a bounded angle (Zolotarev's formulas in
the form given by Nolan, 1997):

- :func:`general_pdf`, :func:`general_cdf`: ``alpha != 1``;
- :func:`alpha_one_pdf`, :func:`alpha_one_cdf`: ``alpha == 1, beta != 0``.

Notes
-----
- Both kernels are written in terms of ``log g(theta)``; ``g`` is monotone
  in ``theta``, the density kernel ``g * exp(-g)`` peaks where ``g == 1``
  and the tail kernel ``exp(-g)`` drops from 1 to 0 around the same point.
  The points where ``log g`` crosses a fixed ladder of levels are located
  with :func:`scipy.optimize.brentq` and used as breakpoints: near
  ``alpha == 1`` the transition narrows to a near-step of relative width
  ``|alpha - 1|`` that the Simpson nodes would otherwise miss.
- Totally skewed laws with ``alpha < 1`` are integrated over
  ``phi = theta + pi/2``; ``g`` has a finite limit at ``phi == 0`` that
  the ``theta`` form cannot evaluate.
- Negative ``z`` is handled by reflection ``(z, beta) -> (-z, -beta)``.
- A failed integration degrades to a best-effort value; densities are
  clipped to ``[0, inf)`` and distribution functions to ``[0, 1]``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Final

from scipy.optimize import brentq

from pysatl_stable.config import DEFAULT_INTEGRATION_SETTINGS
from pysatl_stable.numerics.integration import integrate_piecewise
from pysatl_stable.numerics.special import log_gamma

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_stable.config import IntegrationSettings
    from pysatl_stable.families.builtins.continuous.stable.coefficients import (
        GeneralCoefficients,
    )
    from pysatl_stable.numerics.integration import IntegrationResult

_HALF_PI: Final = 0.5 * math.pi
_LOG_PI: Final = math.log(math.pi)
_LOG_2_OVER_PI: Final = math.log(2.0 / math.pi)
_LOG_MAX: Final = math.log(1.7976931348623157e308)

_LOG_G_OVERFLOW: Final = 700.0
"""Above this ``log g``, both ``g * exp(-g)`` and ``exp(-g)`` are zero in double precision."""

ZERO_TOLERANCE: Final = 1e-10
"""``|z|`` below which the closed values at ``z = 0`` are used."""

_MIN_DENSITY_EPS: Final = 1e-15

_LOG_G_LEVELS: Final = (-16.0, -8.0, -4.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0, 4.0)
"""Levels of ``log g`` used as breakpoints; both kernels change fastest between them."""

_CROSSING_XTOL: Final = 1e-15
"""Tolerance of the level crossings, relative to the length of the angle range."""


def _clip_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _density_kernel(log_g: float) -> float:
    """``g * exp(-g)`` computed from ``log g``."""
    if not log_g < _LOG_G_OVERFLOW or log_g == -math.inf:
        return 0.0
    return math.exp(log_g - math.exp(log_g))


def _tail_kernel(log_g: float) -> float:
    """``exp(-g)`` computed from ``log g``."""
    if log_g == -math.inf:
        return 1.0
    if not log_g < _LOG_G_OVERFLOW:
        return 0.0
    return math.exp(-math.exp(log_g))


def _breakpoints(log_g: Callable[[float], float], lo: float, hi: float) -> list[float]:
    """``[lo, hi]`` together with the points where ``log g`` crosses :data:`_LOG_G_LEVELS`."""

    def clipped(theta: float) -> float:
        return min(max(log_g(theta), -_LOG_G_OVERFLOW), _LOG_G_OVERFLOW)

    def crossing(theta: float, level: float) -> float:
        return clipped(theta) - level

    at_lo, at_hi = clipped(lo), clipped(hi)
    xtol = _CROSSING_XTOL * (hi - lo)
    points = [lo, hi]
    for level in _LOG_G_LEVELS:
        if not (at_lo - level) * (at_hi - level) < 0:
            continue
        try:
            root = brentq(crossing, lo, hi, args=(level,), xtol=xtol, maxiter=200)
        except (ValueError, RuntimeError):
            continue
        points.append(float(root))
    return sorted(points)


def _integrate_kernel(
    kernel: Callable[[float], float],
    log_g: Callable[[float], float],
    lo: float,
    hi: float,
    eps: float,
    settings: IntegrationSettings,
) -> IntegrationResult:
    return integrate_piecewise(
        lambda theta: kernel(log_g(theta)), _breakpoints(log_g, lo, hi), eps, settings.max_depth
    )


# alpha != 1


def _general_log_v(theta: float, coefficients: GeneralCoefficients, theta0: float) -> float:
    alpha = coefficients.alpha
    sin_term = math.sin(alpha * (theta + theta0))
    if sin_term <= 0:
        return math.inf if alpha > 1 else -math.inf
    cos_theta = math.cos(theta)
    if cos_theta <= 0:
        return -math.inf if alpha > 1 else math.inf
    cos_term = math.cos(alpha * theta0 + (alpha - 1.0) * theta)
    if cos_term <= 0:
        return -math.inf
    log_cos_theta = math.log(cos_theta)
    return (
        coefficients.log_cos_term
        + coefficients.a_factor * (log_cos_theta - math.log(sin_term))
        + math.log(cos_term)
        - log_cos_theta
    )


def _one_sided_log_v(phi: float, coefficients: GeneralCoefficients) -> float:
    """``log V`` at ``theta = phi - pi/2`` for ``alpha < 1`` and ``theta0 == pi/2``."""
    alpha = coefficients.alpha
    sin_phi = math.sin(phi)
    sin_alpha_phi = math.sin(alpha * phi)
    sin_rest = math.sin((1.0 - alpha) * phi)
    if sin_phi <= 0 or sin_alpha_phi <= 0 or sin_rest <= 0:
        if phi < _HALF_PI:
            # limit at phi -> 0
            return (
                coefficients.log_cos_term
                - coefficients.a_factor * math.log(alpha)
                + math.log1p(-alpha)
            )
        return math.inf
    log_sin_phi = math.log(sin_phi)
    return (
        coefficients.log_cos_term
        + coefficients.a_factor * (log_sin_phi - math.log(sin_alpha_phi))
        + math.log(sin_rest)
        - log_sin_phi
    )


def _general_log_g(
    z: float, coefficients: GeneralCoefficients, theta0: float
) -> tuple[Callable[[float], float], float, float]:
    """``log g`` for ``z > 0`` with the bounds of its integration variable."""
    log_z_term = coefficients.a_factor * math.log(z)
    if theta0 == _HALF_PI:

        def one_sided_log_g(phi: float) -> float:
            return log_z_term + _one_sided_log_v(phi, coefficients)

        return one_sided_log_g, 0.0, math.pi

    def log_g(theta: float) -> float:
        return log_z_term + _general_log_v(theta, coefficients, theta0)

    return log_g, -theta0, _HALF_PI


def general_density_at_zero(coefficients: GeneralCoefficients) -> float:
    """``f(0) = Γ(1 + 1/α) cos(θ0) / (π (1 + ζ²)^(1/(2α)))``."""
    if abs(coefficients.theta0) >= _HALF_PI:
        return 0.0
    cos_theta0 = math.cos(coefficients.theta0)
    if cos_theta0 <= 0:
        return 0.0
    log_density = (
        log_gamma(1.0 + coefficients.alpha_inv)
        + math.log(cos_theta0)
        - _LOG_PI
        - math.log(coefficients.b_factor)
    )
    return math.exp(min(log_density, _LOG_MAX))


def _general_pdf_positive(
    z: float, coefficients: GeneralCoefficients, theta0: float, settings: IntegrationSettings
) -> float:
    if -theta0 >= _HALF_PI:
        return 0.0
    log_g, lo, hi = _general_log_g(z, coefficients, theta0)
    eps = max(settings.target_abs_error * z / coefficients.pdf_coef, _MIN_DENSITY_EPS)
    result = _integrate_kernel(_density_kernel, log_g, lo, hi, eps, settings)
    if result.failed:
        return 0.0
    return max(coefficients.pdf_coef * result.value / z, 0.0)


def general_pdf(
    z: float,
    coefficients: GeneralCoefficients,
    settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS,
) -> float:
    """
    Density of the standardized ``alpha != 1`` stable law at ``z``.

    Parameters
    ----------
    z : float
        Standardized point ``(x - mu) / sigma``.
    coefficients : GeneralCoefficients
        Constants derived from ``(alpha, beta)``.
    settings : IntegrationSettings
        Integrator tolerances.

    Returns
    -------
    float
        Density value, ``>= 0``.
    """
    if math.isnan(z):
        return math.nan
    if math.isinf(z):
        return 0.0
    if abs(z) < ZERO_TOLERANCE:
        return general_density_at_zero(coefficients)
    if z > 0:
        return _general_pdf_positive(z, coefficients, coefficients.theta0, settings)
    return _general_pdf_positive(-z, coefficients, -coefficients.theta0, settings)


def _general_cdf_positive(
    z: float, coefficients: GeneralCoefficients, theta0: float, settings: IntegrationSettings
) -> float:
    alpha = coefficients.alpha
    c1 = (_HALF_PI - theta0) / math.pi if alpha < 1 else 1.0
    if -theta0 >= _HALF_PI:
        return c1
    log_g, lo, hi = _general_log_g(z, coefficients, theta0)
    eps = settings.target_abs_error * math.pi
    result = _integrate_kernel(_tail_kernel, log_g, lo, hi, eps, settings)
    if result.failed:
        return c1
    return c1 + math.copysign(1.0, 1.0 - alpha) / math.pi * result.value


def general_cdf(
    z: float,
    coefficients: GeneralCoefficients,
    settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS,
) -> float:
    """
    Distribution function of the standardized ``alpha != 1`` stable law.

    ``F(0) = (pi/2 - theta0) / pi``; for ``z < 0`` the value is
    ``1 - F(-z)`` of the law with opposite skewness.
    """
    if math.isnan(z):
        return math.nan
    if math.isinf(z):
        return 1.0 if z > 0 else 0.0
    if abs(z) < ZERO_TOLERANCE:
        return _clip_unit((_HALF_PI - coefficients.theta0) / math.pi)
    if z > 0:
        return _clip_unit(_general_cdf_positive(z, coefficients, coefficients.theta0, settings))
    return _clip_unit(
        1.0 - _general_cdf_positive(-z, coefficients, -coefficients.theta0, settings)
    )


# alpha == 1


def _alpha_one_log_v(theta: float, beta: float) -> float:
    cos_theta = math.cos(theta)
    if cos_theta <= 0:
        return -math.inf if theta < 0 else math.inf
    shifted = _HALF_PI + beta * theta
    if shifted <= 0:
        # only reached at theta == -pi/2 with beta == 1, where V -> 2/(pi e)
        return _LOG_2_OVER_PI - 1.0
    log_ratio = math.log(shifted) - math.log(cos_theta)
    return _LOG_2_OVER_PI + log_ratio + shifted * math.tan(theta) / beta


def _alpha_one_log_g(z: float, beta: float) -> Callable[[float], float]:
    log_z_term = -_HALF_PI * z / beta

    def log_g(theta: float) -> float:
        return log_z_term + _alpha_one_log_v(theta, beta)

    return log_g


def alpha_one_pdf(
    z: float, beta: float, settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS
) -> float:
    """
    Density of the standardized ``alpha == 1`` stable law with ``beta != 0``.

    ``f(z) = 1 / (2|beta|) * ∫ g exp(-g) dθ`` over ``[-pi/2, pi/2]``.
    """
    if math.isnan(z):
        return math.nan
    if math.isinf(z) or beta == 0:
        return 0.0
    if beta < 0:
        z, beta = -z, -beta
    eps = max(settings.target_abs_error * 2.0 * beta, _MIN_DENSITY_EPS)
    result = _integrate_kernel(
        _density_kernel, _alpha_one_log_g(z, beta), -_HALF_PI, _HALF_PI, eps, settings
    )
    if result.failed:
        return 0.0
    return max(result.value / (2.0 * beta), 0.0)


def _alpha_one_cdf_positive_beta(z: float, beta: float, settings: IntegrationSettings) -> float:
    eps = settings.target_abs_error * math.pi
    result = _integrate_kernel(
        _tail_kernel, _alpha_one_log_g(z, beta), -_HALF_PI, _HALF_PI, eps, settings
    )
    if result.failed:
        return 0.0 if z < 0 else 1.0
    return result.value / math.pi


def alpha_one_cdf(
    z: float, beta: float, settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS
) -> float:
    """
    Distribution function of the standardized ``alpha == 1`` stable law.

    For ``beta < 0`` the value is ``1 - F(-z)`` of the law with ``-beta``.
    """
    if math.isnan(z):
        return math.nan
    if math.isinf(z):
        return 1.0 if z > 0 else 0.0
    if beta > 0:
        return _clip_unit(_alpha_one_cdf_positive_beta(z, beta, settings))
    return _clip_unit(1.0 - _alpha_one_cdf_positive_beta(-z, -beta, settings))


__all__ = [
    "ZERO_TOLERANCE",
    "general_density_at_zero",
    "general_pdf",
    "general_cdf",
    "alpha_one_pdf",
    "alpha_one_cdf",
]
