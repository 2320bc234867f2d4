"""
Numerical Conversions Between Characteristics
=============================================

Fitters that build a missing scalar characteristic from an available one:

- :func:`cdf_from_pdf`: integrates a density with the adaptive Simpson
  integrator;
- :func:`quantile_from_cdf`: inverts a monotone cdf by bracket expansion
  and bisection.

Notes
-----
- Built callables are scalar (``float -> float``).
- Values returned by :func:`cdf_from_pdf` are clipped to ``[0, 1]``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite, isnan
from typing import TYPE_CHECKING

from pysatl_stable.config import DEFAULT_INTEGRATION_SETTINGS
from pysatl_stable.numerics.integration import integrate_piecewise

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pysatl_stable.config import IntegrationSettings
    from pysatl_stable.types import ScalarFunc


def check_probability(p: float) -> None:
    """
    Validate a probability argument of a quantile function.

    Raises
    ------
    ValueError
        If ``p`` is NaN or outside ``[0, 1]``.
    """
    if isnan(p) or p < 0.0 or p > 1.0:
        raise ValueError("Probability must be in [0, 1]")


def cdf_from_pdf(
    pdf: ScalarFunc,
    lower: float,
    *,
    breakpoints: Callable[[float], Sequence[float]] | None = None,
    settings: IntegrationSettings = DEFAULT_INTEGRATION_SETTINGS,
) -> ScalarFunc:
    """
    Build a scalar ``cdf`` by integrating ``pdf`` from ``lower``.

    Parameters
    ----------
    pdf : Callable[[float], float]
        Density; its mass below ``lower`` is assumed negligible.
    lower : float
        Finite lower integration bound.
    breakpoints : Callable[[float], Sequence[float]], optional
        Returns interior split points for an upper bound ``x``. Points
        outside ``(lower, x)`` are ignored.
    settings : IntegrationSettings
        Integrator tolerances.

    Returns
    -------
    Callable[[float], float]
        ``x -> P(X <= x)``; ``nan`` results of the integrator map to ``0``.
    """

    def _cdf(x: float) -> float:
        if isnan(x):
            return float("nan")
        if x <= lower:
            return 0.0
        if x == float("inf"):
            return 1.0
        interior = sorted(p for p in (breakpoints(x) if breakpoints else ()) if lower < p < x)
        result = integrate_piecewise(
            pdf, [lower, *interior, x], settings.target_abs_error, settings.max_depth
        )
        if result.failed:
            return 0.0
        return min(max(result.value, 0.0), 1.0)

    return _cdf


def quantile_from_cdf(
    cdf: ScalarFunc,
    *,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 200,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``quantile`` from a scalar ``cdf`` using bracket expansion
    and a bisection-like search.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Monotone cdf in ``[-inf, +inf] -> [0, 1]``.
    x0 : float, default 0.0
        Initial bracket center (typically the location parameter).
    init_step : float, default 1.0
        Initial half-width for the bracket (typically the scale parameter).
    expand_factor : float, default 2.0
        Multiplicative factor for exponential bracket growth.
    max_expand : int, default 200
        Maximum expansions while searching for a valid bracket.
    x_tol : float, default 1e-12
        Relative tolerance in ``x`` for stopping criterion.
    max_iter : int, default 200
        Maximum iterations for the bisection-like refinement.

    Returns
    -------
    Callable[[float], float]
        Scalar ``quantile`` such that ``cdf(quantile(q)) ≈ q``.

    Notes
    -----
    Tail queries are clamped: ``q <= 0`` maps to ``-inf``, ``q >= 1`` maps
    to ``+inf``.
    """

    def _expand_bracket(q: float) -> tuple[float, float]:
        step = init_step
        left = x0 - step
        right = x0 + step
        f_left = float(cdf(left))
        f_right = float(cdf(right))

        for _ in range(max_expand):
            if f_left <= q < f_right:
                break
            grow_left = q < f_left
            grow_right = q >= f_right
            step *= expand_factor
            if grow_left:
                left -= step
                f_left = float(cdf(left))
            if grow_right:
                right += step
                f_right = float(cdf(right))

        return left, right

    def _quantile(q: float) -> float:
        if q <= 0.0:
            return float("-inf")
        if q >= 1.0:
            return float("inf")

        left, right = _expand_bracket(q)
        if not (isfinite(left) and isfinite(right)):
            return left if not isfinite(left) else right

        for _ in range(max_iter):
            if right - left <= x_tol * (1.0 + max(abs(left), abs(right))):
                break
            middle = 0.5 * (left + right)
            f_middle = float(cdf(middle))
            if q < f_middle:
                right = middle
            else:
                left = middle

        return left

    return _quantile


__all__ = [
    "check_probability",
    "cdf_from_pdf",
    "quantile_from_cdf",
]
