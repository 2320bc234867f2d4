"""
Adaptive Integration
====================

Recursive adaptive Simpson quadrature with explicit error control and a
structural recursion cap:

- :class:`IntegrationResult`: value together with the budget it was
  computed under;
- :func:`adaptive_simpson`: the quadrature itself;
- :func:`integrate`: scalar convenience wrapper;
- :func:`integrate_piecewise`: sum over consecutive breakpoints.

Notes
-----
- A subinterval is accepted when ``|S1 + S2 - S| < 15 * eps`` and its value
  is Richardson-extrapolated to ``S1 + S2 + (S1 + S2 - S) / 15``; otherwise
  both halves are refined with ``eps / 2``.
- At depth 0 the current estimate is accepted unconditionally, so the
  number of integrand evaluations never exceeds ``2 ** (max_depth + 2) + 1``.
- A non-finite integrand value aborts the integration; the result is
  flagged as ``failed`` and its value is ``nan``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_stable.config import DEFAULT_INTEGRATION_SETTINGS
from pysatl_stable.errors import IntegrationImprecisionWarning

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_stable.types import ScalarFunc


@dataclass(frozen=True, slots=True)
class IntegrationResult:
    """
    Outcome of one adaptive integration.

    Parameters
    ----------
    value : float
        Integral estimate (``nan`` if the integration failed).
    lower, upper : float
        Integration bounds.
    target_abs_error : float
        Requested absolute error.
    max_depth : int
        Recursion budget.
    error_estimate : float
        Sum of the local error estimates ``|S1 + S2 - S| / 15``.
    evaluations : int
        Number of integrand evaluations.
    converged : bool
        ``True`` if every subinterval met its tolerance before the depth cap.
    failed : bool
        ``True`` if the integrand produced a non-finite value.
    """

    value: float
    lower: float
    upper: float
    target_abs_error: float
    max_depth: int
    error_estimate: float = 0.0
    evaluations: int = 0
    converged: bool = True
    failed: bool = False


class _NonFiniteSample(ArithmeticError):
    """Raised internally when the integrand returns ``nan`` or ``inf``."""


class _Tally:
    __slots__ = ("error", "evaluations", "exhausted")

    def __init__(self) -> None:
        self.error = 0.0
        self.evaluations = 0
        self.exhausted = False


def adaptive_simpson(
    f: ScalarFunc,
    a: float,
    b: float,
    target_abs_error: float = DEFAULT_INTEGRATION_SETTINGS.target_abs_error,
    max_depth: int = DEFAULT_INTEGRATION_SETTINGS.max_depth,
) -> IntegrationResult:
    """
    Integrate ``f`` over ``[a, b]`` with adaptive Simpson's rule.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar integrand.
    a, b : float
        Finite integration bounds; ``a > b`` yields the negated integral.
    target_abs_error : float
        Requested absolute error of the whole integral.
    max_depth : int
        Maximum recursion depth.

    Returns
    -------
    IntegrationResult
        Estimate together with convergence diagnostics.
    """
    if a == b:
        return IntegrationResult(0.0, a, b, target_abs_error, max_depth)

    tally = _Tally()

    def _eval(x: float) -> float:
        tally.evaluations += 1
        y = float(f(x))
        if not math.isfinite(y):
            raise _NonFiniteSample(x)
        return y

    def _refine(
        lo: float,
        hi: float,
        f_lo: float,
        f_mid: float,
        f_hi: float,
        whole: float,
        eps: float,
        depth: int,
    ) -> float:
        mid = 0.5 * (lo + hi)
        left_mid = 0.5 * (lo + mid)
        right_mid = 0.5 * (mid + hi)
        f_left_mid = _eval(left_mid)
        f_right_mid = _eval(right_mid)

        width = hi - lo
        left = width * (f_lo + 4.0 * f_left_mid + f_mid) / 12.0
        right = width * (f_mid + 4.0 * f_right_mid + f_hi) / 12.0
        delta = left + right - whole

        if abs(delta) <= 15.0 * eps or depth <= 0:
            if depth <= 0 and abs(delta) > 15.0 * eps:
                tally.exhausted = True
            tally.error += abs(delta) / 15.0
            return left + right + delta / 15.0

        return _refine(
            lo, mid, f_lo, f_left_mid, f_mid, left, 0.5 * eps, depth - 1
        ) + _refine(mid, hi, f_mid, f_right_mid, f_hi, right, 0.5 * eps, depth - 1)

    try:
        f_a = _eval(a)
        f_b = _eval(b)
        f_m = _eval(0.5 * (a + b))
        whole = (b - a) * (f_a + 4.0 * f_m + f_b) / 6.0
        value = _refine(a, b, f_a, f_m, f_b, whole, target_abs_error, max_depth)
    except _NonFiniteSample:
        return IntegrationResult(
            math.nan,
            a,
            b,
            target_abs_error,
            max_depth,
            error_estimate=math.inf,
            evaluations=tally.evaluations,
            converged=False,
            failed=True,
        )

    return IntegrationResult(
        value,
        a,
        b,
        target_abs_error,
        max_depth,
        error_estimate=tally.error,
        evaluations=tally.evaluations,
        converged=not tally.exhausted,
    )


def _warn_if_imprecise(result: IntegrationResult) -> None:
    if not result.converged and not result.failed:
        warnings.warn(
            f"Adaptive integration over [{result.lower}, {result.upper}] reached depth "
            f"{result.max_depth} before the target error {result.target_abs_error:g}; "
            f"estimated error is {result.error_estimate:g}",
            IntegrationImprecisionWarning,
            stacklevel=3,
        )


def integrate(
    f: ScalarFunc,
    a: float,
    b: float,
    target_abs_error: float = DEFAULT_INTEGRATION_SETTINGS.target_abs_error,
    max_depth: int = DEFAULT_INTEGRATION_SETTINGS.max_depth,
) -> float:
    """
    Integrate ``f`` over ``[a, b]`` and return only the value.

    Emits :class:`~pysatl_stable.errors.IntegrationImprecisionWarning` when
    the recursion budget was exhausted; returns ``nan`` if the integrand
    produced a non-finite value.
    """
    result = adaptive_simpson(f, a, b, target_abs_error, max_depth)
    _warn_if_imprecise(result)
    return result.value


def integrate_piecewise(
    f: ScalarFunc,
    breakpoints: Iterable[float],
    target_abs_error: float = DEFAULT_INTEGRATION_SETTINGS.target_abs_error,
    max_depth: int = DEFAULT_INTEGRATION_SETTINGS.max_depth,
) -> IntegrationResult:
    """
    Integrate ``f`` over consecutive pieces ``[p_i, p_{i+1}]`` and sum them.

    The error budget is split evenly between the pieces. Useful when the
    integrand is concentrated in a small part of a long interval, where a
    single Simpson panel could miss it entirely.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar integrand.
    breakpoints : Iterable[float]
        Non-decreasing sequence of at least two points.

    Returns
    -------
    IntegrationResult
        Combined result over ``[breakpoints[0], breakpoints[-1]]``.
    """
    points = list(breakpoints)
    if len(points) < 2:
        raise ValueError("integrate_piecewise needs at least two breakpoints")

    pieces = len(points) - 1
    eps = target_abs_error / pieces
    total = 0.0
    error = 0.0
    evaluations = 0
    converged = True
    for lo, hi in zip(points[:-1], points[1:], strict=True):
        piece = adaptive_simpson(f, lo, hi, eps, max_depth)
        if piece.failed:
            return IntegrationResult(
                math.nan,
                points[0],
                points[-1],
                target_abs_error,
                max_depth,
                error_estimate=math.inf,
                evaluations=evaluations + piece.evaluations,
                converged=False,
                failed=True,
            )
        total += piece.value
        error += piece.error_estimate
        evaluations += piece.evaluations
        converged = converged and piece.converged

    result = IntegrationResult(
        total,
        points[0],
        points[-1],
        target_abs_error,
        max_depth,
        error_estimate=error,
        evaluations=evaluations,
        converged=converged,
    )
    _warn_if_imprecise(result)
    return result


__all__ = [
    "IntegrationResult",
    "adaptive_simpson",
    "integrate",
    "integrate_piecewise",
]
