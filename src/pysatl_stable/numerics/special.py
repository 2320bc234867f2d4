"""
Special Functions
=================

Scalar special functions used by the distributions that have no elementary
closed form:

- :func:`gamma`, :func:`log_gamma`: gamma function and its logarithm;
- :func:`regularized_incomplete_gamma_lower`,
  :func:`regularized_incomplete_gamma_upper`: ``P(s, x)`` and ``Q(s, x)``;
- :func:`modified_bessel_first_kind`, :func:`log_modified_bessel_first_kind`:
  ``I_nu(x)`` and ``log I_nu(x)``;
- :func:`log_factorial`: ``log(n!)``.

Notes
-----
- All functions are pure and deterministic.
- Evaluations are delegated to :mod:`scipy.special`; this module adds the
  domain contract. Arguments outside the domain raise
  :class:`~pysatl_stable.errors.DomainError` instead of silently
  returning ``nan``/``inf``.
- ``log I_nu(x)`` is computed from the exponentially scaled Bessel function,
  so it stays finite for arguments far beyond the overflow threshold of
  ``I_nu`` itself.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Final

from scipy import special as _sp_special

from pysatl_stable.errors import DomainError

_LOG_FACTORIAL_TABLE_SIZE: Final = 256


def _build_log_factorial_table() -> tuple[float, ...]:
    values = [0.0]
    for n in range(1, _LOG_FACTORIAL_TABLE_SIZE):
        values.append(values[-1] + math.log(n))
    return tuple(values)


LOG_FACTORIAL_TABLE: Final[tuple[float, ...]] = _build_log_factorial_table()
"""``log(n!)`` for ``0 <= n < 256``, computed once at import."""


def _is_non_positive_integer(x: float) -> bool:
    return x <= 0 and x == math.floor(x)


def gamma(x: float) -> float:
    """
    Gamma function.

    Parameters
    ----------
    x : float
        Argument; any real number except the non-positive integers.

    Returns
    -------
    float
        ``Γ(x)``; ``inf`` once the result exceeds the double range.

    Raises
    ------
    DomainError
        If ``x`` is NaN or a non-positive integer (pole of ``Γ``).
    """
    if math.isnan(x) or _is_non_positive_integer(x):
        raise DomainError(f"gamma is undefined at x={x}")
    return float(_sp_special.gamma(x))


def log_gamma(x: float) -> float:
    """
    Logarithm of the absolute value of the gamma function.

    Raises
    ------
    DomainError
        If ``x`` is NaN or a non-positive integer.
    """
    if math.isnan(x) or _is_non_positive_integer(x):
        raise DomainError(f"log_gamma is undefined at x={x}")
    return float(_sp_special.gammaln(x))


def _check_incomplete_gamma_args(s: float, x: float) -> None:
    if not s > 0:
        raise DomainError(f"incomplete gamma requires s > 0, got s={s}")
    if not x >= 0:
        raise DomainError(f"incomplete gamma requires x >= 0, got x={x}")


def regularized_incomplete_gamma_lower(s: float, x: float) -> float:
    """
    Regularized lower incomplete gamma function ``P(s, x)``.

    ``P(s, x) = γ(s, x) / Γ(s)``, the cdf of a ``Gamma(s, 1)`` variable at ``x``.

    Parameters
    ----------
    s : float
        Shape, ``s > 0``.
    x : float
        Upper integration limit, ``x >= 0`` (``inf`` allowed).

    Raises
    ------
    DomainError
        If ``s <= 0`` or ``x < 0`` (or either is NaN).
    """
    _check_incomplete_gamma_args(s, x)
    return float(_sp_special.gammainc(s, x))


def regularized_incomplete_gamma_upper(s: float, x: float) -> float:
    """
    Regularized upper incomplete gamma function ``Q(s, x) = 1 - P(s, x)``.

    Computed directly (not as ``1 - P``), so small upper tails keep their
    relative precision.

    Raises
    ------
    DomainError
        If ``s <= 0`` or ``x < 0`` (or either is NaN).
    """
    _check_incomplete_gamma_args(s, x)
    return float(_sp_special.gammaincc(s, x))


def modified_bessel_first_kind(x: float, nu: float) -> float:
    """
    Modified Bessel function of the first kind ``I_nu(x)``.

    Overflows to ``inf`` for large ``x`` (``I_0(x) ~ e^x``); densities should
    use :func:`log_modified_bessel_first_kind` instead.

    Raises
    ------
    DomainError
        If ``x < 0`` or either argument is NaN.
    """
    if not x >= 0 or math.isnan(nu):
        raise DomainError(f"modified Bessel function requires x >= 0, got x={x}, nu={nu}")
    return float(_sp_special.iv(nu, x))


def log_modified_bessel_first_kind(x: float, nu: float) -> float:
    """
    Logarithm of the modified Bessel function of the first kind.

    Uses ``log I_nu(x) = log(I_nu(x) e^{-x}) + x`` with the exponentially
    scaled function, which is finite for every finite ``x``.

    Returns
    -------
    float
        ``log I_nu(x)``; ``-inf`` where ``I_nu(x) == 0`` (``x = 0``, ``nu > 0``).

    Raises
    ------
    DomainError
        If ``x < 0`` or either argument is NaN.
    """
    if not x >= 0 or math.isnan(nu):
        raise DomainError(f"modified Bessel function requires x >= 0, got x={x}, nu={nu}")
    if x == 0:
        if nu == 0:
            return 0.0
        if nu > 0 or nu == math.floor(nu):
            return -math.inf
        return math.inf
    scaled = float(_sp_special.ive(nu, x))
    if scaled <= 0:
        # negative non-integer orders change sign; only the magnitude is needed
        scaled = abs(scaled)
        if scaled == 0:
            return -math.inf
    return math.log(scaled) + x


def log_factorial(n: int) -> float:
    """
    Logarithm of ``n!``.

    Raises
    ------
    DomainError
        If ``n`` is negative.
    """
    if n < 0:
        raise DomainError(f"factorial is undefined for n={n}")
    if n < _LOG_FACTORIAL_TABLE_SIZE:
        return LOG_FACTORIAL_TABLE[int(n)]
    return float(_sp_special.gammaln(n + 1))


__all__ = [
    "LOG_FACTORIAL_TABLE",
    "gamma",
    "log_gamma",
    "regularized_incomplete_gamma_lower",
    "regularized_incomplete_gamma_upper",
    "modified_bessel_first_kind",
    "log_modified_bessel_first_kind",
    "log_factorial",
]
