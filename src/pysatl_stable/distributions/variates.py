"""
Primitive Variate Sources
=========================

The only source of randomness in the library. Distributions receive a
:class:`VariateSource` at construction time and draw uniform, exponential,
normal and gamma variates from it.

Notes
-----
- :class:`VariateSource` is a subset of the :class:`numpy.random.Generator`
  API, so any generator returned by :func:`numpy.random.default_rng`
  satisfies it directly.
- Draws are assumed independent across calls and across variate kinds.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pysatl_stable.types import FloatArray


@runtime_checkable
class VariateSource(Protocol):
    """Protocol for primitive random variate generators."""

    def random(self, size: Any = None) -> Any:
        """Uniform draws on ``[0, 1)``."""
        ...

    def exponential(self, scale: float = 1.0, size: Any = None) -> Any:
        """Exponential draws with mean ``scale`` (rate ``1 / scale``)."""
        ...

    def standard_normal(self, size: Any = None) -> Any:
        """Standard normal draws."""
        ...

    def standard_gamma(self, shape: float, size: Any = None) -> Any:
        """Gamma draws with unit scale."""
        ...


VariateSourceLike: TypeAlias = VariateSource | int | None


def resolve_variate_source(source: VariateSourceLike = None) -> VariateSource:
    """
    Turn a seed or a generator into a :class:`VariateSource`.

    Parameters
    ----------
    source : VariateSource, int or None
        ``None`` creates a fresh ``numpy`` generator, an integer seeds one,
        anything else is returned unchanged.
    """
    if source is None or isinstance(source, int | np.integer):
        return np.random.default_rng(source)
    return source


def uniform_angle(source: VariateSource, size: int) -> FloatArray:
    """Draw ``size`` variates from ``Uniform(-pi/2, pi/2)``."""
    return np.asarray(math.pi * (source.random(size) - 0.5), dtype=np.float64)


def standard_exponential(source: VariateSource, size: int) -> FloatArray:
    """Draw ``size`` variates from ``Exponential(1)``."""
    return np.asarray(source.exponential(1.0, size), dtype=np.float64)


def standard_normal(source: VariateSource, size: int) -> FloatArray:
    """Draw ``size`` standard normal variates."""
    return np.asarray(source.standard_normal(size), dtype=np.float64)


def chi_squared(source: VariateSource, degree: float | FloatArray, size: int) -> FloatArray:
    """
    Draw ``size`` chi-squared variates (``2 * Gamma(degree / 2)``).

    ``degree`` is either a scalar or an array of ``size`` per-draw degrees;
    non-positive degrees yield ``0``.
    """
    shape = np.broadcast_to(0.5 * np.asarray(degree, dtype=np.float64), (size,))
    draws = np.zeros(size, dtype=np.float64)
    active = shape > 0
    if np.all(active):
        draws[:] = source.standard_gamma(shape)
    elif np.any(active):
        draws[active] = source.standard_gamma(shape[active])
    return 2.0 * draws


__all__ = [
    "VariateSource",
    "VariateSourceLike",
    "resolve_variate_source",
    "uniform_angle",
    "standard_exponential",
    "standard_normal",
    "chi_squared",
]
