"""
Parametrization base class and clamping helpers.

Distribution parameters are stored as frozen dataclasses derived from
:class:`Parametrization`. Raw user input never fails: every family builds its
parameters through a ``clamped`` constructor that moves out-of-range values
to the nearest valid one using the helpers below.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from abc import ABC
from dataclasses import fields
from typing import TYPE_CHECKING

from pysatl_stable.config import MIN_POSITIVE

if TYPE_CHECKING:
    from typing import Any, ClassVar


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses are frozen dataclasses; ``__param_name__`` names the
    parametrization (e.g. ``"S1"`` for the stable family).
    """

    __param_name__: ClassVar[str] = "base"

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


def clamp(value: float, lower: float, upper: float, *, fallback: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; NaN maps to ``fallback``."""
    if math.isnan(value):
        return fallback
    return min(max(value, lower), upper)


def positive(value: float, *, fallback: float = MIN_POSITIVE) -> float:
    """Return ``value`` if it is strictly positive and finite, else the nearest valid value."""
    if not value > 0:
        return fallback
    return min(value, sys.float_info.max)


def finite_or(value: float, fallback: float) -> float:
    """Return ``value`` if it is finite, else ``fallback``."""
    return value if math.isfinite(value) else fallback


__all__ = [
    "Parametrization",
    "clamp",
    "positive",
    "finite_or",
]
