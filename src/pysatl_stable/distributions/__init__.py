"""
Distributions subpackage

Interfaces and shared machinery for the probability distributions of
PySATL Stable:

- distribution protocols (:mod:`.distribution`);
- supports (:mod:`.support`);
- numerical conversions between characteristics (:mod:`.fitters`);
- primitive variate sources (:mod:`.variates`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import ContinuousDistribution, DiscreteDistribution, Distribution
from .fitters import cdf_from_pdf, check_probability, quantile_from_cdf
from .support import ContinuousSupport, CountingSupport, Support
from .variates import VariateSource, VariateSourceLike, resolve_variate_source

__all__ = [
    # protocols
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    # supports
    "Support",
    "ContinuousSupport",
    "CountingSupport",
    # fitters
    "cdf_from_pdf",
    "check_probability",
    "quantile_from_cdf",
    # variates
    "VariateSource",
    "VariateSourceLike",
    "resolve_variate_source",
]
