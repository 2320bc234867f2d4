"""
Built-in continuous distribution families.

This module contains implementations of continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stable.families.builtins.continuous.cauchy import (
    CauchyDistribution,
    CauchyParameters,
)
from pysatl_stable.families.builtins.continuous.levy import LevyDistribution, LevyParameters
from pysatl_stable.families.builtins.continuous.noncentral_chi_squared import (
    NoncentralChiSquaredDistribution,
    NoncentralChiSquaredParameters,
)
from pysatl_stable.families.builtins.continuous.normal import (
    NormalDistribution,
    NormalParameters,
)
from pysatl_stable.families.builtins.continuous.stable import (
    Regime,
    StableDistribution,
    StableParameters,
)

__all__ = [
    "NormalDistribution",
    "NormalParameters",
    "CauchyDistribution",
    "CauchyParameters",
    "LevyDistribution",
    "LevyParameters",
    "StableDistribution",
    "StableParameters",
    "Regime",
    "NoncentralChiSquaredDistribution",
    "NoncentralChiSquaredParameters",
]
