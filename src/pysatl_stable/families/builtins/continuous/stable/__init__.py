"""
Stable distribution family.

This package contains the stable-distribution engine: parameter clamping and
regime classification, coefficient bundles, integral representations and
the distribution itself.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


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
from pysatl_stable.families.builtins.continuous.stable.distribution import StableDistribution

__all__ = [
    "StableDistribution",
    "StableParameters",
    "Regime",
    "classify_regime",
    "ClosedFormCoefficients",
    "GeneralCoefficients",
    "AlphaOneCoefficients",
    "StableCoefficients",
    "derive_coefficients",
]
