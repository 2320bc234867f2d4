"""
Built-in discrete distribution families.

This module contains implementations of discrete distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stable.families.builtins.discrete.poisson import (
    PoissonDistribution,
    PoissonParameters,
)

__all__ = [
    "PoissonDistribution",
    "PoissonParameters",
]
