"""
Distribution families of PySATL Stable.

This package provides the parametrization helpers shared by all families and
the built-in distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import *
from .builtins import __all__ as _builtins_all
from .parametrizations import Parametrization, clamp, finite_or, positive

__all__ = [
    "Parametrization",
    "clamp",
    "positive",
    "finite_or",
    *_builtins_all,
]

del _builtins_all
