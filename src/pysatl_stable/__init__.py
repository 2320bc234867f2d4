"""
PySATL Stable
=============

Univariate probability distributions built around a stable-distribution
engine: regime classification, Chambers–Mallows–Stuck sampling, density and
distribution function through numerical integration, together with the
special-function toolkit and the adaptive integrator they rely on.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .numerics import *
from .numerics import __all__ as _numerics_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-stable")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_numerics_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _family_all
del _numerics_all
del _types_all
