from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

pytest.importorskip("scipy")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20250417)


@pytest.fixture
def levy_stable_s1() -> Generator[Any, Any, None]:
    """``scipy.stats.levy_stable`` switched to the S1 parametrization for one test."""
    from scipy.stats import levy_stable

    previous = levy_stable.parameterization
    levy_stable.parameterization = "S1"
    yield levy_stable
    levy_stable.parameterization = previous
