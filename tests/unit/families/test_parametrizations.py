from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math
import sys

import pytest

from pysatl_stable.config import MIN_POSITIVE
from pysatl_stable.families.builtins.continuous.normal import NormalParameters
from pysatl_stable.families.builtins.continuous.stable import StableParameters
from pysatl_stable.families.builtins.discrete.poisson import PoissonParameters
from pysatl_stable.families.parametrizations import clamp, finite_or, positive


class TestClampHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [(-3.0, -1.0), (0.25, 0.25), (7.0, 1.0), (math.inf, 1.0), (math.nan, 0.0)],
    )
    def test_clamp(self, value, expected):
        assert clamp(value, -1.0, 1.0, fallback=0.0) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.0, 2.0),
            (0.0, MIN_POSITIVE),
            (-5.0, MIN_POSITIVE),
            (math.nan, MIN_POSITIVE),
            (math.inf, sys.float_info.max),
        ],
    )
    def test_positive(self, value, expected):
        assert positive(value) == expected

    def test_positive_custom_fallback(self):
        assert positive(-1.0, fallback=1.0) == 1.0

    @pytest.mark.parametrize(
        "value, expected", [(3.5, 3.5), (math.nan, 0.0), (math.inf, 0.0), (-math.inf, 0.0)]
    )
    def test_finite_or(self, value, expected):
        assert finite_or(value, 0.0) == expected


class TestParametrization:
    def test_name_and_parameters(self):
        parameters = StableParameters.clamped(1.5, 0.3, 2.0, 1.0)
        assert parameters.name == "S1"
        assert parameters.parameters == {"alpha": 1.5, "beta": 0.3, "sigma": 2.0, "mu": 1.0}

    def test_frozen(self):
        parameters = NormalParameters.clamped(0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            parameters.mu = 2.0  # type: ignore[misc]

    def test_equality(self):
        assert PoissonParameters.clamped(-1.0) == PoissonParameters.clamped(math.nan)
        assert PoissonParameters.clamped(-1.0).rate == 1.0
