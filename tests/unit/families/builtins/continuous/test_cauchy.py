"""
Tests for Cauchy Distribution
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import cauchy

from pysatl_stable.families.builtins.continuous.cauchy import CauchyDistribution
from pysatl_stable.types import FamilyName

from .base import BaseDistributionTest


class TestCauchyDistribution(BaseDistributionTest):
    """Test suite for Cauchy distribution."""

    def setup_method(self):
        self.cauchy_dist_example = CauchyDistribution(mu=-1.0, sigma=0.5, source=11)

    def test_properties(self):
        assert self.cauchy_dist_example.family_name == FamilyName.CAUCHY
        assert self.cauchy_dist_example.parameters.name == "locScale"
        assert self.cauchy_dist_example.median() == -1.0

    def test_pdf_cdf_sf(self):
        points = np.linspace(-30.0, 30.0, 61)
        self.assert_arrays_almost_equal(
            self.evaluate(self.cauchy_dist_example.pdf, points),
            cauchy.pdf(points, loc=-1.0, scale=0.5),
        )
        self.assert_arrays_almost_equal(
            self.evaluate(self.cauchy_dist_example.cdf, points),
            cauchy.cdf(points, loc=-1.0, scale=0.5),
        )
        self.assert_arrays_almost_equal(
            self.evaluate(self.cauchy_dist_example.sf, points),
            cauchy.sf(points, loc=-1.0, scale=0.5),
        )

    def test_cdf_limits(self):
        assert self.cauchy_dist_example.cdf(-math.inf) == 0.0
        assert self.cauchy_dist_example.cdf(math.inf) == 1.0

    @pytest.mark.parametrize("p", [0.0, 0.01, 0.5, 0.9, 1.0])
    def test_quantile(self, p):
        assert self.cauchy_dist_example.quantile(p) == pytest.approx(
            cauchy.ppf(p, loc=-1.0, scale=0.5), rel=1e-12
        )

    def test_moments(self):
        assert math.isnan(self.cauchy_dist_example.mean())
        assert self.cauchy_dist_example.variance() == math.inf

    @pytest.mark.parametrize("t", [-2.0, 0.0, 0.7])
    def test_characteristic_function(self, t):
        expected = complex(math.cos(-t), math.sin(-t)) * math.exp(-0.5 * abs(t))
        assert abs(self.cauchy_dist_example.characteristic_function(t) - expected) < 1e-14

    def test_sampling_quartiles(self):
        sample = self.cauchy_dist_example.sample(40_000)
        lower, median, upper = np.quantile(sample, [0.25, 0.5, 0.75])

        assert median == pytest.approx(-1.0, abs=0.03)
        assert lower == pytest.approx(-1.5, abs=0.03)
        assert upper == pytest.approx(-0.5, abs=0.03)
