"""
Tests for Noncentral Chi-Squared Distribution
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import ncx2

from pysatl_stable.families.builtins.continuous.noncentral_chi_squared import (
    NoncentralChiSquaredDistribution,
)
from pysatl_stable.types import FamilyName

from .base import BaseDistributionTest

PDF_PRECISION = 1e-8
CDF_PRECISION = 1e-7


class TestNoncentralChiSquaredDistribution(BaseDistributionTest):
    """Test suite for noncentral chi-squared distribution."""

    def setup_method(self):
        self.ncx2_dist_example = NoncentralChiSquaredDistribution(3.0, 2.0, source=17)

    def test_properties(self):
        dist = self.ncx2_dist_example
        assert dist.family_name == FamilyName.NONCENTRAL_CHI_SQUARED
        assert dist.parameters.name == "degreeNoncentrality"
        assert dist.parameters.parameters == {"degree": 3.0, "noncentrality": 2.0}

    @pytest.mark.parametrize(
        "degree, noncentrality, expected_degree, expected_noncentrality",
        [
            (-1.0, 2.0, 1.0, 2.0),
            (0.0, 2.0, 1.0, 2.0),
            (math.nan, 2.0, 1.0, 2.0),
            (4.0, -3.0, 4.0, 0.0),
            (4.0, math.nan, 4.0, 0.0),
        ],
    )
    def test_parameters_are_clamped(
        self, degree, noncentrality, expected_degree, expected_noncentrality
    ):
        dist = NoncentralChiSquaredDistribution(degree, noncentrality)
        assert dist.degree == expected_degree
        assert dist.noncentrality == expected_noncentrality

    @pytest.mark.parametrize(
        "degree, noncentrality",
        [(3.0, 2.0), (0.5, 1.5), (1.5, 4.0), (2.0, 0.0), (7.5, 0.0), (10.0, 25.0)],
    )
    def test_pdf(self, degree, noncentrality):
        dist = NoncentralChiSquaredDistribution(degree, noncentrality)
        points = np.array([0.05, 0.3, 1.0, 2.5, 5.0, 12.0, 30.0, 60.0])
        expected = ncx2.pdf(points, degree, noncentrality)
        self.assert_arrays_almost_equal(self.evaluate(dist.pdf, points), expected, PDF_PRECISION)

    @pytest.mark.parametrize(
        "degree, noncentrality",
        [(3.0, 2.0), (0.5, 1.5), (1.5, 4.0), (2.0, 0.0), (10.0, 25.0)],
    )
    def test_cdf_and_sf(self, degree, noncentrality):
        dist = NoncentralChiSquaredDistribution(degree, noncentrality)
        points = np.array([0.05, 0.5, 2.0, 5.0, 15.0, 40.0, 100.0])
        expected = ncx2.cdf(points, degree, noncentrality)

        self.assert_arrays_almost_equal(self.evaluate(dist.cdf, points), expected, CDF_PRECISION)
        self.assert_arrays_almost_equal(
            self.evaluate(dist.sf, points), 1.0 - expected, CDF_PRECISION
        )

    def test_cdf_edges(self):
        dist = self.ncx2_dist_example
        assert dist.cdf(-1.0) == 0.0
        assert dist.cdf(0.0) == 0.0
        assert dist.cdf(math.inf) == 1.0
        assert math.isnan(dist.cdf(math.nan))

    @pytest.mark.parametrize(
        "degree, noncentrality, expected",
        [
            (1.0, 2.0, math.inf),
            (2.0, 0.0, 0.5),
            (2.0, 3.0, 0.5 * math.exp(-1.5)),
            (3.0, 2.0, 0.0),
        ],
        ids=["singular", "central_finite", "noncentral_finite", "vanishing"],
    )
    def test_pdf_at_origin(self, degree, noncentrality, expected):
        value = NoncentralChiSquaredDistribution(degree, noncentrality).pdf(0.0)
        assert value == pytest.approx(expected, rel=1e-12)

    def test_pdf_outside_support(self):
        assert self.ncx2_dist_example.pdf(-0.5) == 0.0
        assert self.ncx2_dist_example.log_pdf(-0.5) == -math.inf

    @pytest.mark.parametrize("p", [0.05, 0.5, 0.95])
    def test_quantile(self, p):
        expected = ncx2.ppf(p, 3.0, 2.0)
        assert self.ncx2_dist_example.quantile(p) == pytest.approx(expected, abs=1e-6)

    def test_quantile_edges(self):
        assert self.ncx2_dist_example.quantile(0.0) == 0.0
        assert self.ncx2_dist_example.quantile(1.0) == math.inf
        with pytest.raises(ValueError):
            self.ncx2_dist_example.quantile(-0.1)

    @pytest.mark.parametrize("degree, noncentrality", [(3.0, 2.0), (0.5, 1.5), (4.0, 0.0)])
    def test_moments(self, degree, noncentrality):
        dist = NoncentralChiSquaredDistribution(degree, noncentrality)
        mean, variance, skewness, kurtosis = ncx2.stats(degree, noncentrality, moments="mvsk")

        assert dist.mean() == pytest.approx(float(mean), rel=1e-12)
        assert dist.variance() == pytest.approx(float(variance), rel=1e-12)
        assert dist.skewness() == pytest.approx(float(skewness), rel=1e-9)
        assert dist.excess_kurtosis() == pytest.approx(float(kurtosis), rel=1e-9)

    @pytest.mark.parametrize("t", [-0.7, 0.25, 1.3])
    def test_characteristic_function(self, t):
        def density(x):
            return float(ncx2.pdf(x, 3.0, 2.0))

        real, _ = quad(lambda x: density(x) * math.cos(t * x), 0.0, math.inf, limit=200)
        imag, _ = quad(lambda x: density(x) * math.sin(t * x), 0.0, math.inf, limit=200)
        value = self.ncx2_dist_example.characteristic_function(t)

        assert value.real == pytest.approx(real, abs=1e-7)
        assert value.imag == pytest.approx(imag, abs=1e-7)

    def test_characteristic_function_at_zero(self):
        assert self.ncx2_dist_example.characteristic_function(0.0) == 1.0

    @pytest.mark.parametrize(
        "degree, noncentrality",
        [(3.0, 2.0), (1.0, 0.0), (0.5, 0.0), (0.5, 1.5)],
        ids=["shifted_normal", "unit_degree", "small_degree_central", "poisson_mixture"],
    )
    def test_sampling(self, degree, noncentrality):
        dist = NoncentralChiSquaredDistribution(degree, noncentrality, source=23)
        sample = dist.sample(50_000)

        assert sample.shape == (50_000,)
        assert np.all(sample >= 0.0)
        assert float(np.mean(sample)) == pytest.approx(dist.mean(), abs=0.1)
        grid = ncx2.ppf([0.1, 0.3, 0.5, 0.7, 0.9], degree, noncentrality)
        reference = lambda x: float(ncx2.cdf(x, degree, noncentrality))  # noqa: E731
        assert self.ks_statistic(sample, reference, grid) < 0.01

    def test_variate(self):
        assert isinstance(self.ncx2_dist_example.variate(), float)
