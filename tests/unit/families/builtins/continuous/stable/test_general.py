"""
Integral representations of the stable distribution.

``scipy.stats.levy_stable`` in the ``S1`` parametrization is the reference
for densities and distribution functions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.integrate import quad

from pysatl_stable.config import IntegrationSettings
from pysatl_stable.families.builtins.continuous.stable import (
    GeneralCoefficients,
    Regime,
    StableDistribution,
)
from pysatl_stable.families.builtins.continuous.stable.zolotarev import (
    general_cdf,
    general_density_at_zero,
    general_pdf,
)
from pysatl_stable.numerics.integration import integrate_piecewise

from ..base import BaseDistributionTest

REFERENCE_PRECISION = 1e-7

GENERAL_CASES = [
    (1.5, 0.3, 2.0, 1.0),
    (0.8, -0.5, 1.0, 0.0),
    (1.2, 0.9, 0.7, -1.0),
    (1.8, -1.0, 1.0, 0.5),
    (0.6, 1.0, 1.0, 0.0),
]
GENERAL_IDS = ["moderate", "small_alpha", "strong_skew", "left_skewed", "one_sided"]
STANDARD_POINTS = np.array([-3.0, -0.8, 0.0, 0.6, 2.5, 8.0])


def _points(sigma: float, mu: float) -> np.ndarray:
    return mu + sigma * STANDARD_POINTS


class TestGeneralAgainstReference(BaseDistributionTest):
    @pytest.mark.parametrize("alpha, beta, sigma, mu", GENERAL_CASES, ids=GENERAL_IDS)
    def test_pdf(self, levy_stable_s1, alpha, beta, sigma, mu):
        dist = StableDistribution(alpha, beta, sigma, mu)
        points = _points(sigma, mu)
        expected = levy_stable_s1.pdf(points, alpha, beta, loc=mu, scale=sigma)

        assert dist.regime is Regime.GENERAL
        self.assert_arrays_almost_equal(
            self.evaluate(dist.pdf, points), expected, REFERENCE_PRECISION
        )

    @pytest.mark.parametrize("alpha, beta, sigma, mu", GENERAL_CASES, ids=GENERAL_IDS)
    def test_cdf(self, levy_stable_s1, alpha, beta, sigma, mu):
        dist = StableDistribution(alpha, beta, sigma, mu)
        points = _points(sigma, mu)
        expected = levy_stable_s1.cdf(points, alpha, beta, loc=mu, scale=sigma)

        self.assert_arrays_almost_equal(
            self.evaluate(dist.cdf, points), expected, REFERENCE_PRECISION
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.sf, points), 1.0 - expected, REFERENCE_PRECISION
        )

    @pytest.mark.parametrize("beta", [0.5, -0.7])
    def test_alpha_one(self, levy_stable_s1, beta):
        dist = StableDistribution(1.0, beta, 1.0, 0.5)
        points = 0.5 + STANDARD_POINTS
        assert dist.regime is Regime.GENERAL_ALPHA_EQ_1

        self.assert_arrays_almost_equal(
            self.evaluate(dist.pdf, points),
            levy_stable_s1.pdf(points, 1.0, beta, loc=0.5, scale=1.0),
            REFERENCE_PRECISION,
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.cdf, points),
            levy_stable_s1.cdf(points, 1.0, beta, loc=0.5, scale=1.0),
            REFERENCE_PRECISION,
        )


class TestGeneralProperties(BaseDistributionTest):
    @pytest.mark.parametrize(
        "alpha, beta, sigma, mu",
        [*GENERAL_CASES, (1.0, 0.5, 2.0, 1.0)],
        ids=[*GENERAL_IDS, "alpha_one"],
    )
    def test_cdf_is_monotone_and_bounded(self, alpha, beta, sigma, mu):
        dist = StableDistribution(alpha, beta, sigma, mu)
        values = self.evaluate(dist.cdf, np.linspace(mu - 20.0 * sigma, mu + 20.0 * sigma, 41))

        assert np.all(values >= 0.0)
        assert np.all(values <= 1.0)
        assert np.all(np.diff(values) >= -1e-10)
        assert dist.cdf(-math.inf) == 0.0
        assert dist.cdf(math.inf) == 1.0

    @pytest.mark.parametrize(
        "alpha, beta, a, b",
        [
            (1.5, 0.3, -2.0, 3.0),
            (0.7, 0.4, -1.0, 0.5),
            (1.0, -0.6, -3.0, 1.0),
            (1.3, 0.0, 0.2, 4.0),
        ],
    )
    def test_cdf_difference_matches_integrated_pdf(self, alpha, beta, a, b):
        dist = StableDistribution(alpha, beta)
        mass, _ = quad(
            dist.pdf, a, b, points=[0.0] if a < 0.0 < b else None, epsabs=1e-11, epsrel=1e-12
        )

        assert dist.cdf(b) - dist.cdf(a) == pytest.approx(mass, abs=1e-8)

    @pytest.mark.parametrize(
        "alpha, beta, a, b",
        [
            (0.6, 1.0, 0.0, 4.0),
            (0.6, 1.0, 0.5, 20.0),
            (0.6, -1.0, -4.0, 0.0),
            (1.0, 1.0, -2.0, 3.0),
        ],
        ids=["right_skewed", "right_skewed_tail", "left_skewed", "alpha_one"],
    )
    def test_totally_skewed_cdf_matches_integrated_pdf(self, alpha, beta, a, b):
        dist = StableDistribution(alpha, beta)
        mass, _ = quad(dist.pdf, a, b, limit=200, epsabs=1e-12, epsrel=1e-12)

        assert dist.cdf(b) - dist.cdf(a) == pytest.approx(mass, abs=1e-9)

    def test_cdf_is_monotone_near_alpha_one(self):
        # the mass sits near -beta * tan(pi * alpha / 2), far from this grid
        dist = StableDistribution(0.99999, 0.5)
        values = self.evaluate(dist.cdf, np.linspace(-5.0, 5.0, 21))

        assert np.all(np.diff(values) >= -1e-10)

    @pytest.mark.parametrize(
        "alpha, beta", [(1.5, 0.3), (0.9, -0.2), (1.0, 0.8), (1.95, 0.5)]
    )
    def test_total_mass(self, alpha, beta):
        dist = StableDistribution(alpha, beta)
        bound = 30.0
        inner, _ = quad(
            dist.pdf, -bound, bound, points=[0.0], limit=200, epsabs=1e-11, epsrel=1e-12
        )

        assert inner + dist.cdf(-bound) + dist.sf(bound) == pytest.approx(1.0, abs=1e-7)

    def test_integrator_normalizes_light_tailed_law(self):
        dist = StableDistribution(2.0, 0.0, 1.0, 0.0, closed_forms=False)
        result = integrate_piecewise(dist.pdf, [-40.0, -6.0, 0.0, 6.0, 40.0], 1e-10)

        assert result.value == pytest.approx(1.0, abs=1e-8)

    @pytest.mark.parametrize("alpha, beta", [(1.5, 0.3), (0.8, -0.5), (0.6, 1.0)])
    def test_distribution_at_location(self, alpha, beta):
        dist = StableDistribution(alpha, beta, 3.0, -2.0)
        coefficients = dist.coefficients
        assert isinstance(coefficients, GeneralCoefficients)

        assert dist.cdf(-2.0) == pytest.approx(
            (0.5 * math.pi - coefficients.theta0) / math.pi, abs=1e-15
        )
        assert dist.pdf(-2.0) == pytest.approx(
            general_density_at_zero(coefficients) / 3.0, rel=1e-12
        )

    def test_density_at_zero_is_continuous(self):
        dist = StableDistribution(1.5, 0.3)
        at_zero = dist.pdf(0.0)
        assert dist.pdf(1e-4) == pytest.approx(at_zero, rel=1e-3)
        assert dist.pdf(-1e-4) == pytest.approx(at_zero, rel=1e-3)

    def test_reflection(self):
        right = StableDistribution(1.3, 0.6)
        left = StableDistribution(1.3, -0.6)
        for z in (0.4, 1.7, 6.0):
            assert right.pdf(z) == pytest.approx(left.pdf(-z), rel=1e-9)
            assert right.cdf(z) == pytest.approx(left.sf(-z), abs=1e-10)

    def test_one_sided_support(self):
        dist = StableDistribution(0.6, 1.0, 1.0, 2.0)
        assert dist.pdf(1.0) == pytest.approx(0.0, abs=1e-12)
        assert dist.cdf(1.0) == pytest.approx(0.0, abs=1e-12)
        assert dist.pdf(3.0) > 0.0

    def test_tail_density_decays(self):
        dist = StableDistribution(1.5, 0.0)
        # P(|X| > x) ~ C x^(-alpha)
        assert dist.pdf(200.0) < dist.pdf(100.0) < dist.pdf(50.0)
        assert dist.pdf(1e300) == pytest.approx(0.0, abs=1e-300)

    def test_nan_and_infinite_points(self):
        dist = StableDistribution(1.5, 0.3)
        assert math.isnan(dist.pdf(math.nan))
        assert math.isnan(dist.cdf(math.nan))
        assert dist.pdf(math.inf) == 0.0
        assert dist.pdf(-math.inf) == 0.0


class TestZolotarevFunctions:
    def setup_method(self):
        self.coefficients = StableDistribution(1.5, 0.3).coefficients

    def test_standardized_evaluation(self):
        dist = StableDistribution(1.5, 0.3, 2.0, 1.0)
        assert dist.pdf(3.0) == pytest.approx(general_pdf(1.0, self.coefficients) / 2.0)
        assert dist.cdf(3.0) == pytest.approx(general_cdf(1.0, self.coefficients))

    def test_coarse_settings_warn_and_stay_bounded(self):
        coarse = IntegrationSettings(target_abs_error=1e-14, max_depth=2)
        with pytest.warns(RuntimeWarning):
            value = general_cdf(0.7, self.coefficients, coarse)
        assert 0.0 <= value <= 1.0

    def test_settings_reach_distribution(self):
        settings = IntegrationSettings(target_abs_error=1e-8)
        dist = StableDistribution(1.5, 0.3, settings=settings)
        assert dist.settings is settings
        assert dist.pdf(0.7) == pytest.approx(
            StableDistribution(1.5, 0.3).pdf(0.7), abs=1e-7
        )


class TestGeneralQuantile:
    @pytest.mark.parametrize(
        "alpha, beta, sigma, mu, p",
        [(1.5, 0.3, 2.0, 1.0, 0.05), (1.5, 0.3, 2.0, 1.0, 0.7), (0.8, -0.5, 1.0, 0.0, 0.4)],
    )
    def test_quantile_inverts_cdf(self, alpha, beta, sigma, mu, p):
        dist = StableDistribution(alpha, beta, sigma, mu)
        assert dist.cdf(dist.quantile(p)) == pytest.approx(p, abs=1e-9)

    def test_quantile_against_reference(self, levy_stable_s1):
        dist = StableDistribution(1.5, 0.3, 2.0, 1.0)
        expected = float(levy_stable_s1.ppf(0.3, 1.5, 0.3, loc=1.0, scale=2.0))
        assert dist.quantile(0.3) == pytest.approx(expected, abs=1e-5)

    def test_quantile_edges(self):
        dist = StableDistribution(1.5, 0.3)
        assert dist.quantile(0.0) == -math.inf
        assert dist.quantile(1.0) == math.inf
        with pytest.raises(ValueError, match="Probability must be in"):
            dist.quantile(2.0)

    def test_one_sided_quantile_edges(self):
        right_skewed = StableDistribution(0.6, 1.0, 1.0, 2.0)
        left_skewed = StableDistribution(0.6, -1.0, 1.0, 2.0)

        assert right_skewed.quantile(0.0) == 2.0
        assert right_skewed.quantile(1.0) == math.inf
        assert left_skewed.quantile(0.0) == -math.inf
        assert left_skewed.quantile(1.0) == 2.0
        assert right_skewed.quantile(0.3) > 2.0
        assert left_skewed.quantile(0.3) < 2.0


class TestGeneralCharacteristics:
    @pytest.mark.parametrize(
        "alpha, expected_mean", [(1.5, 1.0), (1.0, math.nan), (0.7, math.nan)]
    )
    def test_mean(self, alpha, expected_mean):
        dist = StableDistribution(alpha, 0.3, 2.0, 1.0)
        if math.isnan(expected_mean):
            assert math.isnan(dist.mean())
        else:
            assert dist.mean() == expected_mean

    @pytest.mark.parametrize("alpha", [1.99, 1.5, 1.0, 0.4])
    def test_variance_is_infinite(self, alpha):
        assert StableDistribution(alpha, 0.3).variance() == math.inf

    @pytest.mark.parametrize(
        "alpha, beta, sigma, mu",
        [(1.5, 0.3, 2.0, 1.0), (0.7, -0.8, 0.5, 0.0), (1.0, 0.4, 2.0, 1.0)],
    )
    def test_characteristic_function_structure(self, alpha, beta, sigma, mu):
        dist = StableDistribution(alpha, beta, sigma, mu)
        assert dist.characteristic_function(0.0) == 1.0
        for t in (0.3, 1.7):
            value = dist.characteristic_function(t)
            assert abs(value) == pytest.approx(math.exp(-((sigma * t) ** alpha)), rel=1e-12)
            assert dist.characteristic_function(-t) == pytest.approx(value.conjugate(), rel=1e-12)

    def test_characteristic_function_alpha_one(self):
        dist = StableDistribution(1.0, 0.4, 2.0, 1.0)
        t = 1.5
        phase = t - 2.0 * t * 0.4 * 2.0 / math.pi * math.log(t)
        expected = math.exp(-2.0 * t) * complex(math.cos(phase), math.sin(phase))
        assert dist.characteristic_function(t) == pytest.approx(expected, rel=1e-12)
