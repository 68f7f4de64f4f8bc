"""Validate the closed-form species distribution of polyprotic acids."""

import math

import numpy as np
import pytest

from dissociation.chemistry.distribution import (
    compute,
    cumulative_ratios,
    species_log_concentration,
    step_ratio,
)
from dissociation.chemistry.validation import PH_POINTS

ACIDS = {
    "acetic": [4.76],
    "carbonic": [6.35, 10.33],
    "phosphoric": [2.1, 7.2, 12.6],
    "edta": [2.0, 2.7, 6.16, 10.26],
}


class TestStepRatios:
    """Check the Henderson-Hasselbalch helper ratios."""

    @pytest.mark.parametrize("pka", [0.5, 4.76, 7.2, 12.6])
    def test_ratio_is_unity_at_pka(self, pka):
        """At pH = pKa the conjugate pair is present in equal amounts."""
        assert step_ratio(pka, pka) == 1.0

    def test_ratio_changes_tenfold_per_ph_unit(self):
        ratios = step_ratio(np.array([3.76, 4.76, 5.76]), 4.76)
        assert np.allclose(ratios, [0.1, 1.0, 10.0])

    def test_cumulative_ratios_are_step_products(self):
        ph = np.linspace(0, 14, 29)
        pka = ACIDS["phosphoric"]
        r = [step_ratio(ph, p) for p in pka]

        cumulative = cumulative_ratios(pka, ph)

        assert cumulative.shape == (4, ph.size)
        assert np.allclose(cumulative[0], 1.0)
        assert np.allclose(cumulative[1], r[0], rtol=1e-12)
        assert np.allclose(cumulative[2], r[0] * r[1], rtol=1e-12)
        assert np.allclose(cumulative[3], r[0] * r[1] * r[2], rtol=1e-12)


class TestCurveSet:
    """Check curve counts, labels and colors."""

    @pytest.mark.parametrize("name", list(ACIDS))
    def test_n_plus_one_curves(self, name):
        pka = ACIDS[name]
        curves = compute(pka)

        assert len(curves) == len(pka) + 1
        for curve in curves:
            assert len(curve) == PH_POINTS
            assert curve.log_concentration.shape == (PH_POINTS,)

    def test_labels_and_colors_tetraprotic(self):
        curves = compute(ACIDS["edta"])

        assert [c.label for c in curves] == [
            "acid",
            "amphiprotic_1",
            "amphiprotic_2",
            "amphiprotic_3",
            "basic",
        ]
        assert [c.color for c in curves] == ["red", "green", "magenta", "black", "blue"]

    def test_monoprotic_has_no_amphiprotic_curve(self):
        curves = compute(ACIDS["acetic"])
        assert [c.label for c in curves] == ["acid", "basic"]

    def test_custom_domain_is_sampled_exactly(self):
        ph = [1.0, 2.5, 9.0]
        curves = compute(ACIDS["carbonic"], ph_domain=ph)

        for curve in curves:
            assert np.array_equal(curve.ph, ph)
            assert curve.samples.shape == (3, 2)
            assert np.array_equal(curve.samples[:, 0], ph)


class TestChemicalInvariants:
    """Check mass balance and monotonic behaviour."""

    @pytest.mark.parametrize("name", list(ACIDS))
    @pytest.mark.parametrize("concentration", [1e-4, 0.1, 2.0])
    def test_mass_balance(self, name, concentration):
        """Linear concentrations of all forms add up to C at every pH."""
        curves = compute(ACIDS[name], concentration)
        total = np.sum([10.0 ** c.log_concentration for c in curves], axis=0)

        assert np.allclose(total, concentration, rtol=1e-9, atol=0.0)

    @pytest.mark.parametrize("name", list(ACIDS))
    def test_acid_non_increasing_and_basic_non_decreasing(self, name):
        curves = compute(ACIDS[name])
        acid, basic = curves[0].log_concentration, curves[-1].log_concentration

        assert np.all(np.diff(acid) <= 1e-12)
        assert np.all(np.diff(basic) >= -1e-12)

    def test_never_exceeds_total_concentration(self):
        curves = compute(ACIDS["edta"], 0.05)
        log_c = math.log10(0.05)
        for curve in curves:
            assert np.all(curve.log_concentration <= log_c + 1e-12)

    @pytest.mark.parametrize("name", ["carbonic", "phosphoric", "edta"])
    def test_adjacent_species_cross_at_each_pka(self, name):
        pka = ACIDS[name]
        log_c = species_log_concentration(pka, 0.1, pka)

        for i in range(len(pka)):
            assert math.isclose(log_c[i, i], log_c[i + 1, i], abs_tol=1e-12)

    def test_extreme_pka_stays_finite(self):
        """Very separated steps neither overflow nor underflow to -inf."""
        log_c = species_log_concentration([0.01, 400.0], 0.1, np.array([0.0, 14.0]))
        assert np.all(np.isfinite(log_c))


class TestReferenceExpressions:
    """Compare against the hand-expanded expressions for each acid size."""

    ph = np.linspace(0, 14, 57)

    def test_diprotic(self):
        pka = ACIDS["carbonic"]
        lc = math.log10(0.1)
        f1, f2 = (step_ratio(self.ph, p) for p in pka)
        f12 = f1 * f2

        expected = [
            lc - np.log10(1 + f1 + f12),
            lc - np.log10(1 + 1 / f1 + f2),
            lc - np.log10(1 + 1 / f12 + 1 / f2),
        ]
        got = species_log_concentration(pka, 0.1, self.ph)
        assert np.allclose(got, expected, rtol=1e-10, atol=1e-10)

    def test_triprotic(self):
        pka = ACIDS["phosphoric"]
        lc = math.log10(0.1)
        f1, f2, f3 = (step_ratio(self.ph, p) for p in pka)
        f12, f23 = f1 * f2, f2 * f3
        f123 = f1 * f23

        expected = [
            lc - np.log10(1 + f1 + f12 + f123),
            lc - np.log10(1 + 1 / f1 + f2 + f23),
            lc - np.log10(1 + 1 / f12 + 1 / f2 + f3),
            lc - np.log10(1 + 1 / f123 + 1 / f23 + 1 / f3),
        ]
        got = species_log_concentration(pka, 0.1, self.ph)
        assert np.allclose(got, expected, rtol=1e-10, atol=1e-10)

    def test_tetraprotic(self):
        pka = ACIDS["edta"]
        lc = math.log10(0.1)
        f1, f2, f3, f4 = (step_ratio(self.ph, p) for p in pka)
        f23, f34 = f2 * f3, f3 * f4
        f12 = f1 * f2
        f123, f234 = f1 * f23, f23 * f4
        f1234 = f123 * f4

        expected = [
            lc - np.log10(1 + f1 + f12 + f123 + f1234),
            lc - np.log10(1 + 1 / f1 + f2 + f23 + f234),
            lc - np.log10(1 + 1 / f12 + 1 / f2 + f3 + f34),
            lc - np.log10(1 + 1 / f123 + 1 / f23 + 1 / f3 + f4),
            lc - np.log10(1 + 1 / f1234 + 1 / f234 + 1 / f34 + 1 / f4),
        ]
        got = species_log_concentration(pka, 0.1, self.ph)
        assert np.allclose(got, expected, rtol=1e-10, atol=1e-10)


class TestScenarios:
    """End-to-end checks on well-known acids."""

    def test_acetic_acid_half_dissociated_at_pka(self):
        acid, basic = compute([4.76], 0.1, ph_domain=[4.76])
        expected = math.log10(0.1) - math.log10(2)

        assert math.isclose(acid.log_concentration[0], expected, abs_tol=1e-12)
        assert math.isclose(basic.log_concentration[0], expected, abs_tol=1e-12)
        assert math.isclose(expected, -1.301, abs_tol=1e-3)

    def test_phosphoric_acid_first_crossover(self):
        curves = compute(ACIDS["phosphoric"], 0.1, ph_domain=[2.1])

        assert [c.label for c in curves] == [
            "acid",
            "amphiprotic_1",
            "amphiprotic_2",
            "basic",
        ]
        assert math.isclose(
            curves[0].log_concentration[0],
            curves[1].log_concentration[0],
            abs_tol=1e-12,
        )

    def test_default_concentration(self):
        """Omitting C is the same as passing 0.1 M."""
        default = compute(ACIDS["phosphoric"])
        explicit = compute(ACIDS["phosphoric"], 0.1)

        for a, b in zip(default, explicit):
            assert np.array_equal(a.log_concentration, b.log_concentration)
