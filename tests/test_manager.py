import unittest

import numpy as np

from spthermo.exceptions import (
    ConfigurationError,
    InconsistentReferenceStateError,
    NotReadyError,
)
from spthermo.models import CoefficientRecord, FamilyTag
from spthermo.thermo import GeneralSpeciesThermo, UniformPressureSpeciesThermo

N2_LOW = [3.298677, 1.4082404e-03, -3.963222e-06, 5.641515e-09, -2.444854e-12, -1.0208999e03, 3.950372]
N2_HIGH = [2.92664, 1.4879768e-03, -5.68476e-07, 1.0097038e-10, -6.753351e-15, -9.227977e02, 5.980528]
N2_SHOMATE = [28.98641, 1.853978, -9.647459, 16.63537, 0.000117, -8.671914, 226.4168]


def build_phase(manager_cls=GeneralSpeciesThermo):
    manager = manager_cls(4)
    manager.install("AR", 0, FamilyTag.CONSTANT_CP, [298.15, 0.0, 18.6, 2.5], 200.0, 6000.0, 101325.0)
    manager.install("N2", 1, FamilyTag.NASA2, [1000.0] + N2_LOW + N2_HIGH, 300.0, 5000.0, 101325.0)
    manager.install("N2-nist", 2, FamilyTag.SHOMATE1, N2_SHOMATE, 100.0, 500.0, 101325.0)
    manager.install(
        "X", 3, FamilyTag.MU0_INTERP, [2.0, 0.0, 250.0, -100.0, 1200.0, -900.0], 250.0, 1200.0, 101325.0
    )
    return manager


def sentinel_arrays(n, value=-1.0):
    return np.full(n, value), np.full(n, value), np.full(n, value)


class TestGeneralSpeciesThermo(unittest.TestCase):
    def setUp(self):
        self.manager = build_phase()

    def test_constant_cp_scenario(self):
        manager = GeneralSpeciesThermo(1)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, -500.0, 20.0, 3.5], 200.0, 2000.0, 1.0e5)
        cp, h, s = sentinel_arrays(1)
        T = 298.15
        manager.update(T, cp, h, s)

        self.assertEqual(cp[0], 3.5)
        self.assertAlmostEqual(h[0], (-500.0 + 3.5 * (T - 300.0)) / T, places=12)
        self.assertAlmostEqual(s[0], 20.0 + 3.5 * np.log(T / 300.0), places=12)

    def test_two_zone_scenario(self):
        manager = GeneralSpeciesThermo(1)
        low = [3.0, 0.0, 0.0, 0.0, 0.0, 100.0, 2.0]
        high = [4.0, 0.0, 0.0, 0.0, 0.0, 200.0, 5.0]
        manager.install("B", 0, FamilyTag.NASA2, [1000.0] + low + high, 200.0, 3500.0, 1.0e5)

        for T, expected in ((999.99, 3.0), (1000.01, 4.0), (1000.0, 4.0)):
            cp, h, s = manager.evaluate(T)
            self.assertEqual(cp[0], expected)

    def test_update_overwrites_every_slot(self):
        cp, h, s = sentinel_arrays(4)
        self.manager.update(800.0, cp, h, s)
        for arr in (cp, h, s):
            self.assertFalse(np.any(arr == -1.0))

    def test_update_one_matches_update(self):
        for T in (300.0, 450.0, 999.0, 1000.0, 1100.0):
            full = sentinel_arrays(4)
            self.manager.update(T, *full)
            for k in range(4):
                single = sentinel_arrays(4)
                self.manager.update_one(k, T, *single)
                for full_arr, single_arr in zip(full, single):
                    self.assertEqual(single_arr[k], full_arr[k])
                    others = [j for j in range(4) if j != k]
                    np.testing.assert_array_equal(single_arr[others], -1.0)

    def test_accepts_plain_lists(self):
        cp, h, s = [0.0] * 4, [0.0] * 4, [0.0] * 4
        self.manager.update(400.0, cp, h, s)
        expected = self.manager.evaluate(400.0)
        np.testing.assert_array_equal(cp, expected[0])

    def test_temperature_window(self):
        self.assertEqual(self.manager.min_temp(), 300.0)
        self.assertEqual(self.manager.max_temp(), 500.0)
        self.assertEqual(self.manager.min_temp(3), 250.0)
        self.assertEqual(self.manager.max_temp(0), 6000.0)
        mins = [self.manager.min_temp(k) for k in range(4)]
        maxs = [self.manager.max_temp(k) for k in range(4)]
        self.assertEqual(self.manager.min_temp(), max(mins))
        self.assertEqual(self.manager.max_temp(), min(maxs))

    def test_window_of_partially_installed_phase(self):
        manager = GeneralSpeciesThermo(3)
        self.assertEqual(manager.min_temp(), 0.0)
        self.assertEqual(manager.max_temp(), np.inf)
        manager.install("A", 2, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        self.assertEqual(manager.min_temp(), 200.0)
        self.assertEqual(manager.max_temp(), 2000.0)
        with self.assertRaises(IndexError):
            manager.min_temp(0)

    def test_reference_pressure(self):
        manager = GeneralSpeciesThermo(2)
        with self.assertRaises(IndexError):
            manager.ref_pressure()
        manager.install("A", 1, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        manager.install("B", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 101325.0)
        # first installed species by index
        self.assertEqual(manager.ref_pressure(), 101325.0)
        self.assertEqual(manager.ref_pressure(1), 1.0e5)

    def test_report_round_trip(self):
        coeffs = [1000.0] + N2_LOW + N2_HIGH
        params = self.manager.report_params(1)
        self.assertIs(params.family, FamilyTag.NASA2)
        self.assertEqual((params.min_temp, params.max_temp, params.ref_pressure), (300.0, 5000.0, 101325.0))
        np.testing.assert_array_equal(params.coefficients, coeffs)
        family, t_lo, t_hi, p_ref, c = params
        self.assertEqual((family, t_lo, t_hi, p_ref), (FamilyTag.NASA2, 300.0, 5000.0, 101325.0))
        self.assertIs(self.manager.report_type(3), FamilyTag.MU0_INTERP)

    def test_install_record(self):
        record = CoefficientRecord(
            species_index=0,
            family=FamilyTag.SHOMATE1,
            coefficients=tuple(N2_SHOMATE),
            min_temp=100.0,
            max_temp=500.0,
            name="N2",
        )
        manager = GeneralSpeciesThermo(1)
        manager.install_record(record)
        self.assertEqual(manager.species_name(0), "N2")
        self.assertEqual(manager.ref_pressure(0), 101325.0)
        np.testing.assert_array_equal(manager.report_params(0).coefficients, N2_SHOMATE)

    def test_out_of_bounds_install(self):
        before = [self.manager.report_params(k) for k in range(4)]
        values_before = self.manager.evaluate(700.0)
        for index in (4, 10, -1):
            with self.assertRaises(IndexError):
                self.manager.install("Y", index, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)

        for k in range(4):
            after = self.manager.report_params(k)
            self.assertEqual(after[:4], before[k][:4])
            np.testing.assert_array_equal(after.coefficients, before[k].coefficients)
        for a, b in zip(values_before, self.manager.evaluate(700.0)):
            np.testing.assert_array_equal(a, b)

    def test_failed_reinstall_keeps_previous_species(self):
        values_before = self.manager.evaluate(400.0)
        with self.assertRaises(ConfigurationError):
            self.manager.install("AR", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0], 200.0, 6000.0, 101325.0)
        with self.assertRaises(ConfigurationError):
            self.manager.install("AR", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 600.0, 200.0, 101325.0)
        with self.assertRaises(ConfigurationError):
            self.manager.install("AR", 0, "no_such_family", [300.0, 0.0, 0.0, 3.5], 200.0, 600.0, 101325.0)

        self.assertIs(self.manager.report_type(0), FamilyTag.CONSTANT_CP)
        self.assertEqual(self.manager.species_name(0), "AR")
        for a, b in zip(values_before, self.manager.evaluate(400.0)):
            np.testing.assert_array_equal(a, b)

    def test_reinstall_replaces_one_slot(self):
        before = self.manager.evaluate(400.0)
        self.manager.install("AR", 0, FamilyTag.NASA1, [2.5, 0.0, 0.0, 0.0, 0.0, -745.375, 4.366], 200.0, 6000.0, 101325.0)
        after = self.manager.evaluate(400.0)
        self.assertTrue(self.manager.is_ready)
        self.assertIs(self.manager.report_type(0), FamilyTag.NASA1)
        for a, b in zip(before, after):
            np.testing.assert_array_equal(a[1:], b[1:])

    def test_isolated_mutation(self):
        temps = (300.0, 450.0, 1000.0)
        before = {T: self.manager.evaluate(T) for T in temps}
        self.manager.modify_params(0, [298.15, 0.0, 18.6, 3.0])

        for T in temps:
            after = self.manager.evaluate(T)
            for a, b in zip(before[T], after):
                np.testing.assert_array_equal(a[1:], b[1:])
            self.assertEqual(after[0][0], 3.0)
        params = self.manager.report_params(0)
        np.testing.assert_array_equal(params.coefficients, [298.15, 0.0, 18.6, 3.0])
        self.assertEqual((params.min_temp, params.max_temp), (200.0, 6000.0))

    def test_modify_with_wrong_arity(self):
        with self.assertRaises(ConfigurationError):
            self.manager.modify_params(1, N2_LOW)
        np.testing.assert_array_equal(self.manager.report_params(1).coefficients, [1000.0] + N2_LOW + N2_HIGH)

    def test_queries_against_uninstalled_index(self):
        manager = GeneralSpeciesThermo(2)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        self.assertTrue(manager.installed(0))
        self.assertFalse(manager.installed(1))
        for call in (
            lambda: manager.report_type(1),
            lambda: manager.report_params(1),
            lambda: manager.modify_params(1, [300.0, 0.0, 0.0, 3.5]),
            lambda: manager.max_temp(1),
            lambda: manager.ref_pressure(1),
            lambda: manager.report_params(2),
        ):
            with self.assertRaises(IndexError):
                call()

    def test_not_ready_guard(self):
        manager = GeneralSpeciesThermo(3)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        manager.install("C", 2, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 4.5], 200.0, 2000.0, 1.0e5)
        self.assertFalse(manager.is_ready)

        cp, h, s = sentinel_arrays(3)
        with self.assertRaises(NotReadyError):
            manager.update(500.0, cp, h, s)
        with self.assertRaises(NotReadyError):
            manager.update_one(0, 500.0, cp, h, s)
        for arr in (cp, h, s):
            np.testing.assert_array_equal(arr, -1.0)

        manager.install("B", 1, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 4.0], 200.0, 2000.0, 1.0e5)
        self.assertTrue(manager.is_ready)
        manager.update(500.0, cp, h, s)
        np.testing.assert_array_equal(cp, [3.5, 4.0, 4.5])

    def test_empty_phase(self):
        manager = GeneralSpeciesThermo(0)
        self.assertTrue(manager.is_ready)
        cp, h, s = manager.evaluate(300.0)
        self.assertEqual(len(cp), 0)

    def test_copy_is_independent(self):
        clone = self.manager.copy()
        clone.modify_params(0, [298.15, 0.0, 18.6, 9.0])
        self.assertEqual(self.manager.evaluate(400.0)[0][0], 2.5)
        self.assertEqual(clone.evaluate(400.0)[0][0], 9.0)


class TestUniformPressureSpeciesThermo(unittest.TestCase):
    def test_consistent_phase_installs(self):
        manager = build_phase(UniformPressureSpeciesThermo)
        self.assertTrue(manager.is_ready)
        self.assertEqual(manager.ref_pressure(), 101325.0)

    def test_rejects_mismatched_reference_pressure(self):
        manager = UniformPressureSpeciesThermo(2)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 101325.0)
        with self.assertRaises(InconsistentReferenceStateError):
            manager.install("B", 1, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        self.assertFalse(manager.installed(1))
        self.assertFalse(manager.is_ready)

    def test_replacing_only_species_may_change_pressure(self):
        manager = UniformPressureSpeciesThermo(2)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 101325.0)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        self.assertEqual(manager.ref_pressure(), 1.0e5)

    def test_general_manager_allows_mixed_pressures(self):
        manager = GeneralSpeciesThermo(2)
        manager.install("A", 0, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 101325.0)
        manager.install("B", 1, FamilyTag.CONSTANT_CP, [300.0, 0.0, 0.0, 3.5], 200.0, 2000.0, 1.0e5)
        self.assertTrue(manager.is_ready)


if __name__ == '__main__':
    unittest.main()
