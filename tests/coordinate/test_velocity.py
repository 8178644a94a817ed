import math
import unittest

import numpy as np

from pyecef.coordinate.velocity import (
    ecef2enu_vel, ecef2ned_vel, enu2ecef_vel, enu2ned_vel,
    ground_speed, heading, ned2ecef_vel, ned2enu_vel
)
from pyecef.core.data_structures import ECEFVelocity, ENUVelocity, NEDVelocity


class TestNEDRotation(unittest.TestCase):

    def setUp(self):
        self.ecef_vel = ECEFVelocity(vx=82.34, vy=-554.45, vz=301.32)
        self.lat = 28.4187
        self.lon = -81.5812

    def test_ecef2ned_known_values(self):
        ned = ecef2ned_vel(self.ecef_vel, self.lat, self.lon)

        self.assertIsInstance(ned, NEDVelocity)
        self.assertAlmostEqual(ned.vn, -1.7539, delta=1e-3)
        self.assertAlmostEqual(ned.ve, 0.277, delta=1e-3)
        self.assertAlmostEqual(ned.vd, -636.3845, delta=1e-3)

    def test_ecef2ned_matches_component_formula(self):
        lat, lon = np.radians(self.lat), np.radians(self.lon)
        vx, vy, vz = self.ecef_vel.vx, self.ecef_vel.vy, self.ecef_vel.vz

        vn = -vx * np.sin(lat) * np.cos(lon) - vy * np.sin(lat) * np.sin(lon) + vz * np.cos(lat)
        ve = -vx * np.sin(lon) + vy * np.cos(lon)
        vd = -vx * np.cos(lat) * np.cos(lon) - vy * np.cos(lat) * np.sin(lon) - vz * np.sin(lat)

        ned = ecef2ned_vel(self.ecef_vel, self.lat, self.lon)
        np.testing.assert_allclose(ned.to_array(), [vn, ve, vd], rtol=1e-12, atol=1e-9)

    def test_round_trip(self):
        test_refs = [(0.0, 0.0), (28.4187, -81.5812), (-45.0, 170.0), (89.9, 12.0), (-90.0, 0.0)]

        for lat, lon in test_refs:
            with self.subTest(lat=lat, lon=lon):
                ned = ecef2ned_vel(self.ecef_vel, lat, lon)
                back = ned2ecef_vel(ned, lat, lon)
                np.testing.assert_allclose(back.to_array(), self.ecef_vel.to_array(),
                                           rtol=1e-12, atol=1e-9)

    def test_equator_prime_meridian_axes(self):
        # ECEF x points straight up, y east and z north
        self.assertEqual(ecef2ned_vel(ECEFVelocity(1.0, 0.0, 0.0), 0.0, 0.0).vd, -1.0)
        self.assertEqual(ecef2ned_vel(ECEFVelocity(0.0, 1.0, 0.0), 0.0, 0.0).ve, 1.0)
        self.assertEqual(ecef2ned_vel(ECEFVelocity(0.0, 0.0, 1.0), 0.0, 0.0).vn, 1.0)

    def test_magnitude_preserved(self):
        ned = ecef2ned_vel(self.ecef_vel, self.lat, self.lon)
        self.assertAlmostEqual(np.linalg.norm(ned.to_array()),
                               np.linalg.norm(self.ecef_vel.to_array()), places=9)


class TestENURotation(unittest.TestCase):

    def setUp(self):
        self.ecef_vel = ECEFVelocity(vx=82.34, vy=-554.45, vz=301.32)
        self.lat = 28.4187
        self.lon = -81.5812

    def test_ecef2enu_matches_ned(self):
        enu = ecef2enu_vel(self.ecef_vel, self.lat, self.lon)

        self.assertIsInstance(enu, ENUVelocity)
        self.assertAlmostEqual(enu.vn, -1.7539, delta=1e-3)
        self.assertAlmostEqual(enu.ve, 0.277, delta=1e-3)
        self.assertAlmostEqual(enu.vu, 636.3845, delta=1e-3)

    def test_round_trip(self):
        for lat, lon in [(0.0, 0.0), (35.6762, 139.6503), (-60.0, -120.0)]:
            with self.subTest(lat=lat, lon=lon):
                enu = ecef2enu_vel(self.ecef_vel, lat, lon)
                back = enu2ecef_vel(enu, lat, lon)
                np.testing.assert_allclose(back.to_array(), self.ecef_vel.to_array(),
                                           rtol=1e-12, atol=1e-9)

    def test_equator_prime_meridian_axes(self):
        self.assertEqual(ecef2enu_vel(ECEFVelocity(1.0, 0.0, 0.0), 0.0, 0.0).vu, 1.0)
        self.assertEqual(ecef2enu_vel(ECEFVelocity(0.0, 1.0, 0.0), 0.0, 0.0).ve, 1.0)
        self.assertEqual(ecef2enu_vel(ECEFVelocity(0.0, 0.0, 1.0), 0.0, 0.0).vn, 1.0)


class TestTangentFrameSwap(unittest.TestCase):

    def test_enu2ned_ned2enu(self):
        enu = ENUVelocity(ve=100.0, vn=200.0, vu=50.0)

        ned = enu2ned_vel(enu)
        self.assertEqual(ned, NEDVelocity(vn=200.0, ve=100.0, vd=-50.0))
        self.assertEqual(ned2enu_vel(ned), enu)

    def test_consistent_with_rotations(self):
        vel = ECEFVelocity(-12.0, 7.5, 3.25)
        ned = ecef2ned_vel(vel, 51.5, -0.12)
        enu = ecef2enu_vel(vel, 51.5, -0.12)

        np.testing.assert_allclose(ned2enu_vel(ned).to_array(), enu.to_array(), atol=1e-12)


class TestGroundSpeed(unittest.TestCase):

    def test_pythagorean(self):
        self.assertAlmostEqual(ground_speed(NEDVelocity(3.0, 4.0, 0.0)), 5.0)
        self.assertAlmostEqual(ground_speed(ENUVelocity(ve=4.0, vn=3.0, vu=0.0)), 5.0)

    def test_zero(self):
        self.assertEqual(ground_speed(NEDVelocity(0.0, 0.0, 0.0)), 0.0)

    def test_ignores_vertical(self):
        base = ground_speed(NEDVelocity(34.39, 123.876, 0.0))
        self.assertEqual(ground_speed(NEDVelocity(34.39, 123.876, -636.3845)), base)
        self.assertEqual(ground_speed(NEDVelocity(34.39, 123.876, 636.3845)), base)
        self.assertEqual(ground_speed(ENUVelocity(123.876, 34.39, 636.3845)), base)

    def test_rotation_invariant(self):
        speed = 25.0
        for angle in np.linspace(0.0, 2 * np.pi, 13):
            vel = NEDVelocity(speed * np.cos(angle), speed * np.sin(angle), 1.0)
            self.assertAlmostEqual(ground_speed(vel), speed, places=10)


class TestHeading(unittest.TestCase):

    def test_cardinal_directions(self):
        self.assertEqual(heading(NEDVelocity(1.0, 0.0, 0.0)), 0.0)
        self.assertAlmostEqual(heading(NEDVelocity(0.0, 1.0, 0.0)), 90.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, 0.0, 0.0)), 180.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(0.0, -1.0, 0.0)), 270.0, places=10)

    def test_known_values(self):
        self.assertAlmostEqual(heading(NEDVelocity(34.39, 123.876, -636.3845)), 74.4845, delta=1e-4)
        self.assertAlmostEqual(heading(NEDVelocity(34.39, -123.876, -636.3845)), 285.5155, delta=1e-4)

    def test_southern_quadrants(self):
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, 1.0, 0.0)), 135.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, -1.0, 0.0)), 225.0, places=10)

    def test_enu_input(self):
        self.assertAlmostEqual(heading(ENUVelocity(ve=1.0, vn=0.0, vu=5.0)), 90.0, places=10)

    def test_range(self):
        for angle in np.linspace(-2 * np.pi, 2 * np.pi, 37):
            vel = NEDVelocity(np.cos(angle), np.sin(angle), 0.0)
            result = heading(vel)
            self.assertGreaterEqual(result, 0.0)
            self.assertLess(result, 360.0)

    def test_zero_velocity_is_nan(self):
        with self.assertLogs('pyecef.coordinate.velocity', level='DEBUG'):
            result = heading(NEDVelocity(0.0, 0.0, -5.0))
        self.assertTrue(math.isnan(result))
        self.assertTrue(math.isnan(heading(NEDVelocity(0.0, 0.0, 0.0), legacy=True)))


class TestHeadingLegacy(unittest.TestCase):
    """Single-argument arctangent behaviour"""

    def test_northern_quadrants_match(self):
        for vn, ve in [(34.39, 123.876), (34.39, -123.876), (1.0, 0.0)]:
            with self.subTest(vn=vn, ve=ve):
                vel = NEDVelocity(vn, ve, 0.0)
                self.assertAlmostEqual(heading(vel, legacy=True), heading(vel), places=10)

    def test_east_and_west_with_zero_north(self):
        self.assertAlmostEqual(heading(NEDVelocity(0.0, 1.0, 0.0), legacy=True), 90.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(0.0, -1.0, 0.0), legacy=True), 270.0, places=10)

    def test_southern_quadrants_fold(self):
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, 1.0, 0.0), legacy=True), 315.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, -1.0, 0.0), legacy=True), 45.0, places=10)
        self.assertAlmostEqual(heading(NEDVelocity(-1.0, 0.0, 0.0), legacy=True), 0.0, places=10)


if __name__ == '__main__':
    unittest.main()
