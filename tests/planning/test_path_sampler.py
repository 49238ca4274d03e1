import unittest
import sys
import os
import math

import numpy as np
import matplotlib
matplotlib.use("Agg")

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from src.types import Pose
from src.vehicles.config import AckermannConfig
from src.planning.reeds_shepp import ReedsSheppSolver, PathSampler, CandidatePath, Gear, Motion
from src.planning.reeds_shepp.path import Segment
from src.planning.reeds_shepp.sampler import advance, curvature_of
from src.visualization.observers import ExperimentObserver
from src.visualization.plotter import PathPlotter


class TestPathSampler(unittest.TestCase):
    def setUp(self):
        self.sampler = PathSampler()
        self.radius = 4.0
        self.step = 0.5

    def _single(self, motion, gear, length):
        return CandidatePath(word=(Segment(motion, gear, length),), total_length=length)

    def test_straight_forward(self):
        path = self._single(Motion.STRAIGHT, Gear.FORWARD, 1.0)  # 4m
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step)
        self.assertEqual(len(sampled), 9)
        np.testing.assert_allclose(sampled.xs, np.linspace(0.0, 4.0, 9), atol=1e-12)
        np.testing.assert_allclose(sampled.ys, 0.0, atol=1e-12)
        self.assertTrue(all(s.gear is Gear.FORWARD for s in sampled))
        self.assertTrue(all(s.curvature == 0.0 for s in sampled))

    def test_straight_reverse_moves_backwards(self):
        path = self._single(Motion.STRAIGHT, Gear.REVERSE, 0.5)  # 2m
        sampled = self.sampler.discretize(path, Pose(1.0, 1.0, math.pi / 2), self.radius, self.step)
        last = sampled[-1].pose
        self.assertAlmostEqual(last.x, 1.0)
        self.assertAlmostEqual(last.y, -1.0)
        self.assertAlmostEqual(last.theta_rad, math.pi / 2)
        self.assertTrue(np.all(sampled.gears == -1))

    def test_left_quarter_circle(self):
        path = self._single(Motion.LEFT, Gear.FORWARD, math.pi / 2)
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step)
        last = sampled[-1].pose
        self.assertAlmostEqual(last.x, self.radius)
        self.assertAlmostEqual(last.y, self.radius)
        self.assertAlmostEqual(last.theta_rad, math.pi / 2)
        self.assertTrue(np.allclose(sampled.curvatures, 1.0 / self.radius))
        # 所有样本都在以 (0, R) 为圆心的圆上
        radii = np.hypot(sampled.xs, sampled.ys - self.radius)
        np.testing.assert_allclose(radii, self.radius, atol=1e-9)

    def test_right_arc_in_reverse(self):
        path = self._single(Motion.RIGHT, Gear.REVERSE, math.pi / 2)
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step)
        last = sampled[-1].pose
        # 倒车右打方向: 向右后方移动, 航向增加
        self.assertAlmostEqual(last.x, -self.radius)
        self.assertAlmostEqual(last.y, -self.radius)
        self.assertAlmostEqual(last.theta_rad, math.pi / 2)
        self.assertTrue(np.allclose(sampled.curvatures, -1.0 / self.radius))

    def test_segments_join_without_duplicates(self):
        word = (Segment(Motion.LEFT, Gear.FORWARD, 0.5),
                Segment(Motion.STRAIGHT, Gear.FORWARD, 0.5),
                Segment(Motion.RIGHT, Gear.REVERSE, 0.5))
        path = CandidatePath(word=word, total_length=1.5)
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step)
        # 每段 2m / 0.5m = 4 步, 再加起点
        self.assertEqual(len(sampled), 13)
        self.assertTrue(np.all(sampled.spacings() > 1e-9))
        self.assertTrue(np.all(sampled.spacings() <= self.step + 1e-12))
        self.assertEqual(list(sampled.gears), [1] * 9 + [-1] * 4)

    def test_zero_length_path_has_two_samples(self):
        path = CandidatePath(word=(Segment(Motion.STRAIGHT, Gear.FORWARD, 0.0),), total_length=0.0)
        start = Pose(2.0, 3.0, 0.4)
        sampled = self.sampler.discretize(path, start, self.radius, self.step, end=start)
        self.assertEqual(len(sampled), 2)
        self.assertEqual(sampled[0].pose, start)
        self.assertEqual(sampled[-1].pose, start)

    def test_end_pose_is_forced(self):
        start = Pose.from_degrees(0.0, 0.0, 10.0)
        end = Pose.from_degrees(7.0, -8.0, 50.0)
        path = ReedsSheppSolver().shortest_path(start, end, self.radius)
        sampled = self.sampler.discretize(path, start, self.radius, self.step, end=end)
        self.assertEqual(sampled[-1].pose, end)
        self.assertEqual(sampled[0].pose, start)

    def test_pure_reverse_has_no_repeated_samples(self):
        start, end = Pose(0.0, 0.0, 0.0), Pose(-3.0, 0.0, 0.0)
        path = ReedsSheppSolver().shortest_path(start, end, 1.0)
        sampled = self.sampler.discretize(path, start, 1.0, self.step, end=end)
        self.assertTrue(np.all(sampled.spacings() > 1e-9))
        self.assertTrue(np.all(sampled.spacings() <= self.step + 1e-9))
        self.assertTrue(np.all(sampled.gears == -1))
        self.assertTrue(np.all(sampled.curvatures == 0.0))

    def test_noise_length_segments_are_skipped(self):
        word = (Segment(Motion.LEFT, Gear.REVERSE, 1e-15),
                Segment(Motion.STRAIGHT, Gear.FORWARD, 0.5),
                Segment(Motion.RIGHT, Gear.REVERSE, 2e-16))
        path = CandidatePath(word=word, total_length=0.5)
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step)
        self.assertEqual(len(sampled), 5)
        self.assertEqual(sampled[0].gear, Gear.FORWARD)
        self.assertEqual(sampled[0].curvature, 0.0)
        self.assertTrue(np.all(sampled.spacings() > 1e-9))

    def test_invalid_step(self):
        path = self._single(Motion.STRAIGHT, Gear.FORWARD, 1.0)
        with self.assertRaises(ValueError):
            self.sampler.discretize(path, Pose(0, 0, 0), self.radius, 0.0)
        with self.assertRaises(ValueError):
            self.sampler.discretize(path, Pose(0, 0, 0), self.radius, -0.5)

    def test_observer_receives_samples(self):
        observer = ExperimentObserver()
        path = self._single(Motion.LEFT, Gear.FORWARD, 1.0)
        sampled = self.sampler.discretize(path, Pose(0, 0, 0), self.radius, self.step, observer=observer)
        self.assertEqual(len(observer.samples), len(sampled))


class TestSamplingSweep(unittest.TestCase):
    """随机位姿下的离散化不变量 + 结果可视化"""

    def test_random_sweep(self):
        config = AckermannConfig(wheelbase=2.5, max_steer_deg=35.0)
        radius = config.min_turning_radius
        step = 0.3
        solver = ReedsSheppSolver()
        rng = np.random.default_rng(11)

        examples = []
        for _ in range(30):
            sx, sy, ex, ey = rng.uniform(-12, 12, size=4)
            start = Pose(float(sx), float(sy), float(rng.uniform(-math.pi, math.pi)))
            end = Pose(float(ex), float(ey), float(rng.uniform(-math.pi, math.pi)))
            sampled = solver.sampled_shortest_path(start, end, radius, step)
            self.assertIsNotNone(sampled)
            self.assertGreater(len(sampled), 1)
            self.assertLessEqual(float(np.max(sampled.spacings())), step * math.sqrt(2.0))
            self.assertEqual(sampled[0].pose, start)
            self.assertEqual(sampled[-1].pose, end)
            examples.append((sampled, start, end))

        save_path = os.path.join(os.path.dirname(__file__), "reeds_shepp_sampling_result.png")
        sampled, start, end = examples[0]
        PathPlotter(config).save(sampled, start, end, save_path, title="Reeds-Shepp Sampling Test")
        print(f"Result saved to {save_path}")
        self.assertTrue(os.path.exists(save_path))


def test_advance_full_circle_returns_home():
    pose = Pose(1.0, -2.0, 0.3)
    back = advance(pose, Motion.LEFT, 2 * math.pi * 3.0, 3.0)
    assert abs(back.x - pose.x) < 1e-9
    assert abs(back.y - pose.y) < 1e-9


def test_curvature_sign():
    assert curvature_of(Motion.LEFT, 2.0) == 0.5
    assert curvature_of(Motion.RIGHT, 2.0) == -0.5
    assert curvature_of(Motion.STRAIGHT, 2.0) == 0.0


if __name__ == "__main__":
    unittest.main()
