"""
test_report.py - 控制台报告与入口测试
"""
from projectile_intercept.core.collision import Classification
from projectile_intercept.core.config import SimulationConfig
from projectile_intercept.core.projectile import ProjectileState
from projectile_intercept.simulation.engine import Collided, TimedOut, SimulationResult
from projectile_intercept.simulation.recorder import StepRecord, Trajectory
from projectile_intercept.simulation.report import format_report, print_report
from projectile_intercept import run
from projectile_intercept.main_example import compare_estimators
from unittest import mock
import io
import contextlib
import tempfile
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _result(outcome):
    target = ProjectileState([40, 30], [2, 0])
    pursuer = ProjectileState([40, 29.5], [2, 1.5])
    return SimulationResult(outcome, Trajectory([StepRecord(0, target, pursuer)]))


class TestFormatReport(unittest.TestCase):
    """测试报告内容"""

    def test_collision_success(self):
        """测试成功碰撞报告"""
        outcome = Collided(19, ProjectileState([40, 30], [2, 0]),
                           ProjectileState([40, 29.5], [2, 1.5]),
                           36.87, Classification.SUCCESS)
        lines = format_report(_result(outcome))

        self.assertEqual(lines[0], "✅ Collision occurred at step 19 (within 1000 time steps)")
        self.assertIn("position=(40.00, 30.00)", lines[1])
        self.assertIn("velocity=(2.00, 1.50)", lines[2])
        self.assertIn("36.87° (greater than 5°)", lines[3])
        self.assertTrue(lines[3].startswith("✅"))
        self.assertEqual(lines[-1], "Result: SUCCESS")

    def test_collision_failure(self):
        """测试失败碰撞报告"""
        outcome = Collided(19, ProjectileState([40, 30], [2, 0]),
                           ProjectileState([40, 29.5], [2.5, 0.1]),
                           2.29, Classification.FAILURE)
        lines = format_report(_result(outcome))

        self.assertTrue(lines[3].startswith("❌"))
        self.assertIn("less than or equal to 5°", lines[3])
        self.assertEqual(lines[-1], "Result: FAILURE")

    def test_timeout(self):
        """测试超时报告"""
        lines = format_report(_result(TimedOut(steps_run=1000)))

        self.assertEqual(lines[0], "❌ No collision occurred within 1000 time steps")
        self.assertEqual(len(lines), 3)

    def test_custom_threshold(self):
        """测试自定义阈值"""
        config = SimulationConfig(angle_threshold_deg=10.0)
        outcome = Collided(3, ProjectileState([0, 0], [1, 0]),
                           ProjectileState([0, 0], [0, 1]),
                           90.0, Classification.SUCCESS)
        lines = format_report(_result(outcome), config)

        self.assertIn("greater than 10°", lines[3])

    def test_print_report(self):
        """测试打印报告"""
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            print_report(_result(TimedOut(steps_run=1000)))

        self.assertIn("No collision occurred", buf.getvalue())


class TestRunEntryPoint(unittest.TestCase):
    """测试无参数入口"""

    def test_main_writes_graph(self):
        """测试入口保存图像"""
        buf = io.StringIO()
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmp:
            os.chdir(tmp)
            try:
                with contextlib.redirect_stdout(buf):
                    result = run.main()
                self.assertTrue(os.path.exists('collision_simulation.png'))
            finally:
                os.chdir(cwd)

        self.assertIsInstance(result.outcome, (Collided, TimedOut))
        self.assertIn("Graph saved as 'collision_simulation.png'", buf.getvalue())

    def test_render_failure_does_not_lose_result(self):
        """测试出图失败不影响结果"""
        buf = io.StringIO()
        with mock.patch.object(run, 'render_simulation', side_effect=OSError("disk full")):
            with contextlib.redirect_stdout(buf):
                result = run.main()

        self.assertIsNotNone(result.outcome)
        self.assertIn("Failed to save graph: disk full", buf.getvalue())


class TestMainExample(unittest.TestCase):
    """测试估计器对比示例"""

    def test_compare_estimators(self):
        """测试估计器对比"""
        results = compare_estimators(seeds=(0, 1))

        self.assertEqual(sorted(results), ['iterative', 'lead', 'pure', 'quadratic'])
        for runs in results.values():
            self.assertEqual([seed for seed, _ in runs], [0, 1])
            for _, outcome in runs:
                self.assertIsInstance(outcome, (Collided, TimedOut))


if __name__ == '__main__':
    unittest.main()
