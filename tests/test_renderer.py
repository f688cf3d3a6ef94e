"""
test_renderer.py - 轨迹图像输出测试
"""
from projectile_intercept.core.config import SimulationConfig
from projectile_intercept.simulation.engine import run_simulation
from projectile_intercept.simulation.renderer import render_simulation
import tempfile
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


class TestRenderSimulation(unittest.TestCase):
    """测试图像保存"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _assert_png(self, path):
        with open(path, 'rb') as f:
            self.assertEqual(f.read(8), PNG_SIGNATURE)

    def test_render_collision(self):
        """测试碰撞结果出图"""
        result = run_simulation(SimulationConfig().without_jitter(), seed=0)
        path = os.path.join(self.tmp.name, 'collision.png')

        self.assertEqual(render_simulation(result, path), path)
        self._assert_png(path)

    def test_render_timeout(self):
        """测试超时结果出图"""
        config = SimulationConfig(pursuer_speed=1.0, max_steps=50)
        result = run_simulation(config, seed=0)
        path = os.path.join(self.tmp.name, 'timeout.png')

        render_simulation(result, path, config)
        self._assert_png(path)

    def test_unwritable_path_raises(self):
        """测试路径不可写"""
        result = run_simulation(SimulationConfig(max_steps=5), seed=0)
        path = os.path.join(self.tmp.name, 'missing', 'dir', 'out.png')

        with self.assertRaises(OSError):
            render_simulation(result, path)


if __name__ == '__main__':
    unittest.main()
