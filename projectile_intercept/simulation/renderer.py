"""
renderer.py - 轨迹图像输出

使用 matplotlib 把目标与拦截体的轨迹绘制到图像文件：
- 目标轨迹（红）与拦截体轨迹（绿），每步一个位置标记
- 碰撞点：成功画绿色对勾，失败画红色叉
"""
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

from ..core.config import SimulationConfig  # noqa: E402
from .engine import Collided  # noqa: E402

DEFAULT_PATH = 'collision_simulation.png'


def _draw_check(ax, x, y, size):
    ax.plot([x - size * 0.5, x - size * 0.2, x + size * 0.7],
            [y, y - size * 0.3, y + size * 0.5],
            color='green', linewidth=4, zorder=5)


def _draw_cross(ax, x, y, size):
    ax.plot([x - size, x + size], [y - size, y + size], color='red', linewidth=4, zorder=5)
    ax.plot([x + size, x - size], [y - size, y + size], color='red', linewidth=4, zorder=5)


def render_simulation(result, path=DEFAULT_PATH, config=None):
    """
    绘制仿真轨迹并保存

    Args:
        result: SimulationResult
        path: 输出图像路径
        config: 仿真配置（用于图例中的参考高度）

    Returns:
        str: 输出路径
    """
    config = config if config is not None else SimulationConfig()
    trajectory = result.trajectory
    target_xy = trajectory.target_positions()
    pursuer_xy = trajectory.pursuer_positions()

    fig, ax = plt.subplots(figsize=(14, 9))
    try:
        ax.plot(target_xy[:, 0], target_xy[:, 1], '-o', color='red', linewidth=2,
                markersize=3, label=f'Target ({config.reference_altitude:g}m altitude)')
        ax.plot(pursuer_xy[:, 0], pursuer_xy[:, 1], '-o', color='green', linewidth=2,
                markersize=3, label='Pursuer')

        outcome = result.outcome
        if isinstance(outcome, Collided):
            x, y = outcome.target_state.p
            if outcome.success:
                _draw_check(ax, x, y, 1.5)
            else:
                _draw_cross(ax, x, y, 1.5)
            ax.annotate(f"{outcome.angle_degrees:.2f}°", (x, y),
                        textcoords='offset points', xytext=(12, 12))

        ax.set_title(f"Projectile Collision Simulation "
                     f"(Stop at <{config.collision_distance:g}m distance)", fontsize=20)
        ax.set_xlabel("Distance (m)")
        ax.set_ylabel("Height (m)")
        ax.grid(True, alpha=0.3)
        ax.legend(loc='lower right')
        fig.savefig(path)
    finally:
        plt.close(fig)
    return path
