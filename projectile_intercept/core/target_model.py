"""
target_model.py - 目标运动模型

目标以恒定巡航速度近似直线飞行，每步叠加随机规避扰动，
并用比例 (P) 控制把高度拉回参考高度:

    δ_r ~ U(jitter_min, jitter_max)
    δ_p = K_p * (y_ref - y)
    δ   = w_p * δ_p + w_r * δ_r
    ψ   = ψ_nominal + δ

航向每步按绝对值计算，不在步间累加
"""
import logging

from ..utils.geometry import add, heading_vector, scale
from .projectile import ProjectileState

logger = logging.getLogger('INTERCEPT')


class TargetMotionModel:
    """
    目标运动模型

    Attributes:
        config (SimulationConfig): 仿真配置
    """

    def __init__(self, config):
        self.config = config

    def heading_deviation(self, state, jitter_deg):
        """
        计算航向偏差 δ (deg)

        Args:
            state: 目标当前状态
            jitter_deg: 本步随机扰动 δ_r (deg)

        Returns:
            float: 混合后的航向偏差
        """
        cfg = self.config
        correction = cfg.p_gain * (cfg.reference_altitude - state.p[1])
        return cfg.correction_weight * correction + cfg.random_weight * jitter_deg

    def next_state(self, state, rng):
        """
        生成下一步的目标状态

        每次调用恰好消耗一次随机数

        Args:
            state: 目标当前状态
            rng: 随机源，需提供 uniform(low, high)

        Returns:
            ProjectileState: 新状态
        """
        cfg = self.config
        low, high = cfg.jitter_range_deg
        jitter = float(rng.uniform(low, high))

        delta = self.heading_deviation(state, jitter)
        heading_deg = cfg.nominal_heading_deg + delta

        velocity = scale(heading_vector(heading_deg), cfg.target_speed)
        position = add(state.p, scale(velocity, cfg.dt))

        logger.debug(f"  目标: δ_r={jitter:+.2f}°, δ={delta:+.2f}°, "
                     f"位置=({position[0]:.2f}, {position[1]:.2f})")
        return ProjectileState(position, velocity)
