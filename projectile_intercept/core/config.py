"""
config.py - 仿真参数

所有固定常量集中在 SimulationConfig 中，以值的形式显式传递给引擎和运动模型
"""
from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class SimulationConfig:
    """
    拦截仿真配置

    Attributes:
        target_position: 目标初始位置
        target_velocity: 目标初始速度
        target_speed: 目标巡航速度 (每步位移)
        reference_altitude: 目标参考高度，P 控制器的设定值
        jitter_range_deg: 随机规避航向扰动范围 (deg)
        p_gain: 高度修正比例增益
        correction_weight: 修正项权重
        random_weight: 随机项权重
        nominal_heading_deg: 目标名义航向 (deg)
        pursuer_position: 拦截体初始位置
        pursuer_velocity: 拦截体初始速度
        pursuer_speed: 拦截体巡航速度
        pursuer_ramp_steps: 线性加速到巡航速度所需步数，0 表示立即达到
        collision_distance: 碰撞判定距离
        max_steps: 最大仿真步数
        angle_threshold_deg: 成功判定的最小碰撞夹角 (deg)，严格大于才算成功
        dt: 每步时间长度
    """
    target_position: Tuple[float, float] = (0.0, 30.0)
    target_velocity: Tuple[float, float] = (2.0, 0.0)
    target_speed: float = 2.0
    reference_altitude: float = 30.0
    jitter_range_deg: Tuple[float, float] = (-5.0, 5.0)
    p_gain: float = 0.2
    correction_weight: float = 0.6
    random_weight: float = 0.4
    nominal_heading_deg: float = 0.0

    pursuer_position: Tuple[float, float] = (0.0, 0.0)
    pursuer_velocity: Tuple[float, float] = (0.0, 0.0)
    pursuer_speed: float = 2.5
    pursuer_ramp_steps: int = 5

    collision_distance: float = 1.0
    max_steps: int = 1000
    angle_threshold_deg: float = 5.0
    dt: float = 1.0

    def __post_init__(self):
        if self.target_speed <= 0 or self.pursuer_speed <= 0:
            raise ValueError("cruise speeds must be positive")
        if self.collision_distance <= 0:
            raise ValueError("collision_distance must be positive")
        if self.max_steps <= 0:
            raise ValueError("max_steps must be positive")
        if self.dt <= 0:
            raise ValueError("dt must be positive")
        if self.pursuer_ramp_steps < 0:
            raise ValueError("pursuer_ramp_steps must be >= 0")
        low, high = self.jitter_range_deg
        if low > high:
            raise ValueError(f"invalid jitter range {self.jitter_range_deg}")
        if self.correction_weight < 0 or self.random_weight < 0:
            raise ValueError("blend weights must be non-negative")

    def replace(self, **changes):
        """返回修改了部分字段的新配置"""
        return replace(self, **changes)

    def without_jitter(self):
        """关闭随机扰动（100% 修正 / 0% 随机），用于确定性场景"""
        return replace(self, correction_weight=1.0, random_weight=0.0)
