"""
pursuer_model.py - 拦截体转向模型

拦截体从静止开始，按固定的线性加速律达到巡航速度，
每步朝目标的预测位置转向。

"瞄准哪里"（拦截点估计）与"飞多快"（加速律）相互独立：
拦截点估计由可替换的 InterceptEstimator 给出，循环、碰撞检测和分析都不受影响。
"""
import logging
import numpy as np

from ..utils.geometry import (
    DegenerateVectorError, EPSILON, add, distance, normalize, scale
)
from .projectile import ProjectileState

logger = logging.getLogger('INTERCEPT')


class InterceptEstimator:
    """拦截点估计器基类"""

    name = 'base'

    def aim_point(self, pursuer, target, cruise_speed):
        """
        计算拦截体应当瞄准的位置

        Args:
            pursuer: 拦截体当前状态
            target: 目标当前状态
            cruise_speed: 拦截体巡航速度

        Returns:
            np.ndarray: 瞄准点
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class PurePursuitEstimator(InterceptEstimator):
    """纯追踪：直接瞄准目标当前位置（无提前量）"""

    name = 'pure'

    def aim_point(self, pursuer, target, cruise_speed):
        return target.p.copy()


class LeadTimeEstimator(InterceptEstimator):
    """
    一阶提前量估计

        τ = |p_t - p_m| / s_m
        p_pred = p_t + v_t * τ

    忽略目标航迹曲率，因此碰撞夹角往往偏小
    """

    name = 'lead'

    def lead_time(self, pursuer, target, cruise_speed):
        return pursuer.distance_to(target) / cruise_speed

    def aim_point(self, pursuer, target, cruise_speed):
        tau = self.lead_time(pursuer, target, cruise_speed)
        predicted = target.predict_position(tau)
        logger.debug(f"  提前量 τ={tau:.2f}, 预测点=({predicted[0]:.2f}, {predicted[1]:.2f})")
        return predicted


class IterativeLeadEstimator(LeadTimeEstimator):
    """
    迭代提前量估计

    用上一次预测点的距离重新估计 τ，重复 iterations 次
    """

    name = 'iterative'

    def __init__(self, iterations=5):
        self.iterations = int(iterations)

    def lead_time(self, pursuer, target, cruise_speed):
        tau = super().lead_time(pursuer, target, cruise_speed)
        for _ in range(self.iterations):
            predicted = target.predict_position(tau)
            tau = distance(predicted, pursuer.p) / cruise_speed
        return tau

    def __repr__(self):
        return f"IterativeLeadEstimator(iterations={self.iterations})"


class QuadraticInterceptEstimator(LeadTimeEstimator):
    """
    匀速目标的闭式拦截解

    求解 |D + V_t T| = s T，即
        (|V_t|^2 - s^2) T^2 + 2 (D·V_t) T + |D|^2 = 0
    取最小正根；无正根（追不上）时退回一阶提前量
    """

    name = 'quadratic'

    def lead_time(self, pursuer, target, cruise_speed):
        d = target.p - pursuer.p
        a = float(np.dot(target.v, target.v)) - cruise_speed ** 2
        b = 2.0 * float(np.dot(d, target.v))
        c = float(np.dot(d, d))

        roots = []
        if abs(a) < 1e-9:
            if abs(b) > 1e-9:
                roots = [-c / b]
        else:
            disc = b * b - 4 * a * c
            if disc >= 0:
                sqrt_disc = np.sqrt(disc)
                roots = [(-b - sqrt_disc) / (2 * a), (-b + sqrt_disc) / (2 * a)]

        positive = [t for t in roots if t > 0]
        if not positive:
            return super().lead_time(pursuer, target, cruise_speed)
        return float(min(positive))


ESTIMATORS = {
    cls.name: cls for cls in (
        PurePursuitEstimator, LeadTimeEstimator,
        IterativeLeadEstimator, QuadraticInterceptEstimator)
}


def get_estimator(name):
    """按名称创建拦截点估计器"""
    try:
        return ESTIMATORS[name]()
    except KeyError:
        raise ValueError(
            f"unknown estimator '{name}', expected one of {sorted(ESTIMATORS)}") from None


class PursuerSteeringModel:
    """
    拦截体转向模型

    每步:
        1. 由 estimator 得到瞄准点
        2. 方向 = normalize(瞄准点 - 当前位置)；退化时保持上一步航向
        3. 速度大小按线性加速律 speed(k) = s * min(k, R) / R
        4. 新速度 = 方向 * 速度大小；新位置 = 位置 + 新速度 * dt

    Attributes:
        config (SimulationConfig): 仿真配置
        estimator (InterceptEstimator): 拦截点估计器
    """

    def __init__(self, config, estimator=None):
        self.config = config
        self.estimator = estimator if estimator is not None else LeadTimeEstimator()

    def ramp_speed(self, step):
        """
        第 step 步的速度大小

        R = 0 时立即达到巡航速度
        """
        cruise = self.config.pursuer_speed
        ramp = self.config.pursuer_ramp_steps
        if ramp == 0:
            return cruise
        return cruise * min(step, ramp) / ramp

    def steering_direction(self, pursuer, target):
        """
        计算转向单位向量

        瞄准点与拦截体重合时保持上一步航向；拦截体静止时返回零向量
        """
        aim = self.estimator.aim_point(pursuer, target, self.config.pursuer_speed)
        try:
            return normalize(aim - pursuer.p)
        except DegenerateVectorError:
            if pursuer.speed < EPSILON:
                logger.warning("  瞄准点与拦截体重合且无历史航向，本步保持静止")
                return np.zeros(2)
            logger.warning("  瞄准点与拦截体重合，保持上一步航向")
            return pursuer.v / pursuer.speed

    def next_state(self, pursuer, target, step):
        """
        生成下一步的拦截体状态

        Args:
            pursuer: 拦截体当前状态
            target: 目标当前状态（步前快照）
            step: 当前步序号（从 0 开始）

        Returns:
            ProjectileState: 新状态
        """
        direction = self.steering_direction(pursuer, target)
        velocity = scale(direction, self.ramp_speed(step))
        position = add(pursuer.p, scale(velocity, self.config.dt))
        return ProjectileState(position, velocity)
