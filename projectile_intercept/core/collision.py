"""
collision.py - 碰撞夹角分析

根据碰撞时刻两者速度向量的夹角判定拦截是否成功：
夹角严格大于阈值为成功，否则为失败
"""
from enum import Enum

from ..utils.geometry import angle_between_degrees


class Classification(Enum):
    """碰撞结果分类"""
    SUCCESS = 'success'
    FAILURE = 'failure'

    def __str__(self):
        return self.value


def classify_angle(angle_degrees, threshold_deg=5.0):
    """
    按夹角分类

    Args:
        angle_degrees: 夹角 (deg)
        threshold_deg: 阈值 (deg)，不包含边界

    Returns:
        Classification
    """
    if angle_degrees > threshold_deg:
        return Classification.SUCCESS
    return Classification.FAILURE


def analyze_collision(target_velocity, pursuer_velocity, threshold_deg=5.0):
    """
    计算碰撞夹角并分类

    任一速度为零向量时抛出 DegenerateVectorError，而不是返回 0°

    Args:
        target_velocity: 目标速度
        pursuer_velocity: 拦截体速度
        threshold_deg: 成功阈值 (deg)

    Returns:
        tuple: (angle_degrees, Classification)
    """
    angle = angle_between_degrees(target_velocity, pursuer_velocity)
    return angle, classify_angle(angle, threshold_deg)
