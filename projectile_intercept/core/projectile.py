"""
projectile.py - 抛射体状态

    p: 位置向量 [x, y]
    v: 速度向量 [vx, vy] (每个仿真步的位移)

状态对象不可变：每一步都由运动模型生成新的 ProjectileState
"""
import numpy as np

from ..utils.geometry import add, distance, magnitude, scale


def _frozen(values):
    arr = np.array(values, dtype=float).reshape(2)
    arr.flags.writeable = False
    return arr


class ProjectileState:
    """
    抛射体在某一仿真步的状态

    Attributes:
        p (np.ndarray): 位置向量 [x, y]（只读）
        v (np.ndarray): 速度向量 [vx, vy]（只读）
    """

    __slots__ = ('p', 'v')

    def __init__(self, position, velocity):
        """
        初始化抛射体状态

        Args:
            position: 位置坐标 [x, y]
            velocity: 速度向量 [vx, vy]
        """
        object.__setattr__(self, 'p', _frozen(position))
        object.__setattr__(self, 'v', _frozen(velocity))

    def __setattr__(self, name, value):
        raise AttributeError("ProjectileState is immutable")

    @property
    def position(self):
        return self.p

    @property
    def velocity(self):
        return self.v

    @property
    def speed(self):
        """返回速度大小"""
        return magnitude(self.v)

    def distance_to(self, other):
        """到另一抛射体的距离"""
        return distance(self.p, other.p)

    def predict_position(self, dt):
        """
        预测 dt 步后的位置（匀速假设）

        Args:
            dt: 预测时间 (步)

        Returns:
            np.ndarray: 预测位置
        """
        return add(self.p, scale(self.v, dt))

    def __eq__(self, other):
        if not isinstance(other, ProjectileState):
            return NotImplemented
        return bool(np.array_equal(self.p, other.p) and np.array_equal(self.v, other.v))

    def __hash__(self):
        return hash((tuple(self.p), tuple(self.v)))

    def __repr__(self):
        return f"ProjectileState(p={self.p}, v={self.v})"
