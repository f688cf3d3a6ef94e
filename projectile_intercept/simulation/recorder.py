"""
recorder.py - 轨迹记录

按步顺序追加 StepRecord，仿真结束后以只读序列交给可视化
"""
from dataclasses import dataclass
from typing import List

import numpy as np

from ..core.projectile import ProjectileState


@dataclass(frozen=True)
class StepRecord:
    """单步记录"""
    step: int
    target: ProjectileState
    pursuer: ProjectileState


class Trajectory(tuple):
    """StepRecord 的只读有序序列"""

    def target_positions(self) -> np.ndarray:
        """目标位置序列，形状 (N, 2)"""
        return np.array([r.target.p for r in self]).reshape(-1, 2)

    def pursuer_positions(self) -> np.ndarray:
        """拦截体位置序列，形状 (N, 2)"""
        return np.array([r.pursuer.p for r in self]).reshape(-1, 2)

    @property
    def last(self):
        return self[-1] if self else None


class TrajectoryRecorder:
    """
    只追加的轨迹记录器

    步序号必须从 0 开始、每次加 1
    """

    def __init__(self):
        self._records: List[StepRecord] = []

    def append(self, step, target, pursuer):
        """追加一步记录"""
        expected = len(self._records)
        if step != expected:
            raise ValueError(f"step {step} out of order, expected {expected}")
        record = StepRecord(step, target, pursuer)
        self._records.append(record)
        return record

    def __len__(self):
        return len(self._records)

    def snapshot(self) -> Trajectory:
        """返回当前轨迹的只读副本"""
        return Trajectory(self._records)

