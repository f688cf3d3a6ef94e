"""
engine.py - 仿真引擎

驱动目标与拦截体逐步运动，检测碰撞、执行步数上限，并给出终止结果

状态机:
    RUNNING -> COLLIDED | TIMED_OUT（均为终止状态，不可恢复）
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..core.collision import Classification, analyze_collision
from ..core.config import SimulationConfig
from ..core.projectile import ProjectileState
from ..core.pursuer_model import PursuerSteeringModel
from ..core.target_model import TargetMotionModel
from .recorder import Trajectory, TrajectoryRecorder

# 配置日志
logger = logging.getLogger('INTERCEPT')


def enable_debug_logging(log_file=None):
    """
    启用详细日志输出

    Args:
        log_file: 日志文件路径（可选），如果不指定则输出到控制台
    """
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    handler.setLevel(logging.DEBUG)

    # 清除已有的handler
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("=== 拦截仿真调试日志已启用 ===")


def disable_debug_logging():
    """禁用日志输出"""
    logger.setLevel(logging.WARNING)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class SimulationStatus(Enum):
    RUNNING = 'running'
    COLLIDED = 'collided'
    TIMED_OUT = 'timed_out'


@dataclass(frozen=True)
class Collided:
    """碰撞终止结果"""
    step: int
    target_state: ProjectileState
    pursuer_state: ProjectileState
    angle_degrees: float
    classification: Classification

    @property
    def success(self):
        return self.classification is Classification.SUCCESS


@dataclass(frozen=True)
class TimedOut:
    """步数用尽仍未碰撞"""
    steps_run: int


Outcome = Union[Collided, TimedOut]


@dataclass(frozen=True)
class SimulationResult:
    """一次仿真的输出：终止结果 + 完整轨迹"""
    outcome: Outcome
    trajectory: Trajectory

    @property
    def collided(self):
        return isinstance(self.outcome, Collided)


class SimulationEngine:
    """
    仿真引擎

    每步:
        1. 目标与拦截体都只读取步前快照，各自生成新状态
        2. 追加 StepRecord
        3. 距离小于碰撞阈值 -> COLLIDED；步数达到上限 -> TIMED_OUT
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 estimator=None, rng=None, seed=None):
        """
        初始化仿真引擎

        Args:
            config: 仿真配置，默认使用基线参数
            estimator: 拦截点估计器，默认一阶提前量
            rng: 随机源（需提供 uniform），优先于 seed
            seed: 随机种子，用于构造 numpy Generator
        """
        self.config = config if config is not None else SimulationConfig()
        self.target_model = TargetMotionModel(self.config)
        self.pursuer_model = PursuerSteeringModel(self.config, estimator)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.target = ProjectileState(self.config.target_position,
                                      self.config.target_velocity)
        self.pursuer = ProjectileState(self.config.pursuer_position,
                                       self.config.pursuer_velocity)
        self.step_index: int = 0
        self.status = SimulationStatus.RUNNING
        self.outcome: Optional[Outcome] = None
        self.recorder = TrajectoryRecorder()

    @property
    def finished(self):
        return self.status is not SimulationStatus.RUNNING

    def step(self):
        """
        执行一个仿真步骤

        Returns:
            StepRecord: 本步记录

        Raises:
            RuntimeError: 仿真已处于终止状态
            DegenerateVectorError: 碰撞时速度为零向量，无法计算夹角
        """
        if self.finished:
            raise RuntimeError(f"simulation already finished ({self.status.value})")

        step = self.step_index
        target = self.target_model.next_state(self.target, self.rng)
        pursuer = self.pursuer_model.next_state(self.pursuer, self.target, step)
        self.target, self.pursuer = target, pursuer

        record = self.recorder.append(step, target, pursuer)
        self.step_index += 1

        dist = target.distance_to(pursuer)
        logger.debug(f"step {step}: 距离={dist:.3f}, 拦截体速度={pursuer.speed:.2f}")

        if dist < self.config.collision_distance:
            self._finish_collision(step, target, pursuer)
        elif self.step_index >= self.config.max_steps:
            self.status = SimulationStatus.TIMED_OUT
            self.outcome = TimedOut(steps_run=self.step_index)
            logger.info(f"{self.step_index} 步内未发生碰撞")

        return record

    def _finish_collision(self, step, target, pursuer):
        self.status = SimulationStatus.COLLIDED
        angle, classification = analyze_collision(
            target.v, pursuer.v, self.config.angle_threshold_deg)
        self.outcome = Collided(step, target, pursuer, angle, classification)
        logger.info(f"第 {step} 步发生碰撞, 夹角 {angle:.2f}°, 结果: {classification}")

    def run(self) -> SimulationResult:
        """运行到终止状态并返回结果"""
        while not self.finished:
            self.step()
        return SimulationResult(self.outcome, self.recorder.snapshot())


def run_simulation(config=None, estimator=None, seed=None) -> SimulationResult:
    """用给定配置运行一次完整仿真"""
    return SimulationEngine(config, estimator=estimator, seed=seed).run()
