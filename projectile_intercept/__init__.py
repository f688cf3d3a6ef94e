# Projectile Intercept Simulation Package
# 二维拦截仿真：随机规避目标 + 预测拦截转向

from .core.projectile import ProjectileState
from .core.config import SimulationConfig
from .core.target_model import TargetMotionModel
from .core.pursuer_model import PursuerSteeringModel, LeadTimeEstimator
from .core.collision import Classification, analyze_collision
from .simulation.engine import SimulationEngine, run_simulation, Collided, TimedOut
from .utils.geometry import DegenerateVectorError

__all__ = [
    'ProjectileState',
    'SimulationConfig',
    'TargetMotionModel',
    'PursuerSteeringModel',
    'LeadTimeEstimator',
    'Classification',
    'analyze_collision',
    'SimulationEngine',
    'run_simulation',
    'Collided',
    'TimedOut',
    'DegenerateVectorError',
]
