# Core modules for Projectile Intercept

from .projectile import ProjectileState
from .config import SimulationConfig
from .target_model import TargetMotionModel
from .pursuer_model import (
    InterceptEstimator, PurePursuitEstimator, LeadTimeEstimator,
    IterativeLeadEstimator, QuadraticInterceptEstimator,
    PursuerSteeringModel, get_estimator
)
from .collision import Classification, classify_angle, analyze_collision
