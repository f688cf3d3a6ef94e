# Simulation module for Projectile Intercept
from .engine import SimulationEngine, SimulationResult, run_simulation
from .recorder import StepRecord, Trajectory, TrajectoryRecorder

__all__ = ['SimulationEngine', 'SimulationResult', 'run_simulation',
           'StepRecord', 'Trajectory', 'TrajectoryRecorder']
