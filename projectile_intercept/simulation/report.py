"""
report.py - 控制台报告

把仿真结果整理成逐行文本
"""
from ..core.config import SimulationConfig
from .engine import Collided


def _fmt_state(label, state):
    return (f"{label}: position=({state.p[0]:.2f}, {state.p[1]:.2f}), "
            f"velocity=({state.v[0]:.2f}, {state.v[1]:.2f})")


def format_report(result, config=None):
    """
    生成报告文本行

    Args:
        result: SimulationResult
        config: 仿真配置（用于步数上限与角度阈值）

    Returns:
        list[str]: 报告行
    """
    config = config if config is not None else SimulationConfig()
    outcome = result.outcome
    threshold = config.angle_threshold_deg
    lines = []

    if isinstance(outcome, Collided):
        lines.append(f"✅ Collision occurred at step {outcome.step} "
                     f"(within {config.max_steps} time steps)")
        target, pursuer = outcome.target_state, outcome.pursuer_state
    else:
        lines.append(f"❌ No collision occurred within {outcome.steps_run} time steps")
        last = result.trajectory.last
        target, pursuer = last.target, last.pursuer

    lines.append(_fmt_state("Target ", target))
    lines.append(_fmt_state("Pursuer", pursuer))

    if isinstance(outcome, Collided):
        if outcome.success:
            lines.append(f"✅ Angle between velocities is: {outcome.angle_degrees:.2f}° "
                         f"(greater than {threshold:g}°)")
        else:
            lines.append(f"❌ Angle between velocities is: {outcome.angle_degrees:.2f}° "
                         f"(less than or equal to {threshold:g}°)")
        lines.append(f"Result: {outcome.classification.value.upper()}")
    return lines


def print_report(result, config=None):
    """打印报告"""
    for line in format_report(result, config):
        print(line)
