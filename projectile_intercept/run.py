"""
run.py - 运行基线仿真

用法: python -m projectile_intercept.run
"""
from .core.config import SimulationConfig
from .simulation.engine import run_simulation
from .simulation.renderer import DEFAULT_PATH, render_simulation
from .simulation.report import print_report


def main():
    """运行仿真、打印报告并保存轨迹图"""
    config = SimulationConfig()
    result = run_simulation(config)
    print_report(result, config)

    try:
        path = render_simulation(result, DEFAULT_PATH, config)
    except OSError as e:
        print(f"❌ Failed to save graph: {e}")
    else:
        print(f"✅ Graph saved as '{path}'")
    return result


if __name__ == "__main__":
    main()
