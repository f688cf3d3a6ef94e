"""
main_example.py - 拦截点估计器对比示例

对同一组随机种子，比较不同拦截点估计器的碰撞步数与碰撞夹角
"""
from projectile_intercept.core.config import SimulationConfig
from projectile_intercept.core.pursuer_model import ESTIMATORS, get_estimator
from projectile_intercept.simulation.engine import Collided, run_simulation
import sys
import os

# 添加包路径（支持从包内部或外部运行）
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
sys.path.insert(0, parent_dir)


def compare_estimators(seeds=(0, 1, 2, 3, 4), config=None):
    """
    对每个估计器和种子运行一次仿真

    Returns:
        dict: {估计器名称: [(seed, outcome), ...]}
    """
    config = config if config is not None else SimulationConfig()
    results = {}
    for name in sorted(ESTIMATORS):
        results[name] = [
            (seed, run_simulation(config, get_estimator(name), seed=seed).outcome)
            for seed in seeds
        ]
    return results


def main():
    """运行对比示例"""
    print("=" * 60)
    print("拦截点估计器对比")
    print("=" * 60)

    for name, runs in compare_estimators().items():
        print(f"\n估计器: {name}")
        for seed, outcome in runs:
            if isinstance(outcome, Collided):
                print(f"  seed={seed}: 第 {outcome.step} 步碰撞, "
                      f"夹角 {outcome.angle_degrees:.2f}° ({outcome.classification})")
            else:
                print(f"  seed={seed}: {outcome.steps_run} 步内未碰撞")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
