"""
run_simulator.py - 启动拦截仿真

用法: python run_simulator.py
"""
from projectile_intercept.run import main
import sys
import os

# 添加项目路径
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)


if __name__ == "__main__":
    print("Starting Projectile Intercept Simulation...")
    print("=" * 50)
    main()
