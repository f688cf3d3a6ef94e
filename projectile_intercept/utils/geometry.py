"""
geometry.py - 二维向量工具函数

提供拦截仿真所需的基础向量运算：加法、缩放、模长、归一化、夹角
所有函数都是纯函数，返回新的 np.ndarray，不修改输入
"""
import numpy as np

# 小于该模长的向量视为零向量
EPSILON = 1e-12


class DegenerateVectorError(ValueError):
    """对零向量进行归一化或求夹角时抛出"""


def add(a, b):
    """向量加法"""
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def scale(v, k):
    """向量数乘"""
    return np.asarray(v, dtype=float) * float(k)


def magnitude(v):
    """向量模长"""
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def distance(a, b):
    """两点间的欧氏距离"""
    return magnitude(np.asarray(a, dtype=float) - np.asarray(b, dtype=float))


def normalize(v):
    """
    向量归一化

    Args:
        v: 输入向量

    Returns:
        np.ndarray: 单位向量

    Raises:
        DegenerateVectorError: 输入为零向量
    """
    v = np.asarray(v, dtype=float)
    norm = np.linalg.norm(v)
    if norm < EPSILON:
        raise DegenerateVectorError(f"cannot normalize zero-length vector {v}")
    return v / norm


def angle_between_degrees(a, b):
    """
    计算两向量之间的夹角

    点积先截断到 [-1, 1]，避免浮点误差导致 arccos 定义域错误

    Args:
        a, b: 输入向量

    Returns:
        float: 夹角 (deg), 范围 [0, 180]

    Raises:
        DegenerateVectorError: 任一向量为零向量
    """
    a = normalize(a)
    b = normalize(b)
    dot = np.clip(np.dot(a, b), -1.0, 1.0)
    return float(np.rad2deg(np.arccos(dot)))


def heading_vector(heading_deg):
    """
    由绝对航向角得到单位方向向量

    Args:
        heading_deg: 航向角 (deg)，0 为 +x 方向，逆时针为正

    Returns:
        np.ndarray: 单位向量
    """
    heading = np.deg2rad(heading_deg)
    return np.array([np.cos(heading), np.sin(heading)])
