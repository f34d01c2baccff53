#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
启发式函数

所有函数的输入 dx、dy 均为已取绝对值的非负坐标差。
"""

import math
from typing import Callable, Dict

Heuristic = Callable[[float, float], float]

_SQRT2_MINUS_1 = math.sqrt(2) - 1


def manhattan(dx: float, dy: float) -> float:
    """曼哈顿距离: dx + dy"""
    return dx + dy


def euclidean(dx: float, dy: float) -> float:
    """欧氏距离: sqrt(dx^2 + dy^2)"""
    return math.sqrt(dx * dx + dy * dy)


def octile(dx: float, dy: float) -> float:
    """
    八方向距离: (sqrt(2) - 1) * min(dx, dy) + max(dx, dy)

    寻路器内部也用它计算节点到跳点的边代价。只允许横竖移动时，
    单次跳跃总有一个分量为 0，结果退化为直线步数。
    """
    if dx < dy:
        return _SQRT2_MINUS_1 * dx + dy
    return _SQRT2_MINUS_1 * dy + dx


def chebyshev(dx: float, dy: float) -> float:
    """切比雪夫距离: max(dx, dy)"""
    return max(dx, dy)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "octile": octile,
    "chebyshev": chebyshev,
}


def get_heuristic(name: str) -> Heuristic:
    """
    按名称获取启发式函数

    Args:
        name: 启发式名称（manhattan / euclidean / octile / chebyshev）

    Returns:
        对应的启发式函数

    Raises:
        ValueError: 未知名称
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"未知的启发式函数: {name}，可选: {', '.join(sorted(HEURISTICS))}"
        ) from None
