#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径工具：回溯与路径展开
"""

from typing import List, Sequence

import numpy as np

from boulder_ai.pathfinding.grid import GridCoord


def backtrace(end_index: int, parents: np.ndarray, width: int) -> List[GridCoord]:
    """
    沿 parent 链从终点回溯到起点，返回起点在前的稀疏路径（含首尾）

    Args:
        end_index: 终点的扁平下标 (y * width + x)
        parents: 扁平 parent 下标数组，-1 表示没有父节点
        width: 栅格宽度

    Returns:
        [(x, y), ...]
    """
    path = []
    index = int(end_index)
    while index >= 0:
        y, x = divmod(index, width)
        path.append((x, y))
        index = int(parents[index])
    path.reverse()
    return path


def interpolate(x0: int, y0: int, x1: int, y1: int) -> List[GridCoord]:
    """
    Bresenham 直线算法，返回两点连线经过的所有格子（含首尾）
    """
    line = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        line.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy

    return line


def expand_path(path: Sequence[GridCoord]) -> List[GridCoord]:
    """
    把稀疏路径展开成逐格路径，相邻线段共享的端点只保留一次

    少于 2 个路径点时返回空列表。
    """
    if len(path) < 2:
        return []

    expanded: List[GridCoord] = []
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        segment = interpolate(x0, y0, x1, y1)
        expanded.extend(segment[:-1])

    last_x, last_y = path[-1]
    expanded.append((last_x, last_y))
    return expanded
