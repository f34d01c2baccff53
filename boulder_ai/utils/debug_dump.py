#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
调试输出：把栅格和路径渲染成 ASCII 图

    '#' = 障碍, '.' = 空地, '*' = 路径, 'S' = 起点, 'G' = 终点, '+' = 跳点扫描访问过
"""

from typing import Optional, Sequence

import numpy as np

from boulder_ai.pathfinding.grid import Grid, GridCoord


def render_grid(
    grid: Grid,
    path: Optional[Sequence[GridCoord]] = None,
    start: Optional[GridCoord] = None,
    goal: Optional[GridCoord] = None,
    tested: Optional[np.ndarray] = None,
) -> str:
    """
    渲染栅格

    Args:
        grid: 栅格地图
        path: 路径点列表
        start: 起点
        goal: 终点
        tested: 跳点扫描访问标记（JumpPointFinder.last_tested）

    Returns:
        多行字符串，每行对应栅格的一行
    """
    vis = np.where(grid.walkable, '.', '#').astype('<U1')

    if tested is not None:
        vis[np.logical_and(tested, grid.walkable)] = '+'

    for x, y in path or []:
        vis[y, x] = '*'

    # 标记起点终点
    if start is not None:
        vis[start[1], start[0]] = 'S'
    if goal is not None:
        vis[goal[1], goal[0]] = 'G'

    return "\n".join("".join(row) for row in vis)
