#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路核心模块

提供栅格地图、二叉堆、启发式函数和跳点搜索寻路器。
"""

from .errors import PathfindingError, InvalidDirectionError, GridShapeError, GridBoundsError
from .heuristic import manhattan, euclidean, octile, chebyshev, HEURISTICS, get_heuristic
from .heap import BinaryHeap, HeapType
from .grid import Grid, Node, GridCoord
from .path_utils import backtrace, interpolate, expand_path
from .jump_point_finder import JumpPointFinder, SearchStats, find_path

__all__ = [
    'PathfindingError',
    'InvalidDirectionError',
    'GridShapeError',
    'GridBoundsError',
    'manhattan',
    'euclidean',
    'octile',
    'chebyshev',
    'HEURISTICS',
    'get_heuristic',
    'BinaryHeap',
    'HeapType',
    'Grid',
    'Node',
    'GridCoord',
    'backtrace',
    'interpolate',
    'expand_path',
    'JumpPointFinder',
    'SearchStats',
    'find_path',
]
