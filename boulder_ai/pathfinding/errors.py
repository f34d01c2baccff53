#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路模块异常定义
"""


class PathfindingError(Exception):
    """寻路相关异常基类"""


class InvalidDirectionError(PathfindingError):
    """跳点扫描方向非法（不是纯水平或纯竖直），属于调用方编程错误"""


class GridShapeError(PathfindingError, ValueError):
    """栅格矩阵形状非法（行长度不一致或与声明尺寸不符）"""


class GridBoundsError(PathfindingError, IndexError):
    """坐标超出栅格范围"""
