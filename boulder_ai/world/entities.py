#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
画面实体定义
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from boulder_ai.pathfinding.grid import Grid, GridCoord


class EntityKind(Enum):
    """实体类别"""
    GOAL = "goal"           # 可收集的目标（钻石，猎杀模式下也包括蝴蝶）
    HAZARD = "hazard"       # 会移动的危险物（蝴蝶）
    OBSTACLE = "obstacle"   # 静态障碍（墙、石头）


# 画面符号
SYMBOL_EMPTY = ' '
SYMBOL_DIRT = ':'
SYMBOL_PLAYER = 'A'
SYMBOL_DIAMOND = '*'
SYMBOL_BOULDER = 'O'
SYMBOL_BRICK = '+'
SYMBOL_STEEL = '#'
BUTTERFLY_SYMBOLS = frozenset('|/\\-')
WALL_SYMBOLS = frozenset((SYMBOL_BRICK, SYMBOL_STEEL))
FALLING_SYMBOLS = frozenset((SYMBOL_BOULDER, SYMBOL_DIAMOND))


@dataclass(frozen=True)
class Entity:
    """画面上的一个实体"""
    x: int
    y: int
    kind: EntityKind
    symbol: str

    @property
    def coord(self) -> GridCoord:
        return (self.x, self.y)


@dataclass
class WorldSnapshot:
    """单帧画面的解析结果"""
    grid: Grid
    rows: List[str]
    player: Optional[GridCoord] = None
    goals: List[Entity] = field(default_factory=list)
    hazards: List[Entity] = field(default_factory=list)
    obstacles: List[Entity] = field(default_factory=list)

    @property
    def size(self) -> Tuple[int, int]:
        return self.grid.size

    def symbol_at(self, x: int, y: int) -> Optional[str]:
        """返回 (x, y) 处的画面符号，越界返回 None"""
        if not self.grid.is_inside(x, y):
            return None
        return self.rows[y][x]

    def is_hazard_at(self, x: int, y: int) -> bool:
        return self.symbol_at(x, y) in BUTTERFLY_SYMBOLS
