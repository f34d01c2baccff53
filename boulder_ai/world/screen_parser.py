#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
画面解析模块

把 ASCII 画面解析为可通行栅格和带类别标记的实体列表：
- 空地、泥土、钻石、玩家可通行；墙、石头不可通行
- 石头/钻石下方为空时，下方格子视为障碍（防止被砸）
- 蝴蝶周围一圈视为障碍
"""

from typing import List, Optional, Sequence, Set, Union

from loguru import logger

from boulder_ai.config.models import ParserConfig
from boulder_ai.pathfinding.errors import GridShapeError
from boulder_ai.pathfinding.grid import Grid, Node
from boulder_ai.world.entities import (
    BUTTERFLY_SYMBOLS,
    FALLING_SYMBOLS,
    SYMBOL_BOULDER,
    SYMBOL_DIAMOND,
    SYMBOL_DIRT,
    SYMBOL_EMPTY,
    SYMBOL_PLAYER,
    WALL_SYMBOLS,
    Entity,
    EntityKind,
    WorldSnapshot,
)

Screen = Union[str, Sequence[str]]


def split_screen(screen: Screen) -> List[str]:
    """多行字符串按行拆分，列表原样复制；末尾的空行会被去掉"""
    if isinstance(screen, str):
        rows = screen.splitlines()
    else:
        rows = list(screen)
    while rows and rows[-1] == "":
        rows.pop()
    return rows


def parse_screen(screen: Screen, config: Optional[ParserConfig] = None) -> WorldSnapshot:
    """
    解析一帧画面

    Args:
        screen: 画面行列表或多行字符串，末尾 status_lines 行为状态栏
        config: 解析配置

    Returns:
        WorldSnapshot

    Raises:
        GridShapeError: 画面为空或行长度不一致
    """
    config = config or ParserConfig()
    rows = split_screen(screen)
    if config.status_lines:
        rows = rows[:-config.status_lines]

    if not rows or not rows[0]:
        raise GridShapeError("画面为空")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise GridShapeError(f"画面第 {y} 行长度为 {len(row)}，期望 {width}")

    height = len(rows)
    grid = Grid(width, height)
    snapshot = WorldSnapshot(grid=grid, rows=rows)
    unknown: Set[str] = set()

    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            if symbol in (SYMBOL_EMPTY, SYMBOL_DIRT):
                continue

            if symbol == SYMBOL_PLAYER:
                snapshot.player = (x, y)
            elif symbol == SYMBOL_DIAMOND:
                snapshot.goals.append(Entity(x, y, EntityKind.GOAL, symbol))
            elif symbol in WALL_SYMBOLS or symbol == SYMBOL_BOULDER:
                snapshot.obstacles.append(Entity(x, y, EntityKind.OBSTACLE, symbol))
                grid.set_walkable_at(x, y, False)
            elif symbol in BUTTERFLY_SYMBOLS:
                butterfly = Entity(x, y, EntityKind.HAZARD, symbol)
                snapshot.hazards.append(butterfly)
                if config.hunt_hazards:
                    snapshot.goals.append(Entity(x, y, EntityKind.GOAL, symbol))
                else:
                    _block_around(grid, x, y, config.hazard_buffer_radius)
            else:
                unknown.add(symbol)
                grid.set_walkable_at(x, y, False)

            if config.guard_falling_objects and symbol in FALLING_SYMBOLS:
                below = y + 1
                if below < height and rows[below][x] == SYMBOL_EMPTY:
                    grid.set_walkable_at(x, below, False)

    if unknown:
        logger.debug(f"画面中存在未知符号，按障碍处理: {sorted(unknown)}")

    if snapshot.player is not None:
        grid.set_walkable_at(*snapshot.player, True)
    else:
        logger.debug("画面中没有找到玩家")

    return snapshot


def _block_around(grid: Grid, x: int, y: int, radius: int) -> None:
    """把 (x, y) 周围切比雪夫半径内的格子（含自身）设为障碍"""
    for node in grid.get_neighbors(Node(x, y), radius):
        grid.set_walkable_at(node.x, node.y, False)
