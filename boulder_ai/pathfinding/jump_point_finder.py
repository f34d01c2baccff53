#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
跳点搜索（Jump Point Search）寻路器

只允许上下左右移动的 A* 变体：沿直线“跳跃”，跳过不需要做决策的格子，
只把跳点放进 open 表。结果是从起点到终点逐格展开的稠密路径。

每次 find_path 都会新建一个搜索区（SearchArena），g/h/f/parent/opened/closed
都保存在搜索区里，栅格本身只读，可以被多次（或并发）搜索共享。
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple

import numpy as np
from loguru import logger

from boulder_ai.pathfinding.errors import GridBoundsError, InvalidDirectionError
from boulder_ai.pathfinding.grid import Grid, GridCoord, Node
from boulder_ai.pathfinding.heap import BinaryHeap, HeapType
from boulder_ai.pathfinding.heuristic import Heuristic, chebyshev, get_heuristic, octile
from boulder_ai.pathfinding.path_utils import backtrace, expand_path

if TYPE_CHECKING:
    from boulder_ai.config.models import PathfindingConfig


class OpenEntry(NamedTuple):
    """open 表中的记录（入堆时的快照，之后不会再修改）"""
    f: float
    h: float
    y: int
    x: int


def compare_open_entries(a: OpenEntry, b: OpenEntry) -> float:
    """按 f 升序，f 相同时 h 小的优先，再按 (y, x) 字典序"""
    if a.f != b.f:
        return a.f - b.f
    if a.h != b.h:
        return a.h - b.h
    if a.y != b.y:
        return a.y - b.y
    return a.x - b.x


class SearchArena:
    """单次搜索的节点状态，按扁平下标 y * width + x 存储"""

    def __init__(self, width: int, height: int, track_tested: bool = False):
        size = width * height
        self.width = width
        self.g = np.full(size, np.inf)
        self.h = np.full(size, np.nan)  # NaN = 尚未计算
        self.f = np.full(size, np.inf)
        self.parent = np.full(size, -1, dtype=np.int64)
        self.opened = np.zeros(size, dtype=bool)
        self.closed = np.zeros(size, dtype=bool)
        self.tested: Optional[np.ndarray] = (
            np.zeros((height, width), dtype=bool) if track_tested else None
        )

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coord(self, index: int) -> GridCoord:
        y, x = divmod(int(index), self.width)
        return (x, y)


@dataclass
class SearchStats:
    """最近一次搜索的统计信息"""
    expanded: int = 0   # 弹出并扩展的节点数
    opened: int = 0     # 首次加入 open 表的节点数
    stale: int = 0      # 弹出时已关闭而被跳过的重复记录
    path_length: int = 0


class JumpPointFinder:
    """
    跳点搜索寻路器

    示例:
        ```python
        finder = JumpPointFinder(heuristic=manhattan)
        path = finder.find_path((0, 0), (4, 4), grid)
        ```
    """

    def __init__(self, heuristic: Heuristic = chebyshev, track_jump_recursion: bool = False):
        """
        Args:
            heuristic: 目标距离启发式函数，输入为非负 (dx, dy)
            track_jump_recursion: 是否记录跳点扫描访问过的格子（仅用于诊断和可视化）
        """
        self.heuristic = heuristic
        self.track_jump_recursion = track_jump_recursion

        self.last_stats = SearchStats()
        self.last_tested: Optional[np.ndarray] = None

        # 单次搜索状态
        self._grid: Optional[Grid] = None
        self._arena: Optional[SearchArena] = None
        self._open: Optional[BinaryHeap] = None
        self._goal: GridCoord = (-1, -1)

    @classmethod
    def from_config(cls, cfg: "PathfindingConfig") -> "JumpPointFinder":
        return cls(
            heuristic=get_heuristic(cfg.heuristic),
            track_jump_recursion=cfg.track_jump_recursion,
        )

    def find_path(self, start: GridCoord, goal: GridCoord, grid: Grid) -> List[GridCoord]:
        """
        计算从 start 到 goal 的最短横竖路径

        Args:
            start: 起点 (x, y)
            goal: 终点 (x, y)
            grid: 栅格地图（不会被修改）

        Returns:
            逐格路径 [(x, y), ...]，包含起点和终点；起点等于终点或无路可走时返回 []

        Raises:
            GridBoundsError: 起点或终点超出栅格范围
        """
        sx, sy = start
        gx, gy = goal
        if not grid.is_inside(sx, sy) or not grid.is_inside(gx, gy):
            raise GridBoundsError(
                f"起点或终点超出栅格范围: start={start}, goal={goal}, grid_size={grid.size}"
            )

        arena = SearchArena(grid.width, grid.height, self.track_jump_recursion)
        open_list = BinaryHeap(HeapType.MIN, compare_open_entries)
        stats = SearchStats()

        self._grid = grid
        self._arena = arena
        self._open = open_list
        self._goal = (gx, gy)
        self.last_stats = stats

        start_index = arena.index(sx, sy)
        arena.g[start_index] = 0.0
        arena.f[start_index] = 0.0
        arena.opened[start_index] = True
        open_list.insert(OpenEntry(0.0, 0.0, sy, sx))
        stats.opened += 1

        logger.debug(f"[JPS] 开始搜索: grid_size={grid.size}, start={start}, goal={goal}")

        try:
            while not open_list.is_empty():
                entry = open_list.extract_top()
                index = arena.index(entry.x, entry.y)
                if arena.closed[index]:
                    stats.stale += 1
                    continue

                arena.closed[index] = True
                stats.expanded += 1

                if (entry.x, entry.y) == self._goal:
                    path = expand_path(backtrace(index, arena.parent, arena.width))
                    stats.path_length = len(path)
                    logger.debug(
                        f"[JPS] 搜索成功: 路径长度={len(path)}, 扩展节点数={stats.expanded}, "
                        f"跳点数={stats.opened}"
                    )
                    return path

                self._identify_successors(entry.x, entry.y)

            logger.debug(
                f"[JPS] 无法找到路径: start={start}, goal={goal}, 扩展节点数={stats.expanded}"
            )
            return []
        finally:
            self.last_tested = arena.tested
            self._grid = None
            self._arena = None
            self._open = None

    # ------------------------------------------------------------------
    # 后继节点
    # ------------------------------------------------------------------
    def _identify_successors(self, x: int, y: int) -> None:
        arena = self._arena
        goal_x, goal_y = self._goal
        index = arena.index(x, y)
        g = float(arena.g[index])

        for nx, ny in self._find_neighbors(x, y):
            jump_point = self._jump(nx, ny, x, y)
            if jump_point is None:
                continue

            jx, jy = jump_point
            jump_index = arena.index(jx, jy)
            if arena.closed[jump_index]:
                continue

            # 跳点可能与当前节点相隔多格
            ng = g + octile(abs(jx - x), abs(jy - y))

            was_opened = bool(arena.opened[jump_index])
            if not was_opened or ng < arena.g[jump_index]:
                h = float(arena.h[jump_index])
                if np.isnan(h):
                    h = float(self.heuristic(abs(jx - goal_x), abs(jy - goal_y)))
                    arena.h[jump_index] = h

                f = ng + h
                arena.g[jump_index] = ng
                arena.f[jump_index] = f
                arena.parent[jump_index] = index

                # 不做 decrease-key，直接插入新记录，旧记录弹出时跳过
                self._open.insert(OpenEntry(f, h, jy, jx))
                if not was_opened:
                    arena.opened[jump_index] = True
                    self.last_stats.opened += 1

    def _find_neighbors(self, x: int, y: int) -> List[GridCoord]:
        """
        按行进方向剪枝后的待扫描邻居

        有父节点时只保留前进方向和两侧（可通行的）格子；
        没有父节点（起点）时返回四个方向上所有可通行的邻居。
        """
        grid = self._grid
        arena = self._arena
        parent = int(arena.parent[arena.index(x, y)])

        if parent < 0:
            return [node.coord for node in grid.get_walkable_neighbors(Node(x, y))]

        px, py = arena.coord(parent)
        dx = (x - px) // max(abs(x - px), 1)
        dy = (y - py) // max(abs(y - py), 1)

        neighbors = []
        if dx != 0:
            if grid.is_walkable_at(x, y - 1):
                neighbors.append((x, y - 1))
            if grid.is_walkable_at(x, y + 1):
                neighbors.append((x, y + 1))
            if grid.is_walkable_at(x + dx, y):
                neighbors.append((x + dx, y))
        elif dy != 0:
            if grid.is_walkable_at(x - 1, y):
                neighbors.append((x - 1, y))
            if grid.is_walkable_at(x + 1, y):
                neighbors.append((x + 1, y))
            if grid.is_walkable_at(x, y + dy):
                neighbors.append((x, y + dy))
        return neighbors

    # ------------------------------------------------------------------
    # 跳点扫描
    # ------------------------------------------------------------------
    def _jump(self, x: int, y: int, from_x: int, from_y: int) -> Optional[GridCoord]:
        """
        从 (from_x, from_y) 向 (x, y) 方向扫描，返回遇到的第一个跳点

        Raises:
            InvalidDirectionError: 方向不是纯水平或纯竖直
        """
        dx = x - from_x
        dy = y - from_y
        if (dx == 0) == (dy == 0):
            raise InvalidDirectionError(
                f"只允许水平或竖直移动: ({from_x}, {from_y}) -> ({x}, {y})"
            )

        if dx != 0:
            return self._jump_horizontal(x, y, 1 if dx > 0 else -1)
        return self._jump_vertical(x, y, 1 if dy > 0 else -1)

    def _jump_horizontal(self, x: int, y: int, dx: int) -> Optional[GridCoord]:
        grid = self._grid
        while True:
            if not grid.is_walkable_at(x, y):
                return None
            self._mark_tested(x, y)

            if (x, y) == self._goal:
                return (x, y)

            # 上方/下方可走而其后方被挡：障碍边缘，需要在此转向
            if ((grid.is_walkable_at(x, y - 1) and not grid.is_walkable_at(x - dx, y - 1)) or
                    (grid.is_walkable_at(x, y + 1) and not grid.is_walkable_at(x - dx, y + 1))):
                return (x, y)

            x += dx

    def _jump_vertical(self, x: int, y: int, dy: int) -> Optional[GridCoord]:
        grid = self._grid
        while True:
            if not grid.is_walkable_at(x, y):
                return None
            self._mark_tested(x, y)

            if (x, y) == self._goal:
                return (x, y)

            if ((grid.is_walkable_at(x - 1, y) and not grid.is_walkable_at(x - 1, y - dy)) or
                    (grid.is_walkable_at(x + 1, y) and not grid.is_walkable_at(x + 1, y - dy))):
                return (x, y)

            # 竖直移动时还要检查水平方向能否到达跳点，能则当前格是分叉点
            if (self._jump_horizontal(x + 1, y, 1) is not None or
                    self._jump_horizontal(x - 1, y, -1) is not None):
                return (x, y)

            y += dy

    def _mark_tested(self, x: int, y: int) -> None:
        tested = self._arena.tested if self._arena is not None else None
        if tested is not None:
            tested[y, x] = True


def find_path(
    start: GridCoord,
    goal: GridCoord,
    grid: Grid,
    heuristic: Heuristic = chebyshev,
) -> List[GridCoord]:
    """便捷函数：用给定启发式做一次跳点搜索"""
    return JumpPointFinder(heuristic=heuristic).find_path(start, goal, grid)


if __name__ == "__main__":
    # 简单自测：中间一列是墙，只在 y=3 开一个口
    from boulder_ai.utils.debug_dump import render_grid

    walls = [[0] * 5 for _ in range(5)]
    for row in range(5):
        walls[row][2] = 1
    walls[3][2] = 0

    demo_grid = Grid.from_matrix(walls)
    demo_start: Tuple[int, int] = (0, 0)
    demo_goal: Tuple[int, int] = (4, 0)

    demo_finder = JumpPointFinder(track_jump_recursion=True)
    demo_path = demo_finder.find_path(demo_start, demo_goal, demo_grid)

    logger.info(f"path: {demo_path}")
    logger.info(f"stats: {demo_finder.last_stats}")
    logger.info("\n" + render_grid(demo_grid, demo_path, demo_start, demo_goal))
