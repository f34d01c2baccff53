#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格地图

只保存静态的可通行信息（numpy 布尔数组，按 [y, x] 索引），
搜索过程中的 g/h/f/parent 等临时状态由寻路器自己的搜索区维护。
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from boulder_ai.pathfinding.errors import GridBoundsError, GridShapeError

GridCoord = Tuple[int, int]  # (x, y)
Matrix = Union[np.ndarray, Sequence[Sequence[Union[int, bool]]]]

# 上、右、下、左
ORTHOGONAL_OFFSETS: Tuple[GridCoord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class Node:
    """栅格中的一个格子"""
    x: int
    y: int
    walkable: bool = True

    @property
    def coord(self) -> GridCoord:
        return (self.x, self.y)


class Grid:
    """
    栅格地图

    matrix 为 0/1 矩阵：0（或 False）= 可通行，非 0 = 障碍。
    不提供 matrix 时所有格子可通行。

    示例:
        ```python
        grid = Grid.from_matrix([[0, 1, 0],
                                 [0, 0, 0]])
        grid.is_walkable_at(1, 0)   # False
        ```
    """

    def __init__(self, width: int, height: int, matrix: Optional[Matrix] = None):
        if width <= 0 or height <= 0:
            raise GridShapeError(f"栅格尺寸必须大于0: width={width}, height={height}")

        self.width = int(width)
        self.height = int(height)

        if matrix is None:
            self._walkable = np.ones((self.height, self.width), dtype=bool)
        else:
            blocked = _as_blocked_array(matrix)
            if blocked.shape != (self.height, self.width):
                raise GridShapeError(
                    f"矩阵尺寸与栅格不符: matrix={blocked.shape[::-1]}, "
                    f"grid=({self.width}, {self.height})"
                )
            self._walkable = ~blocked

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Grid":
        """按矩阵自身的行列数构建栅格"""
        blocked = _as_blocked_array(matrix)
        height, width = blocked.shape
        return cls(width, height, blocked)

    @classmethod
    def from_walkable(cls, walkable: np.ndarray) -> "Grid":
        """由 [y, x] 布尔可通行数组构建（数组会被复制）"""
        walkable = np.asarray(walkable, dtype=bool)
        if walkable.ndim != 2 or walkable.size == 0:
            raise GridShapeError(f"可通行数组必须是非空二维数组: shape={walkable.shape}")
        grid = cls(walkable.shape[1], walkable.shape[0])
        grid._walkable = walkable.copy()
        return grid

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------
    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def walkable(self) -> np.ndarray:
        """只读视图，按 [y, x] 索引"""
        view = self._walkable.view()
        view.flags.writeable = False
        return view

    @property
    def walkable_count(self) -> int:
        return int(np.count_nonzero(self._walkable))

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable_at(self, x: int, y: int) -> bool:
        """越界或障碍返回 False，越界不抛异常"""
        return 0 <= x < self.width and 0 <= y < self.height and bool(self._walkable[y, x])

    def get_node_at(self, x: int, y: int) -> Node:
        self._check_inside(x, y)
        return Node(x, y, bool(self._walkable[y, x]))

    def get_walkable_neighbors(self, node: Node) -> List[Node]:
        """上、右、下、左四个方向上可通行的邻居"""
        neighbors = []
        for dx, dy in ORTHOGONAL_OFFSETS:
            nx, ny = node.x + dx, node.y + dy
            if self.is_walkable_at(nx, ny):
                neighbors.append(Node(nx, ny, True))
        return neighbors

    def get_neighbors(self, node: Node, radius: int = 1) -> List[Node]:
        """
        切比雪夫半径内的所有格子（含自身和对角），裁剪到栅格范围内

        用于危险物邻近判断等非搜索逻辑，不考虑可通行性。

        Args:
            node: 中心格子
            radius: 半径

        Returns:
            按行优先顺序排列的格子列表
        """
        neighbors = []
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                x, y = node.x + dx, node.y + dy
                if not self.is_inside(x, y):
                    continue
                neighbors.append(Node(x, y, bool(self._walkable[y, x])))
        return neighbors

    # ------------------------------------------------------------------
    # 修改
    # ------------------------------------------------------------------
    def set_walkable_at(self, x: int, y: int, walkable: bool) -> None:
        self._check_inside(x, y)
        self._walkable[y, x] = bool(walkable)

    def clone(self) -> "Grid":
        """深拷贝可通行信息"""
        return Grid.from_walkable(self._walkable)

    def to_matrix(self) -> List[List[int]]:
        """导出为 0/1 矩阵（1 = 障碍）"""
        return (~self._walkable).astype(np.uint8).tolist()

    # ------------------------------------------------------------------
    # 内部
    # ------------------------------------------------------------------
    def _check_inside(self, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            raise GridBoundsError(
                f"坐标超出栅格范围: ({x}, {y}), grid_size=({self.width}, {self.height})"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._walkable, other._walkable))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, walkable={self.walkable_count})"


def _as_blocked_array(matrix: Matrix) -> np.ndarray:
    """把 0/1 矩阵转成 [y, x] 的障碍布尔数组，行长度不一致时快速失败"""
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2 or matrix.size == 0:
            raise GridShapeError(f"矩阵必须是非空二维数组: shape={matrix.shape}")
        return matrix.astype(bool)

    rows = list(matrix)
    if not rows or len(rows[0]) == 0:
        raise GridShapeError("矩阵不能为空")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise GridShapeError(f"矩阵第 {y} 行长度为 {len(row)}，期望 {width}")

    return np.array([[bool(v) for v in row] for row in rows], dtype=bool)
