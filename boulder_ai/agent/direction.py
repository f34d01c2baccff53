#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
移动方向与协议指令
"""

from enum import Enum
from typing import Optional, Tuple

from boulder_ai.pathfinding.grid import GridCoord

GIVE_UP_COMMAND = 'q'


class Direction(Enum):
    """移动方向，值为 (dx, dy, 指令字符)"""
    STAY = (0, 0, 's')
    UP = (0, -1, 'u')
    RIGHT = (1, 0, 'r')
    DOWN = (0, 1, 'd')
    LEFT = (-1, 0, 'l')

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value[0], self.value[1]

    @property
    def command(self) -> str:
        return self.value[2]

    def reverse(self) -> "Direction":
        return _REVERSE[self]

    def apply(self, pos: GridCoord) -> GridCoord:
        dx, dy = self.offset
        return (pos[0] + dx, pos[1] + dy)

    @staticmethod
    def towards(src: GridCoord, dst: GridCoord) -> "Direction":
        """
        从 src 走向 dst 的单步方向，先横向后纵向

        Args:
            src: 当前位置
            dst: 目标位置

        Returns:
            方向，两点重合时为 STAY
        """
        if dst[0] < src[0]:
            return Direction.LEFT
        if dst[0] > src[0]:
            return Direction.RIGHT
        if dst[1] < src[1]:
            return Direction.UP
        if dst[1] > src[1]:
            return Direction.DOWN
        return Direction.STAY


_REVERSE = {
    Direction.STAY: Direction.STAY,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def encode_command(direction: Optional[Direction]) -> str:
    """方向转协议指令，None 视为原地不动"""
    if direction is None:
        return Direction.STAY.command
    return direction.command
