#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
收集钻石的决策 AI

每帧：解析画面 → 按距离给钻石排序 → 跳点搜索规划路径 → 躲避蝴蝶和坠落物
→ 输出单字符指令（u/d/l/r/s，无目标时 q）。
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, Optional

from loguru import logger

from boulder_ai.agent.direction import GIVE_UP_COMMAND, Direction, encode_command
from boulder_ai.config.models import AgentConfig
from boulder_ai.pathfinding.grid import GridCoord, Node
from boulder_ai.pathfinding.heap import BinaryHeap, HeapType
from boulder_ai.pathfinding.heuristic import get_heuristic
from boulder_ai.pathfinding.jump_point_finder import JumpPointFinder
from boulder_ai.utils.debug_dump import render_grid
from boulder_ai.world.entities import FALLING_SYMBOLS, SYMBOL_EMPTY, Entity, WorldSnapshot
from boulder_ai.world.screen_parser import Screen, parse_screen


@dataclass
class RankedGoal:
    """按距离排序的目标"""
    distance: float
    entity: Entity


def _compare_distance(a: RankedGoal, b: RankedGoal) -> float:
    return a.distance - b.distance


class GemAgent:
    """
    钻石收集 AI

    示例:
        ```python
        agent = GemAgent(config)
        for command in agent.play(screens):
            send(command)
        ```
    """

    def __init__(self, config: Optional[AgentConfig] = None):
        self.config_ = config or AgentConfig()
        self.finder_ = JumpPointFinder.from_config(self.config_.pathfinding)
        self.goal_distance_ = get_heuristic(self.config_.policy.goal_distance)

        self.path_: Deque[GridCoord] = deque()
        self.tick_count_ = 0
        self.idle_ticks_ = 0
        self.snapshot_: Optional[WorldSnapshot] = None
        self.target_: Optional[Entity] = None

    def reset(self) -> None:
        """重置单局状态"""
        self.path_.clear()
        self.tick_count_ = 0
        self.idle_ticks_ = 0
        self.snapshot_ = None
        self.target_ = None

    def play(self, screens: Iterable[Screen]) -> Iterator[str]:
        """对每一帧画面产出一条指令"""
        for screen in screens:
            yield self.step(screen)

    def step(self, screen: Screen) -> str:
        """
        处理一帧画面

        Args:
            screen: 画面行列表或多行字符串

        Returns:
            协议指令: 'u' / 'd' / 'l' / 'r' / 's' / 'q'
        """
        policy = self.config_.policy
        self.tick_count_ += 1

        snapshot = parse_screen(screen, self.config_.parser)
        self.snapshot_ = snapshot

        player = snapshot.player
        if player is None:
            logger.warning(f"[tick {self.tick_count_}] 画面中没有玩家，原地等待")
            self.path_.clear()
            return Direction.STAY.command

        hazard = self._find_hazard_near(player)

        if self.tick_count_ <= policy.warmup_ticks and hazard is None:
            return Direction.STAY.command

        if not policy.reuse_path:
            self.path_.clear()

        move = self._next_step(player)

        if hazard is not None:
            move = Direction.towards(player, hazard).reverse()
            self.path_.clear()
            logger.debug(f"[tick {self.tick_count_}] 蝴蝶靠近 {hazard}，向 {move.name} 躲避")

        if move is None or move is Direction.STAY or self._is_dangerous_move(player, move):
            planned = self._plan(snapshot, player)
            if isinstance(planned, str):
                return planned
            move = planned

        return encode_command(move)

    # ------------------------------------------------------------------
    # 规划
    # ------------------------------------------------------------------
    def _plan(self, snapshot: WorldSnapshot, player: GridCoord):
        """
        依次尝试最近的目标，直到找到一条路径

        Returns:
            下一步方向；没有目标时返回 'q'，所有目标都不可达时返回 's' 或 'q'
        """
        goals = self._rank_goals(snapshot, player)
        if goals.is_empty():
            logger.info(f"[tick {self.tick_count_}] 没有可收集的目标，放弃")
            return GIVE_UP_COMMAND

        ranked = goals.extract_top()
        while ranked is not None:
            path = self.finder_.find_path(player, ranked.entity.coord, snapshot.grid)
            if path:
                self.idle_ticks_ = 0
                self.target_ = ranked.entity
                self.path_ = deque(path[1:])
                logger.debug(
                    f"[tick {self.tick_count_}] 目标 {ranked.entity.coord}，"
                    f"距离={ranked.distance}，路径长度={len(path)}"
                )
                if self.config_.logging.debug_dump:
                    logger.debug("\n" + render_grid(snapshot.grid, path, player, ranked.entity.coord,
                                                     tested=self.finder_.last_tested))
                return self._next_step(player)
            ranked = goals.extract_top()

        self.idle_ticks_ += 1
        self.target_ = None
        if self.idle_ticks_ > self.config_.policy.max_idle_ticks:
            logger.warning(
                f"[tick {self.tick_count_}] 连续 {self.idle_ticks_} 帧找不到可达目标，放弃"
            )
            return GIVE_UP_COMMAND

        logger.debug(f"[tick {self.tick_count_}] 所有目标都不可达，原地等待")
        return Direction.STAY.command

    def _rank_goals(self, snapshot: WorldSnapshot, player: GridCoord) -> BinaryHeap:
        goals = BinaryHeap(HeapType.MIN, _compare_distance)
        for entity in snapshot.goals:
            distance = self.goal_distance_(abs(entity.x - player[0]), abs(entity.y - player[1]))
            goals.insert(RankedGoal(distance, entity))
        return goals

    def _next_step(self, player: GridCoord) -> Optional[Direction]:
        """取出路径上的下一个点，与玩家不相邻（上一步没走成）时丢弃整条路径"""
        if not self.path_:
            return None

        nx, ny = self.path_.popleft()
        if abs(nx - player[0]) + abs(ny - player[1]) != 1:
            logger.debug(f"[tick {self.tick_count_}] 路径与当前位置 {player} 不连续，丢弃")
            self.path_.clear()
            return None

        return Direction.towards(player, (nx, ny))

    # ------------------------------------------------------------------
    # 危险判断
    # ------------------------------------------------------------------
    def _find_hazard_near(self, player: GridCoord) -> Optional[GridCoord]:
        snapshot = self.snapshot_
        radius = self.config_.policy.danger_radius
        if radius <= 0 or not snapshot.hazards or self.config_.parser.hunt_hazards:
            return None

        for node in snapshot.grid.get_neighbors(Node(*player), radius):
            if snapshot.is_hazard_at(node.x, node.y):
                return node.coord
        return None

    def _is_dangerous_move(self, player: GridCoord, move: Direction) -> bool:
        """目标格不可通行，或走进去会被上方坠落物砸中"""
        tx, ty = move.apply(player)
        if not self.snapshot_.grid.is_walkable_at(tx, ty):
            return True
        return self._is_near_falling(tx, ty)

    def _is_near_falling(self, x: int, y: int) -> bool:
        """(x, y) 为空且正上方（或隔一格空地的上方）有石头或钻石"""
        symbol_at = self.snapshot_.symbol_at
        if symbol_at(x, y) != SYMBOL_EMPTY:
            return False
        if symbol_at(x, y - 1) in FALLING_SYMBOLS:
            return True
        return symbol_at(x, y - 1) == SYMBOL_EMPTY and symbol_at(x, y - 2) in FALLING_SYMBOLS
