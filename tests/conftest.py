from collections import deque

import pytest

from boulder_ai.pathfinding.grid import Grid


def grid_from_rows(rows):
    """'#' = 障碍，其他字符 = 可通行"""
    return Grid.from_matrix([[1 if ch == '#' else 0 for ch in row] for row in rows])


def bfs_distance(grid, start, goal):
    """四方向 BFS 最短步数，不可达返回 None"""
    if start == goal:
        return 0
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        (x, y), dist = queue.popleft()
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nxt = (x + dx, y + dy)
            if nxt in seen or not grid.is_walkable_at(*nxt):
                continue
            if nxt == goal:
                return dist + 1
            seen.add(nxt)
            queue.append((nxt, dist + 1))
    return None


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture
def shortest_distance():
    return bfs_distance


@pytest.fixture
def wall_with_gap_grid():
    # x=2 是墙，只在 y=3 留一个口
    return grid_from_rows([
        "..#..",
        "..#..",
        "..#..",
        ".....",
        "..#..",
    ])
