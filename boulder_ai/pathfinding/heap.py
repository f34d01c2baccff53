#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
二叉堆（优先队列）

数组存储、下标从 1 开始的二叉堆，通过比较函数和极性（最小堆/最大堆）排序。
寻路器用它做 open 表，决策层用它按距离给目标排序。
"""

from enum import IntEnum
from typing import Any, Callable, List, Optional

Comparator = Callable[[Any, Any], float]

INIT_CAPACITY = 10


class HeapType(IntEnum):
    """堆极性，值直接乘到比较结果上"""
    MIN = 1
    MAX = -1


def _subtract(a: Any, b: Any) -> float:
    return a - b


class BinaryHeap:
    """
    二叉堆

    compare(a, b) 返回负数表示 a 排在 b 前面；未提供时按 a - b 比较，
    即要求存入的记录本身可以相减（数值）。

    示例:
        ```python
        heap = BinaryHeap(HeapType.MIN, lambda a, b: a.distance - b.distance)
        heap.insert(target)
        nearest = heap.extract_top()
        ```
    """

    def __init__(self, heap_type: HeapType = HeapType.MIN, compare: Optional[Comparator] = None):
        if heap_type not in (HeapType.MIN, HeapType.MAX):
            heap_type = HeapType.MIN
        self.heap_type_ = HeapType(heap_type)
        self.compare_ = compare or _subtract

        self._items: List[Any] = [None] * (INIT_CAPACITY + 1)
        self._last = 0

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self._last == 0

    def size(self) -> int:
        return self._last

    def __len__(self) -> int:
        return self._last

    def __bool__(self) -> bool:
        return self._last > 0

    def peek(self) -> Optional[Any]:
        """返回堆顶但不移除，空堆返回 None"""
        if self._last < 1:
            return None
        return self._items[1]

    # ------------------------------------------------------------------
    # 修改
    # ------------------------------------------------------------------
    def clear(self) -> None:
        for i in range(1, self._last + 1):
            self._items[i] = None
        self._last = 0

    def insert(self, value: Any) -> None:
        """插入记录，容量不足时自动翻倍"""
        self._last += 1
        if self._last >= len(self._items):
            self._items.extend([None] * len(self._items))
        self._items[self._last] = value
        self._sift_up(self._last)

    def extract_top(self) -> Optional[Any]:
        """
        弹出堆顶记录

        Returns:
            堆顶记录；堆为空时返回 None（不抛异常）
        """
        if self._last < 1:
            return None

        value = self._items[1]
        self._items[1] = self._items[self._last]
        self._items[self._last] = None
        self._last -= 1

        if self._last > 1:
            self._sift_down(1)
        return value

    # 兼容旧接口
    push = insert
    pop = extract_top

    # ------------------------------------------------------------------
    # 内部实现
    # ------------------------------------------------------------------
    def _compare_at(self, a_index: int, b_index: int) -> float:
        return self.heap_type_ * self.compare_(self._items[a_index], self._items[b_index])

    def _swap(self, a_index: int, b_index: int) -> None:
        items = self._items
        items[a_index], items[b_index] = items[b_index], items[a_index]

    def _sift_up(self, index: int) -> None:
        while index > 1:
            parent = index >> 1
            if self._compare_at(index, parent) >= 0:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        last = self._last
        while True:
            child = index << 1
            if child > last:
                break
            right = child + 1
            if right <= last and self._compare_at(right, child) < 0:
                child = right
            if self._compare_at(index, child) <= 0:
                break
            self._swap(index, child)
            index = child

    def __repr__(self) -> str:
        return f"BinaryHeap(type={self.heap_type_.name}, size={self._last})"
