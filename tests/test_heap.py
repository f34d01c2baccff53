import random
from dataclasses import dataclass

import pytest

from boulder_ai.pathfinding.heap import INIT_CAPACITY, BinaryHeap, HeapType


def drain(heap):
    out = []
    value = heap.extract_top()
    while value is not None:
        out.append(value)
        value = heap.extract_top()
    return out


@dataclass
class Target:
    name: str
    distance: float


@pytest.mark.unit
class TestBinaryHeapOrdering:
    @pytest.mark.parametrize("seed", [0, 1, 7, 42])
    def test_min_heap_matches_sorted(self, seed):
        rng = random.Random(seed)
        values = [rng.randint(0, 99) for _ in range(50)]
        heap = BinaryHeap(HeapType.MIN)
        for v in values:
            heap.insert(v)

        assert drain(heap) == sorted(values)

    def test_max_heap_matches_reverse_sorted(self):
        rng = random.Random(3)
        values = [rng.uniform(-10, 10) for _ in range(33)]
        heap = BinaryHeap(HeapType.MAX)
        for v in values:
            heap.insert(v)

        assert drain(heap) == sorted(values, reverse=True)

    def test_comparator_orders_records(self):
        heap = BinaryHeap(HeapType.MIN, lambda a, b: a.distance - b.distance)
        for name, distance in [("c", 3.0), ("a", 1.0), ("d", 4.5), ("b", 2.0)]:
            heap.insert(Target(name, distance))

        assert [t.name for t in drain(heap)] == ["a", "b", "c", "d"]

    def test_duplicates_are_kept(self):
        heap = BinaryHeap()
        for v in [5, 1, 5, 3, 1, 5]:
            heap.insert(v)

        assert drain(heap) == [1, 1, 3, 5, 5, 5]

    def test_unknown_type_falls_back_to_min(self):
        heap = BinaryHeap(7)
        for v in [3, 1, 2]:
            heap.insert(v)

        assert heap.heap_type_ is HeapType.MIN
        assert heap.extract_top() == 1


@pytest.mark.unit
class TestBinaryHeapState:
    def test_extract_from_empty_returns_none(self):
        heap = BinaryHeap()
        assert heap.is_empty()
        assert heap.extract_top() is None
        assert heap.peek() is None

    def test_size_and_peek(self):
        heap = BinaryHeap()
        heap.insert(4)
        heap.insert(2)

        assert heap.size() == 2
        assert len(heap) == 2
        assert heap.peek() == 2
        assert heap.size() == 2

    def test_grows_past_initial_capacity(self):
        heap = BinaryHeap(HeapType.MAX)
        values = list(range(INIT_CAPACITY * 5))
        for v in values:
            heap.insert(v)

        assert heap.size() == len(values)
        assert drain(heap) == values[::-1]

    def test_clear(self):
        heap = BinaryHeap()
        for v in [3, 2, 1]:
            heap.insert(v)
        heap.clear()

        assert heap.is_empty()
        assert heap.extract_top() is None

        heap.insert(9)
        assert heap.extract_top() == 9

    def test_push_pop_aliases(self):
        heap = BinaryHeap()
        heap.push(2)
        heap.push(1)

        assert heap.pop() == 1
        assert heap.pop() == 2
        assert heap.pop() is None
