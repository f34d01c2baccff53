import math

import pytest

from boulder_ai.pathfinding.heuristic import (
    HEURISTICS,
    chebyshev,
    euclidean,
    get_heuristic,
    manhattan,
    octile,
)


@pytest.mark.unit
class TestHeuristics:
    def test_values(self):
        assert manhattan(3, 4) == 7
        assert euclidean(3, 4) == pytest.approx(5.0)
        assert chebyshev(3, 4) == 4
        assert octile(3, 4) == pytest.approx((math.sqrt(2) - 1) * 3 + 4)
        assert octile(4, 3) == pytest.approx(octile(3, 4))

    @pytest.mark.parametrize("steps", [0, 1, 5, 12])
    def test_octile_is_step_count_on_straight_runs(self, steps):
        assert octile(steps, 0) == steps
        assert octile(0, steps) == steps

    @pytest.mark.parametrize("dx,dy", [(0, 0), (1, 0), (2, 3), (7, 1)])
    def test_never_exceed_manhattan(self, dx, dy):
        for fn in HEURISTICS.values():
            assert fn(dx, dy) <= manhattan(dx, dy) + 1e-9

    def test_get_heuristic(self):
        assert get_heuristic("chebyshev") is chebyshev
        with pytest.raises(ValueError):
            get_heuristic("taxicab")
