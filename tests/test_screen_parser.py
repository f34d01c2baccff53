import pytest

from boulder_ai.config.models import ParserConfig
from boulder_ai.pathfinding.errors import GridShapeError
from boulder_ai.world.entities import EntityKind
from boulder_ai.world.screen_parser import parse_screen, split_screen

CAVE = [
    "#######",
    "#A:*  #",
    "#  O  #",
    "#     #",
    "#######",
    "score 0 lives 3",
]

BUTTERFLY_CAVE = [
    "#######",
    "#A    #",
    "#   / #",
    "#     #",
    "#######",
    "score 0",
]


@pytest.mark.unit
class TestParseSymbols:
    def test_entities(self):
        snapshot = parse_screen(CAVE)

        assert snapshot.size == (7, 5)
        assert snapshot.player == (1, 1)
        assert [g.coord for g in snapshot.goals] == [(3, 1)]
        assert all(g.kind is EntityKind.GOAL for g in snapshot.goals)
        assert snapshot.hazards == []
        assert (3, 2) in [o.coord for o in snapshot.obstacles]

    def test_walkability(self):
        grid = parse_screen(CAVE).grid

        assert grid.is_walkable_at(1, 1)      # 玩家
        assert grid.is_walkable_at(2, 1)      # 泥土
        assert grid.is_walkable_at(3, 1)      # 钻石
        assert grid.is_walkable_at(5, 3)      # 空地
        assert not grid.is_walkable_at(0, 0)  # 墙
        assert not grid.is_walkable_at(3, 2)  # 石头

    def test_status_line_dropped(self):
        snapshot = parse_screen(CAVE)
        assert snapshot.rows == CAVE[:-1]

    def test_status_line_kept_when_disabled(self):
        with pytest.raises(GridShapeError):
            parse_screen(CAVE, ParserConfig(status_lines=0))

    def test_multiline_string(self):
        from_list = parse_screen(CAVE)
        from_text = parse_screen("\n".join(CAVE))

        assert from_text.grid == from_list.grid
        assert from_text.player == from_list.player

    def test_newline_terminated_string(self):
        snapshot = parse_screen("#######\n#A   *#\n#######\nscore: 0 time: 120\n")

        assert snapshot.size == (7, 3)
        assert snapshot.player == (1, 1)
        assert [g.coord for g in snapshot.goals] == [(5, 1)]

    def test_trailing_blank_rows_ignored(self):
        snapshot = parse_screen(CAVE + ["", ""])
        assert snapshot.rows == CAVE[:-1]

    def test_unknown_symbol_is_blocked(self):
        snapshot = parse_screen(["A?x", "status"])
        assert not snapshot.grid.is_walkable_at(1, 0)
        assert not snapshot.grid.is_walkable_at(2, 0)

    def test_missing_player(self):
        snapshot = parse_screen(["   ", "   ", "status"])
        assert snapshot.player is None

    def test_symbol_at(self):
        snapshot = parse_screen(CAVE)
        assert snapshot.symbol_at(3, 2) == 'O'
        assert snapshot.symbol_at(7, 0) is None
        assert snapshot.symbol_at(0, -1) is None


@pytest.mark.unit
class TestParseErrors:
    def test_empty_screen(self):
        with pytest.raises(GridShapeError):
            parse_screen(["status"])

    def test_ragged_rows(self):
        with pytest.raises(GridShapeError):
            parse_screen(["#####", "#A #", "status"])

    def test_split_screen_copies_list(self):
        rows = ["ab", "cd"]
        assert split_screen(rows) == rows
        assert split_screen(rows) is not rows
        assert split_screen("ab\ncd") == rows
        assert split_screen("ab\r\ncd\n") == rows


@pytest.mark.unit
class TestFallingGuard:
    def test_cell_below_boulder_blocked(self):
        grid = parse_screen(CAVE).grid
        assert not grid.is_walkable_at(3, 3)

    def test_cell_below_diamond_blocked(self):
        snapshot = parse_screen([
            "#####",
            "#A* #",
            "#   #",
            "#####",
            "status",
        ])
        assert not snapshot.grid.is_walkable_at(2, 2)
        assert snapshot.grid.is_walkable_at(1, 2)

    def test_dirt_below_is_not_blocked(self):
        snapshot = parse_screen([
            "#####",
            "#AO #",
            "# : #",
            "#####",
            "status",
        ])
        assert snapshot.grid.is_walkable_at(2, 2)

    def test_guard_disabled(self):
        grid = parse_screen(CAVE, ParserConfig(guard_falling_objects=False)).grid
        assert grid.is_walkable_at(3, 3)


@pytest.mark.unit
class TestHazards:
    def test_butterfly_buffer(self):
        snapshot = parse_screen(BUTTERFLY_CAVE)

        assert [h.coord for h in snapshot.hazards] == [(4, 2)]
        assert snapshot.hazards[0].kind is EntityKind.HAZARD
        assert snapshot.goals == []
        for x in range(3, 6):
            for y in range(1, 4):
                assert not snapshot.grid.is_walkable_at(x, y), (x, y)
        assert snapshot.grid.is_walkable_at(2, 2)
        assert snapshot.is_hazard_at(4, 2)

    def test_zero_radius_blocks_only_the_butterfly(self):
        grid = parse_screen(BUTTERFLY_CAVE, ParserConfig(hazard_buffer_radius=0)).grid
        assert not grid.is_walkable_at(4, 2)
        assert grid.is_walkable_at(3, 2)

    def test_hunt_mode_makes_butterflies_goals(self):
        snapshot = parse_screen(BUTTERFLY_CAVE, ParserConfig(hunt_hazards=True))

        assert [g.coord for g in snapshot.goals] == [(4, 2)]
        assert snapshot.goals[0].symbol == '/'
        assert snapshot.grid.is_walkable_at(4, 2)
        assert snapshot.grid.is_walkable_at(3, 1)

    def test_player_cell_stays_walkable(self):
        snapshot = parse_screen([
            "#####",
            "#A| #",
            "#   #",
            "#####",
            "status",
        ])
        assert snapshot.player == (1, 1)
        assert snapshot.grid.is_walkable_at(1, 1)
        assert not snapshot.grid.is_walkable_at(1, 2)
