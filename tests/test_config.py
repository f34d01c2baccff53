import pytest
import yaml
from pydantic import ValidationError

from boulder_ai.config.loader import DEFAULT_CONFIG_PATH, load_config
from boulder_ai.config.models import (
    AgentConfig,
    LoggingConfig,
    ParserConfig,
    PathfindingConfig,
    PolicyConfig,
)


@pytest.mark.unit
class TestConfigModels:
    def test_defaults(self):
        config = AgentConfig()

        assert config.pathfinding.heuristic == "chebyshev"
        assert config.pathfinding.track_jump_recursion is False
        assert config.parser.status_lines == 1
        assert config.parser.hazard_buffer_radius == 1
        assert config.parser.guard_falling_objects is True
        assert config.policy.warmup_ticks == 5
        assert config.policy.max_idle_ticks == 10
        assert config.policy.reuse_path is False
        assert config.logging.level == "INFO"
        assert config.logging.log_dir is None

    def test_unknown_heuristic_rejected(self):
        with pytest.raises(ValidationError):
            PathfindingConfig(heuristic="dijkstra")
        with pytest.raises(ValidationError):
            PolicyConfig(goal_distance="dijkstra")

    def test_negative_values_rejected(self):
        with pytest.raises(ValidationError):
            ParserConfig(hazard_buffer_radius=-1)
        with pytest.raises(ValidationError):
            PolicyConfig(danger_radius=-2)

    def test_max_idle_ticks_must_be_positive(self):
        with pytest.raises(ValidationError):
            PolicyConfig(max_idle_ticks=0)

    def test_log_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")


@pytest.mark.unit
class TestLoadConfig:
    def test_partial_file(self, tmp_path):
        path = tmp_path / "agent.yaml"
        path.write_text(
            "pathfinding:\n"
            "  heuristic: manhattan\n"
            "policy:\n"
            "  warmup_ticks: 0\n",
            encoding="utf-8",
        )
        config = load_config(path)

        assert config.pathfinding.heuristic == "manhattan"
        assert config.policy.warmup_ticks == 0
        assert config.policy.max_idle_ticks == 10
        assert config.parser == ParserConfig()

    def test_relative_log_dir_resolved(self, tmp_path):
        path = tmp_path / "agent.yaml"
        path.write_text("logging:\n  log_dir: logs\n", encoding="utf-8")

        config = load_config(path)
        assert config.logging.log_dir == str((tmp_path / "logs").resolve())

    def test_config_dir_uses_parent_as_base(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        path = config_dir / "config.yaml"
        path.write_text("logging:\n  log_dir: logs\n", encoding="utf-8")

        config = load_config(path)
        assert config.logging.log_dir == str((tmp_path / "logs").resolve())

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("policy: [1, 2\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("policy:\n  max_idle_ticks: -1\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_default_config_file_is_valid(self):
        config = load_config(DEFAULT_CONFIG_PATH)
        assert config.pathfinding.heuristic == "manhattan"
