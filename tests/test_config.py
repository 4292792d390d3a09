"""Tests for configuration loading."""

from pathlib import Path

import yaml

from rulebook.config import (
    BASE_PROGRAM_DENYLIST,
    DEFAULT_LINK_BASE_URL,
    RULE_GROUP_ORDER,
    AppConfig,
    load_config,
)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Rulebook"
        assert config.logging.level == "INFO"

    def test_default_markup_config(self) -> None:
        config = AppConfig()
        assert config.markup.link_base_url == DEFAULT_LINK_BASE_URL

    def test_default_group_config(self) -> None:
        config = AppConfig()
        assert config.groups.canonical_order == RULE_GROUP_ORDER
        assert config.groups.canonical_order[0] == "Scoring Rules"
        assert config.groups.base_program_denylist == BASE_PROGRAM_DENYLIST
        assert config.groups.base_program_marker == "v5"
        assert config.groups.broader_program_markers == ["vex u", "ai"]
        assert config.groups.display_names["GG Rules"] == "General Game Rules"

    def test_defaults_are_not_shared(self) -> None:
        first = AppConfig()
        first.groups.canonical_order.append("Extra Rules")
        assert "Extra Rules" not in AppConfig().groups.canonical_order
        assert "Extra Rules" not in RULE_GROUP_ORDER

    def test_default_storage_config(self) -> None:
        config = AppConfig()
        assert config.storage.manuals_dir == "./data/manuals"
        assert config.storage.sqlite_path == "./db/rulebook.db"


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "groups": {"canonical_order": ["Safety Rules", "Scoring Rules"]},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.app.version == "0.1.0"
        assert config.groups.canonical_order == ["Safety Rules", "Scoring Rules"]
        # Other fields keep defaults
        assert config.groups.base_program_denylist == BASE_PROGRAM_DENYLIST
        assert config.markup.link_base_url == DEFAULT_LINK_BASE_URL

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Rulebook"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.storage.sqlite_path == "./db/rulebook.db"

    def test_env_vars_override(self, tmp_path: Path, monkeypatch: object) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("RULEBOOK_LOG_LEVEL", "debug")  # type: ignore[attr-defined]
        monkeypatch.setenv("RULEBOOK_MANUALS_DIR", "/srv/manuals")  # type: ignore[attr-defined]

        config = load_config(config_file)
        assert config.logging.level == "DEBUG"
        assert config.storage.manuals_dir == "/srv/manuals"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the project config.yaml."""
        config_path = Path(__file__).parent.parent / "config.yaml"
        config = load_config(config_path)
        assert config.app.name == "Rulebook"
        assert config.storage.sqlite_path == "./db/rulebook.db"
