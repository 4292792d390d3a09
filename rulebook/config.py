"""Configuration loader for the rulebook engine."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_LINK_BASE_URL = "https://www.vexrobotics.com"

# SC, S, G, GG, SG, R, RSC, T, VUG, VUR, VUT, VURS, VAISC, VAIG, VAIRS, VAIT, VAIRM
RULE_GROUP_ORDER: list[str] = [
    "Scoring Rules",
    "Safety Rules",
    "General Rules",
    "GG Rules",
    "Specific Game Rules",
    "Robot Rules",
    "Robot Skills Challenge Rules",
    "Tournament Rules",
    "VURC General Rules",
    "VURC Robot Rules",
    "VUT Rules",
    "VURS Rules",
    "VAISC Rules",
    "VAIG Rules",
    "VAIRS Rules",
    "VAIT Rules",
    "VAIRM Rules",
]

# Groups hidden from the base V5RC program (VEX U and VEX AI additions)
BASE_PROGRAM_DENYLIST: list[str] = [
    "VURC General Rules",
    "VURC Robot Rules",
    "VUT Rules",
    "VURS Rules",
    "VAISC Rules",
    "VAIG Rules",
    "VAIRS Rules",
    "VAIT Rules",
    "VAIRM Rules",
]

GROUP_DISPLAY_NAMES: dict[str, str] = {
    "Skills Challenge Rules": "Scoring Rules",
    "Scoring Rules": "Scoring Rules",
    "Safety Rules": "Safety Rules",
    "General Rules": "General Rules",
    "GG Rules": "General Game Rules",
    "Specific Game Rules": "Specific Game Rules",
    "Robot Rules": "Robot Rules",
    "Tournament Rules": "Tournament Rules",
    "RSC Rules": "Robot Skills Challenge Rules",
    "Robot Skills Challenge Rules": "Robot Skills Challenge Rules",
    "VURC General Rules": "VEX U General Rules",
    "VURC Robot Rules": "VEX U Robot Rules",
    "VUT Rules": "VEX U Tournament Rules",
    "VURS Rules": "VEX U Robot Skills Challenge Rules",
    "VAISC Rules": "VEX AI Rule Modifications: Scoring",
    "VAIG Rules": "VEX AI Rule Modifications: Game",
    "VAIRS Rules": "VEX AI Rule Modifications: Robot Skills Challenge",
    "VAIT Rules": "VEX AI Rule Modifications: Tournament",
    "VAIRM Rules": "VEX AI Rule Modifications: Robot",
}

GROUP_SHORT_NAMES: dict[str, str] = {
    "Skills Challenge Rules": "Scoring",
    "Scoring Rules": "Scoring",
    "Safety Rules": "Safety",
    "General Game Rules": "General Game",
    "GG Rules": "General Game",
    "General Rules": "General",
    "Specific Game Rules": "Specific Game",
    "Robot Rules": "Robot",
    "Tournament Rules": "Tournament",
    "Robot Skills Challenge Rules": "Skills",
    "RSC Rules": "Skills",
    "VURC General Rules": "VU General",
    "VURC Robot Rules": "VU Robot",
    "VUT Rules": "VU Tournament",
    "VURS Rules": "VU Robot Skills",
    "VAISC Rules": "VAI Scoring",
    "VAIG Rules": "VAI Game",
    "VAIRS Rules": "VAI Robot Skills",
    "VAIT Rules": "VAI Tournament",
    "VAIRM Rules": "VAI Robot",
}


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Rulebook"
    version: str = "1.0.0"


class MarkupConfig(BaseModel):
    """Rule-text markup configuration."""

    link_base_url: str = DEFAULT_LINK_BASE_URL


class GroupConfig(BaseModel):
    """Rule group ordering and program filtering."""

    canonical_order: list[str] = Field(default_factory=lambda: list(RULE_GROUP_ORDER))
    base_program_denylist: list[str] = Field(
        default_factory=lambda: list(BASE_PROGRAM_DENYLIST)
    )
    base_program_marker: str = "v5"
    broader_program_markers: list[str] = Field(default_factory=lambda: ["vex u", "ai"])
    display_names: dict[str, str] = Field(
        default_factory=lambda: dict(GROUP_DISPLAY_NAMES)
    )
    short_names: dict[str, str] = Field(default_factory=lambda: dict(GROUP_SHORT_NAMES))


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    manuals_dir: str = "./data/manuals"
    sqlite_path: str = "./db/rulebook.db"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    markup: MarkupConfig = Field(default_factory=MarkupConfig)
    groups: GroupConfig = Field(default_factory=GroupConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment overrides
    log_level = os.getenv("RULEBOOK_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()
    manuals_dir = os.getenv("RULEBOOK_MANUALS_DIR")
    if manuals_dir:
        config.storage.manuals_dir = manuals_dir

    return config
