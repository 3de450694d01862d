# nebula_userprops/utils/config.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)

import yaml
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

CONFIG_PATH = Path("serviceconfig.yaml")


def load_yaml_config(config_path: str | Path | None = None):
    target = Path(config_path) if config_path else CONFIG_PATH
    if target.exists():
        with open(target, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    LOCATION: Optional[str] = None
    ENCODING: str = "utf-8"
    BASE_DIR: Optional[str] = None
    HTTP_TIMEOUT: float = 10.0

    class Config:
        env_prefix = "NEBULA_USERS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Environment and .env values, overridden by the `users:` section of the yaml file."""
    yaml_config = load_yaml_config(config_path)
    section = yaml_config.get("users", {}) if isinstance(yaml_config, dict) else {}
    section = section if isinstance(section, dict) else {}
    return Settings(**{str(k).upper(): v for k, v in section.items()})

settings = load_settings()
