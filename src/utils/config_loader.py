"""
Configuration loader for the supply request service
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class ApiConfig(BaseModel):
    """Backend that stores supply requests"""

    base_url: str = ""
    requests_path: str = "requests"
    timeout_seconds: float = Field(default=20.0, gt=0)


class IntegrationsConfig(BaseModel):
    """Mock vs real client selection"""

    mode: Literal["auto", "mock", "real"] = "auto"


class NecessitousConfig(BaseModel):
    """Complete service configuration"""

    api: ApiConfig = Field(default_factory=ApiConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)

    def use_real_client(self) -> bool:
        if self.integrations.mode == "real":
            return True
        if self.integrations.mode == "mock":
            return False
        return bool(self.api.base_url)


def _apply_env_overrides(config_data: dict) -> dict:
    api = dict(config_data.get("api") or {})
    integrations = dict(config_data.get("integrations") or {})
    if os.getenv("NECESSITOUS_API_URL"):
        api["base_url"] = os.environ["NECESSITOUS_API_URL"]
    if os.getenv("NECESSITOUS_API_TIMEOUT"):
        api["timeout_seconds"] = os.environ["NECESSITOUS_API_TIMEOUT"]
    if os.getenv("INTEGRATIONS_MODE"):
        integrations["mode"] = os.environ["INTEGRATIONS_MODE"].strip().lower()
    return {**config_data, "api": api, "integrations": integrations}


def load_necessitous_config(config_path: Optional[Path] = None) -> NecessitousConfig:
    """
    Load and validate service configuration from YAML file, then apply
    environment overrides (.env is read first).

    Args:
        config_path: Path to config file. Defaults to config/necessitous_config.yml

    Returns:
        Validated NecessitousConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "necessitous_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = NecessitousConfig(**_apply_env_overrides(config_data))
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
