"""
Configuration loader for the open market client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "market_config.yml"

_MODE_ALIASES = {"real": "real_http", "live": "real_http", "test": "mock"}


class ApiConfig(BaseModel):
    """API host configuration"""

    host: str = "https://market-training.yagom-academy.kr"


class PagingConfig(BaseModel):
    """Defaults used when the caller does not pick a page"""

    page_no: int = Field(default=1, ge=1)
    items_per_page: int = Field(default=20, ge=1, le=100)


class CredentialsConfig(BaseModel):
    """Vendor credentials for write operations"""

    identifier: Optional[str] = None
    secret: Optional[str] = None


class MarketConfig(BaseModel):
    """Complete client configuration"""

    mode: Literal["real_http", "mock"] = "real_http"
    api: ApiConfig = Field(default_factory=ApiConfig)
    paging: PagingConfig = Field(default_factory=PagingConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)


def load_market_config(config_path: Optional[Path] = None) -> MarketConfig:
    """
    Load and validate client configuration from a YAML file, then apply
    environment overrides.

    Args:
        config_path: Path to config file. Defaults to config/market_config.yml;
            when the default file is absent the built-in defaults are used.

    Returns:
        Validated MarketConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    data = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config file at %s; using defaults", path)

    try:
        config = MarketConfig(**data)
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise

    config = apply_env_overrides(config)
    logger.info(f"Loaded market config (mode={config.mode}, host={config.api.host})")
    return config


def apply_env_overrides(config: MarketConfig) -> MarketConfig:
    """Environment variables win over the file: host, mode and credentials."""
    host = os.getenv("OPEN_MARKET_API_HOST")
    if host:
        config.api.host = host

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    mode = _MODE_ALIASES.get(mode, mode)
    if mode:
        try:
            config = MarketConfig(**{**config.model_dump(), "mode": mode})
        except ValidationError as e:
            logger.error(f"Invalid INTEGRATIONS_MODE {mode!r}: {e}")
            raise

    identifier = os.getenv("OPEN_MARKET_IDENTIFIER")
    if identifier:
        config.credentials.identifier = identifier
    secret = os.getenv("OPEN_MARKET_SECRET")
    if secret:
        config.credentials.secret = secret
    return config
