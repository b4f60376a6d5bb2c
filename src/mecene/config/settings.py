"""
Mecene configuration with hybrid YAML + ENV support.

Priority (highest to lowest):
1. Environment variables (MECENE_*, plus BASE_RPC_URL for the endpoint)
2. Environment-specific YAML config file (development.yaml, ...)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from eth_utils import is_address
from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONTRACT_ADDRESS = "0x6a4420f696c9ba6997f41dddc15b938b54aa009a"


class Settings(BaseSettings):
    """
    Mecene settings.

    Describes which escrow deployment to talk to and how to present it.
    """

    model_config = SettingsConfigDict(
        env_prefix="MECENE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Blockchain
    rpc_url: str = Field(
        default="https://mainnet.base.org",
        validation_alias=AliasChoices("MECENE_RPC_URL", "BASE_RPC_URL"),
        description="Ethereum JSON-RPC endpoint",
    )
    contract_address: str = Field(
        default=DEFAULT_CONTRACT_ADDRESS,
        description="Deployed AgentFund escrow contract",
    )
    chain_id: int = Field(default=8453, ge=1)
    chain_name: str = Field(default="Base Mainnet")
    explorer_url: str = Field(default="https://basescan.org")
    platform_fee: str = Field(default="5%")
    native_symbol: str = Field(default="ETH")

    # Project finder
    scan_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum number of project IDs inspected per scan",
    )

    # Transport
    rpc_timeout: float = Field(default=10.0, ge=1.0, le=120.0)

    # Logging
    log_level: str = Field(default="WARNING")
    json_logs: bool = Field(default=False)

    @computed_field
    @property
    def contract_explorer_url(self) -> str:
        """Block explorer page for the escrow contract."""
        return f"{self.explorer_url.rstrip('/')}/address/{self.contract_address}"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_upper

    @field_validator("contract_address")
    @classmethod
    def validate_contract_address(cls, v: str) -> str:
        """Validate contract address format."""
        if not is_address(v):
            raise ValueError(f"Invalid contract_address: {v}")
        return v


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename (or path) override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = os.getenv("MECENE_CONFIG") or default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=False)

    merged_config = {}

    default_config_path = config_dir / "default.yaml"
    if default_config_path.exists():
        merged_config.update(_read_yaml(default_config_path))

    env_config_path = Path(config_file)
    if not env_config_path.is_absolute() and not env_config_path.exists():
        env_config_path = config_dir / config_file
    if env_config_path.exists():
        merged_config.update(_read_yaml(env_config_path))

    # Environment variables outrank YAML: drop keys the environment sets
    for key in list(merged_config):
        if os.getenv(f"MECENE_{key.upper()}") is not None:
            merged_config.pop(key)
    if os.getenv("BASE_RPC_URL") is not None:
        merged_config.pop("rpc_url", None)

    return Settings(**merged_config)


def _read_yaml(path: Path) -> dict:
    with open(path, "r") as f:
        loaded = yaml.safe_load(f)
    return loaded or {}


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
