"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a YAML
configuration file (~/.sportmonks/config.yaml). Nested YAML sections are
flattened into dotted keys, so

    sportmonks:
      retry:
        max_retries: 3

is read with ``get_config('sportmonks.retry.max_retries')`` and can be
overridden by the ``SPORTMONKS_RETRY_MAX_RETRIES`` environment variable.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from sportmonks_sdk.core.client import ClientOptions
from sportmonks_sdk.domain.models.common import DEFAULT_RETRY_STATUS_CODES
from sportmonks_sdk.domain.models.policy import RetryPolicy
from sportmonks_sdk.infrastructure.http.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S
from sportmonks_sdk.infrastructure.resilience.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".sportmonks"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
API_TOKEN_KEY = "sportmonks.api_token"

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def _flatten(mapping: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in mapping.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, dotted))
        else:
            flat[dotted] = value
    return flat


def env_name(key: str) -> str:
    """Maps a dotted config key to its environment variable name."""
    return key.upper().replace(".", "_").replace("-", "_")


def load_configuration(
    config_file: Path = DEFAULT_CONFIG_FILE,
    env_file: Optional[Path] = None,
    force: bool = False,
) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values passed to get_config()

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
        force: Reload even if configuration was already loaded.
    """
    global _config, _loaded
    if _loaded and not force:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (lowest priority)
    if config_file.exists():
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
        else:
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file; override=False keeps real environment variables on top
    dotenv_path = env_file or find_dotenv(ENV_FILE_NAME, usecwd=True)
    if dotenv_path and load_dotenv(dotenv_path=dotenv_path, override=False):
        logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug(".env file not found at or above current directory.")

    _loaded = True
    logger.debug("Configuration loading process completed.")


def _coerce(value: str) -> Any:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return float(value) if "." in value else int(value)
    except ValueError:
        return value


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value by dotted key.

    Priority:
    1. Test configuration
    2. Environment variable (dotted key in upper snake case)
    3. YAML config
    4. Default value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_name(key)
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


# --- Convenience Functions ---

def get_api_token() -> Optional[str]:
    """Gets the API token (SPORTMONKS_API_TOKEN or sportmonks.api_token in YAML)."""
    token = get_config(API_TOKEN_KEY)
    return str(token) if token is not None else None


def get_retry_policy() -> RetryPolicy:
    status_codes = get_config("sportmonks.retry.status_codes", DEFAULT_RETRY_STATUS_CODES)
    if isinstance(status_codes, (str, int)):
        status_codes = [int(code) for code in str(status_codes).split(",") if code.strip()]
    return RetryPolicy(
        max_retries=int(get_config("sportmonks.retry.max_retries", 0)),
        base_delay=float(get_config("sportmonks.retry.base_delay", 1.0)),
        max_delay=float(get_config("sportmonks.retry.max_delay", 30.0)),
        retry_on_rate_limit=bool(get_config("sportmonks.retry.on_rate_limit", True)),
        retry_status_codes=tuple(status_codes),
    )


def get_client_options() -> ClientOptions:
    """Builds ClientOptions from the loaded configuration."""
    rate_limiter = None
    if get_config("sportmonks.rate_limit.enabled", False):
        rate_limiter = RateLimiter(
            max_requests=int(get_config("sportmonks.rate_limit.max_requests", 3000)),
            time_window=float(get_config("sportmonks.rate_limit.time_window", 3600)),
        )
    return ClientOptions(
        base_url=str(get_config("sportmonks.base_url", DEFAULT_BASE_URL)),
        timeout=float(get_config("sportmonks.timeout", DEFAULT_TIMEOUT_S)),
        include_separator=str(get_config("sportmonks.include_separator", ";")),
        retry=get_retry_policy(),
        rate_limiter=rate_limiter,
    )


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """Set configuration values that override everything else (tests only)."""
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
