from pathlib import Path

import pytest

from sportmonks_sdk.infrastructure.config import settings
from sportmonks_sdk.infrastructure.config.settings import (
    env_name,
    get_api_token,
    get_client_options,
    get_config,
    load_configuration,
    set_config_for_testing,
)

YAML_CONFIG = """
sportmonks:
  api_token: yaml-token
  timeout: 12.5
  retry:
    max_retries: 2
    status_codes: [500, 503]
logging:
  level: DEBUG
"""


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(YAML_CONFIG)
    empty_env = tmp_path / ".env"
    empty_env.write_text("")
    load_configuration(config_file=path, env_file=empty_env, force=True)
    yield path
    settings._config = {}
    settings._loaded = False


def test_env_name_mapping():
    assert env_name("sportmonks.retry.max_retries") == "SPORTMONKS_RETRY_MAX_RETRIES"


def test_yaml_values_are_flattened(config_file):
    assert get_config("sportmonks.timeout") == 12.5
    assert get_config("logging.level") == "DEBUG"
    assert get_api_token() == "yaml-token"


def test_environment_overrides_yaml(config_file, monkeypatch):
    monkeypatch.setenv("SPORTMONKS_API_TOKEN", "env-token")
    monkeypatch.setenv("SPORTMONKS_RETRY_MAX_RETRIES", "5")
    assert get_api_token() == "env-token"
    assert get_config("sportmonks.retry.max_retries") == 5


def test_test_config_overrides_everything(config_file, monkeypatch):
    monkeypatch.setenv("SPORTMONKS_API_TOKEN", "env-token")
    set_config_for_testing({"sportmonks.api_token": "test-token"})
    assert get_api_token() == "test-token"


def test_default_when_missing():
    assert get_config("sportmonks.does_not_exist", "fallback") == "fallback"


def test_client_options_from_config(config_file):
    options = get_client_options()
    assert options.timeout == 12.5
    assert options.retry.max_retries == 2
    assert options.retry.retry_status_codes == (500, 503)
    assert options.base_url == "https://api.sportmonks.com/v3"
    assert options.rate_limiter is None


def test_status_codes_from_environment(monkeypatch):
    monkeypatch.setenv("SPORTMONKS_RETRY_STATUS_CODES", "502,503")
    assert get_client_options().retry.retry_status_codes == (502, 503)


def test_rate_limiter_enabled_by_config():
    set_config_for_testing({
        "sportmonks.rate_limit.enabled": True,
        "sportmonks.rate_limit.max_requests": 10,
        "sportmonks.rate_limit.time_window": 60,
    })
    limiter = get_client_options().rate_limiter
    assert limiter is not None
    assert limiter.max_requests == 10
    assert limiter.time_window == 60


def test_invalid_yaml_is_ignored(tmp_path, monkeypatch):
    path = tmp_path / "broken.yaml"
    path.write_text("sportmonks: [unclosed")
    empty_env = tmp_path / ".env"
    empty_env.write_text("")
    load_configuration(config_file=path, env_file=empty_env, force=True)

    assert settings._config == {}
    settings._loaded = False
