"""
Client settings resolution.

Resolves the company domain and API key from environment variables first,
then from config/bamboohr.yaml in the repository root. The YAML file may
hold top-level values or named profiles:

    company-domain: acme
    api-key: xxxx
    profiles:
      sandbox:
        company-domain: acme-sandbox
        api-key: yyyy
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, SecretStr, field_validator

from ..exceptions import ConfigException, MissingSettingException

logger = logging.getLogger(__name__)

CONFIG_FILE = Path('config') / 'bamboohr.yaml'

# setting name -> environment variable
SETTINGS_ENV_VARS = {
    'company-domain': 'BAMBOOHR_COMPANY_DOMAIN',
    'api-key': 'BAMBOOHR_API_KEY',
}


class ClientSettings(BaseModel):
    """Resolved settings for one tenant."""
    company_domain: str
    api_key: SecretStr

    @field_validator('company_domain')
    @classmethod
    def _domain_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("company_domain must not be empty")
        return value

    @field_validator('api_key')
    @classmethod
    def _key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("api_key must not be empty")
        return value


def load_config_file(repo_root: Path = None) -> Dict[str, Any]:
    """
    Load config/bamboohr.yaml.

    Args:
        repo_root: Repository root path, defaults to current working directory

    Returns:
        Parsed mapping, or an empty dict if the file does not exist

    Raises:
        ConfigException: If the file is not valid YAML or not a mapping
    """
    if repo_root is None:
        repo_root = Path.cwd()
    config_path = repo_root / CONFIG_FILE

    if not config_path.exists():
        logger.debug(f"{config_path} not found, relying on environment variables")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigException(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(config, dict):
        raise ConfigException(f"{config_path} must contain a mapping at the top level")
    return config


def _select_profile(config: Dict[str, Any], config_env: Optional[str]) -> Dict[str, Any]:
    if not config_env:
        return config
    profiles = config.get('profiles') or {}
    if not isinstance(profiles, dict):
        raise ConfigException(f"'profiles' in {CONFIG_FILE} must be a mapping", env_name=config_env)
    if config_env not in profiles:
        raise ConfigException(
            f"Profile '{config_env}' not found in {CONFIG_FILE}. "
            f"Available profiles: {', '.join(sorted(profiles)) or 'none'}",
            env_name=config_env
        )
    profile = profiles[config_env] or {}
    if not isinstance(profile, dict):
        raise ConfigException(f"Profile '{config_env}' in {CONFIG_FILE} must be a mapping", env_name=config_env)
    return profile


def get_setting(name: str, config: Dict[str, Any], config_env: Optional[str] = None) -> str:
    """Resolve one setting: environment variable wins over the YAML file."""
    env_var = SETTINGS_ENV_VARS[name]
    value = os.environ.get(env_var)
    if value:
        return value

    value = config.get(name)
    if value is None or str(value) == '':
        raise MissingSettingException(
            f"Setting '{name}' not found in ${env_var} or {CONFIG_FILE}",
            setting_name=name,
            env_var=env_var,
            env_name=config_env
        )
    return str(value)


def load_settings(config_env: Optional[str] = None, repo_root: Path = None) -> ClientSettings:
    """Build ``ClientSettings`` for the given profile (or the top level)."""
    config = _select_profile(load_config_file(repo_root), config_env)

    settings = ClientSettings(
        company_domain=get_setting('company-domain', config, config_env),
        api_key=get_setting('api-key', config, config_env),
    )
    logger.debug(f"Loaded BambooHR settings for company domain '{settings.company_domain}'")
    return settings
