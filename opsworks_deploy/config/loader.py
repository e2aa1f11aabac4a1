#!/usr/bin/env python3
"""
Configuration loading with optional local overrides.
"""

import os
from pathlib import Path

import yaml

from ..deployment.errors import ConfigurationError

DEFAULTS_DIR = Path(__file__).parent.parent / "defaults"
PACKAGED_CONFIG_PATH = DEFAULTS_DIR / "deployment-config.yaml"
PROJECT_CONFIG_PATH = Path("config") / "deployment-config.yaml"
LOCAL_OVERRIDE_NAME = "deployment-config.local.yaml"

# (section, key) pairs holding paths resolved against the file that sets them
RELATIVE_PATH_KEYS = (('fleet', 'state_file'),)


def load_yaml(file_path):
    with open(file_path, 'r') as f:
        return yaml.safe_load(f)


def deep_merge(base, override):
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def default_config_path():
    """config/deployment-config.yaml under the working directory if present, else the packaged default."""
    project_path = Path.cwd() / PROJECT_CONFIG_PATH
    if project_path.exists():
        return project_path
    return PACKAGED_CONFIG_PATH


def _load_config_file(path):
    try:
        config = load_yaml(path) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML syntax error in {path}: {e}") from e

    for section, key in RELATIVE_PATH_KEYS:
        value = (config.get(section) or {}).get(key)
        if value and not Path(value).is_absolute():
            config[section][key] = str(path.parent / value)
    return config


def load_config(config_path=None):
    """
    Load configuration with optional local overrides.
    - Default: an explicit path, DEPLOYMENT_CONFIG, config/deployment-config.yaml
      under the working directory, or the packaged default (production mode)
    - DEPLOYMENT_ENV=local: merges deployment-config.local.yaml from the
      same directory
    """
    base_path = Path(config_path or os.environ.get('DEPLOYMENT_CONFIG') or default_config_path())
    if not base_path.exists():
        raise ConfigurationError(f"Config file not found: {base_path}")

    base_config = _load_config_file(base_path)

    env = os.environ.get('DEPLOYMENT_ENV', '').strip()
    if env == 'local':
        override_path = base_path.parent / LOCAL_OVERRIDE_NAME
        if override_path.exists():
            return deep_merge(base_config, _load_config_file(override_path))

    return base_config
