#!/usr/bin/env python3
"""
Configuration Validation
Validates deployment configuration for schema compliance and credentials
"""

import json
from pathlib import Path

import jsonschema

from ..deployment.errors import ConfigurationError, CredentialsError
from ..deployment.utils import get_aws_credentials

SCHEMA_FILE = Path(__file__).parent.parent / 'schemas' / 'deployment-config-schema.json'


def validate_against_schema(config):
    """
    Validate configuration against the JSON schema.
    Returns (is_valid, errors_list)
    """
    try:
        with open(SCHEMA_FILE, 'r') as f:
            schema = json.load(f)
    except (OSError, ValueError) as e:
        return False, [f"Error loading schema file: {e}"]

    try:
        jsonschema.validate(instance=config, schema=schema)
        return True, []
    except jsonschema.ValidationError as e:
        error_path = ' -> '.join(str(p) for p in e.path) if e.path else 'root'
        return False, [f"Schema validation failed at '{error_path}': {e.message}"]
    except jsonschema.SchemaError as e:
        return False, [f"Schema file is invalid: {e.message}"]


def uses_aws(config):
    """True when any configured backend talks to AWS and needs credentials."""
    fleet_backend = config.get('fleet', {}).get('backend', 'opsworks')
    storage = config.get('storage') or {}
    storage_backend = storage.get('backend', 's3') if storage else None
    return fleet_backend == 'opsworks' or storage_backend == 's3'


def check_credentials(config):
    """Returns list of errors for missing credentials."""
    if not uses_aws(config):
        return []
    try:
        get_aws_credentials()
    except CredentialsError as e:
        return [str(e)]
    return []


def validate_config(config):
    """
    Validate a loaded configuration.
    Uses JSON schema validation + credential presence check.
    """
    if not config:
        return False, ["Configuration is empty"]

    is_valid, schema_errors = validate_against_schema(config)
    if not is_valid:
        return False, schema_errors

    errors = check_credentials(config)
    return len(errors) == 0, errors


def require_valid_schema(config):
    """Raise ConfigurationError unless the configuration matches the schema."""
    is_valid, errors = validate_against_schema(config)
    if not is_valid:
        raise ConfigurationError('; '.join(errors))
