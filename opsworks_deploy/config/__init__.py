"""
Configuration loading and validation package.
"""

from .loader import deep_merge, load_config, load_yaml
from .validation import require_valid_schema, validate_config

__all__ = ['deep_merge', 'load_config', 'load_yaml', 'require_valid_schema', 'validate_config']
