"""
Storage backend abstraction package.

This package provides abstraction for different storage backends
(local filesystem, S3) holding deployment artifacts.
"""

from .base import StorageBackend
from .local import LocalStorage
from .s3 import S3Storage
from ..deployment.errors import ConfigurationError


def get_storage_backend(config):
    """Factory function to get appropriate storage backend, or None when not configured."""
    storage_config = config.get('storage')
    if not storage_config:
        return None

    storage_mode = storage_config.get('backend', 's3')

    if storage_mode == 'local':
        return LocalStorage(storage_config)
    elif storage_mode == 's3':
        return S3Storage(storage_config)
    else:
        raise ConfigurationError(f"Unknown storage backend: {storage_mode}")


__all__ = ['StorageBackend', 'LocalStorage', 'S3Storage', 'get_storage_backend']
