#!/usr/bin/env python3
"""
Base storage backend interface for deployment artifacts.
"""


class StorageBackend:
    """Base interface for storage backends."""

    def list_objects(self, bucket, prefix=''):
        """List objects ({'Key', 'Size', 'LastModified'}) in a bucket under a key prefix."""
        raise NotImplementedError

    def get_object_url(self, bucket, key):
        """Url an application source can point at."""
        raise NotImplementedError
