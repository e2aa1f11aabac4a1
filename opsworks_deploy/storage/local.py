#!/usr/bin/env python3
"""
Local storage backend for mock/development mode.
"""

from datetime import datetime
from pathlib import Path

from .base import StorageBackend


class LocalStorage(StorageBackend):
    """Local storage backend: buckets are directories under artifact_dir."""

    def __init__(self, config):
        self.artifact_dir = Path(config.get('artifact_dir', './artifacts'))

    def list_objects(self, bucket, prefix=''):
        bucket_dir = self.artifact_dir / bucket
        if not bucket_dir.is_dir():
            return []

        objects = []
        for path in sorted(bucket_dir.rglob('*')):
            if not path.is_file():
                continue
            key = path.relative_to(bucket_dir).as_posix()
            if key.startswith(prefix):
                stat = path.stat()
                objects.append({
                    'Key': key,
                    'Size': stat.st_size,
                    'LastModified': datetime.fromtimestamp(stat.st_mtime)
                })
        return objects

    def get_object_url(self, bucket, key):
        return (self.artifact_dir / bucket / key).resolve().as_uri()
