#!/usr/bin/env python3
"""S3 storage backend for deployment artifacts."""

from .base import StorageBackend
from ..deployment.errors import UpstreamError
from ..deployment.utils import get_aws_credentials


class S3Storage(StorageBackend):
    """S3 storage backend for production mode."""

    def __init__(self, config, client=None):
        self.region = config.get('region', 'us-east-1')
        self.api_version = config.get('api_version')
        self.endpoint_url = config.get('endpoint_url')

        self._client = client

    def _get_client(self):
        """Lazy initialization of boto3 client."""
        if self._client is None:
            import boto3
            self._client = boto3.client(
                's3',
                region_name=self.region,
                api_version=self.api_version,
                endpoint_url=self.endpoint_url,
                **get_aws_credentials()
            )
        return self._client

    def list_objects(self, bucket, prefix=''):
        from botocore.exceptions import BotoCoreError, ClientError

        s3_client = self._get_client()
        print(f"Listing s3://{bucket}/{prefix}*")
        objects = []
        try:
            paginator = s3_client.get_paginator('list_objects_v2')
            for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
                objects.extend(page.get('Contents', []))
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(f"S3 list_objects failed: {e}", cause=e) from e
        return objects

    def get_object_url(self, bucket, key):
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{bucket}/{key}"
        return f"https://{bucket}.s3.{self.region}.amazonaws.com/{key}"
