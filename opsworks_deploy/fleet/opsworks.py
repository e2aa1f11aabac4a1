#!/usr/bin/env python3
"""AWS OpsWorks fleet-management backend."""

from .base import FleetService
from ..deployment.errors import UpstreamError
from ..deployment.utils import get_aws_credentials


class OpsWorksService(FleetService):
    """OpsWorks backend using a boto3 client."""

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
                'opsworks',
                region_name=self.region,
                api_version=self.api_version,
                endpoint_url=self.endpoint_url,
                **get_aws_credentials()
            )
        return self._client

    def _call(self, operation, **params):
        """Invoke a client operation, re-raising botocore errors as UpstreamError."""
        from botocore.exceptions import BotoCoreError, ClientError

        client = self._get_client()
        try:
            return getattr(client, operation)(**params)
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(f"OpsWorks {operation} failed: {e}", cause=e) from e

    def describe_apps(self, app_ids):
        response = self._call('describe_apps', AppIds=list(app_ids))
        return response.get('Apps', [])

    def describe_layers(self, stack_id):
        response = self._call('describe_layers', StackId=stack_id)
        return response.get('Layers', [])

    def describe_instances(self, layer_id):
        response = self._call('describe_instances', LayerId=layer_id)
        return response.get('Instances', [])

    def update_app(self, app_id, source_url):
        self._call('update_app', AppId=app_id, AppSource={'Url': source_url})

    def create_deployment(self, stack_id, app_id, command='deploy'):
        response = self._call(
            'create_deployment',
            StackId=stack_id,
            AppId=app_id,
            Command={'Name': command}
        )
        return response['DeploymentId']

    def describe_deployments(self, deployment_ids):
        response = self._call('describe_deployments', DeploymentIds=list(deployment_ids))
        return response.get('Deployments', [])
