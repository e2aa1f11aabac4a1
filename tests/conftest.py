"""Pytest configuration and fixtures."""

import pytest

from opsworks_deploy.deployment.orchestrator import DeploymentOrchestrator
from opsworks_deploy.fleet.base import FleetService
from opsworks_deploy.storage.base import StorageBackend


class FakeFleetService(FleetService):
    """In-memory fleet recording every call."""

    def __init__(self, apps=None, layers=None, instances=None, deployment_statuses=None):
        self.apps = apps or []
        self.layers = layers or []
        self.instances = instances or []
        # One list of statuses per describe_deployments call; the last one repeats
        self.deployment_statuses = deployment_statuses or [['successful']]
        self.calls = []
        self._status_calls = 0

    def describe_apps(self, app_ids):
        self.calls.append(('describe_apps', list(app_ids)))
        return [app for app in self.apps if app['AppId'] in app_ids]

    def describe_layers(self, stack_id):
        self.calls.append(('describe_layers', stack_id))
        return [layer for layer in self.layers if layer['StackId'] == stack_id]

    def describe_instances(self, layer_id):
        self.calls.append(('describe_instances', layer_id))
        return [i for i in self.instances if layer_id in i['LayerIds']]

    def update_app(self, app_id, source_url):
        self.calls.append(('update_app', app_id, source_url))

    def create_deployment(self, stack_id, app_id, command='deploy'):
        self.calls.append(('create_deployment', stack_id, app_id, command))
        return 'dep-1'

    def describe_deployments(self, deployment_ids):
        self.calls.append(('describe_deployments', list(deployment_ids)))
        index = min(self._status_calls, len(self.deployment_statuses) - 1)
        self._status_calls += 1
        statuses = self.deployment_statuses[index]
        return [
            {'DeploymentId': f'dep-{n + 1}', 'Status': status}
            for n, status in enumerate(statuses)
        ]

    def call_names(self):
        return [call[0] for call in self.calls]


class FakeStorage(StorageBackend):
    """In-memory bucket listing."""

    def __init__(self, keys):
        self.keys = keys

    def list_objects(self, bucket, prefix=''):
        return [{'Key': key, 'Size': 1} for key in self.keys if key.startswith(prefix)]

    def get_object_url(self, bucket, key):
        return f"mem://{bucket}/{key}"


class FakeClock:
    """Monotonic clock advanced only by sleep()."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def rails_fleet():
    """Stack with a rails app, its rails-app layer and one online instance."""
    return FakeFleetService(
        apps=[{'AppId': 'app-1', 'StackId': 'stack-1', 'Type': 'rails', 'AppSource': {'Url': 'old'}}],
        layers=[
            {'LayerId': 'layer-db', 'StackId': 'stack-1', 'Type': 'db-master'},
            {'LayerId': 'layer-rails', 'StackId': 'stack-1', 'Type': 'rails-app'},
        ],
        instances=[
            {'InstanceId': 'i-1', 'LayerIds': ['layer-rails'], 'Status': 'online'},
            {'InstanceId': 'i-2', 'LayerIds': ['layer-rails'], 'Status': 'stopped'},
        ],
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_orchestrator(clock):
    """Build an orchestrator on a fake clock so polling does not really sleep."""
    def _make(fleet, **kwargs):
        kwargs.setdefault('polling_interval', 10)
        return DeploymentOrchestrator(fleet, sleep=clock.sleep, clock=clock, **kwargs)
    return _make


@pytest.fixture
def aws_env(monkeypatch):
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'AKIATESTKEY1234')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'secret')
    monkeypatch.delenv('AWS_SESSION_TOKEN', raising=False)


@pytest.fixture
def no_aws_env(monkeypatch):
    monkeypatch.delenv('AWS_ACCESS_KEY_ID', raising=False)
    monkeypatch.delenv('AWS_SECRET_ACCESS_KEY', raising=False)
    monkeypatch.delenv('AWS_SESSION_TOKEN', raising=False)
