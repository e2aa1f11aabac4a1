#!/usr/bin/env python3
"""
Local fleet backend for mock/development mode.
"""

import copy
import uuid
from pathlib import Path

import yaml

from .base import FleetService
from ..config.loader import DEFAULTS_DIR, load_yaml
from ..deployment.errors import ConfigurationError
from ..deployment.status import RUNNING, KNOWN_STATUSES, SUCCESSFUL


class LocalFleetService(FleetService):
    """
    Mock fleet backend driven by a YAML state file.

    The state file lists `apps`, `layers` and `instances` in the OpsWorks
    response shape. Source url updates and deployments live in memory only;
    nothing is written back. Each deployment reports 'running' for
    `running_polls` status checks and then resolves to `outcome`.
    """

    def __init__(self, config):
        self.state_file = Path(config.get('state_file') or DEFAULTS_DIR / 'local-fleet.yaml')
        self.running_polls = config.get('running_polls', 1)
        self.outcome = config.get('outcome', SUCCESSFUL)

        if self.outcome not in KNOWN_STATUSES:
            raise ConfigurationError(f"Invalid local fleet outcome: {self.outcome}")
        if not self.state_file.exists():
            raise ConfigurationError(f"Local fleet state file not found: {self.state_file}")

        try:
            state = load_yaml(self.state_file) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"YAML syntax error in {self.state_file}: {e}") from e

        self.apps = state.get('apps', [])
        self.layers = state.get('layers', [])
        self.instances = state.get('instances', [])
        self.deployments = {}

    def describe_apps(self, app_ids):
        return [copy.deepcopy(app) for app in self.apps if app.get('AppId') in app_ids]

    def describe_layers(self, stack_id):
        return [copy.deepcopy(layer) for layer in self.layers if layer.get('StackId') == stack_id]

    def describe_instances(self, layer_id):
        return [
            copy.deepcopy(instance) for instance in self.instances
            if layer_id in instance.get('LayerIds', [])
        ]

    def update_app(self, app_id, source_url):
        for app in self.apps:
            if app.get('AppId') == app_id:
                app.setdefault('AppSource', {})['Url'] = source_url
                print(f"(LOCAL) AppId \"{app_id}\" source url set in memory only")
                return
        raise ConfigurationError(f"AppId \"{app_id}\" not in local fleet state {self.state_file}")

    def create_deployment(self, stack_id, app_id, command='deploy'):
        deployment_id = str(uuid.uuid4())
        self.deployments[deployment_id] = {
            'DeploymentId': deployment_id,
            'StackId': stack_id,
            'AppId': app_id,
            'Command': {'Name': command},
            'Status': RUNNING,
            '_polls_left': self.running_polls,
        }
        return deployment_id

    def describe_deployments(self, deployment_ids):
        records = []
        for deployment_id in deployment_ids:
            deployment = self.deployments.get(deployment_id)
            if deployment is None:
                continue
            if deployment['_polls_left'] > 0:
                deployment['_polls_left'] -= 1
            else:
                deployment['Status'] = self.outcome
            records.append({k: v for k, v in deployment.items() if not k.startswith('_')})
        return records
