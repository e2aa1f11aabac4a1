#!/usr/bin/env python3
"""
OpsWorks Deployment Orchestrator
Finds an application's running instances, optionally repoints its source
archive and runs a deployment until it finishes
"""

import time

from .errors import (
    ConfigurationError, DeploymentFailedError, InconsistentResultError,
    NotFoundError, TimeoutExceededError
)
from .status import FAILED, SUCCESSFUL, determine_deployment_status
from .utils import format_duration, print_phase
from . import versioning
from ..fleet import get_fleet_service
from ..storage import get_storage_backend

DEFAULT_POLLING_INTERVAL = 10
DEFAULT_LAYER_TYPE_SUFFIX = '-app'


def layer_type_mapper(suffix=DEFAULT_LAYER_TYPE_SUFFIX):
    """Build an app -> layer type mapping that appends `suffix` to the app Type."""
    def layer_type_for(app):
        return f"{app['Type']}{suffix}"
    return layer_type_for


default_layer_type = layer_type_mapper()


class DeploymentOrchestrator:
    """
    Runs a deployment on OpsWorks and waits for it to finish.

    The pipeline is: find app -> find running instances -> update app
    source (optional) -> create deployment -> wait for deployment.
    Any step's error aborts the rest of the run. An applied source url
    change is not reverted when a later step fails.
    """

    def __init__(self, fleet, storage=None, polling_interval=DEFAULT_POLLING_INTERVAL,
                 max_wait=None, max_attempts=None, layer_type_for=default_layer_type,
                 sleep=time.sleep, clock=time.monotonic):
        """
        Args:
            fleet: FleetService instance
            storage: StorageBackend instance (optional, only used by find_latest_artifact)
            polling_interval: Seconds between deployment status checks
            max_wait: Give up after this many seconds of polling (None: poll forever)
            max_attempts: Give up after this many status checks (None: poll forever)
            layer_type_for: Callable mapping an app record to its layer type
        """
        self.fleet = fleet
        self.storage = storage
        self.polling_interval = polling_interval
        self.max_wait = max_wait
        self.max_attempts = max_attempts
        self.layer_type_for = layer_type_for
        self.deploy_status = None

        self._sleep = sleep
        self._clock = clock

    def deploy(self, app_id, source_url=None):
        """
        Create a deployment for an existing app and wait for it to finish.

        Args:
            app_id: OpsWorks application id
            source_url: Url of the tarball or zip file on S3 (optional)

        Returns:
            'successful'
        """
        print_phase("DEPLOYMENT", app_id)
        start_time = self._clock()
        try:
            app = self.find_app(app_id)
            self.find_running_instances(app['StackId'], self.layer_type_for(app))
            if source_url:
                self.update_app(app['AppId'], source_url)
            deployment_id = self.create_deployment(app['StackId'], app['AppId'])
            return self.wait_for_deploy_finish([deployment_id])
        finally:
            duration = format_duration(self._clock() - start_time)
            print(f"Finished deployment in {duration} minutes")

    def find_app(self, app_id):
        apps = self.fleet.describe_apps([app_id])
        if not apps:
            raise NotFoundError(
                f"Unable to find AppId \"{app_id}\", check if it exists and you have sufficient privileges"
            )
        return apps[0]

    def find_running_instances(self, stack_id, layer_type):
        """Running instances of the layer with `layer_type`. Raises NotFoundError if there are none."""
        layer = self.find_layer_by_type(stack_id, layer_type)
        if layer is None:
            raise NotFoundError(f"Unable to find layer with type \"{layer_type}\" in StackId \"{stack_id}\"")

        layer_id = layer['LayerId']
        instances = self.find_running_instances_by_layer_id(layer_id)
        if not instances:
            raise NotFoundError(f"No running instances found for LayerId \"{layer_id}\" in StackId \"{stack_id}\"")

        print(f"Found {len(instances)} running instance(s) in LayerId \"{layer_id}\" with StackId \"{stack_id}\"")
        return instances

    def find_layer_by_type(self, stack_id, layer_type):
        """First layer in the stack with a matching Type, or None when no layer matches."""
        layers = self.fleet.describe_layers(stack_id)
        if not layers:
            raise NotFoundError(
                f"No OpsWorks layers found in StackId \"{stack_id}\", "
                "check if a layer exists and whether you have sufficient privileges"
            )
        return next((layer for layer in layers if layer.get('Type') == layer_type), None)

    def find_running_instances_by_layer_id(self, layer_id):
        instances = self.fleet.describe_instances(layer_id)
        return [instance for instance in instances if instance.get('Status') == 'online']

    def update_app(self, app_id, source_url):
        self.fleet.update_app(app_id, source_url)
        print(f"[OK] Updated AppId \"{app_id}\" with S3 source url \"{source_url}\"")

    def create_deployment(self, stack_id, app_id):
        print(f"Creating deployment in Amazon OpsWorks with AppId \"{app_id}\" on StackId \"{stack_id}\"")
        deployment_id = self.fleet.create_deployment(stack_id, app_id, command='deploy')
        print(f"Deployment started with DeploymentId \"{deployment_id}\", this process can take several minutes.")
        return deployment_id

    def get_deployment_status(self, deployment_ids):
        """Aggregate status of one or more deployments."""
        deployments = self.fleet.describe_deployments(deployment_ids)
        if len(deployments) != len(deployment_ids):
            raise InconsistentResultError(
                f"Could not retrieve all deployment statuses for deployment ids {', '.join(deployment_ids)}"
            )
        return determine_deployment_status(deployments)

    def wait_for_deploy_finish(self, deployment_ids):
        """
        Keep polling until the deployments have finished.

        Sleeps for the polling interval before every status check. Without
        max_wait or max_attempts this never gives up on a 'running' deployment.
        """
        started = self._clock()
        attempts = 0
        while True:
            self._sleep(self.polling_interval)
            attempts += 1

            status = self.get_deployment_status(deployment_ids)
            self.deploy_status = status

            if status == FAILED:
                raise DeploymentFailedError(deployment_ids)
            if status == SUCCESSFUL:
                print("[OK] Deployment was successful!")
                return status

            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise TimeoutExceededError(
                    f"Deployment still running after {attempts} status checks ({', '.join(deployment_ids)})"
                )
            elapsed = self._clock() - started
            if self.max_wait is not None and elapsed >= self.max_wait:
                raise TimeoutExceededError(
                    f"Deployment still running after {elapsed:.0f} seconds ({', '.join(deployment_ids)})"
                )

            print(f"Deployment status is \"running\", checking again in {self.polling_interval:.1f} seconds...")

    def find_latest_artifact(self, bucket, prefix, suffix):
        """Key of the newest semver artifact in a bucket (experimental)."""
        if self.storage is None:
            raise ConfigurationError("No storage backend configured, add a 'storage' section to the config")
        return versioning.find_latest_version(self.storage, bucket, prefix, suffix)


def build_orchestrator(config):
    """Create an orchestrator with the fleet and storage backends named in the config."""
    deployment = config.get('deployment', {})
    suffix = deployment.get('layer_type_suffix', DEFAULT_LAYER_TYPE_SUFFIX)

    return DeploymentOrchestrator(
        get_fleet_service(config),
        storage=get_storage_backend(config),
        polling_interval=deployment.get('polling_interval', DEFAULT_POLLING_INTERVAL),
        max_wait=deployment.get('max_wait'),
        max_attempts=deployment.get('max_attempts'),
        layer_type_for=layer_type_mapper(suffix)
    )
