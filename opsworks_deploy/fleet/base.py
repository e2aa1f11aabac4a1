#!/usr/bin/env python3
"""
Base fleet-management service interface.
"""


class FleetService:
    """
    Interface for fleet-management backends (OpsWorks or local mock).

    Records are returned in the OpsWorks response shape (AppId, StackId,
    LayerId, Type, Status, ...).
    """

    def describe_apps(self, app_ids):
        """Return application records for the given ids."""
        raise NotImplementedError("Subclasses must implement describe_apps()")

    def describe_layers(self, stack_id):
        """Return all layer records in a stack."""
        raise NotImplementedError("Subclasses must implement describe_layers()")

    def describe_instances(self, layer_id):
        """Return all instance records in a layer."""
        raise NotImplementedError("Subclasses must implement describe_instances()")

    def update_app(self, app_id, source_url):
        """Point an application at a new source archive url."""
        raise NotImplementedError("Subclasses must implement update_app()")

    def create_deployment(self, stack_id, app_id, command='deploy'):
        """Start a deployment command. Returns the new DeploymentId."""
        raise NotImplementedError("Subclasses must implement create_deployment()")

    def describe_deployments(self, deployment_ids):
        """Return deployment records for the given ids."""
        raise NotImplementedError("Subclasses must implement describe_deployments()")
