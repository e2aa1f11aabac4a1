#!/usr/bin/env python3
"""
Deployment error taxonomy.

Every failure in a deployment run is raised as a DeploymentError subclass.
Nothing is retried or rolled back; the CLI turns these into exit code 1.
"""


class DeploymentError(Exception):
    """Base class for all deployment run failures."""


class NotFoundError(DeploymentError):
    """Application, layer, running instances or artifact not found."""


class UpstreamError(DeploymentError):
    """Remote API call failed. The original exception is kept on `cause`."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause


class InconsistentResultError(DeploymentError):
    """Fewer deployment records returned than deployment ids requested."""


class UnknownStatusError(DeploymentError):
    """A deployment reported a status outside running/failed/successful."""

    def __init__(self, status):
        super().__init__(f'Unknown deployment status "{status}"')
        self.status = status


class DeploymentFailedError(DeploymentError):
    """Aggregate deployment status resolved to failed."""

    def __init__(self, deployment_ids):
        super().__init__(
            'Deployment failed, look in Amazon OpsWorks deployment logs to see why '
            f'(DeploymentIds: {", ".join(deployment_ids)})'
        )
        self.deployment_ids = list(deployment_ids)


class TimeoutExceededError(DeploymentError):
    """Deployment still running after the configured polling bound."""


class CredentialsError(DeploymentError):
    """Required credential environment variables are missing."""


class ConfigurationError(DeploymentError):
    """Configuration is invalid or names an unknown backend."""
