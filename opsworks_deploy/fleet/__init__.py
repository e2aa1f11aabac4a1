"""
Fleet-management backend package.

This package provides abstraction for the fleet-management API
(AWS OpsWorks, local mock) that deployments run against.
"""

from .base import FleetService
from .local import LocalFleetService
from .opsworks import OpsWorksService
from ..deployment.errors import ConfigurationError


def get_fleet_service(config):
    """Factory function to get appropriate fleet backend."""
    fleet_config = config.get('fleet', {})
    backend = fleet_config.get('backend', 'opsworks')

    if backend == 'opsworks':
        return OpsWorksService(fleet_config)
    elif backend == 'local':
        return LocalFleetService(fleet_config)
    else:
        raise ConfigurationError(f"Unknown fleet backend: {backend}")


__all__ = ['FleetService', 'LocalFleetService', 'OpsWorksService', 'get_fleet_service']
