#!/usr/bin/env python3
"""
Deployment status aggregation.
"""

from .errors import UnknownStatusError

RUNNING = 'running'
FAILED = 'failed'
SUCCESSFUL = 'successful'

KNOWN_STATUSES = (RUNNING, FAILED, SUCCESSFUL)


def aggregate_status(statuses):
    """
    Determine the overall status of a set of deployments.

    Rules:
    - If any deployment has not finished yet the status is 'running',
      even when others have already failed.
    - If all deployments have finished and at least one failed the
      status is 'failed'.
    - If all deployments have finished successfully the status is 'successful'.

    Args:
        statuses: Iterable of per-deployment status strings

    Returns:
        One of 'running', 'failed' or 'successful'

    Raises:
        UnknownStatusError: a status is not recognized, or there is none at all
    """
    statuses = list(statuses)
    if not statuses:
        raise UnknownStatusError(None)

    for status in statuses:
        if status not in KNOWN_STATUSES:
            raise UnknownStatusError(status)

    if RUNNING in statuses:
        return RUNNING
    if FAILED in statuses:
        return FAILED
    return SUCCESSFUL


def determine_deployment_status(deployments):
    """Aggregate status of deployment records as returned by describe_deployments."""
    return aggregate_status(deployment.get('Status') for deployment in deployments)
