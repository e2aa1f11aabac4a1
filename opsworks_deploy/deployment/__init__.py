"""
Deployment and orchestration package.

This package contains the deployment pipeline, the status aggregation rule,
the error taxonomy and the experimental artifact version finder.
"""

__all__ = ['orchestrator', 'status', 'errors', 'versioning', 'utils']
