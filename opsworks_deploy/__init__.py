"""
OpsWorks deployment toolkit.

Triggers an application deployment on AWS OpsWorks, optionally repointing
the application at a new artifact on S3 first, and waits for it to finish.
"""

__version__ = '0.3.0'

__all__ = ['deployment', 'fleet', 'storage', 'config']
