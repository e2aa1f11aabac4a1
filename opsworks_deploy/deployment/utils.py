#!/usr/bin/env python3
"""
Deployment utilities - shared helper functions.
"""

import os

from .errors import CredentialsError

VERSION_PLACEHOLDER = '{VERSION}'


def print_phase(phase_name, detail=None):
    """Helper to print phase headers."""
    print(f"\n{'='*60}")
    if detail:
        print(f"{phase_name} ({detail})")
    else:
        print(phase_name)
    print(f"{'='*60}")


def get_aws_credentials():
    """
    Get AWS credentials from environment.

    Credentials are never accepted as arguments. AWS_SESSION_TOKEN is
    optional and only passed on when set.

    Returns:
        Dict of boto3 client keyword arguments
    """
    missing = []
    if not os.environ.get('AWS_ACCESS_KEY_ID'):
        missing.append('AWS_ACCESS_KEY_ID')
    if not os.environ.get('AWS_SECRET_ACCESS_KEY'):
        missing.append('AWS_SECRET_ACCESS_KEY')

    if missing:
        raise CredentialsError(
            f"Missing environment variables: {', '.join(missing)}\n"
            f"Set with: export AWS_ACCESS_KEY_ID='YOUR_ID' AWS_SECRET_ACCESS_KEY='YOUR_SECRET'"
        )

    access_key = os.environ['AWS_ACCESS_KEY_ID']
    credentials = {
        'aws_access_key_id': access_key,
        'aws_secret_access_key': os.environ['AWS_SECRET_ACCESS_KEY'],
    }
    if os.environ.get('AWS_SESSION_TOKEN'):
        credentials['aws_session_token'] = os.environ['AWS_SESSION_TOKEN']

    print(f"[OK] AWS credentials loaded (key={access_key[:3]}...{access_key[-2:]})")
    return credentials


def resolve_source_url(url_template, version=None):
    """
    Replace {VERSION} in an artifact url template.

    The template is returned untouched when no version is given, and
    None is returned when there is no template.
    """
    if not url_template:
        return None
    if version:
        return url_template.replace(VERSION_PLACEHOLDER, version)
    return url_template


def format_duration(seconds):
    """Format elapsed seconds as minutes with two decimals."""
    return f"{seconds / 60:.2f}"
