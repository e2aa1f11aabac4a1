#!/usr/bin/env python3
"""
OpsWorks Deploy
Deploys an application on AWS OpsWorks, optionally from a versioned S3 artifact

Don't hard-code your credentials! Export them instead:

    export AWS_ACCESS_KEY_ID='YOUR_ID'
    export AWS_SECRET_ACCESS_KEY='YOUR_SECRET'
"""

import argparse
import sys

from .config import load_config, require_valid_schema, validate_config
from .deployment.errors import DeploymentError
from .deployment.orchestrator import build_orchestrator
from .deployment.utils import print_phase, resolve_source_url


def deploy_command(config, app_id, s3_url=None, app_version=None):
    """Deploy an app, first pointing it at the versioned artifact url if one is given."""
    require_valid_schema(config)
    source_url = resolve_source_url(s3_url, app_version)
    orchestrator = build_orchestrator(config)
    return orchestrator.deploy(app_id, source_url)


def validate_command(config):
    """Validate configuration and check credentials are set."""
    print_phase("VALIDATING DEPLOYMENT PREREQUISITES")

    is_valid, errors = validate_config(config)
    if not is_valid:
        print("[FAILED] Validation failed")
        for error in errors:
            print(f"  - {error}")
        return False

    print("[OK] Configuration is valid")
    print("  - Schema validation: PASSED")
    print("  - Credentials: PASSED")
    return True


def latest_command(config, bucket, prefix, suffix):
    """Print the newest semver artifact in a bucket (experimental)."""
    print_phase("LATEST ARTIFACT", "EXPERIMENTAL")
    require_valid_schema(config)
    orchestrator = build_orchestrator(config)
    key = orchestrator.find_latest_artifact(bucket, prefix, suffix)
    print(f"Latest artifact: {key}")
    print(f"Url: {orchestrator.storage.get_object_url(bucket, key)}")
    return key


def main(argv=None):
    """Main entry point - parse command line and run deployment."""
    parser = argparse.ArgumentParser(
        description='OpsWorks Deploy',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Deploy whatever source the app currently points at
  opsworks-deploy deploy --app-id 1a2b3c4d

  # Point the app at a versioned artifact first
  opsworks-deploy deploy --app-id 1a2b3c4d \\
      --s3-url https://s3.amazonaws.com/releases/my-app-{VERSION}.tar.gz --app-version 1.2.3

  # Check config and credentials
  opsworks-deploy validate

  # Find the newest artifact (experimental)
  opsworks-deploy latest --bucket releases --prefix my-app- --suffix .tar.gz
        """
    )
    parser.add_argument('command', choices=['deploy', 'validate', 'latest'], help='Command to run')
    parser.add_argument('-a', '--app-id', help='The application id (required for deploy)')
    parser.add_argument('-s', '--s3-url', help='Url to the S3 tarball or zip file, may contain {VERSION}')
    parser.add_argument('-v', '--app-version', help='The package version substituted for {VERSION}')
    parser.add_argument('--bucket', help='S3 bucket holding the artifacts (latest)')
    parser.add_argument('--prefix', help='Artifact filename part before the version (latest)')
    parser.add_argument('--suffix', default='', help='Artifact filename part after the version (latest)')
    parser.add_argument('--config', help='Config file path (default: ./config/deployment-config.yaml, else the packaged default)')
    args = parser.parse_args(argv)

    if args.command == 'deploy' and not args.app_id:
        parser.error("deploy requires --app-id argument")

    if args.command == 'latest':
        if not args.bucket:
            parser.error("latest requires --bucket argument")
        if args.prefix is None:
            parser.error("latest requires --prefix argument")

    try:
        config = load_config(args.config)

        if args.command == 'deploy':
            deploy_command(config, args.app_id, args.s3_url, args.app_version)
        elif args.command == 'validate':
            if not validate_command(config):
                sys.exit(1)
        elif args.command == 'latest':
            latest_command(config, args.bucket, args.prefix, args.suffix)
    except DeploymentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == '__main__':
    main()
