#!/usr/bin/env python3
"""
Latest artifact finder (experimental).

Looks for all artifact files in a bucket and finds the one with the highest
semantic version. Artifact keys are expected to look like
`<prefix><MAJOR.MINOR.PATCH>[-pre][+build]<suffix>`, e.g. with prefix
"my-app-" and suffix ".tar.gz": `my-app-1.2.3.tar.gz`.

Not part of the deploy pipeline; only reachable through the `latest` command.
"""

from semver import Version

from .errors import NotFoundError


def extract_version(key, prefix, suffix):
    """Strip prefix and suffix from a key. Returns None if either does not match."""
    if not key.startswith(prefix) or not key.endswith(suffix):
        return None
    end = len(key) - len(suffix)
    if end < len(prefix):
        return None
    return key[len(prefix):end]


def parse_semver(candidate):
    """Return a comparable semver Version, or None if the string is not valid semver."""
    if not Version.is_valid(candidate):
        return None
    return Version.parse(candidate)


def select_latest_version(candidates):
    """
    Pick the highest semantic version from a list of version strings.
    Invalid candidates are skipped. Returns None if none are valid.

    Build metadata does not take part in precedence; of two versions that
    differ only in build metadata the first one seen wins.
    """
    latest = None
    latest_parsed = None
    for candidate in candidates:
        parsed = parse_semver(candidate)
        if parsed is None:
            continue
        if latest_parsed is None or parsed > latest_parsed:
            latest, latest_parsed = candidate, parsed
    return latest


def find_latest_version(storage, bucket, prefix, suffix):
    """
    Find the key of the newest artifact in a bucket.

    Args:
        storage: StorageBackend instance
        bucket: Bucket name
        prefix: Filename part before the version (also the listing prefix)
        suffix: Filename part after the version

    Returns:
        The full key `prefix + version + suffix`
    """
    objects = storage.list_objects(bucket, prefix)
    if not objects:
        raise NotFoundError(f"No files found in bucket \"{bucket}\" with file prefix \"{prefix}\"")

    keys = [obj['Key'] for obj in objects if obj['Key'].endswith(suffix)]
    if not keys:
        raise NotFoundError(
            f"No files found in bucket \"{bucket}\" with file prefix \"{prefix}\" and postfix \"{suffix}\""
        )

    versions = []
    for key in keys:
        version = extract_version(key, prefix, suffix)
        if version is None or parse_semver(version) is None:
            print(f"Ignoring file \"{key}\", \"{version}\" is not a valid semver version")
            continue
        versions.append(version)

    latest = select_latest_version(versions)
    if latest is None:
        raise NotFoundError("No valid deployment files found, check your file name")

    return f"{prefix}{latest}{suffix}"
