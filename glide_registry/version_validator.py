"""Checks for a single ``versions/<version>.yml``."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from glide_registry.checksums import PLATFORMS, RECOMMENDED_PLATFORMS, is_valid_checksum
from glide_registry.config import ValidatorOptions
from glide_registry.descriptors import VersionDescriptor
from glide_registry.documents import DocumentError
from glide_registry.findings import Finding
from glide_registry.reachability import Reachability, probe
from glide_registry.rules import attach_path, run_rules
from glide_registry.schema import DescriptorStructureError


def check_required_fields(
    release: VersionDescriptor, options: ValidatorOptions
) -> Iterator[Finding]:
    for field, attribute in VersionDescriptor.REQUIRED_FIELDS.items():
        if getattr(release, attribute) is None:
            yield Finding.error(f"Missing required field: {field}")
        else:
            yield Finding.success(f"Field '{field}' present")


def check_version_matches_filename(
    release: VersionDescriptor, options: ValidatorOptions
) -> Iterator[Finding]:
    if release.version != release.file_version:
        yield Finding.error(
            f"Version '{release.version or ''}' doesn't match filename '{release.file_version}'"
        )
    else:
        yield Finding.success("Version matches filename")


def check_release_url(release: VersionDescriptor, options: ValidatorOptions) -> Iterator[Finding]:
    if release.release_url is None:
        yield Finding.error("Missing releaseURL")
        return

    yield Finding.success("releaseURL present")
    if not options.validate_urls:
        return
    if probe(release.release_url, timeout=options.timeout) is Reachability.REACHABLE:
        yield Finding.success("releaseURL is accessible")
    else:
        yield Finding.error(f"releaseURL is not accessible: {release.release_url}")


def check_checksums(release: VersionDescriptor, options: ValidatorOptions) -> Iterator[Finding]:
    has_checksums = False
    for platform in PLATFORMS:
        checksum = release.checksums.get(platform)
        if checksum is None:
            continue
        has_checksums = True
        if is_valid_checksum(checksum):
            yield Finding.success(f"Checksum for {platform} is valid format")
        else:
            yield Finding.error(f"Invalid checksum format for {platform}: {checksum}")

    if not has_checksums:
        yield Finding.error("No checksums defined")


def check_recommended_platforms(
    release: VersionDescriptor, options: ValidatorOptions
) -> Iterator[Finding]:
    for platform in RECOMMENDED_PLATFORMS:
        if release.checksums.get(platform) is None:
            yield Finding.warning(f"Missing recommended platform: {platform}")


IDENTITY_RULES = (check_required_fields, check_version_matches_filename)

# Skipped entirely for builtin plugins
ARTIFACT_RULES = (check_release_url, check_checksums, check_recommended_platforms)


def validate_version(path: Path, options: ValidatorOptions | None = None) -> list[Finding]:
    """Validate one version descriptor.

    Builtin versions (``type: builtin``) ship with Glide itself, so once their
    identity fields are checked the release URL and checksum rules are
    skipped.

    Args:
        path: Path to ``plugins/<name>/versions/<version>.yml``
        options: Run options; network probing only happens when
            ``options.validate_urls`` is set

    Returns:
        Findings for this descriptor, each carrying ``path``.
    """
    options = options or ValidatorOptions()
    try:
        release = VersionDescriptor.load(path)
    except DocumentError as e:
        return [Finding.error(e.reason, path)]
    except DescriptorStructureError as e:
        return [Finding.error(f"Invalid structure at {problem}", path) for problem in e.problems]

    findings = run_rules(IDENTITY_RULES, release, options)
    if release.is_builtin:
        findings.append(Finding.info("Built-in plugin - skipping checksum and URL validation"))
    else:
        findings.extend(run_rules(ARTIFACT_RULES, release, options))
    return attach_path(findings, path)
