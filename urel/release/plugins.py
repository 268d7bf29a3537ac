"""Plugin lists appended to the base configuration for each mode."""

from __future__ import annotations

from urel.release.model import PluginDescriptor

NPM = "@semantic-release/npm"
EXEC = "@semantic-release/exec"
CHANGELOG = "@semantic-release/changelog"
GITHUB = "@semantic-release/github"
GIT = "@semantic-release/git"

# Placeholders are expanded by semantic-release (lodash templates), not by us.
NEXT_VERSION = "${nextRelease.version}"
NEXT_NOTES = "${nextRelease.notes}"

RELEASE_COMMIT_MESSAGE = f"chore(release): {NEXT_VERSION}\n\n{NEXT_NOTES}"

MANIFEST_FILE = "package.json"
CHANGELOG_FILE = "CHANGELOG.md"


def template_plugins() -> tuple[PluginDescriptor, ...]:
    """Template repositories tag and publish a GitHub release, never an npm package."""
    return (
        (NPM, {"npmPublish": False}),
        GITHUB,
        GIT,
    )


def package_plugins(*, namespace: str, version_command: str) -> tuple[PluginDescriptor, ...]:
    manifest = f"{namespace}/{MANIFEST_FILE}"
    changelog = f"{namespace}/{CHANGELOG_FILE}"
    return (
        (EXEC, {"prepareCmd": f"{version_command} {NEXT_VERSION}"}),
        (CHANGELOG, {"changelogFile": changelog}),
        GITHUB,
        (GIT, {"assets": [manifest, changelog], "message": RELEASE_COMMIT_MESSAGE}),
    )
