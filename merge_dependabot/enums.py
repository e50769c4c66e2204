"""Enumerations for merge methods and semver update targets."""

from enum import Enum


class MergeMethod(str, Enum):
    """Merge strategies accepted by the GitHub pull request merge API."""

    SQUASH = "squash"
    MERGE = "merge"
    REBASE = "rebase"

    def __str__(self) -> str:
        return self.value


class UpdateTarget(str, Enum):
    """Highest semver bump a dependency update may carry to be merged.

    Values match the ``update-type`` labels used by Dependabot metadata.
    """

    MAJOR = "version-update:semver-major"
    MINOR = "version-update:semver-minor"
    PATCH = "version-update:semver-patch"
    ANY = "version-update:semver-any"

    def __str__(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        """The value users type for the ``target`` input (e.g. ``minor``)."""
        return self.value.rsplit("-", 1)[-1]
