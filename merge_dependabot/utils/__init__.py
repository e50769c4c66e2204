"""Helpers shared across merge-dependabot."""
