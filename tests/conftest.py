"""Shared fixtures for the baton-gitlab test-suite."""

from baton_gitlab.testing.conftest import (  # noqa: F401
    connector,
    fake_gitlab,
    gitlab_client,
    populated_gitlab,
    sample_group,
    sample_group_resource,
    sample_member,
)
