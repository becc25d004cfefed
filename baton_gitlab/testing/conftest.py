"""
Pytest plugin for baton-gitlab testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["baton_gitlab.testing.conftest"]
"""

from baton_gitlab.testing.fixtures import (
    connector,
    fake_gitlab,
    gitlab_client,
    populated_gitlab,
    sample_group,
    sample_group_resource,
    sample_member,
)

__all__ = [
    "fake_gitlab",
    "populated_gitlab",
    "gitlab_client",
    "connector",
    "sample_group",
    "sample_group_resource",
    "sample_member",
]
