"""baton-gitlab testing utilities.

Provides an in-memory GitLab and fixtures for testing code that uses the
connector.
"""

from baton_gitlab.testing.fake_gitlab import FAKE_TOKEN, FakeCall, FakeGitLab
from baton_gitlab.testing.fixtures import create_client, create_group, create_member

__all__ = [
    # Fake GitLab
    "FakeGitLab",
    "FakeCall",
    "FAKE_TOKEN",
    # Helper functions
    "create_client",
    "create_group",
    "create_member",
]
