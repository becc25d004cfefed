"""
Pytest fixtures for baton-gitlab testing.

Provides an in-memory GitLab and clients/connectors wired to it.
"""

from typing import Any, Generator

import pytest

from baton_gitlab.client import GitLabClient
from baton_gitlab.connector.connector import GitLabConnector
from baton_gitlab.connector.groups import group_resource
from baton_gitlab.testing.fake_gitlab import FakeGitLab
from baton_gitlab.transport import RetryConfig
from baton_gitlab.types.gitlab import Group, Member, MemberKind
from baton_gitlab.types.resources import Resource

# Group ids of the populated fake, in listing order
POPULATED_GROUP_IDS = (101, 102, 103, 104, 105)


# ============================================================================
# Fake GitLab Fixtures
# ============================================================================


@pytest.fixture
def fake_gitlab() -> FakeGitLab:
    """Provide an empty FakeGitLab."""
    return FakeGitLab()


@pytest.fixture
def populated_gitlab(fake_gitlab: FakeGitLab) -> FakeGitLab:
    """
    Provide a FakeGitLab with five groups, three projects and three users.

    Group 101 "platform" has members 7 (Developer) and 8 (Owner) and
    projects 201 "api" and 202 "web"; project 201 has member 9 (Reporter).
    Group 102 "data" is a subgroup of 101 with project 203 "etl".
    """
    fake_gitlab.add_group("platform", group_id=101, description="Platform team")
    fake_gitlab.add_group("data", group_id=102, parent_id=101)
    fake_gitlab.add_group("security", group_id=103)
    fake_gitlab.add_group("docs", group_id=104)
    fake_gitlab.add_group("infra", group_id=105)

    fake_gitlab.add_project(101, "api", project_id=201, description="Public API")
    fake_gitlab.add_project(101, "web", project_id=202)
    fake_gitlab.add_project(102, "etl", project_id=203)

    fake_gitlab.add_user(7, "alice", name="Alice", email="alice@example.com")
    fake_gitlab.add_user(8, "bob", name="Bob", public_email="bob@example.org")
    fake_gitlab.add_user(9, "carol", name="Carol")

    fake_gitlab.add_group_member(101, 7, access_level=30)
    fake_gitlab.add_group_member(101, 8, access_level=50)
    fake_gitlab.add_project_member(201, 9, access_level=20)
    return fake_gitlab


@pytest.fixture
def gitlab_client(populated_gitlab: FakeGitLab) -> Generator[GitLabClient, None, None]:
    """Provide a GitLabClient (page size 2, no retries) backed by populated_gitlab."""
    client = create_client(populated_gitlab)
    yield client
    client.close()


@pytest.fixture
def connector(gitlab_client: GitLabClient) -> GitLabConnector:
    """Provide a GitLabConnector backed by populated_gitlab."""
    return GitLabConnector(gitlab_client)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_group() -> Group:
    """Provide a sample subgroup."""
    return create_group()


@pytest.fixture
def sample_group_resource(sample_group: Group) -> Resource:
    """Provide the resource for sample_group."""
    return group_resource(sample_group)


@pytest.fixture
def sample_member() -> Member:
    """Provide a sample group member with Developer access."""
    return create_member()


# ============================================================================
# Helper Functions
# ============================================================================


def create_client(
    fake: FakeGitLab,
    page_size: int = 2,
    retry_config: RetryConfig | None = None,
) -> GitLabClient:
    """
    Create a GitLabClient that talks to a FakeGitLab.

    Retries are disabled unless a retry_config is passed.
    """
    return GitLabClient(
        access_token=fake.token,
        base_url="https://gitlab.example.com/",
        page_size=page_size,
        retry_config=retry_config or RetryConfig(max_retries=0),
        transport=fake.transport(),
    )


def create_group(
    group_id: int = 42,
    name: str = "backend",
    **kwargs: Any,
) -> Group:
    """
    Create a Group with customizable fields.

    Args:
        group_id: Group ID
        name: Group name
        **kwargs: Additional fields to override

    Returns:
        Group object
    """
    defaults: dict[str, Any] = {
        "full_path": f"engineering/{name}",
        "description": "Backend services",
        "parent_id": 7,
        "visibility": "private",
        "web_url": f"https://gitlab.example.com/groups/engineering/{name}",
    }
    defaults.update(kwargs)
    return Group(id=group_id, name=name, **defaults)


def create_member(
    user_id: int = 7,
    access_level: int = 30,
    kind: MemberKind = MemberKind.GROUP,
    **kwargs: Any,
) -> Member:
    """
    Create a Member with customizable fields.

    Args:
        user_id: GitLab user id
        access_level: Raw GitLab access level code
        kind: Group or project membership
        **kwargs: Additional fields to override

    Returns:
        Member object
    """
    defaults: dict[str, Any] = {
        "username": "alice",
        "name": "Alice",
        "state": "active",
        "email": "",
    }
    defaults.update(kwargs)
    return Member(kind=kind, id=user_id, access_level=access_level, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "fake_gitlab",
    "populated_gitlab",
    "gitlab_client",
    "connector",
    "sample_group",
    "sample_group_resource",
    "sample_member",
    # Helper functions
    "create_client",
    "create_group",
    "create_member",
    "POPULATED_GROUP_IDS",
]
