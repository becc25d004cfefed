"""GitLab REST API records.

Each record is built from the API's JSON exactly once, in the resource
clients, so the connector never handles raw dictionaries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Group:
    """A GitLab group or subgroup."""

    id: int
    name: str
    full_path: str
    description: str
    parent_id: int | None  # None for top-level groups
    visibility: str | None
    web_url: str | None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Group":
        return cls(
            id=data["id"],
            name=data["name"],
            full_path=data.get("full_path") or data["name"],
            description=data.get("description") or "",
            parent_id=data.get("parent_id") or None,
            visibility=data.get("visibility"),
            web_url=data.get("web_url"),
        )


@dataclass(frozen=True)
class Project:
    """A GitLab project."""

    id: int
    name: str
    path_with_namespace: str
    description: str
    namespace_id: int | None
    visibility: str | None
    web_url: str | None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Project":
        namespace = data.get("namespace") or {}
        return cls(
            id=data["id"],
            name=data["name"],
            path_with_namespace=data.get("path_with_namespace") or data["name"],
            description=data.get("description") or "",
            namespace_id=namespace.get("id"),
            visibility=data.get("visibility"),
            web_url=data.get("web_url"),
        )


class MemberKind(Enum):
    """Where a membership record was listed from."""

    GROUP = "group"
    PROJECT = "project"


@dataclass(frozen=True)
class Member:
    """A group or project membership record."""

    kind: MemberKind
    id: int
    username: str
    name: str
    state: str
    email: str
    access_level: int  # raw GitLab code, may be outside AccessLevel
    expires_at: str | None = None

    @classmethod
    def from_json(cls, kind: MemberKind, data: dict[str, Any]) -> "Member":
        return cls(
            kind=kind,
            id=data["id"],
            username=data.get("username", ""),
            name=data.get("name", ""),
            state=data.get("state", ""),
            # Only visible to owners of enterprise groups, usually absent
            email=data.get("email") or "",
            access_level=data.get("access_level", 0),
            expires_at=data.get("expires_at"),
        )


@dataclass(frozen=True)
class User:
    """A GitLab user account."""

    id: int
    username: str
    name: str
    state: str
    email: str
    public_email: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            username=data.get("username", ""),
            name=data.get("name", ""),
            state=data.get("state", ""),
            email=data.get("email") or "",
            public_email=data.get("public_email") or "",
        )

    @property
    def best_email(self) -> str:
        """The private email when the token can see it, else the public one."""
        return self.email or self.public_email
