"""Platform-side resource, entitlement and grant models."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Trait(Enum):
    """Shape of a resource type as the platform understands it."""

    GROUP = "group"
    USER = "user"


@dataclass(frozen=True)
class ResourceType:
    """A kind of resource the connector syncs."""

    id: str
    display_name: str
    traits: tuple[Trait, ...]


@dataclass(frozen=True)
class ResourceId:
    """Identifier of a resource, scoped by its resource type."""

    resource_type: str
    resource: str

    def __str__(self) -> str:
        return f"{self.resource_type}:{self.resource}"


@dataclass(frozen=True)
class Annotation:
    """Base class for side-channel notes attached to results."""


@dataclass(frozen=True)
class ChildResourceType(Annotation):
    """Resources of this type can be listed under the annotated resource."""

    resource_type_id: str


class UserStatus(Enum):
    """Account status reported to the platform."""

    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class UserTrait(Annotation):
    """The account shape of a user resource: primary email and login."""

    email: str
    login: str
    status: UserStatus = UserStatus.ENABLED


@dataclass(frozen=True)
class IdempotentConflict(Annotation):
    """A mutation found the remote already in its target state."""


@dataclass(frozen=True)
class GrantAlreadyExists(IdempotentConflict):
    """The principal was already a member."""


@dataclass(frozen=True)
class GrantAlreadyRevoked(IdempotentConflict):
    """The principal was not a member anymore."""


@dataclass(frozen=True)
class Resource:
    """A synced GitLab group, project or user."""

    id: ResourceId
    display_name: str
    profile: Mapping[str, Any] = field(default_factory=dict, hash=False)
    parent_id: ResourceId | None = None
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "profile", MappingProxyType(dict(self.profile)))


@dataclass(frozen=True)
class Entitlement:
    """Access level that can be granted on a resource."""

    id: str
    resource: Resource
    slug: str
    display_name: str
    description: str
    grantable_to: tuple[str, ...] = ()

    @classmethod
    def assignment(
        cls,
        resource: Resource,
        slug: str,
        display_name: str,
        description: str,
        grantable_to: tuple[str, ...] = (),
    ) -> "Entitlement":
        return cls(
            id=f"{resource.id}:{slug}",
            resource=resource,
            slug=slug,
            display_name=display_name,
            description=description,
            grantable_to=grantable_to,
        )


@dataclass(frozen=True)
class Grant:
    """A principal currently holding an entitlement."""

    id: str
    entitlement: Entitlement
    principal: ResourceId

    @classmethod
    def of(cls, entitlement: Entitlement, principal: ResourceId) -> "Grant":
        return cls(
            id=f"{entitlement.id}:{principal}",
            entitlement=entitlement,
            principal=principal,
        )
