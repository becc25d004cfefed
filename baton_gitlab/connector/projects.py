"""Project resource builder."""

from baton_gitlab.clients.members import MembersClient
from baton_gitlab.clients.projects import ProjectsClient
from baton_gitlab.connector.base import MembershipBuilder
from baton_gitlab.connector.groups import group_id_of
from baton_gitlab.connector.resource_types import (
    GROUP_RESOURCE_TYPE,
    PROJECT_RESOURCE_TYPE,
    USER_RESOURCE_TYPE,
)
from baton_gitlab.types.gitlab import MemberKind, Project
from baton_gitlab.types.resources import ChildResourceType, Resource, ResourceId


def project_resource(project: Project, parent_id: ResourceId | None) -> Resource:
    """Map a GitLab project to a resource keyed by its numeric id."""
    profile = {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "path_with_namespace": project.path_with_namespace,
    }
    if project.namespace_id:
        profile["group_id"] = project.namespace_id

    return Resource(
        id=ResourceId(PROJECT_RESOURCE_TYPE.id, str(project.id)),
        display_name=project.name,
        profile=profile,
        parent_id=parent_id,
        annotations=(ChildResourceType(USER_RESOURCE_TYPE.id),),
    )


class ProjectBuilder(MembershipBuilder):
    """Syncs the projects of each group, with memberships as grants."""

    resource_type = PROJECT_RESOURCE_TYPE
    member_kind = MemberKind.PROJECT
    kind_label = "Project"

    def __init__(self, projects: ProjectsClient, members: MembersClient) -> None:
        super().__init__(members)
        self.projects = projects

    def membership_key(self, resource_id: ResourceId) -> str:
        return resource_id.resource

    def list(
        self, parent_id: ResourceId | None, cursor: str
    ) -> tuple[list[Resource], str]:
        # Projects are only listed beneath a group
        if parent_id is None or parent_id.resource_type != GROUP_RESOURCE_TYPE.id:
            return [], ""

        projects, next_cursor = self.projects.list_for_group(
            group_id_of(parent_id), cursor
        )
        return [project_resource(p, parent_id) for p in projects], next_cursor
