"""GitLab REST resource clients."""

from baton_gitlab.clients.groups import GroupsClient
from baton_gitlab.clients.members import MembersClient
from baton_gitlab.clients.projects import ProjectsClient
from baton_gitlab.clients.users import UsersClient

__all__ = [
    "GroupsClient",
    "ProjectsClient",
    "MembersClient",
    "UsersClient",
]
