"""Resource types synced by the connector."""

from baton_gitlab.types.resources import ResourceType, Trait

GROUP_RESOURCE_TYPE = ResourceType(
    id="group",
    display_name="Group",
    traits=(Trait.GROUP,),
)

PROJECT_RESOURCE_TYPE = ResourceType(
    id="project",
    display_name="Project",
    traits=(Trait.GROUP,),
)

USER_RESOURCE_TYPE = ResourceType(
    id="user",
    display_name="User",
    traits=(Trait.USER,),
)
