#!/usr/bin/env python3
"""
baton-gitlab sync walk example.

Lists every group the token can see, then the projects and members beneath
each group, the same order a sync run drives the builders in.

Run with:
    GITLAB_ACCESS_TOKEN=glpat-... python examples/list_resources.py
"""

import logging
import sys

from baton_gitlab import ConnectorConfig, GitLabConnector, GitLabConnectorError, configure_logging
from baton_gitlab.types.resources import Resource, ResourceId


def list_all(builder, parent_id: ResourceId | None) -> list[Resource]:
    resources, cursor = builder.list(parent_id, "")
    while cursor:
        page, cursor = builder.list(parent_id, cursor)
        resources.extend(page)
    return resources


def main() -> int:
    configure_logging(level=logging.INFO)

    try:
        config = ConnectorConfig.from_env()
    except GitLabConnectorError as e:
        print(f"Configuration error: {e}")
        return 1

    with GitLabConnector.from_config(config) as connector:
        user = connector.validate()
        print(f"=== {connector.metadata().display_name} as {user.username} ===\n")

        groups = connector.builder_for("group")
        projects = connector.builder_for("project")
        users = connector.builder_for("user")

        for group in list_all(groups, None):
            print(f"Group {group.display_name} ({group.id})")
            for entitlement in groups.entitlements(group, "")[0]:
                print(f"   entitlement: {entitlement.display_name}")
            for member in list_all(users, group.id):
                print(f"   member: {member.display_name} <{member.profile['email']}>")
            for project in list_all(projects, group.id):
                grants, _ = projects.grants(project, "")
                print(f"   project {project.display_name}: {len(grants)} direct grants")

    return 0


if __name__ == "__main__":
    sys.exit(main())
