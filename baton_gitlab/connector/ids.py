"""Composite resource ids of the form "<parent>/<name>"."""

from baton_gitlab.exceptions import MalformedResourceIdError

SEPARATOR = "/"


def compose_resource_id(parent: str, name: str) -> str:
    return f"{parent}{SEPARATOR}{name}"


def decompose_resource_id(resource_id: str) -> tuple[str, str]:
    """
    Split a composite id back into (parent, name).

    Raises:
        MalformedResourceIdError: Unless the id has exactly one separator
            with non-empty text on both sides
    """
    parts = resource_id.split(SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedResourceIdError(resource_id)
    return parts[0], parts[1]
