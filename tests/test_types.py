"""
Property-based tests for access levels, composite ids and the platform model.

Feature: baton-gitlab
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from baton_gitlab.connector.ids import compose_resource_id, decompose_resource_id
from baton_gitlab.exceptions import MalformedResourceIdError
from baton_gitlab.types.access_levels import GRANTABLE_ACCESS_LEVELS, AccessLevel
from baton_gitlab.types.gitlab import Group, Member, MemberKind, Project
from baton_gitlab.types.resources import Resource, ResourceId

segment_strategy = st.text(
    min_size=1,
    max_size=40,
    alphabet=st.characters(blacklist_characters="/", blacklist_categories=("Cs",)),
)
known_codes = {level.value for level in AccessLevel}


# ============================================================================
# Access levels
# ============================================================================


@pytest.mark.parametrize("level", list(AccessLevel))
def test_access_level_name_round_trip(level: AccessLevel) -> None:
    assert AccessLevel.from_name(level.display_name) is level
    assert AccessLevel.from_code(int(level)) is level


def test_access_level_codes_match_gitlab() -> None:
    assert [(level.display_name, int(level)) for level in AccessLevel] == [
        ("None", 0),
        ("Minimal", 5),
        ("Guest", 10),
        ("Reporter", 20),
        ("Developer", 30),
        ("Maintainer", 40),
        ("Owner", 50),
        ("Admin", 60),
    ]


@given(code=st.integers().filter(lambda c: c not in known_codes))
@settings(max_examples=100)
def test_unknown_access_level_codes_map_to_none(code: int) -> None:
    assert AccessLevel.from_code(code) is AccessLevel.NONE


@pytest.mark.parametrize("name", ["", "developer", "Planner", "root"])
def test_unknown_access_level_names_map_to_none(name: str) -> None:
    assert AccessLevel.from_name(name) is AccessLevel.NONE


def test_grantable_levels_ascend_without_none_or_admin() -> None:
    assert len(GRANTABLE_ACCESS_LEVELS) == 6
    assert list(GRANTABLE_ACCESS_LEVELS) == sorted(GRANTABLE_ACCESS_LEVELS)
    assert AccessLevel.NONE not in GRANTABLE_ACCESS_LEVELS
    assert AccessLevel.ADMIN not in GRANTABLE_ACCESS_LEVELS


# ============================================================================
# Composite resource ids
# ============================================================================


@given(parent=segment_strategy, name=segment_strategy)
@settings(max_examples=100)
def test_composite_id_round_trip(parent: str, name: str) -> None:
    assert decompose_resource_id(compose_resource_id(parent, name)) == (parent, name)


@given(value=segment_strategy)
@settings(max_examples=100)
def test_decompose_rejects_ids_without_separator(value: str) -> None:
    with pytest.raises(MalformedResourceIdError):
        decompose_resource_id(value)


@given(parts=st.lists(segment_strategy, min_size=3, max_size=5))
@settings(max_examples=100)
def test_decompose_rejects_ids_with_several_separators(parts: list[str]) -> None:
    with pytest.raises(MalformedResourceIdError):
        decompose_resource_id("/".join(parts))


@pytest.mark.parametrize("value", ["", "/", "42/", "/backend"])
def test_decompose_rejects_empty_segments(value: str) -> None:
    with pytest.raises(MalformedResourceIdError) as exc_info:
        decompose_resource_id(value)
    assert exc_info.value.resource_id == value


# ============================================================================
# GitLab records and resources
# ============================================================================


def test_group_from_json_normalizes_optional_fields() -> None:
    group = Group.from_json({"id": 3, "name": "ops", "description": None, "parent_id": None})

    assert group.description == ""
    assert group.parent_id is None
    assert group.full_path == "ops"


def test_project_from_json_reads_namespace() -> None:
    project = Project.from_json(
        {"id": 9, "name": "api", "namespace": {"id": 3}, "path_with_namespace": "ops/api"}
    )

    assert project.namespace_id == 3
    assert project.path_with_namespace == "ops/api"


@pytest.mark.parametrize("kind", list(MemberKind))
def test_member_from_json_tags_kind(kind: MemberKind) -> None:
    member = Member.from_json(
        kind, {"id": 7, "username": "alice", "name": "Alice", "state": "active", "access_level": 30}
    )

    assert member.kind is kind
    assert member.email == ""
    assert member.access_level == 30


def test_resource_profile_is_read_only() -> None:
    resource = Resource(
        id=ResourceId("group", "1/ops"),
        display_name="ops",
        profile={"id": 1},
    )

    with pytest.raises(TypeError):
        resource.profile["id"] = 2  # type: ignore[index]
    assert str(resource.id) == "group:1/ops"
