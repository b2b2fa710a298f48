"""Tests for the Groups API models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from playfab_models.groups import (
    AddMembersRequest,
    CreateGroupRequest,
    CreateGroupResponse,
    EntityKey,
    EntityMemberRole,
    EntityWithLineage,
    GetGroupResponse,
    GroupWithRoles,
    InviteToGroupRequest,
    ListGroupBlocksResponse,
    ListGroupMembersResponse,
    ListMembershipResponse,
    OperationTypes,
    UpdateGroupResponse,
)
from playfab_models.wire import (
    MissingRequiredField,
    TypeMismatch,
    decode,
    encode,
)


# =====================================================================
# Helpers
# =====================================================================

def _member(entity_id: str) -> dict:
    return {
        "Key": {"Id": entity_id, "Type": "title_player_account"},
        "Lineage": {"master_player_account": {"Id": f"m-{entity_id}", "Type": "master_player_account"}},
    }


def _role(role_id: str, name: str, *member_ids: str) -> dict:
    return {
        "RoleId": role_id,
        "RoleName": name,
        "Members": [_member(m) for m in member_ids],
    }


GROUP = {"Id": "G1", "Type": "group"}


# =====================================================================
# Requests
# =====================================================================

class TestCreateGroupRequest:
    def test_only_name_set(self):
        assert encode(CreateGroupRequest(group_name="Raiders")) == {"GroupName": "Raiders"}

    def test_with_entity_and_tags(self):
        request = CreateGroupRequest(
            group_name="Raiders",
            entity=EntityKey(id="P1", type="title_player_account"),
            custom_tags={"build": "1.2"},
        )
        assert encode(request) == {
            "CustomTags": {"build": "1.2"},
            "Entity": {"Id": "P1", "Type": "title_player_account"},
            "GroupName": "Raiders",
        }

    def test_name_required(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(CreateGroupRequest, {"Entity": {"Id": "P1"}})
        assert exc_info.value.path == "CreateGroupRequest.GroupName"
        assert exc_info.value.expected == "string"

    def test_python_name_is_not_a_wire_key(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(CreateGroupRequest, {"group_name": "Raiders"})
        assert exc_info.value.path == "CreateGroupRequest.GroupName"

    def test_round_trip(self):
        wire = {"GroupName": "Raiders", "Entity": {"Id": "P1", "Type": "title_player_account"}}
        assert encode(decode(CreateGroupRequest, wire)) == wire


class TestMembershipRequests:
    def test_add_members(self):
        request = AddMembersRequest(
            group=EntityKey(id="G1", type="group"),
            members=[EntityKey(id="P1"), EntityKey(id="P2")],
            role_id="members",
        )
        assert encode(request) == {
            "Group": GROUP,
            "Members": [{"Id": "P1"}, {"Id": "P2"}],
            "RoleId": "members",
        }

    def test_add_members_requires_members(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(AddMembersRequest, {"Group": GROUP})
        assert exc_info.value.path == "AddMembersRequest.Members"
        assert exc_info.value.expected == "array"

    def test_invite_requires_entity(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(InviteToGroupRequest, {"Group": GROUP})
        assert exc_info.value.path == "InviteToGroupRequest.Entity"
        assert exc_info.value.expected == "EntityKey"

    def test_entity_key_id_required(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(InviteToGroupRequest, {"Group": {"Type": "group"}, "Entity": {"Id": "P1"}})
        assert exc_info.value.path == "InviteToGroupRequest.Group.Id"


# =====================================================================
# Responses
# =====================================================================

class TestListGroupMembersResponse:
    def test_decode(self):
        response = decode(
            ListGroupMembersResponse,
            {"Members": [_role("admins", "Administrators", "P1")]},
        )
        role = response.members[0]
        assert isinstance(role, EntityMemberRole)
        assert role.role_id == "admins"
        assert role.members[0].key.id == "P1"
        assert role.members[0].lineage["master_player_account"].id == "m-P1"

    def test_role_order_not_significant(self):
        roles = [
            _role("r1", "Administrators", "P1"),
            _role("r2", "Members", "P2", "P3"),
            _role("r3", "Officers", "P4"),
        ]
        forward = decode(ListGroupMembersResponse, {"Members": roles})
        reverse = decode(ListGroupMembersResponse, {"Members": roles[::-1]})
        assert forward == reverse
        assert [r.role_id for r in reverse.members] == ["r3", "r2", "r1"]

    def test_member_order_within_role_not_significant(self):
        a = decode(ListGroupMembersResponse, {"Members": [_role("m", "Members", "P2", "P3")]})
        b = decode(ListGroupMembersResponse, {"Members": [_role("m", "Members", "P3", "P2")]})
        assert a == b

    def test_different_membership_not_equal(self):
        a = decode(ListGroupMembersResponse, {"Members": [_role("m", "Members", "P2")]})
        b = decode(ListGroupMembersResponse, {"Members": [_role("m", "Members", "P3")]})
        assert a != b

    def test_round_trip_keeps_order(self):
        wire = {
            "Members": [
                _role("members", "Members", "P2", "P3"),
                _role("admins", "Administrators", "P1"),
            ]
        }
        assert encode(decode(ListGroupMembersResponse, wire)) == wire


class TestGroupResponses:
    def test_get_group_round_trip(self):
        wire = {
            "AdminRoleId": "admins",
            "Created": "2023-05-01T10:00:00.000Z",
            "Group": GROUP,
            "GroupName": "Raiders",
            "MemberRoleId": "members",
            "ProfileVersion": 3,
            "Roles": {"admins": "Administrators", "members": "Members"},
        }
        response = decode(GetGroupResponse, wire)
        assert response.created == datetime(2023, 5, 1, 10, 0, tzinfo=timezone.utc)
        assert encode(response) == wire

    def test_create_group_response_profile_version_is_integer(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(CreateGroupResponse, {"ProfileVersion": "3"})
        assert exc_info.value.path == "CreateGroupResponse.ProfileVersion"

    def test_membership_roles_unordered(self):
        roles = [{"RoleId": "admins", "RoleName": "A"}, {"RoleId": "members", "RoleName": "M"}]
        a = decode(ListMembershipResponse, {"Groups": [{"Group": GROUP, "Roles": roles}]})
        b = decode(ListMembershipResponse, {"Groups": [{"Group": GROUP, "Roles": roles[::-1]}]})
        assert a == b
        assert isinstance(a.groups[0], GroupWithRoles)

    def test_set_result(self):
        assert decode(UpdateGroupResponse, {"SetResult": "Updated"}).set_result is OperationTypes.UPDATED

    def test_unknown_set_result_kept(self):
        response = decode(UpdateGroupResponse, {"SetResult": "Merged", "ProfileVersion": 4})
        assert response.set_result.is_unknown
        assert encode(response) == {"SetResult": "Merged", "ProfileVersion": 4}

    def test_empty_list_distinct_from_absent(self):
        assert encode(ListGroupBlocksResponse(blocked_entities=[])) == {"BlockedEntities": []}
        assert encode(ListGroupBlocksResponse()) == {}

    def test_entity_with_lineage_optional_parts(self):
        assert encode(EntityWithLineage()) == {}
