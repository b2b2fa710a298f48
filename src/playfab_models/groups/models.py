"""Groups API -- entity groups, their roles, members, invitations and
applications.

Every request optionally carries ``custom_tags`` (free-form string tags
such as a build number or trace id); the service echoes nothing back for
them.
"""

from __future__ import annotations

from typing import Annotated

from playfab_models.wire import (
    Boolean,
    Integer,
    String,
    Timestamp,
    Unordered,
    WireEnum,
    WireModel,
)


class OperationTypes(WireEnum):
    """What an update did to the stored group or role."""

    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
    NONE = "None"


# =====================================================================
# Value types
# =====================================================================


class EntityKey(WireModel):
    """Identifies an entity: a player account, character, group, title ..."""

    id: String
    """Unique id of the entity."""

    type: String | None = None
    """Entity type, e.g. ``title_player_account`` or ``group``."""


class EntityWithLineage(WireModel):
    """An entity together with the keys of its parent entities."""

    key: EntityKey | None = None
    lineage: dict[str, EntityKey] | None = None
    """Parent entity keys, indexed by entity type."""


class EntityMemberRole(WireModel):
    members: Annotated[list[EntityWithLineage], Unordered()] | None = None
    role_id: String | None = None
    role_name: String | None = None


class GroupRole(WireModel):
    role_id: String | None = None
    role_name: String | None = None


class GroupWithRoles(WireModel):
    """A group and the roles the requesting entity holds in it."""

    group: EntityKey | None = None
    group_name: String | None = None
    profile_version: Integer | None = None
    roles: Annotated[list[GroupRole], Unordered(key="role_id")] | None = None


class GroupApplication(WireModel):
    entity: EntityWithLineage | None = None
    expires: Timestamp | None = None
    group: EntityKey | None = None


class GroupBlock(WireModel):
    entity: EntityWithLineage | None = None
    group: EntityKey | None = None


class GroupInvitation(WireModel):
    expires: Timestamp | None = None
    group: EntityKey | None = None
    invited_by_entity: EntityWithLineage | None = None
    invited_entity: EntityWithLineage | None = None
    role_id: String | None = None


class EmptyResponse(WireModel):
    """Returned by calls that report success with no data."""


# =====================================================================
# Applications & invitations
# =====================================================================


class AcceptGroupApplicationRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    """The applicant to accept."""

    group: EntityKey


class AcceptGroupInvitationRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey | None = None
    """Defaults to the currently logged in entity."""

    group: EntityKey


class ApplyToGroupRequest(WireModel):
    auto_accept_outstanding_invite: Boolean | None = None
    """Service default is True: accept a pending invitation instead of applying."""

    custom_tags: dict[str, String] | None = None
    entity: EntityKey | None = None
    group: EntityKey


class ApplyToGroupResponse(WireModel):
    entity: EntityWithLineage | None = None
    expires: Timestamp | None = None
    group: EntityKey | None = None


class InviteToGroupRequest(WireModel):
    auto_accept_outstanding_application: Boolean | None = None
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey
    role_id: String | None = None
    """Role to join as; the group's default member role if absent."""


class InviteToGroupResponse(WireModel):
    expires: Timestamp | None = None
    group: EntityKey | None = None
    invited_by_entity: EntityWithLineage | None = None
    invited_entity: EntityWithLineage | None = None
    role_id: String | None = None


class ListGroupApplicationsRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey


class ListGroupApplicationsResponse(WireModel):
    applications: list[GroupApplication] | None = None


class ListGroupInvitationsRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey


class ListGroupInvitationsResponse(WireModel):
    invitations: list[GroupInvitation] | None = None


class ListMembershipOpportunitiesRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey | None = None


class ListMembershipOpportunitiesResponse(WireModel):
    applications: list[GroupApplication] | None = None
    invitations: list[GroupInvitation] | None = None


class RemoveGroupApplicationRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey


class RemoveGroupInvitationRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey


# =====================================================================
# Blocks
# =====================================================================


class BlockEntityRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey


class UnblockEntityRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey


class ListGroupBlocksRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey


class ListGroupBlocksResponse(WireModel):
    blocked_entities: list[GroupBlock] | None = None


# =====================================================================
# Groups
# =====================================================================


class CreateGroupRequest(WireModel):
    """Creates a group with admin and member roles from the title's template."""

    custom_tags: dict[str, String] | None = None
    entity: EntityKey | None = None
    group_name: String
    """Unique at the title level by default."""


class CreateGroupResponse(WireModel):
    admin_role_id: String | None = None
    created: Timestamp | None = None
    group: EntityKey | None = None
    group_name: String | None = None
    member_role_id: String | None = None
    profile_version: Integer | None = None
    roles: dict[str, String] | None = None
    """Role names, indexed by role id."""


class DeleteGroupRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey


class GetGroupRequest(WireModel):
    """Look a group up by key or by name; one of the two is needed."""

    custom_tags: dict[str, String] | None = None
    group: EntityKey | None = None
    group_name: String | None = None


class GetGroupResponse(WireModel):
    admin_role_id: String | None = None
    created: Timestamp | None = None
    group: EntityKey | None = None
    group_name: String | None = None
    member_role_id: String | None = None
    profile_version: Integer | None = None
    roles: dict[str, String] | None = None


class UpdateGroupRequest(WireModel):
    admin_role_id: String | None = None
    custom_tags: dict[str, String] | None = None
    expected_profile_version: Integer | None = None
    """Optimistic concurrency check; the update fails if the stored
    version differs."""

    group: EntityKey
    group_name: String | None = None
    member_role_id: String | None = None


class UpdateGroupResponse(WireModel):
    operation_reason: String | None = None
    profile_version: Integer | None = None
    set_result: OperationTypes | None = None


class ListMembershipRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey | None = None


class ListMembershipResponse(WireModel):
    groups: list[GroupWithRoles] | None = None


# =====================================================================
# Roles & members
# =====================================================================


class CreateGroupRoleRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey
    role_id: String
    """1 to 64 characters, unique within the group."""

    role_name: String


class CreateGroupRoleResponse(WireModel):
    profile_version: Integer | None = None
    role_id: String | None = None
    role_name: String | None = None


class DeleteRoleRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey
    role_id: String | None = None


class UpdateGroupRoleRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    expected_profile_version: Integer | None = None
    group: EntityKey
    role_id: String | None = None
    role_name: String


class UpdateGroupRoleResponse(WireModel):
    operation_reason: String | None = None
    profile_version: Integer | None = None
    set_result: OperationTypes | None = None


class AddMembersRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey
    members: list[EntityKey]
    role_id: String | None = None
    """Role to add the members to; the default member role if absent."""


class RemoveMembersRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey
    members: list[EntityKey]
    role_id: String | None = None


class ChangeMemberRoleRequest(WireModel):
    """Moves members from one role to another in a single operation."""

    custom_tags: dict[str, String] | None = None
    destination_role_id: String | None = None
    group: EntityKey
    members: list[EntityKey]
    origin_role_id: String


class IsMemberRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    entity: EntityKey
    group: EntityKey
    role_id: String | None = None
    """Check one role only; any role if absent."""


class IsMemberResponse(WireModel):
    is_member: Boolean | None = None


class ListGroupMembersRequest(WireModel):
    custom_tags: dict[str, String] | None = None
    group: EntityKey


class ListGroupMembersResponse(WireModel):
    members: Annotated[list[EntityMemberRole], Unordered(key="role_id")] | None = None
    """Members grouped by role; the order of the roles is not significant."""
