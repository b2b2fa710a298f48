"""Groups API models -- groups, roles, members, invitations, applications."""

from playfab_models.groups.models import (
    AcceptGroupApplicationRequest,
    AcceptGroupInvitationRequest,
    AddMembersRequest,
    ApplyToGroupRequest,
    ApplyToGroupResponse,
    BlockEntityRequest,
    ChangeMemberRoleRequest,
    CreateGroupRequest,
    CreateGroupResponse,
    CreateGroupRoleRequest,
    CreateGroupRoleResponse,
    DeleteGroupRequest,
    DeleteRoleRequest,
    EmptyResponse,
    EntityKey,
    EntityMemberRole,
    EntityWithLineage,
    GetGroupRequest,
    GetGroupResponse,
    GroupApplication,
    GroupBlock,
    GroupInvitation,
    GroupRole,
    GroupWithRoles,
    InviteToGroupRequest,
    InviteToGroupResponse,
    IsMemberRequest,
    IsMemberResponse,
    ListGroupApplicationsRequest,
    ListGroupApplicationsResponse,
    ListGroupBlocksRequest,
    ListGroupBlocksResponse,
    ListGroupInvitationsRequest,
    ListGroupInvitationsResponse,
    ListGroupMembersRequest,
    ListGroupMembersResponse,
    ListMembershipOpportunitiesRequest,
    ListMembershipOpportunitiesResponse,
    ListMembershipRequest,
    ListMembershipResponse,
    OperationTypes,
    RemoveGroupApplicationRequest,
    RemoveGroupInvitationRequest,
    RemoveMembersRequest,
    UnblockEntityRequest,
    UpdateGroupRequest,
    UpdateGroupResponse,
    UpdateGroupRoleRequest,
    UpdateGroupRoleResponse,
)

__all__ = [
    "AcceptGroupApplicationRequest",
    "AcceptGroupInvitationRequest",
    "AddMembersRequest",
    "ApplyToGroupRequest",
    "ApplyToGroupResponse",
    "BlockEntityRequest",
    "ChangeMemberRoleRequest",
    "CreateGroupRequest",
    "CreateGroupResponse",
    "CreateGroupRoleRequest",
    "CreateGroupRoleResponse",
    "DeleteGroupRequest",
    "DeleteRoleRequest",
    "EmptyResponse",
    "EntityKey",
    "EntityMemberRole",
    "EntityWithLineage",
    "GetGroupRequest",
    "GetGroupResponse",
    "GroupApplication",
    "GroupBlock",
    "GroupInvitation",
    "GroupRole",
    "GroupWithRoles",
    "InviteToGroupRequest",
    "InviteToGroupResponse",
    "IsMemberRequest",
    "IsMemberResponse",
    "ListGroupApplicationsRequest",
    "ListGroupApplicationsResponse",
    "ListGroupBlocksRequest",
    "ListGroupBlocksResponse",
    "ListGroupInvitationsRequest",
    "ListGroupInvitationsResponse",
    "ListGroupMembersRequest",
    "ListGroupMembersResponse",
    "ListMembershipOpportunitiesRequest",
    "ListMembershipOpportunitiesResponse",
    "ListMembershipRequest",
    "ListMembershipResponse",
    "OperationTypes",
    "RemoveGroupApplicationRequest",
    "RemoveGroupInvitationRequest",
    "RemoveMembersRequest",
    "UnblockEntityRequest",
    "UpdateGroupRequest",
    "UpdateGroupResponse",
    "UpdateGroupRoleRequest",
    "UpdateGroupRoleResponse",
]
