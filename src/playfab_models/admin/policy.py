"""API policies, player shared secrets, push notification setup, and title
deletion."""

from __future__ import annotations

from pydantic import Field

from playfab_models.wire import Boolean, String, WireEnum, WireModel


class Conditionals(WireEnum):
    ANY = "Any"
    TRUE = "True"
    FALSE = "False"


class EffectType(WireEnum):
    ALLOW = "Allow"
    DENY = "Deny"


class PushSetupPlatform(WireEnum):
    GCM = "GCM"
    APNS = "APNS"
    APNS_SANDBOX = "APNS_SANDBOX"


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class ApiCondition(WireModel):
    has_signature_or_encryption: Conditionals | None = None


class PermissionStatement(WireModel):
    """One allow/deny rule of an API policy."""

    action: String
    """The API action, e.g. ``*`` or ``/Client/ConfirmPurchase``."""

    api_conditions: ApiCondition | None = None
    comment: String | None = None
    effect: EffectType
    principal: String
    resource: String


class GetPolicyRequest(WireModel):
    policy_name: String | None = None


class GetPolicyResponse(WireModel):
    policy_name: String | None = None
    statements: list[PermissionStatement] | None = None


class UpdatePolicyRequest(WireModel):
    overwrite_policy: Boolean
    """Replace the whole policy instead of appending to it."""

    policy_name: String
    statements: list[PermissionStatement]


class UpdatePolicyResponse(WireModel):
    policy_name: String | None = None
    statements: list[PermissionStatement] | None = None


# ---------------------------------------------------------------------------
# Player shared secrets
# ---------------------------------------------------------------------------


class SharedSecret(WireModel):
    disabled: Boolean | None = None
    friendly_name: String | None = None
    secret_key: String | None = None


class CreatePlayerSharedSecretRequest(WireModel):
    friendly_name: String | None = None


class CreatePlayerSharedSecretResult(WireModel):
    secret_key: String | None = None


class DeletePlayerSharedSecretRequest(WireModel):
    secret_key: String | None = None


class DeletePlayerSharedSecretResult(WireModel):
    pass


class GetPlayerSharedSecretsRequest(WireModel):
    pass


class GetPlayerSharedSecretsResult(WireModel):
    shared_secrets: list[SharedSecret] | None = None


class UpdatePlayerSharedSecretRequest(WireModel):
    disabled: Boolean | None = None
    friendly_name: String | None = None
    secret_key: String | None = None


class UpdatePlayerSharedSecretResult(WireModel):
    pass


# ---------------------------------------------------------------------------
# Push notifications
# ---------------------------------------------------------------------------


class SetupPushNotificationRequest(WireModel):
    credential: String
    """Platform credential: the APNS private key, or the GCM API key."""

    key: String | None = None
    name: String
    overwrite_old_arn: Boolean = Field(alias="OverwriteOldARN")
    platform: PushSetupPlatform


class SetupPushNotificationResult(WireModel):
    arn: String | None = Field(default=None, alias="ARN")


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


class DeleteTitleRequest(WireModel):
    pass


class DeleteTitleResult(WireModel):
    pass
