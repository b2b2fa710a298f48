"""Player profiles, tags, segments and account information."""

from __future__ import annotations

from pydantic import Field

from playfab_models.admin.common import EntityKey
from playfab_models.admin.geo import ContinentCode, CountryCode, Currency
from playfab_models.wire import (
    Boolean,
    Double,
    Integer,
    String,
    Timestamp,
    WireEnum,
    WireModel,
)


class LoginIdentityProvider(WireEnum):
    UNKNOWN = "Unknown"
    PLAY_FAB = "PlayFab"
    CUSTOM = "Custom"
    GAME_CENTER = "GameCenter"
    GOOGLE_PLAY = "GooglePlay"
    STEAM = "Steam"
    X_BOX_LIVE = "XBoxLive"
    PSN = "PSN"
    KONGREGATE = "Kongregate"
    FACEBOOK = "Facebook"
    IOS_DEVICE = "IOSDevice"
    ANDROID_DEVICE = "AndroidDevice"
    TWITCH = "Twitch"
    WINDOWS_HELLO = "WindowsHello"


class UserOrigination(WireEnum):
    ORGANIC = "Organic"
    STEAM = "Steam"
    GOOGLE = "Google"
    AMAZON = "Amazon"
    FACEBOOK = "Facebook"
    KONGREGATE = "Kongregate"
    GAMERS_FIRST = "GamersFirst"
    UNKNOWN = "Unknown"
    IOS = "IOS"
    LOAD_TEST = "LoadTest"
    ANDROID = "Android"
    PSN = "PSN"
    GAME_CENTER = "GameCenter"
    CUSTOM_ID = "CustomId"
    XBOX_LIVE = "XboxLive"
    PARSE = "Parse"
    TWITCH = "Twitch"
    WINDOWS_HELLO = "WindowsHello"


class EmailVerificationStatus(WireEnum):
    UNVERIFIED = "Unverified"
    PENDING = "Pending"
    CONFIRMED = "Confirmed"


class PushNotificationPlatform(WireEnum):
    APPLE_PUSH_NOTIFICATION_SERVICE = "ApplePushNotificationService"
    GOOGLE_CLOUD_MESSAGING = "GoogleCloudMessaging"


class SubscriptionProviderStatus(WireEnum):
    NO_ERROR = "NoError"
    CANCELLED = "Cancelled"
    UNKNOWN_ERROR = "UnknownError"
    BILLING_ERROR = "BillingError"
    PRODUCT_UNAVAILABLE = "ProductUnavailable"
    CUSTOMER_DID_NOT_ACCEPT_PRICE_CHANGE = "CustomerDidNotAcceptPriceChange"
    FREE_TRIAL = "FreeTrial"
    PAYMENT_PENDING = "PaymentPending"


class TitleActivationStatus(WireEnum):
    NONE = "None"
    ACTIVATED_TITLE_KEY = "ActivatedTitleKey"
    PENDING_STEAM = "PendingSteam"
    ACTIVATED_STEAM = "ActivatedSteam"
    REVOKED_STEAM = "RevokedSteam"


class AuthTokenType(WireEnum):
    EMAIL = "Email"


# =====================================================================
# Profile parts
# =====================================================================


class AdCampaignAttribution(WireModel):
    attributed_at: Timestamp | None = None
    campaign_id: String | None = None
    platform: String | None = None


class ContactEmailInfo(WireModel):
    email_address: String | None = None
    name: String | None = None
    verification_status: EmailVerificationStatus | None = None


class PlayerLinkedAccount(WireModel):
    email: String | None = None
    platform: LoginIdentityProvider | None = None
    platform_user_id: String | None = None
    username: String | None = None


class PlayerLocation(WireModel):
    city: String | None = None
    continent_code: ContinentCode | None = None
    country_code: CountryCode | None = None
    latitude: Double | None = None
    longitude: Double | None = None


class PlayerStatistic(WireModel):
    id: String | None = None
    name: String | None = None
    statistic_value: Integer | None = None
    statistic_version: Integer | None = None


class PushNotificationRegistration(WireModel):
    notification_endpoint_arn: String | None = Field(
        default=None, alias="NotificationEndpointARN"
    )
    platform: PushNotificationPlatform | None = None


class PlayerProfile(WireModel):
    """A player as listed in a segment."""

    ad_campaign_attributions: list[AdCampaignAttribution] | None = None
    avatar_url: String | None = None
    banned_until: Timestamp | None = None
    contact_email_addresses: list[ContactEmailInfo] | None = None
    created: Timestamp | None = None
    display_name: String | None = None
    last_login: Timestamp | None = None
    linked_accounts: list[PlayerLinkedAccount] | None = None
    locations: dict[str, PlayerLocation] | None = None
    origination: LoginIdentityProvider | None = None
    player_id: String | None = None
    player_statistics: list[PlayerStatistic] | None = None
    publisher_id: String | None = None
    push_notification_registrations: list[PushNotificationRegistration] | None = None
    statistics: dict[str, Integer] | None = None
    tags: list[String] | None = None
    title_id: String | None = None
    total_value_to_date_in_usd: Integer | None = Field(
        default=None, alias="TotalValueToDateInUSD"
    )
    """Sum of real-money purchases, in US cents."""

    values_to_date: dict[str, Integer] | None = None
    virtual_currency_balances: dict[str, Integer] | None = None


# -- the profile "model" shapes returned by GetPlayerProfile ------------


class AdCampaignAttributionModel(WireModel):
    attributed_at: Timestamp | None = None
    campaign_id: String | None = None
    platform: String | None = None


class ContactEmailInfoModel(WireModel):
    email_address: String | None = None
    name: String | None = None
    verification_status: EmailVerificationStatus | None = None


class LinkedPlatformAccountModel(WireModel):
    email: String | None = None
    platform: LoginIdentityProvider | None = None
    platform_user_id: String | None = None
    username: String | None = None


class LocationModel(WireModel):
    city: String | None = None
    continent_code: ContinentCode | None = None
    country_code: CountryCode | None = None
    latitude: Double | None = None
    longitude: Double | None = None


class SubscriptionModel(WireModel):
    expiration: Timestamp | None = None
    initial_subscription_time: Timestamp | None = None
    is_active: Boolean | None = None
    status: SubscriptionProviderStatus | None = None
    subscription_id: String | None = None
    subscription_item_id: String | None = None
    subscription_provider: String | None = None


class MembershipModel(WireModel):
    is_active: Boolean | None = None
    membership_expiration: Timestamp | None = None
    membership_id: String | None = None
    override_expiration: Timestamp | None = None
    """Overrides ``membership_expiration`` while set."""

    subscriptions: list[SubscriptionModel] | None = None


class PushNotificationRegistrationModel(WireModel):
    notification_endpoint_arn: String | None = Field(
        default=None, alias="NotificationEndpointARN"
    )
    platform: PushNotificationPlatform | None = None


class StatisticModel(WireModel):
    name: String | None = None
    value: Integer | None = None
    version: Integer | None = None


class TagModel(WireModel):
    tag_value: String | None = None


class ValueToDateModel(WireModel):
    currency: String | None = None
    total_value: Integer | None = None
    """In the currency's smallest unit (cents, yen ...)."""

    total_value_as_decimal: String | None = None


class PlayerProfileModel(WireModel):
    ad_campaign_attributions: list[AdCampaignAttributionModel] | None = None
    avatar_url: String | None = None
    banned_until: Timestamp | None = None
    contact_email_addresses: list[ContactEmailInfoModel] | None = None
    created: Timestamp | None = None
    display_name: String | None = None
    last_login: Timestamp | None = None
    linked_accounts: list[LinkedPlatformAccountModel] | None = None
    locations: list[LocationModel] | None = None
    memberships: list[MembershipModel] | None = None
    origination: LoginIdentityProvider | None = None
    player_id: String | None = None
    publisher_id: String | None = None
    push_notification_registrations: list[PushNotificationRegistrationModel] | None = None
    statistics: list[StatisticModel] | None = None
    tags: list[TagModel] | None = None
    title_id: String | None = None
    total_value_to_date_in_usd: Integer | None = Field(
        default=None, alias="TotalValueToDateInUSD"
    )
    values_to_date: list[ValueToDateModel] | None = None


class PlayerProfileViewConstraints(WireModel):
    """Which optional parts of a profile to return; every flag defaults off."""

    show_avatar_url: Boolean | None = None
    show_banned_until: Boolean | None = None
    show_campaign_attributions: Boolean | None = None
    show_contact_email_addresses: Boolean | None = None
    show_created: Boolean | None = None
    show_display_name: Boolean | None = None
    show_last_login: Boolean | None = None
    show_linked_accounts: Boolean | None = None
    show_locations: Boolean | None = None
    show_memberships: Boolean | None = None
    show_origination: Boolean | None = None
    show_push_notification_registrations: Boolean | None = None
    show_statistics: Boolean | None = None
    show_tags: Boolean | None = None
    show_total_value_to_date_in_usd: Boolean | None = None
    show_values_to_date: Boolean | None = None


class GetPlayerProfileRequest(WireModel):
    play_fab_id: String
    profile_constraints: PlayerProfileViewConstraints | None = None


class GetPlayerProfileResult(WireModel):
    player_profile: PlayerProfileModel | None = None


# =====================================================================
# Segments & tags
# =====================================================================


class GetSegmentResult(WireModel):
    ab_test_parent: String | None = Field(default=None, alias="ABTestParent")
    id: String
    name: String | None = None


class GetAllSegmentsRequest(WireModel):
    pass


class GetAllSegmentsResult(WireModel):
    segments: list[GetSegmentResult] | None = None


class GetPlayersSegmentsRequest(WireModel):
    play_fab_id: String


class GetPlayerSegmentsResult(WireModel):
    segments: list[GetSegmentResult] | None = None


class GetPlayersInSegmentRequest(WireModel):
    continuation_token: String | None = None
    max_batch_size: Integer | None = None
    seconds_to_live: Integer | None = None
    """Lifetime of the continuation token."""

    segment_id: String


class GetPlayersInSegmentResult(WireModel):
    continuation_token: String | None = None
    player_profiles: list[PlayerProfile] | None = None
    profiles_in_segment: Integer | None = None


class AddPlayerTagRequest(WireModel):
    play_fab_id: String
    tag_name: String


class AddPlayerTagResult(WireModel):
    pass


class RemovePlayerTagRequest(WireModel):
    play_fab_id: String
    tag_name: String


class RemovePlayerTagResult(WireModel):
    pass


class GetPlayerTagsRequest(WireModel):
    namespace: String | None = None
    """Only return tags in this namespace."""

    play_fab_id: String


class GetPlayerTagsResult(WireModel):
    play_fab_id: String | None = None
    tags: list[String] | None = None


# =====================================================================
# Account information
# =====================================================================


class UserAndroidDeviceInfo(WireModel):
    android_device_id: String | None = None


class UserCustomIdInfo(WireModel):
    custom_id: String | None = None


class UserFacebookInfo(WireModel):
    facebook_id: String | None = None
    full_name: String | None = None


class UserGameCenterInfo(WireModel):
    game_center_id: String | None = None


class UserGoogleInfo(WireModel):
    google_email: String | None = None
    google_gender: String | None = None
    google_id: String | None = None
    google_locale: String | None = None


class UserIosDeviceInfo(WireModel):
    ios_device_id: String | None = None


class UserKongregateInfo(WireModel):
    kongregate_id: String | None = None
    kongregate_name: String | None = None


class UserPrivateAccountInfo(WireModel):
    email: String | None = None


class UserPsnInfo(WireModel):
    psn_account_id: String | None = None
    psn_online_id: String | None = None


class UserSteamInfo(WireModel):
    steam_activation_status: TitleActivationStatus | None = None
    steam_country: String | None = None
    steam_currency: Currency | None = None
    steam_id: String | None = None


class UserTitleInfo(WireModel):
    avatar_url: String | None = None
    created: Timestamp | None = None
    display_name: String | None = None
    first_login: Timestamp | None = None
    is_banned: Boolean | None = Field(default=None, alias="isBanned")
    last_login: Timestamp | None = None
    origination: UserOrigination | None = None
    title_player_account: EntityKey | None = None


class UserTwitchInfo(WireModel):
    twitch_id: String | None = None
    twitch_user_name: String | None = None


class UserXboxInfo(WireModel):
    xbox_user_id: String | None = None


class UserAccountInfo(WireModel):
    android_device_info: UserAndroidDeviceInfo | None = None
    created: Timestamp | None = None
    custom_id_info: UserCustomIdInfo | None = None
    facebook_info: UserFacebookInfo | None = None
    game_center_info: UserGameCenterInfo | None = None
    google_info: UserGoogleInfo | None = None
    ios_device_info: UserIosDeviceInfo | None = None
    kongregate_info: UserKongregateInfo | None = None
    play_fab_id: String | None = None
    private_info: UserPrivateAccountInfo | None = None
    psn_info: UserPsnInfo | None = None
    steam_info: UserSteamInfo | None = None
    title_info: UserTitleInfo | None = None
    twitch_info: UserTwitchInfo | None = None
    username: String | None = None
    xbox_info: UserXboxInfo | None = None


class LookupUserAccountInfoRequest(WireModel):
    """Look an account up by any one of the four identifiers."""

    email: String | None = None
    play_fab_id: String | None = None
    title_display_name: String | None = None
    username: String | None = None


class LookupUserAccountInfoResult(WireModel):
    user_info: UserAccountInfo | None = None


class UpdateUserTitleDisplayNameRequest(WireModel):
    display_name: String
    play_fab_id: String


class UpdateUserTitleDisplayNameResult(WireModel):
    display_name: String | None = None


class GetPlayedTitleListRequest(WireModel):
    play_fab_id: String


class GetPlayedTitleListResult(WireModel):
    title_ids: list[String] | None = None


class GetPlayerIdFromAuthTokenRequest(WireModel):
    token: String
    token_type: AuthTokenType


class GetPlayerIdFromAuthTokenResult(WireModel):
    play_fab_id: String | None = None


# =====================================================================
# Account lifecycle
# =====================================================================


class DeletePlayerRequest(WireModel):
    play_fab_id: String


class DeletePlayerResult(WireModel):
    pass


class DeleteMasterPlayerAccountRequest(WireModel):
    play_fab_id: String


class DeleteMasterPlayerAccountResult(WireModel):
    job_receipt_id: String | None = None
    title_ids: list[String] | None = None
    """Titles the player had data in."""


class ExportMasterPlayerDataRequest(WireModel):
    play_fab_id: String


class ExportMasterPlayerDataResult(WireModel):
    job_receipt_id: String | None = None


class ResetPasswordRequest(WireModel):
    password: String
    token: String
    """The token from the account recovery email."""


class ResetPasswordResult(WireModel):
    pass


class SendAccountRecoveryEmailRequest(WireModel):
    email: String
    email_template_id: String | None = None


class SendAccountRecoveryEmailResult(WireModel):
    pass


class SetPlayerSecretRequest(WireModel):
    player_secret: String
    play_fab_id: String


class SetPlayerSecretResult(WireModel):
    pass
