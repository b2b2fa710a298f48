"""Error codes the service reports per item in batch operations."""

from __future__ import annotations

from playfab_models.wire import WireEnum


class GenericErrorCodes(WireEnum):
    """Every error code the service may return.

    Member names are the upper-snake form of the wire symbol; the symbol
    itself keeps the service's spelling, typos included (``UnkownError``).
    """

    SUCCESS = "Success"
    MATCHMAKING_HOPPER_ID_INVALID = "MatchmakingHopperIdInvalid"
    UNKOWN_ERROR = "UnkownError"
    INVALID_PARAMS = "InvalidParams"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    ACCOUNT_BANNED = "AccountBanned"
    INVALID_USERNAME_OR_PASSWORD = "InvalidUsernameOrPassword"
    INVALID_TITLE_ID = "InvalidTitleId"
    INVALID_EMAIL_ADDRESS = "InvalidEmailAddress"
    EMAIL_ADDRESS_NOT_AVAILABLE = "EmailAddressNotAvailable"
    INVALID_USERNAME = "InvalidUsername"
    INVALID_PASSWORD = "InvalidPassword"
    USERNAME_NOT_AVAILABLE = "UsernameNotAvailable"
    INVALID_STEAM_TICKET = "InvalidSteamTicket"
    ACCOUNT_ALREADY_LINKED = "AccountAlreadyLinked"
    LINKED_ACCOUNT_ALREADY_CLAIMED = "LinkedAccountAlreadyClaimed"
    INVALID_FACEBOOK_TOKEN = "InvalidFacebookToken"
    ACCOUNT_NOT_LINKED = "AccountNotLinked"
    FAILED_BY_PAYMENT_PROVIDER = "FailedByPaymentProvider"
    COUPON_CODE_NOT_FOUND = "CouponCodeNotFound"
    INVALID_CONTAINER_ITEM = "InvalidContainerItem"
    CONTAINER_NOT_OWNED = "ContainerNotOwned"
    KEY_NOT_OWNED = "KeyNotOwned"
    INVALID_ITEM_ID_IN_TABLE = "InvalidItemIdInTable"
    INVALID_RECEIPT = "InvalidReceipt"
    RECEIPT_ALREADY_USED = "ReceiptAlreadyUsed"
    RECEIPT_CANCELLED = "ReceiptCancelled"
    GAME_NOT_FOUND = "GameNotFound"
    GAME_MODE_NOT_FOUND = "GameModeNotFound"
    INVALID_GOOGLE_TOKEN = "InvalidGoogleToken"
    USER_IS_NOT_PART_OF_DEVELOPER = "UserIsNotPartOfDeveloper"
    INVALID_TITLE_FOR_DEVELOPER = "InvalidTitleForDeveloper"
    TITLE_NAME_CONFLICTS = "TitleNameConflicts"
    USERIS_NOT_VALID = "UserisNotValid"
    VALUE_ALREADY_EXISTS = "ValueAlreadyExists"
    BUILD_NOT_FOUND = "BuildNotFound"
    PLAYER_NOT_IN_GAME = "PlayerNotInGame"
    INVALID_TICKET = "InvalidTicket"
    INVALID_DEVELOPER = "InvalidDeveloper"
    INVALID_ORDER_INFO = "InvalidOrderInfo"
    REGISTRATION_INCOMPLETE = "RegistrationIncomplete"
    INVALID_PLATFORM = "InvalidPlatform"
    UNKNOWN_ERROR = "UnknownError"
    STEAM_APPLICATION_NOT_OWNED = "SteamApplicationNotOwned"
    WRONG_STEAM_ACCOUNT = "WrongSteamAccount"
    TITLE_NOT_ACTIVATED = "TitleNotActivated"
    REGISTRATION_SESSION_NOT_FOUND = "RegistrationSessionNotFound"
    NO_SUCH_MOD = "NoSuchMod"
    FILE_NOT_FOUND = "FileNotFound"
    DUPLICATE_EMAIL = "DuplicateEmail"
    ITEM_NOT_FOUND = "ItemNotFound"
    ITEM_NOT_OWNED = "ItemNotOwned"
    ITEM_NOT_RECYCLEABLE = "ItemNotRecycleable"
    ITEM_NOT_AFFORDABLE = "ItemNotAffordable"
    INVALID_VIRTUAL_CURRENCY = "InvalidVirtualCurrency"
    WRONG_VIRTUAL_CURRENCY = "WrongVirtualCurrency"
    WRONG_PRICE = "WrongPrice"
    NON_POSITIVE_VALUE = "NonPositiveValue"
    INVALID_REGION = "InvalidRegion"
    REGION_AT_CAPACITY = "RegionAtCapacity"
    SERVER_FAILED_TO_START = "ServerFailedToStart"
    NAME_NOT_AVAILABLE = "NameNotAvailable"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INVALID_DEVICE_ID = "InvalidDeviceID"
    INVALID_PUSH_NOTIFICATION_TOKEN = "InvalidPushNotificationToken"
    NO_REMAINING_USES = "NoRemainingUses"
    INVALID_PAYMENT_PROVIDER = "InvalidPaymentProvider"
    PURCHASE_INITIALIZATION_FAILURE = "PurchaseInitializationFailure"
    DUPLICATE_USERNAME = "DuplicateUsername"
    INVALID_BUYER_INFO = "InvalidBuyerInfo"
    NO_GAME_MODE_PARAMS_SET = "NoGameModeParamsSet"
    BODY_TOO_LARGE = "BodyTooLarge"
    RESERVED_WORD_IN_BODY = "ReservedWordInBody"
    INVALID_TYPE_IN_BODY = "InvalidTypeInBody"
    INVALID_REQUEST = "InvalidRequest"
    RESERVED_EVENT_NAME = "ReservedEventName"
    INVALID_USER_STATISTICS = "InvalidUserStatistics"
    NOT_AUTHENTICATED = "NotAuthenticated"
    STREAM_ALREADY_EXISTS = "StreamAlreadyExists"
    ERROR_CREATING_STREAM = "ErrorCreatingStream"
    STREAM_NOT_FOUND = "StreamNotFound"
    INVALID_ACCOUNT = "InvalidAccount"
    PURCHASE_DOES_NOT_EXIST = "PurchaseDoesNotExist"
    INVALID_PURCHASE_TRANSACTION_STATUS = "InvalidPurchaseTransactionStatus"
    API_NOT_ENABLED_FOR_GAME_CLIENT_ACCESS = "APINotEnabledForGameClientAccess"
    NO_PUSH_NOTIFICATION_ARN_FOR_TITLE = "NoPushNotificationARNForTitle"
    BUILD_ALREADY_EXISTS = "BuildAlreadyExists"
    BUILD_PACKAGE_DOES_NOT_EXIST = "BuildPackageDoesNotExist"
    CUSTOM_ANALYTICS_EVENTS_NOT_ENABLED_FOR_TITLE = "CustomAnalyticsEventsNotEnabledForTitle"
    INVALID_SHARED_GROUP_ID = "InvalidSharedGroupId"
    NOT_AUTHORIZED = "NotAuthorized"
    MISSING_TITLE_GOOGLE_PROPERTIES = "MissingTitleGoogleProperties"
    INVALID_ITEM_PROPERTIES = "InvalidItemProperties"
    INVALID_PSN_AUTH_CODE = "InvalidPSNAuthCode"
    INVALID_ITEM_ID = "InvalidItemId"
    PUSH_NOT_ENABLED_FOR_ACCOUNT = "PushNotEnabledForAccount"
    PUSH_SERVICE_ERROR = "PushServiceError"
    RECEIPT_DOES_NOT_CONTAIN_IN_APP_ITEMS = "ReceiptDoesNotContainInAppItems"
    RECEIPT_CONTAINS_MULTIPLE_IN_APP_ITEMS = "ReceiptContainsMultipleInAppItems"
    INVALID_BUNDLE_ID = "InvalidBundleID"
    JAVASCRIPT_EXCEPTION = "JavascriptException"
    INVALID_SESSION_TICKET = "InvalidSessionTicket"
    UNABLE_TO_CONNECT_TO_DATABASE = "UnableToConnectToDatabase"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    INVALID_REPORT_DATE = "InvalidReportDate"
    REPORT_NOT_AVAILABLE = "ReportNotAvailable"
    DATABASE_THROUGHPUT_EXCEEDED = "DatabaseThroughputExceeded"
    INVALID_GAME_TICKET = "InvalidGameTicket"
    EXPIRED_GAME_TICKET = "ExpiredGameTicket"
    GAME_TICKET_DOES_NOT_MATCH_LOBBY = "GameTicketDoesNotMatchLobby"
    LINKED_DEVICE_ALREADY_CLAIMED = "LinkedDeviceAlreadyClaimed"
    DEVICE_ALREADY_LINKED = "DeviceAlreadyLinked"
    DEVICE_NOT_LINKED = "DeviceNotLinked"
    PARTIAL_FAILURE = "PartialFailure"
    PUBLISHER_NOT_SET = "PublisherNotSet"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    VERSION_NOT_FOUND = "VersionNotFound"
    REVISION_NOT_FOUND = "RevisionNotFound"
    INVALID_PUBLISHER_ID = "InvalidPublisherId"
    DOWNSTREAM_SERVICE_UNAVAILABLE = "DownstreamServiceUnavailable"
    API_NOT_INCLUDED_IN_TITLE_USAGE_TIER = "APINotIncludedInTitleUsageTier"
    DAU_LIMIT_EXCEEDED = "DAULimitExceeded"
    API_REQUEST_LIMIT_EXCEEDED = "APIRequestLimitExceeded"
    INVALID_API_ENDPOINT = "InvalidAPIEndpoint"
    BUILD_NOT_AVAILABLE = "BuildNotAvailable"
    CONCURRENT_EDIT_ERROR = "ConcurrentEditError"
    CONTENT_NOT_FOUND = "ContentNotFound"
    CHARACTER_NOT_FOUND = "CharacterNotFound"
    CLOUD_SCRIPT_NOT_FOUND = "CloudScriptNotFound"
    CONTENT_QUOTA_EXCEEDED = "ContentQuotaExceeded"
    INVALID_CHARACTER_STATISTICS = "InvalidCharacterStatistics"
    PHOTON_NOT_ENABLED_FOR_TITLE = "PhotonNotEnabledForTitle"
    PHOTON_APPLICATION_NOT_FOUND = "PhotonApplicationNotFound"
    PHOTON_APPLICATION_NOT_ASSOCIATED_WITH_TITLE = "PhotonApplicationNotAssociatedWithTitle"
    INVALID_EMAIL_OR_PASSWORD = "InvalidEmailOrPassword"
    FACEBOOK_API_ERROR = "FacebookAPIError"
    INVALID_CONTENT_TYPE = "InvalidContentType"
    KEY_LENGTH_EXCEEDED = "KeyLengthExceeded"
    DATA_LENGTH_EXCEEDED = "DataLengthExceeded"
    TOO_MANY_KEYS = "TooManyKeys"
    FREE_TIER_CANNOT_HAVE_VIRTUAL_CURRENCY = "FreeTierCannotHaveVirtualCurrency"
    MISSING_AMAZON_SHARED_KEY = "MissingAmazonSharedKey"
    AMAZON_VALIDATION_ERROR = "AmazonValidationError"
    INVALID_PSN_ISSUER_ID = "InvalidPSNIssuerId"
    PSN_INACCESSIBLE = "PSNInaccessible"
    EXPIRED_AUTH_TOKEN = "ExpiredAuthToken"
    FAILED_TO_GET_ENTITLEMENTS = "FailedToGetEntitlements"
    FAILED_TO_CONSUME_ENTITLEMENT = "FailedToConsumeEntitlement"
    TRADE_ACCEPTING_USER_NOT_ALLOWED = "TradeAcceptingUserNotAllowed"
    TRADE_INVENTORY_ITEM_IS_ASSIGNED_TO_CHARACTER = "TradeInventoryItemIsAssignedToCharacter"
    TRADE_INVENTORY_ITEM_IS_BUNDLE = "TradeInventoryItemIsBundle"
    TRADE_STATUS_NOT_VALID_FOR_CANCELLING = "TradeStatusNotValidForCancelling"
    TRADE_STATUS_NOT_VALID_FOR_ACCEPTING = "TradeStatusNotValidForAccepting"
    TRADE_DOES_NOT_EXIST = "TradeDoesNotExist"
    TRADE_CANCELLED = "TradeCancelled"
    TRADE_ALREADY_FILLED = "TradeAlreadyFilled"
    TRADE_WAIT_FOR_STATUS_TIMEOUT = "TradeWaitForStatusTimeout"
    TRADE_INVENTORY_ITEM_EXPIRED = "TradeInventoryItemExpired"
    TRADE_MISSING_OFFERED_AND_ACCEPTED_ITEMS = "TradeMissingOfferedAndAcceptedItems"
    TRADE_ACCEPTED_ITEM_IS_BUNDLE = "TradeAcceptedItemIsBundle"
    TRADE_ACCEPTED_ITEM_IS_STACKABLE = "TradeAcceptedItemIsStackable"
    TRADE_INVENTORY_ITEM_INVALID_STATUS = "TradeInventoryItemInvalidStatus"
    TRADE_ACCEPTED_CATALOG_ITEM_INVALID = "TradeAcceptedCatalogItemInvalid"
    TRADE_ALLOWED_USERS_INVALID = "TradeAllowedUsersInvalid"
    TRADE_INVENTORY_ITEM_DOES_NOT_EXIST = "TradeInventoryItemDoesNotExist"
    TRADE_INVENTORY_ITEM_IS_CONSUMED = "TradeInventoryItemIsConsumed"
    TRADE_INVENTORY_ITEM_IS_STACKABLE = "TradeInventoryItemIsStackable"
    TRADE_ACCEPTED_ITEMS_MISMATCH = "TradeAcceptedItemsMismatch"
    INVALID_KONGREGATE_TOKEN = "InvalidKongregateToken"
    FEATURE_NOT_CONFIGURED_FOR_TITLE = "FeatureNotConfiguredForTitle"
    NO_MATCHING_CATALOG_ITEM_FOR_RECEIPT = "NoMatchingCatalogItemForReceipt"
    INVALID_CURRENCY_CODE = "InvalidCurrencyCode"
    NO_REAL_MONEY_PRICE_FOR_CATALOG_ITEM = "NoRealMoneyPriceForCatalogItem"
    TRADE_INVENTORY_ITEM_IS_NOT_TRADABLE = "TradeInventoryItemIsNotTradable"
    TRADE_ACCEPTED_CATALOG_ITEM_IS_NOT_TRADABLE = "TradeAcceptedCatalogItemIsNotTradable"
    USERS_ALREADY_FRIENDS = "UsersAlreadyFriends"
    LINKED_IDENTIFIER_ALREADY_CLAIMED = "LinkedIdentifierAlreadyClaimed"
    CUSTOM_ID_NOT_LINKED = "CustomIdNotLinked"
    TOTAL_DATA_SIZE_EXCEEDED = "TotalDataSizeExceeded"
    DELETE_KEY_CONFLICT = "DeleteKeyConflict"
    INVALID_XBOX_LIVE_TOKEN = "InvalidXboxLiveToken"
    EXPIRED_XBOX_LIVE_TOKEN = "ExpiredXboxLiveToken"
    RESETTABLE_STATISTIC_VERSION_REQUIRED = "ResettableStatisticVersionRequired"
    NOT_AUTHORIZED_BY_TITLE = "NotAuthorizedByTitle"
    NO_PARTNER_ENABLED = "NoPartnerEnabled"
    INVALID_PARTNER_RESPONSE = "InvalidPartnerResponse"
    API_NOT_ENABLED_FOR_GAME_SERVER_ACCESS = "APINotEnabledForGameServerAccess"
    STATISTIC_NOT_FOUND = "StatisticNotFound"
    STATISTIC_NAME_CONFLICT = "StatisticNameConflict"
    STATISTIC_VERSION_CLOSED_FOR_WRITES = "StatisticVersionClosedForWrites"
    STATISTIC_VERSION_INVALID = "StatisticVersionInvalid"
    API_CLIENT_REQUEST_RATE_LIMIT_EXCEEDED = "APIClientRequestRateLimitExceeded"
    INVALID_JSON_CONTENT = "InvalidJSONContent"
    INVALID_DROP_TABLE = "InvalidDropTable"
    STATISTIC_VERSION_ALREADY_INCREMENTED_FOR_SCHEDULED_INTERVAL = "StatisticVersionAlreadyIncrementedForScheduledInterval"
    STATISTIC_COUNT_LIMIT_EXCEEDED = "StatisticCountLimitExceeded"
    STATISTIC_VERSION_INCREMENT_RATE_EXCEEDED = "StatisticVersionIncrementRateExceeded"
    CONTAINER_KEY_INVALID = "ContainerKeyInvalid"
    CLOUD_SCRIPT_EXECUTION_TIME_LIMIT_EXCEEDED = "CloudScriptExecutionTimeLimitExceeded"
    NO_WRITE_PERMISSIONS_FOR_EVENT = "NoWritePermissionsForEvent"
    CLOUD_SCRIPT_FUNCTION_ARGUMENT_SIZE_EXCEEDED = "CloudScriptFunctionArgumentSizeExceeded"
    CLOUD_SCRIPT_API_REQUEST_COUNT_EXCEEDED = "CloudScriptAPIRequestCountExceeded"
    CLOUD_SCRIPT_API_REQUEST_ERROR = "CloudScriptAPIRequestError"
    CLOUD_SCRIPT_HTTP_REQUEST_ERROR = "CloudScriptHTTPRequestError"
    INSUFFICIENT_GUILD_ROLE = "InsufficientGuildRole"
    GUILD_NOT_FOUND = "GuildNotFound"
    OVER_LIMIT = "OverLimit"
    EVENT_NOT_FOUND = "EventNotFound"
    INVALID_EVENT_FIELD = "InvalidEventField"
    INVALID_EVENT_NAME = "InvalidEventName"
    CATALOG_NOT_CONFIGURED = "CatalogNotConfigured"
    OPERATION_NOT_SUPPORTED_FOR_PLATFORM = "OperationNotSupportedForPlatform"
    SEGMENT_NOT_FOUND = "SegmentNotFound"
    STORE_NOT_FOUND = "StoreNotFound"
    INVALID_STATISTIC_NAME = "InvalidStatisticName"
    TITLE_NOT_QUALIFIED_FOR_LIMIT = "TitleNotQualifiedForLimit"
    INVALID_SERVICE_LIMIT_LEVEL = "InvalidServiceLimitLevel"
    SERVICE_LIMIT_LEVEL_IN_TRANSITION = "ServiceLimitLevelInTransition"
    COUPON_ALREADY_REDEEMED = "CouponAlreadyRedeemed"
    GAME_SERVER_BUILD_SIZE_LIMIT_EXCEEDED = "GameServerBuildSizeLimitExceeded"
    GAME_SERVER_BUILD_COUNT_LIMIT_EXCEEDED = "GameServerBuildCountLimitExceeded"
    VIRTUAL_CURRENCY_COUNT_LIMIT_EXCEEDED = "VirtualCurrencyCountLimitExceeded"
    VIRTUAL_CURRENCY_CODE_EXISTS = "VirtualCurrencyCodeExists"
    TITLE_NEWS_ITEM_COUNT_LIMIT_EXCEEDED = "TitleNewsItemCountLimitExceeded"
    INVALID_TWITCH_TOKEN = "InvalidTwitchToken"
    TWITCH_RESPONSE_ERROR = "TwitchResponseError"
    PROFANE_DISPLAY_NAME = "ProfaneDisplayName"
    USER_ALREADY_ADDED = "UserAlreadyAdded"
    INVALID_VIRTUAL_CURRENCY_CODE = "InvalidVirtualCurrencyCode"
    VIRTUAL_CURRENCY_CANNOT_BE_DELETED = "VirtualCurrencyCannotBeDeleted"
    IDENTIFIER_ALREADY_CLAIMED = "IdentifierAlreadyClaimed"
    IDENTIFIER_NOT_LINKED = "IdentifierNotLinked"
    INVALID_CONTINUATION_TOKEN = "InvalidContinuationToken"
    EXPIRED_CONTINUATION_TOKEN = "ExpiredContinuationToken"
    INVALID_SEGMENT = "InvalidSegment"
    INVALID_SESSION_ID = "InvalidSessionId"
    SESSION_LOG_NOT_FOUND = "SessionLogNotFound"
    INVALID_SEARCH_TERM = "InvalidSearchTerm"
    TWO_FACTOR_AUTHENTICATION_TOKEN_REQUIRED = "TwoFactorAuthenticationTokenRequired"
    GAME_SERVER_HOST_COUNT_LIMIT_EXCEEDED = "GameServerHostCountLimitExceeded"
    PLAYER_TAG_COUNT_LIMIT_EXCEEDED = "PlayerTagCountLimitExceeded"
    REQUEST_ALREADY_RUNNING = "RequestAlreadyRunning"
    ACTION_GROUP_NOT_FOUND = "ActionGroupNotFound"
    MAXIMUM_SEGMENT_BULK_ACTION_JOBS_RUNNING = "MaximumSegmentBulkActionJobsRunning"
    NO_ACTIONS_ON_PLAYERS_IN_SEGMENT_JOB = "NoActionsOnPlayersInSegmentJob"
    DUPLICATE_STATISTIC_NAME = "DuplicateStatisticName"
    SCHEDULED_TASK_NAME_CONFLICT = "ScheduledTaskNameConflict"
    SCHEDULED_TASK_CREATE_CONFLICT = "ScheduledTaskCreateConflict"
    INVALID_SCHEDULED_TASK_NAME = "InvalidScheduledTaskName"
    INVALID_TASK_SCHEDULE = "InvalidTaskSchedule"
    STEAM_NOT_ENABLED_FOR_TITLE = "SteamNotEnabledForTitle"
    LIMIT_NOT_AN_UPGRADE_OPTION = "LimitNotAnUpgradeOption"
    NO_SECRET_KEY_ENABLED_FOR_CLOUD_SCRIPT = "NoSecretKeyEnabledForCloudScript"
    TASK_NOT_FOUND = "TaskNotFound"
    TASK_INSTANCE_NOT_FOUND = "TaskInstanceNotFound"
    INVALID_IDENTITY_PROVIDER_ID = "InvalidIdentityProviderId"
    MISCONFIGURED_IDENTITY_PROVIDER = "MisconfiguredIdentityProvider"
    INVALID_SCHEDULED_TASK_TYPE = "InvalidScheduledTaskType"
    BILLING_INFORMATION_REQUIRED = "BillingInformationRequired"
    LIMITED_EDITION_ITEM_UNAVAILABLE = "LimitedEditionItemUnavailable"
    INVALID_AD_PLACEMENT_AND_REWARD = "InvalidAdPlacementAndReward"
    ALL_AD_PLACEMENT_VIEWS_ALREADY_CONSUMED = "AllAdPlacementViewsAlreadyConsumed"
    GOOGLE_O_AUTH_NOT_CONFIGURED_FOR_TITLE = "GoogleOAuthNotConfiguredForTitle"
    GOOGLE_O_AUTH_ERROR = "GoogleOAuthError"
    USER_NOT_FRIEND = "UserNotFriend"
    INVALID_SIGNATURE = "InvalidSignature"
    INVALID_PUBLIC_KEY = "InvalidPublicKey"
    GOOGLE_O_AUTH_NO_ID_TOKEN_INCLUDED_IN_RESPONSE = "GoogleOAuthNoIdTokenIncludedInResponse"
    STATISTIC_UPDATE_IN_PROGRESS = "StatisticUpdateInProgress"
    LEADERBOARD_VERSION_NOT_AVAILABLE = "LeaderboardVersionNotAvailable"
    STATISTIC_ALREADY_HAS_PRIZE_TABLE = "StatisticAlreadyHasPrizeTable"
    PRIZE_TABLE_HAS_OVERLAPPING_RANKS = "PrizeTableHasOverlappingRanks"
    PRIZE_TABLE_HAS_MISSING_RANKS = "PrizeTableHasMissingRanks"
    PRIZE_TABLE_RANK_STARTS_AT_ZERO = "PrizeTableRankStartsAtZero"
    INVALID_STATISTIC = "InvalidStatistic"
    EXPRESSION_PARSE_FAILURE = "ExpressionParseFailure"
    EXPRESSION_INVOKE_FAILURE = "ExpressionInvokeFailure"
    EXPRESSION_TOO_LONG = "ExpressionTooLong"
    DATA_UPDATE_RATE_EXCEEDED = "DataUpdateRateExceeded"
    RESTRICTED_EMAIL_DOMAIN = "RestrictedEmailDomain"
    ENCRYPTION_KEY_DISABLED = "EncryptionKeyDisabled"
    ENCRYPTION_KEY_MISSING = "EncryptionKeyMissing"
    ENCRYPTION_KEY_BROKEN = "EncryptionKeyBroken"
    NO_SHARED_SECRET_KEY_CONFIGURED = "NoSharedSecretKeyConfigured"
    SECRET_KEY_NOT_FOUND = "SecretKeyNotFound"
    PLAYER_SECRET_ALREADY_CONFIGURED = "PlayerSecretAlreadyConfigured"
    API_REQUESTS_DISABLED_FOR_TITLE = "APIRequestsDisabledForTitle"
    INVALID_SHARED_SECRET_KEY = "InvalidSharedSecretKey"
    PRIZE_TABLE_HAS_NO_RANKS = "PrizeTableHasNoRanks"
    PROFILE_DOES_NOT_EXIST = "ProfileDoesNotExist"
    CONTENT_S3_ORIGIN_BUCKET_NOT_CONFIGURED = "ContentS3OriginBucketNotConfigured"
    INVALID_ENVIRONMENT_FOR_RECEIPT = "InvalidEnvironmentForReceipt"
    ENCRYPTED_REQUEST_NOT_ALLOWED = "EncryptedRequestNotAllowed"
    SIGNED_REQUEST_NOT_ALLOWED = "SignedRequestNotAllowed"
    REQUEST_VIEW_CONSTRAINT_PARAMS_NOT_ALLOWED = "RequestViewConstraintParamsNotAllowed"
    BAD_PARTNER_CONFIGURATION = "BadPartnerConfiguration"
    XBOX_BP_CERTIFICATE_FAILURE = "XboxBPCertificateFailure"
    XBOX_XASS_EXCHANGE_FAILURE = "XboxXASSExchangeFailure"
    INVALID_ENTITY_ID = "InvalidEntityId"
    STATISTIC_VALUE_AGGREGATION_OVERFLOW = "StatisticValueAggregationOverflow"
    EMAIL_MESSAGE_FROM_ADDRESS_IS_MISSING = "EmailMessageFromAddressIsMissing"
    EMAIL_MESSAGE_TO_ADDRESS_IS_MISSING = "EmailMessageToAddressIsMissing"
    SMTP_SERVER_AUTHENTICATION_ERROR = "SmtpServerAuthenticationError"
    SMTP_SERVER_LIMIT_EXCEEDED = "SmtpServerLimitExceeded"
    SMTP_SERVER_INSUFFICIENT_STORAGE = "SmtpServerInsufficientStorage"
    SMTP_SERVER_COMMUNICATION_ERROR = "SmtpServerCommunicationError"
    SMTP_SERVER_GENERAL_FAILURE = "SmtpServerGeneralFailure"
    EMAIL_CLIENT_TIMEOUT = "EmailClientTimeout"
    EMAIL_CLIENT_CANCELED_TASK = "EmailClientCanceledTask"
    EMAIL_TEMPLATE_MISSING = "EmailTemplateMissing"
    INVALID_HOST_FOR_TITLE_ID = "InvalidHostForTitleId"
    EMAIL_CONFIRMATION_TOKEN_DOES_NOT_EXIST = "EmailConfirmationTokenDoesNotExist"
    EMAIL_CONFIRMATION_TOKEN_EXPIRED = "EmailConfirmationTokenExpired"
    ACCOUNT_DELETED = "AccountDeleted"
    PLAYER_SECRET_NOT_CONFIGURED = "PlayerSecretNotConfigured"
    INVALID_SIGNATURE_TIME = "InvalidSignatureTime"
    NO_CONTACT_EMAIL_ADDRESS_FOUND = "NoContactEmailAddressFound"
    INVALID_AUTH_TOKEN = "InvalidAuthToken"
    AUTH_TOKEN_DOES_NOT_EXIST = "AuthTokenDoesNotExist"
    AUTH_TOKEN_EXPIRED = "AuthTokenExpired"
    AUTH_TOKEN_ALREADY_USED_TO_RESET_PASSWORD = "AuthTokenAlreadyUsedToResetPassword"
    MEMBERSHIP_NAME_TOO_LONG = "MembershipNameTooLong"
    MEMBERSHIP_NOT_FOUND = "MembershipNotFound"
    GOOGLE_SERVICE_ACCOUNT_INVALID = "GoogleServiceAccountInvalid"
    GOOGLE_SERVICE_ACCOUNT_PARSE_FAILURE = "GoogleServiceAccountParseFailure"
    ENTITY_TOKEN_MISSING = "EntityTokenMissing"
    ENTITY_TOKEN_INVALID = "EntityTokenInvalid"
    ENTITY_TOKEN_EXPIRED = "EntityTokenExpired"
    ENTITY_TOKEN_REVOKED = "EntityTokenRevoked"
    INVALID_PRODUCT_FOR_SUBSCRIPTION = "InvalidProductForSubscription"
    XBOX_INACCESSIBLE = "XboxInaccessible"
    SUBSCRIPTION_ALREADY_TAKEN = "SubscriptionAlreadyTaken"
    SMTP_ADDON_NOT_ENABLED = "SmtpAddonNotEnabled"
    API_CONCURRENT_REQUEST_LIMIT_EXCEEDED = "APIConcurrentRequestLimitExceeded"
    XBOX_REJECTED_XSTS_EXCHANGE_REQUEST = "XboxRejectedXSTSExchangeRequest"
    VARIABLE_NOT_DEFINED = "VariableNotDefined"
    TEMPLATE_VERSION_NOT_DEFINED = "TemplateVersionNotDefined"
    FILE_TOO_LARGE = "FileTooLarge"
    TITLE_DELETED = "TitleDeleted"
    TITLE_CONTAINS_USER_ACCOUNTS = "TitleContainsUserAccounts"
    TITLE_DELETION_PLAYER_CLEANUP_FAILURE = "TitleDeletionPlayerCleanupFailure"
    ENTITY_FILE_OPERATION_PENDING = "EntityFileOperationPending"
    NO_ENTITY_FILE_OPERATION_PENDING = "NoEntityFileOperationPending"
    ENTITY_PROFILE_VERSION_MISMATCH = "EntityProfileVersionMismatch"
    TEMPLATE_VERSION_TOO_OLD = "TemplateVersionTooOld"
    MEMBERSHIP_DEFINITION_IN_USE = "MembershipDefinitionInUse"
    PAYMENT_PAGE_NOT_CONFIGURED = "PaymentPageNotConfigured"
    FAILED_LOGIN_ATTEMPT_RATE_LIMIT_EXCEEDED = "FailedLoginAttemptRateLimitExceeded"
    ENTITY_BLOCKED_BY_GROUP = "EntityBlockedByGroup"
    ROLE_DOES_NOT_EXIST = "RoleDoesNotExist"
    ENTITY_IS_ALREADY_MEMBER = "EntityIsAlreadyMember"
    DUPLICATE_ROLE_ID = "DuplicateRoleId"
    GROUP_INVITATION_NOT_FOUND = "GroupInvitationNotFound"
    GROUP_APPLICATION_NOT_FOUND = "GroupApplicationNotFound"
    OUTSTANDING_INVITATION_ACCEPTED_INSTEAD = "OutstandingInvitationAcceptedInstead"
    OUTSTANDING_APPLICATION_ACCEPTED_INSTEAD = "OutstandingApplicationAcceptedInstead"
    ROLE_IS_GROUP_DEFAULT_MEMBER = "RoleIsGroupDefaultMember"
    ROLE_IS_GROUP_ADMIN = "RoleIsGroupAdmin"
    ROLE_NAME_NOT_AVAILABLE = "RoleNameNotAvailable"
    GROUP_NAME_NOT_AVAILABLE = "GroupNameNotAvailable"
    EMAIL_REPORT_ALREADY_SENT = "EmailReportAlreadySent"
    EMAIL_REPORT_RECIPIENT_BLACKLISTED = "EmailReportRecipientBlacklisted"
    EVENT_NAMESPACE_NOT_ALLOWED = "EventNamespaceNotAllowed"
    EVENT_ENTITY_NOT_ALLOWED = "EventEntityNotAllowed"
    INVALID_ENTITY_TYPE = "InvalidEntityType"
    NULL_TOKEN_RESULT_FROM_AAD = "NullTokenResultFromAad"
    INVALID_TOKEN_RESULT_FROM_AAD = "InvalidTokenResultFromAad"
    NO_VALID_CERTIFICATE_FOR_AAD = "NoValidCertificateForAad"
    INVALID_CERTIFICATE_FOR_AAD = "InvalidCertificateForAad"
    DUPLICATE_DROP_TABLE_ID = "DuplicateDropTableId"
    GAME_SERVER_OK = "GameServerOk"
    GAME_SERVER_ACCEPTED = "GameServerAccepted"
    GAME_SERVER_NO_CONTENT = "GameServerNoContent"
    GAME_SERVER_BAD_REQUEST = "GameServerBadRequest"
    GAME_SERVER_UNAUTHORIZED = "GameServerUnauthorized"
    GAME_SERVER_FORBIDDEN = "GameServerForbidden"
    GAME_SERVER_NOT_FOUND = "GameServerNotFound"
    GAME_SERVER_CONFLICT = "GameServerConflict"
    GAME_SERVER_INTERNAL_SERVER_ERROR = "GameServerInternalServerError"
    GAME_SERVER_SERVICE_UNAVAILABLE = "GameServerServiceUnavailable"
    MATCHMAKING_INVALID_ENTITY_KEY_LIST = "MatchmakingInvalidEntityKeyList"
    MATCHMAKING_INVALID_TICKET_CREATOR_PROFILE = "MatchmakingInvalidTicketCreatorProfile"
    MATCHMAKING_INVALID_USER_ATTRIBUTES = "MatchmakingInvalidUserAttributes"
    MATCHMAKING_CREATE_REQUEST_MISSING = "MatchmakingCreateRequestMissing"
    MATCHMAKING_CREATE_REQUEST_CREATOR_MISSING = "MatchmakingCreateRequestCreatorMissing"
    MATCHMAKING_CREATE_REQUEST_CREATOR_ID_MISSING = "MatchmakingCreateRequestCreatorIdMissing"
    MATCHMAKING_CREATE_REQUEST_USER_LIST_MISSING = "MatchmakingCreateRequestUserListMissing"
    MATCHMAKING_CREATE_REQUEST_GIVE_UP_AFTER_INVALID = "MatchmakingCreateRequestGiveUpAfterInvalid"
    MATCHMAKING_TICKET_ID_MISSING = "MatchmakingTicketIdMissing"
    MATCHMAKING_MATCH_ID_MISSING = "MatchmakingMatchIdMissing"
    MATCHMAKING_MATCH_ID_ID_MISSING = "MatchmakingMatchIdIdMissing"
    MATCHMAKING_HOPPER_ID_MISSING = "MatchmakingHopperIdMissing"
    MATCHMAKING_TITLE_ID_MISSING = "MatchmakingTitleIdMissing"
    MATCHMAKING_TICKET_ID_ID_MISSING = "MatchmakingTicketIdIdMissing"
    MATCHMAKING_USER_ID_MISSING = "MatchmakingUserIdMissing"
    MATCHMAKING_JOIN_REQUEST_USER_MISSING = "MatchmakingJoinRequestUserMissing"
    MATCHMAKING_HOPPER_CONFIG_NOT_FOUND = "MatchmakingHopperConfigNotFound"
    MATCHMAKING_MATCH_NOT_FOUND = "MatchmakingMatchNotFound"
    MATCHMAKING_TICKET_NOT_FOUND = "MatchmakingTicketNotFound"
    MATCHMAKING_CREATE_TICKET_SERVER_IDENTITY_INVALID = "MatchmakingCreateTicketServerIdentityInvalid"
    MATCHMAKING_CREATE_TICKET_CLIENT_IDENTITY_INVALID = "MatchmakingCreateTicketClientIdentityInvalid"
    MATCHMAKING_GET_TICKET_USER_MISMATCH = "MatchmakingGetTicketUserMismatch"
    MATCHMAKING_JOIN_TICKET_SERVER_IDENTITY_INVALID = "MatchmakingJoinTicketServerIdentityInvalid"
    MATCHMAKING_JOIN_TICKET_USER_IDENTITY_MISMATCH = "MatchmakingJoinTicketUserIdentityMismatch"
    MATCHMAKING_CANCEL_TICKET_SERVER_IDENTITY_INVALID = "MatchmakingCancelTicketServerIdentityInvalid"
    MATCHMAKING_CANCEL_TICKET_USER_IDENTITY_MISMATCH = "MatchmakingCancelTicketUserIdentityMismatch"
    MATCHMAKING_GET_MATCH_IDENTITY_MISMATCH = "MatchmakingGetMatchIdentityMismatch"
    MATCHMAKING_USER_IDENTITY_MISMATCH = "MatchmakingUserIdentityMismatch"
    MATCHMAKING_ALREADY_JOINED_TICKET = "MatchmakingAlreadyJoinedTicket"
    MATCHMAKING_TICKET_ALREADY_COMPLETED = "MatchmakingTicketAlreadyCompleted"
    MATCHMAKING_HOPPER_CONFIG_INVALID = "MatchmakingHopperConfigInvalid"
