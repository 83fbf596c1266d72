"""Record schema for the platform's public API."""

from discord_models.models.activity import (
    Activity,
    ActivityAssets,
    ActivityButton,
    ActivityEmoji,
    ActivityFlag,
    ActivityInstance,
    ActivityLocation,
    ActivityLocationKind,
    ActivityParty,
    ActivitySecrets,
    ActivityTimestamps,
    ActivityType,
)
from discord_models.models.application import (
    Application,
    ApplicationFlag,
    ApplicationIntegrationTypeConfig,
    InstallParams,
)
from discord_models.models.application_command import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ChoiceValue,
    EntryPointCommandHandlerType,
    IntegerValue,
    NumberValue,
    StringValue,
    decode_choice_value,
)
from discord_models.models.audit_log import (
    AuditLog,
    AuditLogChange,
    AuditLogEntry,
    AuditLogEvent,
    OptionalAuditEntryInfo,
)
from discord_models.models.auto_moderation import (
    AutoModerationAction,
    AutoModerationActionMetadata,
    AutoModerationActionType,
    AutoModerationEventType,
    AutoModerationRule,
    AutoModerationTriggerMetadata,
    AutoModerationTriggerType,
    KeywordPresetType,
)
from discord_models.models.base import DiscordModel
from discord_models.models.channel import (
    Channel,
    ChannelFlag,
    ChannelType,
    DefaultReaction,
    ForumLayoutType,
    ForumTag,
    Overwrite,
    OverwriteType,
    SortOrderType,
    ThreadMember,
    ThreadMetadata,
    VideoQualityMode,
)
from discord_models.models.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
    EmbedThumbnail,
    EmbedType,
    EmbedVideo,
)
from discord_models.models.emoji import Emoji, EmojiAnimationType
from discord_models.models.entitlement import Entitlement, EntitlementType
from discord_models.models.enums import (
    ApplicationIntegrationType,
    InteractionContextType,
    InteractionType,
)
from discord_models.models.guild import (
    DefaultMessageNotificationLevel,
    ExplicitContentFilterLevel,
    Guild,
    GuildFeature,
    Integration,
    MFALevel,
    NSFWLevel,
    PremiumTier,
    SystemChannelFlag,
    VerificationLevel,
    WelcomeScreen,
    WelcomeScreenChannel,
)
from discord_models.models.intents import Intent, intents_mask
from discord_models.models.interaction import (
    ApplicationCommandInteractionDataOption,
    Interaction,
    InteractionCallbackObject,
    InteractionCallbackResource,
    InteractionCallbackResponse,
    InteractionData,
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
)
from discord_models.models.invite import Invite, InviteGuild, InviteTargetType, InviteType
from discord_models.models.locale import LOCALES, Locale, find_locale
from discord_models.models.member import GuildMember, GuildMemberFlag
from discord_models.models.message import (
    AllowedMentions,
    AllowedMentionType,
    Attachment,
    AttachmentFlag,
    ButtonStyle,
    ChannelMention,
    Message,
    MessageActivity,
    MessageActivityType,
    MessageCall,
    MessageComponent,
    MessageComponentType,
    MessageFlag,
    MessageInteraction,
    MessageInteractionMetadata,
    MessageReference,
    MessageReferenceType,
    MessageSnapshot,
    MessageType,
    Reaction,
    ReactionCountDetails,
    ResolvedData,
    RoleSubscriptionData,
    SnapshotMessage,
)
from discord_models.models.oauth import OAuth2Scope
from discord_models.models.permissions import Permission
from discord_models.models.poll import (
    Poll,
    PollAnswer,
    PollAnswerCount,
    PollCreate,
    PollLayoutType,
    PollMedia,
    PollResults,
)
from discord_models.models.presence import (
    ClientStatus,
    GatewayPresenceUpdate,
    PresenceUpdate,
    UserStatus,
)
from discord_models.models.role import Role, RoleFlag, RoleTags
from discord_models.models.scheduled_event import (
    GuildScheduledEvent,
    GuildScheduledEventEntityType,
    GuildScheduledEventPrivacyLevel,
    GuildScheduledEventRecurrenceRule,
    GuildScheduledEventStatus,
    RecurrenceRuleFrequency,
    RecurrenceRuleMonth,
    RecurrenceRuleNWeekday,
    RecurrenceRuleWeekday,
)
from discord_models.models.server import Server
from discord_models.models.stage_instance import StageInstance, StageInstancePrivacyLevel
from discord_models.models.sticker import Sticker, StickerFormatType, StickerItem, StickerType
from discord_models.models.team import MembershipState, Team, TeamMember
from discord_models.models.user import AvatarDecorationData, PartialUser, PremiumType, User, UserFlag
from discord_models.models.voice import VoiceRegion, VoiceState
from discord_models.models.webhook import Webhook, WebhookType

__all__ = [
    "Activity",
    "ActivityAssets",
    "ActivityButton",
    "ActivityEmoji",
    "ActivityFlag",
    "ActivityInstance",
    "ActivityLocation",
    "ActivityLocationKind",
    "ActivityParty",
    "ActivitySecrets",
    "ActivityTimestamps",
    "ActivityType",
    "AllowedMentionType",
    "AllowedMentions",
    "Application",
    "ApplicationCommand",
    "ApplicationCommandInteractionDataOption",
    "ApplicationCommandOption",
    "ApplicationCommandOptionChoice",
    "ApplicationCommandOptionType",
    "ApplicationCommandType",
    "ApplicationFlag",
    "ApplicationIntegrationType",
    "ApplicationIntegrationTypeConfig",
    "Attachment",
    "AttachmentFlag",
    "AuditLog",
    "AuditLogChange",
    "AuditLogEntry",
    "AuditLogEvent",
    "AutoModerationAction",
    "AutoModerationActionMetadata",
    "AutoModerationActionType",
    "AutoModerationEventType",
    "AutoModerationRule",
    "AutoModerationTriggerMetadata",
    "AutoModerationTriggerType",
    "AvatarDecorationData",
    "ButtonStyle",
    "Channel",
    "ChannelFlag",
    "ChannelMention",
    "ChannelType",
    "ChoiceValue",
    "ClientStatus",
    "DefaultMessageNotificationLevel",
    "DefaultReaction",
    "DiscordModel",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedProvider",
    "EmbedThumbnail",
    "EmbedType",
    "EmbedVideo",
    "Emoji",
    "EmojiAnimationType",
    "Entitlement",
    "EntitlementType",
    "EntryPointCommandHandlerType",
    "ExplicitContentFilterLevel",
    "ForumLayoutType",
    "ForumTag",
    "GatewayPresenceUpdate",
    "Guild",
    "GuildFeature",
    "GuildMember",
    "GuildMemberFlag",
    "GuildScheduledEvent",
    "GuildScheduledEventEntityType",
    "GuildScheduledEventPrivacyLevel",
    "GuildScheduledEventRecurrenceRule",
    "GuildScheduledEventStatus",
    "InstallParams",
    "IntegerValue",
    "Integration",
    "Intent",
    "Interaction",
    "InteractionCallbackObject",
    "InteractionCallbackResource",
    "InteractionCallbackResponse",
    "InteractionContextType",
    "InteractionData",
    "InteractionResponse",
    "InteractionResponseData",
    "InteractionResponseType",
    "InteractionType",
    "Invite",
    "InviteGuild",
    "InviteTargetType",
    "InviteType",
    "KeywordPresetType",
    "LOCALES",
    "Locale",
    "MFALevel",
    "MembershipState",
    "Message",
    "MessageActivity",
    "MessageActivityType",
    "MessageCall",
    "MessageComponent",
    "MessageComponentType",
    "MessageFlag",
    "MessageInteraction",
    "MessageInteractionMetadata",
    "MessageReference",
    "MessageReferenceType",
    "MessageSnapshot",
    "MessageType",
    "NSFWLevel",
    "NumberValue",
    "OAuth2Scope",
    "OptionalAuditEntryInfo",
    "Overwrite",
    "OverwriteType",
    "PartialUser",
    "Permission",
    "Poll",
    "PollAnswer",
    "PollAnswerCount",
    "PollCreate",
    "PollLayoutType",
    "PollMedia",
    "PollResults",
    "PremiumTier",
    "PremiumType",
    "PresenceUpdate",
    "Reaction",
    "ReactionCountDetails",
    "RecurrenceRuleFrequency",
    "RecurrenceRuleMonth",
    "RecurrenceRuleNWeekday",
    "RecurrenceRuleWeekday",
    "ResolvedData",
    "Role",
    "RoleFlag",
    "RoleSubscriptionData",
    "RoleTags",
    "Server",
    "SnapshotMessage",
    "SortOrderType",
    "StageInstance",
    "StageInstancePrivacyLevel",
    "Sticker",
    "StickerFormatType",
    "StickerItem",
    "StickerType",
    "StringValue",
    "SystemChannelFlag",
    "Team",
    "TeamMember",
    "ThreadMember",
    "ThreadMetadata",
    "User",
    "UserFlag",
    "UserStatus",
    "VerificationLevel",
    "VideoQualityMode",
    "VoiceRegion",
    "VoiceState",
    "Webhook",
    "WebhookType",
    "WelcomeScreen",
    "WelcomeScreenChannel",
    "decode_choice_value",
    "find_locale",
    "intents_mask",
]
