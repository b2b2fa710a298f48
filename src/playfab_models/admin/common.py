"""Value types shared across the Admin API areas."""

from __future__ import annotations

from playfab_models.wire import String, WireEnum, WireModel


class EntityTypes(WireEnum):
    TITLE = "title"
    MASTER_PLAYER_ACCOUNT = "master_player_account"
    TITLE_PLAYER_ACCOUNT = "title_player_account"
    CHARACTER = "character"
    GROUP = "group"
    SERVICE = "service"


class EntityKey(WireModel):
    """Identifies an entity.

    Unlike the Groups API key, the entity type is either the enum
    (``type``) or a free-form string (``type_string``); one of the two is
    expected to be set.
    """

    id: String
    type: EntityTypes | None = None
    type_string: String | None = None


class NameIdentifier(WireModel):
    """Names a scheduled task by id or by name."""

    id: String | None = None
    name: String | None = None


class EmptyResult(WireModel):
    pass


class BlankResult(WireModel):
    pass
