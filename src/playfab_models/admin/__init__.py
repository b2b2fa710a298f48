"""Admin API models, one module per service area.

Import types from their area module::

    from playfab_models.admin.tasks import ScheduledTask, TASK_PARAMETERS
    from playfab_models.admin.title_data import SetTitleDataRequest
"""

from playfab_models.admin import (
    bans,
    catalog,
    cloudscript,
    common,
    economy,
    error_codes,
    geo,
    player_data,
    players,
    policy,
    servers,
    statistics,
    tasks,
    title_data,
)

AREAS = (
    common,
    geo,
    error_codes,
    cloudscript,
    tasks,
    catalog,
    title_data,
    player_data,
    bans,
    economy,
    statistics,
    players,
    servers,
    policy,
)
"""Every area module, in dependency order."""

__all__ = [
    "AREAS",
    "bans",
    "catalog",
    "cloudscript",
    "common",
    "economy",
    "error_codes",
    "geo",
    "player_data",
    "players",
    "policy",
    "servers",
    "statistics",
    "tasks",
    "title_data",
]
