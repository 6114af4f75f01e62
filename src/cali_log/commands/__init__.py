"""CLI commands for cali-log."""

from .history import history, search
from .log import log_workout
from .remove import remove
from .resources import open_resource, playlists, template, tutorial

__all__ = [
    "history",
    "log_workout",
    "open_resource",
    "playlists",
    "remove",
    "search",
    "template",
    "tutorial",
]
