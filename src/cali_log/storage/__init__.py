"""Storage backends for cali-log."""

from ..config import Settings, StorageKind, default_log_dir
from .base import WorkoutStorage
from .local import LocalFileStorage


def get_storage(settings: Settings) -> WorkoutStorage:
    """Create the backend selected by the settings."""
    if settings.storage is StorageKind.LOCAL:
        return LocalFileStorage(settings.log_dir or default_log_dir())

    # Google client libraries load only when Sheets is selected
    from .sheets import SheetsStorage

    return SheetsStorage.from_settings(settings)


__all__ = [
    "get_storage",
    "LocalFileStorage",
    "WorkoutStorage",
]
