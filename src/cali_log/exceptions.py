"""Exceptions raised by cali-log."""


class CaliLogError(Exception):
    """Base class for cali-log errors."""


class ConfigurationError(CaliLogError):
    """Storage cannot be configured (missing settings, unknown sheet tab)."""


class StorageError(CaliLogError):
    """Reading from or writing to a storage backend failed."""


class TutorialMappingError(CaliLogError, ValueError):
    """The tutorial table references unknown levels or malformed links."""


class InvalidRemoveIndexError(IndexError):
    """The requested entry index is outside the entries matching a date."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"invalid remove index {index} ({count} matching entries)")
