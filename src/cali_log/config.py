"""Environment-driven configuration."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Log"
CREDENTIAL_VARIABLES = ("CALI_GOOGLE_CREDENTIALS_JSON", "GOOGLE_APPLICATION_CREDENTIALS")
TRUTHY = {"1", "true", "yes", "on"}


def default_log_dir() -> Path:
    """Get the default directory for local workout logs."""
    return Path.home() / "cali-logger" / "workout"


class StorageKind(str, Enum):
    """Available storage backends."""

    LOCAL = "local"
    SHEETS = "sheets"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, resolved once per invocation."""

    storage: StorageKind = StorageKind.SHEETS
    log_dir: Path | None = None
    sheet_id: str = ""
    sheet_name: str = DEFAULT_SHEET_NAME
    credentials_path: str = ""
    strict_menus: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from environment variables.

        Google Sheets is the default backend; ``CALI_STORAGE=local`` selects
        local files. Only the selected backend's settings are checked, and
        that happens when the backend is created.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str:
            return env.get(name, "").strip()

        storage = StorageKind.LOCAL if get("CALI_STORAGE").lower() == "local" else StorageKind.SHEETS

        credentials_path = ""
        for name in CREDENTIAL_VARIABLES:
            credentials_path = get(name)
            if credentials_path:
                log.debug("Using Google credentials from %s", name)
                break

        log_dir = get("CALI_LOG_DIR")

        return cls(
            storage=storage,
            log_dir=Path(log_dir).expanduser() if log_dir else default_log_dir(),
            sheet_id=get("CALI_SHEET_ID"),
            sheet_name=get("CALI_SHEET_NAME") or DEFAULT_SHEET_NAME,
            credentials_path=credentials_path,
            strict_menus=get("CALI_STRICT_MENUS").lower() in TRUTHY,
        )
