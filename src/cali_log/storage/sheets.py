"""Google Sheets backend: one seven-column range in one worksheet."""

import http.client
import logging
from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import Settings
from ..exceptions import ConfigurationError, InvalidRemoveIndexError, StorageError
from ..models.entry import WorkoutEntry

log = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
COLUMNS = "A:G"
HEADER_CELL = "date"

API_ERRORS = (
    HttpError,
    GoogleAuthError,
    httplib2.HttpLib2Error,
    http.client.HTTPException,
    OSError,
)


def build_sheets_service(credentials_path: str) -> Any:
    """Authenticate with a service account file and build the Sheets v4 service."""
    try:
        creds = service_account.Credentials.from_service_account_file(
            credentials_path, scopes=SHEETS_SCOPES
        )
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"cannot load service account credentials from {credentials_path}: {e}"
        ) from e
    log.debug("Using credentials from %s", credentials_path)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


def quote_sheet_name(name: str) -> str:
    """Quote a sheet tab name for use in A1 notation."""
    return "'" + name.replace("'", "''") + "'"


class SheetsStorage:
    """Workout log kept in columns A:G of one Google Sheets tab.

    The whole sheet is one log: ``recent`` and ``last_training_day`` see all
    of history, not just the current year. A header row whose first cell
    reads "Date" is skipped on read and never written.
    """

    def __init__(self, service: Any, spreadsheet_id: str, sheet_name: str):
        self.service = service
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.range = f"{quote_sheet_name(sheet_name)}!{COLUMNS}"
        self.sheet_id = self._resolve_sheet_id()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsStorage":
        """Create a Sheets-backed store from settings.

        Raises:
            ConfigurationError: If the spreadsheet id or credentials are
                missing, or the tab does not exist.
            StorageError: If the spreadsheet metadata cannot be fetched.
        """
        if not settings.sheet_id:
            raise ConfigurationError(
                "CALI_SHEET_ID is required (Google Sheets is default; "
                "set CALI_STORAGE=local to use local files)"
            )
        if not settings.credentials_path:
            raise ConfigurationError(
                "set CALI_GOOGLE_CREDENTIALS_JSON or GOOGLE_APPLICATION_CREDENTIALS"
            )
        service = build_sheets_service(settings.credentials_path)
        return cls(service, settings.sheet_id, settings.sheet_name)

    def _execute(self, request: Any, action: str) -> dict:
        """Execute an API request, wrapping any failure in StorageError."""
        try:
            return request.execute()
        except API_ERRORS as e:
            log.error("Sheets API request failed while %s: %s", action, e)
            raise StorageError(f"{action}: {e}") from e

    def _resolve_sheet_id(self) -> int:
        """Find the numeric id of the tab, which row deletion addresses."""
        metadata = self._execute(
            self.service.spreadsheets().get(
                spreadsheetId=self.spreadsheet_id, fields="sheets.properties"
            ),
            "reading spreadsheet metadata",
        )
        for sheet in metadata.get("sheets", []):
            properties = sheet.get("properties") or {}
            if properties.get("title") == self.sheet_name:
                sheet_id = properties.get("sheetId", 0)
                log.debug("Resolved tab %r to sheet id %s", self.sheet_name, sheet_id)
                return sheet_id
        raise ConfigurationError(f"sheet tab {self.sheet_name!r} not found in spreadsheet")

    def append(self, entry: WorkoutEntry) -> None:
        log.debug("Appending %s entry to %s", entry.date, self.range)
        self._execute(
            self.service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self.spreadsheet_id,
                range=self.range,
                valueInputOption="RAW",
                insertDataOption="INSERT_ROWS",
                body={"values": [entry.to_row()]},
            ),
            "appending workout",
        )

    def recent(self, limit: int) -> list[WorkoutEntry]:
        if limit <= 0:
            return []
        return self._read_all_entries()[-limit:]

    def search_by_date(self, date: str) -> list[WorkoutEntry]:
        return [entry for entry in self._read_all_entries() if entry.date == date]

    def remove_by_date_index(self, date: str, index: int) -> None:
        matches = self.search_by_date(date)
        if not 0 <= index < len(matches):
            raise InvalidRemoveIndexError(index, len(matches))

        row_index = matches[index].row_index
        log.debug("Deleting row %d of sheet %s", row_index, self.sheet_id)
        body = {
            "requests": [
                {
                    "deleteDimension": {
                        "range": {
                            "sheetId": self.sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_index,
                            "endIndex": row_index + 1,
                        }
                    }
                }
            ]
        }
        self._execute(
            self.service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id, body=body
            ),
            "removing workout",
        )

    def last_training_day(self) -> tuple[str, str]:
        entries = self._read_all_entries()
        if not entries:
            return "", ""
        last = entries[-1]
        return last.day, last.date

    def _read_all_entries(self) -> list[WorkoutEntry]:
        """Read every entry, tagged with its position in the raw range.

        Blank and header rows are dropped but still count towards the
        positions of the rows after them.
        """
        response = self._execute(
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=self.range),
            "reading workouts",
        )
        entries = []
        for row_index, row in enumerate(response.get("values", [])):
            entry = WorkoutEntry.from_row(row, row_index=row_index)
            if not entry.date or entry.date.lower() == HEADER_CELL:
                continue
            entries.append(entry)
        return entries
