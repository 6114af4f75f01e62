"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from cali_log.models.entry import WorkoutEntry
from cali_log.storage.local import LocalFileStorage

TODAY = date(2026, 1, 24)


class FakeRequest:
    """Stand-in for a googleapiclient HttpRequest."""

    def __init__(self, action, error=None):
        self._action = action
        self._error = error

    def execute(self):
        if self._error is not None:
            raise self._error
        return self._action()


class FakeSheetsService:
    """In-memory stand-in for the Sheets v4 resource returned by ``build()``.

    ``rows`` is the raw content of the tab's A:G range. Every request made
    is recorded in ``calls`` as (method, kwargs).
    """

    def __init__(self, rows=None, sheets=None):
        self.rows = [list(row) for row in rows or []]
        self.sheets = sheets if sheets is not None else [
            {"properties": {"title": "Other", "sheetId": 7}},
            {"properties": {"title": "Log", "sheetId": 42}},
        ]
        self.calls = []
        self.fail_with = None

    def _request(self, action):
        return FakeRequest(action, self.fail_with)

    # spreadsheets()
    def spreadsheets(self):
        return self

    def values(self):
        return self

    def get(self, **kwargs):
        # spreadsheets().get and spreadsheets().values().get share this name
        if "range" in kwargs:
            self.calls.append(("values.get", kwargs))
            return self._request(lambda: {"range": kwargs["range"], "values": [list(r) for r in self.rows]})
        self.calls.append(("get", kwargs))
        return self._request(lambda: {"sheets": self.sheets})

    def append(self, **kwargs):
        self.calls.append(("values.append", kwargs))

        def action():
            self.rows.extend(list(row) for row in kwargs["body"]["values"])
            return {"updates": {"updatedRows": len(kwargs["body"]["values"])}}

        return self._request(action)

    def batchUpdate(self, **kwargs):
        self.calls.append(("batchUpdate", kwargs))

        def action():
            for request in kwargs["body"]["requests"]:
                span = request["deleteDimension"]["range"]
                del self.rows[span["startIndex"]:span["endIndex"]]
            return {"replies": [{}]}

        return self._request(action)


@pytest.fixture
def log_dir(tmp_path):
    """Directory for local workout logs."""
    return tmp_path / "workout"


@pytest.fixture
def local_storage(log_dir):
    """Local storage whose current year is 2026."""
    return LocalFileStorage(log_dir, today=lambda: TODAY)


@pytest.fixture
def sheets_service_factory():
    """Factory for fake Sheets services holding the given rows."""
    return FakeSheetsService


@pytest.fixture
def fake_service():
    """Empty fake Sheets service with a "Log" tab."""
    return FakeSheetsService()


@pytest.fixture
def sample_entry():
    """A Pushups entry with its goal resolved."""
    return WorkoutEntry.create(
        date="2026-01-24",
        day="A",
        exercise="Pushups",
        level="Half",
        reps_sets="20x2",
        comment="felt good",
    )


@pytest.fixture
def make_entry():
    """Factory for entries with defaults for the fields a test does not vary."""

    def factory(date="2026-01-24", day="A", exercise="Pushups", level="Half", reps_sets="20x2", comment=""):
        return WorkoutEntry.create(
            date=date,
            day=day,
            exercise=exercise,
            level=level,
            reps_sets=reps_sets,
            comment=comment,
        )

    return factory
