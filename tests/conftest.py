"""Shared pytest fixtures for givingcircle tests."""

import tempfile
import os
import pytest

from givingcircle.database.factories import create_memory_database, create_sqlite_database
from givingcircle.domain.donation import DonationStore
from givingcircle.domain.notifications import NotificationSink
from givingcircle.domain.session import DonationSession


class RecordingNotificationSink(NotificationSink):
    """Notification sink that keeps every notice for assertions."""

    def __init__(self):
        self.successes = []
        self.failures = []

    def notify_success(self, message: str) -> None:
        self.successes.append(message)

    def notify_failure(self, message: str) -> None:
        self.failures.append(message)


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an empty in-memory database."""
    return create_memory_database()


@pytest.fixture(params=["sqlite", "memory"])
def db(request):
    """Run a test once against each database backend."""
    if request.param == "sqlite":
        return request.getfixturevalue("temp_db")
    return request.getfixturevalue("memory_db")


@pytest.fixture
def notifier():
    """Create a recording notification sink."""
    return RecordingNotificationSink()


@pytest.fixture
def store(db, notifier):
    """Create a DonationStore over the parametrized database."""
    return DonationStore(db, notifier=notifier)


@pytest.fixture
def session(store):
    """Create an unbound DonationSession over the store."""
    return DonationSession(store)


@pytest.fixture
def red_cross():
    """Input fields for a one-time donation, keyed the way other clients send them."""
    return {
        "amount": 100,
        "organizationName": "Red Cross",
        "date": "2023-12-15",
        "frequency": "one-time",
        "category": "Disaster Relief",
        "notes": "Annual holiday donation",
    }


@pytest.fixture
def seeded_store(store):
    """Store holding the three u1 donations and one u2 donation."""
    store.create(
        "u1",
        {
            "amount": 100,
            "organizationName": "Red Cross",
            "date": "2023-12-15",
            "frequency": "one-time",
            "category": "Disaster Relief",
        },
    )
    store.create(
        "u1",
        {
            "amount": 25,
            "organizationName": "World Wildlife Fund",
            "date": "2023-11-20",
            "frequency": "monthly",
            "category": "Environment",
        },
    )
    store.create(
        "u1",
        {
            "amount": 500,
            "organizationName": "Local Food Bank",
            "date": "2023-10-05",
            "frequency": "annual",
            "category": "Hunger",
        },
    )
    store.create(
        "u2",
        {
            "amount": 200,
            "organizationName": "Doctors Without Borders",
            "date": "2023-09-10",
            "frequency": "one-time",
            "category": "Healthcare",
        },
    )
    return store


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
