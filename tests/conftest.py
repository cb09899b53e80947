"""Shared pytest fixtures for profitshare tests."""

import tempfile
import os
import pytest

from profitshare.database.factories import create_sqlite_database
from profitshare.domain.payment import PaymentService
from profitshare.domain.stakeholder import StakeholderService
from profitshare.domain.summary import SummaryService
from profitshare.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path, retry_delay=0)
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
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def stakeholder_service(temp_db):
    """Create a StakeholderService with a temporary database."""
    return StakeholderService(temp_db)


@pytest.fixture
def payment_service(temp_db):
    """Create a PaymentService with a temporary database."""
    return PaymentService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def sample_stakeholders(stakeholder_service):
    """Create two active stakeholders, Alice and Bob."""
    alice_id = stakeholder_service.create_stakeholder("Alice")
    bob_id = stakeholder_service.create_stakeholder("Bob")
    return stakeholder_service.get_stakeholder(alice_id), stakeholder_service.get_stakeholder(bob_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
