"""Shared test fixtures for the trip planner."""

import os
import sys
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE so boto3 never reaches for real credentials in tests
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def filled_wizard():
    """A wizard on the guest step with Paris, 1-10 May 2024 and no guests."""
    from planner.services.wizard import WizardStateMachine

    wizard = WizardStateMachine()
    wizard.set_destination("Paris")
    wizard.select_day(date(2024, 5, 1))
    wizard.select_day(date(2024, 5, 10))
    wizard.advance()
    return wizard


@pytest.fixture
def mock_trip_service():
    from planner.models.trip import TripCreated

    service = MagicMock()
    service.create = AsyncMock(return_value=TripCreated(trip_id="trip-42"))
    return service


@pytest.fixture
def mock_storage():
    storage = MagicMock()
    storage.save = AsyncMock(return_value=None)
    storage.get = AsyncMock(return_value=None)
    storage.remove = AsyncMock(return_value=None)
    return storage
