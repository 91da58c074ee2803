"""Pytest configuration and fixtures."""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import discord
import pytest
import pytz

from kairos.db.models import Reminder


@pytest.fixture
def mock_db():
    """A motor database stand-in exposing a ``reminders`` collection."""
    db = Mock()
    db.reminders = Mock()
    return db


@pytest.fixture
def mock_bot(mock_db):
    """Create a mock Kairos bot."""
    bot = Mock()
    bot.db = mock_db
    bot.logger = Mock()
    return bot


@pytest.fixture
def make_interaction():
    """Build mock slash command interactions."""

    def factory(subcommand="create", user_id=42, channel_type=discord.ChannelType.text, **options):
        interaction = Mock()
        interaction.id = 1234
        interaction.command = Mock()
        interaction.command.name = subcommand
        interaction.namespace = SimpleNamespace(**options)
        interaction.user.id = user_id
        interaction.locale = discord.Locale.american_english
        interaction.channel_id = 555
        interaction.channel = (
            Mock(type=channel_type) if channel_type is not None else None
        )
        interaction.response.defer = AsyncMock()
        interaction.response.send_message = AsyncMock()
        interaction.response.edit_message = AsyncMock()
        interaction.response.is_done = Mock(return_value=True)
        interaction.edit_original_response = AsyncMock()
        interaction.followup.send = AsyncMock()
        return interaction

    return factory


@pytest.fixture
def reminders():
    """Three reminders of user 42, one of them created in private messages."""
    return [
        Reminder(
            id=1,
            description="Submit the homework",
            timestamp=datetime(2030, 1, 5, 9, 0, tzinfo=pytz.utc),
            user_id=42,
            channel_id=555,
        ),
        Reminder(
            id=2,
            description="Call @everyone",
            timestamp=datetime(2030, 1, 6, 12, 30, tzinfo=pytz.utc),
            user_id=42,
            private_message=True,
        ),
        Reminder(
            id=3,
            description="Exam registration",
            timestamp=datetime(2030, 2, 1, 7, 0, tzinfo=pytz.utc),
            user_id=42,
            channel_id=777,
        ),
    ]
