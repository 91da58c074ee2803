"""Tests for the bot's application command error handling."""

from unittest.mock import AsyncMock, Mock, patch

import discord
import pytest
from discord import app_commands

from kairos.bot.core import BabelTranslator, Kairos
from kairos.config.settings import BotConfig


@pytest.fixture
def kairos(mock_db):
    bot = Kairos(app={"config": {"bot": BotConfig()}, "db": mock_db}, logger=Mock())
    bot.inform = AsyncMock()
    return bot


def test_description_is_localized(kairos):
    assert kairos.description == BotConfig.description


def test_tree_error_handler_is_installed(kairos):
    assert kairos.tree.on_error == kairos.on_app_command_error


@pytest.mark.asyncio
async def test_unexpected_error_is_reported(kairos, make_interaction):
    interaction = make_interaction("create")
    interaction.command.qualified_name = "reminder create"
    error = app_commands.CommandInvokeError(interaction.command, RuntimeError("boom"))

    with patch("kairos.bot.core.bot.sentry_sdk") as sentry_sdk:
        await kairos.on_app_command_error(interaction, error)

    sentry_sdk.capture_exception.assert_called_once()
    assert isinstance(sentry_sdk.capture_exception.call_args.args[0], RuntimeError)
    kairos.logger.warning.assert_called()
    kairos.inform.assert_awaited_once_with(
        interaction, "Something went wrong while running this command."
    )


@pytest.mark.asyncio
async def test_check_failure_is_explained(kairos, make_interaction):
    interaction = make_interaction("dump")

    with patch("kairos.bot.core.bot.sentry_sdk") as sentry_sdk:
        await kairos.on_app_command_error(interaction, app_commands.CheckFailure())

    sentry_sdk.capture_exception.assert_not_called()
    kairos.inform.assert_awaited_once_with(
        interaction, "You cannot use this command here."
    )


@pytest.mark.asyncio
async def test_inform_after_deferral_uses_followup(mock_db, make_interaction):
    bot = Kairos(app={"config": {"bot": BotConfig()}, "db": mock_db}, logger=Mock())
    interaction = make_interaction()

    await bot.inform(interaction, "hello")

    interaction.followup.send.assert_awaited_once_with("hello", ephemeral=True)


@pytest.mark.asyncio
async def test_inform_before_deferral_uses_response(mock_db, make_interaction):
    bot = Kairos(app={"config": {"bot": BotConfig()}, "db": mock_db}, logger=Mock())
    interaction = make_interaction()
    interaction.response.is_done.return_value = False

    await bot.inform(interaction, "hello")

    interaction.response.send_message.assert_awaited_once_with("hello", ephemeral=True)


@pytest.mark.asyncio
async def test_translator_skips_names():
    translator = BabelTranslator()
    context = Mock(location=app_commands.TranslationContextLocation.command_name)

    result = await translator.translate(
        app_commands.locale_str("create"), discord.Locale.croatian, context
    )

    assert result is None


@pytest.mark.asyncio
async def test_translator_without_catalog():
    translator = BabelTranslator()
    context = Mock(location=app_commands.TranslationContextLocation.command_description)

    result = await translator.translate(
        app_commands.locale_str("Create a reminder"),
        discord.Locale.american_english,
        context,
    )

    assert result is None
