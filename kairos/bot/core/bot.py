import inspect
import logging
import traceback
from contextlib import suppress
from typing import TYPE_CHECKING, Optional

import discord
import sentry_sdk
from discord import app_commands
from discord.ext import commands

from kairos.bot.cogs import load_extension
from .translator import BabelTranslator

if TYPE_CHECKING:
    from aiohttp.web_app import Application


class Kairos(commands.Bot):
    def __init__(
        self, app: "Application", logger: Optional[logging.Logger] = None, *args, **kwargs
    ):
        self.app = app
        self.config = config = app["config"]
        super().__init__(
            command_prefix=commands.when_mentioned,
            owner_id=config["bot"].owner_id,
            intents=discord.Intents.default(),
            status=discord.Status.idle,
            *args,
            **kwargs,
        )
        self.db = app["db"]
        self.logger = logger or logging.getLogger("discord")
        self.description = config["bot"].description
        self.tree.error(self.on_app_command_error)

    # Properties

    @property
    def description(self):
        """Applies locale when getting"""
        return inspect.cleandoc(_(self._description)) if self._description else ""

    @description.setter
    def description(self, value):
        self._description = value

    # Events

    async def setup_hook(self):
        await self.tree.set_translator(BabelTranslator())
        for cog in self.config["bot"].cogs:
            await load_extension(self, cog.lower())
        if self.config["bot"].sync_commands:
            synced = await self.tree.sync()
            self.logger.info(f"Synced {len(synced)} application command(s)")

    async def on_ready(self):
        await self.change_presence(
            status=discord.Status.online,
            activity=discord.Activity(
                type=discord.ActivityType.listening, name="/reminder"
            ),
        )
        self.logger.info("Kairos is ready")

    async def on_app_command_error(
        self, interaction: discord.Interaction, exc: app_commands.AppCommandError
    ):
        if isinstance(exc, app_commands.CommandInvokeError):
            exc = exc.original
        if isinstance(exc, app_commands.CommandNotFound):
            return
        elif isinstance(exc, app_commands.CheckFailure):
            response = _("You cannot use this command here.")
        elif isinstance(exc, discord.Forbidden):
            response = _("I am missing permissions.")
        elif isinstance(exc, discord.HTTPException):
            response = _("An error occurred while making an HTTP request.")
        else:
            response = None

        if not response:
            command = interaction.command.qualified_name if interaction.command else None
            self.logger.warning(f"Ignoring exception in command {command}: {exc}")
            self.logger.warning(
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            )
            with sentry_sdk.new_scope() as scope:
                scope.set_context(
                    "interaction",
                    {
                        "command": command,
                        "guild": repr(interaction.guild),
                        "channel": repr(interaction.channel),
                        "user": repr(interaction.user),
                    },
                )
                sentry_sdk.capture_exception(exc)
            response = _("Something went wrong while running this command.")

        await self.inform(interaction, response)

    # Methods

    async def inform(self, interaction: discord.Interaction, content: str):
        """Tell the user something, whether or not the interaction was answered."""
        with suppress(discord.HTTPException):
            if interaction.response.is_done():
                await interaction.followup.send(content, ephemeral=True)
            else:
                await interaction.response.send_message(content, ephemeral=True)

    async def start(self, *args, **kwargs):
        await super().start(self.config["bot"].discord_token, *args, **kwargs)
