import json
from io import BytesIO
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

import discord
from discord import app_commands
from discord.utils import format_dt
from pydantic import ValidationError

from kairos.bot import core, Kairos
from kairos.bot.utils.components import MAX_REMINDERS, get_reminders_components
from kairos.bot.utils.converters import parse_date
from kairos.bot.utils.messages import safe_reply
from kairos.db.models import Reminder as ReminderModel
from kairos.db.reminders import (
    create_reminder,
    get_reminders,
    get_reminders_by_user_id,
)

_T = app_commands.locale_str

Handler = Callable[[discord.Interaction], Awaitable[None]]


def is_private(channel: Optional[discord.abc.Messageable]) -> bool:
    return channel is None or getattr(channel, "type", None) in (
        discord.ChannelType.private,
        discord.ChannelType.group,
    )


def format_reminder(index: int, reminder: ReminderModel) -> str:
    line = f"{index}. {format_dt(reminder.timestamp, 'F')} - {reminder.description}"
    if reminder.channel_id is not None:
        line += f" [<#{reminder.channel_id}>]"
    return line


def dump_reminders(reminders: Sequence[ReminderModel]) -> str:
    return json.dumps(
        [reminder.model_dump(mode="json") for reminder in reminders],
        indent=2,
        ensure_ascii=False,
    )


class Reminder(
    core.Cog,
    description=(
        "Create reminders from a description and a date or time written in "
        "natural language, list them and delete them."
    ),
):
    reminder = app_commands.Group(name="reminder", description=_T("Reminder"))

    def __init__(self, kairos: Kairos):
        self.kairos = kairos
        self.handlers: Dict[str, Handler] = {
            "create": self.handle_create,
            "delete": self.handle_delete,
            "dump": self.handle_dump,
            "list": self.handle_list,
        }

    async def execute(self, interaction: discord.Interaction):
        """Run the handler of the invoked subcommand. Unknown names are ignored."""
        subcommand = interaction.command.name if interaction.command else None
        handler = self.handlers.get(subcommand)
        if handler is None:
            return

        await interaction.response.defer(thinking=True)
        await handler(interaction)

    async def fetch_user_reminders(
        self, interaction: discord.Interaction
    ) -> Optional[List[ReminderModel]]:
        """Load the caller's reminders, answering the interaction if there are none."""
        reminders = await get_reminders_by_user_id(self.kairos.db, interaction.user.id)
        if reminders is None:
            await interaction.edit_original_response(
                content=_("An error occurred while loading the reminders.")
            )
            return None

        if not reminders:
            await interaction.edit_original_response(
                content=_("You have no reminders.")
            )
            return None

        return reminders

    # Handlers

    async def handle_create(self, interaction: discord.Interaction):
        description = interaction.namespace.description
        when = interaction.namespace.when

        date = parse_date(when)
        if date is None:
            await interaction.edit_original_response(
                content=_("Invalid date and/or time.")
            )
            return

        private_message = is_private(interaction.channel)
        try:
            reminder = ReminderModel(
                id=interaction.id,
                channel_id=None if private_message else interaction.channel_id,
                description=description,
                private_message=private_message,
                timestamp=date,
                user_id=interaction.user.id,
            )
        except ValidationError as e:
            self.kairos.logger.info(f"Rejected reminder {interaction.id}: {e}")
            reminder = None
        else:
            reminder = await create_reminder(self.kairos.db, reminder)

        if reminder is None:
            await interaction.edit_original_response(
                content=_("An error occurred while creating the reminder.")
            )
            return

        await interaction.edit_original_response(
            content=_("Reminder created for {date}: {description}").format(
                date=format_dt(date, "F"), description=reminder.description
            ),
            allowed_mentions=discord.AllowedMentions.none(),
        )

    async def handle_list(self, interaction: discord.Interaction):
        reminders = await self.fetch_user_reminders(interaction)
        if reminders is None:
            return

        content = "\n".join(
            format_reminder(index, reminder) for index, reminder in enumerate(reminders)
        )
        await safe_reply(interaction, content, mention_users=False)

    async def handle_delete(self, interaction: discord.Interaction):
        reminders = await self.fetch_user_reminders(interaction)
        if reminders is None:
            return

        content = _("Choose the reminders you want to delete.")
        if len(reminders) > MAX_REMINDERS:
            content += "\n" + _(
                "Only the first {0} reminders are shown. "
                "Delete some of them to see the rest."
            ).format(MAX_REMINDERS)
        await interaction.edit_original_response(
            content=content, view=get_reminders_components(reminders)
        )

    async def handle_dump(self, interaction: discord.Interaction):
        reminders = await get_reminders(self.kairos.db)
        if reminders is None:
            await interaction.edit_original_response(
                content=_("An error occurred while loading the reminders.")
            )
            return

        attachment = discord.File(
            BytesIO(dump_reminders(reminders).encode("utf-8")),
            filename="reminders.json",
        )
        await interaction.edit_original_response(attachments=[attachment])

    # Commands

    @reminder.command(name="create", description=_T("Create a reminder"))
    @app_commands.describe(
        description=_T("Description"), when=_T("Date and/or time")
    )
    async def reminder_create(
        self, interaction: discord.Interaction, description: str, when: str
    ):
        await self.execute(interaction)

    @reminder.command(name="list", description=_T("List your reminders"))
    async def reminder_list(self, interaction: discord.Interaction):
        await self.execute(interaction)

    @reminder.command(name="delete", description=_T("Delete your reminders"))
    async def reminder_delete(self, interaction: discord.Interaction):
        await self.execute(interaction)

    @reminder.command(name="dump", description=_T("Export all reminders as JSON"))
    async def reminder_dump(self, interaction: discord.Interaction):
        await self.execute(interaction)
