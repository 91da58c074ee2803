from typing import List, Sequence

import discord
from babel.dates import format_datetime, get_timezone
from discord import ui

from kairos.config.settings import ReminderConfig
from kairos.db.models import Reminder
from kairos.db.reminders import delete_reminders
from . import i18n
from .misc import chunks

OPTIONS_PER_SELECT = 25
SELECTS_PER_VIEW = 5
MAX_REMINDERS = OPTIONS_PER_SELECT * SELECTS_PER_VIEW


def _shorten(text: str, width: int = 100) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


class RemindersSelect(ui.Select):
    def __init__(self, reminders: Sequence[Reminder], offset: int):
        options = [
            discord.SelectOption(
                label=_shorten(f"{index}. {reminder.description}"),
                value=str(reminder.id),
                description=_shorten(
                    format_datetime(
                        reminder.timestamp,
                        format="medium",
                        tzinfo=get_timezone(ReminderConfig.timezone),
                        locale=i18n.current_locale.get(),
                    )
                ),
            )
            for index, reminder in enumerate(reminders, start=offset)
        ]
        super().__init__(
            placeholder=_("Reminders {0}-{1}").format(
                offset, offset + len(options) - 1
            ),
            min_values=1,
            max_values=len(options),
            options=options,
        )

    async def callback(self, interaction: discord.Interaction):
        await self.view.delete(interaction, [int(value) for value in self.values])


class RemindersView(ui.View):
    """Select menus for picking reminders to delete.

    Only the owner of the listed reminders may use it.
    """

    def __init__(self, reminders: Sequence[Reminder], *, timeout: float = 180.0):
        super().__init__(timeout=timeout)
        self.user_id = reminders[0].user_id if reminders else None
        for offset, page in zip(
            range(0, MAX_REMINDERS, OPTIONS_PER_SELECT),
            chunks(reminders[:MAX_REMINDERS], OPTIONS_PER_SELECT),
        ):
            self.add_item(RemindersSelect(page, offset))

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        i18n.current_locale.set(i18n.interaction_locale(interaction))
        if interaction.user.id != self.user_id:
            await interaction.response.send_message(
                _("These are not your reminders."), ephemeral=True
            )
            return False
        return True

    async def delete(self, interaction: discord.Interaction, ids: List[int]):
        deleted = await delete_reminders(interaction.client.db, interaction.user.id, ids)
        if deleted is None:
            content = _("An error occurred while deleting the reminders.")
        else:
            content = _("Deleted reminders: {0}").format(deleted)
        self.stop()
        await interaction.response.edit_message(content=content, view=None)


def get_reminders_components(reminders: Sequence[Reminder]) -> RemindersView:
    return RemindersView(reminders)
