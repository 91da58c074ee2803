from typing import Optional

import discord
from discord import app_commands

from kairos.bot.utils import i18n


class BabelTranslator(app_commands.Translator):
    """Localizes slash command names and descriptions from the gettext catalogs."""

    async def translate(
        self,
        string: app_commands.locale_str,
        locale: discord.Locale,
        context: app_commands.TranslationContext,
    ) -> Optional[str]:
        if context.location in (
            app_commands.TranslationContextLocation.command_name,
            app_commands.TranslationContextLocation.group_name,
            app_commands.TranslationContextLocation.parameter_name,
        ):
            # names are part of the command signature
            return None
        return i18n.translate(string.message, i18n.from_discord_locale(locale))
