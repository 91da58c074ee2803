import discord
from discord.ext import commands

from kairos.bot.utils import i18n


class Cog(commands.Cog):
    @property
    def description(self):
        """Applies locale when getting"""
        if self.__cog_description__:
            return _(self.__cog_description__)

        return self.__cog_description__

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        i18n.current_locale.set(i18n.interaction_locale(interaction))
        return True
