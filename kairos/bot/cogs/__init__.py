from discord.ext import commands


async def load_extension(bot: commands.Bot, cog_name: str):
    await bot.load_extension(f"{__name__}.{cog_name}")
