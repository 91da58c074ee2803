import asyncio
import logging

from kairos.bot.core import Kairos
from kairos.logs import make_logger


def setup_logger():
    return make_logger(
        "discord",
        "discord/discord.log",
        level=logging.INFO,
        file_level=logging.INFO,
        backup_count=1,
    )


async def close_bot(app):
    await app["bot"].close()


async def init_bot(app):
    logger = setup_logger()
    app["bot"] = bot = Kairos(app=app, logger=logger)
    app["bot_task"] = asyncio.get_event_loop().create_task(bot.start())
    app.on_cleanup.append(close_bot)
