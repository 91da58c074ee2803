import asyncio

from motor import motor_asyncio as motorio

from kairos.db.logging import setup_logger
from kairos.db.reminders import ensure_indexes


async def close_mongo(app):
    app["db"].client.close()


async def init_db(app):
    setup_logger()
    app["db"] = db = motorio.AsyncIOMotorClient(
        app["config"]["mongo"].url,
        appname="kairos",
        tz_aware=True,
        io_loop=asyncio.get_event_loop(),
    )[app["config"]["mongo"].database]
    await ensure_indexes(db)
    app["logger"].info("Mongo connected.")
    app.on_cleanup.append(close_mongo)
