import asyncio
import logging

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from kairos.bot import init_bot
from kairos.config import init_config
from kairos.db import init_db
from kairos.logs import make_logger
from kairos.views import init_views

try:
    import uvloop
except ImportError:
    uvloop = None  # Windows


def setup_logger():
    return make_logger("aiohttp.access", "app/app.log")


async def init_sentry(app):
    sentry_config = app["config"]["sentry"]
    if not sentry_config.dsn:
        app["logger"].info("Sentry DSN not set, error reporting disabled")
        return

    sentry_sdk.init(
        sentry_config.dsn,
        traces_sample_rate=sentry_config.traces_sample_rate,
        integrations=[
            AioHttpIntegration(),
            LoggingIntegration(
                level=logging.INFO,  # Capture info and above as breadcrumbs
                event_level=logging.ERROR,  # Send errors as events
            ),
        ],
    )
    app["logger"].info("Sentry initialized")


def make_app(debug: bool = False) -> web.Application:
    logger = setup_logger()
    app = web.Application()
    app["logger"] = logger
    app["debug"] = debug
    logger.info("Append modules")
    app.on_startup.append(init_config)
    app.on_startup.append(init_sentry)
    app.on_startup.append(init_db)
    app.on_startup.append(init_bot)
    app.on_startup.append(init_views)
    return app


def create_app(debug: bool = False, host: str = "localhost", port: int = 5000):
    if uvloop is not None:
        asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
    app = make_app(debug)
    app["logger"].info("Run server")
    web.run_app(app, host=host, port=port)
